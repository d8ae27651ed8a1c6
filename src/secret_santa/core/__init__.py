from __future__ import annotations

from .exceptions import (
    DatasetNotFoundError,
    DatasetParseError,
    DatasetReadError,
    DatasetSaveError,
    DrawExecutionError,
    DuplicateYearError,
    SantaError,
    SolverStuckError,
)

__all__ = [
    "DatasetNotFoundError",
    "DatasetParseError",
    "DatasetReadError",
    "DatasetSaveError",
    "DrawExecutionError",
    "DuplicateYearError",
    "SantaError",
    "SolverStuckError",
]
