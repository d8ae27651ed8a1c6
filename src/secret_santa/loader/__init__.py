# src/secret_santa/loader/__init__.py

"""
Public interface for reading datasets.

    from secret_santa.loader import load_dataset, parse_dataset, resolve_input_path
"""

from __future__ import annotations

from .file_locator import resolve_input_path
from .json_loader import load_dataset, parse_dataset

__all__ = [
    "load_dataset",
    "parse_dataset",
    "resolve_input_path",
]
