"""
Assignment engine: possibility calculation, solving and the yearly draw.
"""

from __future__ import annotations

from .orchestrator import assign_population, draw_year
from .possibilities import GiverPossibilities, calculate_possibilities, explain_possibilities
from .solver import AssignmentSolver

__all__ = [
    "AssignmentSolver",
    "GiverPossibilities",
    "assign_population",
    "calculate_possibilities",
    "draw_year",
    "explain_possibilities",
]
