from __future__ import annotations

from typing import List, Optional, Sequence

from secret_santa.config import DEFAULT_RECENT_YEARS
from secret_santa.core.exceptions import DuplicateYearError
from secret_santa.engine.possibilities import calculate_possibilities
from secret_santa.engine.solver import AssignmentSolver
from secret_santa.logging import get_logger
from secret_santa.models import Dataset, GiftAssignment, HistoryEntry
from secret_santa.rules import ExclusionRule, default_rules

log = get_logger(__name__)


def assign_population(
    label: str,
    names: Sequence[str],
    rules: Sequence[ExclusionRule],
    solver: AssignmentSolver,
) -> List[GiftAssignment]:
    """Run the calculator and the solver for one population."""
    if not names:
        log.info("No %s to assign", label)
        return []

    log.info("Assigning %d %s", len(names), label)
    possibilities = calculate_possibilities(names, rules)
    return solver.solve(names, possibilities)


def draw_year(
    dataset: Dataset,
    year: int,
    *,
    solver: Optional[AssignmentSolver] = None,
    rules: Optional[Sequence[ExclusionRule]] = None,
    recent_years: int = DEFAULT_RECENT_YEARS,
) -> HistoryEntry:
    """
    Compute ``year``'s assignments and append them to ``dataset.history``.

    Adults and kids are matched independently. The dataset is only modified
    once both populations have been solved.

    Raises
    ------
    DuplicateYearError
        ``year`` already has an entry; nothing is computed.
    SolverStuckError
        The solver ran out of attempts for one of the populations.
    """
    if dataset.has_year(year):
        raise DuplicateYearError(year)

    solver = solver or AssignmentSolver()
    if rules is None:
        rules = default_rules(dataset, recent_years=recent_years)

    log.info("Drawing %d with rules: %s", year, ", ".join(r.name for r in rules))

    assignments = [
        *assign_population("adults", dataset.adults, rules, solver),
        *assign_population("kids", dataset.kids, rules, solver),
    ]

    entry = HistoryEntry(year=year, assignments=tuple(assignments))
    dataset.add_entry(entry)

    log.info("Recorded %d assignments for %d", len(assignments), year)
    return entry
