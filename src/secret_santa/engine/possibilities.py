"""
Possibility calculator.

For each giver, start from the whole population and let every rule strike
names out. The giver's own name is always struck at the end, whether or not a
rule already removed it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set

from secret_santa.logging import get_logger
from secret_santa.rules import ExclusionRule

log = get_logger(__name__)

SELF_EXCLUSION = "self"


@dataclass(slots=True)
class GiverPossibilities:
    """Allowed recipients for one giver plus what each rule removed."""
    giver: str
    allowed: List[str] = field(default_factory=list)
    removed_by: Dict[str, Set[str]] = field(default_factory=dict)


def explain_possibilities(
    names: Sequence[str],
    rules: Sequence[ExclusionRule],
) -> List[GiverPossibilities]:
    results: List[GiverPossibilities] = []

    for giver in names:
        pool = list(names)
        report = GiverPossibilities(giver=giver)

        for rule in rules:
            removed = rule.remove_excluded(pool, giver)
            if removed:
                report.removed_by[rule.name or type(rule).__name__] = removed

        if giver in pool:
            pool.remove(giver)
            report.removed_by[SELF_EXCLUSION] = {giver}

        report.allowed = pool
        results.append(report)

        if not pool:
            log.warning("%s has no possible recipients", giver)
        else:
            log.debug("%s may give to %s", giver, ", ".join(pool))

    return results


def calculate_possibilities(
    names: Sequence[str],
    rules: Sequence[ExclusionRule],
) -> Dict[str, List[str]]:
    """Map each giver in ``names`` to its allowed recipients, in population order."""
    return {
        report.giver: report.allowed
        for report in explain_possibilities(names, rules)
    }
