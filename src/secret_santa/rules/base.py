"""
Exclusion rule contract.

A rule narrows one giver's pool of candidate recipients. Rules keep a read-only
reference to the Dataset they were built from and no other state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Set

from secret_santa.models import Dataset


def discard_names(pool: List[str], names: Iterable[str]) -> Set[str]:
    """Remove ``names`` from ``pool`` in place; return those actually present."""
    removed: Set[str] = set()
    for name in names:
        if name in pool:
            pool.remove(name)
            removed.add(name)
    return removed


class ExclusionRule(ABC):
    """
    Base class for every rule used by the possibility calculator.

    Subclasses set ``name``/``description`` and implement
    :meth:`excluded_names`. Rules must be set-subtractive so that the order
    they run in does not change the final pool.
    """

    name: str = ""
    description: str = ""

    def __init__(self, dataset: Dataset):
        self._dataset = dataset

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @abstractmethod
    def excluded_names(self, giver: str) -> Iterable[str]:
        """Every name ``giver`` must not be assigned to under this rule."""

    def remove_excluded(self, pool: List[str], giver: str) -> Set[str]:
        """Drop this rule's exclusions from ``pool``; return what was removed.

        Removing a name that is already gone is a no-op, so reapplying a rule
        to a reduced pool is safe.
        """
        return discard_names(pool, self.excluded_names(giver))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
