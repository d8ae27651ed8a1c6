from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple, Union

from secret_santa.core.exceptions import DuplicateYearError


# -----------------------------
# Assignments / history
# -----------------------------

@dataclass(frozen=True, slots=True)
class GiftAssignment:
    """
    One giver -> recipient pair.

    Serialized as ``{"From": giver, "To": recipient}``.
    """
    giver: str
    recipient: str

    def __post_init__(self) -> None:
        if self.giver == self.recipient:
            raise ValueError(f"{self.giver} cannot be assigned to themselves")


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """
    All assignments made for a single year. Immutable once created.
    """
    year: int
    assignments: Tuple[GiftAssignment, ...] = ()

    def recipients_of(self, giver: str) -> List[str]:
        return [a.recipient for a in self.assignments if a.giver == giver]

    def as_mapping(self) -> Dict[str, str]:
        return {a.giver: a.recipient for a in self.assignments}


# -----------------------------
# Family lookup result
# -----------------------------

@dataclass(frozen=True, slots=True)
class FamilyFound:
    members: FrozenSet[str]

    def __contains__(self, name: object) -> bool:
        return name in self.members


@dataclass(frozen=True, slots=True)
class FamilyNotFound:
    name: str


FamilyLookup = Union[FamilyFound, FamilyNotFound]


# -----------------------------
# Dataset (root aggregate)
# -----------------------------

@dataclass(slots=True)
class Dataset:
    """
    Everything the draw needs: both populations, the family groupings and
    every previous year's assignments.

    ``history`` is kept newest-first. Use :meth:`add_entry` to append, it keeps
    the ordering and the one-entry-per-year rule.
    """
    adults: List[str] = field(default_factory=list)
    kids: List[str] = field(default_factory=list)
    families: List[List[str]] = field(default_factory=list)
    history: List[HistoryEntry] = field(default_factory=list)

    @property
    def participants(self) -> List[str]:
        return [*self.adults, *self.kids]

    def lookup_family(self, name: str) -> FamilyLookup:
        """First family containing ``name``."""
        for family in self.families:
            if name in family:
                return FamilyFound(frozenset(family))
        return FamilyNotFound(name)

    def has_year(self, year: int) -> bool:
        return any(entry.year == year for entry in self.history)

    def entry_for(self, year: int) -> HistoryEntry | None:
        for entry in self.history:
            if entry.year == year:
                return entry
        return None

    def recent_history(self, count: int) -> List[HistoryEntry]:
        """The ``count`` newest entries (fewer if history is shorter)."""
        if count <= 0:
            return []
        return sorted(self.history, key=lambda e: e.year, reverse=True)[:count]

    def sort_history(self) -> None:
        self.history.sort(key=lambda e: e.year, reverse=True)

    def add_entry(self, entry: HistoryEntry) -> None:
        if self.has_year(entry.year):
            raise DuplicateYearError(entry.year)
        self.history.append(entry)
        self.sort_history()

    def iter_referenced_names(self) -> Iterator[str]:
        for family in self.families:
            yield from family
        for entry in self.history:
            for assignment in entry.assignments:
                yield assignment.giver
                yield assignment.recipient

    def find_unknown_names(self) -> List[str]:
        """Names used by families or history that are not participants."""
        known = set(self.participants)
        unknown: List[str] = []
        for name in self.iter_referenced_names():
            if name not in known and name not in unknown:
                unknown.append(name)
        return unknown


def make_entry(year: int, pairs: Iterable[Tuple[str, str]]) -> HistoryEntry:
    return HistoryEntry(
        year=year,
        assignments=tuple(GiftAssignment(giver, recipient) for giver, recipient in pairs),
    )
