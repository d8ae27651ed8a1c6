from __future__ import annotations

from typing import List

from secret_santa.config import DEFAULT_RECENT_YEARS
from secret_santa.models import Dataset

from .base import ExclusionRule, discard_names
from .family import ReciprocalFamilyExclusion, SameFamilyExclusion
from .history import RecentRecipientExclusion


def default_rules(dataset: Dataset, recent_years: int = DEFAULT_RECENT_YEARS) -> List[ExclusionRule]:
    """The rule set every draw runs, in application order."""
    return [
        SameFamilyExclusion(dataset),
        RecentRecipientExclusion(dataset, years=recent_years),
        ReciprocalFamilyExclusion(dataset),
    ]


__all__ = [
    "ExclusionRule",
    "RecentRecipientExclusion",
    "ReciprocalFamilyExclusion",
    "SameFamilyExclusion",
    "default_rules",
    "discard_names",
]
