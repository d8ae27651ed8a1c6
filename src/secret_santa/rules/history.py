from __future__ import annotations

from typing import List

from secret_santa.config import DEFAULT_RECENT_YEARS
from secret_santa.models import Dataset
from secret_santa.rules.base import ExclusionRule


class RecentRecipientExclusion(ExclusionRule):
    """A giver gets someone new compared to each of their last ``years`` draws.

    Commutes with every other rule: it only ever removes names.
    """

    name = "new-recipient"
    description = "Give to someone new every year"

    def __init__(self, dataset: Dataset, years: int = DEFAULT_RECENT_YEARS):
        super().__init__(dataset)
        if years < 0:
            raise ValueError(f"years must be >= 0, got {years}")
        self.years = years

    def excluded_names(self, giver: str) -> List[str]:
        recipients: List[str] = []
        for entry in self.dataset.recent_history(self.years):
            for name in entry.recipients_of(giver):
                if name not in recipients:
                    recipients.append(name)
        return recipients

    def __repr__(self) -> str:
        return f"RecentRecipientExclusion(years={self.years})"
