from __future__ import annotations

from typing import List, Set

from secret_santa.logging import get_logger
from secret_santa.models import FamilyNotFound
from secret_santa.rules.base import ExclusionRule

log = get_logger(__name__)


class SameFamilyExclusion(ExclusionRule):
    """Nobody gives to a member of their own family (themselves included).

    Commutes with every other rule: it only ever removes names.
    """

    name = "same-family"
    description = "Do not give to your own family"

    def excluded_names(self, giver: str) -> List[str]:
        family = self.dataset.lookup_family(giver)
        if isinstance(family, FamilyNotFound):
            log.debug("No family found for %s; nothing excluded", giver)
            return []
        return sorted(family.members)


class ReciprocalFamilyExclusion(ExclusionRule):
    """Nobody gives to someone their family gave to in the latest year.

    Commutes with every other rule: it only ever removes names.
    """

    name = "family-recipients"
    description = "Do not give to someone your family gave to last time"

    def excluded_names(self, giver: str) -> List[str]:
        family = self.dataset.lookup_family(giver)
        if isinstance(family, FamilyNotFound):
            log.debug("No family found for %s; nothing excluded", giver)
            return []

        latest = self.dataset.recent_history(1)
        if not latest:
            return []

        seen: Set[str] = set()
        recipients: List[str] = []
        for assignment in latest[0].assignments:
            if assignment.giver in family and assignment.recipient not in seen:
                seen.add(assignment.recipient)
                recipients.append(assignment.recipient)
        return recipients
