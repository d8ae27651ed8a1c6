"""
Assignment solver.

Randomized greedy matching with whole-attempt retry:

* walk the givers in population order
* draw a random candidate for the current giver
* keep it only if taking it away from everybody else leaves each of them with
  at least one candidate; otherwise drop it from this giver and draw again
* when a giver runs out of candidates the attempt is abandoned and the next
  one starts from a fresh copy of the possibilities

Nothing is carried over between attempts.
"""

from __future__ import annotations

import random
from typing import Dict, List, Mapping, Optional, Sequence

from secret_santa.core.exceptions import SolverStuckError
from secret_santa.logging import get_logger
from secret_santa.models import GiftAssignment

log = get_logger(__name__)


class AssignmentSolver:
    """
    Turns per-giver possibility lists into one recipient per giver.

    Parameters
    ----------
    rng:
        Random source for candidate draws. Pass ``random.Random(seed)`` for
        reproducible results; defaults to a fresh unseeded generator.
    max_attempts:
        Give up with :class:`SolverStuckError` after this many failed attempts.
        ``None`` retries until an attempt succeeds.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1 or None, got {max_attempts}")
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.last_attempts = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def solve(
        self,
        names: Sequence[str],
        possibilities: Mapping[str, Sequence[str]],
    ) -> List[GiftAssignment]:
        """Return one :class:`GiftAssignment` per giver, in ``names`` order."""
        missing = [name for name in names if name not in possibilities]
        if missing:
            raise KeyError(f"No possibilities given for: {', '.join(missing)}")

        attempts = 0
        while True:
            attempts += 1
            try:
                chosen = self._attempt(names, possibilities)
            except SolverStuckError as exc:
                log.debug("Attempt %d failed: %s", attempts, exc)
                if self.max_attempts is not None and attempts >= self.max_attempts:
                    self.last_attempts = attempts
                    log.error("Giving up after %d attempts", attempts)
                    raise SolverStuckError(
                        f"No valid assignment found after {attempts} attempts",
                        attempts=attempts,
                    ) from exc
                continue

            self.last_attempts = attempts
            log.info("Assigned %d givers in %d attempt(s)", len(names), attempts)
            return [GiftAssignment(giver, chosen[giver]) for giver in names]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _attempt(
        self,
        names: Sequence[str],
        possibilities: Mapping[str, Sequence[str]],
    ) -> Dict[str, str]:
        working: Dict[str, List[str]] = {
            name: list(possibilities[name]) for name in names
        }

        for giver in names:
            candidates = working[giver]
            while True:
                if not candidates:
                    raise SolverStuckError(f"No more choices for {giver}")

                choice = candidates[self.rng.randrange(len(candidates))]

                if self._can_commit(working, giver, choice):
                    for other in names:
                        if other != giver and choice in working[other]:
                            working[other].remove(choice)
                    candidates = working[giver] = [choice]
                    break

                candidates.remove(choice)

        return {giver: working[giver][0] for giver in names}

    @staticmethod
    def _can_commit(working: Mapping[str, List[str]], giver: str, choice: str) -> bool:
        if choice == giver:
            return False
        return all(
            other == giver or len(remaining) > 1 or choice not in remaining
            for other, remaining in working.items()
        )
