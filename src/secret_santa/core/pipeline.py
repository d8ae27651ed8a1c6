from __future__ import annotations

import random
from typing import Callable, List, Optional

from secret_santa.core.context import DrawContext
from secret_santa.core.exceptions import DrawExecutionError, SantaError
from secret_santa.engine import AssignmentSolver, draw_year
from secret_santa.exporter import save_dataset
from secret_santa.loader import load_dataset
from secret_santa.models import Dataset, HistoryEntry
from secret_santa.rules import ExclusionRule, default_rules

Reporter = Callable[[HistoryEntry], None]


class Pipeline:
    """
    Load -> draw -> report -> save.
    No assignment logic lives here.
    """

    def __init__(self, context: DrawContext, reporter: Optional[Reporter] = None):
        self.ctx = context
        self.log = context.logger
        self.reporter = reporter

    def build_solver(self) -> AssignmentSolver:
        rng = random.Random(self.ctx.seed) if self.ctx.seed is not None else random.Random()
        return AssignmentSolver(rng=rng, max_attempts=self.ctx.max_attempts)

    def build_rules(self, dataset: Dataset) -> List[ExclusionRule]:
        return default_rules(dataset, recent_years=self.ctx.config.recent_years)

    def run(self) -> HistoryEntry:
        self.log.info("Pipeline starting for %d", self.ctx.year)

        try:
            dataset = load_dataset(self.ctx.dataset_path)

            solver = self.build_solver()
            entry = draw_year(
                dataset,
                self.ctx.year,
                solver=solver,
                rules=self.build_rules(dataset),
            )
            self.ctx.stats["assignments"] = len(entry.assignments)
            self.ctx.stats["history"] = len(dataset.history)

            if self.reporter is not None:
                self.reporter(entry)

            if self.ctx.dry_run:
                self.log.info("Dry run: %s left untouched", self.ctx.destination)
            else:
                save_dataset(dataset, self.ctx.destination)

            self.log.info("Pipeline completed successfully")
            return entry

        except SantaError as exc:
            self.log.error("Pipeline execution failed: %s", exc)
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise DrawExecutionError(str(exc)) from exc
