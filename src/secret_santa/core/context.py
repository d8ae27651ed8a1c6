from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from secret_santa.config import SSConfig


@dataclass
class DrawContext:
    """
    Settings for one draw run.
    This object is passed between orchestration layers.
    """

    config: SSConfig
    logger: Any

    dataset_path: str
    year: int

    # Defaults to dataset_path
    output_path: Optional[str] = None

    seed: Optional[int] = None
    # None retries until an attempt succeeds
    max_attempts: Optional[int] = None
    dry_run: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def destination(self) -> str:
        return self.output_path or self.dataset_path
