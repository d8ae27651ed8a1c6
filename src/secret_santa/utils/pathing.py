from __future__ import annotations

from pathlib import Path
from typing import Union

# src/secret_santa/utils/pathing.py -> checkout root
_CHECKOUT_ROOT = Path(__file__).resolve().parents[3]


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """Sample datasets shipped with the test suite, e.g. ``tests_data_path("family.json")``."""
    return _CHECKOUT_ROOT.joinpath("tests", "data", *parts)
