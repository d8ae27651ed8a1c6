"""
json_loader.py
Reads the dataset document into a :class:`~secret_santa.models.Dataset`.

Expected shape (keys are matched case-insensitively)::

    {
      "Adults": ["Ann", "Bob"],
      "Kids": ["Cal"],
      "Families": [["Ann", "Cal"], ["Bob"]],
      "History": [
        {"Year": 2023, "Assignments": [{"From": "Ann", "To": "Bob"}]}
      ]
    }

Missing lists default to empty. Anything else that does not fit raises
:class:`DatasetParseError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Set

from secret_santa.core.exceptions import DatasetParseError, DatasetReadError
from secret_santa.loader.file_locator import resolve_input_path
from secret_santa.logging import get_logger
from secret_santa.models import Dataset, GiftAssignment, HistoryEntry

log = get_logger(__name__)


def _field(obj: Dict[str, Any], key: str, default: Any = None) -> Any:
    wanted = key.lower()
    for k, v in obj.items():
        if isinstance(k, str) and k.lower() == wanted:
            return v
    return default


def _expect_object(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DatasetParseError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _name_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DatasetParseError(f"{where}: expected a list, got {type(value).__name__}")
    for i, name in enumerate(value):
        if not isinstance(name, str) or not name:
            raise DatasetParseError(f"{where}[{i}]: expected a non-empty string, got {name!r}")
    return list(value)


def _parse_assignment(raw: Any, where: str) -> GiftAssignment:
    obj = _expect_object(raw, where)
    giver = _field(obj, "From")
    recipient = _field(obj, "To")
    if not isinstance(giver, str) or not isinstance(recipient, str):
        raise DatasetParseError(f"{where}: 'From' and 'To' must be strings")
    try:
        return GiftAssignment(giver, recipient)
    except ValueError as exc:
        raise DatasetParseError(f"{where}: {exc}") from exc


def _parse_entry(raw: Any, where: str) -> HistoryEntry:
    obj = _expect_object(raw, where)
    year = _field(obj, "Year")
    if isinstance(year, bool) or not isinstance(year, int):
        raise DatasetParseError(f"{where}: 'Year' must be an integer, got {year!r}")

    assignments = _field(obj, "Assignments", [])
    if assignments is None:
        assignments = []
    if not isinstance(assignments, list):
        raise DatasetParseError(f"{where}.Assignments: expected a list")

    return HistoryEntry(
        year=year,
        assignments=tuple(
            _parse_assignment(a, f"{where}.Assignments[{i}]")
            for i, a in enumerate(assignments)
        ),
    )


def parse_dataset(data: Any) -> Dataset:
    """Build a Dataset from an already-decoded JSON document."""
    root = _expect_object(data, "dataset")

    adults = _name_list(_field(root, "Adults"), "Adults")
    kids = _name_list(_field(root, "Kids"), "Kids")

    seen: Set[str] = set()
    for name in [*adults, *kids]:
        if name in seen:
            raise DatasetParseError(f"Participant listed more than once: {name}")
        seen.add(name)

    raw_families = _field(root, "Families") or []
    if not isinstance(raw_families, list):
        raise DatasetParseError("Families: expected a list of lists")
    families = [_name_list(f, f"Families[{i}]") for i, f in enumerate(raw_families)]

    raw_history = _field(root, "History") or []
    if not isinstance(raw_history, list):
        raise DatasetParseError("History: expected a list")
    history = [_parse_entry(e, f"History[{i}]") for i, e in enumerate(raw_history)]

    years: Set[int] = set()
    for entry in history:
        if entry.year in years:
            raise DatasetParseError(f"History has more than one entry for {entry.year}")
        years.add(entry.year)

    dataset = Dataset(adults=adults, kids=kids, families=families, history=history)
    dataset.sort_history()

    unknown = dataset.find_unknown_names()
    if unknown:
        log.warning(
            "Names used in families/history but not listed as participants: %s",
            ", ".join(unknown),
        )

    return dataset


def load_dataset(path: "str | os.PathLike[str]") -> Dataset:
    """
    Read and validate the dataset at ``path``.

    Raises:
        DatasetNotFoundError: ``path`` does not exist.
        DatasetParseError: the file is not valid JSON or not a valid dataset.
        DatasetReadError: the file exists but could not be read.
    """
    abs_path = Path(resolve_input_path(path))
    log.info("Loading dataset: %s", abs_path)

    try:
        with abs_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as exc:
        raise DatasetParseError(f"{abs_path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        log.error("Could not read dataset %s: %s", abs_path, exc)
        raise DatasetReadError(f"Could not read {abs_path}: {exc}") from exc

    dataset = parse_dataset(data)
    log.info(
        "Loaded dataset (adults=%d, kids=%d, families=%d, history=%d)",
        len(dataset.adults),
        len(dataset.kids),
        len(dataset.families),
        len(dataset.history),
    )
    return dataset
