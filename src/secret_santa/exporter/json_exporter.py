"""
json_exporter.py
Writes a Dataset back to its JSON document.

This exporter:
- Emits the same PascalCase layout the loader reads
- Keeps history newest-first
- Replaces the destination in one step (temp file + rename), so a failed
  write never leaves a half-written dataset behind
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from secret_santa.core.exceptions import DatasetSaveError
from secret_santa.logging import get_logger
from secret_santa.models import Dataset, GiftAssignment, HistoryEntry

log = get_logger(__name__)


def assignment_to_dict(assignment: GiftAssignment) -> Dict[str, Any]:
    return {"From": assignment.giver, "To": assignment.recipient}


def entry_to_dict(entry: HistoryEntry) -> Dict[str, Any]:
    return {
        "Year": entry.year,
        "Assignments": [assignment_to_dict(a) for a in entry.assignments],
    }


def dataset_to_dict(dataset: Dataset) -> Dict[str, Any]:
    """
    Convert the Dataset into a JSON-safe dict.
    """
    history = sorted(dataset.history, key=lambda e: e.year, reverse=True)
    return {
        "Adults": list(dataset.adults),
        "Kids": list(dataset.kids),
        "Families": [list(f) for f in dataset.families],
        "History": [entry_to_dict(e) for e in history],
    }


def serialize_to_json_string(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


def save_dataset(dataset: Dataset, output_path: str | Path, indent: int = 2) -> None:
    """
    Overwrite ``output_path`` with ``dataset``.

    Raises:
        DatasetSaveError: the file (or its temporary sibling) could not be written.
    """
    output_path = Path(output_path)

    log.info(
        "Saving dataset to: %s (adults=%d, kids=%d, families=%d, history=%d)",
        output_path,
        len(dataset.adults),
        len(dataset.kids),
        len(dataset.families),
        len(dataset.history),
    )

    json_str = serialize_to_json_string(dataset_to_dict(dataset), indent=indent)

    tmp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            dir=output_path.parent,
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json_str)
            f.write("\n")
        os.replace(tmp_name, output_path)
        tmp_name = None
    except OSError as exc:
        log.error("Could not save dataset to %s: %s", output_path, exc)
        raise DatasetSaveError(f"Could not save dataset to {output_path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    size_bytes = output_path.stat().st_size
    log.info("Dataset saved. size=%d bytes", size_bytes)
