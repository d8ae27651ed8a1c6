"""
Exporter package.

Re-exports the dataset save entry point used by the pipeline.
"""

from __future__ import annotations

from .json_exporter import dataset_to_dict, entry_to_dict, save_dataset, serialize_to_json_string

__all__ = [
    "dataset_to_dict",
    "entry_to_dict",
    "save_dataset",
    "serialize_to_json_string",
]
