# tests/test_exporter.py

from __future__ import annotations

import json

import pytest

from secret_santa.core.exceptions import DatasetSaveError
from secret_santa.exporter import dataset_to_dict, entry_to_dict, save_dataset
from secret_santa.loader import load_dataset
from secret_santa.models import Dataset, make_entry


def test_dataset_to_dict_layout():
    ds = Dataset(
        adults=["A", "B"],
        kids=["C"],
        families=[["A", "C"]],
        history=[make_entry(2022, [("A", "B")]), make_entry(2023, [("B", "A")])],
    )

    data = dataset_to_dict(ds)

    assert list(data) == ["Adults", "Kids", "Families", "History"]
    assert [e["Year"] for e in data["History"]] == [2023, 2022]
    assert data["History"][0]["Assignments"] == [{"From": "B", "To": "A"}]


def test_entry_to_dict():
    entry = make_entry(2024, [("A", "B"), ("B", "A")])
    assert entry_to_dict(entry) == {
        "Year": 2024,
        "Assignments": [{"From": "A", "To": "B"}, {"From": "B", "To": "A"}],
    }


def test_save_then_load_keeps_everything(dataset_file):
    ds = load_dataset(dataset_file)
    ds.add_entry(make_entry(2024, [("Ann", "Dan")]))

    save_dataset(ds, dataset_file)
    reloaded = load_dataset(dataset_file)

    assert reloaded == ds
    assert json.loads(dataset_file.read_text(encoding="utf-8"))["History"][0]["Year"] == 2024


def test_save_leaves_no_temp_files(tmp_path):
    target = tmp_path / "out" / "data.json"
    save_dataset(Dataset(adults=["A", "B"]), target)

    assert target.exists()
    assert [p.name for p in target.parent.iterdir()] == ["data.json"]


def test_save_failure_raises_save_error(tmp_path):
    # A directory in the way of the destination
    target = tmp_path / "data.json"
    target.mkdir()

    with pytest.raises(DatasetSaveError):
        save_dataset(Dataset(adults=["A", "B"]), target)

    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]
