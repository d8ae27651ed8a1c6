# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from secret_santa.cli import app
from secret_santa.cli.utils import titled_table

runner = CliRunner()


def test_draw_json_output_and_save(dataset_file):
    result = runner.invoke(
        app, ["draw", str(dataset_file), "--year", "2024", "--seed", "1", "--json"]
    )

    assert result.exit_code == 0, result.output
    entry = json.loads(result.output)
    assert entry["Year"] == 2024
    assert len(entry["Assignments"]) == 12

    saved = json.loads(dataset_file.read_text(encoding="utf-8"))
    assert saved["History"][0] == entry


def test_draw_table_output_dry_run(dataset_file):
    before = dataset_file.read_bytes()

    result = runner.invoke(app, ["draw", str(dataset_file), "--year", "2024", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Secret Santa" in result.output
    assert "2024" in result.output
    assert "Ann" in result.output
    assert dataset_file.read_bytes() == before


def test_draw_existing_year_fails(dataset_file):
    result = runner.invoke(app, ["draw", str(dataset_file), "--year", "2023"])

    assert result.exit_code == 1
    assert "already an entry" in result.output


def test_draw_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["draw", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Could not find" in result.output


def test_draw_unsolvable_fails(tmp_path):
    path = tmp_path / "stuck.json"
    path.write_text(
        json.dumps({"Adults": ["A", "B"], "Families": [["A", "B"]]}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["draw", str(path), "--year", "2024", "--max-attempts", "3"])

    assert result.exit_code == 1
    assert "3 attempts" in result.output


def test_history_for_one_year(dataset_file):
    result = runner.invoke(app, ["history", str(dataset_file), "--year", "2022", "--json"])

    assert result.exit_code == 0, result.output
    entries = json.loads(result.output)
    assert [e["Year"] for e in entries] == [2022]


def test_history_unknown_year(dataset_file):
    result = runner.invoke(app, ["history", str(dataset_file), "--year", "1999"])

    assert result.exit_code == 0
    assert "No history entries" in result.output


def test_possibilities_report(dataset_file):
    result = runner.invoke(app, ["possibilities", str(dataset_file)])

    assert result.exit_code == 0, result.output
    assert "Possibilities" in result.output
    assert "adults" in result.output
    assert "kids" in result.output


def test_titled_table_fits_its_title():
    table = titled_table("Secret Santa 2024")
    assert table.min_width >= len("Secret Santa 2024")


def test_history_unreadable_file_fails(dataset_file, monkeypatch):
    def deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", deny)

    result = runner.invoke(app, ["history", str(dataset_file)])

    assert result.exit_code == 1
    assert "Could not read" in result.output
