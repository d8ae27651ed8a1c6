from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from secret_santa.cli.utils import configure_verbosity, fail, load_for_cli, render_entries
from secret_santa.core.exceptions import SantaError


def history_command(
    dataset: Path = typer.Argument(..., dir_okay=False, help="Dataset JSON file"),
    year: Optional[int] = typer.Option(
        None,
        "--year",
        "-y",
        help="Only show this year",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of tables",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show previous years' assignments, newest first.
    """
    configure_verbosity(verbose)
    try:
        data = load_for_cli(dataset, verbose=verbose)
    except SantaError as exc:
        fail(exc)

    entries = data.history
    if year is not None:
        entry = data.entry_for(year)
        entries = [entry] if entry is not None else []

    render_entries(entries, as_json=as_json)
