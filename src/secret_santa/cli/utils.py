
from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Iterable, NoReturn, Sequence

import typer
from rich.console import Console
from rich.table import Table

from secret_santa.core.exceptions import SantaError
from secret_santa.engine import GiverPossibilities
from secret_santa.exporter import entry_to_dict, serialize_to_json_string
from secret_santa.loader import load_dataset
from secret_santa.logging import set_debug
from secret_santa.models import Dataset, HistoryEntry

console = Console()


def configure_verbosity(verbose: bool) -> None:
    if verbose:
        set_debug(True)


def load_for_cli(path: Path, *, verbose: bool = False) -> Dataset:
    """
    Load a dataset, timing it when ``verbose`` is set.
    """
    t0 = time.perf_counter()
    dataset = load_dataset(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded dataset in {elapsed:.3f}s")

    return dataset


def fail(exc: SantaError) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(code=1)


def write_json(data: Any) -> None:
    """
    Write indented JSON to stdout.
    """
    print(serialize_to_json_string(data))


def titled_table(title: str) -> Table:
    # Narrow tables would otherwise wrap their title onto several lines
    return Table(title=title, min_width=len(title) + 4)


def render_entry(entry: HistoryEntry, *, as_json: bool = False) -> None:
    if as_json:
        write_json(entry_to_dict(entry))
        return

    table = titled_table(f"Secret Santa {entry.year}")
    table.add_column("From", style="bold")
    table.add_column("To")

    for assignment in entry.assignments:
        table.add_row(assignment.giver, assignment.recipient)

    console.print(table)


def render_entries(entries: Iterable[HistoryEntry], *, as_json: bool = False) -> None:
    entries = list(entries)
    if as_json:
        write_json([entry_to_dict(e) for e in entries])
        return

    if not entries:
        console.print("[yellow]No history entries[/yellow]")
        return

    for entry in entries:
        render_entry(entry)


def render_possibilities(label: str, reports: Sequence[GiverPossibilities]) -> None:
    table = titled_table(f"Possibilities: {label}")
    table.add_column("Giver", style="bold")
    table.add_column("Allowed")
    table.add_column("Excluded", style="dim")

    for report in reports:
        allowed = ", ".join(report.allowed) if report.allowed else "[red]none[/red]"
        excluded = "; ".join(
            f"{rule}: {', '.join(sorted(names))}"
            for rule, names in report.removed_by.items()
        )
        table.add_row(report.giver, allowed, excluded)

    console.print(table)
