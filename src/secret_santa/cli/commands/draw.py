from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer

from secret_santa.cli.utils import configure_verbosity, console, fail, render_entry
from secret_santa.config import get_config
from secret_santa.core.context import DrawContext
from secret_santa.core.exceptions import SantaError
from secret_santa.core.pipeline import Pipeline
from secret_santa.logging import get_logger

log = get_logger(__name__)


def draw_command(
    dataset: Path = typer.Argument(..., dir_okay=False, help="Dataset JSON file"),
    year: Optional[int] = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to draw for (defaults to the current year)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random generator for a reproducible draw",
    ),
    max_attempts: Optional[int] = typer.Option(
        None,
        "--max-attempts",
        help="Give up after this many failed attempts (0 retries forever)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        dir_okay=False,
        help="Save the updated dataset here instead of overwriting DATASET",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Draw and print, but do not save",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the new entry as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Draw this year's assignments and append them to the dataset.
    """
    configure_verbosity(verbose)
    cfg = get_config()

    if max_attempts is None:
        max_attempts = cfg.max_attempts
    elif max_attempts == 0:
        max_attempts = None
    elif max_attempts < 0:
        raise typer.BadParameter("must be >= 0", param_hint="--max-attempts")

    ctx = DrawContext(
        config=cfg,
        logger=log,
        dataset_path=str(dataset),
        year=year if year is not None else date.today().year,
        output_path=str(out) if out else None,
        seed=seed,
        max_attempts=max_attempts,
        dry_run=dry_run,
    )

    try:
        Pipeline(ctx, reporter=lambda entry: render_entry(entry, as_json=as_json)).run()
    except SantaError as exc:
        fail(exc)

    if verbose and not as_json:
        if dry_run:
            console.log("Dry run: dataset not saved")
        else:
            console.log(f"Saved {ctx.destination}")
