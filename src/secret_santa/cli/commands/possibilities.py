from __future__ import annotations

from pathlib import Path

import typer

from secret_santa.cli.utils import configure_verbosity, fail, load_for_cli, render_possibilities
from secret_santa.config import get_config
from secret_santa.core.exceptions import SantaError
from secret_santa.engine import explain_possibilities
from secret_santa.rules import default_rules


def possibilities_command(
    dataset: Path = typer.Argument(..., dir_okay=False, help="Dataset JSON file"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Show who each person could be drawn to give to, and which rule excluded the rest.
    """
    configure_verbosity(verbose)
    try:
        data = load_for_cli(dataset, verbose=verbose)
    except SantaError as exc:
        fail(exc)

    rules = default_rules(data, recent_years=get_config().recent_years)

    render_possibilities("adults", explain_possibilities(data.adults, rules))
    if data.kids:
        render_possibilities("kids", explain_possibilities(data.kids, rules))
