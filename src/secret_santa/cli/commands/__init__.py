
"""
CLI command modules for secret_santa.

Each command module defines a single Typer-compatible command function.
"""

from secret_santa.cli.commands.draw import draw_command
from secret_santa.cli.commands.history import history_command
from secret_santa.cli.commands.possibilities import possibilities_command

__all__ = [
    "draw_command",
    "history_command",
    "possibilities_command",
]
