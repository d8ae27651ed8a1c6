
from __future__ import annotations

import typer

from secret_santa.cli.commands.draw import draw_command
from secret_santa.cli.commands.history import history_command
from secret_santa.cli.commands.possibilities import possibilities_command

app = typer.Typer(
    name="secret-santa",
    help="Yearly Secret Santa draw with family and history exclusions",
    add_completion=False,
)

app.command("draw")(draw_command)
app.command("history")(history_command)
app.command("possibilities")(possibilities_command)


def main():
    app()


if __name__ == "__main__":
    main()
