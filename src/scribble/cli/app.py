from __future__ import annotations

import typer
from rich.console import Console

from scribble.cli.commands.export import export_command
from scribble.cli.commands.tokens import tokens_command

app = typer.Typer(
    name="scribble",
    help="Inspect body token streams produced by the scribble reader",
    add_completion=False,
)

console = Console()

app.command("tokens")(tokens_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
