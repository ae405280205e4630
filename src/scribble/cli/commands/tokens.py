from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from scribble.cli.utils import load_tokens

console = Console()

_KIND_STYLES = {
    "newline": "dim",
    "leading_ws": "cyan",
    "trailing_ws": "magenta",
    "text": "",
    "form": "bold green",
}


def tokens_command(
    events: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Replay an event file and show the resulting body tokens.
    """
    tokens = load_tokens(events, verbose=verbose)

    table = Table(title="Body Tokens")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="bold")
    table.add_column("Contents")

    for index, tok in enumerate(tokens):
        table.add_row(
            str(index),
            tok.kind,
            repr(tok.contents),
            style=_KIND_STYLES.get(tok.kind, ""),
        )

    console.print(table)

    counts = Counter(tok.kind for tok in tokens)
    summary = ", ".join(f"{kind}={n}" for kind, n in sorted(counts.items()))
    console.print(f"{len(tokens)} token(s): {summary or 'none'}")
