from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from scribble.cli.utils import load_tokens
from scribble.exporter import export_tokens_json, serialize_tokens_to_json_string

console = Console(stderr=True)


def export_command(
    events: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Replay an event file and export the body tokens to JSON (stdout by default).
    """
    tokens = load_tokens(events, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    indent = 2 if pretty else None
    if out:
        export_tokens_json(tokens, out, indent=indent)
    else:
        print(serialize_tokens_to_json_string(tokens, indent=indent))

    if verbose:
        console.log("Export complete")
