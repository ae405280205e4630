from __future__ import annotations

import time
from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console

from scribble.core.exceptions import ScribbleError
from scribble.reader import BodyToken, load_events, replay_events

console = Console()
err_console = Console(stderr=True)


def load_tokens(path: Path, *, verbose: bool = False) -> Tuple[BodyToken, ...]:
    """
    Load an event file and replay it into a finalized token stream.

    ``ScribbleError`` is reported on stderr and turned into exit code 1.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    try:
        events = load_events(path)
        tokens = replay_events(events)
    except ScribbleError as exc:
        err_console.print(f"[bold red]error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Replayed {len(events)} event(s) in {elapsed:.3f}s")

    return tokens

