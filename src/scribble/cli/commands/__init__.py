"""
CLI command modules for scribble.

Each command module defines a single Typer-compatible command function.
"""

from scribble.cli.commands.export import export_command
from scribble.cli.commands.tokens import tokens_command

__all__ = [
    "export_command",
    "tokens_command",
]
