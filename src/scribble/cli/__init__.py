"""
CLI package for scribble.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from scribble.cli.app import app, main

__all__ = [
    "app",
    "main",
]
