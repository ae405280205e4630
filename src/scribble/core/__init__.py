"""
Core shared types for scribble.
"""

from scribble.core.exceptions import (
    ConfigError,
    OutOfRangeError,
    ReplayError,
    ScribbleError,
)

__all__ = [
    "ConfigError",
    "OutOfRangeError",
    "ReplayError",
    "ScribbleError",
]
