class ScribbleError(Exception):
    """Base exception for scribble failures."""


class OutOfRangeError(ScribbleError, IndexError):
    """Raised when more characters are popped than an accumulator holds."""


class ReplayError(ScribbleError, ValueError):
    """Raised when a recorded scanner event cannot be replayed."""


class ConfigError(ScribbleError):
    """Raised when the configuration file cannot be read."""
