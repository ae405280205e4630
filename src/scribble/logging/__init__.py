"""
Logging package for ``scribble``.

Modules call ``get_logger(__name__)``; every logger nests under the shared
``scribble`` base logger and its console (and optional file) handlers.
"""

from .logger import file_logging_enabled, get_logger, list_active_loggers

__all__ = [
    "file_logging_enabled",
    "get_logger",
    "list_active_loggers",
]
