"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from scribble.exporter.json_exporter import (
    export_tokens_json,
    serialize_tokens_to_json_string,
    token_to_dict,
    tokens_to_dicts,
)

__all__ = [
    "export_tokens_json",
    "serialize_tokens_to_json_string",
    "token_to_dict",
    "tokens_to_dicts",
]
