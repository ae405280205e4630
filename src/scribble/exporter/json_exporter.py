"""
json_exporter.py
JSON exporter for finalized body token streams.

This exporter:
- Converts tokens to dictionaries (NOT strings)
- Converts nested forms recursively into JSON-compatible structures
- Is deterministic: token order is document order
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from scribble.logging import get_logger
from scribble.reader.body_token import BodyToken

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Unknown objects → __dict__ if present, else str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    if hasattr(obj, "__dict__"):
        return {k: _to_json_compatible(v) for k, v in obj.__dict__.items()}

    return str(obj)


def token_to_dict(token: BodyToken) -> Dict[str, Any]:
    return {
        "kind": token.kind,
        "contents": _to_json_compatible(token.contents),
        "is_newline": token.is_newline,
        "is_leading_ws": token.is_leading_ws,
        "is_trailing_ws": token.is_trailing_ws,
    }


def tokens_to_dicts(tokens: Iterable[BodyToken]) -> List[Dict[str, Any]]:
    return [token_to_dict(tok) for tok in tokens]


def serialize_tokens_to_json_string(tokens: Iterable[BodyToken], indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(tokens_to_dicts(tokens), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(tokens_to_dicts(tokens), indent=indent, ensure_ascii=False)


def export_tokens_json(tokens: Iterable[BodyToken], output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    tokens = tuple(tokens)
    log.info("Exporting %d token(s) to: %s", len(tokens), output_path)

    json_str = serialize_tokens_to_json_string(tokens, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
