# tests/test_json_exporter.py

from __future__ import annotations

import json
from pathlib import Path

from scribble.exporter import (
    export_tokens_json,
    serialize_tokens_to_json_string,
    token_to_dict,
)
from scribble.reader import Single, make_body_token


def test_token_to_dict_plain_text() -> None:
    assert token_to_dict(make_body_token("abc")) == {
        "kind": "text",
        "contents": "abc",
        "is_newline": False,
        "is_leading_ws": False,
        "is_trailing_ws": False,
    }


def test_token_to_dict_converts_nested_forms() -> None:
    tok = make_body_token({"tag": "em", "body": ("x", Single(1))})
    data = token_to_dict(tok)
    assert data["kind"] == "form"
    assert data["contents"] == {"tag": "em", "body": ["x", {"value": 1}]}


def test_serialize_compact_and_pretty() -> None:
    tokens = (make_body_token("\n", newline=True),)
    compact = serialize_tokens_to_json_string(tokens, indent=None)
    assert "\n  " not in compact
    assert json.loads(compact)[0]["kind"] == "newline"

    pretty = serialize_tokens_to_json_string(tokens, indent=2)
    assert json.loads(pretty) == json.loads(compact)


def test_export_tokens_json_writes_file(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "tokens.json"
    export_tokens_json([make_body_token("a"), make_body_token(" ", trailing_ws=True)], out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [d["kind"] for d in data] == ["text", "trailing_ws"]
