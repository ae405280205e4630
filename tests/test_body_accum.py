# tests/test_body_accum.py

from __future__ import annotations

import dataclasses

import pytest

from scribble.reader import (
    BodyToken,
    body_accum_finalize,
    body_accum_push,
    make_body_accum,
    make_body_token,
)


def test_make_body_token_defaults_to_plain() -> None:
    tok = make_body_token("abc")
    assert tok.contents == "abc"
    assert not tok.is_newline
    assert not tok.is_leading_ws
    assert not tok.is_trailing_ws
    assert tok.kind == "text"


def test_make_body_token_coerces_flags_to_bool() -> None:
    tok = make_body_token("  ", trailing_ws=1)
    assert tok.is_trailing_ws is True

    tok = make_body_token("  ", leading_ws="yes")
    assert tok.is_leading_ws is True
    assert tok.kind == "leading_ws"


def test_non_string_token_is_a_form() -> None:
    tok = make_body_token({"tag": "em"})
    assert tok.is_form
    assert tok.kind == "form"


def test_body_token_is_immutable() -> None:
    tok = make_body_token("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.contents = "y"  # type: ignore[misc]


def test_body_accum_keeps_insertion_order() -> None:
    acc = make_body_accum()
    first = make_body_token("a")
    second = make_body_token("\n", newline=True)
    acc = body_accum_push(acc, first)
    acc = body_accum_push(acc, second)

    tokens = body_accum_finalize(acc)
    assert tokens == (first, second)
    assert len(acc) == 2
    assert list(acc) == [first, second]


def test_finalize_empty_body_accum() -> None:
    assert body_accum_finalize(make_body_accum()) == ()


def test_tokens_compare_by_value() -> None:
    assert make_body_token("a") == BodyToken("a")
    assert make_body_token("a") != make_body_token("a", trailing_ws=True)
