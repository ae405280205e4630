# tests/test_string_accum.py

from __future__ import annotations

import pytest

from scribble.core.exceptions import OutOfRangeError
from scribble.reader import (
    StringAccumulator,
    make_str_accum,
    str_accum_finalize,
    str_accum_pop,
    str_accum_push,
)


def _filled(text: str) -> StringAccumulator:
    acc = make_str_accum()
    for c in text:
        acc = str_accum_push(acc, c)
    return acc


def test_make_str_accum_empty_and_seeded() -> None:
    assert str_accum_finalize(make_str_accum()) == ""
    assert len(make_str_accum()) == 0

    seeded = make_str_accum("x")
    assert seeded.finalize() == "x"
    assert len(seeded) == 1


def test_push_then_finalize_preserves_order() -> None:
    acc = _filled("Hello, world")
    assert acc.finalize() == "Hello, world"
    # finalize is repeatable and does not consume the buffer
    assert acc.finalize() == "Hello, world"
    assert acc.chars == tuple("Hello, world")


def test_pop_zero_returns_same_accumulator() -> None:
    acc = _filled("abc")
    assert str_accum_pop(acc, 0) is acc
    assert acc.finalize() == "abc"


def test_pop_removes_last_characters() -> None:
    acc = _filled("abcdef")
    assert str_accum_pop(acc, 2).finalize() == "abcd"


def test_pop_full_length_empties() -> None:
    acc = _filled("abc")
    acc = acc.pop(3)
    assert acc.finalize() == ""
    assert not acc


def test_pop_past_length_raises_without_mutation() -> None:
    acc = _filled("abc")
    with pytest.raises(OutOfRangeError):
        acc.pop(4)
    assert acc.finalize() == "abc"


def test_pop_negative_raises() -> None:
    with pytest.raises(OutOfRangeError):
        make_str_accum("a").pop(-1)


def test_out_of_range_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        make_str_accum().pop(1)


def test_extend_appends_every_character() -> None:
    acc = make_str_accum("a").extend("bcd")
    assert acc.finalize() == "abcd"
    assert len(acc) == 4
