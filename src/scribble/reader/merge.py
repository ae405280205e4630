# src/scribble/reader/merge.py

"""
Merge engine: folds newlines, text runs and nested forms into a body
accumulator.

The pair ``(BodyAccumulator, StringAccumulator)`` is the full state of this
layer. Every operation takes the current accumulators and returns the
updated ones:

    push_newline      -> "\\n" token flagged as newline
    dump_leading_ws   -> leading whitespace token (always emitted, even empty)
    dump_string       -> text run, with its trailing whitespace split off
    dump_nested_form  -> string forms merge into the current run; other forms
                         flush the run and are pushed (or spliced) as tokens

Examples:
    str_acc = "abc  "      dump_string
        -> "abc" (plain), "  " (trailing_ws)

    str_acc = "  ", form F, leading_ws=True     dump_nested_form
        -> "  " (leading_ws), F (form)
"""

from __future__ import annotations

from typing import Any, Tuple

from scribble.logging import get_logger

from .body_accum import BodyAccumulator
from .body_token import NEWLINE, make_body_token
from .nested import Splice, unwrap
from .string_accum import StringAccumulator, make_str_accum

log = get_logger(__name__)

# NBSP, FIGURE SPACE, NARROW NBSP, NEL
_NON_BREAKING = "\u00a0\u2007\u202f\u0085"


# ---------- Body accumulator helpers ----------

def _push_trailing_ws(body_accum: BodyAccumulator, s: str) -> BodyAccumulator:
    if not s:
        return body_accum
    return body_accum.push(make_body_token(s, trailing_ws=True))


def _push_string(body_accum: BodyAccumulator, s: str) -> BodyAccumulator:
    # Empty runs never reach the accumulator.
    if not s:
        return body_accum
    return body_accum.push(make_body_token(s))


def _push_form(body_accum: BodyAccumulator, form: Any) -> BodyAccumulator:
    return body_accum.push(make_body_token(form))


def push_newline(body_accum: BodyAccumulator) -> BodyAccumulator:
    """Wrap a newline in a token and add it to the accumulator."""
    return body_accum.push(make_body_token(NEWLINE, newline=True))


# ---------- Combined updaters ----------

def dump_leading_ws(
    body_accum: BodyAccumulator, str_accum: StringAccumulator
) -> BodyAccumulator:
    """
    Finalize a string accumulator holding leading whitespace and push it.

    The token is pushed even when the whitespace is empty: its position marks
    the leading edge of the body part.
    """
    return body_accum.push(
        make_body_token(str_accum.finalize(), leading_ws=True)
    )


def _dump_string_verbatim(
    body_accum: BodyAccumulator, str_accum: StringAccumulator
) -> BodyAccumulator:
    return _push_string(body_accum, str_accum.finalize())


def is_body_whitespace(c: str) -> bool:
    """
    True for characters that count as breakable whitespace in a body part.

    Non-breaking spaces and NEL are kept with the text they follow.
    """
    return c.isspace() and c not in _NON_BREAKING


def split_trimr(s: str) -> Tuple[str, str]:
    """
    Split ``s`` into its main part and its trailing whitespace.

    Returns:
        ``(main_part, trailing_ws)``; either may be empty.
    """
    end = len(s)
    while end > 0 and is_body_whitespace(s[end - 1]):
        end -= 1
    return s[:end], s[end:]


def dump_string(
    body_accum: BodyAccumulator, str_accum: StringAccumulator
) -> BodyAccumulator:
    """
    Finalize a string accumulator holding arbitrary text and push it.

    The text is split into the main part and the trailing whitespace, pushed
    as a plain token and a ``trailing_ws`` token respectively. Empty parts are
    skipped, so an empty accumulator leaves ``body_accum`` unchanged.
    """
    main_part, trailing_ws = split_trimr(str_accum.finalize())
    body_accum = _push_string(body_accum, main_part)
    return _push_trailing_ws(body_accum, trailing_ws)


def dump_nested_form(
    body_accum: BodyAccumulator,
    str_accum: StringAccumulator,
    nested_form: Any,
    leading_ws: bool = False,
) -> Tuple[BodyAccumulator, StringAccumulator]:
    """
    Push a nested form, flushing the pending text first when needed.

    Args:
        body_accum: Tokens read so far.
        str_accum: Text of the current run.
        nested_form: A ``Single``/``Splice`` or a bare value. Strings are
            merged into the current run instead of becoming tokens.
        leading_ws: True if ``str_accum`` holds the leading whitespace of
            the body part, which is pushed before anything else.

    Returns:
        The updated ``(body_accum, str_accum)`` pair.
    """
    if leading_ws:
        return dump_nested_form(
            dump_leading_ws(body_accum, str_accum),
            make_str_accum(),
            nested_form,
            False,
        )

    if isinstance(nested_form, Splice):
        body_accum = _dump_string_verbatim(body_accum, str_accum)
        log.debug("Splicing %d item(s) into the body", len(nested_form))
        for item in nested_form:
            _push_form(body_accum, unwrap(item))
        return body_accum, make_str_accum()

    # Single(...) is one token whatever it wraps, a Splice included.
    form = unwrap(nested_form)

    if isinstance(form, str):
        return body_accum, str_accum.extend(form)

    body_accum = _dump_string_verbatim(body_accum, str_accum)
    _push_form(body_accum, form)
    return body_accum, make_str_accum()
