# src/scribble/reader/__init__.py

"""
Public interface for the body-region accumulation layer.

Intended usage from a reader loop:

    from scribble.reader import (
        make_body_accum,
        make_str_accum,
        push_newline,
        dump_string,
        dump_nested_form,
        mark_for_splice,
    )
"""

from __future__ import annotations

from .body_accum import (
    BodyAccumulator,
    body_accum_finalize,
    body_accum_push,
    make_body_accum,
)
from .body_token import NEWLINE, BodyToken, make_body_token
from .merge import (
    dump_leading_ws,
    dump_nested_form,
    dump_string,
    push_newline,
    split_trimr,
)
from .nested import NestedForm, Single, Splice, mark_for_splice
from .replay import apply_event, load_events, replay_events
from .string_accum import (
    StringAccumulator,
    make_str_accum,
    str_accum_finalize,
    str_accum_pop,
    str_accum_push,
)

__all__ = [
    "NEWLINE",
    "BodyAccumulator",
    "BodyToken",
    "NestedForm",
    "Single",
    "Splice",
    "StringAccumulator",
    "apply_event",
    "body_accum_finalize",
    "body_accum_push",
    "dump_leading_ws",
    "dump_nested_form",
    "dump_string",
    "load_events",
    "make_body_accum",
    "make_body_token",
    "make_str_accum",
    "mark_for_splice",
    "push_newline",
    "replay_events",
    "split_trimr",
    "str_accum_finalize",
    "str_accum_pop",
    "str_accum_push",
]
