"""
scribble: body-region token accumulation for a text-markup reader.

    from scribble import make_body_accum, make_str_accum, dump_nested_form
"""

from scribble.core.exceptions import OutOfRangeError, ReplayError, ScribbleError
from scribble.reader import (
    BodyAccumulator,
    BodyToken,
    Single,
    Splice,
    StringAccumulator,
    dump_leading_ws,
    dump_nested_form,
    dump_string,
    make_body_accum,
    make_body_token,
    make_str_accum,
    mark_for_splice,
    push_newline,
)

__version__ = "0.1.0"

__all__ = [
    "BodyAccumulator",
    "BodyToken",
    "OutOfRangeError",
    "ReplayError",
    "ScribbleError",
    "Single",
    "Splice",
    "StringAccumulator",
    "dump_leading_ws",
    "dump_nested_form",
    "dump_string",
    "make_body_accum",
    "make_body_token",
    "make_str_accum",
    "mark_for_splice",
    "push_newline",
]
