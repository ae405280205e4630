# src/scribble/reader/body_token.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NEWLINE = "\n"


@dataclass(frozen=True)
class BodyToken:
    """
    A classified unit of a body part.

    The flags are readily available at read time but would cost a rescan
    of ``contents`` during postprocessing.

    Attributes:
        contents: A string, or an arbitrary nested form produced by the reader.
        is_newline: True if ``contents`` is the string "\\n".
        is_leading_ws: True if ``contents`` is the leading whitespace
            of the body part.
        is_trailing_ws: True if ``contents`` is the trailing whitespace
            before a boundary.
    """
    contents: Any
    is_newline: bool = False
    is_leading_ws: bool = False
    is_trailing_ws: bool = False

    @property
    def is_string(self) -> bool:
        return isinstance(self.contents, str)

    @property
    def is_form(self) -> bool:
        return not self.is_string

    @property
    def kind(self) -> str:
        """One of "newline", "leading_ws", "trailing_ws", "text" or "form"."""
        if self.is_newline:
            return "newline"
        if self.is_leading_ws:
            return "leading_ws"
        if self.is_trailing_ws:
            return "trailing_ws"
        return "text" if self.is_string else "form"

    def __repr__(self) -> str:
        return f"<BodyToken {self.kind}: {self.contents!r}>"


def make_body_token(
    contents: Any,
    *,
    newline: Any = False,
    leading_ws: Any = False,
    trailing_ws: Any = False,
) -> BodyToken:
    """Create a ``BodyToken`` with optional metadata flags."""
    return BodyToken(
        contents=contents,
        is_newline=bool(newline),
        is_leading_ws=bool(leading_ws),
        is_trailing_ws=bool(trailing_ws),
    )
