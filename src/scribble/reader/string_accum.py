# src/scribble/reader/string_accum.py

"""
String accumulator used while the reader collects characters of a body part.

The accumulator is an exclusively-owned buffer: ``push``/``pop``/``extend``
mutate it in place and return it, so scanner code can thread it through
calls the same way it threads the body accumulator.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from scribble.core.exceptions import OutOfRangeError


class StringAccumulator:
    """Append/truncate buffer of characters, finalized into a ``str``."""

    __slots__ = ("_chars",)

    def __init__(self, c: Optional[str] = None) -> None:
        self._chars: List[str] = [] if c is None else [c]

    def push(self, c: str) -> "StringAccumulator":
        """Add a character ``c`` to the end of the buffer."""
        self._chars.append(c)
        return self

    def extend(self, text: Iterable[str]) -> "StringAccumulator":
        """Add every character of ``text`` to the end of the buffer."""
        self._chars.extend(text)
        return self

    def pop(self, n: int) -> "StringAccumulator":
        """
        Remove the last ``n`` characters.

        Raises:
            OutOfRangeError: if ``n`` is negative or larger than the buffer.
                The buffer is left untouched in that case.
        """
        if n == 0:
            return self

        size = len(self._chars)
        if n < 0 or n > size:
            raise OutOfRangeError(
                f"Cannot pop {n} character(s) from an accumulator of length {size}"
            )

        del self._chars[size - n :]
        return self

    def finalize(self) -> str:
        """Return a string representing the contents of the accumulator."""
        return "".join(self._chars)

    @property
    def chars(self) -> Tuple[str, ...]:
        return tuple(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringAccumulator):
            return NotImplemented
        return self._chars == other._chars

    def __repr__(self) -> str:
        return f"<StringAccumulator {self.finalize()!r}>"


# ---------- Function-style API ----------

def make_str_accum(c: Optional[str] = None) -> StringAccumulator:
    """Create an empty string accumulator, or one seeded with ``c``."""
    return StringAccumulator(c)


def str_accum_push(str_accum: StringAccumulator, c: str) -> StringAccumulator:
    return str_accum.push(c)


def str_accum_pop(str_accum: StringAccumulator, n: int) -> StringAccumulator:
    return str_accum.pop(n)


def str_accum_finalize(str_accum: StringAccumulator) -> str:
    return str_accum.finalize()
