# src/scribble/reader/body_accum.py

from __future__ import annotations

from typing import Iterator, List, Tuple

from .body_token import BodyToken


class BodyAccumulator:
    """
    Ordered collection of ``BodyToken`` objects for one body part.

    Insertion order is document order. ``finalize`` hands the tokens to
    postprocessing as a tuple so the internal list can change freely.
    """

    __slots__ = ("_tokens",)

    def __init__(self) -> None:
        self._tokens: List[BodyToken] = []

    def push(self, token: BodyToken) -> "BodyAccumulator":
        self._tokens.append(token)
        return self

    def finalize(self) -> Tuple[BodyToken, ...]:
        return tuple(self._tokens)

    @property
    def tokens(self) -> Tuple[BodyToken, ...]:
        return tuple(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[BodyToken]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"<BodyAccumulator tokens={len(self._tokens)}>"


def make_body_accum() -> BodyAccumulator:
    """Create an empty body part accumulator."""
    return BodyAccumulator()


def body_accum_push(body_accum: BodyAccumulator, token: BodyToken) -> BodyAccumulator:
    return body_accum.push(token)


def body_accum_finalize(body_accum: BodyAccumulator) -> Tuple[BodyToken, ...]:
    """Convert the accumulator to the tuple consumed by postprocessing."""
    return body_accum.finalize()
