# src/scribble/reader/nested.py

"""
Nested forms handed to the merge engine by the surrounding grammar.

A nested form is either a ``Single`` value, pushed as one opaque token, or a
``Splice`` of items, flattened into the parent's token stream. Bare values
are accepted wherever a nested form is expected and behave like ``Single``.

Splice items are unwrapped the same way; a ``Single`` holding a ``Splice``
is pushed as one token and never flattened.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union


@dataclass(frozen=True)
class Single:
    value: Any


@dataclass(frozen=True)
class Splice:
    """A sequence of body parts to be flattened into the parent body."""
    items: Tuple[Any, ...]

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


NestedForm = Union[Single, Splice]


def mark_for_splice(items: Iterable[Any]) -> Splice:
    """Mark a sequence to be spliced into the body part of the parent reader."""
    return Splice(tuple(items))


def unwrap(nested_form: Any) -> Any:
    """Return the payload of a (possibly nested) ``Single``; other values pass through."""
    while isinstance(nested_form, Single):
        nested_form = nested_form.value
    return nested_form
