# src/scribble/reader/replay.py

"""
Replay recorded scanner events against a fresh accumulator pair.

This lets token streams be inspected without the surrounding reader.
An event file is a YAML (or JSON) list such as:

    - text: "Hello,  "
    - pop: 1
    - form: {tag: em, body: [world]}
      leading_ws: false
    - newline
    - leading_ws: true
    - splice: [a, b]
    - flush

Pending text is flushed with ``dump_string`` before newlines and at the end.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

import yaml

from scribble.core.exceptions import ReplayError
from scribble.logging import get_logger

from .body_accum import BodyAccumulator, make_body_accum
from .body_token import BodyToken
from .merge import dump_leading_ws, dump_nested_form, dump_string, push_newline
from .nested import Single, mark_for_splice
from .string_accum import StringAccumulator, make_str_accum

log = get_logger(__name__)

_BARE_EVENTS = ("newline", "flush", "leading_ws")
_ACTIONS = ("text", "pop", "form", "splice", "newline", "flush")

State = Tuple[BodyAccumulator, StringAccumulator]


def _normalize(event: Any, index: int) -> Tuple[str, dict]:
    """
    Turn bare-string events into their mapping form and pick the action.

    An event names exactly one action; ``leading_ws`` may only accompany
    ``form`` and ``splice``, or stand alone.
    """
    if isinstance(event, str):
        if event not in _BARE_EVENTS:
            raise ReplayError(f"Event {index}: unknown event {event!r}")
        event = {event: True}
    if not isinstance(event, dict) or not event:
        raise ReplayError(f"Event {index}: expected a mapping, got {event!r}")

    unknown = set(event) - set(_ACTIONS) - {"leading_ws"}
    if unknown:
        raise ReplayError(f"Event {index}: unknown key(s) {sorted(unknown)}")

    actions = [key for key in _ACTIONS if key in event]
    if len(actions) > 1:
        raise ReplayError(f"Event {index}: conflicting actions {actions}")
    if not actions:
        return "leading_ws", event

    action = actions[0]
    if "leading_ws" in event and action not in ("form", "splice"):
        raise ReplayError(f"Event {index}: 'leading_ws' cannot accompany {action!r}")
    return action, event


def apply_event(state: State, event: Any, index: int = 0) -> State:
    """Apply one event to ``(body_accum, str_accum)`` and return the new state."""
    body_accum, str_accum = state
    action, event = _normalize(event, index)
    leading = bool(event.get("leading_ws", False))

    if action == "text":
        text = event["text"]
        if not isinstance(text, str):
            raise ReplayError(f"Event {index}: 'text' must be a string")
        for c in text:
            str_accum.push(c)
        return body_accum, str_accum

    if action == "pop":
        n = event["pop"]
        if isinstance(n, bool) or not isinstance(n, int):
            raise ReplayError(f"Event {index}: 'pop' must be an integer")
        return body_accum, str_accum.pop(n)

    if action == "form":
        return dump_nested_form(body_accum, str_accum, Single(event["form"]), leading)

    if action == "splice":
        items = event["splice"]
        if not isinstance(items, list):
            raise ReplayError(f"Event {index}: 'splice' must be a list")
        return dump_nested_form(body_accum, str_accum, mark_for_splice(items), leading)

    if action == "newline" and event["newline"]:
        return push_newline(dump_string(body_accum, str_accum)), make_str_accum()

    if action == "flush" and event["flush"]:
        return dump_string(body_accum, str_accum), make_str_accum()

    if action == "leading_ws" and leading:
        return dump_leading_ws(body_accum, str_accum), make_str_accum()

    raise ReplayError(f"Event {index}: unrecognized event {event!r}")


def replay_events(events: Iterable[Any]) -> Tuple[BodyToken, ...]:
    """Replay ``events`` from the initial empty state and finalize the body."""
    state: State = (make_body_accum(), make_str_accum())
    count = 0

    for index, event in enumerate(events):
        state = apply_event(state, event, index)
        count += 1

    body_accum, str_accum = state
    tokens = dump_string(body_accum, str_accum).finalize()
    log.debug("Replayed %d event(s) into %d token(s)", count, len(tokens))
    return tokens


def load_events(path: Union[str, Path]) -> List[Any]:
    """
    Load an event list from a YAML or JSON file.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        ReplayError: if the file is not a list of events.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"Event file not found: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ReplayError(f"Cannot parse event file {file_path}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise ReplayError(f"Event file {file_path} must contain a list")
    return data
