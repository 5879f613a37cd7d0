"""Editor messages a host can send besides raw key and pointer input."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import AbstractSet, Callable, Sequence, Union

from code_editor.buffer import EditorState, Interval, set_cursor


@dataclass(frozen=True, slots=True)
class SetCursor:
    column: int
    row: int


@dataclass(frozen=True, slots=True)
class UpdateCode:
    """Rewrite the lines wholesale; the cursor is kept and re-clamped."""

    update: Callable[[tuple[str, ...]], Sequence[str]]


@dataclass(frozen=True, slots=True)
class SetErrors:
    errors: AbstractSet[Interval] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class UpdateState:
    update: Callable[[EditorState], EditorState]


EditorMessage = Union[SetCursor, UpdateCode, SetErrors, UpdateState]


def apply_message(state: EditorState, message: EditorMessage) -> EditorState:
    if isinstance(message, SetCursor):
        return set_cursor(state, message.column, message.row)
    if isinstance(message, UpdateCode):
        return replace(state, lines=tuple(message.update(state.lines)))
    if isinstance(message, SetErrors):
        return replace(state, errors=frozenset(message.errors))
    if isinstance(message, UpdateState):
        return message.update(state)
    raise TypeError(f"Unsupported editor message {message!r}")


__all__ = [
    "EditorMessage",
    "SetCursor",
    "SetErrors",
    "UpdateCode",
    "UpdateState",
    "apply_message",
]
