"""Editor state values, buffer transitions, and interval math."""

from .buffer import backspace, insert_char, is_insertable, newline, set_cursor
from .intervals import intersect
from .state import EditorState, Interval, Position, initial_state
from .validation import clamp_cell, clamp_row

__all__ = [
    "EditorState",
    "Interval",
    "Position",
    "initial_state",
    "insert_char",
    "backspace",
    "newline",
    "set_cursor",
    "is_insertable",
    "intersect",
    "clamp_cell",
    "clamp_row",
]
