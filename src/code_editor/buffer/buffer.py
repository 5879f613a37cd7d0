"""Pure buffer transitions: every operation returns a new ``EditorState``."""

from __future__ import annotations

from typing import ContextManager

from code_editor.runtime import telemetry

from .state import EditorState, Position
from .validation import clamp_cell


def _edit_span(label: str, state: EditorState) -> ContextManager[telemetry.SpanHandle]:
    return telemetry.span(
        f"buffer::{label}",
        component="buffer",
        metadata={"row": state.cursor.row, "column": state.cursor.column},
    )


def is_insertable(ch: str) -> bool:
    """True for exactly one printable character."""

    return len(ch) == 1 and ch.isprintable()


def insert_char(state: EditorState, ch: str) -> EditorState:
    """Splice ``ch`` in at the cursor and advance one column.

    Anything other than a single printable character leaves the state
    untouched.
    """

    if not is_insertable(ch):
        return state
    with _edit_span("insert_char", state):
        column, row = state.cursor.column, state.cursor.row
        line = state.lines[row]
        lines = list(state.lines)
        lines[row] = line[:column] + ch + line[column:]
        return state.with_lines(lines, Position(column + 1, row))


def backspace(state: EditorState) -> EditorState:
    """Delete the character before the cursor, joining lines at column 0."""

    column, row = state.cursor.column, state.cursor.row
    if column == 0 and row == 0:
        return state
    with _edit_span("backspace", state) as handle:
        lines = list(state.lines)
        if column == 0:
            previous = lines[row - 1]
            lines[row - 1 : row + 1] = [previous + lines[row]]
            handle.add_metadata("joined", True)
            return state.with_lines(lines, Position(len(previous), row - 1))
        line = lines[row]
        lines[row] = line[: column - 1] + line[column:]
        return state.with_lines(lines, Position(column - 1, row))


def newline(state: EditorState) -> EditorState:
    """Split the current line at the cursor; the cursor starts the new line."""

    with _edit_span("newline", state):
        column, row = state.cursor.column, state.cursor.row
        line = state.lines[row]
        lines = list(state.lines)
        lines[row : row + 1] = [line[:column], line[column:]]
        return state.with_lines(lines, Position(0, row + 1))


def set_cursor(state: EditorState, column: int, row: int) -> EditorState:
    """Move the cursor, clamping row to the buffer and column to that row."""

    column, row = clamp_cell(state.lines, int(column), int(row))
    cursor = Position(column, row)
    if cursor == state.cursor:
        return state
    return EditorState(lines=state.lines, errors=state.errors, cursor=cursor)


__all__ = ["insert_char", "backspace", "newline", "set_cursor", "is_insertable"]
