from __future__ import annotations

from typing import List

import pytest

from code_editor.buffer import EditorState, Interval, Position
from code_editor.dispatch import (
    EditorSession,
    KeyEvent,
    PointerEvent,
    SetCursor,
    SetErrors,
    UpdateCode,
    UpdateState,
    apply_message,
)
from code_editor.runtime.config import CellGeometry


def make_session(*lines: str) -> EditorSession:
    state = EditorState(lines=lines or ("",))
    geometry = CellGeometry(char_width=1, line_height=1, left_margin=0)
    return EditorSession(state, geometry=geometry)


def test_apply_message_set_cursor_clamps() -> None:
    state = EditorState(lines=("abc",))

    assert apply_message(state, SetCursor(9, 4)).cursor == Position(3, 0)


def test_apply_message_update_code_reclamps_cursor() -> None:
    state = EditorState(lines=("abc", "defgh"), cursor=Position(5, 1))

    updated = apply_message(state, UpdateCode(lambda lines: lines[:1]))

    assert updated.lines == ("abc",)
    assert updated.cursor == Position(3, 0)


def test_apply_message_update_code_to_nothing_keeps_one_line() -> None:
    state = EditorState(lines=("abc",), cursor=Position(2, 0))

    updated = apply_message(state, UpdateCode(lambda lines: []))

    assert updated.lines == ("",)
    assert updated.cursor == Position(0, 0)


def test_apply_message_set_errors_replaces_wholesale() -> None:
    first = frozenset({Interval.on_row(0, 0, 1)})
    second = {Interval.on_row(0, 1, 2)}
    state = apply_message(EditorState(lines=("abc",)), SetErrors(first))

    assert apply_message(state, SetErrors(second)).errors == frozenset(second)


def test_apply_message_update_state() -> None:
    state = EditorState(lines=("abc",))

    updated = apply_message(
        state, UpdateState(lambda s: EditorState(lines=s.lines + ("x",)))
    )

    assert updated.lines == ("abc", "x")


def test_apply_message_rejects_unknown_messages() -> None:
    with pytest.raises(TypeError):
        apply_message(EditorState(), object())  # type: ignore[arg-type]


def test_session_emits_only_on_change() -> None:
    session = make_session("ab")
    seen: List[object] = []
    session.bus.subscribe("state", seen.append)

    session.handle_key(KeyEvent("x"))
    session.handle_key(KeyEvent("x", control=True))
    session.handle_key(KeyEvent("Backspace"))

    assert len(seen) == 2
    assert seen[-1] == session.state
    assert session.state.lines == ("ab",)


def test_session_click_and_errors() -> None:
    session = make_session("hello", "world")

    state = session.handle_click(PointerEvent(x=3, y=1))
    assert state.cursor == Position(3, 1)

    errors = {Interval.on_row(1, 0, 2)}
    assert session.set_errors(errors).errors == frozenset(errors)
    assert session.apply(SetCursor(0, 0)).cursor == Position(0, 0)
