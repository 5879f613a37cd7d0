from __future__ import annotations

from typing import List, Sequence

import pytest

from code_editor.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    key_event_from_textual,
)
from code_editor.buffer import EditorState, Interval, Position
from code_editor.dispatch import EditorSession, KeyEvent
from code_editor.runtime.config import CellGeometry
from code_editor.view import LineView


def make_adapter(
    *lines: str,
) -> tuple[TextualEditorAdapter, List[Sequence[LineView]], List[str]]:
    session = EditorSession(
        EditorState(lines=lines or ("",)),
        geometry=CellGeometry(char_width=1, line_height=1, left_margin=3),
    )
    updates: List[Sequence[LineView]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_lines=updates.append,
        update_status=statuses.append,
    )
    return TextualEditorAdapter(session, hooks), updates, statuses


@pytest.mark.parametrize(
    "key, character, expected",
    [
        ("a", "a", KeyEvent("a")),
        ("A", "A", KeyEvent("A")),
        ("shift+a", "A", KeyEvent("A")),
        ("space", " ", KeyEvent(" ")),
        ("plus", "+", KeyEvent("+")),
        ("backspace", None, KeyEvent("Backspace")),
        ("enter", "\r", KeyEvent("Enter")),
        ("shift+enter", None, KeyEvent("Enter", shift=True)),
        ("ctrl+a", "\x01", KeyEvent("a", control=True)),
        ("alt+x", None, KeyEvent("x", alt=True)),
        ("left", None, KeyEvent("Left")),
        ("page_down", None, KeyEvent("PageDown")),
    ],
)
def test_key_translation(key: str, character: str | None, expected: KeyEvent) -> None:
    assert key_event_from_textual(key, character) == expected


def test_adapter_pushes_initial_view_and_status() -> None:
    adapter, updates, statuses = make_adapter("if x", "42")

    assert len(updates) == 1
    assert [view.line_text for view in updates[0]] == ["if x", "42"]
    assert statuses[-1] == "Ln 1, Col 1 | 2 lines | 0 errors"
    assert adapter.state.cursor == Position(0, 0)


def test_adapter_typing_updates_lines() -> None:
    adapter, updates, statuses = make_adapter()

    adapter.handle_textual_key("h", character="h")
    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("enter", character="\r")
    adapter.handle_textual_key("ctrl+z", character="\x1a")

    assert adapter.state.lines == ("hi", "")
    assert [view.line_text for view in updates[-1]] == ["hi", ""]
    assert updates[-1][1].cursor_column == 0
    assert statuses[-1].startswith("Ln 2, Col 1")
    assert len(updates) == 4  # initial + three real edits


def test_adapter_click_uses_session_geometry() -> None:
    adapter, _updates, _statuses = make_adapter("hello", "world")

    state = adapter.handle_click(3 + 4, 1)

    assert state.cursor == Position(4, 1)


def test_adapter_errors_reach_views_and_status() -> None:
    adapter, updates, statuses = make_adapter("abc")

    adapter.set_errors({Interval.on_row(0, 1, 2)})

    assert updates[-1][0].has_errors
    assert statuses[-1].endswith("1 error")


def test_adapter_emits_log_lines() -> None:
    session = EditorSession(geometry=CellGeometry())
    logs: List[str] = []
    hooks = TextualUIHooks(update_lines=lambda views: None, log=logs.append)
    adapter = TextualEditorAdapter(session, hooks)

    adapter.handle_textual_key("q", character="q")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("state <-") for line in logs)
