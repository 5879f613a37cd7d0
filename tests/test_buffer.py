from __future__ import annotations

from code_editor.buffer import (
    EditorState,
    Interval,
    Position,
    backspace,
    initial_state,
    insert_char,
    newline,
    set_cursor,
)


def make_state(*lines: str, column: int = 0, row: int = 0) -> EditorState:
    return EditorState(lines=lines, cursor=Position(column, row))


def assert_valid(state: EditorState) -> None:
    assert len(state.lines) >= 1
    assert 0 <= state.cursor.row < len(state.lines)
    assert 0 <= state.cursor.column <= len(state.lines[state.cursor.row])


def test_initial_state_has_one_empty_line() -> None:
    state = initial_state()

    assert state.lines == ("",)
    assert state.cursor == Position(0, 0)
    assert state.errors == frozenset()


def test_construction_coerces_empty_lines_and_clamps_cursor() -> None:
    state = EditorState(lines=[], cursor=Position(5, 9))

    assert state.lines == ("",)
    assert state.cursor == Position(0, 0)

    state = EditorState(lines=["abc", "de"], cursor=Position(10, -3))
    assert state.cursor == Position(3, 0)


def test_construction_treats_bare_string_as_text() -> None:
    assert EditorState(lines="abc").lines == ("abc",)
    assert EditorState(lines="ab\ncd", cursor=Position(9, 1)).cursor == Position(2, 1)
    assert EditorState(lines="").lines == ("",)


def test_insert_char_splices_at_cursor() -> None:
    state = make_state("ac", column=1)

    result = insert_char(state, "b")

    assert result.lines == ("abc",)
    assert result.cursor == Position(2, 0)
    assert state.lines == ("ac",)  # input untouched


def test_insert_char_ignores_non_printable_and_multi_char() -> None:
    state = make_state("abc", column=1)

    assert insert_char(state, "Tab") is state
    assert insert_char(state, "\t") is state
    assert insert_char(state, "") is state


def test_backspace_at_origin_is_noop() -> None:
    state = make_state("abc")

    assert backspace(state) is state


def test_backspace_removes_previous_char() -> None:
    state = make_state("abcd", column=2)

    result = backspace(state)

    assert result.lines == ("acd",)
    assert result.cursor == Position(1, 0)


def test_backspace_joins_lines_at_column_zero() -> None:
    state = make_state("ab", "cd", column=0, row=1)

    result = backspace(state)

    assert result.lines == ("abcd",)
    assert result.cursor == Position(2, 0)


def test_backspace_join_keeps_following_lines() -> None:
    state = make_state("x", "yz", "tail", column=0, row=1)

    result = backspace(state)

    assert result.lines == ("xyz", "tail")
    assert result.cursor == Position(1, 0)


def test_newline_splits_line() -> None:
    state = make_state("abcd", column=2)

    result = newline(state)

    assert result.lines == ("ab", "cd")
    assert result.cursor == Position(0, 1)


def test_newline_at_end_appends_empty_line() -> None:
    state = make_state("ab", "cd", column=2, row=0)

    result = newline(state)

    assert result.lines == ("ab", "", "cd")
    assert result.cursor == Position(0, 1)


def test_set_cursor_clamps_row_then_column() -> None:
    state = make_state("long line", "ab")

    assert set_cursor(state, 50, 1).cursor == Position(2, 1)
    assert set_cursor(state, 50, 99).cursor == Position(2, 1)
    assert set_cursor(state, -4, -2).cursor == Position(0, 0)
    assert set_cursor(state, 4, 0).cursor == Position(4, 0)


def test_edits_preserve_errors() -> None:
    errors = frozenset({Interval.on_row(0, 0, 2)})
    state = EditorState(lines=("abc",), errors=errors, cursor=Position(3, 0))

    assert newline(state).errors == errors
    assert insert_char(state, "x").errors == errors


def test_random_edit_sequence_keeps_invariants() -> None:
    state = initial_state()
    script = ["a", "Enter", "b", "c", "Backspace", "Backspace", "Backspace"]
    for step, key in enumerate(script * 3):
        if key == "Enter":
            state = newline(state)
        elif key == "Backspace":
            state = backspace(state)
        else:
            state = insert_char(state, key)
        state = set_cursor(state, step % 4, step % 3)
        assert_valid(state)


def test_text_round_trip() -> None:
    state = EditorState.from_text("one\ntwo\n")

    assert state.lines == ("one", "two", "")
    assert state.text == "one\ntwo\n"
