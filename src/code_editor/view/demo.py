"""Sample document used by the demo host during development."""

from __future__ import annotations

from code_editor.buffer import EditorState, Interval, Position

DEMO_HEADER_LINES: tuple[str, ...] = (
    "   if then else module 123 yellow Big!",
    "a  test 5 ",
    "     ;   ;",
)
DEMO_REPEATED_LINE = 'test2 bbbb 1234 () "abcdef" 6754 (Ta123) '
DEMO_ERRORS: frozenset[Interval] = frozenset(
    {
        Interval(Position(3, 1), Position(4, 1)),
        Interval(Position(0, 0), Position(4, 0)),
        Interval(Position(4, 10), Position(6, 11)),
    }
)


def demo_state(line_count: int = 200) -> EditorState:
    """Highlighting showcase: header lines, a repeated line, and three errors."""

    repeats = max(0, line_count - len(DEMO_HEADER_LINES))
    lines = DEMO_HEADER_LINES + (DEMO_REPEATED_LINE,) * repeats
    return EditorState(lines=lines, errors=DEMO_ERRORS, cursor=Position(10, 0))


__all__ = ["demo_state", "DEMO_ERRORS"]
