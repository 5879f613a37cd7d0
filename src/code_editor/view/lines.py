"""Per-line data handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from code_editor.buffer import EditorState
from code_editor.highlight import TokenSpan, cached_tokenize
from code_editor.overlay import OverlaySegment, project_line


@dataclass(frozen=True, slots=True)
class LineView:
    """Everything a renderer needs to paint one buffer line.

    ``cursor_column`` is ``None`` unless the cursor is on this line.
    ``error_segments`` cover ``len(line_text) + 1`` columns.
    """

    line_index: int
    line_text: str
    cursor_column: Optional[int]
    error_segments: tuple[OverlaySegment, ...]
    tokens: tuple[TokenSpan, ...]

    @property
    def line_number(self) -> int:
        return self.line_index + 1

    @property
    def has_errors(self) -> bool:
        return any(segment.is_error for segment in self.error_segments)


def line_view(state: EditorState, index: int) -> LineView:
    text = state.lines[index]
    cursor_column = state.cursor.column if state.cursor.row == index else None
    return LineView(
        line_index=index,
        line_text=text,
        cursor_column=cursor_column,
        error_segments=tuple(project_line(index, len(text), state.errors)),
        tokens=cached_tokenize(text),
    )


def visible_lines(
    state: EditorState, first: int = 0, count: Optional[int] = None
) -> List[LineView]:
    """Views for ``count`` lines starting at ``first`` (all remaining if None)."""

    first = max(0, first)
    stop = state.line_count if count is None else min(state.line_count, first + count)
    return [line_view(state, index) for index in range(first, stop)]


__all__ = ["LineView", "line_view", "visible_lines"]
