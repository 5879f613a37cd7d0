"""Positions, intervals, and the immutable editor state value."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import AbstractSet, Iterable, Sequence

from .validation import clamp_cell, normalize_lines


@dataclass(frozen=True, slots=True)
class Position:
    """Character cell: ``column`` is an offset within line ``row``."""

    column: int = 0
    row: int = 0

    @property
    def raster_key(self) -> tuple[int, int]:
        return (self.row, self.column)

    def is_after(self, other: "Position") -> bool:
        return self.raster_key > other.raster_key


@dataclass(frozen=True, slots=True)
class Interval:
    """Raster-scan range from ``start`` to ``end``.

    The column bounds only apply on the first and last rows. Construction
    does not reorder the endpoints; use ``normalized`` when the caller may
    have supplied them backwards.
    """

    start: Position
    end: Position

    @classmethod
    def on_row(cls, row: int, start_column: int, end_column: int) -> "Interval":
        return cls(Position(start_column, row), Position(end_column, row))

    def normalized(self) -> "Interval":
        if self.start.is_after(self.end):
            return Interval(self.end, self.start)
        return self


@dataclass(frozen=True, slots=True)
class EditorState:
    """Lines, diagnostic intervals, and cursor for one open editor.

    Instances are values: every edit builds a new one. Construction coerces
    rather than rejects, so an empty ``lines`` becomes a single empty line
    and the cursor is clamped onto a valid insertion slot.
    """

    lines: Sequence[str] = ("",)
    errors: AbstractSet[Interval] = field(default_factory=frozenset)
    cursor: Position = Position()

    def __post_init__(self) -> None:
        lines = normalize_lines(self.lines)
        column, row = clamp_cell(lines, self.cursor.column, self.cursor.row)
        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "errors", frozenset(self.errors))
        object.__setattr__(self, "cursor", Position(column, row))

    @classmethod
    def from_text(cls, text: str) -> "EditorState":
        return cls(lines=tuple(text.split("\n")))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor.row]

    def with_lines(self, lines: Iterable[str], cursor: Position) -> "EditorState":
        return replace(self, lines=tuple(lines), cursor=cursor)


def initial_state() -> EditorState:
    """Fresh editor: one empty line, no errors, cursor at the origin."""

    return EditorState()


__all__ = ["Position", "Interval", "EditorState", "initial_state"]
