"""Clamping helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence


def clamp_row(lines: Sequence[str], row: int) -> int:
    return max(0, min(row, len(lines) - 1))


def clamp_cell(lines: Sequence[str], column: int, row: int) -> tuple[int, int]:
    """Return ``(column, row)`` pulled back onto a valid insertion slot.

    Row is clamped first so the column bound comes from the line the cursor
    actually lands on. ``lines`` must not be empty.
    """

    row = clamp_row(lines, row)
    column = max(0, min(column, len(lines[row])))
    return column, row


def normalize_lines(lines: Sequence[str]) -> tuple[str, ...]:
    """Coerce ``lines`` to a non-empty tuple. A bare string is split on newlines."""

    if isinstance(lines, str):
        return tuple(lines.split("\n"))
    normalized = tuple(str(line) for line in lines)
    return normalized or ("",)


__all__ = ["clamp_row", "clamp_cell", "normalize_lines"]
