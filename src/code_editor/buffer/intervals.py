"""Raster-order interval intersection used by the error overlay."""

from __future__ import annotations

from typing import Optional

from .state import Interval, Position


def _later_start(a: Position, b: Position) -> Position:
    if a.row == b.row:
        return Position(max(a.column, b.column), a.row)
    return a if a.row > b.row else b


def _earlier_end(a: Position, b: Position) -> Position:
    if a.row == b.row:
        return Position(min(a.column, b.column), a.row)
    return a if a.row < b.row else b


def intersect(a: Interval, b: Interval) -> Optional[Interval]:
    """Return the raster-order overlap of ``a`` and ``b``, or ``None``.

    Both intervals are read as raster scans (row-major, column within row).
    The overlap runs from the later of the two starts to the earlier of the
    two ends; if that start falls strictly after that end there is no
    overlap. Inputs are used exactly as given, so a backwards interval
    generally intersects to ``None``.
    """

    start = _later_start(a.start, b.start)
    end = _earlier_end(a.end, b.end)
    if start.is_after(end):
        return None
    return Interval(start, end)


__all__ = ["intersect"]
