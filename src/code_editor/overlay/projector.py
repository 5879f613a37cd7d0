"""Project error intervals onto one line as underline segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from code_editor.buffer.intervals import intersect
from code_editor.buffer.state import Interval


@dataclass(frozen=True, slots=True)
class OverlaySegment:
    """Run of ``length`` columns that is (or is not) underlined."""

    is_error: bool
    length: int


def line_errors(
    line_index: int, line_length: int, errors: Iterable[Interval]
) -> List[tuple[int, int]]:
    """Return sorted ``(start, end)`` column pairs of errors touching the line."""

    line_span = Interval.on_row(line_index, 0, line_length + 1)
    ranges: List[tuple[int, int]] = []
    for error in errors:
        clipped = intersect(error.normalized(), line_span)
        if clipped is not None:
            ranges.append((clipped.start.column, clipped.end.column))
    ranges.sort()
    return ranges


def project_line(
    line_index: int, line_length: int, errors: Iterable[Interval]
) -> List[OverlaySegment]:
    """Segment columns ``0..line_length`` (one past the end included).

    Segment lengths always sum to ``line_length + 1``. Errors that overlap
    are clamped to where the previous one ended, ranges that end up empty
    are dropped, and touching error runs are merged into one segment.
    """

    total = max(line_length, 0) + 1
    segments: List[OverlaySegment] = []
    covered = 0
    for start, end in line_errors(line_index, total - 1, errors):
        start = max(start, covered)
        end = min(end, total)
        if start >= end:
            continue
        if start > covered:
            segments.append(OverlaySegment(False, start - covered))
        if segments and segments[-1].is_error and start == covered:
            segments[-1] = OverlaySegment(True, segments[-1].length + end - start)
        else:
            segments.append(OverlaySegment(True, end - start))
        covered = end
    if covered < total:
        segments.append(OverlaySegment(False, total - covered))
    return segments


__all__ = ["OverlaySegment", "line_errors", "project_line"]
