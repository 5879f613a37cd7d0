"""Error underline segmentation."""

from .projector import OverlaySegment, line_errors, project_line

__all__ = ["OverlaySegment", "line_errors", "project_line"]
