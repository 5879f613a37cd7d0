"""Renderer-facing line views."""

from .demo import demo_state
from .lines import LineView, line_view, visible_lines

__all__ = ["LineView", "line_view", "visible_lines", "demo_state"]
