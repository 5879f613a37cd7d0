"""Character-cell geometry used to map pointer coordinates onto buffer cells."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .telemetry import ENV_PREFIX


class GeometryError(ValueError):
    """Raised when a geometry value cannot describe a character grid."""

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True, slots=True)
class CellGeometry:
    """Pixel (or terminal cell) dimensions owned by the renderer.

    ``left_margin`` is the distance from the surface origin to column 0 of
    the text; ``left_gutter`` is only a rendering hint for the line-number
    column and plays no part in coordinate conversion.
    """

    char_width: float = 11.0
    line_height: float = 30.0
    left_margin: float = 100.0
    left_gutter: float = 20.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        if self.char_width <= 0:
            raise GeometryError("char_width must be positive", field_name="char_width")
        if self.line_height <= 0:
            raise GeometryError(
                "line_height must be positive", field_name="line_height"
            )
        if self.left_margin < 0:
            raise GeometryError(
                "left_margin cannot be negative", field_name="left_margin"
            )
        if self.left_gutter < 0:
            raise GeometryError(
                "left_gutter cannot be negative", field_name="left_gutter"
            )

    @classmethod
    def from_env(cls, *, base: Optional["CellGeometry"] = None) -> "CellGeometry":
        """Overlay ``CODE_EDITOR_*`` geometry variables onto ``base``."""

        base = base or cls()
        return cls(
            char_width=_env_float("CHAR_WIDTH", base.char_width),
            line_height=_env_float("LINE_HEIGHT", base.line_height),
            left_margin=_env_float("LEFT_MARGIN", base.left_margin),
            left_gutter=_env_float("LEFT_GUTTER", base.left_gutter),
            origin_x=base.origin_x,
            origin_y=base.origin_y,
        )


def _env_float(name: str, fallback: float) -> float:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return fallback
    try:
        return float(raw)
    except ValueError as exc:
        raise GeometryError(
            f"{ENV_PREFIX}{name} must be a number, got {raw!r}",
            field_name=name.lower(),
        ) from exc


TERMINAL_GEOMETRY = CellGeometry(
    char_width=1.0, line_height=1.0, left_margin=0.0, left_gutter=1.0
)

__all__ = ["CellGeometry", "GeometryError", "TERMINAL_GEOMETRY"]
