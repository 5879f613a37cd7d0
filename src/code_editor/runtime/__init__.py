"""Runtime services: telemetry and renderer-supplied configuration."""

from . import telemetry
from .config import TERMINAL_GEOMETRY, CellGeometry, GeometryError

__all__ = ["telemetry", "CellGeometry", "GeometryError", "TERMINAL_GEOMETRY"]
