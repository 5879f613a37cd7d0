"""Input events delivered by the host."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Key press as reported by the host.

    ``key_name`` is either the literal character produced (already shifted,
    so ``"A"`` rather than ``"a"`` + shift) or a named key such as
    ``"Backspace"`` or ``"Enter"``.
    """

    key_name: str
    shift: bool = False
    control: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def modifiers(self) -> tuple[str, ...]:
        flags = (
            ("shift", self.shift),
            ("control", self.control),
            ("alt", self.alt),
            ("meta", self.meta),
        )
        return tuple(name for name, active in flags if active)

    @property
    def has_command_modifier(self) -> bool:
        return self.control or self.alt or self.meta

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key_name,))
        return self.key_name


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer position on the editing surface plus its scroll offset."""

    x: float
    y: float
    scroll_x: float = 0.0
    scroll_y: float = 0.0


__all__ = ["KeyEvent", "PointerEvent"]
