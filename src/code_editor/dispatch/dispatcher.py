"""Map key presses and pointer clicks onto buffer transitions."""

from __future__ import annotations

from typing import Optional

from code_editor.buffer import EditorState, insert_char, is_insertable, set_cursor
from code_editor.runtime import telemetry
from code_editor.runtime.config import CellGeometry

from .bindings import KeyBindingTable, default_bindings
from .models import KeyEvent, PointerEvent

_DEFAULT_BINDINGS = default_bindings()


def dispatch(
    event: KeyEvent,
    state: EditorState,
    *,
    bindings: Optional[KeyBindingTable] = None,
) -> EditorState:
    """Apply the transition selected by ``event`` and return the new state.

    Unmodified named keys go through the binding table (``Backspace`` and
    ``Enter`` by default). A single printable character is inserted unless
    control, alt, or meta is held; shift is allowed since it already shaped
    the character. Everything else returns ``state`` unchanged.
    """

    table = _DEFAULT_BINDINGS if bindings is None else bindings
    with telemetry.span(
        "dispatch::key",
        component="dispatch",
        metadata={"key": event.token},
    ) as handle:
        action = table.lookup(event)
        if action is not None:
            handle.add_metadata("action", action.id)
            return action(state)
        if not event.has_command_modifier and is_insertable(event.key_name):
            handle.add_metadata("action", "buffer.insert_char")
            return insert_char(state, event.key_name)
        handle.add_metadata("action", "noop")
        return state


def pointer_to_cell(pointer: PointerEvent, geometry: CellGeometry) -> tuple[int, int]:
    """Estimate the ``(column, row)`` under ``pointer``.

    The column snaps to the nearest character boundary so a click on the
    right half of a glyph lands after it. Neither value is clamped here.
    """

    x = (
        pointer.x + pointer.scroll_x - geometry.origin_x - geometry.left_margin
    ) / geometry.char_width
    y = (pointer.y + pointer.scroll_y - geometry.origin_y) / geometry.line_height
    return max(int(x + 0.5), 0), int(y)


def dispatch_click(
    pointer: PointerEvent, state: EditorState, geometry: CellGeometry
) -> EditorState:
    with telemetry.span(
        "dispatch::click",
        component="dispatch",
        metadata={"x": pointer.x, "y": pointer.y},
    ) as handle:
        column, row = pointer_to_cell(pointer, geometry)
        handle.add_metadata("cell", (column, row))
        return set_cursor(state, column, row)


__all__ = ["dispatch", "dispatch_click", "pointer_to_cell"]
