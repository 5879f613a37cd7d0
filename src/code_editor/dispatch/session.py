"""Host-side holder of the current editor state."""

from __future__ import annotations

from typing import AbstractSet, Callable, Dict, Optional

from code_editor.buffer import EditorState, Interval, initial_state
from code_editor.runtime import telemetry
from code_editor.runtime.config import CellGeometry

from .bindings import KeyBindingTable, default_bindings
from .dispatcher import dispatch, dispatch_click
from .messages import EditorMessage, SetErrors, apply_message
from .models import KeyEvent, PointerEvent


class EventBus:
    """Minimal event bus letting hosts observe session changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class EditorSession:
    """Serializes input events and owns the single current ``EditorState``.

    Each handler computes the next state with the pure core functions,
    stores it, and emits ``"state"`` on the bus when it actually changed.
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        geometry: Optional[CellGeometry] = None,
        bindings: Optional[KeyBindingTable] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._state = state or initial_state()
        self.geometry = geometry or CellGeometry.from_env()
        self.bindings = bindings if bindings is not None else default_bindings()
        self.bus = bus or EventBus()

    @property
    def state(self) -> EditorState:
        return self._state

    def handle_key(self, event: KeyEvent) -> EditorState:
        return self._commit(
            dispatch(event, self._state, bindings=self.bindings), "key"
        )

    def handle_click(self, pointer: PointerEvent) -> EditorState:
        return self._commit(
            dispatch_click(pointer, self._state, self.geometry), "click"
        )

    def apply(self, message: EditorMessage) -> EditorState:
        return self._commit(apply_message(self._state, message), "message")

    def set_errors(self, errors: AbstractSet[Interval]) -> EditorState:
        return self.apply(SetErrors(frozenset(errors)))

    def _commit(self, state: EditorState, source: str) -> EditorState:
        if state == self._state:
            return self._state
        self._state = state
        telemetry.record_event(
            "session.state",
            level="debug",
            data={
                "source": source,
                "lines": state.line_count,
                "cursor": (state.cursor.column, state.cursor.row),
                "errors": len(state.errors),
            },
            logger_name="code_editor.session",
        )
        self.bus.emit("state", state)
        return state


__all__ = ["EditorSession", "EventBus"]
