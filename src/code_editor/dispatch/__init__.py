"""Input dispatch: key and pointer events to buffer transitions."""

from .bindings import DEFAULT_KEY_ACTIONS, KeyAction, KeyBindingTable, default_bindings
from .dispatcher import dispatch, dispatch_click, pointer_to_cell
from .messages import (
    EditorMessage,
    SetCursor,
    SetErrors,
    UpdateCode,
    UpdateState,
    apply_message,
)
from .models import KeyEvent, PointerEvent
from .session import EditorSession, EventBus

__all__ = [
    "KeyEvent",
    "PointerEvent",
    "KeyAction",
    "KeyBindingTable",
    "DEFAULT_KEY_ACTIONS",
    "default_bindings",
    "dispatch",
    "dispatch_click",
    "pointer_to_cell",
    "EditorMessage",
    "SetCursor",
    "SetErrors",
    "UpdateCode",
    "UpdateState",
    "apply_message",
    "EditorSession",
    "EventBus",
]
