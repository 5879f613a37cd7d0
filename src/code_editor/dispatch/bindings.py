"""Named-key binding table mapping control keys to buffer transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, Optional

from code_editor.buffer import EditorState, backspace, newline

from .models import KeyEvent

Transition = Callable[[EditorState], EditorState]


@dataclass(frozen=True, slots=True)
class KeyAction:
    """Transition bound to an unmodified named key."""

    id: str
    key_name: str
    handler: Transition
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("KeyAction id cannot be empty")
        if not self.key_name:
            raise ValueError("KeyAction key_name cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, state: EditorState) -> EditorState:
        return self.handler(state)


class KeyBindingTable:
    """Owns the named-key actions the dispatcher consults before inserting."""

    def __init__(self, actions: Iterable[KeyAction] = ()) -> None:
        self._actions: Dict[str, KeyAction] = {}
        for action in actions:
            self.register(action)

    def register(self, action: KeyAction, *, replace: bool = False) -> KeyAction:
        existing = self._actions.get(action.key_name)
        if existing is not None and not replace:
            raise ValueError(
                f"Key '{action.key_name}' already bound to '{existing.id}'"
            )
        self._actions[action.key_name] = action
        return action

    def unregister(self, key_name: str) -> Optional[KeyAction]:
        return self._actions.pop(key_name, None)

    def lookup(self, event: KeyEvent) -> Optional[KeyAction]:
        """Return the action for ``event``; any modifier disqualifies a match."""

        if event.modifiers:
            return None
        return self._actions.get(event.key_name)

    def key_names(self) -> tuple[str, ...]:
        return tuple(sorted(self._actions))

    def __contains__(self, key_name: object) -> bool:
        return key_name in self._actions

    def __iter__(self) -> Iterator[KeyAction]:
        return iter(self._actions.values())

    def __len__(self) -> int:
        return len(self._actions)


DEFAULT_KEY_ACTIONS: tuple[KeyAction, ...] = (
    KeyAction(
        id="buffer.backspace",
        key_name="Backspace",
        handler=backspace,
        description="Delete the character before the cursor",
    ),
    KeyAction(
        id="buffer.newline",
        key_name="Enter",
        handler=newline,
        description="Split the line at the cursor",
    ),
)


def default_bindings() -> KeyBindingTable:
    return KeyBindingTable(DEFAULT_KEY_ACTIONS)


__all__ = [
    "KeyAction",
    "KeyBindingTable",
    "DEFAULT_KEY_ACTIONS",
    "default_bindings",
    "Transition",
]
