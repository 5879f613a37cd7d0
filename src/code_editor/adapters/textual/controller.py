"""Textual adapter that feeds terminal input into an ``EditorSession``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Callable, Optional, Sequence

from code_editor.buffer import EditorState, Interval
from code_editor.dispatch import EditorSession, KeyEvent, PointerEvent
from code_editor.runtime import telemetry
from code_editor.view import LineView, visible_lines

_NAMED_KEYS = {
    "backspace": "Backspace",
    "ctrl+h": "Backspace",
    "enter": "Enter",
    "return": "Enter",
}
_MODIFIER_ALIASES = {
    "ctrl": "control",
    "control": "control",
    "alt": "alt",
    "option": "alt",
    "meta": "meta",
    "super": "meta",
    "cmd": "meta",
    "shift": "shift",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_lines: Callable[[Sequence[LineView]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def key_event_from_textual(key: str, character: Optional[str] = None) -> KeyEvent:
    """Translate Textual's ``key``/``character`` pair into a ``KeyEvent``.

    Textual folds modifiers into the key name (``"ctrl+a"``); printable
    characters are taken from ``character`` so shifted keys arrive as the
    character they produce.
    """

    if key in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[key])

    *prefix, name = key.split("+")
    modifiers = {
        _MODIFIER_ALIASES[part] for part in prefix if part in _MODIFIER_ALIASES
    }

    if name in _NAMED_KEYS:
        key_name = _NAMED_KEYS[name]
    elif character and len(character) == 1 and character.isprintable():
        key_name = character
        modifiers.discard("shift")
    elif len(name) == 1:
        key_name = name
    else:
        key_name = name.replace("_", " ").title().replace(" ", "")

    return KeyEvent(
        key_name,
        shift="shift" in modifiers,
        control="control" in modifiers,
        alt="alt" in modifiers,
        meta="meta" in modifiers,
    )


class TextualEditorAdapter:
    """Bridges an ``EditorSession`` to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.logger = telemetry.get_logger("code_editor.adapters.textual")
        self.session.bus.subscribe("state", lambda _state: self._refresh())
        self._refresh()

    @property
    def state(self) -> EditorState:
        return self.session.state

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> EditorState:
        event = key_event_from_textual(key, character)
        self._log_state("key ->", key=key, mapped=event.token)
        state = self.session.handle_key(event)
        self._log_state("state <-")
        return state

    def handle_click(
        self, x: float, y: float, *, scroll_x: float = 0.0, scroll_y: float = 0.0
    ) -> EditorState:
        pointer = PointerEvent(x=x, y=y, scroll_x=scroll_x, scroll_y=scroll_y)
        self._log_state("click ->", x=x, y=y)
        state = self.session.handle_click(pointer)
        self._log_state("state <-")
        return state

    def set_errors(self, errors: AbstractSet[Interval]) -> EditorState:
        return self.session.set_errors(errors)

    def status_text(self) -> str:
        state = self.session.state
        errors = len(state.errors)
        suffix = "error" if errors == 1 else "errors"
        return (
            f"Ln {state.cursor.row + 1}, Col {state.cursor.column + 1}"
            f" | {state.line_count} lines | {errors} {suffix}"
        )

    def _refresh(self) -> None:
        self.hooks.update_lines(visible_lines(self.session.state))
        self.hooks.update_status(self.status_text())

    def _log_state(self, prefix: str, **fields: object) -> None:
        state = self.session.state
        snapshot: dict[str, object] = {
            "cursor": (state.cursor.column, state.cursor.row),
            "lines": state.line_count,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        line = " ".join(parts)
        self.logger.debug(line)
        self.hooks.log(line)


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "key_event_from_textual"]
