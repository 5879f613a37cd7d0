"""Textual host for the editor core."""

from .controller import TextualEditorAdapter, TextualUIHooks, key_event_from_textual

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "key_event_from_textual"]
