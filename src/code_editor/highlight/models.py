"""Token classes produced by the highlighter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    NORMAL = "normal"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """Contiguous run of a line tagged with one highlight class."""

    text: str
    kind: TokenKind = TokenKind.NORMAL

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("TokenSpan text cannot be empty")

    def __len__(self) -> int:
        return len(self.text)


__all__ = ["TokenKind", "TokenSpan"]
