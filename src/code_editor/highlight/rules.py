"""Ordered prefix rules consumed by the tokenizer.

Each matcher looks at ``line`` from ``pos`` and returns the end index of the
token it recognizes, or ``None`` if the rule does not apply there. Rules are
tried in order and the first hit wins; there is no backtracking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .models import TokenKind

Matcher = Callable[[str, int], Optional[int]]

KEYWORDS: tuple[str, ...] = ("let", "if", "then", "else")
QUOTE = '"'


def is_letter_or_digit(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal()


def is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_identifier_part(ch: str) -> bool:
    return is_letter_or_digit(ch) or ch == "_"


def is_normal(ch: str) -> bool:
    return ch != QUOTE and not is_letter_or_digit(ch)


def _run(line: str, pos: int, part: Callable[[str], bool]) -> int:
    end = pos
    while end < len(line) and part(line[end]):
        end += 1
    return end


def _leading_run(
    start: Callable[[str], bool], part: Callable[[str], bool]
) -> Matcher:
    def match(line: str, pos: int) -> Optional[int]:
        if pos >= len(line) or not start(line[pos]):
            return None
        return _run(line, pos + 1, part)

    return match


def match_keyword(line: str, pos: int) -> Optional[int]:
    # Literal prefix only: "lettuce" yields "let" then "tuce".
    for keyword in KEYWORDS:
        if line.startswith(keyword, pos):
            return pos + len(keyword)
    return None


def match_string(line: str, pos: int) -> Optional[int]:
    if pos >= len(line) or line[pos] != QUOTE:
        return None
    closing = line.find(QUOTE, pos + 1)
    if closing == -1:
        return len(line)
    return closing + 1


match_identifier = _leading_run(is_identifier_start, is_identifier_part)
match_number = _leading_run(str.isdecimal, str.isdecimal)
match_normal = _leading_run(is_normal, is_normal)


@dataclass(frozen=True, slots=True)
class Rule:
    name: str
    kind: TokenKind
    matcher: Matcher

    def match(self, line: str, pos: int) -> Optional[int]:
        end = self.matcher(line, pos)
        if end is None or end <= pos:
            return None
        return end


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("keyword", TokenKind.KEYWORD, match_keyword),
    Rule("identifier", TokenKind.IDENTIFIER, match_identifier),
    Rule("number", TokenKind.NUMBER, match_number),
    Rule("string", TokenKind.STRING, match_string),
    Rule("normal", TokenKind.NORMAL, match_normal),
)

__all__ = [
    "KEYWORDS",
    "DEFAULT_RULES",
    "Matcher",
    "Rule",
    "is_identifier_part",
    "is_identifier_start",
    "is_letter_or_digit",
    "is_normal",
    "match_identifier",
    "match_keyword",
    "match_normal",
    "match_number",
    "match_string",
]
