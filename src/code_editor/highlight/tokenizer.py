"""Single-line syntax highlighter."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Sequence

from code_editor.runtime import telemetry

from .models import TokenKind, TokenSpan
from .rules import DEFAULT_RULES, Rule

_LOGGER_NAME = "code_editor.highlight"


def tokenize(line: str, *, rules: Sequence[Rule] = DEFAULT_RULES) -> List[TokenSpan]:
    """Partition ``line`` into highlighted spans, left to right.

    At each position the first rule that consumes at least one character
    wins. A character no rule accepts becomes a one-character NORMAL span,
    so the spans always concatenate back to ``line``. Nothing carries over
    between lines: a string left open is highlighted to the end of this
    line only.
    """

    spans: List[TokenSpan] = []
    pos = 0
    while pos < len(line):
        for rule in rules:
            end = rule.match(line, pos)
            if end is not None:
                spans.append(TokenSpan(line[pos:end], rule.kind))
                pos = end
                break
        else:
            telemetry.get_logger(_LOGGER_NAME).warning(
                f"highlighter has no rule for {line[pos]!r}, defaulting to normal"
            )
            spans.append(TokenSpan(line[pos], TokenKind.NORMAL))
            pos += 1
    return spans


@lru_cache(maxsize=4096)
def cached_tokenize(line: str) -> tuple[TokenSpan, ...]:
    """Memoized ``tokenize`` with the default rules, keyed by line text."""

    return tuple(tokenize(line))


__all__ = ["tokenize", "cached_tokenize"]
