"""Lexical highlighting of single editor lines."""

from .models import TokenKind, TokenSpan
from .rules import DEFAULT_RULES, KEYWORDS, Rule
from .tokenizer import cached_tokenize, tokenize

__all__ = [
    "TokenKind",
    "TokenSpan",
    "Rule",
    "DEFAULT_RULES",
    "KEYWORDS",
    "tokenize",
    "cached_tokenize",
]
