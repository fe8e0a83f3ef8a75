"""lisplex grammar: token vocabulary and classification sets."""
from __future__ import annotations

from lisplex.grammar.tokens import BINARY_OPERATORS, KEYWORDS, Token, TokenType

__all__ = ["BINARY_OPERATORS", "KEYWORDS", "Token", "TokenType"]
