"""lisplex lexer module.

Exports the ``Tokenizer`` class, the ``tokenize`` convenience function
and ``LexError``.
"""
from __future__ import annotations

from lisplex.lexer.lexer import LexError, Tokenizer, tokenize

__all__ = ["Tokenizer", "tokenize", "LexError"]
