"""lisp-lexer: tokenizer for a small Lisp-like surface syntax.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import lisplex

    tokens = lisplex.tokenize("(define pi 3.14)")
    # [Token(LPAREN), Token(KEYWORD, 'define'), Token(SYMBOL, 'pi'),
    #  Token(FLOAT, 3.14), Token(RPAREN)]

    lisplex.__version__
    '0.1.0'
"""
from __future__ import annotations

from lisplex.grammar.tokens import Token, TokenType
from lisplex.lexer.lexer import LexError, Tokenizer, tokenize

__version__: str = "0.1.0"


__all__ = [
    "__version__",
    "tokenize",
    "Tokenizer",
    "Token",
    "TokenType",
    "LexError",
]
