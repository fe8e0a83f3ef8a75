"""Token definitions for the lisplex surface syntax.

Every lexical unit the tokenizer can produce is a ``Token``: a
``TokenType`` variant plus an optional payload.  The variant set is
closed; parentheses carry no payload, numbers carry a Python ``int`` or
``float``, and every other variant carries its text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Union


class TokenType(Enum):
    """Exhaustive enumeration of lisplex token variants."""

    # -----------------------------------------------------------------
    # Literals
    # -----------------------------------------------------------------
    FLOAT = auto()
    INTEGER = auto()
    STRING = auto()

    # -----------------------------------------------------------------
    # Names
    # -----------------------------------------------------------------
    SYMBOL = auto()
    KEYWORD = auto()
    BINARY_OP = auto()

    # -----------------------------------------------------------------
    # Punctuation
    # -----------------------------------------------------------------
    LPAREN = auto()
    RPAREN = auto()


# Reserved identifiers; never emitted as SYMBOL.
KEYWORDS: Final[frozenset[str]] = frozenset({"define", "if"})

# Leading characters that turn a symbol read into a BINARY_OP.
BINARY_OPERATORS: Final[frozenset[str]] = frozenset({"+", "-", "*", "/"})

TokenValue = Union[float, int, str, None]

_PUNCTUATION: Final[dict[TokenType, str]] = {
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Parameters
    ----------
    type:
        The ``TokenType`` variant for this token.
    value:
        The variant payload: ``float`` for FLOAT, ``int`` for INTEGER,
        ``None`` for parentheses and ``str`` for everything else.
    """

    type: TokenType
    value: TokenValue = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    # ------------------------------------------------------------------
    # Variant constructors
    # ------------------------------------------------------------------

    @classmethod
    def float_(cls, value: float) -> Token:
        return cls(TokenType.FLOAT, float(value))

    @classmethod
    def integer(cls, value: int) -> Token:
        return cls(TokenType.INTEGER, int(value))

    @classmethod
    def symbol(cls, name: str) -> Token:
        return cls(TokenType.SYMBOL, name)

    @classmethod
    def string(cls, contents: str) -> Token:
        return cls(TokenType.STRING, contents)

    @classmethod
    def binary_op(cls, symbol: str) -> Token:
        return cls(TokenType.BINARY_OP, symbol)

    @classmethod
    def keyword(cls, name: str) -> Token:
        return cls(TokenType.KEYWORD, name)

    @classmethod
    def lparen(cls) -> Token:
        return cls(TokenType.LPAREN)

    @classmethod
    def rparen(cls) -> Token:
        return cls(TokenType.RPAREN)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def lexeme(self) -> str:
        """Return the token rendered back to source text.

        String contents are re-wrapped in double quotes; no escaping is
        applied because the tokenizer never unescapes.
        """
        if self.type in _PUNCTUATION:
            return _PUNCTUATION[self.type]
        if self.type is TokenType.STRING:
            return f'"{self.value}"'
        if self.type is TokenType.FLOAT:
            return repr(self.value)
        return str(self.value)
