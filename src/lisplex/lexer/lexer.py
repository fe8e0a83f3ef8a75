"""lisplex Tokenizer: converts raw source text into a flat list of tokens.

The tokenizer is a single-pass scanner with one character of lookahead.
Each call to ``Tokenizer.next_token`` skips leading whitespace and then
dispatches on the lookahead character:

    - ``(`` and ``)`` become LPAREN / RPAREN
    - ``"`` starts a STRING, read up to the next ``"`` with no escapes
    - a decimal digit starts a number; text containing ``.`` is a FLOAT,
      otherwise an INTEGER
    - a letter or one of ``+ - * /`` starts a symbol read, which runs to
      the next whitespace or parenthesis and is then classified as
      KEYWORD, BINARY_OP or SYMBOL

A symbol read does not stop at operator or digit characters, so
``+foo`` is a single ``BINARY_OP("+foo")`` and ``abc+def`` a single
``SYMBOL``.  Any other character ends tokenization as if the input had
run out; with ``strict=True`` it raises ``LexError`` instead, and so
does an unterminated string.  Malformed numbers such as ``1.2.3`` always
raise.
"""
from __future__ import annotations

import logging
from typing import Final, Iterator

from lisplex.grammar.tokens import BINARY_OPERATORS, KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_INT64_MAX: Final[int] = 2**63 - 1
_SYMBOL_STOP: Final[frozenset[str]] = frozenset({"(", ")"})


class LexError(Exception):
    """Raised when the tokenizer cannot classify its input.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Tokenizer error: {message}")
        self.lex_message = message


class Tokenizer:
    """Single-pass lisplex tokenizer.

    Parameters
    ----------
    source:
        The complete source text to tokenize.
    strict:
        When ``True``, unterminated strings and unrecognized characters
        raise ``LexError`` instead of degrading silently.
    """

    __slots__ = ("_source", "_pos", "_current", "_halted", "_strict", "keywords", "binary_operators")

    def __init__(self, source: str, *, strict: bool = False) -> None:
        self._source: str = source
        self._pos: int = 0
        self._current: str | None = source[0] if source else None
        self._halted: bool = False
        self._strict: bool = strict
        self.keywords: frozenset[str] = KEYWORDS
        self.binary_operators: frozenset[str] = BINARY_OPERATORS

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def exhausted(self) -> bool:
        """Return True when the lookahead is at end of input or the scan has halted.

        Trailing whitespace is only skipped by the next ``next_token`` call,
        so a tokenizer with nothing but whitespace left reports False until
        that call returns ``None``.
        """
        return self._halted or self._current is None

    def next_token(self) -> Token | None:
        """Scan and return the next token, or ``None`` at end of input.

        Once ``None`` has been returned, every further call returns
        ``None`` without touching the scanner state.

        Raises
        ------
        LexError
            On a malformed number, or in strict mode on an unterminated
            string or an unrecognized character.
        """
        if self._halted:
            return None

        self._skip_whitespace()
        ch = self._current

        if ch is None:
            return None
        if ch == "(":
            self._advance()
            return Token(TokenType.LPAREN)
        if ch == ")":
            self._advance()
            return Token(TokenType.RPAREN)
        if ch == '"':
            return Token(TokenType.STRING, self._read_string())
        if ch.isdecimal():
            return self._number_token(self._read_number())
        if ch.isalpha() or ch in self.binary_operators:
            return self._symbol_token(self._read_symbol())

        if self._strict:
            raise LexError(f"Unexpected character {ch!r}")
        logger.debug("Stopping at unrecognized character %r (offset %d)", ch, self._pos)
        self._halted = True
        return None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _advance(self) -> str | None:
        """Move the lookahead one character forward and return it."""
        self._pos += 1
        self._current = self._source[self._pos] if self._pos < len(self._source) else None
        return self._current

    def _skip_whitespace(self) -> None:
        while self._current is not None and self._current.isspace():
            self._advance()

    def _read_symbol(self) -> str:
        """Consume a maximal run up to whitespace or a parenthesis."""
        start = self._pos
        ch = self._current
        while ch is not None and not ch.isspace() and ch not in _SYMBOL_STOP:
            ch = self._advance()
        return self._source[start : self._pos]

    def _read_number(self) -> str:
        """Consume a maximal run of decimal digits and dots."""
        start = self._pos
        ch = self._current
        while ch is not None and (ch.isdecimal() or ch == "."):
            ch = self._advance()
        return self._source[start : self._pos]

    def _read_string(self) -> str:
        """Consume a double-quoted string; the quotes are not returned."""
        self._advance()  # opening "
        start = self._pos
        while self._current is not None:
            if self._current == '"':
                contents = self._source[start : self._pos]
                self._advance()  # closing "
                return contents
            self._advance()

        if self._strict:
            raise LexError("Unterminated string literal")
        logger.debug("Unterminated string literal at end of input")
        return self._source[start:]

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _number_token(self, text: str) -> Token:
        if "." in text:
            try:
                return Token(TokenType.FLOAT, float(text))
            except ValueError:
                raise LexError(f"Malformed float literal {text!r}") from None

        try:
            value = int(text)
        except ValueError:
            # Runs past the interpreter's digit limit cannot fit either.
            raise LexError(f"Integer literal of {len(text)} digits does not fit in 64 bits") from None
        if value > _INT64_MAX:
            raise LexError(f"Integer literal {text!r} does not fit in 64 bits")
        return Token(TokenType.INTEGER, value)

    def _symbol_token(self, text: str) -> Token:
        if text in self.keywords:
            return Token(TokenType.KEYWORD, text)
        if text[0] in self.binary_operators:
            return Token(TokenType.BINARY_OP, text)
        return Token(TokenType.SYMBOL, text)


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str, *, strict: bool = False) -> list[Token]:
    """Tokenize a source string and return the complete token list.

    Parameters
    ----------
    source:
        Source text, already decoded.
    strict:
        Forwarded to ``Tokenizer``.

    Returns
    -------
    list[Token]
        All tokens in source order.  Empty input yields an empty list.

    Raises
    ------
    LexError
        On a malformed number, or in strict mode on an unterminated
        string or an unrecognized character.

    Example
    -------
    ::

        from lisplex.lexer import tokenize
        tokens = tokenize("(define pi 3.14)")
    """
    tokens = list(Tokenizer(source, strict=strict))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
