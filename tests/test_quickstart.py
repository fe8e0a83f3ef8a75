"""Test that the quickstart API works for lisp-lexer."""
from __future__ import annotations


def test_quickstart_tokenize_import() -> None:
    import lisplex

    assert callable(lisplex.tokenize)


def test_quickstart_version(expected_version: str) -> None:
    import lisplex

    assert lisplex.__version__ == expected_version


def test_quickstart_tokenize() -> None:
    import lisplex

    tokens = lisplex.tokenize("(define pi 3.14)")
    assert [t.type for t in tokens] == [
        lisplex.TokenType.LPAREN,
        lisplex.TokenType.KEYWORD,
        lisplex.TokenType.SYMBOL,
        lisplex.TokenType.FLOAT,
        lisplex.TokenType.RPAREN,
    ]


def test_quickstart_strict_mode() -> None:
    import pytest

    import lisplex

    with pytest.raises(lisplex.LexError):
        lisplex.tokenize('"open', strict=True)


def test_quickstart_public_names(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    for name in module.__all__:
        assert hasattr(module, name)
