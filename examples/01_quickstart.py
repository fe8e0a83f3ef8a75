#!/usr/bin/env python3
"""Example: Quickstart — lisp-lexer

Minimal working example: tokenize a program, inspect the tokens,
serialize them to JSON and see strict mode reject bad input.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install lisp-lexer
"""
from __future__ import annotations

import lisplex
from lisplex.serializer import TokenSerializer

SOURCE = """
(
  (define r 10)
  (define pi 3.14)
  (* pi (* r r))
)
"""


def main() -> None:
    print(f"lisp-lexer version: {lisplex.__version__}")

    # Step 1: Tokenize source text
    tokens = lisplex.tokenize(SOURCE)
    print(f"Tokenized into {len(tokens)} tokens")
    for token in tokens[:6]:
        print(f"  {token.type.name:<10} {token.lexeme}")

    # Step 2: Serialize to JSON
    text = TokenSerializer().to_json(tokens[:3])
    print(f"\nFirst tokens as JSON:\n{text}")

    # Step 3: Quirks of the default mode
    print(f"\n'+foo' -> {lisplex.tokenize('+foo')}")
    print(f"'(a # b)' -> {lisplex.tokenize('(a # b)')}")

    # Step 4: Strict mode reports what the default mode tolerates
    try:
        lisplex.tokenize('(print "unterminated', strict=True)
    except lisplex.LexError as exc:
        print(f"strict: {exc}")


if __name__ == "__main__":
    main()
