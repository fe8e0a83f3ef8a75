"""Command-line interface for lisp-lexer."""
