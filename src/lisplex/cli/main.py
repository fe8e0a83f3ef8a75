"""CLI entry point for lisp-lexer.

Invoked as::

    lisplex [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m lisplex.cli.main

Commands
--------
tokenize    Tokenize a source file and print the tokens
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from lisplex.grammar.tokens import Token

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a source file (``-`` for stdin), exiting on error."""
    if path == "-":
        with click.open_file(path, encoding="utf-8") as stream:
            return stream.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _tokenize_or_exit(source: str, path: str, strict: bool) -> list["Token"]:
    """Tokenize source, printing the error and exiting on failure."""
    from lisplex.lexer import LexError, tokenize

    try:
        return tokenize(source, strict=strict)
    except LexError as exc:
        err_console.print(f"[red]Lex error[/red] in {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _kind_color(kind_name: str) -> str:
    """Map a TokenType name to a Rich color string."""
    colors = {
        "KEYWORD": "magenta",
        "BINARY_OP": "yellow",
        "STRING": "green",
        "INTEGER": "cyan",
        "FLOAT": "cyan",
        "LPAREN": "dim",
        "RPAREN": "dim",
    }
    return colors.get(kind_name, "white")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="lisp-lexer")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Tokenizer for a small Lisp-like surface syntax."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from lisplex import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]lisp-lexer[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# tokenize command
# ---------------------------------------------------------------------------


@cli.command(name="tokenize")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Token output format",
)
@click.option("--strict", is_flag=True, default=False, help="Fail on unterminated strings and unknown characters")
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def tokenize_command(file: str, output_format: str, strict: bool, output: str | None) -> None:
    """Tokenize a source file and print the tokens.

    FILE is the path to the source file, or - for stdin.
    """
    from lisplex.serializer import TokenSerializer

    source = _read_source(file)
    tokens = _tokenize_or_exit(source, file, strict)
    output_format = output_format.lower()

    if output_format == "table":
        table = Table(title=f"Tokens: {escape(file)}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind", style="bold", min_width=10)
        table.add_column("Lexeme")
        for index, token in enumerate(tokens):
            color = _kind_color(token.type.name)
            table.add_row(str(index), f"[{color}]{token.type.name}[/{color}]", escape(token.lexeme))
        console.print(table)
        console.print(f"\n[bold]Summary:[/bold] {len(tokens)} token(s)")
        return

    serializer = TokenSerializer()
    if output_format == "json":
        text = serializer.to_json(tokens, indent=2)
    else:
        text = serializer.to_yaml(tokens)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Tokens written to[/green] {escape(output)}")
    else:
        syntax = Syntax(text, output_format, line_numbers=True)
        console.print(syntax)


if __name__ == "__main__":
    cli()
