"""Unit tests for lisplex.cli.main — the ``lisplex`` command."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from lisplex.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def source_file(tmp_path: Path, circle_area_source: str) -> Path:
    path = tmp_path / "circle.lisp"
    path.write_text(circle_area_source, encoding="utf-8")
    return path


class TestTokenizeCommand:
    def test_table_output(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokenize", str(source_file)])
        assert result.exit_code == 0, result.output
        assert "KEYWORD" in result.output
        assert "BINARY_OP" in result.output
        assert "21 token(s)" in result.output

    def test_json_output_file(self, source_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tokens.json"
        result = _make_runner().invoke(
            cli, ["tokenize", str(source_file), "--format", "json", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert len(data) == 21
        assert data[2] == {"kind": "KEYWORD", "value": "define"}

    def test_yaml_output_file(self, source_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tokens.yaml"
        result = _make_runner().invoke(
            cli, ["tokenize", str(source_file), "--format", "yaml", "--output", str(out)]
        )
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert data[9] == {"kind": "FLOAT", "value": 3.14}

    def test_json_to_stdout(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokenize", str(source_file), "--format", "json"])
        assert result.exit_code == 0, result.output
        assert "LPAREN" in result.output

    def test_reads_stdin(self) -> None:
        result = _make_runner().invoke(cli, ["tokenize", "-"], input="(+ 1 2)")
        assert result.exit_code == 0, result.output
        assert "5 token(s)" in result.output

    def test_missing_file_exits_nonzero(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(cli, ["tokenize", str(tmp_path / "nope.lisp")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_malformed_number_exits_nonzero(self) -> None:
        result = _make_runner().invoke(cli, ["tokenize", "-"], input="(+ 1.2.3 4)")
        assert result.exit_code == 1
        assert "Lex error" in result.output

    def test_strict_flag_rejects_unknown_character(self) -> None:
        runner = _make_runner()
        lenient = runner.invoke(cli, ["tokenize", "-"], input="(a # b)")
        strict = runner.invoke(cli, ["tokenize", "-", "--strict"], input="(a # b)")
        assert lenient.exit_code == 0
        assert "2 token(s)" in lenient.output
        assert strict.exit_code == 1
        assert "Unexpected character" in strict.output

    def test_bracketed_lexemes_are_shown_verbatim(self) -> None:
        result = _make_runner().invoke(cli, ["tokenize", "-"], input='"[/x]" "[bold]hi" a[b]')
        assert result.exit_code == 0, result.output
        assert '"[/x]"' in result.output
        assert '"[bold]hi"' in result.output
        assert "a[b]" in result.output
        assert "3 token(s)" in result.output

    def test_bracketed_lex_error_message_is_printed(self) -> None:
        result = _make_runner().invoke(cli, ["tokenize", "-", "--strict"], input="a [/x]")
        assert result.exit_code == 1
        assert "Unexpected character '['" in result.output

    def test_verbose_flag_is_accepted(self) -> None:
        result = _make_runner().invoke(cli, ["--verbose", "tokenize", "-"], input="x")
        assert result.exit_code == 0, result.output


class TestVersionCommand:
    def test_version_shows_package(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "lisp-lexer" in result.output
        assert expected_version in result.output
