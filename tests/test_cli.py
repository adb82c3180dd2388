"""Tests for the CLI module: arg parsing, exit codes, output, end-to-end."""

from __future__ import annotations

from pathlib import Path

import pytest

from monkeylang.cli import CliOptions, build_parser, main, process_file
from monkeylang.errors import ParseError

# ---------------------------------------------------------------------------
# Arg parsing via build_parser
# ---------------------------------------------------------------------------


class TestArgParsing:
    def test_input_only(self) -> None:
        p = build_parser()
        ns = p.parse_args(["prog.monkey"])
        assert ns.input == "prog.monkey"
        assert ns.output is None
        assert ns.emit is None
        assert ns.strict is None

    def test_output_flag(self) -> None:
        p = build_parser()
        ns = p.parse_args(["prog.monkey", "-o", "out.txt"])
        assert ns.output == "out.txt"

    def test_emit_and_strict(self) -> None:
        p = build_parser()
        ns = p.parse_args(["prog.monkey", "--emit", "tokens", "--strict"])
        assert ns.emit == "tokens"
        assert ns.strict is True

    def test_bad_emit_rejected(self) -> None:
        p = build_parser()
        with pytest.raises(SystemExit):
            p.parse_args(["prog.monkey", "--emit", "bytecode"])


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class TestExitCodes:
    def test_success(self, tmp_path: Path) -> None:
        src = tmp_path / "ok.monkey"
        src.write_text("let x = 5;\n")
        assert main([str(src)]) == 0

    def test_parse_error_returns_1(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "bad.monkey"
        src.write_text("let = 5;\n")
        assert main([str(src)]) == 1
        err = capsys.readouterr().err
        assert "error: expected next token to be IDENT" in err
        assert "bad.monkey:1:5" in err

    def test_warning_passes_without_strict(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "warn.monkey"
        src.write_text("foobar;\n")
        assert main([str(src)]) == 0
        assert "warning: unrecognized statement" in capsys.readouterr().err

    def test_warning_fails_with_strict(self, tmp_path: Path) -> None:
        src = tmp_path / "warn.monkey"
        src.write_text("foobar;\n")
        assert main([str(src), "--strict"]) == 1

    def test_missing_input_returns_2(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "nope.monkey")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_bad_config_returns_2(self, tmp_path: Path) -> None:
        src = tmp_path / "ok.monkey"
        src.write_text("let x = 5;\n")
        (tmp_path / "monkeylang.toml").write_text("emit = \n")
        assert main([str(src)]) == 2


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_ast_to_stdout(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "prog.monkey"
        src.write_text("let x = 5;\nlet y = 6;\n")
        assert main([str(src)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Program\n")
        assert "Identifier('x')" in out
        assert "Identifier('y')" in out

    def test_tokens_to_file(self, tmp_path: Path) -> None:
        src = tmp_path / "prog.monkey"
        src.write_text("let x = 5;")
        out = tmp_path / "tokens.txt"
        assert main([str(src), "--emit", "tokens", "-o", str(out)]) == 0
        lines = out.read_text().splitlines()
        assert lines[0] == "LET 'let' 1:1"
        assert lines[-1].startswith("EOF ''")


# ---------------------------------------------------------------------------
# process_file smoke test
# ---------------------------------------------------------------------------


class TestProcessFile:
    def test_basic(self, tmp_path: Path) -> None:
        src = tmp_path / "simple.monkey"
        src.write_text("let answer = 42;\nanswer;\n")
        opts = CliOptions(input_file=src, output_file=None, emit="ast", strict=False)
        text, result = process_file(opts)
        assert "Identifier('answer')" in text
        assert len(result.warnings) == 1
        warning = result.warnings[0].format(result.source, result.filename)
        assert "unrecognized statement starting with IDENT 'answer'" in warning
        assert f"{src}:2:1" in warning

    def test_ast_mode_raises_before_dumping(self, tmp_path: Path) -> None:
        src = tmp_path / "bad.monkey"
        src.write_text("let = 1;\n")
        opts = CliOptions(input_file=src, output_file=None, emit="ast", strict=False)
        with pytest.raises(ParseError, match="expected next token to be IDENT"):
            process_file(opts)

    def test_tokens_mode_returns_dump_with_errors(self, tmp_path: Path) -> None:
        src = tmp_path / "bad.monkey"
        src.write_text("let = 1;\n")
        opts = CliOptions(input_file=src, output_file=None, emit="tokens", strict=False)
        text, result = process_file(opts)
        assert text.splitlines()[1] == "ASSIGN '=' 1:5"
        assert not result.ok


# ---------------------------------------------------------------------------
# Token dump with failing diagnostics
# ---------------------------------------------------------------------------


class TestTokensWithDiagnostics:
    def test_illegal_character_still_dumped(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "illegal.monkey"
        src.write_text("let x = 5 @ 3;")
        assert main([str(src), "--emit", "tokens"]) == 1
        captured = capsys.readouterr()
        assert "ILLEGAL '@' 1:11" in captured.out
        assert captured.out.splitlines()[-1].startswith("EOF ''")
        assert "error: illegal character '@'" in captured.err

    def test_structural_error_still_dumped(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "bad.monkey"
        src.write_text("let = 5;")
        assert main([str(src), "--emit", "tokens"]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines()[0] == "LET 'let' 1:1"
        assert "expected next token to be IDENT" in captured.err

    def test_strict_warning_still_dumped(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "warn.monkey"
        src.write_text("foobar;")
        assert main([str(src), "--emit", "tokens", "--strict"]) == 1
        captured = capsys.readouterr()
        assert "IDENT 'foobar' 1:1" in captured.out
        assert "warning: unrecognized statement" in captured.err

    def test_ast_mode_prints_nothing_on_error(self, tmp_path: Path, capsys) -> None:
        src = tmp_path / "illegal.monkey"
        src.write_text("let x = 5 @ 3;")
        assert main([str(src)]) == 1
        assert capsys.readouterr().out == ""
