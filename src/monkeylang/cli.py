"""Command-line interface for monkeylang."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from monkeylang.errors import ParseError

if TYPE_CHECKING:
    from monkeylang.parser import ParseResult

EMIT_CHOICES = ("ast", "tokens")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    emit: str
    strict: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkeylang",
        description="Lex and parse Monkey source files",
    )
    p.add_argument("input", help="Input .monkey file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--emit",
        choices=EMIT_CHOICES,
        default=None,
        help="What to print: the AST or the token stream (default: ast)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on warnings such as unrecognized statements",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkeylang.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "monkeylang.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    emit = "ast"
    cfg_emit = config.get("emit")
    if isinstance(cfg_emit, str) and cfg_emit in EMIT_CHOICES:
        emit = cfg_emit
    if args.emit is not None:
        emit = args.emit

    strict = False
    cfg_strict = config.get("strict")
    if isinstance(cfg_strict, bool):
        strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        emit=emit,
        strict=strict,
    )


def process_file(options: CliOptions) -> tuple[str, ParseResult]:
    """Read and parse a Monkey file, returning (output text, parse result).

    In AST mode a parse with failing diagnostics raises ParseError before
    anything is dumped. In token mode every token is dumped, ILLEGAL ones
    included, and the caller reports the diagnostics afterwards. Token mode
    lexes the source twice: once for the dump and once inside the parser,
    which pulls from its own lexer.
    """
    from monkeylang.debug import dump_ast, dump_tokens
    from monkeylang.lexer import tokenize
    from monkeylang.parser import parse

    source = options.input_file.read_text(encoding="utf-8")
    filename = str(options.input_file)
    result = parse(source, filename)

    out = io.StringIO()
    if options.emit == "tokens":
        dump_tokens(tokenize(source, filename), file=out)
    else:
        dump_ast(result.check(strict=options.strict), file=out)

    return out.getvalue(), result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        text, result = process_file(options)
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 2
    except ParseError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    try:
        result.check(strict=options.strict)
    except ParseError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if result.warnings:
        warnings = (d.format(result.source, result.filename) for d in result.warnings)
        print("\n\n".join(warnings), file=sys.stderr)

    return 0
