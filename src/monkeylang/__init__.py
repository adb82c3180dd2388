"""Monkey language front end: lexer, parser, and AST."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylang.parser import ParseResult

__version__ = "0.1.0"


def parse(source: str, filename: str = "input.monkey") -> ParseResult:
    """Lex and parse Monkey source into a program plus diagnostics."""
    from monkeylang.parser import parse as _parse

    return _parse(source, filename)
