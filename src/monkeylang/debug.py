"""Human-readable AST and token dumps."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from monkeylang.ast import Identifier, IntegerLiteral, LetStatement, Node, Program
from monkeylang.tokens import Token


def dump_ast(program: Program, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write("Program\n")
    for stmt in program.statements:
        _dump_node(stmt, 1, file)


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line: type, literal, and start position."""
    for tok in tokens:
        where = ""
        if tok.span is not None:
            where = f" {tok.span.start.line}:{tok.span.start.column}"
        file.write(f"{tok.type.name} {tok.literal!r}{where}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Node | None, depth: int, f: TextIO) -> None:
    if node is None:
        f.write(f"{_indent(depth)}<no value>\n")
    elif isinstance(node, LetStatement):
        f.write(f"{_indent(depth)}LetStatement\n")
        _dump_node(node.name, depth + 1, f)
        _dump_node(node.value, depth + 1, f)
    elif isinstance(node, Identifier):
        f.write(f"{_indent(depth)}Identifier({node.value!r})\n")
    elif isinstance(node, IntegerLiteral):
        f.write(f"{_indent(depth)}IntegerLiteral({node.value})\n")
