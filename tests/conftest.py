"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from monkeylang.ast import Identifier, LetStatement
from monkeylang.lexer import tokenize
from monkeylang.parser import ParseResult, parse
from monkeylang.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns a ParseResult."""

    def _parse(source: str, filename: str = "test.monkey") -> ParseResult:
        return parse(source, filename)

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_literals(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token literals match the expected list."""
    actual = [t.literal for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_let(node: object, name: str) -> None:
    """Assert that node is a let statement binding name."""
    assert isinstance(node, LetStatement), f"Expected LetStatement, got {type(node).__name__}"
    assert node.token_literal() == "let"
    assert isinstance(node.name, Identifier)
    assert node.name.value == name, f"Expected name '{name}', got '{node.name.value}'"
    assert node.name.token.literal == name
    assert node.name.token.type == TokenType.IDENT
