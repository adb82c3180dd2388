"""Token types, data structures, keyword table, and character classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"  # add, foobar, x, y
    INT = "INT"  # 1343456

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    SLASH = "/"
    ASTERISK = "*"
    GT = ">"
    LT = "<"
    BANG = "!"

    # Two-character operators
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    RETURN = "RETURN"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token: its type and the exact source text it came from.

    Two tokens are equal when type and literal match; the span only locates
    the token in its source.
    """

    type: TokenType
    literal: str
    span: Span | None = field(default=None, compare=False)


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "return": TokenType.RETURN,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
    }
)


def lookup_ident(literal: str) -> TokenType:
    """Return the keyword type for literal, or IDENT."""
    return KEYWORDS.get(literal, TokenType.IDENT)


def is_letter(ch: str) -> bool:
    """Return True if ch may start an identifier (ASCII letter or underscore)."""
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    return ch == " " or ch == "\t" or ch == "\n" or ch == "\r"
