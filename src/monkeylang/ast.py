"""AST node types for parsed Monkey programs.

The node model is a closed union: each variant carries a class-level
``kind`` tag and only the fields that belong to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from monkeylang.tokens import Token


class NodeKind(Enum):
    LET_STATEMENT = auto()
    IDENTIFIER = auto()
    INTEGER_LITERAL = auto()


@dataclass(frozen=True, slots=True)
class Identifier:
    """A bound or referenced name."""

    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """Integer literal with its parsed value."""

    kind: ClassVar[NodeKind] = NodeKind.INTEGER_LITERAL

    token: Token
    value: int

    def token_literal(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class LetStatement:
    """``let <name> = <value>;``, value stays None until expressions are parsed."""

    kind: ClassVar[NodeKind] = NodeKind.LET_STATEMENT

    token: Token
    name: Identifier
    value: Node | None = None

    def token_literal(self) -> str:
        return self.token.literal


Node = LetStatement | Identifier | IntegerLiteral


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: top-level statements in source order."""

    statements: tuple[Node, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""
