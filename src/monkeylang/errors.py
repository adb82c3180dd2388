"""Parse diagnostics with formatted source context."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from monkeylang.tokens import Position, Span, Token, TokenType


class DiagnosticKind(Enum):
    UNEXPECTED_TOKEN = auto()  # an expected token type was not found
    UNRECOGNIZED_STATEMENT = auto()  # no statement form starts with this token
    ILLEGAL_TOKEN = auto()  # the lexer could not classify a character


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recorded parse failure, located at the offending token."""

    kind: DiagnosticKind
    severity: Severity
    message: str
    token: Token
    expected: TokenType | None = None

    @property
    def span(self) -> Span:
        if self.token.span is not None:
            return self.token.span
        origin = Position(1, 1, 0)
        return Span(origin, origin)

    def format(self, source: str, filename: str = "input.monkey") -> str:
        lines = source.splitlines(keepends=True)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{self.severity.value}: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


def unexpected_token(expected: TokenType, actual: Token) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNEXPECTED_TOKEN,
        Severity.ERROR,
        f"expected next token to be {expected.value}, got {actual.type.value} instead",
        actual,
        expected,
    )


def unrecognized_statement(token: Token) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNRECOGNIZED_STATEMENT,
        Severity.WARNING,
        f"unrecognized statement starting with {token.type.value} '{token.literal}'",
        token,
    )


def illegal_token(token: Token) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.ILLEGAL_TOKEN,
        Severity.ERROR,
        f"illegal character '{token.literal}'",
        token,
    )


class ParseError(Exception):
    """Raised on request when a parse produced failing diagnostics."""

    def __init__(
        self,
        diagnostics: Sequence[Diagnostic],
        source: str,
        filename: str = "input.monkey",
    ) -> None:
        self.diagnostics = list(diagnostics)
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    @property
    def message(self) -> str:
        if not self.diagnostics:
            return ""
        return self.diagnostics[0].message

    def format(self, filename: str | None = None) -> str:
        name = filename if filename is not None else self.filename
        return "\n\n".join(d.format(self.source, name) for d in self.diagnostics)
