"""Monkey parser: converts the lexer's token stream into a Program AST."""

from __future__ import annotations

from dataclasses import dataclass

from monkeylang.ast import Identifier, LetStatement, Node, Program
from monkeylang.errors import (
    Diagnostic,
    ParseError,
    Severity,
    illegal_token,
    unexpected_token,
    unrecognized_statement,
)
from monkeylang.lexer import Lexer
from monkeylang.tokens import Token, TokenType


class Parser:
    """Recursive descent parser with two tokens of lookahead.

    Tokens are pulled from the lexer on demand and never rewound. A statement
    that fails to parse is dropped, recorded in ``diagnostics``, and parsing
    resumes after the next semicolon.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._diagnostics: list[Diagnostic] = []
        self.cur_token = Token(TokenType.EOF, "")
        self.peek_token = Token(TokenType.EOF, "")

        # Fill cur_token and peek_token
        self.next_token()
        self.next_token()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self._diagnostics]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self._lexer.next_token()

    def cur_token_is(self, tt: TokenType) -> bool:
        return self.cur_token.type == tt

    def peek_token_is(self, tt: TokenType) -> bool:
        return self.peek_token.type == tt

    def expect_peek(self, tt: TokenType) -> bool:
        """Advance if the peek token has type tt; otherwise record why not."""
        if self.peek_token_is(tt):
            self.next_token()
            return True
        self._diagnostics.append(unexpected_token(tt, self.peek_token))
        return False

    def _synchronize(self) -> None:
        """Skip to the end of the current statement."""
        while not self.cur_token_is(TokenType.SEMICOLON) and not self.cur_token_is(TokenType.EOF):
            self.next_token()

    # ------------------------------------------------------------------
    # Program and statements
    # ------------------------------------------------------------------

    def parse_program(self) -> Program:
        statements: list[Node] = []

        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return Program(tuple(statements))

    def parse_statement(self) -> Node | None:
        tt = self.cur_token.type

        if tt == TokenType.LET:
            stmt = self.parse_let_statement()
            if stmt is None:
                self._synchronize()
            return stmt

        # Empty statement
        if tt == TokenType.SEMICOLON:
            return None

        if tt == TokenType.ILLEGAL:
            self._diagnostics.append(illegal_token(self.cur_token))
        else:
            self._diagnostics.append(unrecognized_statement(self.cur_token))
        self._synchronize()
        return None

    def parse_let_statement(self) -> LetStatement | None:
        let_tok = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None

        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        # TODO: parse the value expression once expressions are in the grammar
        while not self.cur_token_is(TokenType.SEMICOLON) and not self.cur_token_is(TokenType.EOF):
            self.next_token()
            if self.cur_token_is(TokenType.ILLEGAL):
                self._diagnostics.append(illegal_token(self.cur_token))

        return LetStatement(let_tok, name)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A parsed program together with everything reported while parsing it."""

    program: Program
    diagnostics: tuple[Diagnostic, ...]
    source: str
    filename: str

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def ok(self) -> bool:
        return not self.errors

    def check(self, strict: bool = False) -> Program:
        """Return the program, or raise ParseError for failing diagnostics.

        With strict=True warnings fail too.
        """
        failing = self.diagnostics if strict else self.errors
        if failing:
            raise ParseError(failing, self.source, self.filename)
        return self.program


def parse(source: str, filename: str = "input.monkey") -> ParseResult:
    """Convenience function: parse source text into a ParseResult."""
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    return ParseResult(program, tuple(parser.diagnostics), source, parser.lexer.filename)
