"""Monkey lexer: converts source text into a stream of tokens, one per call."""

from __future__ import annotations

from collections.abc import Iterator

from monkeylang.tokens import (
    Position,
    Span,
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    lookup_ident,
)

# Sentinel for "no more input"
EOF_CHAR = ""

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    ">": TokenType.GT,
    "<": TokenType.LT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# First character -> (single-char type, type when followed by '=')
_TWO_CHAR_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
}


class Lexer:
    """Tokenize Monkey source text on demand.

    ``position`` indexes the character in ``ch``; ``read_position`` indexes
    the next one to consume. Only ASCII is classified: any other character
    becomes an ILLEGAL token.
    """

    def __init__(self, source: str, filename: str = "input.monkey") -> None:
        self._source = source
        self._filename = filename
        self._position = 0
        self._read_position = 0
        self._ch = EOF_CHAR
        self._line = 1
        self._column = 0
        self._read_char()

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def position(self) -> int:
        return self._position

    @property
    def read_position(self) -> int:
        return self._read_position

    @property
    def ch(self) -> str:
        return self._ch

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Character cursor
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        if self._read_position >= len(self._source):
            self._ch = EOF_CHAR
        else:
            self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def peek_char(self) -> str:
        """Return the character after ``ch`` without consuming it."""
        if self._read_position >= len(self._source):
            return EOF_CHAR
        return self._source[self._read_position]

    def _current_pos(self) -> Position:
        return Position(self._line, self._column, self._position)

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Return the next token; returns EOF forever once input is exhausted."""
        self._skip_whitespace()
        start = self._current_pos()
        ch = self._ch

        if ch == EOF_CHAR:
            return Token(TokenType.EOF, "", Span(start, start))

        if is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal, Span(start, self._current_pos()))

        if is_digit(ch):
            literal = self._read_number()
            return Token(TokenType.INT, literal, Span(start, self._current_pos()))

        if ch in _TWO_CHAR_TOKENS:
            single, double = _TWO_CHAR_TOKENS[ch]
            if self.peek_char() == "=":
                self._read_char()
                tt, literal = double, ch + self._ch
            else:
                tt, literal = single, ch
        else:
            tt = _SINGLE_CHAR_TOKENS.get(ch, TokenType.ILLEGAL)
            literal = ch

        self._read_char()
        return Token(tt, literal, Span(start, self._current_pos()))

    def _read_identifier(self) -> str:
        start = self._position
        while is_letter(self._ch) or is_digit(self._ch):
            self._read_char()
        return self._source[start : self._position]

    def _read_number(self) -> str:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        return self._source[start : self._position]


def tokenize(source: str, filename: str = "input.monkey") -> list[Token]:
    """Convenience function: tokenize source text, EOF token included."""
    return list(Lexer(source, filename))
