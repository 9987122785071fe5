"""Lexer: converts TOML source text into a stream of tokens.

The lexer never raises. Characters it does not recognise come out as
``ERROR`` tokens and it is up to the parser to reject them wherever a key
or value is required.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class TokenType(Enum):
    IDENTIFIER = auto()
    EQUAL = auto()
    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    COMMA = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    DOT = auto()
    EOF = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class Token:
    type: TokenType
    text: str  # string tokens hold the unescaped contents, without quotes
    line: int


_WHITESPACE = frozenset(" \t\r\n\f\v")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS | {"-"}

_PUNCTUATION: dict[str, TokenType] = {
    "=": TokenType.EQUAL,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

_BOOLEANS = frozenset({"true", "false"})


class Lexer:
    """Produces tokens on demand from an in-memory source string.

    Usage::

        lexer = Lexer('name = "demo"')
        lexer.next_token()   # Token(IDENTIFIER, 'name', 1)

    Iterating over a lexer yields every token up to and including the
    first ``EOF`` token.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1

    @property
    def line(self) -> int:
        return self._line

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    # -- Character access -----------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        """Character at the scan position plus *offset*, or "" past the end."""
        index = self._pos + offset
        if index < len(self._source):
            return self._source[index]
        return ""

    def _advance(self) -> str:
        c = self._peek()
        if c:
            self._pos += 1
            if c == "\n":
                self._line += 1
        return c

    def _skip_trivia(self) -> None:
        while True:
            c = self._peek()
            if c in _WHITESPACE:
                self._advance()
            elif c == "#":
                while self._peek() not in ("\n", ""):
                    self._advance()
            else:
                return

    # -- Tokens ---------------------------------------------------------

    def next_token(self) -> Token:
        """Return the next token; ``EOF`` once the input is exhausted."""
        self._skip_trivia()
        line = self._line
        c = self._peek()

        if not c:
            return Token(TokenType.EOF, "", line)

        kind = _PUNCTUATION.get(c)
        if kind is not None:
            self._advance()
            return Token(kind, c, line)

        if c == '"':
            return self._lex_string(line)
        if c == "-":
            # A hyphen only starts a number when a digit follows it.
            if self._peek(1) in _DIGITS:
                return self._lex_number(line)
            return self._lex_identifier(line)
        if c in _DIGITS:
            return self._lex_number(line)
        if c in _IDENT_START:
            return self._lex_identifier(line)

        self._advance()
        return Token(TokenType.ERROR, c, line)

    def _lex_string(self, line: int) -> Token:
        self._advance()  # opening quote
        chars: list[str] = []
        while self._peek() not in ('"', ""):
            c = self._advance()
            if c == "\\" and self._peek():
                escaped = self._advance()
                chars.append(_ESCAPES.get(escaped, escaped))
            else:
                chars.append(c)
        # An unterminated string simply runs to the end of the input.
        if self._peek() == '"':
            self._advance()
        return Token(TokenType.STRING, "".join(chars), line)

    def _lex_number(self, line: int) -> Token:
        start = self._pos
        if self._peek() == "-":
            self._advance()
        is_float = False
        while True:
            c = self._peek()
            if c in _DIGITS:
                self._advance()
            elif c == "." and not is_float:
                is_float = True
                self._advance()
            else:
                break
        text = self._source[start:self._pos]
        return Token(TokenType.FLOAT if is_float else TokenType.INTEGER, text, line)

    def _lex_identifier(self, line: int) -> Token:
        start = self._pos
        while self._peek() in _IDENT_CHARS:
            self._advance()
        text = self._source[start:self._pos]
        if text in _BOOLEANS:
            return Token(TokenType.BOOLEAN, text, line)
        return Token(TokenType.IDENTIFIER, text, line)


def tokenize(source: str) -> list[Token]:
    """Lex *source* eagerly; the last token is always ``EOF``."""
    return list(Lexer(source))
