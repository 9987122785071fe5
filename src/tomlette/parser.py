"""Parser: builds a Table tree from a token stream.

Grammar::

    document    := (tableHeader | keyValue)*
    tableHeader := '[' key ']'
    keyValue    := key '=' value
    key         := IDENTIFIER ('.' IDENTIFIER)*
    value       := STRING | INTEGER | FLOAT | BOOLEAN | array
    array       := '[' (value (',' value)*)? ']'

A dotted key in a table header selects nested tables (``[a.b]`` walks
``a`` then ``b``), while a dotted key on the left of ``=`` is stored
verbatim as one key (``a.b = 1`` creates the single key ``"a.b"``).
"""

from __future__ import annotations

import logging
import math
import re
from typing import IO, Iterable, Iterator

from .config import ParserConfig
from .errors import ErrorCategory, TomlSyntaxError
from .lexer import Lexer, Token, TokenType
from .values import Table, Value, VArray, VBool, VFloat, VInteger, VString, VTable

logger = logging.getLogger(__name__)

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]*")

_VALUE_START = frozenset({
    TokenType.STRING,
    TokenType.INTEGER,
    TokenType.FLOAT,
    TokenType.BOOLEAN,
    TokenType.LEFT_BRACKET,
})


class Parser:
    """Single-use recursive-descent parser.

    Tokens are pulled from *tokens* one at a time. The table receiving
    key-value pairs is tracked as a path of keys from the root rather
    than as a second reference into the tree.
    """

    def __init__(self, tokens: Iterable[Token], config: ParserConfig | None = None) -> None:
        self._tokens: Iterator[Token] = iter(tokens)
        self._config = config or ParserConfig()
        self._root = Table()
        self._cursor: tuple[str, ...] = ()
        self._last_line = 1
        self._current = self._pull()

    # -- Token stream ---------------------------------------------------

    def _pull(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return Token(TokenType.EOF, "", self._last_line)
        self._last_line = token.line
        return token

    def _peek(self) -> Token:
        return self._current

    def _advance(self) -> Token:
        token = self._current
        if token.type is not TokenType.EOF:
            self._current = self._pull()
        return token

    def _check(self, kind: TokenType) -> bool:
        return self._current.type is kind

    def _expect(self, kind: TokenType, reason: str) -> Token:
        if not self._check(kind):
            raise TomlSyntaxError(reason, line=self._current.line)
        return self._advance()

    # -- Document -------------------------------------------------------

    def parse(self) -> Table:
        while not self._check(TokenType.EOF):
            if self._check(TokenType.LEFT_BRACKET):
                self._parse_table_header()
            else:
                self._parse_key_value()
        return self._root

    def _parse_table_header(self) -> None:
        open_bracket = self._advance()
        path = self._parse_key()
        self._expect(TokenType.RIGHT_BRACKET, "Expected ']' after table name")
        if len(path) > self._config.max_depth:
            raise TomlSyntaxError(
                f"Table header nesting too deep (limit {self._config.max_depth})",
                line=open_bracket.line,
                category=ErrorCategory.NESTING_DEPTH,
            )
        self._select_table(path, open_bracket.line)

    def _select_table(self, path: list[str], line: int) -> None:
        """Walk *path* from the root, creating missing tables on the way."""
        table = self._root
        for segment in path:
            existing = table.get(segment)
            if existing is None:
                child = Table()
                table.set(segment, VTable(child))
                table = child
                logger.debug("created table %r at line %d", segment, line)
            elif isinstance(existing, VTable):
                table = existing.table
            else:
                raise TomlSyntaxError(
                    f"Key '{segment}' already exists as non-table value",
                    line=line,
                    category=ErrorCategory.KEY_COLLISION,
                )
        self._cursor = tuple(path)
        logger.debug("selected table [%s]", ".".join(path))

    def _current_table(self) -> Table:
        table = self._root
        for segment in self._cursor:
            value = table.get(segment)
            # _select_table guarantees every cursor segment is a table.
            assert isinstance(value, VTable)
            table = value.table
        return table

    def _parse_key_value(self) -> None:
        key_token = self._peek()
        key = ".".join(self._parse_key())
        self._expect(TokenType.EQUAL, "Expected '=' after key")
        try:
            value = self._parse_value(depth=0)
        except RecursionError:
            # max_depth is set above what the interpreter stack can hold.
            raise TomlSyntaxError(
                "Array nesting too deep (interpreter recursion limit reached)",
                line=key_token.line,
                category=ErrorCategory.NESTING_DEPTH,
            ) from None
        table = self._current_table()
        if key in table:
            logger.warning(
                "key %r at line %d replaces an earlier value", key, key_token.line
            )
        table.set(key, value)

    def _parse_key(self) -> list[str]:
        token = self._advance()
        if token.type is not TokenType.IDENTIFIER:
            raise TomlSyntaxError("Expected identifier for key", line=token.line)
        segments = [token.text]
        while self._check(TokenType.DOT):
            self._advance()
            token = self._advance()
            if token.type is not TokenType.IDENTIFIER:
                raise TomlSyntaxError(
                    "Expected identifier after '.' in key", line=token.line
                )
            segments.append(token.text)
        return segments

    # -- Values ---------------------------------------------------------

    def _parse_value(self, depth: int) -> Value:
        token = self._peek()
        if token.type not in _VALUE_START:
            shown = "end of input" if token.type is TokenType.EOF else f"'{token.text}'"
            raise TomlSyntaxError(f"Unexpected token {shown} in value", line=token.line)

        if token.type is TokenType.LEFT_BRACKET:
            return self._parse_array(depth + 1)

        self._advance()
        if token.type is TokenType.STRING:
            return VString(token.text)
        if token.type is TokenType.INTEGER:
            return VInteger(_to_int(token))
        if token.type is TokenType.FLOAT:
            return VFloat(_to_float(token))
        return VBool(token.text == "true")

    def _parse_array(self, depth: int) -> VArray:
        open_bracket = self._expect(TokenType.LEFT_BRACKET, "Expected '[' to start array")
        if depth > self._config.max_depth:
            raise TomlSyntaxError(
                f"Array nesting too deep (limit {self._config.max_depth})",
                line=open_bracket.line,
                category=ErrorCategory.NESTING_DEPTH,
            )

        items: list[Value] = []
        if self._check(TokenType.RIGHT_BRACKET):
            self._advance()
            return VArray(items)

        while True:
            items.append(self._parse_value(depth))
            if not self._check(TokenType.COMMA):
                break
            comma = self._advance()
            if self._check(TokenType.RIGHT_BRACKET):
                raise TomlSyntaxError("Trailing comma not permitted in array", line=comma.line)

        self._expect(TokenType.RIGHT_BRACKET, "Expected ']' to end array")
        return VArray(items)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def _to_int(token: Token) -> int:
    if not _INTEGER_RE.fullmatch(token.text):
        raise TomlSyntaxError(f"Malformed integer literal: {token.text!r}", line=token.line)
    try:
        value = int(token.text)
    except ValueError:
        value = None  # longer than int() will convert
    if value is None or not _INT64_MIN <= value <= _INT64_MAX:
        raise TomlSyntaxError(
            f"Invalid integer value: {token.text}",
            line=token.line,
            category=ErrorCategory.NUMBER_RANGE,
        )
    return value


def _to_float(token: Token) -> float:
    if not _FLOAT_RE.fullmatch(token.text):
        raise TomlSyntaxError(f"Malformed float literal: {token.text!r}", line=token.line)
    value = float(token.text)
    if not math.isfinite(value):
        raise TomlSyntaxError(
            f"Invalid float value: {token.text}",
            line=token.line,
            category=ErrorCategory.NUMBER_RANGE,
        )
    return value


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(tokens: Iterable[Token], config: ParserConfig | None = None) -> Table:
    """Build the root Table from *tokens*; raises TomlSyntaxError on failure."""
    return Parser(tokens, config).parse()


def loads(text: str, config: ParserConfig | None = None) -> Table:
    """Parse TOML *text* and return the root Table."""
    return parse(Lexer(text), config)


def load(fp: IO[str], config: ParserConfig | None = None) -> Table:
    """Read the whole of *fp* and parse it."""
    return loads(fp.read(), config)
