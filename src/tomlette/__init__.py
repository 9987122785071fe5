"""tomlette — a small TOML-subset parser producing a typed value tree."""

from .config import ParserConfig
from .errors import ErrorCategory, TomlSyntaxError
from .getter import lookup, walk
from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, load, loads, parse
from .values import (
    Table,
    Value,
    ValueKind,
    VArray,
    VBool,
    VFloat,
    VInteger,
    VString,
    VTable,
    to_python,
)

__all__ = [
    "loads",
    "load",
    "parse",
    "Parser",
    "ParserConfig",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Table",
    "Value",
    "ValueKind",
    "VArray",
    "VBool",
    "VFloat",
    "VInteger",
    "VString",
    "VTable",
    "to_python",
    "walk",
    "lookup",
    "ErrorCategory",
    "TomlSyntaxError",
]
