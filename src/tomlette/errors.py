"""Errors raised while parsing TOML text."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    SYNTAX = "syntax"
    KEY_COLLISION = "key collision"
    NUMBER_RANGE = "number range"
    NESTING_DEPTH = "nesting depth"


class TomlSyntaxError(Exception):
    """Indicates the first grammar violation found in the input text.

    Parsing is all-or-nothing: when this is raised no part of the tree
    is returned to the caller.
    """

    def __init__(
        self,
        reason: str,
        *,
        line: int,
        category: ErrorCategory = ErrorCategory.SYNTAX,
    ) -> None:
        """
        Args:
            reason:
                What is wrong with the input, without location information.
            line:
                1-indexed line number where the violation was detected.
            category:
                Category that the error belongs to.
        """

        super().__init__(f"{reason} at line {line}")
        self.reason = reason
        self.line = line
        self.category = category
