"""
sqlfront/errors.py

Exception types for the sqlfront SQL front end.

This module defines:
- A common base exception for all sqlfront errors
- A lightweight Position structure for pointing at the offending lexeme
- The ParseError taxonomy raised by the statement and expression parsers

Every parse failure is one of the ParseError subclasses below; the subclass is
the error *kind* and callers may rely on it (e.g. `except InvalidExpression`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class SqlFrontError(Exception):
    """
    Base class for all sqlfront errors.

    Catching this exception allows callers (the shell, or any embedding tool)
    to handle every front-end failure without swallowing unrelated exceptions.
    """


@dataclass(frozen=True)
class Position:
    """
    Represents a location in an input SQL string.

    Attributes:
        line: 1-based line number
        col:  1-based column number
    """
    line: int
    col: int


class ParseError(SqlFrontError):
    """
    Raised when a token sequence cannot be turned into a statement.

    Args:
        message: Human readable explanation.
        position: Optional Position indicating where the error occurred.
    """

    def __init__(self, message: str, position: Position | None = None):
        self.message = message
        self.position = position
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (line {self.position.line}, col {self.position.col})"


class UnexpectedEnd(ParseError):
    """A required token was needed but the input was exhausted."""

    def __init__(self, position: Position | None = None):
        super().__init__("Unexpected end of input", position)


class ExpectedKeyword(ParseError):
    """A specific keyword was required and a different token was found."""

    def __init__(self, keyword: str, position: Position | None = None):
        self.keyword = keyword
        super().__init__(f"Expected keyword: {keyword}", position)


class ExpectedIdentifier(ParseError):
    """An identifier (table or column name) was required."""

    def __init__(self, position: Position | None = None):
        super().__init__("Expected an identifier", position)


class InvalidExpression(ParseError):
    """The expression parser failed; `detail` says what it expected."""

    def __init__(self, detail: str, position: Position | None = None):
        self.detail = detail
        super().__init__(f"Invalid expression: {detail}", position)


class UnknownStartOfStatement(ParseError):
    """The leading token does not start any supported statement."""

    def __init__(self, description: str, position: Position | None = None):
        self.description = description
        super().__init__(f"Unknown start of statement: {description}", position)


class ExpectedToken(ParseError):
    """
    A specific non-keyword token was required.

    Attributes:
        expected: Description of the wanted token, e.g. "'('".
        actual: The token found instead, or None at end of input.
    """

    def __init__(self, expected: str, actual: Token | None):
        self.expected = expected
        self.actual = actual
        if actual is None:
            super().__init__(f"Expected token: {expected}, but found end of input")
        else:
            super().__init__(f"Expected token: {expected}, but found {actual.describe()}", actual.pos)


class UnexpectedToken(ParseError):
    """A token appeared where no grammar alternative applies."""

    def __init__(self, token: Token):
        self.token = token
        super().__init__(f"Unexpected token: {token.describe()}", token.pos)


class General(ParseError):
    """Catch-all for grammar-specific failures (bad VARCHAR size, bad list item, empty input)."""
