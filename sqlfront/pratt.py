"""
sqlfront/pratt.py

Precedence-climbing (Pratt) expression parser.

Responsibilities:
- Turn a run of tokens into an Expression tree (see sqlfront/ast.py)
- Respect operator precedence, left associativity, prefix operators and
  parenthesized grouping
- Stop at the first token that cannot continue the expression, leaving it for
  the caller (e.g. ORDER, ';', EOF after a WHERE clause)

Binding powers live in the tables below; adding an operator is a table change.
All binary operators are left-associative: the right operand is parsed at
`power + 1`.

    OR                      1
    AND                     2
    NOT (prefix)            3
    = <> < <= > >=          4
    + -                     5
    - (prefix)              6
    * /                     7
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

from .ast import (
    BinaryOperation,
    BinaryOperator,
    Boolean,
    Expression,
    Grouped,
    Identifier,
    Null,
    Number,
    String,
    UnaryOperation,
    UnaryOperator,
)
from .errors import InvalidExpression
from .lexer import Token, TokenType

LOWEST_POWER = 0

# Each nesting level costs three Python frames; stay well under the recursion limit.
MAX_DEPTH = 200


class BinaryPower(NamedTuple):
    operator: BinaryOperator
    power: int


class PrefixPower(NamedTuple):
    operator: UnaryOperator
    power: int


BINARY_POWERS: dict[TokenType, BinaryPower] = {
    TokenType.OR: BinaryPower(BinaryOperator.OR, 1),
    TokenType.AND: BinaryPower(BinaryOperator.AND, 2),
    TokenType.EQ: BinaryPower(BinaryOperator.EQUALS, 4),
    TokenType.NEQ: BinaryPower(BinaryOperator.NOT_EQUALS, 4),
    TokenType.LT: BinaryPower(BinaryOperator.LESS_THAN, 4),
    TokenType.LTE: BinaryPower(BinaryOperator.LESS_THAN_OR_EQUAL, 4),
    TokenType.GT: BinaryPower(BinaryOperator.GREATER_THAN, 4),
    TokenType.GTE: BinaryPower(BinaryOperator.GREATER_THAN_OR_EQUAL, 4),
    TokenType.PLUS: BinaryPower(BinaryOperator.ADD, 5),
    TokenType.MINUS: BinaryPower(BinaryOperator.SUBTRACT, 5),
    TokenType.STAR: BinaryPower(BinaryOperator.MULTIPLY, 7),
    TokenType.SLASH: BinaryPower(BinaryOperator.DIVIDE, 7),
}

PREFIX_POWERS: dict[TokenType, PrefixPower] = {
    TokenType.NOT: PrefixPower(UnaryOperator.NOT, 3),
    TokenType.MINUS: PrefixPower(UnaryOperator.NEGATE, 6),
}


@dataclass
class ExpressionParser:
    """
    Expression parser over a shared token sequence.

    The token list is never copied; the parser starts at `position` and,
    after parse_expression() returns, `position` indexes the first token that
    is not part of the expression.
    """
    tokens: Sequence[Token]
    position: int = 0
    depth: int = 0

    def peek(self) -> Token | None:
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def advance(self) -> Token | None:
        t = self.peek()
        if t is not None:
            self.position += 1
        return t

    def parse_expression(self, min_power: int = LOWEST_POWER) -> Expression:
        """
        Parse an expression whose operators all bind at least `min_power`.

        Raises:
            InvalidExpression: on a missing operand, unmatched '(' or a token
            that cannot start an operand.
        """
        left = self.parse_primary()

        while True:
            t = self.peek()
            if t is None or t.typ not in BINARY_POWERS:
                return left
            operator, power = BINARY_POWERS[t.typ]
            if power < min_power:
                return left
            self.advance()
            right = self.parse_expression(power + 1)
            left = BinaryOperation(left=left, operator=operator, right=right)

    def parse_primary(self) -> Expression:
        """
        Parse:
          literal | IDENT | prefix-op primary... | '(' expr ')'
        """
        t = self.advance()
        if t is None or t.typ == TokenType.EOF:
            raise InvalidExpression("Unexpected end of input", t.pos if t else None)

        if t.typ == TokenType.IDENT:
            return Identifier(str(t.value))
        if t.typ == TokenType.NUMBER:
            return Number(int(t.value))
        if t.typ == TokenType.STRING:
            return String(str(t.value))
        if t.typ == TokenType.BOOL:
            return Boolean(bool(t.value))
        if t.typ == TokenType.NULL:
            return Null()

        if t.typ in PREFIX_POWERS:
            operator, power = PREFIX_POWERS[t.typ]
            operand = self.parse_nested(t, power)
            return UnaryOperation(operator=operator, operand=operand)

        if t.typ == TokenType.LPAREN:
            inner = self.parse_nested(t, LOWEST_POWER)
            closing = self.advance()
            if closing is None or closing.typ != TokenType.RPAREN:
                found = "end of input" if closing is None else closing.describe()
                raise InvalidExpression(f"Expected ')' but found {found}", closing.pos if closing else None)
            return Grouped(inner)

        raise InvalidExpression(f"Unexpected token {t.describe()}", t.pos)

    def parse_nested(self, opener: Token, min_power: int) -> Expression:
        """Parse the operand of a prefix operator or the inside of '(', bounding the nesting depth."""
        if self.depth >= MAX_DEPTH:
            raise InvalidExpression("Expression nested too deeply", opener.pos)
        self.depth += 1
        try:
            return self.parse_expression(min_power)
        finally:
            self.depth -= 1


def parse_expression(tokens: Sequence[Token]) -> Expression:
    """Parse a whole token sequence as one expression (trailing tokens are ignored)."""
    return ExpressionParser(tokens).parse_expression(LOWEST_POWER)
