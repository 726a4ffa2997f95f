"""
sqlfront/parser.py

Recursive-descent statement parser for the sqlfront SQL dialect.

Responsibilities:
- Convert a token sequence into one Statement AST node (see sqlfront/ast.py)
- Dispatch on the leading keyword without backtracking:
    - SELECT <cols> FROM <table> [WHERE <expr>] [ORDER BY <cols>]
    - CREATE TABLE <table> ( <col> <type>, ... )
    - INSERT INTO <table> ( <cols> ) VALUES ( <values> )
- Delegate WHERE expressions to the Pratt parser (sqlfront/pratt.py)
- Raise the first error found as a ParseError subclass; there is no recovery

Notes:
- Column lists are read as "identifiers and commas until the closing token",
  so a comma separates names but is not checked pairwise.
- A statement may end with one ';'. Anything after that is rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .ast import (
    BOOLEAN,
    INT,
    Boolean,
    ColumnDef,
    CreateTable,
    DataType,
    Expression,
    Identifier,
    Insert,
    Null,
    Number,
    Select,
    Statement,
    String,
    VarcharType,
)
from .errors import (
    ExpectedIdentifier,
    ExpectedKeyword,
    ExpectedToken,
    General,
    UnexpectedEnd,
    UnexpectedToken,
    UnknownStartOfStatement,
)
from .lexer import Token, TokenType, tokenize
from .pratt import LOWEST_POWER, ExpressionParser

logger = logging.getLogger(__name__)

PUNCTUATION_NAMES: dict[TokenType, str] = {
    TokenType.LPAREN: "'('",
    TokenType.RPAREN: "')'",
    TokenType.COMMA: "','",
    TokenType.SEMI: "';'",
}


@dataclass
class Parser:
    """
    Stateful parser over a token sequence.

    Attributes:
        tokens: Token sequence, normally from tokenize(); it is never copied.
        i: Current token index. Only ever moves forward.
    """
    tokens: Sequence[Token]
    i: int = 0

    def peek(self) -> Token | None:
        """Return the current token without consuming, or None past the end."""
        if self.i >= len(self.tokens):
            return None
        return self.tokens[self.i]

    def at(self, typ: TokenType) -> bool:
        """Check whether current token is of a specific type."""
        t = self.peek()
        return t is not None and t.typ == typ

    def advance(self) -> Token | None:
        """Consume and return the current token (None past the end)."""
        t = self.peek()
        if t is not None:
            self.i += 1
        return t

    def advance_or_end(self) -> Token:
        """Consume a token that must exist; EOF counts as the end."""
        t = self.advance()
        if t is None or t.typ == TokenType.EOF:
            raise UnexpectedEnd(t.pos if t else None)
        return t

    def expect_keyword(self, typ: TokenType) -> Token:
        """Consume a keyword token of the given type, otherwise raise."""
        t = self.advance_or_end()
        if t.typ != typ:
            raise ExpectedKeyword(typ.name, t.pos)
        return t

    def expect_identifier(self) -> str:
        """Consume an identifier and return its name."""
        t = self.advance_or_end()
        if t.typ != TokenType.IDENT:
            raise ExpectedIdentifier(t.pos)
        return str(t.value)

    def expect_token(self, typ: TokenType) -> Token:
        """Consume a punctuation token of the given type."""
        t = self.advance()
        if t is None or t.typ != typ:
            raise ExpectedToken(PUNCTUATION_NAMES[typ], None if t is None or t.typ == TokenType.EOF else t)
        return t

    # ---------------- entry point ----------------

    def parse_statement(self) -> Statement:
        """Dispatch based on the first token and parse one full statement."""
        t = self.peek()
        if t is None or t.typ == TokenType.EOF:
            raise General("Empty input")

        if t.typ == TokenType.SELECT:
            stmt: Statement = self.parse_select()
        elif t.typ == TokenType.CREATE:
            stmt = self.parse_create_table()
        elif t.typ == TokenType.INSERT:
            stmt = self.parse_insert()
        else:
            raise UnknownStartOfStatement(t.describe(), t.pos)

        self.parse_end_of_statement()
        logger.debug("Parsed %s statement (%d tokens)", type(stmt).__name__, self.i)
        return stmt

    def parse_end_of_statement(self) -> None:
        """
        Parse:
          [';'] EOF
        """
        if self.at(TokenType.SEMI):
            self.advance()
        t = self.peek()
        if t is not None and t.typ != TokenType.EOF:
            raise UnexpectedToken(t)

    # ---------------- SELECT ----------------

    def parse_select(self) -> Select:
        """
        Parse:
          SELECT <ident> [, <ident>]* FROM <table> [WHERE <expr>] [ORDER BY <ident>, ...]
        """
        self.expect_keyword(TokenType.SELECT)

        columns: list[str] = []
        while True:
            t = self.advance_or_end()
            if t.typ == TokenType.IDENT:
                columns.append(str(t.value))
            elif t.typ == TokenType.COMMA:
                continue
            elif t.typ == TokenType.FROM:
                break
            else:
                raise General(f"Unexpected token in column list: {t.describe()}", t.pos)

        if not columns:
            raise ExpectedIdentifier(t.pos)

        table = self.expect_identifier()

        selection = None
        if self.at(TokenType.WHERE):
            self.advance()
            selection = self.parse_where()

        order_by = None
        if self.at(TokenType.ORDER):
            self.advance()
            self.expect_keyword(TokenType.BY)
            order_by = self.parse_order_by_list()

        return Select(columns=columns, table=table, selection=selection, order_by=order_by)

    def parse_where(self) -> Expression:
        """Hand the rest of the tokens to the expression parser and resume after it."""
        expr_parser = ExpressionParser(self.tokens, self.i)
        expr = expr_parser.parse_expression(LOWEST_POWER)
        self.i = expr_parser.position
        return expr

    def parse_order_by_list(self) -> list[str]:
        """
        Parse:
          <ident> [, <ident>]* (';' | EOF)
        The terminator is left for parse_end_of_statement.
        """
        columns: list[str] = []
        while True:
            t = self.peek()
            if t is None:
                raise UnexpectedEnd()
            if t.typ in (TokenType.SEMI, TokenType.EOF):
                return columns
            self.advance()
            if t.typ == TokenType.IDENT:
                columns.append(str(t.value))
            elif t.typ == TokenType.COMMA:
                continue
            else:
                raise General(f"Unexpected token in ORDER BY: {t.describe()}", t.pos)

    # ---------------- CREATE TABLE ----------------

    def parse_create_table(self) -> CreateTable:
        """
        Parse:
          CREATE TABLE <name> ( <colname> <type> [, <colname> <type>]* )
        """
        self.expect_keyword(TokenType.CREATE)
        self.expect_keyword(TokenType.TABLE)
        table_name = self.expect_identifier()
        self.expect_token(TokenType.LPAREN)

        columns: list[ColumnDef] = []
        while True:
            t = self.advance_or_end()
            if t.typ == TokenType.IDENT:
                columns.append(ColumnDef(name=str(t.value), data_type=self.parse_column_type()))
            elif t.typ == TokenType.COMMA:
                continue
            elif t.typ == TokenType.RPAREN:
                break
            else:
                raise General(f"Unexpected token: {t.describe()}", t.pos)

        return CreateTable(table_name=table_name, columns=columns)

    def parse_column_type(self) -> DataType:
        """
        Parse:
          INT | BOOLEAN | VARCHAR '(' NUMBER ')'
        """
        t = self.advance_or_end()
        if t.typ == TokenType.INT:
            return INT
        if t.typ == TokenType.BOOLEAN:
            return BOOLEAN
        if t.typ == TokenType.VARCHAR:
            if self.at(TokenType.LPAREN):
                self.advance()
                size = self.advance()
                if size is not None and size.typ == TokenType.NUMBER and self.at(TokenType.RPAREN):
                    self.advance()
                    return VarcharType(int(size.value))
            raise General("Expected size for VARCHAR", t.pos)
        raise General(f"Unexpected column type: {t.describe()}", t.pos)

    # ---------------- INSERT ----------------

    def parse_insert(self) -> Insert:
        """
        Parse:
          INSERT INTO <table> ( c1, c2, ... ) VALUES ( v1, v2, ... )
        Values are literals or bare identifiers, not full expressions.
        """
        self.expect_keyword(TokenType.INSERT)
        self.expect_keyword(TokenType.INTO)
        table_name = self.expect_identifier()
        self.expect_token(TokenType.LPAREN)

        columns: list[str] = []
        while True:
            t = self.advance_or_end()
            if t.typ == TokenType.IDENT:
                columns.append(str(t.value))
            elif t.typ == TokenType.COMMA:
                continue
            elif t.typ == TokenType.RPAREN:
                break
            else:
                raise General(f"Unexpected token in column list: {t.describe()}", t.pos)

        self.expect_keyword(TokenType.VALUES)
        self.expect_token(TokenType.LPAREN)

        values: list[Expression] = []
        while True:
            t = self.advance_or_end()
            if t.typ == TokenType.COMMA:
                continue
            if t.typ == TokenType.RPAREN:
                break
            values.append(self.value_from_token(t))

        return Insert(table_name=table_name, columns=columns, values=values)

    def value_from_token(self, t: Token) -> Expression:
        """Map one VALUES item token to its literal/identifier node."""
        if t.typ == TokenType.NUMBER:
            return Number(int(t.value))
        if t.typ == TokenType.STRING:
            return String(str(t.value))
        if t.typ == TokenType.BOOL:
            return Boolean(bool(t.value))
        if t.typ == TokenType.NULL:
            return Null()
        if t.typ == TokenType.IDENT:
            return Identifier(str(t.value))
        raise General(f"Unexpected token in VALUES: {t.describe()}", t.pos)


# ---------- public helpers ----------

def parse_statement(tokens: Sequence[Token]) -> Statement:
    """
    Parse exactly one statement from a token sequence.

    Args:
        tokens: Tokens, normally the output of tokenize().

    Returns:
        AST Statement.

    Raises:
        ParseError: the first syntax error found.
    """
    return Parser(tokens).parse_statement()


def parse_sql(sql: str) -> Statement:
    """
    Tokenize and parse one SQL statement.

    Args:
        sql: SQL string (a trailing semicolon is optional).

    Returns:
        AST Statement.
    """
    return parse_statement(tokenize(sql))


