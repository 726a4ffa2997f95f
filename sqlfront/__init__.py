"""
sqlfront: a syntactic front end for a small SQL dialect.

    >>> from sqlfront import parse_sql
    >>> parse_sql("SELECT a FROM t")
    Select(columns=['a'], table='t', selection=None, order_by=None)
"""

from .ast import (
    BinaryOperation,
    BinaryOperator,
    Boolean,
    BooleanType,
    ColumnDef,
    CreateTable,
    DataType,
    Expression,
    Grouped,
    Identifier,
    Insert,
    IntType,
    Null,
    Number,
    Select,
    Statement,
    String,
    UnaryOperation,
    UnaryOperator,
    VarcharType,
)
from .errors import (
    ExpectedIdentifier,
    ExpectedKeyword,
    ExpectedToken,
    General,
    InvalidExpression,
    ParseError,
    Position,
    SqlFrontError,
    UnexpectedEnd,
    UnexpectedToken,
    UnknownStartOfStatement,
)
from .lexer import Token, Tokenizer, TokenType, tokenize
from .parser import Parser, parse_sql, parse_statement
from .pratt import ExpressionParser, parse_expression
from .render import format_ast

__version__ = "0.1.0"
