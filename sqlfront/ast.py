"""
sqlfront/ast.py

AST (Abstract Syntax Tree) node definitions for the sqlfront SQL dialect.

The statement parser converts token streams into instances of these
dataclasses. Downstream consumers (an executor, a linter, the shell's
printer) match on the concrete classes.

Design notes:
- All nodes are frozen dataclasses built bottom-up and never mutated.
- Expression and Statement are marker base classes; the concrete subclasses
  below are the complete set of node kinds.
- Grouped keeps explicit parentheses even though they carry no meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------- Operators ----------

class UnaryOperator(Enum):
    """Prefix operators; the value is the SQL spelling."""
    NOT = "NOT"
    NEGATE = "-"


class BinaryOperator(Enum):
    """Infix operators; the value is the SQL spelling."""
    EQUALS = "="
    NOT_EQUALS = "<>"
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    AND = "AND"
    OR = "OR"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# ---------- Expressions ----------

class Expression:
    """Base class marker for all expression nodes."""


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class Number(Expression):
    value: int


@dataclass(frozen=True)
class String(Expression):
    value: str


@dataclass(frozen=True)
class Boolean(Expression):
    value: bool


@dataclass(frozen=True)
class Null(Expression):
    pass


@dataclass(frozen=True)
class UnaryOperation(Expression):
    """NOT x / -x."""
    operator: UnaryOperator
    operand: Expression


@dataclass(frozen=True)
class BinaryOperation(Expression):
    """
    Infix operation.

    Attributes:
        left: Left operand.
        operator: BinaryOperator.
        right: Right operand.
    """
    left: Expression
    operator: BinaryOperator
    right: Expression


@dataclass(frozen=True)
class Grouped(Expression):
    """A parenthesized sub-expression."""
    expression: Expression


# ---------- Column types ----------

class DataType:
    """Base class marker for column data types."""


@dataclass(frozen=True)
class IntType(DataType):
    pass


@dataclass(frozen=True)
class BooleanType(DataType):
    pass


@dataclass(frozen=True)
class VarcharType(DataType):
    """
    VARCHAR(size).

    Attributes:
        size: Declared maximum length; zero is accepted by the parser.
    """
    size: int


INT = IntType()
BOOLEAN = BooleanType()


@dataclass(frozen=True)
class ColumnDef:
    """
    Column definition in CREATE TABLE.

    Attributes:
        name: Column name.
        data_type: DataType instance.
    """
    name: str
    data_type: DataType


# ---------- Statements ----------

class Statement:
    """Base class marker for all statements."""


@dataclass(frozen=True)
class Select(Statement):
    """
    SELECT statement.

    Attributes:
        columns: Selected column names, in source order.
        table: Table named after FROM.
        selection: WHERE expression, or None when there is no WHERE.
        order_by: ORDER BY column names, or None when there is no ORDER BY.
    """
    columns: list[str]
    table: str
    selection: Expression | None = None
    order_by: list[str] | None = None


@dataclass(frozen=True)
class CreateTable(Statement):
    """CREATE TABLE statement."""
    table_name: str
    columns: list[ColumnDef]


@dataclass(frozen=True)
class Insert(Statement):
    """
    INSERT statement.

    `values` holds literal expressions (Number, String, Boolean, Null) or bare
    Identifier nodes; nothing more complex is produced by the parser.
    """
    table_name: str
    columns: list[str]
    values: list[Expression]
