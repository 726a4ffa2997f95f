"""
sqlfront/render.py

Pretty-printer for sqlfront AST nodes.

format_ast() turns any statement, expression, column definition or data type
into an indented multi-line tree, e.g.

    Select
      columns: [a, b]
      table: t
      selection:
        BinaryOperation =
          Identifier a
          Number 1
      order_by: None

Every node class in sqlfront/ast.py has a branch below; anything else raises
TypeError.
"""

from __future__ import annotations

from .ast import (
    BinaryOperation,
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
    VarcharType,
)


def format_names(names: list[str] | None) -> str:
    if names is None:
        return "None"
    return "[" + ", ".join(names) + "]"


def format_data_type(data_type: DataType) -> str:
    if isinstance(data_type, IntType):
        return "INT"
    if isinstance(data_type, BooleanType):
        return "BOOLEAN"
    if isinstance(data_type, VarcharType):
        return f"VARCHAR({data_type.size})"
    raise TypeError(f"Unhandled data type: {data_type!r}")


def expression_lines(expr: Expression, depth: int, indent: int) -> list[str]:
    pad = " " * (depth * indent)
    if isinstance(expr, Identifier):
        return [f"{pad}Identifier {expr.name}"]
    if isinstance(expr, Number):
        return [f"{pad}Number {expr.value}"]
    if isinstance(expr, String):
        return [f"{pad}String {expr.value!r}"]
    if isinstance(expr, Boolean):
        return [f"{pad}Boolean {'true' if expr.value else 'false'}"]
    if isinstance(expr, Null):
        return [f"{pad}Null"]
    if isinstance(expr, UnaryOperation):
        return [f"{pad}UnaryOperation {expr.operator.value}"] + expression_lines(expr.operand, depth + 1, indent)
    if isinstance(expr, BinaryOperation):
        return (
            [f"{pad}BinaryOperation {expr.operator.value}"]
            + expression_lines(expr.left, depth + 1, indent)
            + expression_lines(expr.right, depth + 1, indent)
        )
    if isinstance(expr, Grouped):
        return [f"{pad}Grouped"] + expression_lines(expr.expression, depth + 1, indent)
    raise TypeError(f"Unhandled expression node: {expr!r}")


def statement_lines(stmt: Statement, indent: int) -> list[str]:
    pad = " " * indent
    if isinstance(stmt, Select):
        out = ["Select", f"{pad}columns: {format_names(stmt.columns)}", f"{pad}table: {stmt.table}"]
        if stmt.selection is None:
            out.append(f"{pad}selection: None")
        else:
            out.append(f"{pad}selection:")
            out.extend(expression_lines(stmt.selection, 2, indent))
        out.append(f"{pad}order_by: {format_names(stmt.order_by)}")
        return out

    if isinstance(stmt, CreateTable):
        out = ["CreateTable", f"{pad}table_name: {stmt.table_name}", f"{pad}columns:"]
        for c in stmt.columns:
            out.append(f"{pad * 2}{c.name} {format_data_type(c.data_type)}")
        return out

    if isinstance(stmt, Insert):
        out = [
            "Insert",
            f"{pad}table_name: {stmt.table_name}",
            f"{pad}columns: {format_names(stmt.columns)}",
            f"{pad}values:",
        ]
        for v in stmt.values:
            out.extend(expression_lines(v, 2, indent))
        return out

    raise TypeError(f"Unhandled statement node: {stmt!r}")


def format_ast(node: object, indent: int = 2) -> str:
    """
    Render an AST node as an indented tree.

    Args:
        node: Statement, Expression, ColumnDef or DataType.
        indent: Spaces per nesting level.

    Returns:
        Multi-line string without a trailing newline.

    Raises:
        TypeError: if `node` is not an sqlfront AST node.
    """
    if isinstance(node, Statement):
        return "\n".join(statement_lines(node, indent))
    if isinstance(node, Expression):
        return "\n".join(expression_lines(node, 0, indent))
    if isinstance(node, ColumnDef):
        return f"{node.name} {format_data_type(node.data_type)}"
    if isinstance(node, DataType):
        return format_data_type(node)
    raise TypeError(f"Not an AST node: {node!r}")
