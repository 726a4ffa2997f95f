import pytest

from sqlfront.ast import (
    BinaryOperation,
    BinaryOperator,
    Boolean,
    BooleanType,
    ColumnDef,
    CreateTable,
    Identifier,
    Insert,
    IntType,
    Null,
    Number,
    Select,
    String,
    VarcharType,
)
from sqlfront.errors import (
    ExpectedIdentifier,
    ExpectedKeyword,
    ExpectedToken,
    General,
    InvalidExpression,
    ParseError,
    SqlFrontError,
    UnexpectedEnd,
    UnexpectedToken,
    UnknownStartOfStatement,
)
from sqlfront.lexer import TokenType, tokenize
from sqlfront.parser import Parser, parse_sql, parse_statement


# ---------------- SELECT ----------------

def test_select_columns_and_table():
    assert parse_sql("SELECT c1, c2 FROM t") == Select(
        columns=["c1", "c2"], table="t", selection=None, order_by=None
    )


def test_select_lowercase_keywords():
    assert parse_sql("select a from t") == Select(columns=["a"], table="t")


def test_select_trailing_semicolon():
    assert parse_sql("SELECT a FROM t;") == Select(columns=["a"], table="t")


def test_select_where():
    stmt = parse_sql("SELECT a FROM t WHERE a = 1")
    assert stmt.selection == BinaryOperation(Identifier("a"), BinaryOperator.EQUALS, Number(1))
    assert stmt.order_by is None


def test_select_where_then_order_by():
    stmt = parse_sql("SELECT a, b FROM t WHERE a > 1 AND b < 2 ORDER BY a, b;")
    assert stmt == Select(
        columns=["a", "b"],
        table="t",
        selection=BinaryOperation(
            BinaryOperation(Identifier("a"), BinaryOperator.GREATER_THAN, Number(1)),
            BinaryOperator.AND,
            BinaryOperation(Identifier("b"), BinaryOperator.LESS_THAN, Number(2)),
        ),
        order_by=["a", "b"],
    )


def test_order_by_with_and_without_semicolon():
    plain = parse_sql("SELECT a FROM t ORDER BY a")
    terminated = parse_sql("SELECT a FROM t ORDER BY a;")
    assert plain == terminated == Select(columns=["a"], table="t", order_by=["a"])


def test_order_by_consumes_terminator():
    tokens = tokenize("SELECT a FROM t ORDER BY a;")
    p = Parser(tokens)
    p.parse_statement()
    assert p.i == len(tokens) - 1
    assert tokens[p.i].typ == TokenType.EOF


def test_where_string_and_boolean_literals():
    stmt = parse_sql("SELECT name FROM users WHERE name = 'bob' OR active = true")
    assert stmt.selection == BinaryOperation(
        BinaryOperation(Identifier("name"), BinaryOperator.EQUALS, String("bob")),
        BinaryOperator.OR,
        BinaryOperation(Identifier("active"), BinaryOperator.EQUALS, Boolean(True)),
    )


def test_select_commas_are_separators_only():
    # identifiers and commas are read until FROM
    assert parse_sql("SELECT a b FROM t").columns == ["a", "b"]


def test_select_without_columns_is_rejected():
    with pytest.raises(ExpectedIdentifier):
        parse_sql("SELECT FROM t")


def test_select_star_is_not_supported():
    with pytest.raises(General) as exc:
        parse_sql("SELECT * FROM t")
    assert "column list" in str(exc.value)


def test_select_missing_table():
    with pytest.raises(UnexpectedEnd):
        parse_sql("SELECT a FROM")


def test_select_table_must_be_identifier():
    with pytest.raises(ExpectedIdentifier):
        parse_sql("SELECT a FROM 5")


def test_select_missing_from():
    with pytest.raises(UnexpectedEnd):
        parse_sql("SELECT a, b")


def test_dangling_operator_in_where():
    with pytest.raises(InvalidExpression):
        parse_sql("SELECT a FROM t WHERE a =")


def test_empty_where():
    with pytest.raises(InvalidExpression):
        parse_sql("SELECT a FROM t WHERE")


def test_order_without_by():
    with pytest.raises(ExpectedKeyword) as exc:
        parse_sql("SELECT a FROM t ORDER a")
    assert exc.value.keyword == "BY"
    assert "Expected keyword: BY" in str(exc.value)


def test_order_by_rejects_expressions():
    with pytest.raises(General):
        parse_sql("SELECT a FROM t ORDER BY a + 1")


def test_trailing_tokens_rejected():
    with pytest.raises(UnexpectedToken):
        parse_sql("SELECT a FROM t u")
    with pytest.raises(UnexpectedToken):
        parse_sql("SELECT a FROM t WHERE a = 1 b")
    with pytest.raises(UnexpectedToken):
        parse_sql("SELECT a FROM t; SELECT b FROM u")


def test_illegal_character_after_statement():
    with pytest.raises(UnexpectedToken) as exc:
        parse_sql("SELECT a FROM t @")
    assert exc.value.token.lexeme == "@"


# ---------------- CREATE TABLE ----------------

def test_create_table_preserves_column_order():
    assert parse_sql("CREATE TABLE t (a INT, b VARCHAR(10))") == CreateTable(
        table_name="t",
        columns=[ColumnDef("a", IntType()), ColumnDef("b", VarcharType(10))],
    )


def test_create_table_all_types():
    stmt = parse_sql("create table users (id int, name varchar(255), active boolean);")
    assert [c.data_type for c in stmt.columns] == [IntType(), VarcharType(255), BooleanType()]
    assert [c.name for c in stmt.columns] == ["id", "name", "active"]


def test_varchar_zero_is_structurally_allowed():
    stmt = parse_sql("CREATE TABLE t (a VARCHAR(0))")
    assert stmt.columns == [ColumnDef("a", VarcharType(0))]


@pytest.mark.parametrize(
    "sql",
    [
        "CREATE TABLE t (a VARCHAR)",
        "CREATE TABLE t (a VARCHAR, b INT)",
        "CREATE TABLE t (a VARCHAR(x))",
        "CREATE TABLE t (a VARCHAR(10",
        "CREATE TABLE t (a VARCHAR(10, b INT)",
        "CREATE TABLE t (a VARCHAR())",
    ],
)
def test_varchar_requires_size(sql):
    with pytest.raises(General) as exc:
        parse_sql(sql)
    assert "size for VARCHAR" in str(exc.value)


def test_unknown_column_type():
    with pytest.raises(General) as exc:
        parse_sql("CREATE TABLE t (a TEXT)")
    assert "Unexpected column type" in str(exc.value)


def test_create_requires_table_keyword():
    with pytest.raises(ExpectedKeyword):
        parse_sql("CREATE t (a INT)")


def test_create_requires_open_paren():
    with pytest.raises(ExpectedToken) as exc:
        parse_sql("CREATE TABLE t a INT")
    assert exc.value.expected == "'('"
    assert exc.value.actual.value == "a"


def test_create_unclosed_column_list():
    with pytest.raises(UnexpectedEnd):
        parse_sql("CREATE TABLE t (a INT")


def test_keywords_cannot_name_tables():
    with pytest.raises(ExpectedIdentifier):
        parse_sql("CREATE TABLE order (a INT)")


# ---------------- INSERT ----------------

def test_insert_basic():
    assert parse_sql("INSERT INTO t (a, b) VALUES (5, true)") == Insert(
        table_name="t", columns=["a", "b"], values=[Number(5), Boolean(True)]
    )


def test_insert_all_value_kinds():
    stmt = parse_sql("INSERT INTO t (a, b, c, d, e) VALUES (1, 'x', FALSE, NULL, other);")
    assert stmt.values == [Number(1), String("x"), Boolean(False), Null(), Identifier("other")]


def test_insert_values_are_not_expressions():
    with pytest.raises(General) as exc:
        parse_sql("INSERT INTO t (a) VALUES (1 + 2)")
    assert "VALUES" in str(exc.value)


def test_insert_requires_into():
    with pytest.raises(ExpectedKeyword):
        parse_sql("INSERT t (a) VALUES (1)")


def test_insert_requires_values_keyword():
    with pytest.raises(ExpectedKeyword) as exc:
        parse_sql("INSERT INTO t (a) (1)")
    assert exc.value.keyword == "VALUES"


def test_insert_values_need_parentheses():
    with pytest.raises(ExpectedToken):
        parse_sql("INSERT INTO t (a) VALUES 1")


def test_insert_values_cut_short():
    with pytest.raises(ExpectedToken) as exc:
        parse_sql("INSERT INTO t (a) VALUES")
    assert exc.value.actual is None
    with pytest.raises(UnexpectedEnd):
        parse_sql("INSERT INTO t (a) VALUES (1,")


def test_insert_bad_column_token():
    with pytest.raises(General):
        parse_sql("INSERT INTO t (a, 1) VALUES (1, 2)")


def test_insert_rejects_number_glued_to_word():
    with pytest.raises(General) as exc:
        parse_sql("INSERT INTO t (a) VALUES (5abc)")
    assert "5abc" in str(exc.value)


# ---------------- dispatch / empty input ----------------

@pytest.mark.parametrize("sql", ["", "   "])
def test_empty_input(sql):
    with pytest.raises(General) as exc:
        parse_sql(sql)
    assert str(exc.value) == "Empty input"


def test_empty_token_sequence():
    with pytest.raises(General) as exc:
        parse_statement([])
    assert exc.value.message == "Empty input"


@pytest.mark.parametrize("sql", ["UPDATE t SET a = 1", "DELETE FROM t", "(SELECT a FROM t)", "42", "@"])
def test_unknown_start_of_statement(sql):
    with pytest.raises(UnknownStartOfStatement):
        parse_sql(sql)


def test_tokens_without_eof_still_parse():
    tokens = tokenize("SELECT a FROM t WHERE a < 3")[:-1]
    stmt = parse_statement(tokens)
    assert stmt.selection == BinaryOperation(Identifier("a"), BinaryOperator.LESS_THAN, Number(3))


def test_cursor_ends_at_eof():
    tokens = tokenize("INSERT INTO t (a) VALUES (1);")
    p = Parser(tokens)
    p.parse_statement()
    assert tokens[p.i].typ == TokenType.EOF


def test_error_positions():
    with pytest.raises(ExpectedIdentifier) as exc:
        parse_sql("SELECT a FROM 5")
    assert exc.value.position.col == 15
    assert str(exc.value) == "Expected an identifier (line 1, col 15)"


@pytest.mark.parametrize(
    "cls",
    [
        UnexpectedEnd,
        ExpectedKeyword,
        ExpectedIdentifier,
        InvalidExpression,
        UnknownStartOfStatement,
        ExpectedToken,
        UnexpectedToken,
        General,
    ],
)
def test_error_kinds_share_a_base(cls):
    assert issubclass(cls, ParseError)
    assert issubclass(cls, SqlFrontError)


def test_statements_are_independent():
    first = parse_sql("SELECT a FROM t")
    with pytest.raises(ParseError):
        parse_sql("SELECT")
    assert parse_sql("SELECT a FROM t") == first
