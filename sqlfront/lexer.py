"""
sqlfront/lexer.py

SQL tokenizer (lexer) for the sqlfront dialect.

Responsibilities:
- Convert an input SQL line into tokens with line/column positions
- Recognize keywords, identifiers, literals, punctuation and operators
- Never fail: characters that start no token become ILLEGAL tokens, which the
  parsers reject with a positioned error

Notes:
- Keywords are matched case-insensitively and are reserved words.
- String literals use single or double quotes: 'hello' / "hello" (no escapes)
- Booleans: true/false (case-insensitive); NULL is its own token type.
- Numbers are unsigned 64-bit integers; larger digit runs are ILLEGAL, and so
  is a digit run glued to letters or underscores (5abc is one ILLEGAL token).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .errors import Position

U64_MAX = 2**64 - 1


class TokenType(Enum):
    """Token categories recognized by the lexer."""
    EOF = auto()
    ILLEGAL = auto()

    # Identifiers + literals
    IDENT = auto()
    NUMBER = auto()
    STRING = auto()
    BOOL = auto()
    NULL = auto()

    # Punctuation
    LPAREN = auto()   # (
    RPAREN = auto()   # )
    COMMA = auto()    # ,
    SEMI = auto()     # ;

    # Operators
    EQ = auto()       # =
    NEQ = auto()      # <>
    LT = auto()       # <
    LTE = auto()      # <=
    GT = auto()       # >
    GTE = auto()      # >=
    PLUS = auto()     # +
    MINUS = auto()    # -
    STAR = auto()     # *
    SLASH = auto()    # /

    # Keywords
    SELECT = auto()
    FROM = auto()
    WHERE = auto()
    ORDER = auto()
    BY = auto()
    CREATE = auto()
    TABLE = auto()
    INSERT = auto()
    INTO = auto()
    VALUES = auto()
    INT = auto()
    VARCHAR = auto()
    BOOLEAN = auto()
    AND = auto()
    OR = auto()
    NOT = auto()


KEYWORDS: dict[str, TokenType] = {
    "SELECT": TokenType.SELECT,
    "FROM": TokenType.FROM,
    "WHERE": TokenType.WHERE,
    "ORDER": TokenType.ORDER,
    "BY": TokenType.BY,
    "CREATE": TokenType.CREATE,
    "TABLE": TokenType.TABLE,
    "INSERT": TokenType.INSERT,
    "INTO": TokenType.INTO,
    "VALUES": TokenType.VALUES,
    "INT": TokenType.INT,
    "VARCHAR": TokenType.VARCHAR,
    "BOOLEAN": TokenType.BOOLEAN,
    "AND": TokenType.AND,
    "OR": TokenType.OR,
    "NOT": TokenType.NOT,
}

# Two-character operators must be tried before their one-character prefixes.
TWO_CHAR_SYMBOLS: dict[str, TokenType] = {
    "<>": TokenType.NEQ,
    "<=": TokenType.LTE,
    ">=": TokenType.GTE,
}

ONE_CHAR_SYMBOLS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMI,
    "=": TokenType.EQ,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

QUOTES = ("'", '"')


def is_digit(ch: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts superscripts etc."""
    return len(ch) == 1 and "0" <= ch <= "9"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Attributes:
        typ: TokenType
        lexeme: The original text fragment
        value: Parsed value for literals/idents:
               - IDENT -> str
               - NUMBER -> int
               - STRING -> str (without quotes)
               - BOOL -> bool
               - keywords -> uppercased keyword
               - everything else -> None
        pos: Position in input (line/col)
    """
    typ: TokenType
    lexeme: str
    value: object | None
    pos: Position

    def describe(self) -> str:
        """Short human readable form used in error messages."""
        if self.typ == TokenType.EOF:
            return "end of input"
        if self.typ in (TokenType.IDENT, TokenType.NUMBER, TokenType.STRING, TokenType.BOOL, TokenType.ILLEGAL):
            return f"{self.typ.name} {self.lexeme!r}"
        return repr(self.lexeme)


class Tokenizer:
    """
    Incremental scanner over one line of SQL text.

    Each call to next_token() consumes at least one character or returns EOF;
    after the input is exhausted every further call returns EOF again.
    """

    def __init__(self, text: str):
        self.text = text
        self.i = 0
        self.line = 1
        self.col = 1

    def cur_pos(self) -> Position:
        return Position(line=self.line, col=self.col)

    def peek(self, offset: int = 0) -> str:
        j = self.i + offset
        if j >= len(self.text):
            return ""
        return self.text[j]

    def advance(self, n: int = 1) -> None:
        """Advance the cursor by n characters while tracking line/column."""
        for _ in range(n):
            if self.i >= len(self.text):
                return
            ch = self.text[self.i]
            self.i += 1
            if ch == "\n":
                self.line += 1
                self.col = 1
            else:
                self.col += 1

    def _emit(self, typ: TokenType, length: int, value: object | None = None) -> Token:
        start = self.cur_pos()
        lexeme = self.text[self.i:self.i + length]
        self.advance(length)
        return Token(typ, lexeme, value, start)

    def next_token(self) -> Token:
        """Scan and return the next token."""
        while self.peek().isspace():
            self.advance(1)

        ch = self.peek()
        if ch == "":
            return Token(TokenType.EOF, "", None, self.cur_pos())

        pair = ch + self.peek(1)
        if pair in TWO_CHAR_SYMBOLS:
            return self._emit(TWO_CHAR_SYMBOLS[pair], 2)
        if ch in ONE_CHAR_SYMBOLS:
            return self._emit(ONE_CHAR_SYMBOLS[ch], 1)

        if ch in QUOTES:
            return self._scan_string(ch)
        if is_digit(ch):
            return self._scan_number()
        if ch.isalpha() or ch == "_":
            return self._scan_word()

        # Unknown character
        return self._emit(TokenType.ILLEGAL, 1)

    def _scan_string(self, quote: str) -> Token:
        end = self.text.find(quote, self.i + 1)
        if end == -1:
            # Unterminated: swallow the rest of the line.
            return self._emit(TokenType.ILLEGAL, len(self.text) - self.i)
        body = self.text[self.i + 1:end]
        return self._emit(TokenType.STRING, end + 1 - self.i, body)

    def _scan_number(self) -> Token:
        j = self.i
        while j < len(self.text) and is_digit(self.text[j]):
            j += 1
        if j < len(self.text) and (self.text[j].isalnum() or self.text[j] == "_"):
            # Digits running into a word, e.g. 5abc: reject the whole word.
            while j < len(self.text) and (self.text[j].isalnum() or self.text[j] == "_"):
                j += 1
            return self._emit(TokenType.ILLEGAL, j - self.i)
        n = int(self.text[self.i:j])
        if n > U64_MAX:
            return self._emit(TokenType.ILLEGAL, j - self.i)
        return self._emit(TokenType.NUMBER, j - self.i, n)

    def _scan_word(self) -> Token:
        j = self.i
        while j < len(self.text) and (self.text[j].isalnum() or self.text[j] == "_"):
            j += 1

        upper = self.text[self.i:j].upper()
        if upper == "TRUE":
            return self._emit(TokenType.BOOL, j - self.i, True)
        if upper == "FALSE":
            return self._emit(TokenType.BOOL, j - self.i, False)
        if upper == "NULL":
            return self._emit(TokenType.NULL, j - self.i)
        if upper in KEYWORDS:
            return self._emit(KEYWORDS[upper], j - self.i, upper)
        return self._emit(TokenType.IDENT, j - self.i, self.text[self.i:j])


def tokenize(sql: str) -> list[Token]:
    """
    Tokenize a SQL string into a list of Token objects.

    Args:
        sql: Raw SQL input string.

    Returns:
        List of Token, always terminated with exactly one EOF token.
    """
    scanner = Tokenizer(sql)
    tokens: list[Token] = []
    while True:
        t = scanner.next_token()
        tokens.append(t)
        if t.typ == TokenType.EOF:
            return tokens
