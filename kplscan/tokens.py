"""Token kinds, the token record and keyword lookup."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .charcode import Dialect


class TokenType(enum.Enum):
    """Every kind of token the scanner can produce."""

    TK_NONE = enum.auto()
    TK_IDENT = enum.auto()
    TK_NUMBER = enum.auto()
    TK_CHAR = enum.auto()
    TK_EOF = enum.auto()

    KW_PROGRAM = enum.auto()
    KW_CONST = enum.auto()
    KW_TYPE = enum.auto()
    KW_VAR = enum.auto()
    KW_INTEGER = enum.auto()
    KW_CHAR = enum.auto()
    KW_ARRAY = enum.auto()
    KW_OF = enum.auto()
    KW_FUNCTION = enum.auto()
    KW_PROCEDURE = enum.auto()
    KW_BEGIN = enum.auto()
    KW_END = enum.auto()
    KW_CALL = enum.auto()
    KW_IF = enum.auto()
    KW_THEN = enum.auto()
    KW_ELSE = enum.auto()
    KW_WHILE = enum.auto()
    KW_DO = enum.auto()
    KW_FOR = enum.auto()
    KW_TO = enum.auto()
    KW_RETURN = enum.auto()
    KW_SWITCH = enum.auto()

    SB_SEMICOLON = enum.auto()
    SB_COLON = enum.auto()
    SB_PERIOD = enum.auto()
    SB_COMMA = enum.auto()
    SB_ASSIGN = enum.auto()
    SB_EQ = enum.auto()
    SB_NEQ = enum.auto()
    SB_LT = enum.auto()
    SB_LE = enum.auto()
    SB_GT = enum.auto()
    SB_GE = enum.auto()
    SB_PLUS = enum.auto()
    SB_MINUS = enum.auto()
    SB_TIMES = enum.auto()
    SB_SLASH = enum.auto()
    SB_PLUS_ASSIGN = enum.auto()
    SB_TIMES_ASSIGN = enum.auto()
    SB_LPAR = enum.auto()
    SB_RPAR = enum.auto()
    SB_LSEL = enum.auto()
    SB_RSEL = enum.auto()


@dataclass
class Token:
    """A token with its kind, starting position and spelling."""

    kind: TokenType
    line: int
    column: int
    text: str = ""
    value: int | None = None

    def describe(self) -> str:
        """Render the token as ``line-column:KIND`` with its text where relevant."""
        prefix = f"{self.line}-{self.column}:"
        if self.kind in (TokenType.TK_IDENT, TokenType.TK_NUMBER):
            return f"{prefix}{self.kind.name}({self.text})"
        if self.kind is TokenType.TK_CHAR:
            return f"{prefix}TK_CHAR('{self.text}')"
        return prefix + self.kind.name


_BASE_KEYWORDS = (
    ("PROGRAM", TokenType.KW_PROGRAM),
    ("CONST", TokenType.KW_CONST),
    ("TYPE", TokenType.KW_TYPE),
    ("VAR", TokenType.KW_VAR),
    ("INTEGER", TokenType.KW_INTEGER),
    ("CHAR", TokenType.KW_CHAR),
    ("ARRAY", TokenType.KW_ARRAY),
    ("OF", TokenType.KW_OF),
    ("FUNCTION", TokenType.KW_FUNCTION),
    ("PROCEDURE", TokenType.KW_PROCEDURE),
    ("BEGIN", TokenType.KW_BEGIN),
    ("END", TokenType.KW_END),
    ("CALL", TokenType.KW_CALL),
    ("IF", TokenType.KW_IF),
    ("THEN", TokenType.KW_THEN),
    ("ELSE", TokenType.KW_ELSE),
    ("WHILE", TokenType.KW_WHILE),
    ("DO", TokenType.KW_DO),
    ("FOR", TokenType.KW_FOR),
    ("TO", TokenType.KW_TO),
)

_CLASSIC_KEYWORDS = dict(_BASE_KEYWORDS)

_EXTENDED_KEYWORDS = {
    **{word.lower(): kind for word, kind in _BASE_KEYWORDS},
    "return": TokenType.KW_RETURN,
    "switch": TokenType.KW_SWITCH,
}

_MAX_IDENT_LEN = {Dialect.CLASSIC: 15, Dialect.EXTENDED: 10}

_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def check_keyword(text: str, dialect: Dialect = Dialect.CLASSIC) -> TokenType | None:
    """Return the keyword kind spelled by ``text``, or None if it is not a keyword.

    CLASSIC keywords match regardless of letter case; EXTENDED keywords are
    lower case and match exactly.
    """
    if dialect is Dialect.CLASSIC:
        return _CLASSIC_KEYWORDS.get(text.translate(_ASCII_UPPER))
    return _EXTENDED_KEYWORDS.get(text)


def max_ident_length(dialect: Dialect = Dialect.CLASSIC) -> int:
    """Return the longest identifier the dialect keeps."""
    return _MAX_IDENT_LEN[dialect]