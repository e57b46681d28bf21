import pytest

from kplscan.charcode import Dialect
from kplscan.tokens import Token, TokenType, check_keyword, max_ident_length

CLASSIC_KEYWORDS = [
    t for t in TokenType
    if t.name.startswith("KW_") and t not in (TokenType.KW_RETURN, TokenType.KW_SWITCH)
]


@pytest.mark.parametrize("kind", CLASSIC_KEYWORDS)
def test_classic_keywords_any_case(kind):
    word = kind.name[3:]
    assert check_keyword(word, Dialect.CLASSIC) is kind
    assert check_keyword(word.lower(), Dialect.CLASSIC) is kind
    assert check_keyword(word.capitalize(), Dialect.CLASSIC) is kind


@pytest.mark.parametrize("kind", [t for t in TokenType if t.name.startswith("KW_")])
def test_extended_keywords_lower_case_only(kind):
    word = kind.name[3:]
    assert check_keyword(word.lower(), Dialect.EXTENDED) is kind
    assert check_keyword(word, Dialect.EXTENDED) is None


def test_return_and_switch_only_in_extended():
    assert check_keyword("return", Dialect.CLASSIC) is None
    assert check_keyword("switch", Dialect.CLASSIC) is None
    assert check_keyword("return", Dialect.EXTENDED) is TokenType.KW_RETURN
    assert check_keyword("switch", Dialect.EXTENDED) is TokenType.KW_SWITCH


@pytest.mark.parametrize("dialect", [Dialect.CLASSIC, Dialect.EXTENDED])
@pytest.mark.parametrize("word", ["x", "beginx", "begi", "", "end1"])
def test_non_keywords(word, dialect):
    assert check_keyword(word, dialect) is None


def test_default_dialect_is_classic():
    assert check_keyword("Begin") is TokenType.KW_BEGIN


def test_max_ident_length():
    assert max_ident_length(Dialect.CLASSIC) == 15
    assert max_ident_length(Dialect.EXTENDED) == 10
    assert max_ident_length() == 15


def test_describe_ident():
    assert Token(TokenType.TK_IDENT, 3, 7, "abc").describe() == "3-7:TK_IDENT(abc)"


def test_describe_number():
    token = Token(TokenType.TK_NUMBER, 2, 9, "42", 42)
    assert token.describe() == "2-9:TK_NUMBER(42)"


def test_describe_char():
    assert Token(TokenType.TK_CHAR, 1, 4, "x").describe() == "1-4:TK_CHAR('x')"


@pytest.mark.parametrize(
    "kind", [TokenType.KW_BEGIN, TokenType.SB_ASSIGN, TokenType.TK_NONE, TokenType.SB_PLUS_ASSIGN]
)
def test_describe_plain_kinds(kind):
    assert Token(kind, 5, 6).describe() == f"5-6:{kind.name}"