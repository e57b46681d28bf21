"""Character classes used by the scanner, for both language dialects."""

from __future__ import annotations

import enum
import string


class Dialect(enum.Enum):
    """Which flavour of the language is being scanned.

    CLASSIC has case-insensitive keywords and identifiers of up to 15
    characters. EXTENDED adds ``_`` in identifiers, ``[``/``]`` selectors,
    ``//`` line comments, ``<>``, ``+=`` and ``*=``, the keywords ``return``
    and ``switch``, and lower-case keywords matched exactly.
    """

    CLASSIC = "classic"
    EXTENDED = "extended"


class CharCode(enum.Enum):
    """The class a single input character belongs to."""

    SPACE = enum.auto()
    LETTER = enum.auto()
    DIGIT = enum.auto()
    UNDERSCORE = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    TIMES = enum.auto()
    SLASH = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    EXCLAIMATION = enum.auto()
    EQ = enum.auto()
    COMMA = enum.auto()
    PERIOD = enum.auto()
    COLON = enum.auto()
    SEMICOLON = enum.auto()
    SINGLEQUOTE = enum.auto()
    LPAR = enum.auto()
    RPAR = enum.auto()
    LSEL = enum.auto()
    RSEL = enum.auto()
    UNKNOWN = enum.auto()


def _build_common() -> dict[str, CharCode]:
    table: dict[str, CharCode] = {}
    for ch in "\t\n\v\f\r ":
        table[ch] = CharCode.SPACE
    for ch in string.ascii_letters:
        table[ch] = CharCode.LETTER
    for ch in string.digits:
        table[ch] = CharCode.DIGIT
    table.update(
        {
            "!": CharCode.EXCLAIMATION,
            "'": CharCode.SINGLEQUOTE,
            "(": CharCode.LPAR,
            ")": CharCode.RPAR,
            "*": CharCode.TIMES,
            "+": CharCode.PLUS,
            ",": CharCode.COMMA,
            "-": CharCode.MINUS,
            ".": CharCode.PERIOD,
            "/": CharCode.SLASH,
            ":": CharCode.COLON,
            ";": CharCode.SEMICOLON,
            "<": CharCode.LT,
            "=": CharCode.EQ,
            ">": CharCode.GT,
        }
    )
    return table


_COMMON = _build_common()

_TABLES: dict[Dialect, dict[str, CharCode]] = {
    Dialect.CLASSIC: _COMMON,
    Dialect.EXTENDED: {
        **_COMMON,
        "[": CharCode.LSEL,
        "]": CharCode.RSEL,
        "_": CharCode.UNDERSCORE,
    },
}


def classify(ch: str, dialect: Dialect = Dialect.CLASSIC) -> CharCode:
    """Return the character class of the single character ``ch``."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLES[dialect].get(ch, CharCode.UNKNOWN)