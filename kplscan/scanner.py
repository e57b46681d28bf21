"""Lexical scanner turning source text into tokens."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .charcode import CharCode, Dialect, classify
from .errors import ErrorCode, ScanError
from .reader import CharReader, read_source
from .tokens import Token, TokenType, check_keyword, max_ident_length


class Scanner:
    """Produces tokens from source text, one at a time.

    Errors raise ScanError at the position the problem was found; scanning
    does not continue past an error.
    """

    def __init__(self, text: str, dialect: Dialect = Dialect.CLASSIC) -> None:
        self.dialect = dialect
        self._reader = CharReader(text)
        self._extended = dialect is Dialect.EXTENDED
        ext = self._extended
        # Symbols made of one character, optionally followed by a second one.
        self._symbols: dict[CharCode, tuple[TokenType, dict[str, TokenType]]] = {
            CharCode.PLUS: (
                TokenType.SB_PLUS,
                {"=": TokenType.SB_PLUS_ASSIGN} if ext else {},
            ),
            CharCode.MINUS: (TokenType.SB_MINUS, {}),
            CharCode.TIMES: (
                TokenType.SB_TIMES,
                {"=": TokenType.SB_TIMES_ASSIGN} if ext else {},
            ),
            CharCode.LT: (
                TokenType.SB_LT,
                {"=": TokenType.SB_LE, **({">": TokenType.SB_NEQ} if ext else {})},
            ),
            CharCode.GT: (TokenType.SB_GT, {"=": TokenType.SB_GE}),
            CharCode.EQ: (TokenType.SB_EQ, {}),
            CharCode.COMMA: (TokenType.SB_COMMA, {}),
            CharCode.PERIOD: (TokenType.SB_PERIOD, {")": TokenType.SB_RSEL}),
            CharCode.COLON: (TokenType.SB_COLON, {"=": TokenType.SB_ASSIGN}),
            CharCode.SEMICOLON: (TokenType.SB_SEMICOLON, {}),
            CharCode.RPAR: (TokenType.SB_RPAR, {}),
            CharCode.LSEL: (TokenType.SB_LSEL, {}),
            CharCode.RSEL: (TokenType.SB_RSEL, {}),
        }

    def _classify_current(self) -> CharCode | None:
        ch = self._reader.current
        return None if ch is None else classify(ch, self.dialect)

    def _skip_blank(self) -> None:
        while self._classify_current() is CharCode.SPACE:
            self._reader.advance()

    def _skip_comment(self) -> None:
        reader = self._reader
        line, column = reader.line, reader.column
        reader.advance()
        reader.advance()
        while True:
            if reader.current is None:
                raise ScanError(ErrorCode.END_OF_COMMENT, line, column)
            if reader.current == "*":
                reader.advance()
                if reader.current == ")":
                    reader.advance()
                    return
            else:
                reader.advance()

    def _skip_line_comment(self) -> None:
        reader = self._reader
        while reader.current is not None and reader.current != "\n":
            reader.advance()

    def _read_ident_keyword(self) -> Token:
        reader = self._reader
        token = Token(TokenType.TK_IDENT, reader.line, reader.column)
        allowed = {CharCode.LETTER, CharCode.DIGIT}
        if self._extended:
            allowed.add(CharCode.UNDERSCORE)
        limit = max_ident_length(self.dialect)
        chars: list[str] = []
        while self._classify_current() in allowed:
            if len(chars) >= limit:
                if not self._extended:
                    raise ScanError(ErrorCode.IDENT_TOO_LONG, token.line, token.column)
                reader.advance()
                continue
            chars.append(reader.current)
            reader.advance()
        token.text = "".join(chars)
        keyword = check_keyword(token.text, self.dialect)
        if keyword is not None:
            token.kind = keyword
        return token

    def _read_number(self) -> Token:
        reader = self._reader
        token = Token(TokenType.TK_NUMBER, reader.line, reader.column)
        digits: list[str] = []
        while self._classify_current() is CharCode.DIGIT:
            digits.append(reader.current)
            reader.advance()
        token.text = "".join(digits)
        token.value = int(token.text)
        return token

    def _read_const_char(self) -> Token:
        reader = self._reader
        token = Token(TokenType.TK_CHAR, reader.line, reader.column)
        reader.advance()
        if reader.current is None:
            raise ScanError(ErrorCode.INVALID_CHAR_CONSTANT, token.line, token.column)
        token.text = reader.current
        reader.advance()
        if reader.current != "'":
            raise ScanError(ErrorCode.INVALID_CHAR_CONSTANT, token.line, token.column)
        reader.advance()
        return token

    def next_token(self) -> Token:
        """Return the next token; at end of input a TK_EOF token, repeatedly."""
        reader = self._reader
        while True:
            code = self._classify_current()
            if code is None:
                return Token(TokenType.TK_EOF, reader.line, reader.column)
            if code is CharCode.SPACE:
                self._skip_blank()
                continue
            if code in (CharCode.LETTER, CharCode.UNDERSCORE):
                return self._read_ident_keyword()
            if code is CharCode.DIGIT:
                return self._read_number()
            if code is CharCode.SINGLEQUOTE:
                return self._read_const_char()

            line, column = reader.line, reader.column
            if code is CharCode.LPAR:
                reader.advance()
                if reader.current == "*":
                    self._skip_comment()
                    continue
                if reader.current == ".":
                    reader.advance()
                    return Token(TokenType.SB_LSEL, line, column)
                return Token(TokenType.SB_LPAR, line, column)
            if code is CharCode.SLASH:
                reader.advance()
                if self._extended and reader.current == "/":
                    self._skip_line_comment()
                    continue
                return Token(TokenType.SB_SLASH, line, column)
            if code is CharCode.EXCLAIMATION:
                reader.advance()
                if reader.current == "=":
                    reader.advance()
                    return Token(TokenType.SB_NEQ, line, column)
                raise ScanError(ErrorCode.INVALID_SYMBOL, line, column)

            entry = self._symbols.get(code)
            if entry is None:
                raise ScanError(ErrorCode.INVALID_SYMBOL, line, column)
            kind, followers = entry
            reader.advance()
            follower = followers.get(reader.current) if reader.current is not None else None
            if follower is not None:
                reader.advance()
                kind = follower
            return Token(kind, line, column)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the end-of-input token."""
        while True:
            token = self.next_token()
            if token.kind is TokenType.TK_EOF:
                return
            yield token


def tokenize(text: str, dialect: Dialect = Dialect.CLASSIC) -> list[Token]:
    """Scan ``text`` and return its tokens, without the end-of-input token."""
    return list(Scanner(text, dialect))


def scan_file(path: str | os.PathLike[str], dialect: Dialect = Dialect.CLASSIC) -> list[Token]:
    """Scan the file at ``path`` and return its tokens."""
    return tokenize(read_source(path), dialect)