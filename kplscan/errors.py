"""Scanner errors and their messages."""

from __future__ import annotations

import enum


class ErrorCode(enum.Enum):
    """Kinds of scanning error, valued by their message."""

    END_OF_COMMENT = "End of comment expected!"
    IDENT_TOO_LONG = "Identification too long!"
    INVALID_CHAR_CONSTANT = "Invalid const char!"
    INVALID_SYMBOL = "Invalid symbol!"

    @property
    def message(self) -> str:
        return self.value


class ScanError(Exception):
    """Raised when the input cannot be scanned; scanning stops there."""

    def __init__(self, code: ErrorCode, line: int, column: int) -> None:
        super().__init__(code, line, column)
        self.code = code
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.line}-{self.column}:{self.code.message}"