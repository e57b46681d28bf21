"""Character-at-a-time reading with line and column tracking."""

from __future__ import annotations

import os


class CharReader:
    """Walks through text one character at a time.

    ``current`` is the character under the cursor, or None at end of input.
    ``line`` starts at 1; ``column`` counts characters on the current line
    and is reset to 0 by a newline. The first character is read on creation.
    """

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self.current: str | None = None
        self.line = 1
        self.column = 0
        self.advance()

    def advance(self) -> str | None:
        """Move to the next character and return it (None at end of input)."""
        self.current = next(self._chars, None)
        self.column += 1
        if self.current == "\n":
            self.line += 1
            self.column = 0
        return self.current


def read_source(path: str | os.PathLike[str]) -> str:
    """Read a source file, one character per byte and line endings untouched."""
    with open(path, encoding="latin-1", newline="") as handle:
        return handle.read()