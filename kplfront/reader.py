"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os


class Reader:
    """Reads source text one character at a time.

    ``current_char`` is ``None`` once the end of input has been reached.
    The first character is read on construction.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.current_char: str | None = None
        self.line_no = 1
        self.col_no = 0
        self.read_char()

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Reader:
        """Create a reader over the contents of the file at ``path``."""
        with open(path, "r", encoding="latin-1", newline="") as stream:
            return cls(stream.read())

    def read_char(self) -> str | None:
        """Advance to the next character and return it, or ``None`` at the end."""
        if self._pos < len(self._text):
            ch: str | None = self._text[self._pos]
            self._pos += 1
        else:
            ch = None
        self.current_char = ch
        self.col_no += 1
        if ch == "\n":
            self.line_no += 1
            self.col_no = 0
        return ch