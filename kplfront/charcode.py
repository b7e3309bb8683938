"""Classification of source characters into lexical classes."""

from __future__ import annotations

import string
from enum import Enum, auto


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = auto()
    LETTER = auto()
    DIGIT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EXCLAMATION = auto()
    EQ = auto()
    COMMA = auto()
    PERIOD = auto()
    COLON = auto()
    SEMICOLON = auto()
    SINGLEQUOTE = auto()
    LPAR = auto()
    RPAR = auto()
    UNKNOWN = auto()


def _build_table() -> dict[str, CharCode]:
    table: dict[str, CharCode] = {}
    for ch in "\t\n\v\f\r ":
        table[ch] = CharCode.SPACE
    for ch in string.ascii_letters:
        table[ch] = CharCode.LETTER
    for ch in string.digits:
        table[ch] = CharCode.DIGIT
    table.update(
        {
            "+": CharCode.PLUS,
            "-": CharCode.MINUS,
            "*": CharCode.TIMES,
            "/": CharCode.SLASH,
            "<": CharCode.LT,
            ">": CharCode.GT,
            "!": CharCode.EXCLAMATION,
            "=": CharCode.EQ,
            ",": CharCode.COMMA,
            ".": CharCode.PERIOD,
            ":": CharCode.COLON,
            ";": CharCode.SEMICOLON,
            "'": CharCode.SINGLEQUOTE,
            "(": CharCode.LPAR,
            ")": CharCode.RPAR,
        }
    )
    return table


_TABLE = _build_table()


def char_code(ch: str) -> CharCode:
    """Return the lexical class of the single character ``ch``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLE.get(ch, CharCode.UNKNOWN)