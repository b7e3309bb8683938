import string

import pytest

from kplfront.charcode import CharCode, char_code


def test_letters_are_letters():
    assert {char_code(c) for c in string.ascii_letters} == {CharCode.LETTER}


def test_digits_are_digits():
    assert {char_code(c) for c in string.digits} == {CharCode.DIGIT}


def test_whitespace_is_space():
    assert {char_code(c) for c in " \t\n\r\v\f"} == {CharCode.SPACE}


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("+", CharCode.PLUS),
        ("-", CharCode.MINUS),
        ("*", CharCode.TIMES),
        ("/", CharCode.SLASH),
        ("<", CharCode.LT),
        (">", CharCode.GT),
        ("!", CharCode.EXCLAMATION),
        ("=", CharCode.EQ),
        (",", CharCode.COMMA),
        (".", CharCode.PERIOD),
        (":", CharCode.COLON),
        (";", CharCode.SEMICOLON),
        ("'", CharCode.SINGLEQUOTE),
        ("(", CharCode.LPAR),
        (")", CharCode.RPAR),
    ],
)
def test_symbols(ch, expected):
    assert char_code(ch) is expected


@pytest.mark.parametrize("ch", ['"', "%", "@", "#", "[", "_", "\x00", "\xe9", "\u20ac"])
def test_unknown(ch):
    assert char_code(ch) is CharCode.UNKNOWN


def test_rejects_multiple_characters():
    with pytest.raises(ValueError):
        char_code("ab")


def test_rejects_empty():
    with pytest.raises(ValueError):
        char_code("")