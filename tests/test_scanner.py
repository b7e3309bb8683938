import pytest

from kplfront.errors import CompileError, ErrorCode
from kplfront.reader import Reader
from kplfront.scanner import Scanner, format_token, scan_text
from kplfront.token import Token, TokenType

T = TokenType


def _types(text):
    return [tok.token_type for tok in scan_text(text)]


def test_small_program():
    assert _types("PROGRAM Example; BEGIN END.") == [
        T.KW_PROGRAM, T.TK_IDENT, T.SB_SEMICOLON, T.KW_BEGIN, T.KW_END, T.SB_PERIOD, T.TK_EOF,
    ]


def test_keywords_are_case_insensitive():
    assert _types("begin End wHiLe") == [T.KW_BEGIN, T.KW_END, T.KW_WHILE, T.TK_EOF]


def test_identifier_is_upper_cased():
    text = "abc9x"
    assert scan_text(text)[0].string == text.upper()


def test_number_value():
    scanned = scan_text("123")[0]
    assert scanned.token_type is T.TK_NUMBER
    assert scanned.string == "123"
    assert scanned.value == 123


def test_compound_symbols():
    assert _types(":= <= >= != < > = (. .) ( ) : .") == [
        T.SB_ASSIGN, T.SB_LE, T.SB_GE, T.SB_NEQ, T.SB_LT, T.SB_GT, T.SB_EQ,
        T.SB_LSEL, T.SB_RSEL, T.SB_LPAR, T.SB_RPAR, T.SB_COLON, T.SB_PERIOD, T.TK_EOF,
    ]


def test_symbols_without_spaces():
    assert _types("x:=y+1*z/2-w,a") == [
        T.TK_IDENT, T.SB_ASSIGN, T.TK_IDENT, T.SB_PLUS, T.TK_NUMBER, T.SB_TIMES,
        T.TK_IDENT, T.SB_SLASH, T.TK_NUMBER, T.SB_MINUS, T.TK_IDENT, T.SB_COMMA,
        T.TK_IDENT, T.TK_EOF,
    ]


def test_char_constant():
    scanned = scan_text("'a'")[0]
    assert scanned.token_type is T.TK_CHAR
    assert scanned.string == "a"


def test_comment_is_skipped():
    assert _types("a (* some ** comment *) b") == [T.TK_IDENT, T.TK_IDENT, T.TK_EOF]


def test_unterminated_comment():
    with pytest.raises(CompileError) as info:
        scan_text("a (* never closed")
    assert info.value.code is ErrorCode.ERR_END_OF_COMMENT


def test_identifier_at_length_limit():
    name = "A" * 15
    assert scan_text(name)[0].string == name


def test_identifier_too_long():
    with pytest.raises(CompileError) as info:
        scan_text("x " + "B" * 16)
    assert info.value.code is ErrorCode.ERR_IDENT_TOO_LONG
    assert info.value.col_no == scan_text("x y")[1].col_no


@pytest.mark.parametrize("text", ["!", "! =", "@", "a # b", '"s"'])
def test_invalid_symbol(text):
    with pytest.raises(CompileError) as info:
        scan_text(text)
    assert info.value.code is ErrorCode.ERR_INVALID_SYMBOL


@pytest.mark.parametrize("text", ["'", "'a", "'ab'"])
def test_invalid_char_constant(text):
    with pytest.raises(CompileError) as info:
        scan_text(text)
    assert info.value.code is ErrorCode.ERR_INVALID_CONSTANT_CHAR


def test_column_of_first_token():
    assert scan_text("  abc")[0].col_no == 3


def test_next_line_position():
    first, second = scan_text("ab\n  cd")[:2]
    assert second.line_no == first.line_no + 1
    assert second.col_no > first.col_no


def test_iteration_ends_with_single_eof():
    tokens = list(Scanner(Reader("x y")))
    assert tokens[-1].token_type is T.TK_EOF
    assert [t.token_type for t in tokens].count(T.TK_EOF) == 1


def test_get_token_after_eof_keeps_returning_eof():
    scanner = Scanner(Reader(""))
    assert scanner.get_token().token_type is T.TK_EOF
    assert scanner.get_valid_token().token_type is T.TK_EOF


def test_format_token_ident():
    assert format_token(Token(T.TK_IDENT, 2, 3, "X")) == "2-3:TK_IDENT(X)"


def test_format_token_char_and_number():
    assert format_token(Token(T.TK_CHAR, 1, 4, "q")) == "1-4:TK_CHAR('q')"
    assert format_token(Token(T.TK_NUMBER, 5, 6, "10", 10)) == "5-6:TK_NUMBER(10)"


def test_format_token_symbol():
    assert format_token(Token(T.SB_ASSIGN, 1, 1)) == "1-1:SB_ASSIGN"