"""Lexical scanner producing tokens from a character reader."""

from __future__ import annotations

from collections.abc import Iterator

from .charcode import CharCode, char_code
from .errors import CompileError, ErrorCode
from .reader import Reader
from .token import MAX_IDENT_LEN, Token, TokenType, check_keyword

_SINGLE = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.SLASH: TokenType.SB_SLASH,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.RPAR: TokenType.SB_RPAR,
}

# first char -> (expected second char, two-char token, one-char token or None)
_PAIRS = {
    CharCode.LT: (CharCode.EQ, TokenType.SB_LE, TokenType.SB_LT),
    CharCode.GT: (CharCode.EQ, TokenType.SB_GE, TokenType.SB_GT),
    CharCode.COLON: (CharCode.EQ, TokenType.SB_ASSIGN, TokenType.SB_COLON),
    CharCode.PERIOD: (CharCode.RPAR, TokenType.SB_RSEL, TokenType.SB_PERIOD),
    CharCode.EXCLAMATION: (CharCode.EQ, TokenType.SB_NEQ, None),
}

_IDENT_CHARS = (CharCode.LETTER, CharCode.DIGIT)


class Scanner:
    """Turns the characters of a :class:`Reader` into tokens."""

    def __init__(self, reader: Reader) -> None:
        self._reader = reader

    def _code(self) -> CharCode | None:
        ch = self._reader.current_char
        return None if ch is None else char_code(ch)

    def _position(self) -> tuple[int, int]:
        return self._reader.line_no, self._reader.col_no

    def _skip_blank(self) -> None:
        while self._code() is CharCode.SPACE:
            self._reader.read_char()

    def _skip_comment(self) -> None:
        state = 0
        while self._reader.current_char is not None and state < 2:
            code = self._code()
            if code is CharCode.TIMES:
                state = 1
            elif code is CharCode.RPAR:
                state = 2 if state == 1 else 0
            else:
                state = 0
            self._reader.read_char()
        if state != 2:
            raise CompileError(ErrorCode.ERR_END_OF_COMMENT, *self._position())

    def _read_ident_keyword(self) -> Token:
        line, col = self._position()
        chars = []
        while self._code() in _IDENT_CHARS:
            chars.append(self._reader.current_char.upper())
            self._reader.read_char()
        if len(chars) > MAX_IDENT_LEN:
            raise CompileError(ErrorCode.ERR_IDENT_TOO_LONG, line, col)
        word = "".join(chars)
        token_type = check_keyword(word)
        if token_type is TokenType.TK_NONE:
            token_type = TokenType.TK_IDENT
        return Token(token_type, line, col, word)

    def _read_number(self) -> Token:
        line, col = self._position()
        digits = []
        while self._code() is CharCode.DIGIT:
            digits.append(self._reader.current_char)
            self._reader.read_char()
        text = "".join(digits)
        return Token(TokenType.TK_NUMBER, line, col, text, int(text))

    def _read_const_char(self) -> Token:
        line, col = self._position()
        ch = self._reader.read_char()
        if ch is None or self._reader.read_char() is None:
            raise CompileError(ErrorCode.ERR_INVALID_CONSTANT_CHAR, line, col)
        if self._code() is not CharCode.SINGLEQUOTE:
            raise CompileError(ErrorCode.ERR_INVALID_CONSTANT_CHAR, line, col)
        self._reader.read_char()
        return Token(TokenType.TK_CHAR, line, col, ch)

    def get_token(self) -> Token:
        """Scan and return the next token; raise :class:`CompileError` on bad input."""
        reader = self._reader
        while True:
            if reader.current_char is None:
                return Token(TokenType.TK_EOF, *self._position())
            code = self._code()
            line, col = self._position()

            if code is CharCode.SPACE:
                self._skip_blank()
                continue
            if code is CharCode.LETTER:
                return self._read_ident_keyword()
            if code is CharCode.DIGIT:
                return self._read_number()
            if code is CharCode.SINGLEQUOTE:
                return self._read_const_char()
            if code in _SINGLE:
                reader.read_char()
                return Token(_SINGLE[code], line, col)
            if code is CharCode.LPAR:
                reader.read_char()
                following = self._code()
                if following is CharCode.PERIOD:
                    reader.read_char()
                    return Token(TokenType.SB_LSEL, line, col)
                if following is CharCode.TIMES:
                    reader.read_char()
                    self._skip_comment()
                    continue
                return Token(TokenType.SB_LPAR, line, col)
            if code in _PAIRS:
                second, paired, alone = _PAIRS[code]
                reader.read_char()
                if self._code() is second:
                    reader.read_char()
                    return Token(paired, line, col)
                if alone is None:
                    raise CompileError(ErrorCode.ERR_INVALID_SYMBOL, line, col)
                return Token(alone, line, col)
            raise CompileError(ErrorCode.ERR_INVALID_SYMBOL, line, col)

    def get_valid_token(self) -> Token:
        """Return the next token that is not ``TK_NONE``."""
        token = self.get_token()
        while token.token_type is TokenType.TK_NONE:
            token = self.get_token()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-file token."""
        while True:
            token = self.get_valid_token()
            yield token
            if token.token_type is TokenType.TK_EOF:
                return


def format_token(token: Token) -> str:
    """Render a token as ``line-col:KIND`` with its text where relevant."""
    prefix = f"{token.line_no}-{token.col_no}:"
    kind = token.token_type
    if kind is TokenType.TK_IDENT:
        return f"{prefix}TK_IDENT({token.string})"
    if kind is TokenType.TK_NUMBER:
        return f"{prefix}TK_NUMBER({token.string})"
    if kind is TokenType.TK_CHAR:
        return f"{prefix}TK_CHAR('{token.string}')"
    return prefix + kind.name


def scan_text(text: str) -> list[Token]:
    """Scan ``text`` completely and return its tokens, ending with ``TK_EOF``."""
    return list(Scanner(Reader(text)))