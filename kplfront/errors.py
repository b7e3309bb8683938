"""Compile-time error codes and the exceptions that report them."""

from __future__ import annotations

from enum import Enum, auto

from .token import TokenType, token_to_string


class ErrorCode(Enum):
    """Every error the front end can report."""

    ERR_END_OF_COMMENT = auto()
    ERR_IDENT_TOO_LONG = auto()
    ERR_INVALID_CONSTANT_CHAR = auto()
    ERR_INVALID_SYMBOL = auto()
    ERR_INVALID_IDENT = auto()
    ERR_INVALID_CONSTANT = auto()
    ERR_INVALID_TYPE = auto()
    ERR_INVALID_BASICTYPE = auto()
    ERR_INVALID_VARIABLE = auto()
    ERR_INVALID_FUNCTION = auto()
    ERR_INVALID_PROCEDURE = auto()
    ERR_INVALID_PARAMETER = auto()
    ERR_INVALID_STATEMENT = auto()
    ERR_INVALID_COMPARATOR = auto()
    ERR_INVALID_EXPRESSION = auto()
    ERR_INVALID_TERM = auto()
    ERR_INVALID_FACTOR = auto()
    ERR_INVALID_LVALUE = auto()
    ERR_INVALID_ARGUMENTS = auto()
    ERR_UNDECLARED_IDENT = auto()
    ERR_UNDECLARED_CONSTANT = auto()
    ERR_UNDECLARED_INT_CONSTANT = auto()
    ERR_UNDECLARED_TYPE = auto()
    ERR_UNDECLARED_VARIABLE = auto()
    ERR_UNDECLARED_FUNCTION = auto()
    ERR_UNDECLARED_PROCEDURE = auto()
    ERR_DUPLICATE_IDENT = auto()
    ERR_TYPE_INCONSISTENCY = auto()
    ERR_PARAMETERS_ARGUMENTS_INCONSISTENCY = auto()


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ERR_END_OF_COMMENT: "End of comment expected.",
    ErrorCode.ERR_IDENT_TOO_LONG: "Identifier too long.",
    ErrorCode.ERR_INVALID_CONSTANT_CHAR: "Invalid char constant.",
    ErrorCode.ERR_INVALID_SYMBOL: "Invalid symbol.",
    ErrorCode.ERR_INVALID_IDENT: "An identifier expected.",
    ErrorCode.ERR_INVALID_CONSTANT: "A constant expected.",
    ErrorCode.ERR_INVALID_TYPE: "A type expected.",
    ErrorCode.ERR_INVALID_BASICTYPE: "A basic type expected.",
    ErrorCode.ERR_INVALID_VARIABLE: "A variable expected.",
    ErrorCode.ERR_INVALID_FUNCTION: "A function identifier expected.",
    ErrorCode.ERR_INVALID_PROCEDURE: "A procedure identifier expected.",
    ErrorCode.ERR_INVALID_PARAMETER: "A parameter expected.",
    ErrorCode.ERR_INVALID_STATEMENT: "Invalid statement.",
    ErrorCode.ERR_INVALID_COMPARATOR: "A comparator expected.",
    ErrorCode.ERR_INVALID_EXPRESSION: "Invalid expression.",
    ErrorCode.ERR_INVALID_TERM: "Invalid term.",
    ErrorCode.ERR_INVALID_FACTOR: "Invalid factor.",
    ErrorCode.ERR_INVALID_LVALUE: "Invalid lvalue in assignment.",
    ErrorCode.ERR_INVALID_ARGUMENTS: "Wrong arguments.",
    ErrorCode.ERR_UNDECLARED_IDENT: "Undeclared identifier.",
    ErrorCode.ERR_UNDECLARED_CONSTANT: "Undeclared constant.",
    ErrorCode.ERR_UNDECLARED_INT_CONSTANT: "Undeclared integer constant.",
    ErrorCode.ERR_UNDECLARED_TYPE: "Undeclared type.",
    ErrorCode.ERR_UNDECLARED_VARIABLE: "Undeclared variable.",
    ErrorCode.ERR_UNDECLARED_FUNCTION: "Undeclared function.",
    ErrorCode.ERR_UNDECLARED_PROCEDURE: "Undeclared procedure.",
    ErrorCode.ERR_DUPLICATE_IDENT: "Duplicate identifier.",
    ErrorCode.ERR_TYPE_INCONSISTENCY: "Type inconsistency",
    ErrorCode.ERR_PARAMETERS_ARGUMENTS_INCONSISTENCY: (
        "The number of arguments and the number of parameters are inconsistent."
    ),
}


def error_message(code: ErrorCode) -> str:
    """Return the message text for an error code."""
    return _MESSAGES[code]


class CompileError(Exception):
    """An error found in the program being compiled, with its position."""

    def __init__(self, code: ErrorCode, line_no: int, col_no: int) -> None:
        self.code: ErrorCode | None = code
        self.line_no = line_no
        self.col_no = col_no
        self.message = error_message(code)
        super().__init__(f"{line_no}-{col_no}:{self.message}")


class MissingTokenError(CompileError):
    """A token of a particular type was expected but not found."""

    def __init__(self, token_type: TokenType, line_no: int, col_no: int) -> None:
        self.code = None
        self.token_type = token_type
        self.line_no = line_no
        self.col_no = col_no
        self.message = f"Missing {token_to_string(token_type)}"
        Exception.__init__(self, f"{line_no}-{col_no}:{self.message}")