# kplfront

The front end of a compiler for KPL, a small Pascal-like teaching language.
It provides these modules:

- `kplfront.charcode` puts each input character into a lexical class. See
  `CharCode` and `char_code`.
- `kplfront.token` holds the token types (`TokenType`) and the `Token`
  dataclass. It also recognises keywords (`check_keyword`) and gives readable
  names for token types (`token_to_string`).
- `kplfront.errors` defines the compile error codes and their messages
  (`ErrorCode`, `error_message`). It also defines the exceptions
  `CompileError` and `MissingTokenError`. Both carry `line_no`, `col_no` and
  `message`.
- `kplfront.reader` is a character reader that tracks line and column
  positions (`Reader`, `Reader.from_file`). Files are read as Latin-1.
- `kplfront.scanner` is the lexical analyser. It provides `Scanner` with
  `get_token`, `get_valid_token` and iteration, plus `scan_text` and
  `format_token`.
- `kplfront.symtab` covers types, constants, scopes and the symbol table.
  `SymbolTable` predeclares `READC`, `READI`, `WRITEI`, `WRITEC` and
  `WRITELN`. It has block entry and exit and name lookup through enclosing
  blocks.
- `kplfront.debug` renders types, constants, objects and scopes as text.

## Installation

```
pip install .
```

## Scanning

```python
from kplfront.scanner import scan_text, format_token

for token in scan_text("PROGRAM demo; BEGIN x := 1 END."):
    print(format_token(token))
```

Each token prints as `line-column:KIND`, for example `1-1:KW_PROGRAM` or
`1-9:TK_IDENT(DEMO)`. The token list always ends with a `TK_EOF` token.

Lexical rules:

- Identifiers and keywords are case-insensitive and are upper-cased.
- An identifier may be at most 15 characters long.
- Comments are written `(* ... *)`.
- Array subscripts use `(.` and `.)`.
- A character constant is a single character between single quotes.

A lexical error raises `CompileError` at the first problem found. The
exception text has the form `line-column:message`. For example,
`scan_text("x := #")` raises `CompileError` with the text
`1-6:Invalid symbol.`.

## Symbol table

```python
from kplfront.symtab import SymbolTable, make_int_type
from kplfront.debug import format_object

table = SymbolTable()
program = table.create_program("DEMO")
table.enter_block(program.scope)

var = table.create_variable("X")
var.type = make_int_type()
table.declare(var)

assert table.lookup("X") is var
assert table.lookup("WRITELN").name == "WRITELN"

table.exit_block()
print(format_object(program, 0))
```

The last line prints:

```
Program DEMO
    Var X : Int
```

## What the package does not do

The package stops at tokens and the symbol table.

- It has no parser. Nothing here reads a token stream into declarations and
  statements.
- It does no type checking.
- It generates no code.
- It has no command-line program.

`MissingTokenError` and most of the `ErrorCode` values exist for a parser to
raise. The package itself raises only the scanner's lexical errors.

## Running the tests

```
pip install .[test]
pytest
```