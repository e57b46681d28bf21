# kplscan

A lexical scanner for KPL, the small Pascal-like language used in
compiler construction courses. It reads a KPL source file and prints
one token per line. Each token is prefixed with the line and column
where it starts.

## Dialects

Two dialects are supported (`kplscan.charcode.Dialect`):

- **classic** (`Dialect.CLASSIC`, the default): keywords are matched
  regardless of letter case. Identifiers are letters and digits, up to
  15 characters. A longer identifier is an error. The dialect has
  `(* ... *)` comments, `!=`, and `(.` / `.)` as selectors.
- **extended** (`Dialect.EXTENDED`): keywords are lower case and matched
  exactly, and `return` and `switch` are added. Identifiers may also
  contain and start with `_`. An identifier longer than 10 characters is
  cut to its first 10 characters. The dialect adds `//` line comments,
  `<>` (as not-equal), `+=`, `*=`, and `[` / `]` as selectors, on top of
  everything the classic dialect has.

Both dialects recognise:

- numbers, with their integer value,
- character constants such as `'a'`,
- the symbols `; : . , := = < <= > >= + - * / ( )`.

## Installation

```
pip install .
```

## Command line

```
kplscan program.kpl
kplscan --dialect extended program.kpl
```

Sample output for a file starting with `PROGRAM EXAMPLE;`:

```
1-1:KW_PROGRAM
1-9:TK_IDENT(EXAMPLE)
1-16:SB_SEMICOLON
```

The command stops with a non-zero exit status in these cases:

- No file is given. It prints `scanner: no input file.`
- The file cannot be opened. It prints `Can't read input file!`
- A lexical error is found. It prints the position and message, for
  example `3-5:Invalid symbol!`, and scanning stops at that point.

Run `kplscan --help` for the options.

## Library use

```python
from kplscan.scanner import tokenize
from kplscan.charcode import Dialect

for token in tokenize("x := 10;", Dialect.CLASSIC):
    print(token.describe())
```

The modules:

- `kplscan.scanner`
  - `tokenize(text, dialect)` returns the list of tokens. The end-of-input token is not included.
  - `scan_file(path, dialect)` does the same for a file.
  - `Scanner` gives token-by-token control. `next_token()` returns a `TK_EOF` token at the end of input. Iterating over a `Scanner` yields tokens up to the end of input.
- `kplscan.tokens`
  - `Token` has `kind` (a `TokenType`), `line`, `column`, `text` and `value`. `value` is set only for numbers.
  - `Token.describe()` renders the token in the command's output format.
  - `check_keyword(text, dialect)` returns the keyword kind spelled by `text`, or `None`.
  - `max_ident_length(dialect)` returns the identifier length limit.
- `kplscan.charcode`
  - `classify(ch, dialect)` returns the `CharCode` class of a single character.
- `kplscan.reader`
  - `CharReader` steps through text one character at a time and tracks the line and column.
  - `read_source(path)` reads a file one character per byte, leaving line endings as they are.
- `kplscan.errors`
  - Lexical errors are raised as `ScanError`. It carries an `ErrorCode` (`code`), `line` and `column`. Its string form is `line-column:message`.

## Limits

This package only turns source text into tokens. It does not parse KPL,
check programs or generate code.

## Running the tests

```
pip install .[test]
pytest
```