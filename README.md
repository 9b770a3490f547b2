# minitable

Building blocks for a small shell: a token model, a parser that turns a
token stream into a table of pipeline commands, a debugging view of that
table, and helpers for strings, `printf`-style formatting and buffered line
reading. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Tokens

`minitable.tokens` defines:

- `TokenType`, an `IntEnum` with `PIPE`, `REDIN`, `REDOUT`, `HEREDOC`,
  `REDAPPEND`, `SQUOTES`, `DQUOTES`, `ARGS`, `EXITSTATUS` and `WORD`.
- `Token`, a frozen dataclass with `type` and `value`.
  `Token.is_redirection()` is true for `REDIN`, `REDOUT`, `REDAPPEND` and
  `HEREDOC`; `Token.is_filename()` is true for `WORD`, `SQUOTES`,
  `DQUOTES`, `ARGS` and `EXITSTATUS`.
- `describe_token(token)`, which returns a block of the form
  `"Token\n Type: WORD\n Value: ls\n\n"`. Kinds without a label
  (quoted words, `ARGS`, `EXITSTATUS`) show as `(null)`.
- `format_token_list(tokens)`, which joins the descriptions of all tokens.

## Parsing a pipeline

`minitable.parser.parse(tokens)` splits a token list at every pipe and
builds one `Command` per segment. A `Command` is a dataclass with three
lists:

- `args`: the words of the command; the first word is lowercased
  (ASCII letters only),
- `red_symbols`: the redirection operators, in order,
- `filenames`: the token that follows each redirection, at the same index.

Every redirection must be followed by a token for which `is_filename()` is
true; otherwise `build_command` raises `SyntaxFailure` (a `ValueError`)
with a message naming the offending token, or `newline` at the end of the
segment.

The individual steps are available too:

- `count_lines(tokens)`: number of pipes plus one,
- `split_segments(tokens)`: the token lists between pipes; an empty
  segment after the last pipe is dropped,
- `build_command(segment)`: one `Command` from one segment.

```python
from minitable.tokens import Token, TokenType
from minitable.parser import parse

tokens = [
    Token(TokenType.WORD, "LS"),
    Token(TokenType.WORD, "-l"),
    Token(TokenType.REDOUT, ">"),
    Token(TokenType.WORD, "out.txt"),
    Token(TokenType.PIPE, "|"),
    Token(TokenType.WORD, "wc"),
]
commands = parse(tokens)
# commands[0].args == ["ls", "-l"]
# commands[0].red_symbols == [">"]
# commands[0].filenames == ["out.txt"]
# commands[1].args == ["wc"]
```

## Viewing the table

`minitable.table_view.format_command(command)` renders the counts and
contents of one command with ANSI colours, and
`format_table(commands, syntax_error)` renders every line of the table,
numbered from 1. When `syntax_error` is true it returns an empty string.

## Utilities

`minitable.strings` offers C-style string helpers on Python strings:

- `atoi(text)`: skips leading whitespace, reads an optional sign and
  digits; returns 0 when there are none.
- `itoa(number)`: decimal text of a 32-bit signed integer; raises
  `OverflowError` outside that range.
- `split(text, separator)`: splits on one character, dropping empty words.
- `strtrim(text, charset)`: strips characters in `charset` from both ends.
- `substr(text, start, length)`: at most `length` characters from `start`.
- `strncmp(first, second, count)`: compares up to `count` characters.
- `strnstr(haystack, needle, length)`: the rest of `haystack` from the
  first match of `needle` within its first `length` characters, or `None`.
- `strlcpy(source, size)` and `strlcat(destination, source, size)`: return
  the text that fits in a buffer of `size` (terminator included) together
  with the length that was attempted.

Negative sizes raise `ValueError`.

`minitable.printf` provides `format_printf(template, *args)`, returning
the text for the `%c %s %p %d %i %u %x %X %%` conversions (`%d`/`%i`
wrap to 32-bit signed, `%u`/`%x`/`%X` to 32-bit unsigned, `%s` prints
`(null)` for `None`), and `printf(template, *args)`, which writes that text
to standard output and returns its length. Unknown conversions print
nothing; a missing argument or a wrongly typed one raises `TypeError`, and
a template ending in a lone `%` raises `ValueError`.

`minitable.linereader.LineReader(stream, buffer_size=10)` reads a text or
binary stream in chunks of `buffer_size` and returns one line at a time
from `read_line()`, each with its newline, then `None` at the end; the last
line may lack a newline. Iterating over a `LineReader` yields the lines.

## What the package does not do

It does not read or lex command lines, expand variables or quotes, run
commands, handle redirections or heredocs, provide built-in commands or
offer an interactive prompt. It works on token lists that are already
built and produces the command table and its text form.