# konoparse

The front end of a small interactive shell, in pure Python with no
dependencies. It turns a command line into classified tokens.

## What it does

- `konoparse.tokens.split_input(text)` cuts a command line into a list of
  `Token` objects. Words, quoted strings and the operators `|`, `<`, `>`,
  `<<` and `>>` each become a token. Quoted strings keep their quotes at this
  stage. If a quote is not matched, that quote becomes a token on its own.
  A token gets `merge_next=True` when the token after it follows with no
  space and neither side of the joint is an operator.
- `konoparse.quoting.quote_handler(token, env)` removes the quotes from a
  token in place. Single-quoted text is taken literally. In double-quoted
  text each `$NAME` is replaced by its value, and unset names expand to
  nothing. A quoted operator such as `"|"` or `'>>'` is marked `literal` so
  that it is later classed as a word. A token that opens a quote and does not
  close it raises `konoparse.quoting.UnclosedQuoteError`, and the token is
  left unchanged.
- `konoparse.tokens.typealize(token, env, is_builtin=None)` classifies a
  token in place and gives it one of the following types:
  - a pipe
  - a redirection (`REDIR_IN`, `REDIR_OUT`, `APPEND`, `HEREDOC`)
  - a command
  - a word

  A token counts as a command when one of these holds:
  - `is_builtin` accepts it
  - it is a path to an executable file
  - its name appears in one of the `PATH` directories (see
    `konoparse.commands.search_list`)

  Tokens of type `ASSIGNMENT` are not changed.
- `konoparse.environ` looks up variables in an environment given as a list
  of `NAME=value` strings, with `get_envar`, `expand_variable` and
  `format_env`. Calling `expand_variable` with the name `env` also writes the
  whole environment to standard output.

Each `Token` holds these fields:

- `value`
- `type` and `coretype`, both `TokenType` values
- `rank`, a `Rank` value
- `literal`
- `merge_next`
- `used`
- `id`, taken from `next_token_id()`
- `args`
- `file`
- `err`

The following helpers work on token lists:

- `token_type_name` and `format_token_list` give a readable dump of the list.
- `last_of_rank` returns the last token of a given rank.
- `previous_token` returns the token before a given one.
- `untie_token` removes a token from the list.

## Supporting helpers

- `konoparse.libstr` provides string functions with C semantics: `atoi`,
  `itoa`, `split_words`, `strtrim`, `substr`, `strnstr`, `strncmp` and
  `strcmp`.
- `konoparse.linereader.LineReader(fd, buffer_size=1024)` reads lines from a
  raw file descriptor. Call `next_line()` to get one line; it returns `None`
  at the end of input. You can also iterate over the reader.
  `get_next_line(fd)` does the same job and keeps separate state for each
  descriptor.
- `konoparse.printf` provides a small printf that supports `%c %s %p %d %i
  %u %x %X %%`:
  - `format_printf(fmt, *args)` returns the formatted text.
  - `printf(fmt, *args)` writes the text to standard output and returns the
    number of bytes written.
  - `to_base(number, base)` renders a number using the given digit
    characters.

## Example

```python
from konoparse.tokens import split_input, typealize, format_token_list
from konoparse.quoting import quote_handler

env = ["PATH=/usr/bin:/bin", "HOME=/home/user"]

tokens = split_input('echo "$HOME" | wc -l > out.txt')
for token in tokens:
    quote_handler(token, env)
    typealize(token, env, lambda name: name in {"echo", "cd", "export"})

print(format_token_list(tokens))
```

## What it does not do

The package only tokenizes and classifies. It does not do the following:

- run commands, set up pipes or perform redirections
- read heredocs
- build a command tree from the tokens
- offer an interactive prompt or a command-line entry point

It has no list of builtins of its own; pass an `is_builtin` callable to
`typealize` to supply one. It does not join tokens marked `merge_next`; it
only sets the flag.

## Installation and tests

```
pip install .[test]
pytest
```