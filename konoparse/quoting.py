"""Quote removal and ``$VAR`` expansion for single tokens."""

from __future__ import annotations

from collections.abc import Iterator

from konoparse.environ import expand_variable
from konoparse.libstr import strtrim, substr
from konoparse.tokens import Token

QUOTES = "\"'"
# Characters that end a variable name inside a double-quoted string.
VARIABLE_TERMINATORS = "\"' $"

_QUOTED_OPERATORS = frozenset(
    {
        '"<<"', '">>"', '"<"', '">"',
        "'<<'", "'>>'", "'<'", "'>'",
        '"|"', "'|'",
    }
)


class UnclosedQuoteError(ValueError):
    """Raised when a token opens a quote that it never closes."""

    def __init__(self, text: str) -> None:
        super().__init__(f"konosubash: parser error: unclosed quote `{text}'")
        self.text = text


def check_quotes_closed(text: str | None) -> str | None:
    """Return ``text`` unchanged, or raise if it starts a quote it does not close."""
    if not text:
        return text
    if text[0] in QUOTES and (len(text) == 1 or text[0] != text[-1]):
        raise UnclosedQuoteError(text)
    return text


def is_quoted_operator(text: str | None) -> bool:
    """Tell whether ``text`` is exactly a pipe or redirection operator in quotes."""
    return text in _QUOTED_OPERATORS


def _expanded_pieces(text: str, env: list[str] | None) -> Iterator[str]:
    index = 0
    while index < len(text):
        if text[index] != "$":
            yield text[index]
            index += 1
            continue
        start = index + 1
        index = start
        while index < len(text) and text[index] not in VARIABLE_TERMINATORS:
            index += 1
        yield expand_variable(env, substr(text, start, index - start))


def expanded_length(text: str | None, env: list[str] | None) -> int:
    """Length of ``text`` once each ``$NAME`` is replaced by its value."""
    if not text:
        return 0
    return sum(len(piece) for piece in _expanded_pieces(text, env))


def expand_double_quoted(text: str | None, env: list[str] | None) -> str:
    """Replace each ``$NAME`` in ``text`` by its value; unset names vanish.

    A text that is only ``$`` (apart from surrounding spaces) stays ``$``.
    """
    if text is None:
        return ""
    if strtrim(text, " ") == "$":
        return "$"
    return "".join(_expanded_pieces(text, env))


def quote_handler(token: Token | None, env: list[str] | None) -> str | None:
    """Strip the quotes from ``token`` in place and return its new value.

    Single-quoted text is taken literally. Double-quoted text has its
    variables expanded unless it is a quoted operator. Quoted operators are
    marked literal so they are not treated as operators later. Raises
    ``UnclosedQuoteError`` and leaves the token untouched when a quote is
    left open.
    """
    if token is None or token.value is None:
        return None
    original = token.value
    check_quotes_closed(original)
    operator_literal = is_quoted_operator(original)
    quote = original[:1]
    if quote == "'":
        token.literal = True
        token.value = strtrim(original, "'")
    elif quote == '"':
        token.literal = operator_literal
        token.value = strtrim(original, '"')
        if not token.literal:
            token.value = expand_double_quoted(token.value, env)
    else:
        token.literal = operator_literal
    return token.value