"""Splitting command lines into tokens and classifying them."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from konoparse.commands import search_list

_BREAK_CHARS = "\"' |<>"
_OPERATOR_CHARS = "|<>"
_QUOTE_CHARS = "\"'"

_id_counter = itertools.count()


def next_token_id() -> int:
    """Return a fresh identifier; each call yields a larger one."""
    return next(_id_counter)


class TokenType(Enum):
    """What a token stands for; the value is its display name."""

    PIPE = "PIPE"
    REDIR_IN = "REDIR IN"
    REDIR_OUT = "REDIR OUT"
    APPEND = "APPEND"
    HEREDOC = "HEREDOC"
    CMD = "COMMAND"
    WORD = "WORD"
    EOF = "EOF"
    REDIR = "REDIR_CORE"
    ASSIGNMENT = "ASSIGNMENT"


class Rank(Enum):
    """Precedence class of a token when the command tree is built."""

    S = "S"
    SS = "SS"
    B = "B"
    C = "C"


@dataclass(eq=False)
class Token:
    """One piece of a command line."""

    value: str | None
    type: TokenType = TokenType.WORD
    coretype: TokenType = TokenType.WORD
    rank: Rank = Rank.C
    literal: bool = False
    merge_next: bool = False
    used: bool = False
    id: int = field(default_factory=next_token_id)
    args: list[str] | None = None
    file: str | None = None
    err: int = 0


def _unquoted_length(text: str) -> int:
    length = len(text)
    for index, char in enumerate(text):
        if char in _BREAK_CHARS:
            length = index
            break
    if length == 0:
        start = text[:1]
        if start and start in _OPERATOR_CHARS:
            if start in "<>" and text[1:2] == start:
                return 2
            return 1
    return max(length, 1)


def _token_length(text: str) -> int:
    start = text[0]
    if start in _QUOTE_CHARS:
        closing = text.find(start, 1)
        return closing + 1 if closing >= 0 else 1
    return _unquoted_length(text)


def _merges_with_next(text: str, length: int) -> bool:
    following = text[length:length + 1]
    return (
        bool(following)
        and following not in _OPERATOR_CHARS
        and following != " "
        and text[0] not in _OPERATOR_CHARS
    )


def split_input(text: str | None) -> list[Token]:
    """Cut a command line into word, quoted-string and operator tokens.

    Quoted strings keep their quotes; an unmatched quote becomes a token of
    its own. A token is marked ``merge_next`` when the next one follows it
    without a space and neither is an operator at the joint.
    """
    tokens: list[Token] = []
    rest = text or ""
    while True:
        rest = rest.lstrip(" ")
        if not rest:
            break
        length = _token_length(rest)
        tokens.append(
            Token(value=rest[:length], merge_next=_merges_with_next(rest, length))
        )
        rest = rest[length:]
    return tokens


def is_pipe(text: str | None) -> bool:
    """Tell whether ``text`` is the pipe operator."""
    return text == "|"


def is_redirection(text: str | None) -> bool:
    """Tell whether ``text`` is one of the redirection operators."""
    return text in ("<", ">", "<<", ">>")


def _make_pipe(token: Token) -> Token:
    token.used = False
    token.id = next_token_id()
    token.args = None
    token.file = None
    if token.literal:
        token.type = token.coretype = TokenType.WORD
        token.rank = Rank.C
    else:
        token.type = token.coretype = TokenType.PIPE
        token.rank = Rank.S
    return token


_REDIRECTIONS = {
    "<<": TokenType.HEREDOC,
    ">>": TokenType.APPEND,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
}


def _make_redirection(token: Token) -> Token:
    token.used = False
    token.id = next_token_id()
    token.args = None
    token.file = None
    if token.literal:
        token.type = token.coretype = TokenType.WORD
        token.rank = Rank.C
    else:
        token.type = _REDIRECTIONS[token.value]
        token.coretype = TokenType.REDIR
        token.rank = Rank.S
    return token


def _make_simple(token: Token, kind: TokenType, rank: Rank) -> Token:
    token.used = False
    token.id = next_token_id()
    token.args = None
    token.file = None
    token.type = token.coretype = kind
    token.rank = rank
    return token


def typealize(
    token: Token,
    env: Iterable[str] | None,
    is_builtin: Callable[[str], bool] | None = None,
) -> Token:
    """Classify ``token`` in place and return it.

    Assignments are left alone. Otherwise the token becomes a pipe, a
    redirection, a command (a builtin, an executable path or a name found
    in ``PATH``) or a plain word. Quoted operators become words.
    """
    if token.type is TokenType.ASSIGNMENT:
        return token
    value = token.value
    if is_pipe(value):
        return _make_pipe(token)
    if is_redirection(value):
        return _make_redirection(token)
    if value is not None and (
        (is_builtin is not None and is_builtin(value)) or search_list(value, env)
    ):
        return _make_simple(token, TokenType.CMD, Rank.B)
    return _make_simple(token, TokenType.WORD, Rank.C)


def token_type_name(token: Token | None) -> str:
    """Return the display name of a token's type."""
    if token is None:
        return "NULL TOKEN"
    if token.value is None and token.type is not TokenType.EOF:
        return "INVALID TOKEN?"
    return token.type.value


def format_token_list(tokens: Iterable[Token] | None) -> str:
    """Render tokens one per line as ``( TYPE -> value )``."""
    items = list(tokens or ())
    if not items:
        return "   (Token list is NULL)\n"
    return "".join(
        f"( {token_type_name(token)} -> "
        f"{token.value if token.value is not None else '(null value)'} )\n"
        for token in items
    )


def last_of_rank(tokens: Iterable[Token], rank: Rank) -> Token | None:
    """Return the last token of the given rank, or None."""
    found = None
    for token in tokens:
        if token.rank is rank:
            found = token
    return found


def previous_token(token: Token | None, tokens: list[Token]) -> Token | None:
    """Return the token just before ``token`` (matched by id), or None."""
    if token is None or not tokens:
        return None
    for before, current in zip(tokens, tokens[1:]):
        if current.id == token.id:
            return before
    return None


def untie_token(token: Token | None, tokens: list[Token]) -> Token | None:
    """Detach ``token`` from ``tokens`` and return the token that followed it.

    A token at the head of the list cannot be unlinked: it stays and the
    tokens after it are cut off, and None is returned. None is also
    returned when nothing followed the removed token.
    """
    if token is None or token.value is None:
        return None
    before = previous_token(token, tokens)
    if before is None:
        if tokens and tokens[0].id == token.id:
            del tokens[1:]
        return None
    index = next(i for i, item in enumerate(tokens) if item.id == token.id)
    del tokens[index]
    return tokens[index] if index < len(tokens) else None