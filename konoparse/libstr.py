"""Small string helpers with the exact semantics the parser relies on."""

from __future__ import annotations

from itertools import islice, zip_longest

_SPACES = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer; 0 if there is none."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(number: int) -> str:
    """Render an integer in decimal."""
    return str(number)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Take up to ``length`` characters beginning at ``start``.

    The slice is taken from the first place in ``text`` where the tail
    ``text[start:]`` occurs, so an overlong ``length`` may reach back
    before ``start`` when that tail repeats earlier in the string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not text or len(text) <= start:
        return ""
    tail = text[start:]
    origin = strnstr(text, tail, len(text))
    found = text[origin:] if origin is not None else tail
    return found[:length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters."""
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def _compare(pairs) -> int:
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
    return 0


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; the sign tells the order."""
    if limit <= 0:
        return 0
    return _compare(islice(zip_longest(first, second, fillvalue="\0"), limit))


def strcmp(first: str, second: str) -> int:
    """Compare two strings; the sign tells the order."""
    return _compare(zip_longest(first, second, fillvalue="\0"))