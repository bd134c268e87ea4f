"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFF_FFFF
_ULONG_MASK = 0xFFFF_FFFF_FFFF_FFFF
_INT_LIMIT = 1 << 31


def _check_base(base: str) -> None:
    if len(base) <= 1:
        raise ValueError("base must have at least two digits")
    if "-" in base or "+" in base:
        raise ValueError("base must not contain '+' or '-'")
    if len(set(base)) != len(base):
        raise ValueError("base must not repeat a digit")


def to_base(number: int, base: str) -> str:
    """Render a non-negative integer using the characters of ``base`` as digits."""
    _check_base(base)
    if number < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    digits = [base[number % radix]]
    number //= radix
    while number:
        digits.append(base[number % radix])
        number //= radix
    return "".join(reversed(digits))


def _as_signed_int(value: Any) -> int:
    number = int(value) & _UINT_MASK
    return number - (1 << 32) if number >= _INT_LIMIT else number


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        return value[0] if value else "\0"
    return chr(int(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + to_base(address, HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspiduxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _as_pointer(value)
    if spec in "id":
        return str(_as_signed_int(value))
    unsigned = int(value) & _UINT_MASK
    if spec == "u":
        return to_base(unsigned, DECIMAL)
    if spec == "x":
        return to_base(unsigned, HEX_LOWER)
    return to_base(unsigned, HEX_UPPER)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` and return the resulting text.

    Unknown conversions produce nothing; a lone ``%`` at the end is kept.
    """
    pieces: list[str] = []
    arguments = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8", "surrogateescape"))