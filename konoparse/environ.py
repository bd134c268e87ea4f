"""Lookup of variables in a ``NAME=value`` environment list."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def get_envar(env: Iterable[str] | None, name: str) -> str | None:
    """Return the value of ``name`` in ``env``, or None if it is absent.

    An entry matches when ``name`` starts with the entry's key and the
    entry starts with ``name``; the text after the first ``=`` is returned.
    """
    if env is None:
        return None
    for entry in env:
        key = entry.split("=", 1)[0]
        if name.startswith(key) and entry.startswith(name):
            return entry[len(key) + 1:]
    return None


def format_env(env: Iterable[str] | None) -> str:
    """Render the environment one entry per line."""
    if env is None:
        return "env not setted"
    return "".join(f"{entry}\n" for entry in env)


def expand_variable(env: list[str] | None, name: str) -> str:
    """Return the value of ``name``, or an empty string if it is unset.

    A name of ``env`` (ignoring surrounding spaces) also prints the
    whole environment to standard output.
    """
    if name.strip(" ") == "env":
        sys.stdout.write(format_env(env))
        sys.stdout.flush()
    value = get_envar(env, name)
    return value if value is not None else ""