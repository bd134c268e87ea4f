"""Discovery of command names available through the ``PATH`` variable."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from konoparse.environ import get_envar
from konoparse.libstr import split_words


def get_path_list(env: Iterable[str] | None) -> list[str] | None:
    """Return the directories named in ``PATH``, or None if it is unset."""
    path = get_envar(env, "PATH")
    if path is None:
        return None
    return split_words(path, ":")


def _directory_entries(directory: str) -> Iterator[str]:
    try:
        names = os.listdir(directory)
    except OSError:
        return
    # A raw directory listing also reports the two self-references.
    yield "."
    yield ".."
    yield from names


def command_names(env: Iterable[str] | None) -> list[str] | None:
    """List every entry of every readable ``PATH`` directory, in ``PATH`` order.

    Directories that cannot be read are skipped. Returns None when
    ``PATH`` is unset.
    """
    directories = get_path_list(env)
    if directories is None:
        return None
    return [name for directory in directories for name in _directory_entries(directory)]


def is_executable(path: str | None) -> bool:
    """Tell whether ``path`` names a regular file the user may execute."""
    if not path:
        return False
    return os.path.isfile(path) and os.access(path, os.X_OK)


def search_list(search: str | None, env: Iterable[str] | None) -> bool:
    """Tell whether ``search`` is an executable path or a name found in ``PATH``."""
    if is_executable(search):
        return True
    if not search or env is None:
        return False
    names = command_names(env)
    if names is None:
        return False
    return search in names