"""Split path strings into prefix, directory, name and extension.

None of these functions normalise their input or touch the file system. They
locate the prefix, the last separator and the last dot, and slice.

For ``C:\\dev\\project\\file.txt``::

    get_prefix                      C:\\
    get_path                        dev\\project\\
    get_path_no_end_separator       dev\\project
    get_full_path                   C:\\dev\\project\\
    get_full_path_no_end_separator  C:\\dev\\project
    get_name                        file.txt
    get_base_name                   file
    get_extension                   txt
"""

from __future__ import annotations

import collections.abc as cabc
import typing as t

from ._validators import fail_if_nul_present
from .errors import AlternateDataStreamError
from .platform import resolve_style
from .prefix import NOT_FOUND, classify_prefix
from .styles import (
    EXTENSION_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    SeparatorStyle,
)

_ADS_SEPARATOR: t.Final[str] = ":"


def index_of_last_separator(path: str | None) -> int:
    """Return the index of the last ``/`` or ``\\`` in *path*, or -1."""
    if path is None:
        return NOT_FOUND
    fail_if_nul_present(path)
    return max(path.rfind(UNIX_SEPARATOR), path.rfind(WINDOWS_SEPARATOR))


def index_of_extension(
    path: str | None, *, style: SeparatorStyle | None = None
) -> int:
    """Return the index of the dot that starts the extension of *path*, or -1.

    Under the Windows grammar a ``:`` in the last segment marks an NTFS
    alternate data stream and is rejected rather than misread as part of the
    name.

    Raises
    ------
    AlternateDataStreamError
        If *style* resolves to Windows and the last segment contains ``:``.
    ForbiddenCharacterError
        If *path* contains a NUL character.
    """
    if path is None:
        return NOT_FOUND
    last_separator = index_of_last_separator(path)
    if resolve_style(style) is SeparatorStyle.WINDOWS and (
        path.find(_ADS_SEPARATOR, last_separator + 1) != NOT_FOUND
    ):
        raise AlternateDataStreamError(path)
    extension_pos = path.rfind(EXTENSION_SEPARATOR)
    return NOT_FOUND if last_separator > extension_pos else extension_pos


@t.overload
def get_prefix(path: None) -> None: ...
@t.overload
def get_prefix(path: str) -> str | None: ...
def get_prefix(path: str | None) -> str | None:
    """Return the prefix of *path*, such as ``C:/`` or ``~/``.

    A home prefix written without a separator gains ``/``: ``~user`` gives
    ``~user/``. Returns ``None`` when the prefix is invalid.
    """
    if path is None:
        return None
    fail_if_nul_present(path)
    prefix = classify_prefix(path)
    if prefix is None or not prefix.is_valid:
        return None
    if prefix.extends_past(path):
        return path + UNIX_SEPARATOR
    return prefix.slice(path)


def _get_path(path: str | None, separator_add: int) -> str | None:
    if path is None:
        return None
    fail_if_nul_present(path)
    prefix = classify_prefix(path)
    if prefix is None or not prefix.is_valid:
        return None
    index = index_of_last_separator(path)
    end = index + separator_add
    if prefix.length >= len(path) or index == NOT_FOUND or prefix.length >= end:
        return ""
    return path[prefix.length : end]


def get_path(path: str | None) -> str | None:
    """Return the directory part of *path* without its prefix.

    ``C:\\a\\b\\c.txt`` gives ``a\\b\\``; ``a/b/c/`` gives ``a/b/c/``.
    """
    return _get_path(path, 1)


def get_path_no_end_separator(path: str | None) -> str | None:
    """Return :func:`get_path` without the trailing separator."""
    return _get_path(path, 0)


def _get_full_path(path: str | None, *, include_separator: bool) -> str | None:
    if path is None:
        return None
    fail_if_nul_present(path)
    prefix = classify_prefix(path)
    if prefix is None or not prefix.is_valid:
        return None
    if prefix.length >= len(path):
        return get_prefix(path) if include_separator else path
    index = index_of_last_separator(path)
    if index == NOT_FOUND:
        return prefix.slice(path)
    end = index + 1 if include_separator else index
    if end == 0:
        # a root separator is never dropped: "/abc" keeps "/"
        end = 1
    return path[:end]


def get_full_path(path: str | None) -> str | None:
    """Return the prefix and directory part of *path*.

    ``C:\\a\\b\\c.txt`` gives ``C:\\a\\b\\``; ``~user`` gives ``~user/``.
    """
    return _get_full_path(path, include_separator=True)


def get_full_path_no_end_separator(path: str | None) -> str | None:
    """Return :func:`get_full_path` without a trailing separator.

    A lone root separator is kept: ``/abc`` gives ``/``, while ``C:/abc`` gives
    ``C:`` and ``~user/a`` gives ``~user``.
    """
    return _get_full_path(path, include_separator=False)


@t.overload
def get_name(path: None) -> None: ...
@t.overload
def get_name(path: str) -> str: ...
def get_name(path: str | None) -> str | None:
    """Return the text after the last separator, or ``""`` for a directory path."""
    if path is None:
        return None
    return path[index_of_last_separator(path) + 1 :]


def get_extension(
    path: str | None, *, style: SeparatorStyle | None = None
) -> str | None:
    """Return the extension of *path* without the dot, or ``""`` when it has none."""
    if path is None:
        return None
    index = index_of_extension(path, style=style)
    return "" if index == NOT_FOUND else path[index + 1 :]


def remove_extension(
    path: str | None, *, style: SeparatorStyle | None = None
) -> str | None:
    """Return *path* without its extension and dot."""
    if path is None:
        return None
    index = index_of_extension(path, style=style)
    return path if index == NOT_FOUND else path[:index]


def get_base_name(
    path: str | None, *, style: SeparatorStyle | None = None
) -> str | None:
    """Return the name of *path* without its extension: ``a/b/c.txt`` gives ``c``."""
    return remove_extension(get_name(path), style=style)


def is_extension(
    path: str | None,
    extensions: str | cabc.Iterable[str] | None = None,
    *,
    style: SeparatorStyle | None = None,
) -> bool:
    """Return ``True`` when the extension of *path* is one of *extensions*.

    *extensions* may be a single string or any iterable of strings; matching
    is case-sensitive. ``None``, ``""`` or an empty iterable match paths with
    no extension.
    """
    if path is None:
        return False
    fail_if_nul_present(path)
    if isinstance(extensions, str):
        candidates = [extensions] if extensions else []
    else:
        candidates = list(extensions or ())
    if not candidates:
        return index_of_extension(path, style=style) == NOT_FOUND
    return get_extension(path, style=style) in candidates


__all__ = [
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "get_prefix",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "remove_extension",
]
