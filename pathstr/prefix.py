"""Prefix classification for Unix, Windows, UNC and home-directory paths.

The prefix is the leading part of a path that anchors it: nothing for a
relative path, ``/`` for a Unix root, ``C:`` or ``C:\\`` for a drive,
``\\\\server\\`` for a UNC share and ``~/`` or ``~user/`` for a home
directory. Classification happens once per call and the resulting
:class:`Prefix` is threaded through the resolver and the decomposition
helpers.

===========================  ======  ==========================
Path                         Length  Kind
===========================  ======  ==========================
``a/b/c.txt``                0       ``NONE``
``/a/b/c.txt``               1       ``UNIX_ROOT``
``C:a/b/c.txt``              2       ``WINDOWS_DRIVE_RELATIVE``
``C:/a/b/c.txt``             3       ``WINDOWS_DRIVE``
``//server/a/b/c.txt``       9       ``UNC``
``~/a/b/c.txt``              2       ``HOME``
``~user/a/b/c.txt``          6       ``HOME_USER``
``~``                        2       ``HOME``
``1:a``, ``///a``, ``//a``   -1      ``INVALID``
===========================  ======  ==========================
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as t

from ._hostname import is_valid_host_name
from ._validators import NUL
from .styles import SEPARATORS, UNIX_SEPARATOR, WINDOWS_SEPARATOR, is_separator

logger = logging.getLogger(__name__)

NOT_FOUND: t.Final[int] = -1


class PrefixKind(enum.Enum):
    """The grammar a path prefix belongs to."""

    NONE = "none"
    UNIX_ROOT = "unix-root"
    WINDOWS_DRIVE = "windows-drive"
    WINDOWS_DRIVE_RELATIVE = "windows-drive-relative"
    UNC = "unc"
    HOME = "home"
    HOME_USER = "home-user"
    INVALID = "invalid"

    @property
    def is_absolute(self) -> bool:
        """Return ``True`` when the prefix anchors the path to a root."""
        return self in _ABSOLUTE_KINDS


_ABSOLUTE_KINDS: t.Final[frozenset[PrefixKind]] = frozenset(
    {
        PrefixKind.UNIX_ROOT,
        PrefixKind.WINDOWS_DRIVE,
        PrefixKind.UNC,
        PrefixKind.HOME,
        PrefixKind.HOME_USER,
    }
)


@dc.dataclass(frozen=True, slots=True)
class Prefix:
    """Length and kind of a path prefix.

    ``length`` counts the prefix's trailing separator when it has one. A home
    prefix written without a separator (``~user``) reports one character more
    than the input holds, for the separator its canonical form carries.
    """

    length: int
    kind: PrefixKind

    @property
    def is_valid(self) -> bool:
        """Return ``False`` for an unparseable prefix."""
        return self.kind is not PrefixKind.INVALID

    def extends_past(self, path: str) -> bool:
        """Return ``True`` when the prefix needs a separator *path* lacks."""
        return self.length > len(path)

    def slice(self, path: str) -> str:
        """Return the prefix characters present in *path*."""
        return path[: self.length]

    def remainder(self, path: str) -> str:
        """Return the part of *path* after the prefix."""
        return path[self.length :]

    def render(self, path: str, separator: str) -> str:
        """Return the prefix of *path* written with *separator*."""
        text = path + separator if self.extends_past(path) else path[: self.length]
        return _to_separator(text, separator)


_INVALID: t.Final[Prefix] = Prefix(NOT_FOUND, PrefixKind.INVALID)
_NO_PREFIX: t.Final[Prefix] = Prefix(0, PrefixKind.NONE)


def _to_separator(text: str, separator: str) -> str:
    for candidate in SEPARATORS:
        if candidate != separator:
            text = text.replace(candidate, separator)
    return text


def _index_of_separator(path: str, start: int) -> int:
    """Return the index of the first separator at or after *start*."""
    candidates = (
        path.find(UNIX_SEPARATOR, start),
        path.find(WINDOWS_SEPARATOR, start),
    )
    positions = [pos for pos in candidates if pos != NOT_FOUND]
    return min(positions, default=NOT_FOUND)


def _classify_home(path: str) -> Prefix:
    end = _index_of_separator(path, 1)
    if end == NOT_FOUND:
        kind = PrefixKind.HOME if len(path) == 1 else PrefixKind.HOME_USER
        return Prefix(len(path) + 1, kind)
    kind = PrefixKind.HOME if end == 1 else PrefixKind.HOME_USER
    return Prefix(end + 1, kind)


def _classify_drive(path: str) -> Prefix:
    letter = path[0]
    if letter.isascii() and letter.isalpha():
        if len(path) == 2 or not is_separator(path[2]):
            return Prefix(2, PrefixKind.WINDOWS_DRIVE_RELATIVE)
        return Prefix(3, PrefixKind.WINDOWS_DRIVE)
    if letter == UNIX_SEPARATOR:
        return Prefix(1, PrefixKind.UNIX_ROOT)
    return _INVALID


def _classify_unc(path: str) -> Prefix:
    end = _index_of_separator(path, 2)
    if end in (NOT_FOUND, 2):
        return _INVALID
    server = path[2:end]
    if not is_valid_host_name(server):
        logger.debug("Rejecting UNC server %r in %r", server, path)
        return _INVALID
    return Prefix(end + 1, PrefixKind.UNC)


def classify_prefix(path: str | None) -> Prefix | None:
    """Classify the prefix of *path*.

    Returns ``None`` for a ``None`` path and an ``INVALID`` prefix (length -1)
    for anything unparseable, including a path that contains NUL.
    """
    if path is None:
        return None
    if NUL in path:
        return _INVALID
    if not path:
        return _NO_PREFIX

    first = path[0]
    if first == ":":
        return _INVALID
    if len(path) == 1:
        if first == "~":
            return Prefix(2, PrefixKind.HOME)
        return Prefix(1, PrefixKind.UNIX_ROOT) if is_separator(first) else _NO_PREFIX
    if first == "~":
        return _classify_home(path)

    second = path[1]
    if second == ":":
        return _classify_drive(path)
    if is_separator(first) and is_separator(second):
        return _classify_unc(path)
    return Prefix(1, PrefixKind.UNIX_ROOT) if is_separator(first) else _NO_PREFIX


def get_prefix_length(path: str | None) -> int:
    """Return the prefix length of *path*, or ``-1`` when it cannot be parsed."""
    prefix = classify_prefix(path)
    return NOT_FOUND if prefix is None else prefix.length


__all__ = [
    "NOT_FOUND",
    "Prefix",
    "PrefixKind",
    "classify_prefix",
    "get_prefix_length",
]
