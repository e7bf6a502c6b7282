"""Separator styles understood by the path engine."""

from __future__ import annotations

import enum
import typing as t

UNIX_SEPARATOR: t.Final[str] = "/"
WINDOWS_SEPARATOR: t.Final[str] = "\\"
SEPARATORS: t.Final[frozenset[str]] = frozenset((UNIX_SEPARATOR, WINDOWS_SEPARATOR))
EXTENSION_SEPARATOR: t.Final[str] = "."


class SeparatorStyle(enum.Enum):
    """The two path grammars: Unix (``/``) and Windows (``\\``)."""

    UNIX = UNIX_SEPARATOR
    WINDOWS = WINDOWS_SEPARATOR

    @property
    def separator(self) -> str:
        """Return the separator character emitted for this style."""
        return self.value

    @property
    def other_separator(self) -> str:
        """Return the separator character this style rewrites."""
        return WINDOWS_SEPARATOR if self is SeparatorStyle.UNIX else UNIX_SEPARATOR

    @classmethod
    def from_name(cls, name: str) -> SeparatorStyle:
        """Return the style called *name* (``"unix"`` or ``"windows"``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            msg = f"unknown separator style: {name!r}"
            raise ValueError(msg) from None


def is_separator(ch: str) -> bool:
    """Return ``True`` when *ch* is either separator character."""
    return ch in SEPARATORS


__all__ = [
    "EXTENSION_SEPARATOR",
    "SEPARATORS",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "SeparatorStyle",
    "is_separator",
]
