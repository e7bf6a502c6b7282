"""Separator conversion helpers.

These are plain character substitutions; they never look at prefixes or
segments.
"""

from __future__ import annotations

import typing as t

from ._validators import fail_if_nul_present
from .platform import resolve_style
from .styles import UNIX_SEPARATOR, WINDOWS_SEPARATOR, SeparatorStyle


@t.overload
def separators_to_unix(path: str) -> str: ...
@t.overload
def separators_to_unix(path: None) -> None: ...
def separators_to_unix(path: str | None) -> str | None:
    """Return *path* with every ``\\`` replaced by ``/``."""
    if path is None:
        return None
    fail_if_nul_present(path)
    return path.replace(WINDOWS_SEPARATOR, UNIX_SEPARATOR)


@t.overload
def separators_to_windows(path: str) -> str: ...
@t.overload
def separators_to_windows(path: None) -> None: ...
def separators_to_windows(path: str | None) -> str | None:
    """Return *path* with every ``/`` replaced by ``\\``."""
    if path is None:
        return None
    fail_if_nul_present(path)
    return path.replace(UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def separators_to_system(
    path: str | None, *, style: SeparatorStyle | None = None
) -> str | None:
    """Convert *path* to the separators of *style* (default: host style)."""
    if path is None:
        return None
    if resolve_style(style) is SeparatorStyle.WINDOWS:
        return separators_to_windows(path)
    return separators_to_unix(path)


__all__ = ["separators_to_system", "separators_to_unix", "separators_to_windows"]
