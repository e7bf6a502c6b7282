"""Shared validation helpers."""

from __future__ import annotations

from .errors import ForbiddenCharacterError

NUL: str = "\x00"


def fail_if_nul_present(path: str) -> None:
    """Raise :class:`ForbiddenCharacterError` when *path* contains NUL."""
    if NUL in path:
        raise ForbiddenCharacterError(path)
