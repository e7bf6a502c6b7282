"""Segment resolution: ``.``/``..`` handling, separator rewriting and joining.

:func:`normalize` classifies the prefix, splits the rest of the path on both
separator characters and resolves it left to right on a stack. A ``..`` with
nothing left to cancel means the path climbs above its starting point, and
the whole call returns ``None``.

=======================  ===================  ====================
Input                    ``normalize``        ``..._no_end_...``
=======================  ===================  ====================
``/foo//``               ``/foo/``            ``/foo``
``/foo/./``              ``/foo/``            ``/foo``
``/foo/../bar``          ``/bar``             ``/bar``
``/../``                 ``None``             ``None``
``foo/bar/..``           ``foo/``             ``foo``
``foo/../../bar``        ``None``             ``None``
``C:\\foo\\..\\bar``     ``C:\\bar``          ``C:\\bar``
``//server/foo/../bar``  ``//server/bar``     ``//server/bar``
``~/foo/../bar/``        ``~/bar/``           ``~/bar``
``a/../~b``              ``./~b``             ``./~b``
=======================  ===================  ====================

(shown with the Unix grammar except for the drive example)
"""

from __future__ import annotations

import logging
import re
import typing as t

from ._validators import fail_if_nul_present
from .platform import resolve_style
from .prefix import PrefixKind, classify_prefix
from .styles import UNIX_SEPARATOR, SeparatorStyle, is_separator

logger = logging.getLogger(__name__)

_SEPARATOR_PATTERN: t.Final[re.Pattern[str]] = re.compile(r"[/\\]")
_CURRENT: t.Final[str] = "."
_PARENT: t.Final[str] = ".."


def _resolve_segments(remainder: str) -> tuple[list[str], bool] | None:
    """Resolve ``.`` and ``..`` in *remainder*.

    Returns the surviving segments and whether the input named a directory
    (ended in a separator, ``.`` or ``..``), or ``None`` when a ``..`` has no
    segment left to cancel.
    """
    stack: list[str] = []
    is_directory = False
    for segment in _SEPARATOR_PATTERN.split(remainder):
        if not segment:
            continue
        is_directory = segment in (_CURRENT, _PARENT)
        if segment == _CURRENT:
            continue
        if segment == _PARENT:
            if not stack:
                return None
            stack.pop()
            continue
        stack.append(segment)
    if remainder and is_separator(remainder[-1]):
        is_directory = True
    return stack, is_directory


def _normalize(
    path: str | None, style: SeparatorStyle | None, *, keep_separator: bool
) -> str | None:
    if path is None:
        return None
    fail_if_nul_present(path)
    if not path:
        return path

    prefix = classify_prefix(path)
    if prefix is None or not prefix.is_valid:
        logger.debug("Cannot normalise %r: invalid prefix", path)
        return None

    separator = resolve_style(style).separator
    resolved = _resolve_segments(prefix.remainder(path))
    if resolved is None:
        anchor = "root" if prefix.kind.is_absolute else "start"
        logger.debug("Cannot normalise %r: '..' climbs above the %s", path, anchor)
        return None

    segments, is_directory = resolved
    head = prefix.render(path, separator)
    if not segments:
        return head
    body = separator.join(segments)
    if prefix.kind is PrefixKind.NONE and _looks_prefixed(body):
        # ``./~b`` must not collapse to ``~b``, which reads as a home prefix.
        head = _CURRENT + separator
    result = head + body
    if is_directory and keep_separator:
        result += separator
    return result


def _looks_prefixed(body: str) -> bool:
    """Return ``True`` when *body* would no longer parse as a relative path."""
    prefix = classify_prefix(body)
    return prefix is not None and prefix.kind is not PrefixKind.NONE


def normalize(path: str | None, *, style: SeparatorStyle | None = None) -> str | None:
    """Normalise *path*, removing double and single dot segments.

    Separators are rewritten to *style* (default: the host style). A trailing
    separator is kept when *path* names a directory. Returns ``None`` when the
    prefix is invalid or a ``..`` would climb above the start of the path.

    Raises
    ------
    ForbiddenCharacterError
        If *path* contains a NUL character.
    """
    return _normalize(path, style, keep_separator=True)


def normalize_no_end_separator(
    path: str | None, *, style: SeparatorStyle | None = None
) -> str | None:
    """Normalise *path* like :func:`normalize` but drop any trailing separator.

    A separator that belongs to the prefix (``/``, ``C:\\``, ``//server/``,
    ``~/``) is kept.
    """
    return _normalize(path, style, keep_separator=False)


def concat(
    base_path: str | None,
    name_to_add: str | None,
    *,
    style: SeparatorStyle | None = None,
) -> str | None:
    """Join *name_to_add* onto *base_path* and normalise the result.

    When *name_to_add* carries its own prefix it replaces *base_path*
    entirely. Returns ``None`` when either part cannot be parsed or the joined
    path cannot be normalised.
    """
    for part in (base_path, name_to_add):
        if part is not None:
            fail_if_nul_present(part)

    prefix = classify_prefix(name_to_add)
    if prefix is None or not prefix.is_valid:
        return None
    if prefix.length > 0:
        return normalize(name_to_add, style=style)
    if base_path is None:
        return None
    if not base_path:
        return normalize(name_to_add, style=style)
    if is_separator(base_path[-1]):
        return normalize(base_path + name_to_add, style=style)
    return normalize(base_path + UNIX_SEPARATOR + name_to_add, style=style)


__all__ = ["concat", "normalize", "normalize_no_end_separator"]
