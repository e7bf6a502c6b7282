"""String-level path equality and containment checks."""

from __future__ import annotations

from ._validators import fail_if_nul_present
from .case import CaseSensitivity
from .normalize import normalize, normalize_no_end_separator
from .platform import resolve_style
from .prefix import classify_prefix
from .styles import SeparatorStyle


def equals(
    path1: str | None,
    path2: str | None,
    *,
    normalized: bool = False,
    case: CaseSensitivity | None = None,
    style: SeparatorStyle | None = None,
) -> bool:
    """Return ``True`` when two path strings are equal.

    Two ``None`` values are equal; ``None`` never equals a string. With
    *normalized*, both paths are first run through :func:`normalize` and a
    path that cannot be normalised equals nothing. *case* defaults to
    :attr:`CaseSensitivity.SENSITIVE`; *style* picks the grammar used for
    normalisation and for resolving :attr:`CaseSensitivity.SYSTEM`.
    """
    if path1 is None or path2 is None:
        return path1 is None and path2 is None
    if normalized:
        path1 = normalize(path1, style=style)
        if path1 is None:
            return False
        path2 = normalize(path2, style=style)
        if path2 is None:
            return False
    else:
        fail_if_nul_present(path1)
        fail_if_nul_present(path2)
    rule = CaseSensitivity.SENSITIVE if case is None else case
    return rule.check_equals(path1, path2, style=style)


def equals_on_system(
    path1: str | None, path2: str | None, *, style: SeparatorStyle | None = None
) -> bool:
    """Compare without normalising, using the case rule of the grammar."""
    return equals(path1, path2, case=CaseSensitivity.SYSTEM, style=style)


def equals_normalized(
    path1: str | None, path2: str | None, *, style: SeparatorStyle | None = None
) -> bool:
    """Compare after normalising both paths, case-sensitively."""
    return equals(path1, path2, normalized=True, style=style)


def equals_normalized_on_system(
    path1: str | None, path2: str | None, *, style: SeparatorStyle | None = None
) -> bool:
    """Compare after normalising both paths, using the case rule of the grammar."""
    return equals(
        path1, path2, normalized=True, case=CaseSensitivity.SYSTEM, style=style
    )


def directory_contains(
    parent: str | None,
    child: str | None,
    *,
    case: CaseSensitivity | None = None,
    style: SeparatorStyle | None = None,
) -> bool:
    """Return ``True`` when *child* lies strictly inside the directory *parent*.

    Both paths are normalised first. The prefixes must agree, the child must
    continue past the parent at a separator boundary, and a directory never
    contains itself. Empty or unparseable paths contain nothing.
    """
    if not parent or not child:
        return False
    parent_path = normalize_no_end_separator(parent, style=style)
    child_path = normalize_no_end_separator(child, style=style)
    if not parent_path or not child_path:
        return False

    rule = (CaseSensitivity.SYSTEM if case is None else case).resolve(style)
    parent_prefix = classify_prefix(parent_path)
    child_prefix = classify_prefix(child_path)
    if parent_prefix is None or child_prefix is None:
        return False
    if parent_prefix.kind is not child_prefix.kind or not rule.check_equals(
        parent_prefix.slice(parent_path), child_prefix.slice(child_path)
    ):
        return False
    if rule.check_equals(parent_path, child_path):
        return False

    separator = resolve_style(style).separator
    # a bare drive-relative prefix ("C:") is followed directly by the name
    needs_separator = len(parent_path) > parent_prefix.length
    if needs_separator and not parent_path.endswith(separator):
        parent_path += separator
    return rule.check_starts_with(child_path, parent_path)


__all__ = [
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
]
