"""Name filter classes for directory-walking callers.

Each filter is a callable taking a path string and inspecting only its last
segment (see :func:`pathstr.get_name`); none of them touch the file system.
"""

from __future__ import annotations

import re
import typing as t

from .case import CaseSensitivity
from .decompose import get_name, is_extension
from .styles import SeparatorStyle
from .wildcard import wildcard_match


class NameFilter(t.Protocol):
    """Callable returning ``True`` when a path should be kept."""

    def __call__(self, path: str) -> bool:
        """Return ``True`` if *path* passes the filter."""
        ...


class WildcardFilter:
    """Match if the name matches any of ``patterns``."""

    def __init__(
        self, *patterns: str, case: CaseSensitivity = CaseSensitivity.SENSITIVE
    ) -> None:
        if not patterns:
            msg = "WildcardFilter requires at least one pattern"
            raise ValueError(msg)
        self.patterns = patterns
        self.case = case

    def __call__(self, path: str) -> bool:
        """Return ``True`` when the name of *path* matches a pattern."""
        name = get_name(path)
        return any(
            wildcard_match(name, pattern, self.case) for pattern in self.patterns
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        patterns = ", ".join(map(repr, self.patterns))
        return f"WildcardFilter({patterns}, case={self.case})"


class ExtensionFilter:
    """Match if the extension is one of ``extensions`` (case-sensitive)."""

    def __init__(
        self, *extensions: str, style: SeparatorStyle | None = None
    ) -> None:
        self.extensions = extensions
        self.style = style

    def __call__(self, path: str) -> bool:
        """Return ``True`` when *path* has one of the configured extensions."""
        return is_extension(get_name(path), self.extensions, style=self.style)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"ExtensionFilter({', '.join(map(repr, self.extensions))})"


class NamePrefixFilter:
    """Match if the name starts with any of ``prefixes``."""

    def __init__(
        self, *prefixes: str, case: CaseSensitivity = CaseSensitivity.SENSITIVE
    ) -> None:
        self.prefixes = prefixes
        self.case = case

    def __call__(self, path: str) -> bool:
        """Return ``True`` when the name of *path* starts with a prefix."""
        name = get_name(path)
        return any(
            self.case.check_starts_with(name, prefix) for prefix in self.prefixes
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"NamePrefixFilter({', '.join(map(repr, self.prefixes))})"


class NameSuffixFilter:
    """Match if the name ends with any of ``suffixes``."""

    def __init__(
        self, *suffixes: str, case: CaseSensitivity = CaseSensitivity.SENSITIVE
    ) -> None:
        self.suffixes = suffixes
        self.case = case

    def __call__(self, path: str) -> bool:
        """Return ``True`` when the name of *path* ends with a suffix."""
        name = get_name(path)
        return any(
            self.case.check_ends_with(name, suffix) for suffix in self.suffixes
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"NameSuffixFilter({', '.join(map(repr, self.suffixes))})"


class RegexFilter:
    """Match if the whole name matches ``pattern``."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self._pattern = re.compile(pattern, flags)

    def __call__(self, path: str) -> bool:
        """Return ``True`` if the regex matches the full name of *path*."""
        return self._pattern.fullmatch(get_name(path)) is not None

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"RegexFilter({self._pattern.pattern!r})"


class Predicate:
    """Use a custom ``func`` on the name to determine a match."""

    def __init__(self, func: t.Callable[[str], bool]) -> None:
        self.func = func

    def __call__(self, path: str) -> bool:
        """Return ``True`` if ``func(name)`` is truthy."""
        return bool(self.func(get_name(path)))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"Predicate({self.func})"


class AllOf:
    """Match when every wrapped filter matches."""

    def __init__(self, *filters: NameFilter) -> None:
        self.filters = filters

    def __call__(self, path: str) -> bool:
        """Return ``True`` if all filters accept *path*."""
        return all(f(path) for f in self.filters)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"AllOf({', '.join(map(repr, self.filters))})"


class AnyOf:
    """Match when at least one wrapped filter matches."""

    def __init__(self, *filters: NameFilter) -> None:
        self.filters = filters

    def __call__(self, path: str) -> bool:
        """Return ``True`` if any filter accepts *path*."""
        return any(f(path) for f in self.filters)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"AnyOf({', '.join(map(repr, self.filters))})"


__all__ = [
    "AllOf",
    "AnyOf",
    "ExtensionFilter",
    "NameFilter",
    "NamePrefixFilter",
    "NameSuffixFilter",
    "Predicate",
    "RegexFilter",
    "WildcardFilter",
]
