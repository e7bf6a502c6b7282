"""Case-sensitivity rules for comparing path strings."""

from __future__ import annotations

import enum

from .platform import resolve_style
from .styles import SeparatorStyle


def _chars_equal_ignoring_case(left: str, right: str) -> bool:
    return (
        left == right
        or left.upper() == right.upper()
        or left.lower() == right.lower()
    )


class CaseSensitivity(enum.Enum):
    """How to treat letter case when comparing path strings.

    ``SYSTEM`` follows the grammar in use: case-insensitive under the Windows
    grammar, case-sensitive under the Unix grammar.
    """

    SENSITIVE = "Sensitive"
    INSENSITIVE = "Insensitive"
    SYSTEM = "System"

    @classmethod
    def for_name(cls, name: str) -> CaseSensitivity:
        """Return the member whose display name is *name*."""
        for member in cls:
            if member.value == name:
                return member
        msg = f"Invalid case sensitivity name: {name!r}"
        raise ValueError(msg)

    def resolve(self, style: SeparatorStyle | None = None) -> CaseSensitivity:
        """Return ``SENSITIVE`` or ``INSENSITIVE``, resolving ``SYSTEM`` via *style*."""
        if self is not CaseSensitivity.SYSTEM:
            return self
        if resolve_style(style) is SeparatorStyle.WINDOWS:
            return CaseSensitivity.INSENSITIVE
        return CaseSensitivity.SENSITIVE

    def is_case_sensitive(self, style: SeparatorStyle | None = None) -> bool:
        """Return ``True`` when letter case matters under *style*."""
        return self.resolve(style) is CaseSensitivity.SENSITIVE

    def check_region_matches(
        self,
        text: str,
        start: int,
        search: str,
        *,
        style: SeparatorStyle | None = None,
    ) -> bool:
        """Return ``True`` when *search* occurs in *text* at index *start*."""
        if start < 0 or start + len(search) > len(text):
            return False
        region = text[start : start + len(search)]
        if self.is_case_sensitive(style):
            return region == search
        return all(
            _chars_equal_ignoring_case(left, right)
            for left, right in zip(region, search, strict=True)
        )

    def check_equals(
        self, left: str, right: str, *, style: SeparatorStyle | None = None
    ) -> bool:
        """Compare two strings under this rule."""
        return len(left) == len(right) and self.check_region_matches(
            left, 0, right, style=style
        )

    def check_starts_with(
        self, text: str, start: str, *, style: SeparatorStyle | None = None
    ) -> bool:
        """Return ``True`` when *text* begins with *start*."""
        return self.check_region_matches(text, 0, start, style=style)

    def check_ends_with(
        self, text: str, end: str, *, style: SeparatorStyle | None = None
    ) -> bool:
        """Return ``True`` when *text* ends with *end*."""
        return self.check_region_matches(text, len(text) - len(end), end, style=style)

    def check_index_of(
        self,
        text: str,
        start: int,
        search: str,
        *,
        style: SeparatorStyle | None = None,
    ) -> int:
        """Return the first index at or after *start* where *search* occurs, or -1."""
        resolved = self.resolve(style)
        for index in range(max(start, 0), len(text) - len(search) + 1):
            if resolved.check_region_matches(text, index, search):
                return index
        return -1

    def check_compare_to(
        self, left: str, right: str, *, style: SeparatorStyle | None = None
    ) -> int:
        """Return a negative, zero or positive number ordering *left* and *right*."""
        if not self.is_case_sensitive(style):
            left, right = left.lower(), right.lower()
        return (left > right) - (left < right)

    def __str__(self) -> str:
        """Return the display name."""
        return self.value


__all__ = ["CaseSensitivity"]
