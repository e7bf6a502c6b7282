"""Unit tests for path equality and containment."""

from __future__ import annotations

import pytest

from pathstr.case import CaseSensitivity
from pathstr.compare import (
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
)
from pathstr.errors import ForbiddenCharacterError
from pathstr.styles import SeparatorStyle

UNIX = SeparatorStyle.UNIX
WINDOWS = SeparatorStyle.WINDOWS


def test_equals_handles_none() -> None:
    """Two ``None`` values are equal; ``None`` never equals a string."""
    assert equals(None, None)
    assert not equals(None, "")
    assert not equals("", None)
    assert equals("", "")


def test_equals_is_case_sensitive_by_default() -> None:
    """The plain comparison respects letter case unless told otherwise."""
    assert equals("file.txt", "file.txt")
    assert not equals("file.txt", "FILE.TXT")
    assert equals("file.txt", "FILE.TXT", case=CaseSensitivity.INSENSITIVE)


@pytest.mark.parametrize(
    ("style", "expected"),
    [(UNIX, False), (WINDOWS, True)],
    ids=["unix", "windows"],
)
def test_equals_on_system(style: SeparatorStyle, expected: bool) -> None:
    """The system rule ignores case only under the Windows grammar."""
    assert equals_on_system("file.txt", "FILE.TXT", style=style) is expected


def test_equals_normalized_ignores_separator_spelling() -> None:
    """Normalised comparison treats both separators alike."""
    assert equals_normalized("a\\b\\file.txt", "a/b/file.txt", style=UNIX)
    assert not equals("a\\b\\file.txt", "a/b/file.txt", style=UNIX)
    assert equals_normalized("/a/./b/../c", "/a/c", style=WINDOWS)


def test_equals_normalized_failure_compares_false() -> None:
    """A path that cannot be normalised equals nothing, not even itself."""
    assert not equals_normalized("/../a", "/../a", style=UNIX)
    assert not equals_normalized("/a", "/../a", style=UNIX)
    assert equals_normalized(None, None, style=UNIX)


@pytest.mark.parametrize(
    ("style", "expected"),
    [(UNIX, False), (WINDOWS, True)],
    ids=["unix", "windows"],
)
def test_equals_normalized_on_system(style: SeparatorStyle, expected: bool) -> None:
    """Normalised comparison with the system case rule."""
    assert equals_normalized_on_system("A/B/../C", "a/c", style=style) is expected


def test_equals_rejects_nul() -> None:
    """NUL raises in both the plain and the normalised comparison."""
    with pytest.raises(ForbiddenCharacterError):
        equals("a\x00", "a")
    with pytest.raises(ForbiddenCharacterError):
        equals_normalized("a", "a\x00", style=UNIX)


@pytest.mark.parametrize(
    ("parent", "child", "expected"),
    [
        ("/a", "/a/b", True),
        ("/a/", "/a/b/c", True),
        ("/", "/a", True),
        ("/a/../b", "/b/c", True),
        ("/a", "/a/../a/b", True),
        ("C:", "C:a", True),
        ("//server/share", "//server/share/x", True),
        ("/a", "/a", False),
        ("/a", "/a/", False),
        ("/a", "/ab", False),
        ("/a/b", "/a", False),
        ("/a", "a/b", False),
        ("C:/a", "D:/a/b", False),
        ("/../a", "/a/b", False),
        ("/a", "/a/../../b", False),
        ("", "/a", False),
        ("/a", "", False),
        (None, "/a", False),
        ("/a", None, False),
    ],
)
def test_directory_contains(
    parent: str | None, child: str | None, expected: bool
) -> None:
    """A directory contains paths strictly below it at a separator boundary."""
    assert directory_contains(parent, child, style=UNIX) is expected


def test_directory_contains_uses_system_case_rule() -> None:
    """Under Windows the default rule ignores case; an explicit rule wins."""
    assert directory_contains("C:/Foo", "c:/foo/bar", style=WINDOWS)
    assert not directory_contains("C:/Foo", "c:/foo/bar", style=UNIX)
    assert not directory_contains(
        "C:\\Foo", "C:\\foo\\bar", case=CaseSensitivity.SENSITIVE, style=WINDOWS
    )
    assert directory_contains(
        "/Foo", "/foo/bar", case=CaseSensitivity.INSENSITIVE, style=UNIX
    )
