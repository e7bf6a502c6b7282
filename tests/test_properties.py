"""Cross-module properties of the path engine."""

from __future__ import annotations

import itertools
import typing as t

import pytest

import pathstr
from pathstr import SeparatorStyle

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

_PREFIXES: tuple[str, ...] = ("", "/", "C:", "C:/", "//server/", "~/", "~user/")
_BODIES: tuple[str, ...] = (
    "a",
    "a/b/",
    "a//b/./c",
    "a\\b\\..\\c",
    "a/./",
    "a/b/c/../..",
    "x.y/z.txt",
    "./~b",
    "a/../~b",
    "./:x",
    "x/../1:y",
    "./C:x",
    "a/../C:/x",
)


def _sample_paths() -> cabc.Iterator[str]:
    for prefix, body in itertools.product(_PREFIXES, _BODIES):
        yield prefix + body


@pytest.mark.parametrize("style", list(SeparatorStyle), ids=lambda s: s.name)
def test_normalize_is_idempotent(style: SeparatorStyle) -> None:
    """Normalising twice gives the same result as normalising once."""
    for path in _sample_paths():
        once = pathstr.normalize(path, style=style)
        assert once is not None, path
        assert pathstr.normalize(once, style=style) == once, path
        no_end = pathstr.normalize_no_end_separator(path, style=style)
        assert pathstr.normalize_no_end_separator(no_end, style=style) == no_end


@pytest.mark.parametrize("style", list(SeparatorStyle), ids=lambda s: s.name)
def test_normalize_output_uses_one_separator(style: SeparatorStyle) -> None:
    """Normalised output contains only the separator of the grammar."""
    for path in _sample_paths():
        result = pathstr.normalize(path, style=style)
        assert result is not None
        assert style.other_separator not in result, path


@pytest.mark.parametrize(
    ("base", "ext"),
    [("file", "txt"), ("archive.tar", "gz"), ("", "profile"), ("a b", "c d")],
)
def test_extension_and_base_name_split_a_name(base: str, ext: str) -> None:
    """``base + "." + ext`` splits back into its parts under both grammars."""
    name = f"{base}.{ext}"
    for style in SeparatorStyle:
        assert pathstr.get_extension(name, style=style) == ext
        assert pathstr.get_base_name(name, style=style) == base


@pytest.mark.parametrize(
    "path",
    ["/a/b/../../../c", "a/b/../../../c", "C:/..", "//server/..", "~/../x"],
)
def test_root_escape_is_total_failure(path: str) -> None:
    """A failed normalisation is ``None`` for every variant, never a fragment."""
    for style in SeparatorStyle:
        assert pathstr.normalize(path, style=style) is None
        assert pathstr.normalize_no_end_separator(path, style=style) is None
        assert not pathstr.equals_normalized(path, path, style=style)


def test_failure_channels_are_distinct() -> None:
    """Unparseable input gives ``None``; NUL raises."""
    assert pathstr.normalize("1:a") is None
    with pytest.raises(pathstr.ForbiddenCharacterError):
        pathstr.normalize("1:\x00")
    assert pathstr.get_prefix_length("1:\x00") == -1


@pytest.mark.parametrize("style", list(SeparatorStyle), ids=lambda s: s.name)
def test_normalized_paths_contain_their_children(style: SeparatorStyle) -> None:
    """A normalised directory contains anything concatenated beneath it."""
    for prefix in ("/", "C:/", "//server/", "~/"):
        parent = pathstr.normalize(prefix + "root/dir", style=style)
        child = pathstr.concat(parent, "sub/file.txt", style=style)
        assert pathstr.directory_contains(parent, child, style=style)
        assert not pathstr.directory_contains(child, parent, style=style)
