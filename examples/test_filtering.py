"""Example tests selecting files from a directory walk by name."""

from __future__ import annotations

import typing as t

from examples._utils import walk_names
from pathstr import AllOf, AnyOf, ExtensionFilter, NamePrefixFilter, WildcardFilter

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from pathlib import Path


def _make_tree(root: Path) -> None:
    for relative in (
        "src/app.py",
        "src/test_app.py",
        "docs/index.md",
        "docs/notes.txt",
        "build/app.pyc",
    ):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")


def test_select_test_modules(tmp_path: Path) -> None:
    """Combine filters the way a directory walker would apply them."""
    _make_tree(tmp_path)
    is_test = AllOf(ExtensionFilter("py"), NamePrefixFilter("test_"))

    selected = [name for name in walk_names(tmp_path) if is_test(name)]

    assert selected == ["src/test_app.py"]


def test_select_documents(tmp_path: Path) -> None:
    """Either a wildcard or an extension can admit a file."""
    _make_tree(tmp_path)
    is_doc = AnyOf(WildcardFilter("*.md"), ExtensionFilter("txt"))

    selected = sorted(name for name in walk_names(tmp_path) if is_doc(name))

    assert selected == ["docs/index.md", "docs/notes.txt"]
