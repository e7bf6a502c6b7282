"""Shared helpers for the runnable examples."""

from __future__ import annotations

import os
import typing as t

import pathstr

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    import collections.abc as cabc
    from pathlib import Path


def walk_names(root: Path) -> cabc.Iterator[str]:
    """Yield every file below *root* as a ``/``-separated relative path."""
    for directory, _dirs, files in os.walk(root):
        relative = os.path.relpath(directory, root)
        for name in sorted(files):
            joined = name if relative == "." else f"{relative}/{name}"
            yield pathstr.separators_to_unix(joined)
