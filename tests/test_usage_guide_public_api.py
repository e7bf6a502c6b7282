"""Tests ensuring the usage guide documents and exercises the public API."""

from __future__ import annotations

from pathlib import Path

import pytest

import pathstr
from tests.helpers.docs import extract_marked_block, extract_python_blocks

USAGE_GUIDE_PATH = Path(__file__).resolve().parents[1] / "docs" / "usage-guide.md"


def test_usage_guide_api_reference_lists_all_public_symbols() -> None:
    """Every ``pathstr.__all__`` export should appear in the usage guide."""
    text = USAGE_GUIDE_PATH.read_text(encoding="utf-8")
    api_reference = extract_marked_block(text, name="api-reference")

    missing = sorted(
        name for name in pathstr.__all__ if f"`{name}`" not in api_reference
    )
    assert not missing, f"Missing API reference entries: {', '.join(missing)}"


@pytest.mark.parametrize(
    "source",
    extract_python_blocks(USAGE_GUIDE_PATH.read_text(encoding="utf-8")),
)
def test_usage_guide_examples_run(source: str) -> None:
    """Each example in the usage guide runs without failing an assertion."""
    exec(compile(source, str(USAGE_GUIDE_PATH), "exec"), {})  # noqa: S102


def test_marked_block_requires_single_markers() -> None:
    """Malformed marker pairs are reported rather than silently ignored."""
    with pytest.raises(ValueError, match="exactly one marker"):
        extract_marked_block("no markers here", name="api-reference")
    text = "<!-- x:end --> body <!-- x:start -->"
    with pytest.raises(ValueError, match="out of order"):
        extract_marked_block(text, name="x")
