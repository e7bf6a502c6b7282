"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from pathstr.platform import DEFAULT_STYLE_ENV, PLATFORM_OVERRIDE_ENV

pytest_plugins = ("pathstr.pytest_plugin", "pytester")

_GRAMMAR_ENV_VARS: tuple[str, ...] = (DEFAULT_STYLE_ENV, PLATFORM_OVERRIDE_ENV)


@pytest.fixture(autouse=True)
def reset_grammar_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure no grammar override leaks into or out of a test."""
    for name in _GRAMMAR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
