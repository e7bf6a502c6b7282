"""Pytest plugin providing the ``path_grammar`` fixture.

The fixture pins the grammar that pathstr falls back to when callers pass no
``style``, so a test suite can exercise Windows path handling on a Unix host
and vice versa.
"""

from __future__ import annotations

import logging
import typing as t

import pytest

from .platform import DEFAULT_STYLE_ENV, host_style
from .styles import SeparatorStyle

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("pathstr")
    group.addoption(
        "--pathstr-grammar",
        action="store",
        dest="pathstr_grammar",
        default=None,
        choices=("unix", "windows"),
        help=(
            "Grammar the path_grammar fixture applies when no marker selects "
            "one. Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "pathstr_grammar",
        "Grammar ('unix' or 'windows') applied by the path_grammar fixture.",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "path_grammar(name: str): run the test with the 'unix' or 'windows' "
            "grammar as pathstr's default."
        ),
    )


def _marker_grammar(request: pytest.FixtureRequest) -> str | None:
    """Return the grammar named by a ``path_grammar`` marker, if present."""
    marker = request.node.get_closest_marker("path_grammar")
    if marker is None:
        return None
    if marker.args:
        return str(marker.args[0])
    name = marker.kwargs.get("name")
    return None if name is None else str(name)


def _selected_grammar(request: pytest.FixtureRequest) -> SeparatorStyle:
    """Return the grammar for this test: marker > param > CLI option > ini > host."""
    marker_value = _marker_grammar(request)
    if marker_value is not None:
        return SeparatorStyle.from_name(marker_value)

    param_value = getattr(request, "param", None)
    if isinstance(param_value, SeparatorStyle):
        return param_value
    if isinstance(param_value, str):
        return SeparatorStyle.from_name(param_value)

    config = request.config
    cli_value = config.getoption("pathstr_grammar")
    if cli_value:
        return SeparatorStyle.from_name(str(cli_value))

    ini_value = config.getini("pathstr_grammar")
    if ini_value:
        return SeparatorStyle.from_name(str(ini_value))

    return host_style()


@pytest.fixture
def path_grammar(
    request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch
) -> t.Iterator[SeparatorStyle]:
    """Yield the active :class:`SeparatorStyle` and make it pathstr's default."""
    style = _selected_grammar(request)
    monkeypatch.setenv(DEFAULT_STYLE_ENV, style.name.lower())
    logger.debug("path_grammar fixture selected the %s grammar", style.name)
    yield style


__all__ = ["path_grammar"]
