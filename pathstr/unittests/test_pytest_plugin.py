"""Unit tests for the pytest plugin."""

from __future__ import annotations

import textwrap
import typing as t

import pytest

from pathstr.normalize import normalize
from pathstr.styles import SeparatorStyle

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

pytest_plugins = ("pathstr.pytest_plugin", "pytester")


@pytest.mark.path_grammar("windows")
def test_marker_selects_grammar(path_grammar: SeparatorStyle) -> None:
    """The marker pins the grammar implicit calls fall back to."""
    assert path_grammar is SeparatorStyle.WINDOWS
    assert normalize("a/b/../c") == "a\\c"


@pytest.mark.path_grammar(name="unix")
def test_marker_accepts_keyword(path_grammar: SeparatorStyle) -> None:
    """The marker also accepts the grammar as ``name=``."""
    assert path_grammar is SeparatorStyle.UNIX
    assert normalize("a\\b") == "a/b"


@pytest.mark.parametrize(
    "path_grammar",
    [SeparatorStyle.UNIX, "windows"],
    indirect=True,
    ids=["unix", "windows"],
)
def test_indirect_parametrisation(path_grammar: SeparatorStyle) -> None:
    """Indirect parameters select the grammar when no marker is present."""
    expected = "a/b" if path_grammar is SeparatorStyle.UNIX else "a\\b"
    assert normalize("a/b") == expected


_GRAMMAR_MODULE = textwrap.dedent(
    """
    from pathstr.normalize import normalize

    pytest_plugins = ("pathstr.pytest_plugin",)

    def test_grammar(path_grammar):
        assert path_grammar.name == "{expected}"
        assert normalize("a/b") == {normalized!r}
    """
)


def _run_grammar_module(
    pytester: pytest.Pytester,
    *,
    expected: SeparatorStyle,
    args: cabc.Sequence[str] = (),
    ini: str | None = None,
) -> None:
    """Run a generated test module and assert it sees *expected*."""
    if ini is not None:
        pytester.makeini(f"[pytest]\npathstr_grammar = {ini}\n")
    pytester.makepyfile(
        _GRAMMAR_MODULE.format(
            expected=expected.name,
            normalized=f"a{expected.separator}b",
        )
    )
    result = pytester.runpytest(*args)
    result.assert_outcomes(passed=1)


def test_cli_option_selects_grammar(pytester: pytest.Pytester) -> None:
    """``--pathstr-grammar`` applies when no marker is present."""
    _run_grammar_module(
        pytester,
        expected=SeparatorStyle.WINDOWS,
        args=("--pathstr-grammar", "windows"),
    )


def test_cli_option_overrides_ini(pytester: pytest.Pytester) -> None:
    """The command-line option beats the ini setting."""
    _run_grammar_module(
        pytester,
        expected=SeparatorStyle.UNIX,
        args=("--pathstr-grammar=unix",),
        ini="windows",
    )


def test_ini_selects_grammar(pytester: pytest.Pytester) -> None:
    """The ini setting applies when nothing else chooses a grammar."""
    _run_grammar_module(pytester, expected=SeparatorStyle.WINDOWS, ini="windows")


def test_marker_is_registered(pytester: pytest.Pytester) -> None:
    """The plugin registers its marker so ``--strict-markers`` accepts it."""
    pytester.makepyfile(
        """
        import pytest

        pytest_plugins = ("pathstr.pytest_plugin",)

        @pytest.mark.path_grammar("unix")
        def test_marked(path_grammar):
            assert path_grammar.name == "UNIX"
        """
    )
    result = pytester.runpytest("--strict-markers")
    result.assert_outcomes(passed=1)
