"""Steps for testing the pytest plugin."""

from __future__ import annotations

import shutil
import subprocess
import sys
import tempfile
import typing as t
from pathlib import Path

from behave import given, then, when  # type: ignore[attr-defined]


class BehaveContext(t.Protocol):
    """Behave step context for plugin tests."""

    test_file: Path
    tmpdir: Path
    result: subprocess.CompletedProcess[str]


_MARKED_TEST = """
import pytest

from pathstr import normalize

pytest_plugins = ("pathstr.pytest_plugin",)

@pytest.mark.path_grammar("windows")
def test_example(path_grammar):
    assert normalize("a/b/../c") == "a\\\\c"
"""

_UNMARKED_TEST = """
from pathstr import normalize

pytest_plugins = ("pathstr.pytest_plugin",)

def test_example(path_grammar):
    assert normalize("a/b/../c") == "a\\\\c"
"""


def _write_test_file(context: BehaveContext, source: str) -> None:
    tmpdir = Path(tempfile.mkdtemp())
    context.test_file = tmpdir / "test_example.py"
    context.tmpdir = tmpdir
    context.test_file.write_text(source)


@given("a test module marked with the windows grammar")
def step_create_marked_file(context: BehaveContext) -> None:
    """Write a pytest file that pins the grammar with a marker."""
    _write_test_file(context, _MARKED_TEST)


@given("a test module using the path_grammar fixture")
def step_create_unmarked_file(context: BehaveContext) -> None:
    """Write a pytest file that relies on the option for its grammar."""
    _write_test_file(context, _UNMARKED_TEST)


def _run_pytest(context: BehaveContext, *extra: str) -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "pytest", str(context.test_file), *extra],
        capture_output=True,
        text=True,
    )
    context.result = result
    shutil.rmtree(context.tmpdir)


@when("I run pytest on it")
def step_run_pytest(context: BehaveContext) -> None:
    """Execute pytest on the generated file."""
    _run_pytest(context)


@when('I run pytest on it with "{option}"')
def step_run_pytest_with_option(context: BehaveContext, option: str) -> None:
    """Execute pytest on the generated file with an extra option."""
    _run_pytest(context, option)


@then("the run should pass")
def step_check_pass(context: BehaveContext) -> None:
    """Assert that pytest exited successfully."""
    assert context.result.returncode == 0, context.result.stdout  # noqa: S101
