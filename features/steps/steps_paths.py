"""Step definitions for path normalisation and decomposition scenarios."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

import pathstr
from pathstr.styles import SeparatorStyle


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    grammar: SeparatorStyle
    result: str | None
    answer: bool
    length: int
    error: Exception | None


_TOKENS: dict[str, str] = {"(empty)": "", "(nul)": "\x00", "(space)": " "}


def _decode(value: str) -> str | None:
    """Expand feature-file placeholders; ``(none)`` stands for ``None``."""
    if value == "(none)":
        return None
    for token, replacement in _TOKENS.items():
        value = value.replace(token, replacement)
    return value


def _take_part(part: str, path: str | None, style: SeparatorStyle) -> str | None:
    if part == "prefix":
        return pathstr.get_prefix(path)
    if part == "path":
        return pathstr.get_path(path)
    if part == "path without end separator":
        return pathstr.get_path_no_end_separator(path)
    if part == "full path":
        return pathstr.get_full_path(path)
    if part == "full path without end separator":
        return pathstr.get_full_path_no_end_separator(path)
    if part == "name":
        return pathstr.get_name(path)
    if part == "extension":
        return pathstr.get_extension(path, style=style)
    if part == "base name":
        return pathstr.get_base_name(path, style=style)
    if part == "path without extension":
        return pathstr.remove_extension(path, style=style)
    msg = f"unknown path part: {part!r}"
    raise ValueError(msg)


@given('the "{grammar}" grammar')
def step_select_grammar(context: BehaveContext, grammar: str) -> None:
    """Choose the grammar the scenario's calls use."""
    context.grammar = SeparatorStyle.from_name(grammar)


@when('I normalise "{path}"')
def step_normalise(context: BehaveContext, path: str) -> None:
    """Normalise *path*, keeping a trailing separator."""
    context.result = pathstr.normalize(_decode(path), style=context.grammar)


@when('I normalise "{path}" dropping the end separator')
def step_normalise_no_end(context: BehaveContext, path: str) -> None:
    """Normalise *path*, dropping a trailing separator."""
    context.result = pathstr.normalize_no_end_separator(
        _decode(path), style=context.grammar
    )


@when('I try to normalise "{path}"')
def step_try_normalise(context: BehaveContext, path: str) -> None:
    """Normalise *path*, capturing the rejection."""
    context.error = None
    try:
        pathstr.normalize(_decode(path), style=context.grammar)
    except pathstr.PathStrError as exc:
        context.error = exc


@when('I concatenate "{base}" and "{name}"')
def step_concatenate(context: BehaveContext, base: str, name: str) -> None:
    """Join *name* onto *base*."""
    context.result = pathstr.concat(
        _decode(base), _decode(name), style=context.grammar
    )


@when('I compare "{left}" and "{right}" after normalising')
def step_compare(context: BehaveContext, left: str, right: str) -> None:
    """Compare two paths after normalisation."""
    context.answer = pathstr.equals_normalized(
        _decode(left), _decode(right), style=context.grammar
    )


@when('I measure the prefix of "{path}"')
def step_measure_prefix(context: BehaveContext, path: str) -> None:
    """Record the prefix length of *path*."""
    context.length = pathstr.get_prefix_length(_decode(path))


@when('I take the {part} of "{path}"')
def step_take_part(context: BehaveContext, part: str, path: str) -> None:
    """Extract one part of *path*."""
    context.result = _take_part(part, _decode(path), context.grammar)


@when('I try to take the extension of "{path}"')
def step_try_take_extension(context: BehaveContext, path: str) -> None:
    """Extract the extension of *path*, capturing the rejection."""
    context.error = None
    try:
        pathstr.get_extension(_decode(path), style=context.grammar)
    except pathstr.PathStrError as exc:
        context.error = exc


@when('I ask whether "{parent}" contains "{child}"')
def step_contains(context: BehaveContext, parent: str, child: str) -> None:
    """Check whether *parent* contains *child*."""
    context.answer = pathstr.directory_contains(
        _decode(parent), _decode(child), style=context.grammar
    )


@when('I match "{name}" against "{pattern}"')
def step_match(context: BehaveContext, name: str, pattern: str) -> None:
    """Match *name* against *pattern* with the grammar's case rule."""
    context.answer = pathstr.wildcard_match_on_system(
        name, pattern, style=context.grammar
    )


@then('the result should be "{expected}"')
def step_check_result(context: BehaveContext, expected: str) -> None:
    """Assert the result equals *expected* verbatim."""
    assert context.result == _decode(expected)  # noqa: S101


@then('the normalised path should be "{expected}"')
def step_check_normalised(context: BehaveContext, expected: str) -> None:
    """Assert the result equals *expected* rendered in the active grammar."""
    decoded = _decode(expected)
    if decoded is not None:
        decoded = decoded.replace("/", context.grammar.separator)
    assert context.result == decoded  # noqa: S101


@then("the result should be absent")
def step_check_absent(context: BehaveContext) -> None:
    """Assert the operation reported "cannot normalise"."""
    assert context.result is None  # noqa: S101


@then('the answer should be "{expected}"')
def step_check_answer(context: BehaveContext, expected: str) -> None:
    """Assert the yes/no outcome."""
    assert context.answer is (expected == "yes")  # noqa: S101


@then("the prefix length should be {expected}")
def step_check_prefix_length(context: BehaveContext, expected: str) -> None:
    """Assert the measured prefix length."""
    assert context.length == int(expected)  # noqa: S101


@then('a "{error_name}" should be raised')
def step_check_error(context: BehaveContext, error_name: str) -> None:
    """Assert the captured rejection has the expected type."""
    assert type(context.error).__name__ == error_name  # noqa: S101
