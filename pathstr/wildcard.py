"""Wildcard matching of file names.

``?`` matches exactly one character and ``*`` matches zero or more. The
match covers the whole name and is purely textual, so ``*.txt`` matches
``a/b.txt`` as well; apply it to :func:`pathstr.get_name` for per-entry
filtering.
"""

from __future__ import annotations

import typing as t

from .case import CaseSensitivity
from .styles import SeparatorStyle

_ANY_ONE: t.Final[str] = "?"
_ANY_RUN: t.Final[str] = "*"


def split_on_tokens(text: str) -> list[str]:
    """Split *text* into literal runs and single ``?``/``*`` tokens.

    Consecutive ``*`` collapse into one token: ``"a**b?"`` gives
    ``["a", "*", "b", "?"]``.
    """
    if _ANY_ONE not in text and _ANY_RUN not in text:
        return [text]

    tokens: list[str] = []
    buffer: list[str] = []
    previous = ""
    for ch in text:
        if ch in (_ANY_ONE, _ANY_RUN):
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            if ch == _ANY_ONE:
                tokens.append(_ANY_ONE)
            elif previous != _ANY_RUN:
                tokens.append(_ANY_RUN)
        else:
            buffer.append(ch)
        previous = ch
    if buffer:
        tokens.append("".join(buffer))
    return tokens


def wildcard_match(
    name: str | None,
    pattern: str | None,
    case: CaseSensitivity | None = None,
    *,
    style: SeparatorStyle | None = None,
) -> bool:
    """Return ``True`` when *name* matches the wildcard *pattern*.

    ``None`` matches only ``None``. *case* defaults to
    :attr:`CaseSensitivity.SENSITIVE`.
    """
    if name is None or pattern is None:
        return name is None and pattern is None

    rule = (CaseSensitivity.SENSITIVE if case is None else case).resolve(style)
    tokens = split_on_tokens(pattern)
    any_chars = False
    text_idx = 0
    token_idx = 0
    # (token index, text index) pairs to retry when a later token fails
    backtrack: list[tuple[int, int]] = []

    while True:
        if backtrack:
            token_idx, text_idx = backtrack.pop()
            any_chars = True

        while token_idx < len(tokens):
            token = tokens[token_idx]
            if token == _ANY_ONE:
                text_idx += 1
                if text_idx > len(name):
                    break
                any_chars = False
            elif token == _ANY_RUN:
                any_chars = True
                if token_idx == len(tokens) - 1:
                    text_idx = len(name)
            else:
                if any_chars:
                    text_idx = rule.check_index_of(name, text_idx, token)
                    if text_idx == -1:
                        break
                    repeat = rule.check_index_of(name, text_idx + 1, token)
                    if repeat >= 0:
                        backtrack.append((token_idx, repeat))
                elif not rule.check_region_matches(name, text_idx, token):
                    break
                text_idx += len(token)
                any_chars = False
            token_idx += 1

        if token_idx == len(tokens) and text_idx == len(name):
            return True
        if not backtrack:
            return False


def wildcard_match_on_system(
    name: str | None, pattern: str | None, *, style: SeparatorStyle | None = None
) -> bool:
    """Match using the case rule of the grammar (insensitive under Windows)."""
    return wildcard_match(name, pattern, CaseSensitivity.SYSTEM, style=style)


__all__ = ["split_on_tokens", "wildcard_match", "wildcard_match_on_system"]
