"""Loose validation of the server part of UNC paths.

The server component of ``\\\\server\\share`` may be a DNS-like reg-name or a
bracket-less IPv6 literal. Dotted quads are accepted as reg-names, so
``127.0.0.256`` and ``127.0.0.01`` are valid servers here; only an IPv4 tail
embedded in an IPv6 literal is range checked.
"""

from __future__ import annotations

import re
import typing as t

_IPV4_PATTERN: t.Final[re.Pattern[str]] = re.compile(
    r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})"
)
_IPV4_MAX_OCTET_VALUE: t.Final[int] = 255

_IPV6_MAX_HEX_GROUPS: t.Final[int] = 8
_IPV6_GROUP_PATTERN: t.Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]{1,4}")

_REG_NAME_LABEL_PATTERN: t.Final[re.Pattern[str]] = re.compile(
    r"[a-zA-Z0-9][a-zA-Z0-9-]*"
)


def is_ipv4_address(name: str) -> bool:
    """Return ``True`` for a strict dotted-quad IPv4 address."""
    match = _IPV4_PATTERN.fullmatch(name)
    if match is None:
        return False
    for octet in match.groups():
        if int(octet) > _IPV4_MAX_OCTET_VALUE:
            return False
        if len(octet) > 1 and octet.startswith("0"):
            return False
    return True


def _ipv6_groups(address: str, *, compressed: bool) -> list[str]:
    """Split *address* on ``:`` with the ``::`` position left as one empty group."""
    groups = address.split(":")
    # Trailing empty groups are dropped; a trailing ``::`` contributes one back.
    while groups and not groups[-1]:
        groups.pop()
    if compressed:
        if address.endswith("::"):
            groups.append("")
        elif address.startswith("::") and groups:
            del groups[0]
    return groups


def is_ipv6_address(address: str) -> bool:
    """Return ``True`` when *address* looks like an IPv6 literal."""
    compressed = "::" in address
    if compressed and address.find("::") != address.rfind("::"):
        return False
    if (address.startswith(":") and not address.startswith("::")) or (
        address.endswith(":") and not address.endswith("::")
    ):
        return False

    groups = _ipv6_groups(address, compressed=compressed)
    if len(groups) > _IPV6_MAX_HEX_GROUPS:
        return False

    valid_groups = 0
    empty_run = 0
    for index, group in enumerate(groups):
        if not group:
            empty_run += 1
            if empty_run > 1:
                return False
            valid_groups += 1
            continue
        empty_run = 0
        if index == len(groups) - 1 and "." in group:
            if not is_ipv4_address(group):
                return False
            valid_groups += 2
            continue
        if _IPV6_GROUP_PATTERN.fullmatch(group) is None:
            return False
        valid_groups += 1

    if valid_groups > _IPV6_MAX_HEX_GROUPS:
        return False
    return valid_groups == _IPV6_MAX_HEX_GROUPS or compressed


def is_reg_name(name: str) -> bool:
    """Return ``True`` when *name* is an RFC 3986 reg-name of dotted labels."""
    labels = name.split(".")
    for index, label in enumerate(labels):
        if not label:
            # a trailing dot is legal, anything else is a ``..`` sequence
            return index == len(labels) - 1
        if _REG_NAME_LABEL_PATTERN.fullmatch(label) is None:
            return False
    return True


def is_valid_host_name(name: str) -> bool:
    """Return ``True`` when *name* may appear as a UNC server component."""
    return is_ipv6_address(name) or is_reg_name(name)


__all__ = [
    "is_ipv4_address",
    "is_ipv6_address",
    "is_reg_name",
    "is_valid_host_name",
]
