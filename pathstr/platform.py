"""Host grammar detection shared across pathstr modules.

The path functions never consult the host directly: every grammar-sensitive
call takes an explicit ``style`` and only falls back to :func:`resolve_style`
when the caller passes ``None``. Centralising that fallback keeps the
environment overrides in one place.
"""

from __future__ import annotations

import logging
import os
import sys
import typing as t

from .errors import PlatformOverrideError
from .styles import SeparatorStyle

logger = logging.getLogger(__name__)

# Replaces ``sys.platform`` for grammar detection, so the Windows grammar can
# be exercised on any host.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATHSTR_PLATFORM_OVERRIDE"

# Explicit grammar choice; takes precedence over platform detection.
DEFAULT_STYLE_ENV: t.Final[str] = "PATHSTR_DEFAULT_STYLE"

# ``sys.platform`` prefixes that select the Windows grammar.
_WINDOWS_PLATFORMS: t.Final[tuple[str, ...]] = ("win",)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def is_windows(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) uses the Windows grammar."""
    platform_name = current_platform(platform)
    return any(platform_name.startswith(prefix) for prefix in _WINDOWS_PLATFORMS)


def _configured_style() -> SeparatorStyle | None:
    """Return the style named by :data:`DEFAULT_STYLE_ENV`, if any."""
    raw = os.getenv(DEFAULT_STYLE_ENV)
    if not raw:
        return None
    try:
        return SeparatorStyle.from_name(raw)
    except ValueError as exc:
        msg = f"{DEFAULT_STYLE_ENV} must be 'unix' or 'windows', got {raw!r}"
        raise PlatformOverrideError(msg) from exc


def host_style(platform: str | None = None) -> SeparatorStyle:
    """Return the separator style for *platform* (default: current host)."""
    if platform is None:
        configured = _configured_style()
        if configured is not None:
            logger.debug("Using %s grammar from %s", configured.name, DEFAULT_STYLE_ENV)
            return configured
    return SeparatorStyle.WINDOWS if is_windows(platform) else SeparatorStyle.UNIX


def resolve_style(style: SeparatorStyle | None) -> SeparatorStyle:
    """Return *style*, or the host style when *style* is ``None``."""
    return host_style() if style is None else style


__all__ = [
    "DEFAULT_STYLE_ENV",
    "PLATFORM_OVERRIDE_ENV",
    "current_platform",
    "host_style",
    "is_windows",
    "resolve_style",
]
