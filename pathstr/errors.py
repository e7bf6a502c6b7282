"""Exception hierarchy for the path engine.

Unparseable paths are reported by returning ``None``; the exceptions below are
reserved for input that should never reach a path API at all.
"""

from __future__ import annotations


class PathStrError(Exception):
    """Base class for all pathstr errors."""


class ForbiddenCharacterError(PathStrError, ValueError):
    """Raised when a path contains a NUL character."""

    def __init__(self, path: str) -> None:
        super().__init__(
            "Null character present in file/path name. There are no known "
            "legitimate use cases for such data, but several injection attacks "
            "may use it"
        )
        self.path = path


class AlternateDataStreamError(PathStrError, ValueError):
    """Raised when a Windows file name carries an NTFS stream separator."""

    def __init__(self, path: str) -> None:
        super().__init__("NTFS ADS separator (':') in file name is forbidden.")
        self.path = path


class PlatformOverrideError(PathStrError, ValueError):
    """Raised when a grammar override environment variable is malformed."""


__all__ = [
    "AlternateDataStreamError",
    "ForbiddenCharacterError",
    "PathStrError",
    "PlatformOverrideError",
]
