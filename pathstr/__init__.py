"""Lexical manipulation of Unix, Windows, UNC and home-directory path strings.

Every function works on plain strings and never touches the file system.
Grammar-sensitive calls accept ``style=`` and fall back to the host grammar
(see :mod:`pathstr.platform`) when it is omitted.
"""

from __future__ import annotations

from .case import CaseSensitivity
from .compare import (
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
)
from .decompose import (
    get_base_name,
    get_extension,
    get_full_path,
    get_full_path_no_end_separator,
    get_name,
    get_path,
    get_path_no_end_separator,
    get_prefix,
    index_of_extension,
    index_of_last_separator,
    is_extension,
    remove_extension,
)
from .errors import (
    AlternateDataStreamError,
    ForbiddenCharacterError,
    PathStrError,
    PlatformOverrideError,
)
from .filters import (
    AllOf,
    AnyOf,
    ExtensionFilter,
    NamePrefixFilter,
    NameSuffixFilter,
    Predicate,
    RegexFilter,
    WildcardFilter,
)
from .normalize import concat, normalize, normalize_no_end_separator
from .platform import (
    DEFAULT_STYLE_ENV,
    PLATFORM_OVERRIDE_ENV,
    host_style,
    resolve_style,
)
from .prefix import Prefix, PrefixKind, classify_prefix, get_prefix_length
from .separators import (
    separators_to_system,
    separators_to_unix,
    separators_to_windows,
)
from .styles import (
    EXTENSION_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    SeparatorStyle,
    is_separator,
)
from .wildcard import wildcard_match, wildcard_match_on_system

__all__ = [
    "DEFAULT_STYLE_ENV",
    "EXTENSION_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "AllOf",
    "AlternateDataStreamError",
    "AnyOf",
    "CaseSensitivity",
    "ExtensionFilter",
    "ForbiddenCharacterError",
    "NamePrefixFilter",
    "NameSuffixFilter",
    "PathStrError",
    "PlatformOverrideError",
    "Predicate",
    "Prefix",
    "PrefixKind",
    "RegexFilter",
    "SeparatorStyle",
    "WildcardFilter",
    "classify_prefix",
    "concat",
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "get_prefix",
    "get_prefix_length",
    "host_style",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "is_separator",
    "normalize",
    "normalize_no_end_separator",
    "remove_extension",
    "resolve_style",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "wildcard_match",
    "wildcard_match_on_system",
]
