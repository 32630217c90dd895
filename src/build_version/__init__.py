# SPDX-License-Identifier: MIT
"""Dotted-triple version parsing, formatting and ordering.

This package parses MAJOR.MINOR.PATCH[-prerelease][+build] version strings,
renders them back in canonical form and orders them. Build metadata is carried
through but never takes part in ordering.

Example:
    >>> from build_version import parse_version, compare_versions, sort_versions
    >>> 
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>> str(version.bump_minor())
    '1.3.0'
    >>> 
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    format_version,
    is_valid_version,
    bump_version,
    FormatError,
    NumericConversionError,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    less_than,
    is_outdated,
    sort_versions,
    sorted_versions,
    version_key,
)
from .buildinfo import (
    BuildInfo,
    ConfigError,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_version",
    "bump_version",
    "FormatError",
    "NumericConversionError",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "less_than",
    "is_outdated",
    "sort_versions",
    "sorted_versions",
    "version_key",
    # Build information
    "BuildInfo",
    "ConfigError",
]
