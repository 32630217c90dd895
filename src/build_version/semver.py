# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1
- Build metadata: +build, +build.123, +git

Pre-release and build metadata are opaque strings. They are split off the
patch segment (metadata first, then pre-release) and rendered back verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

# Numeric fields share the range of a signed 64-bit integer
MAX_COMPONENT = 2**63 - 1

_DECIMAL = re.compile(r"[0-9]+")

BUMP_PARTS = ("major", "minor", "patch")


class FormatError(ValueError):
    """Raised when a version string is not in dotted-triple format."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"{version} is not in dotted-triple format"
        super().__init__(self.message)


class NumericConversionError(FormatError):
    """Raised when a major, minor or patch segment is not a base-10 integer."""

    def __init__(self, version: str, segment: str, message: str = ""):
        self.segment = segment
        super().__init__(
            version, message or f"invalid numeric segment {segment!r} in version {version!r}"
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers without the leading ``-``
            (e.g. "alpha.1", "rc.2"); empty when there is none
        build: Build metadata without the leading ``+`` (e.g. "git",
            "build.123"); empty when there is none
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for part in BUMP_PARTS:
            value = getattr(self, part)
            if not 0 <= value <= MAX_COMPONENT:
                raise ValueError(f"{part} must be between 0 and {MAX_COMPONENT}, got {value}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers."""
        if not self.prerelease:
            return ()
        return tuple(self.prerelease.split("."))

    def bump_major(self) -> Version:
        """Return the next major version; everything below it is reset."""
        return replace(self, major=self.major + 1, minor=0, patch=0, prerelease="", build="")

    def bump_minor(self) -> Version:
        """Return the next minor version; patch, pre-release and build are reset."""
        return replace(self, minor=self.minor + 1, patch=0, prerelease="", build="")

    def bump_patch(self) -> Version:
        """Return the next patch version; pre-release and build are reset."""
        return replace(self, patch=self.patch + 1, prerelease="", build="")


def _split_off(segment: str, delimiter: str) -> tuple[str, str]:
    # Only the first delimiter counts; the remainder is kept verbatim
    head, found, tail = segment.partition(delimiter)
    if not found:
        return segment, ""
    return head, tail


def _parse_component(version_string: str, segment: str) -> int:
    try:
        value = int(segment, 10)
    except ValueError as e:
        raise NumericConversionError(version_string, segment) from e

    # int() also accepts signs, underscores and surrounding whitespace
    if not _DECIMAL.fullmatch(segment):
        raise NumericConversionError(version_string, segment)
    if value > MAX_COMPONENT:
        raise NumericConversionError(
            version_string, segment, f"numeric segment {segment!r} is out of range"
        )
    return value


def parse_version(version_string: str) -> Version:
    """Parse a dotted-triple version string into a Version object.

    The string is split on ``.`` into at most three parts, so dots inside the
    pre-release or build metadata belong to the third part. Build metadata is
    taken from the first ``+`` before the pre-release is taken from the first
    remaining ``-``, so a hyphen inside the metadata is never mistaken for a
    pre-release delimiter.

    Args:
        version_string: A string of the form
            MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        FormatError: If the string does not split into three segments
        NumericConversionError: If a numeric segment is not a non-negative
            base-10 integer

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise FormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    parts = version_string.split(".", 2)
    if len(parts) != 3:
        raise FormatError(version_string)

    major, minor, rest = parts
    patch, build = _split_off(rest, "+")
    patch, prerelease = _split_off(patch, "-")

    return Version(
        major=_parse_component(version_string, major),
        minor=_parse_component(version_string, minor),
        patch=_parse_component(version_string, patch),
        prerelease=prerelease,
        build=build,
    )


def format_version(version: Version) -> str:
    """Render a Version in canonical ``MAJOR.MINOR.PATCH[-pre][+build]`` form."""
    return str(version)


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a dotted-triple version.

    Examples:
        >>> is_valid_version("1.0.0-alpha+git")
        True
        >>> is_valid_version("1.0")
        False
    """
    try:
        parse_version(version_string)
    except FormatError:
        return False
    return True


def bump_version(version: Version, part: str) -> Version:
    """Return ``version`` with ``part`` ("major", "minor" or "patch") incremented.

    Raises:
        ValueError: If ``part`` is not one of the bumpable parts
    """
    if part not in BUMP_PARTS:
        raise ValueError(f"Cannot bump {part!r}; expected one of {', '.join(BUMP_PARTS)}")
    return getattr(version, f"bump_{part}")()
