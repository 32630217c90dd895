# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Release ordering: MAJOR, MINOR, PATCH compared numerically, left to right.
Pre-release ordering: a release outranks any pre-release of the same triple;
two pre-releases are compared identifier by identifier, numerically when both
identifiers are integers and as raw strings otherwise.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import Iterable, Optional, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]

_INTEGER = re.compile(r"([+-]?)([0-9]+)")

# Identifiers outside the signed 64-bit range are not treated as integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _compare_release(v1: Version, v2: Version) -> int:
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result
    return 0


def _as_int64(identifier: str) -> Optional[int]:
    match = _INTEGER.fullmatch(identifier)
    if not match:
        return None

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # More than 19 significant digits cannot fit in 64 bits
    if len(digits) > 19:
        return None

    value = -int(digits) if sign == "-" else int(digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _compare_identifier(id1: str, id2: str) -> int:
    """Compare a single pair of pre-release identifiers.

    Two integers within the signed 64-bit range compare numerically first.
    Anything still undecided, including a numeric identifier against an
    alphanumeric one, an out-of-range integer, or "01" against "1", falls
    back to plain string comparison.
    """
    n1 = _as_int64(id1)
    n2 = _as_int64(id2)
    if n1 is not None and n2 is not None:
        result = _sign(n1, n2)
        if result:
            return result
    return _sign(id1, id2)


def _compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with a
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # Common prefix is equal - more identifiers means higher precedence
    return _sign(len(parts1), len(parts2))


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.2.3", "1.2.4")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = _compare_release(v1, v2)
    if result:
        return result

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def less_than(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 orders strictly before version2."""
    return compare_versions(version1, version2) == -1


def is_outdated(current: VersionLike, latest: VersionLike) -> bool:
    """Return True if ``current`` is older than ``latest``."""
    return less_than(current, latest)


_cmp_key = cmp_to_key(compare_versions)


def version_key(version: VersionLike):
    """Return a sort key for a version, suitable for sorted(), min() and max().

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _cmp_key(_coerce(version))


def sort_versions(versions: list[VersionLike]) -> None:
    """Sort a list of versions in place, ascending.

    The sort is stable: versions that compare equal (for example ones that
    differ only in build metadata) keep their relative order.
    """
    versions.sort(key=version_key)


def sorted_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[VersionLike]:
    """Return a new stably sorted list of versions."""
    return sorted(versions, key=version_key, reverse=reverse)
