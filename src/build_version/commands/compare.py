# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ..compare import compare_versions
from ..semver import FormatError
from ..main import echo_error, echo_info


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is older than, equal to or newer than VERSION2.

    Build metadata is ignored.

    \b
    Examples:
        build-version compare 1.0.0-alpha 1.0.0     # -1
        build-version compare 1.0.0+a 1.0.0+b       # 0
    """
    try:
        result = compare_versions(version1, version2)
    except FormatError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
