# SPDX-License-Identifier: MIT
"""Bump a version."""

from __future__ import annotations

import click

from ..semver import BUMP_PARTS, FormatError, bump_version, parse_version
from ..main import echo_error, echo_info


@click.command()
@click.argument("part", type=click.Choice(BUMP_PARTS))
@click.argument("version")
def bump(part: str, version: str) -> None:
    """Increment PART of VERSION and print the result.

    Lower-precedence fields, pre-release and build metadata are reset.

    \b
    Examples:
        build-version bump major 1.2.3-rc.1+git    # 2.0.0
        build-version bump patch 1.2.3-rc.1        # 1.2.4
    """
    try:
        parsed = parse_version(version)
    except FormatError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(bump_version(parsed, part)))
