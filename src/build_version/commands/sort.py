# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

import click

from ..compare import sorted_versions
from ..semver import FormatError, parse_version
from ..main import echo_error, echo_info


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the newest version first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS one per line, oldest first.

    Versions that compare equal keep the order they were given in.

    \b
    Examples:
        build-version sort 1.2.0 1.0.0 1.1.0-beta 1.1.0
        build-version sort -r 1.0.0 2.0.0
    """
    try:
        parsed = [parse_version(version) for version in versions]
    except FormatError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in sorted_versions(parsed, reverse=reverse):
        echo_info(str(version))
