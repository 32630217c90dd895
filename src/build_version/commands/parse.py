# SPDX-License-Identifier: MIT
"""Parse a version string and print its components."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from ..semver import FormatError, parse_version
from ..main import echo_error, echo_info


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the parsed version as JSON.",
)
def parse(version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        build-version parse 1.2.3
        build-version parse 1.2.3-rc.1+git --json
    """
    try:
        parsed = parse_version(version)
    except FormatError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if as_json:
        data = asdict(parsed)
        data["canonical"] = str(parsed)
        echo_info(json.dumps(data, indent=2))
        return

    echo_info(f"major:      {parsed.major}")
    echo_info(f"minor:      {parsed.minor}")
    echo_info(f"patch:      {parsed.patch}")
    echo_info(f"prerelease: {parsed.prerelease}")
    echo_info(f"build:      {parsed.build}")
    echo_info(f"canonical:  {parsed}")
