# SPDX-License-Identifier: MIT
"""CLI entry point for the build-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .buildinfo import ConfigError
from .semver import FormatError

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None


pass_context = click.make_pass_decorator(Context, ensure=True)


def setup_logging(debug: bool = False) -> None:
    """Configure the package logger to write to stderr."""
    root = logging.getLogger("build_version")
    level = logging.DEBUG if debug else logging.WARNING
    root.setLevel(level)

    # Repeated invocations (e.g. in tests) must not stack handlers
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname).4s] %(name)s: %(message)s"))
    root.addHandler(handler)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(version=__version__, prog_name="build-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory to read pyproject.toml from.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare, sort and bump dotted-triple versions.

    \b
    Examples:
        build-version parse 1.2.3-rc.1+git
        build-version compare 1.0.0-alpha 1.0.0
        build-version sort 1.2.0 1.0.0 1.1.0-beta 1.1.0
        build-version bump minor 1.2.3-rc.1
        build-version show
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    setup_logging(verbose)
    logger.debug("Running with project directory %s", directory)


# Import and register commands
from .commands import parse, compare, sort, bump, show

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(bump.bump)
cli.add_command(show.show)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, FormatError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
