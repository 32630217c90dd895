# SPDX-License-Identifier: MIT
"""Show the build banner."""

from __future__ import annotations

import click

from ..buildinfo import BuildInfo, ConfigError
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.option(
    "--program",
    default="build-version",
    show_default=True,
    help="Program name printed at the start of the banner.",
)
@click.option(
    "--from-project",
    is_flag=True,
    help="Read build information from pyproject.toml instead of BUILD_VERSION_* variables.",
)
@pass_context
def show(ctx: Context, program: str, from_project: bool) -> None:
    """Print "PROGRAM VERSION BUILD-TIME BUILD-USER".

    Build information is read from pyproject.toml when a project directory is
    given with -C or --from-project is set, otherwise from the environment.

    \b
    Examples:
        build-version show
        build-version -C path/to/project show
    """
    try:
        if from_project or ctx.project_dir is not None:
            info = BuildInfo.from_pyproject(ctx.project_dir or ".")
        else:
            info = BuildInfo.from_env()
        echo_info(info.banner(program))
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)
