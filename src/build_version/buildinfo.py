# SPDX-License-Identifier: MIT
"""Build information for the running program.

The version, build time and build user are stamped in at build time. They are
carried in a BuildInfo object that callers construct explicitly, from the
environment or from a project's pyproject.toml.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import FormatError, Version, parse_version

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0.1.0+git"
DEFAULT_BUILD_TIME = "0"
DEFAULT_BUILD_USER = "unknown"

ENV_PREFIX = "BUILD_VERSION_"


class ConfigError(Exception):
    """Raised when build information cannot be loaded."""

    pass


@dataclass
class BuildInfo:
    """Version and provenance of a build.

    Attributes:
        version: Version string stamped into the build
        build_time: Unix timestamp of the build, as a string
        build_user: Name of the user or pipeline that produced the build
    """

    version: str = DEFAULT_VERSION
    build_time: str = DEFAULT_BUILD_TIME
    build_user: str = DEFAULT_BUILD_USER

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildInfo":
        """Create build information from environment variables.

        Reads BUILD_VERSION_APP_VERSION, BUILD_VERSION_BUILD_TIME and
        BUILD_VERSION_BUILD_USER; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        info = cls()
        if version := env.get(f"{ENV_PREFIX}APP_VERSION"):
            info.version = version
        if build_time := env.get(f"{ENV_PREFIX}BUILD_TIME"):
            info.build_time = build_time
        if build_user := env.get(f"{ENV_PREFIX}BUILD_USER"):
            info.build_user = build_user

        logger.debug("Loaded build info from environment: %s", info)
        return info

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "BuildInfo":
        """Load build information from pyproject.toml.

        The version comes from ``[project].version``. Build time and user are
        read from the optional ``[tool.build-version]`` table.

        Raises:
            ConfigError: If the file is invalid or has no version
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loaded %s", pyproject_path)
        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "BuildInfo":
        """Create BuildInfo from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool_config = pyproject.get("tool", {}).get("build-version", {})

        version = project.get("version", "")
        if not version:
            raise ConfigError("Missing required field: project.version")

        return cls(
            version=str(version),
            build_time=str(tool_config.get("build_time", DEFAULT_BUILD_TIME)),
            build_user=str(tool_config.get("build_user", DEFAULT_BUILD_USER)),
        )

    def parsed_version(self) -> Version:
        """Parse the stamped version.

        Raises:
            ConfigError: If the stamped version is malformed, which means the
                build pipeline is broken
        """
        try:
            return parse_version(self.version)
        except FormatError as e:
            raise ConfigError(f"Build version {self.version!r} is malformed: {e}") from e

    def built_at(self) -> datetime:
        """Return the build time as an aware UTC datetime.

        A build time that is not a usable integer falls back to the epoch.
        """
        try:
            return datetime.fromtimestamp(int(self.build_time), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            logger.debug("Build time %r is not a timestamp; using the epoch", self.build_time)
            return datetime.fromtimestamp(0, tz=timezone.utc)

    def banner(self, program: str) -> str:
        """Return ``"{program} {version} {build time} {build user}"``."""
        return f"{program} {self.parsed_version()} {self.built_at()} {self.build_user}"
