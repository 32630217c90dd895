# SPDX-License-Identifier: MIT
"""Unit tests for build information loading."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from build_version import BuildInfo, ConfigError, Version


class TestBuildInfoDefaults:
    """Tests for the default build information."""

    def test_defaults(self):
        """Test the values used when nothing is stamped in."""
        info = BuildInfo()
        assert info.version == "0.1.0+git"
        assert info.build_time == "0"
        assert info.build_user == "unknown"

    def test_default_version_parses(self):
        """Test that the default version is well formed."""
        assert BuildInfo().parsed_version() == Version(0, 1, 0, build="git")

    def test_default_banner(self):
        """Test the banner for an unstamped build."""
        assert BuildInfo().banner("tool") == "tool 0.1.0+git 1970-01-01 00:00:00+00:00 unknown"


class TestFromEnv:
    """Tests for BuildInfo.from_env."""

    def test_reads_variables(self):
        """Test that BUILD_VERSION_* variables are picked up."""
        info = BuildInfo.from_env(
            {
                "BUILD_VERSION_APP_VERSION": "2.3.4-rc.1",
                "BUILD_VERSION_BUILD_TIME": "1700000000",
                "BUILD_VERSION_BUILD_USER": "ci",
            }
        )
        assert info == BuildInfo("2.3.4-rc.1", "1700000000", "ci")

    def test_missing_variables_keep_defaults(self):
        """Test that unset variables fall back to defaults."""
        assert BuildInfo.from_env({}) == BuildInfo()

    def test_reads_process_environment(self, monkeypatch):
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("BUILD_VERSION_APP_VERSION", "9.9.9")
        assert BuildInfo.from_env().version == "9.9.9"


class TestFromPyproject:
    """Tests for BuildInfo.from_pyproject."""

    def test_loads_project(self, temp_project: Path):
        """Test loading version and tool settings."""
        info = BuildInfo.from_pyproject(temp_project)
        assert info.version == "1.4.2-rc.1+git"
        assert info.build_time == "1700000000"
        assert info.build_user == "ci"

    def test_tool_table_optional(self, tmp_path: Path):
        """Test that [tool.build-version] may be omitted."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\nversion = "1.0.0"\n')
        info = BuildInfo.from_pyproject(tmp_path)
        assert info == BuildInfo(version="1.0.0")

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            BuildInfo.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[project\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            BuildInfo.from_pyproject(tmp_path)

    def test_missing_version(self):
        """Test that a project without a version raises ConfigError."""
        with pytest.raises(ConfigError, match="project.version"):
            BuildInfo.from_pyproject_dict({"project": {"name": "x"}})


class TestDerivedValues:
    """Tests for parsed_version, built_at and banner."""

    def test_malformed_version_is_config_error(self):
        """Test that a broken stamped version is reported as ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            BuildInfo(version="1.2").parsed_version()
        assert "1.2" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_built_at(self):
        """Test conversion of the build timestamp."""
        info = BuildInfo(build_time="1700000000")
        assert info.built_at() == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    @pytest.mark.parametrize("build_time", ["", "yesterday", "99999999999999999999"])
    def test_unusable_build_time_is_epoch(self, build_time):
        """Test that unusable build times fall back to the epoch."""
        info = BuildInfo(build_time=build_time)
        assert info.built_at() == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_banner(self):
        """Test the banner layout."""
        info = BuildInfo("1.2.3", "1700000000", "ci")
        assert info.banner("tool") == "tool 1.2.3 2023-11-14 22:13:20+00:00 ci"

    def test_banner_with_malformed_version(self):
        """Test that the banner refuses a broken stamped version."""
        with pytest.raises(ConfigError):
            BuildInfo(version="latest").banner("tool")
