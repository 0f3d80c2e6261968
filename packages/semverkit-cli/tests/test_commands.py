# SPDX-License-Identifier: MIT
"""Tests for the semverkit commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from semverkit_cli.main import cli


class TestParseCommand:
    """Tests for semverkit parse."""

    def test_parse_components(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test printing the components of a version."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2.3-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major: 1" in result.output
        assert "minor: 2" in result.output
        assert "patch: 3" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build: build.5" in result.output
        assert "well_formed: True" in result.output

    def test_parse_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test JSON output."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "--json", "0.0.1-beta+sha64"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "major": 0,
            "minor": 0,
            "patch": 1,
            "prerelease": "beta",
            "build": "sha64",
            "well_formed": True,
        }

    def test_parse_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that the project version is used by default."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "parse"])

        assert result.exit_code == 0
        assert "prerelease: rc.1" in result.output

    def test_parse_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that unparseable versions fail."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.0"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_parse_strict(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that strict mode checks build metadata."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "--strict", "1.0.0+a;b"])
        assert result.exit_code == 1

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.0.0+a;b"])
        assert result.exit_code == 0
        assert "build: a;b" in result.output
        assert "Warning:" in result.output

    def test_parse_no_version(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test failure when neither an argument nor a project version exists."""
        result = cli_runner.invoke(cli, ["-C", str(empty_project), "parse"])

        assert result.exit_code == 1
        assert "No version given" in result.output


class TestCheckCommand:
    """Tests for semverkit check."""

    def test_check_valid(self, cli_runner: CliRunner) -> None:
        """Test well-formed versions."""
        result = cli_runner.invoke(cli, ["check", "1.0.0", "1.0.0-alpha.1+001"])

        assert result.exit_code == 0
        assert "1.0.0: well-formed" in result.output

    def test_check_invalid(self, cli_runner: CliRunner) -> None:
        """Test that one bad version fails the command."""
        result = cli_runner.invoke(cli, ["check", "1.0.0", "1.1.1-beta;1"])

        assert result.exit_code == 1
        assert "1.0.0: well-formed" in result.output
        assert "1.1.1-beta;1: not a well-formed semantic version" in result.output

    def test_check_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test checking the project version."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check"])

        assert result.exit_code == 0
        assert "1.4.2-rc.1+build.7: well-formed" in result.output

    def test_check_no_version(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test failure when the project has no version."""
        result = cli_runner.invoke(cli, ["-C", str(empty_project), "check"])

        assert result.exit_code == 1


class TestCompareCommand:
    """Tests for semverkit compare."""

    def test_prerelease_lower(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that a pre-release sorts before the release."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_build_ignored(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that build metadata does not count."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0.0+1", "1.0.0+2"])

        assert result.output.strip() == "0"

    def test_greater(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test a higher first version."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "2.0.0", "1.9.9"])

        assert result.output.strip() == "1"

    def test_verbose(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test the verbose relation line."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(tmp_path), "compare", "1.0.0-alpha", "1.0.0-alpha.1"]
        )

        assert "1.0.0-alpha < 1.0.0-alpha.1" in result.output

    def test_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid version fails."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0", "1.0.0"])

        assert result.exit_code == 1


class TestFormatCommand:
    """Tests for semverkit format."""

    def test_pattern(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test an explicit pattern."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "format", "1.2.3-beta+456", "-f", "x.y.z_p"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3_beta"

    def test_default_pattern(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that G is used without configuration."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "format", "1.2.3-beta+456"])

        assert result.output.strip() == "1.2.3-beta+456"

    def test_configured_pattern(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test the pattern and version from pyproject.toml."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "format"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.4.2-rc.1"

    def test_reference_time(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test pinning the time used by date tokens."""
        result = cli_runner.invoke(
            cli,
            ["-C", str(tmp_path), "format", "1.2.3", "-f", "C-YYYYMMdd", "--time", "2024-03-09"],
        )

        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3-20240309"


class TestBumpCommand:
    """Tests for semverkit bump."""

    def test_bump_patch(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test bumping the patch number."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "bump", "patch", "1.4.2"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.4.3"

    def test_bump_major_with_prerelease(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test bumping major and setting a pre-release."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "bump", "major", "1.4.2", "-p", "rc.1"]
        )

        assert result.output.strip() == "2.0.0-rc.1"

    def test_bump_with_value(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test setting the bumped number."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "bump", "patch", "1.0.0", "--value", "5"]
        )

        assert result.output.strip() == "1.0.5"

    def test_bump_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that identifiers carry over from the project version."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "bump", "minor"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.5.0-rc.1+build.7"

    def test_bump_warns_on_malformed_result(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that malformed replacement identifiers are reported."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "bump", "major", "1.0.0", "-p", "bad;id"]
        )

        assert result.exit_code == 0
        assert "Warning:" in result.output
        assert "2.0.0-bad;id" in result.output

    def test_bump_unknown_part(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that only major, minor and patch can be bumped."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "bump", "build", "1.0.0"])

        assert result.exit_code == 2


class TestSortCommand:
    """Tests for semverkit sort."""

    def test_sort(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test ascending precedence order."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "sort", "1.0.0", "1.0.0-rc.1", "0.9.0", "1.0.0-alpha"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "1.0.0-alpha", "1.0.0-rc.1", "1.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test descending precedence order."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "sort", "-r", "1.0.0", "2.0.0", "1.5.0"]
        )

        assert result.output.splitlines() == ["2.0.0", "1.5.0", "1.0.0"]

    def test_sort_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid version fails."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", "1.0.0", "nope"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_sort_configured_strictness(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that [tool.semverkit].strict applies unless overridden."""
        (tmp_path / "pyproject.toml").write_text("[tool.semverkit]\nstrict = true\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", "1.0.0+a;b", "0.9.0"])
        assert result.exit_code == 1
        assert "Error:" in result.output

        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "sort", "--lenient", "1.0.0+a;b", "0.9.0"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "1.0.0+a;b"]
