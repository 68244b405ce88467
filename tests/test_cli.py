# SPDX-License-Identifier: MIT
"""Tests for the vercompare command line."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from vercompare.main import cli, main


class TestCompareCommand:
    """Tests for vercompare compare."""

    def test_compare_number(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test the default numeric output."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "2.1.0", "2.0.9"])

        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_compare_older(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test comparing an older version."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "1.0.0-alpha", "1.0.0"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_compare_symbol(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test symbol output."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "-o", "symbol", "1.2", "1.2.0"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "="

    def test_compare_uses_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that [tool.vercompare].output is used by default."""
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "compare", "1.0.0-1", "1.0.0-alpha"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "newer"

    def test_option_overrides_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that --output wins over the config file."""
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "compare", "-o", "number", "1.0", "2.0"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_compare_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid version exits with status 1."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "not-a-version", "1.0.0"]
        )

        assert result.exit_code == 1
        assert "Error: Invalid version" in result.output

    def test_compare_bad_output_choice(self, cli_runner: CliRunner) -> None:
        """Test that unknown output formats are usage errors."""
        result = cli_runner.invoke(cli, ["compare", "-o", "emoji", "1.0", "2.0"])

        assert result.exit_code == 2

    def test_compare_bad_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid config fails the command."""
        (tmp_path / "pyproject.toml").write_text('[tool.vercompare]\noutput = "emoji"\n')

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0", "2.0"])

        assert result.exit_code == 1
        assert "Invalid output format" in str(result.exception)


class TestValidateCommand:
    """Tests for vercompare validate."""

    def test_validate_all_valid(self, cli_runner: CliRunner) -> None:
        """Test validating valid versions."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "v2.x", "1.0.0-rc.1+build.5"])

        assert result.exit_code == 0
        assert "ok: 1.0.0" in result.output
        assert "ok: v2.x" in result.output
        assert "ok: 1.0.0-rc.1+build.5" in result.output

    def test_validate_some_invalid(self, cli_runner: CliRunner) -> None:
        """Test that one invalid version fails the command."""
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "1..0"])

        assert result.exit_code == 1
        assert "ok: 1.0.0" in result.output
        assert "Error: Invalid version: '1..0'" in result.output

    def test_validate_requires_argument(self, cli_runner: CliRunner) -> None:
        """Test that at least one version is required."""
        result = cli_runner.invoke(cli, ["validate"])

        assert result.exit_code == 2


class TestSortCommand:
    """Tests for vercompare sort."""

    def test_sort_ascending(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test sorting oldest first."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "sort", "1.10", "1.2", "1.2.0-beta"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.2.0-beta", "1.2", "1.10"]

    def test_sort_reverse(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test sorting newest first."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "sort", "--reverse", "1.10", "1.2", "1.2.0-beta"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.10", "1.2", "1.2.0-beta"]

    def test_sort_uses_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that [tool.vercompare].descending sets the default order."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "sort", "1.0", "2.0"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.0", "1.0"]

    def test_sort_no_reverse_overrides_config(
        self, cli_runner: CliRunner, temp_project: Path
    ) -> None:
        """Test that --no-reverse wins over the config file."""
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "sort", "--no-reverse", "2.0", "1.0"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0", "2.0"]

    def test_sort_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid version fails the sort."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "sort", "1.0", "bogus"])

        assert result.exit_code == 1
        assert "Error: Invalid version: 'bogus'" in result.output


class TestMainEntryPoint:
    """Tests for the main() console-script entry point."""

    def test_main_config_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a ConfigError becomes an error message and exit status 1."""
        (tmp_path / "pyproject.toml").write_text('[tool.vercompare]\noutput = "emoji"\n')
        monkeypatch.setattr(
            sys, "argv", ["vercompare", "-C", str(tmp_path), "compare", "1.0", "2.0"]
        )

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error: Invalid output format" in captured.err
        assert captured.out == ""

    def test_main_invalid_version(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an invalid version is reported on stderr with exit status 1."""
        monkeypatch.setattr(
            sys, "argv", ["vercompare", "-C", str(tmp_path), "compare", "bogus", "1.0"]
        )

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Error: Invalid version: 'bogus'" in capsys.readouterr().err

    def test_main_success(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a successful command exits with status 0."""
        monkeypatch.setattr(
            sys, "argv", ["vercompare", "-C", str(tmp_path), "compare", "2.0", "1.0"]
        )

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == "1"


class TestCommandImports:
    """Tests that command modules import on their own."""

    @pytest.mark.parametrize(
        "module",
        ["vercompare.commands.compare", "vercompare.commands.validate", "vercompare.commands.sort"],
    )
    def test_command_module_imports_first(self, module: str) -> None:
        """Test importing a command module before vercompare.main in a fresh interpreter."""
        result = subprocess.run(
            [sys.executable, "-c", f"import {module}; import vercompare.main"],
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr
