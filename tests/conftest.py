# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for vercompare tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a [tool.vercompare] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.vercompare]
output = "word"
descending = true
"""
    )
    return project_dir
