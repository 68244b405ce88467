# SPDX-License-Identifier: MIT
"""CLI configuration loading from the ``[tool.vercompare]`` table of pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


OUTPUT_FORMATS = ("number", "symbol", "word")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CompareConfig:
    """Configuration for the vercompare command.

    Attributes:
        output: How ``compare`` prints its result: number, symbol or word
        descending: Default order for ``sort`` (newest first when True)
        source: pyproject.toml the values came from, or None for defaults
    """

    output: str = "number"
    descending: bool = False
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "CompareConfig":
        """Load configuration from a pyproject.toml file.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(pyproject_path)
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, source=path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        source: Optional[Path] = None,
    ) -> "CompareConfig":
        """Create a CompareConfig from a parsed pyproject.toml dictionary."""
        tool_config = pyproject.get("tool", {}).get("vercompare", {})
        if not isinstance(tool_config, dict):
            raise ConfigError("[tool.vercompare] must be a table")

        output = tool_config.get("output", "number")
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output format {output!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

        descending = tool_config.get("descending", False)
        if not isinstance(descending, bool):
            raise ConfigError("descending must be true or false")

        return cls(output=output, descending=descending, source=source)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the directory, or None if no pyproject.toml is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> CompareConfig:
    """Load configuration for the project containing ``project_dir``.

    Falls back to defaults when no pyproject.toml is found.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        return CompareConfig()
    return CompareConfig.from_pyproject(root / "pyproject.toml")
