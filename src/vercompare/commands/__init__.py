# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, validate, sort

__all__ = ["compare", "validate", "sort"]
