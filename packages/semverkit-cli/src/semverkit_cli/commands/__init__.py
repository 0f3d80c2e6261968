# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, check, compare, format, parse, sort

__all__ = ["bump", "check", "compare", "format", "parse", "sort"]
