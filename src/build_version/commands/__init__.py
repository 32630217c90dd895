# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, bump, show

__all__ = ["parse", "compare", "sort", "bump", "show"]
