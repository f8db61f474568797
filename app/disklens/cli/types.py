"""Shared types and helpers for CLI commands."""

from enum import Enum

import typer

from disklens.core.config import DiskLensConfig


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


class SortChoice(str, Enum):
    """Result order by size."""

    DESC = "desc"
    ASC = "asc"
    NONE = "none"


def get_config(ctx: typer.Context) -> DiskLensConfig:
    """Get the settings loaded by the main callback.

    Falls back to defaults when a command is invoked without the main
    callback having run (direct invocation in tests).

    Args:
        ctx: Current Typer context.

    Returns:
        Effective DiskLensConfig.
    """
    root = ctx.find_root()
    if isinstance(root.obj, dict):
        config = root.obj.get("config")
        if isinstance(config, DiskLensConfig):
            return config
    return DiskLensConfig()
