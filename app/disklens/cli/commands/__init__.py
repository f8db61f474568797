"""CLI commands for disklens.

This package contains all subcommand implementations.
"""

from disklens.cli.commands import config, delete, scan, volumes

__all__ = ["config", "delete", "scan", "volumes"]
