"""Rich console formatting utilities.

Provides the shared consoles, message helpers and the human-readable
size and ordering helpers used by the command line output.
"""

import math
import sys
from collections.abc import Iterable

from rich.console import Console
from rich.theme import Theme

from disklens.core.theme import get_theme
from disklens.scanning.models import FileSystemEntry

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def apply_theme(theme: Theme) -> None:
    """Switch both shared consoles to another theme."""
    console.push_theme(theme)
    err_console.push_theme(theme)


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string.

    Uses 1024-based units and at most two decimals, dropping trailing
    zeros: ``1536`` becomes ``"1.5 KB"``.

    Args:
        size_bytes: Number of bytes.

    Returns:
        Formatted size, ``"0 Bytes"`` for zero and ``"N/A"`` for
        negative input.
    """
    if size_bytes < 0:
        return "N/A"
    if size_bytes == 0:
        return "0 Bytes"

    exponent = min(int(math.log(size_bytes, 1024)), len(_SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if exponent + 1 < len(_SIZE_UNITS) and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size_bytes / 1024**exponent, 2)
    return f"{value:g} {_SIZE_UNITS[exponent]}"


def sort_entries(entries: Iterable[FileSystemEntry], order: str = "desc") -> list[FileSystemEntry]:
    """Order entries by size.

    Args:
        entries: Entries to order. Not modified.
        order: "desc" for largest first, "asc" for smallest first, or
            "none" to keep the given order.

    Returns:
        New list of entries.

    Raises:
        ValueError: If order is not one of the accepted values.
    """
    if order == "none":
        return list(entries)
    if order not in ("asc", "desc"):
        msg = f"Unknown sort order: {order}"
        raise ValueError(msg)
    return sorted(entries, key=lambda e: e.size, reverse=order == "desc")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
