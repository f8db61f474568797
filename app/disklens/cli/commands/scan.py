"""Scan command implementation.

Scans the immediate children of a directory on a background thread and
renders the results as they arrive.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from disklens.cli.display import create_entries_table, print_scan_summary
from disklens.cli.types import OutputFormat, SortChoice, get_config
from disklens.scanning.engine import BackgroundScan, ScanEngine
from disklens.scanning.exceptions import ScanPathNotFoundError
from disklens.scanning.models import FileSystemEntry, ScanProgress, event_payload
from disklens.scanning.picker import get_folder_picker
from disklens.utils.formatting import (
    console,
    format_size,
    print_error,
    print_info,
    print_warning,
    sort_entries,
)


def scan_directory(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan."),
    ] = None,
    pick: Annotated[
        bool,
        typer.Option("--pick", "-p", help="Choose the directory in a folder dialog."),
    ] = False,
    sort: Annotated[
        SortChoice | None,
        typer.Option(
            "--sort",
            "-s",
            help="Order results by size: desc, asc or none.",
            case_sensitive=False,
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of entries to display."),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", min=1, max=64, help="Threads sizing subdirectories."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json (one event per line).",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the size of every entry in a directory.

    Press Ctrl-C to cancel; entries found so far are still shown.

    Examples:
        disklens scan ~/Downloads           # Largest entries first
        disklens scan . --sort asc          # Smallest first
        disklens scan --pick                # Choose folder in a dialog
        disklens scan /var --format json    # Stream events as JSON lines
    """
    settings = get_config(ctx).scan

    if path is None:
        if not pick:
            print_error("No directory given. Pass a PATH or use --pick.")
            raise typer.Exit(code=1)
        path = _pick_directory()
        if path is None:
            print_info("No folder selected.")
            return

    engine = ScanEngine(
        progress_interval=settings.progress_interval,
        size_workers=workers or settings.size_workers,
    )
    try:
        background = engine.start(path)
    except ScanPathNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    entries: list[FileSystemEntry] = []
    as_json = output_format == OutputFormat.JSON
    try:
        terminal = _collect(background, entries, as_json, show_status=not as_json)
    except KeyboardInterrupt:
        engine.cancel()
        if not as_json:
            print_warning("Cancelling scan...")
        terminal = _collect(background, entries, as_json, show_status=False)

    if as_json:
        return

    order = sort.value if sort is not None else settings.sort
    display = sort_entries(entries, order)
    if limit:
        display = display[:limit]

    if display:
        console.print(create_entries_table(display, title=background.handle.root))
    else:
        print_info(f"No entries found in {background.handle.root}.")
    print_scan_summary(terminal, background.handle.interrupted, len(display))


def _pick_directory() -> Path | None:
    """Ask the host folder dialog for a directory."""
    picker = get_folder_picker()
    if picker is None or not picker.is_available():
        print_error("No folder dialog is available on this system.")
        raise typer.Exit(code=1)

    chosen = picker.pick_folder()
    return Path(chosen) if chosen else None


def _collect(
    background: BackgroundScan,
    entries: list[FileSystemEntry],
    as_json: bool,
    *,
    show_status: bool,
) -> ScanProgress | None:
    """Drain a running scan into entries.

    Returns:
        The terminal snapshot, or None if the scan ended without one.
    """
    terminal: ScanProgress | None = None

    def handle(event: FileSystemEntry | ScanProgress) -> None:
        nonlocal terminal
        if as_json:
            typer.echo(json.dumps(event_payload(event)))
        if isinstance(event, FileSystemEntry):
            entries.append(event)
        elif event.is_complete:
            terminal = event

    if not show_status:
        for event in background.events():
            handle(event)
        return terminal

    with console.status(f"Scanning {background.handle.root}...") as status:
        for event in background.events():
            handle(event)
            if isinstance(event, ScanProgress) and not event.is_complete:
                status.update(
                    f"Scanning {background.handle.root}... "
                    f"{event.files_scanned} entries, {format_size(event.total_size)}"
                )
    return terminal
