"""Shared Rich display functions for scan and deletion output."""

from rich.markup import escape
from rich.table import Table

from disklens.scanning.models import DeletionResult, FileSystemEntry, ScanProgress
from disklens.utils.formatting import console, format_size, print_info, print_success, print_warning


def create_entries_table(entries: list[FileSystemEntry], title: str) -> Table:
    """Create a Rich table of scanned entries.

    Args:
        entries: Entries in display order.
        title: Table title, usually the scan root.

    Returns:
        Rich Table with Name, Type and Size columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", width=5)
    table.add_column("Size", justify="right", style="info")

    for entry in entries:
        if entry.is_directory:
            name = f"[directory]{escape(entry.name)}/[/]"
            kind = "[muted]dir[/]"
        else:
            name = f"[file]{escape(entry.name)}[/]"
            kind = "[muted]file[/]"
        table.add_row(name, kind, format_size(entry.size))

    return table


def print_scan_summary(progress: ScanProgress | None, interrupted: bool, shown: int) -> None:
    """Print the closing line of a scan.

    Args:
        progress: The terminal snapshot, or None if the scan produced none.
        interrupted: Whether the scan was cancelled before the end.
        shown: Number of entries displayed in the table.
    """
    if progress is None:
        print_warning("Scan ended without a final report.")
        return

    summary = f"{progress.files_scanned} entries, {format_size(progress.total_size)} total"
    if interrupted:
        print_warning(f"Scan cancelled at {progress.current_path} ({summary})")
    else:
        console.print(f"\n[dim]Scanned {summary}[/dim]")

    if shown < progress.files_scanned:
        console.print(f"[dim](showing {shown} of {progress.files_scanned})[/dim]")


def create_deletion_table(results: list[DeletionResult]) -> Table:
    """Create a Rich table of deletion outcomes.

    Args:
        results: Outcomes in request order.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if r.failed:
            status = "[error]failed[/]"
            detail = r.error_message or "Unknown error"
        elif r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        else:
            status = "[success]deleted[/]"
            detail = ""
        table.add_row(r.path, status, detail)

    return table


def print_deletion_summary(results: list[DeletionResult]) -> None:
    """Print counts of succeeded and failed deletions."""
    success_count = sum(1 for r in results if r.succeeded)
    fail_count = sum(1 for r in results if r.failed)

    if any(r.dry_run for r in results) and not fail_count:
        print_info(f"Dry-run: {success_count} path(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} path(s) deleted.")
