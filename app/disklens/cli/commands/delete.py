"""Delete command implementation.

Removes files and directory trees, reporting each path's outcome.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape

from disklens.cli.display import create_deletion_table, print_deletion_summary
from disklens.cli.types import OutputFormat
from disklens.scanning.deletion import DeletionService
from disklens.utils.formatting import console, print_info


def delete_paths(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to delete."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Delete files and directories (directories recursively).

    Every path is attempted even if an earlier one fails. Exits with
    code 1 if any deletion failed.

    Examples:
        disklens delete ~/Downloads/old.iso
        disklens delete build dist --dry-run
        disklens delete node_modules -y
    """
    if not dry_run and not yes:
        for path in paths:
            console.print(f"  [bold]{escape(path)}[/]")
        confirmed = typer.confirm(
            f"\nPermanently delete {len(paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = DeletionService(dry_run=dry_run).delete(paths)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([r.to_payload() for r in results]))
    else:
        console.print(create_deletion_table(results))
        print_deletion_summary(results)

    if any(r.failed for r in results):
        raise typer.Exit(code=1)
