"""Volumes command implementation."""

import json
from typing import Annotated

import typer
from rich.table import Table

from disklens.cli.types import OutputFormat
from disklens.scanning.volumes import get_disk_enumerator
from disklens.utils.formatting import console, print_warning


def list_volumes(
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
    """List the volumes and mount points available to scan."""
    enumerator = get_disk_enumerator()
    if not enumerator.is_available():
        print_warning("Volume listing is not supported on this platform.")

    volumes = enumerator.list_volumes()

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(volumes))
        return

    table = Table(
        title="Volumes",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Mount Point", no_wrap=True)
    for volume in volumes:
        table.add_row(volume)
    console.print(table)
