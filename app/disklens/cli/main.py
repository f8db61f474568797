"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from disklens import __version__
from disklens.cli.commands import config, delete, scan, volumes
from disklens.core.config import ConfigError, load_config
from disklens.core.theme import reload_theme
from disklens.utils.formatting import apply_theme, err_console, print_error

app = typer.Typer(
    name="disklens",
    help="See what takes up space in a directory.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"disklens version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log everything down to DEBUG.
        quiet: Only log errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file to use instead of ~/.config/disklens/config.toml.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """disklens - see what takes up space in a directory.

    Scans a directory one level deep, sizes every subdirectory
    recursively and lets you delete what you no longer need.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if config_path is not None:
        apply_theme(reload_theme(settings.theme))

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = settings
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="scan")(scan.scan_directory)
app.command(name="delete")(delete.delete_paths)
app.command(name="volumes")(volumes.list_volumes)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
