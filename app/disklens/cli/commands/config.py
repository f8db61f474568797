"""Config commands.

Shows, initializes and locates the disklens settings file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from disklens.cli.types import get_config
from disklens.core.config import ConfigError, DiskLensConfig, save_config
from disklens.core.paths import get_config_path
from disklens.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and manage settings.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Settings file selected with --config, or the default one."""
    root = ctx.find_root()
    if isinstance(root.obj, dict) and isinstance(root.obj.get("config_path"), Path):
        return root.obj["config_path"]
    return get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective settings as TOML."""
    config = get_config(ctx)
    console.print(f"[dim]# {_config_path(ctx)}[/dim]")
    console.print(tomli_w.dumps(config.model_dump()), markup=False, highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    path = _config_path(ctx)
    if path.exists() and not force:
        print_info(f"Settings file already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(DiskLensConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Settings written to {saved}")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the settings file location."""
    typer.echo(str(_config_path(ctx)))
