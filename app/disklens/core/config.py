"""disklens settings.

Settings are read from ~/.config/disklens/config.toml. A missing file
is not an error: every setting has a default. Command line options
override whatever the file says.

Example file::

    [scan]
    progress_interval = 20
    size_workers = 4
    sort = "desc"

    [theme]
    directory = "#0e8ac8"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from disklens.core.paths import ensure_config_dir, get_config_path
from disklens.scanning.engine import DEFAULT_PROGRESS_INTERVAL
from disklens.scanning.exceptions import DiskLensError

logger = logging.getLogger(__name__)

SortOrder = Literal["desc", "asc", "none"]


class ScanSettings(BaseModel):
    """Scan engine settings.

    Attributes:
        progress_interval: Entries between progress snapshots.
        size_workers: Threads sizing subdirectories concurrently.
        sort: Display order of scan results by size.
    """

    model_config = ConfigDict(extra="forbid")

    progress_interval: Annotated[
        int,
        Field(ge=1, le=10000, description="Entries between progress snapshots"),
    ] = DEFAULT_PROGRESS_INTERVAL
    size_workers: Annotated[
        int,
        Field(ge=1, le=64, description="Threads sizing subdirectories"),
    ] = 1
    sort: Annotated[
        SortOrder,
        Field(description="Result order by size"),
    ] = "desc"


class ThemeColors(BaseModel):
    """Color configuration for disklens output.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    directory: str = "#0e8ac8"
    file: str = "#dfe6e9"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


class DiskLensConfig(BaseModel):
    """Top-level settings file model."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanSettings = Field(default_factory=ScanSettings)
    theme: ThemeColors = Field(default_factory=ThemeColors)


class ConfigError(DiskLensError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the settings file is not valid TOML."""


def load_config(path: Path | None = None) -> DiskLensConfig:
    """Load settings from a TOML file.

    Args:
        path: Settings file. If None, uses the default config path.

    Returns:
        Validated DiskLensConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or fails validation.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path)
        return DiskLensConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return DiskLensConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: DiskLensConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory first
    and moved into place with os.replace().

    Args:
        config: Settings to save.
        path: Target file. If None, uses the default config path.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        ensure_config_dir(config_path.parent)
    except RuntimeError as e:
        raise ConfigError(str(e)) from e

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(), f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    logger.info("Saved config to %s", config_path)
    return config_path
