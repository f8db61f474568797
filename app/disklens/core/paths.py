"""XDG-compliant path management for disklens.

disklens persists nothing but its own settings, so only the
configuration directory is resolved here:

- Config: ~/.config/disklens/ (or $XDG_CONFIG_HOME/disklens/)
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "disklens"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/disklens/ (or XDG_CONFIG_HOME/disklens/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/disklens/config.toml.
    """
    return get_config_dir() / "config.toml"


def ensure_config_dir(path: Path | None = None) -> Path:
    """Create the configuration directory if it doesn't exist.

    Args:
        path: Directory to create. Defaults to the XDG config directory.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = path or get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
