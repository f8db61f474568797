"""Rich theme built from the configured colors."""

import logging

from rich.theme import Theme

from disklens.core.config import ConfigError, ThemeColors, load_config

logger = logging.getLogger(__name__)


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: Colors to convert. If None, the defaults are used.

    Returns:
        Rich Theme with one style per color plus convenience styles.
    """
    colors = colors or ThemeColors()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "header": colors.header,
        "border": colors.border,
        "success": colors.success,
        "warning": colors.warning,
        "error": f"bold {colors.error}",
        "info": colors.info,
        "directory": f"bold {colors.directory}",
        "file": colors.file,
        "bold_header": f"bold {colors.header}",
        "dim": colors.muted,
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme for the default config file, cached.

    A broken config file falls back to the default colors; the error
    is reported again when a command loads the config itself.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        try:
            colors = load_config().theme
        except ConfigError as e:
            logger.warning("Using default colors: %s", e)
            colors = ThemeColors()
        _cached_theme = get_rich_theme(colors)
    return _cached_theme


def reload_theme(colors: ThemeColors) -> Theme:
    """Replace the cached theme.

    Args:
        colors: Colors to build the new theme from.

    Returns:
        Newly built Rich Theme instance.
    """
    global _cached_theme
    _cached_theme = get_rich_theme(colors)
    return _cached_theme
