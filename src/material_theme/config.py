"""Base configuration for color theme generation.

Provides hooks for applications to tune palette weights, initial slider
values and stylesheet export metadata.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class ThemeConfig:
    """Configuration for scheme generation and export.

    Attributes:
        primary_chroma: Chroma of the primary tonal palette
        secondary_chroma: Chroma of the secondary tonal palette
        tertiary_chroma: Chroma of the tertiary tonal palette
        tertiary_hue_offset: Degrees added to the seed hue for the tertiary palette
        neutral_chroma: Chroma of the neutral palette
        neutral_variant_chroma: Chroma of the neutral variant palette
        initial_hue: Initial hue slider position in [0, 1]
        initial_contrast: Initial contrast level
        generator_name: Name written into exported stylesheet headers
        css_filename: Default file name for exported stylesheets
        light_link_color: Color-scale variable aliased by ``--color-light-link``
        dark_link_color: Color-scale variable aliased by ``--color-dark-link``
    """

    primary_chroma: float = 36.0
    secondary_chroma: float = 16.0
    tertiary_chroma: float = 24.0
    tertiary_hue_offset: float = 60.0
    neutral_chroma: float = 6.0
    neutral_variant_chroma: float = 8.0
    initial_hue: float = 0.4
    initial_contrast: float = 0.0
    generator_name: str = "pyqt-material-theme"
    css_filename: str = "theme.css"
    light_link_color: str = "--color-blue-700"
    dark_link_color: str = "--color-blue-300"

    @classmethod
    def from_json(cls, config_path: Union[str, Path]) -> "ThemeConfig":
        """
        Load configuration from a JSON file.

        Unknown keys are ignored so older files keep loading.

        Args:
            config_path: Path to JSON config file

        Returns:
            ThemeConfig: Loaded configuration
        """
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        known = {f.name for f in fields(cls)}
        ignored = sorted(set(data) - known)
        if ignored:
            logger.warning(f"Ignoring unknown theme config keys in {config_path}: {ignored}")

        return cls(**{k: v for k, v in data.items() if k in known})

    def save_to_json(self, config_path: Union[str, Path]) -> None:
        """Save configuration to a JSON file."""
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, sort_keys=True)

        logger.info(f"Theme config saved to {config_path}")


# Global config instance (set by application)
_theme_config: Optional[ThemeConfig] = None


def set_theme_config(config: Optional[ThemeConfig]) -> None:
    """Set the global theme configuration (``None`` restores defaults).

    Args:
        config: ThemeConfig instance
    """
    global _theme_config
    _theme_config = config


def get_theme_config() -> ThemeConfig:
    """Get the current theme configuration.

    Returns:
        Current ThemeConfig or default if not set
    """
    if _theme_config is None:
        return ThemeConfig()
    return _theme_config
