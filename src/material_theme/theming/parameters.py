"""Slider-driven theme parameters (hue position and contrast)."""

from dataclasses import dataclass, field
from typing import Optional

from material_theme.config import ThemeConfig, get_theme_config
from material_theme.core.color_utils import (
    hsl_to_hex,
    is_dark_background,
    normalize_seed_color,
    round_half_up,
)


def seed_from_hue_position(position: float) -> str:
    """Uppercase seed color for a hue slider position in [0, 1]."""
    return normalize_seed_color(hsl_to_hex(round_half_up(position * 360)))


def swatch_text_variable(background_hex: str) -> str:
    """Form text variable readable on ``background_hex``."""
    if is_dark_background(background_hex):
        return "--color-light-form"
    return "--color-dark-form"


@dataclass
class ThemeParameters:
    """
    User-adjustable inputs of the theme generator.

    ``hue`` is a slider position in [0, 1] mapped onto 0-360 degrees;
    ``contrast`` is the raw contrast slider value.
    """

    hue: Optional[float] = None
    contrast: Optional[float] = None
    config: ThemeConfig = field(default_factory=get_theme_config, repr=False, compare=False)

    def __post_init__(self):
        if self.hue is None:
            self.hue = self.config.initial_hue
        if self.contrast is None:
            self.contrast = self.config.initial_contrast

    @property
    def hue_degrees(self) -> int:
        return round_half_up(self.hue * 360)

    @property
    def seed_color(self) -> str:
        return seed_from_hue_position(self.hue)

    @property
    def rounded_contrast(self) -> float:
        return round_half_up(self.contrast * 100) / 100

    @property
    def changed(self) -> bool:
        """True when either slider differs from its initial value."""
        return self.hue != self.config.initial_hue or self.contrast != self.config.initial_contrast

    def reset(self) -> None:
        self.hue = self.config.initial_hue
        self.contrast = self.config.initial_contrast
