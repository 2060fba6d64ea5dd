"""
Scheme generation from a seed color.

Derives the five tonal palettes from the seed hue, asks the color engine for
every token in both brightness variants and packs the hex values into a
``Scheme``.
"""

import asyncio
import logging
from typing import Optional

from material_theme.config import ThemeConfig, get_theme_config
from material_theme.core.color_utils import argb_from_hex, hex_from_argb
from material_theme.exceptions import ColorEngineError
from material_theme.theming.color_scheme import TOKEN_NAMES, Brightness, Scheme, Theme
from material_theme.theming.engine import ColorEngine, MaterialColorEngine, PaletteParams, PaletteSpec

logger = logging.getLogger(__name__)

_default_engine: Optional[ColorEngine] = None


def get_default_engine() -> ColorEngine:
    """Return the shared ``MaterialColorEngine``, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = MaterialColorEngine()
    return _default_engine


def palette_params_for_hue(hue: float, config: Optional[ThemeConfig] = None) -> PaletteParams:
    """
    Build tonal palette parameters for a seed hue.

    The tertiary hue is offset from the seed and normalized into [0, 360).
    """
    cfg = config or get_theme_config()
    return PaletteParams(
        primary=PaletteSpec(hue, cfg.primary_chroma),
        secondary=PaletteSpec(hue, cfg.secondary_chroma),
        tertiary=PaletteSpec((hue + cfg.tertiary_hue_offset) % 360.0, cfg.tertiary_chroma),
        neutral=PaletteSpec(hue, cfg.neutral_chroma),
        neutral_variant=PaletteSpec(hue, cfg.neutral_variant_chroma),
    )


def _build_theme(
    engine: ColorEngine,
    source_argb: int,
    palettes: PaletteParams,
    contrast_level: float,
    brightness: Brightness,
) -> Theme:
    tokens = engine.derive_tokens(
        source_argb, palettes, contrast_level, brightness.is_dark, TOKEN_NAMES
    )

    missing = [name for name in TOKEN_NAMES if name not in tokens]
    if missing:
        raise ColorEngineError(
            f"Color engine returned no value for {len(missing)} {brightness.value} token(s): {missing}"
        )

    return Theme(
        brightness=brightness,
        colors=tuple((name, hex_from_argb(tokens[name])) for name in TOKEN_NAMES),
    )


def build_scheme(
    seed_color: str,
    contrast_level: float,
    engine: Optional[ColorEngine] = None,
    config: Optional[ThemeConfig] = None,
) -> Scheme:
    """
    Generate light and dark themes from a seed color.

    Args:
        seed_color: ``#RRGGBB`` seed
        contrast_level: Contrast level, 0.0 is standard; passed to the engine as-is
        engine: Color engine (defaults to ``MaterialColorEngine``)
        config: Palette weights (defaults to the global ``ThemeConfig``)

    Returns:
        Scheme: ``(light, dark)`` themes with all tokens in fixed order

    Raises:
        InvalidSeedColorError: If ``seed_color`` is not a valid hex color
        ColorEngineError: If the engine omits a token
    """
    engine = engine or get_default_engine()
    source_argb = argb_from_hex(seed_color)
    palettes = palette_params_for_hue(engine.source_hue(source_argb), config)

    logger.debug(f"Generating scheme for seed {seed_color} at contrast {contrast_level}")

    return Scheme(
        light=_build_theme(engine, source_argb, palettes, contrast_level, Brightness.LIGHT),
        dark=_build_theme(engine, source_argb, palettes, contrast_level, Brightness.DARK),
    )


async def generate_scheme(
    seed_color: str,
    contrast_level: float,
    engine: Optional[ColorEngine] = None,
    config: Optional[ThemeConfig] = None,
) -> Scheme:
    """Awaitable ``build_scheme``; yields to the event loop once before computing."""
    await asyncio.sleep(0)
    return build_scheme(seed_color, contrast_level, engine=engine, config=config)
