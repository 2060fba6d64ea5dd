"""
Color-science engine boundary.

The scheme generator only needs two things from the engine: the perceptual
hue of a seed color and, for a set of tonal palette parameters, the ARGB
value of every requested token. Anything satisfying ``ColorEngine`` can be
plugged in; ``MaterialColorEngine`` wraps the ``materialyoucolor`` library.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Protocol

from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette
from materialyoucolor.scheme.dynamic_scheme import DynamicScheme, DynamicSchemeOptions
from materialyoucolor.scheme.variant import Variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteSpec:
    """Hue/chroma pair describing one tonal palette."""

    hue: float
    chroma: float


@dataclass(frozen=True)
class PaletteParams:
    """Tonal palette parameters for one dynamic scheme."""

    primary: PaletteSpec
    secondary: PaletteSpec
    tertiary: PaletteSpec
    neutral: PaletteSpec
    neutral_variant: PaletteSpec


class ColorEngine(Protocol):
    """Protocol for color-science backends."""

    def source_hue(self, source_argb: int) -> float:
        """Return the perceptual hue (degrees) of an ARGB color."""
        ...

    def derive_tokens(
        self,
        source_argb: int,
        palettes: PaletteParams,
        contrast_level: float,
        is_dark: bool,
        token_names: Iterable[str],
    ) -> Mapping[str, int]:
        """Return the ARGB value of every requested token."""
        ...


class MaterialColorEngine:
    """``ColorEngine`` backed by Material Color Utilities (materialyoucolor)."""

    def __init__(self, variant: Variant = Variant.TONAL_SPOT):
        self.variant = variant

    def source_hue(self, source_argb: int) -> float:
        return Hct.from_int(source_argb).hue

    def create_dynamic_scheme(
        self,
        source_argb: int,
        palettes: PaletteParams,
        contrast_level: float,
        is_dark: bool,
    ) -> DynamicScheme:
        def palette(spec: PaletteSpec) -> TonalPalette:
            return TonalPalette.from_hue_and_chroma(spec.hue, spec.chroma)

        return DynamicScheme(
            DynamicSchemeOptions(
                source_color_hct=Hct.from_int(source_argb),
                variant=self.variant,
                contrast_level=contrast_level,
                is_dark=is_dark,
                primary_palette=palette(palettes.primary),
                secondary_palette=palette(palettes.secondary),
                tertiary_palette=palette(palettes.tertiary),
                neutral_palette=palette(palettes.neutral),
                neutral_variant_palette=palette(palettes.neutral_variant),
            )
        )

    def derive_tokens(
        self,
        source_argb: int,
        palettes: PaletteParams,
        contrast_level: float,
        is_dark: bool,
        token_names: Iterable[str],
    ) -> Dict[str, int]:
        scheme = self.create_dynamic_scheme(source_argb, palettes, contrast_level, is_dark)

        tokens = {}
        for name in token_names:
            dynamic_color = getattr(MaterialDynamicColors, name, None)
            if dynamic_color is None:
                # Leave it out; the generator reports missing tokens
                logger.debug(f"MaterialDynamicColors has no token {name!r}")
                continue
            tokens[name] = dynamic_color.get_hct(scheme).to_int()
        return tokens
