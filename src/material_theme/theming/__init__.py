"""
Theming and styling system.

Material Design 3 scheme generation, CSS variable conversion, live
application to style sinks and stylesheet export.
"""

from .color_scheme import TOKEN_NAMES, Brightness, Scheme, Theme, kebab_case, variable_name
from .engine import ColorEngine, MaterialColorEngine, PaletteParams, PaletteSpec
from .scheme_generator import build_scheme, generate_scheme, palette_params_for_hue
from .variables import convert_to_variables
from .style_sink import (
    StyleSink,
    DictStyleSink,
    QtObjectStyleSink,
    QtApplicationStyleSink,
    apply_color_scheme,
)
from .css_emitter import generate_theme_css, save_theme_css
from .parameters import ThemeParameters, seed_from_hue_position, swatch_text_variable
from .palette_manager import PaletteManager
from .theme_manager import ThemeManager

__all__ = [
    "TOKEN_NAMES",
    "Brightness",
    "Scheme",
    "Theme",
    "kebab_case",
    "variable_name",
    "ColorEngine",
    "MaterialColorEngine",
    "PaletteParams",
    "PaletteSpec",
    "build_scheme",
    "generate_scheme",
    "palette_params_for_hue",
    "convert_to_variables",
    "StyleSink",
    "DictStyleSink",
    "QtObjectStyleSink",
    "QtApplicationStyleSink",
    "apply_color_scheme",
    "generate_theme_css",
    "save_theme_css",
    "ThemeParameters",
    "seed_from_hue_position",
    "swatch_text_variable",
    "PaletteManager",
    "ThemeManager",
]
