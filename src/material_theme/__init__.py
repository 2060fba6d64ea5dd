"""
pyqt-material-theme: Material Design 3 color themes for PyQt6 applications.

Generates light and dark Material color schemes from a single seed color
and contrast level, then applies them as CSS custom properties or exports
them as a Tailwind CSS ``@theme`` stylesheet.

Architecture:
- Core: color conversions (HSL, hex, ARGB) and background task helpers
- Theming: scheme generation, variable conversion, style sinks, export

Key Features:
- 49 Material tokens per brightness variant
- Pluggable color engine (Material Color Utilities by default)
- Injected style sinks (QApplication, in-memory)
- Latest-request-wins regeneration
"""

__version__ = "0.1.0"

from material_theme.core.color_utils import hsl_to_hex
from material_theme.exceptions import (
    ThemeError,
    InvalidSeedColorError,
    MalformedSchemeError,
    ColorEngineError,
    StyleTargetUnavailableError,
)
from material_theme.theming import (
    convert_to_variables,
    apply_color_scheme,
    generate_scheme,
    generate_theme_css,
)

__all__ = [
    "__version__",
    "hsl_to_hex",
    "generate_scheme",
    "convert_to_variables",
    "apply_color_scheme",
    "generate_theme_css",
    "ThemeError",
    "InvalidSeedColorError",
    "MalformedSchemeError",
    "ColorEngineError",
    "StyleTargetUnavailableError",
]
