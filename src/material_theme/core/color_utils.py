"""Hex/HSL/ARGB conversion helpers shared by the theming layer."""

import math
import re
from typing import Tuple

from material_theme.exceptions import InvalidSeedColorError

# Only the six-digit form is accepted as a seed
_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def _round_channel(value: float) -> int:
    # Clamped so extreme inputs stay valid; NaN renders as 0
    scaled = 255 * value
    if not math.isfinite(scaled):
        return 255 if scaled == math.inf else 0
    return max(0, min(255, round_half_up(scaled)))


def hsl_to_hex(hue: float, saturation: float = 100, lightness: float = 50) -> str:
    """
    Convert an HSL triple to a ``#rrggbb`` string.

    Args:
        hue: Hue in degrees, any real value (reduced modulo 360 by the
            periodic ``(n + h/30) mod 12`` term)
        saturation: Saturation percentage
        lightness: Lightness percentage

    Returns:
        str: Lowercase hex color, e.g. ``"#ff0000"``
    """
    l = lightness / 100
    a = saturation * min(l, 1 - l) / 100

    def channel(n: int) -> str:
        k = (n + hue / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return f"{_round_channel(color):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def normalize_seed_color(seed_color: str) -> str:
    """Return ``seed_color`` as uppercase ``#RRGGBB``."""
    if not isinstance(seed_color, str):
        raise InvalidSeedColorError(f"Seed color must be a string, got {type(seed_color).__name__}")

    match = _HEX_COLOR_RE.match(seed_color.strip())
    if match is None:
        raise InvalidSeedColorError(f"Invalid seed color: {seed_color!r}")
    return f"#{match.group(1).upper()}"


def argb_from_hex(hex_color: str) -> int:
    """Parse ``#RRGGBB`` into an opaque 32-bit ARGB integer."""
    normalized = normalize_seed_color(hex_color)
    return 0xFF000000 | int(normalized[1:], 16)


def hex_from_argb(argb: int) -> str:
    """Render the RGB part of an ARGB integer as ``#rrggbb``."""
    r, g, b = rgb_from_argb(argb)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_from_argb(argb: int) -> Tuple[int, int, int]:
    return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def rgb_from_hex(hex_color: str) -> Tuple[int, int, int]:
    """Split ``#rrggbb`` into integer channels (no seed validation)."""
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def is_dark_background(hex_color: str) -> bool:
    """
    Rough brightness test used to pick readable text on a swatch.

    Weighted channel average below 112 counts as dark.
    """
    r, g, b = rgb_from_hex(hex_color)
    return (r * 1.1 + g * 1.3 + b / 1.5) / 3 < 112
