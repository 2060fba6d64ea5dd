"""
Core utilities.

Color conversions and background task helpers with no theming logic.
"""

from .color_utils import (
    hsl_to_hex,
    normalize_seed_color,
    argb_from_hex,
    hex_from_argb,
    is_dark_background,
)
from .background_task import BackgroundTask, BackgroundTaskManager, GenerationCounter

__all__ = [
    "hsl_to_hex",
    "normalize_seed_color",
    "argb_from_hex",
    "hex_from_argb",
    "is_dark_background",
    "BackgroundTask",
    "BackgroundTaskManager",
    "GenerationCounter",
]
