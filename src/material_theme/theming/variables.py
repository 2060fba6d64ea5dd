"""Conversion of generated schemes into CSS custom-property entries."""

from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple

from material_theme.exceptions import MalformedSchemeError
from material_theme.theming.color_scheme import variable_name

CssVariable = Tuple[str, str]


def _unpack_theme(theme: Any, index: int) -> Tuple[str, Sequence]:
    if isinstance(theme, Mapping):
        if "brightness" not in theme or "colors" not in theme:
            raise MalformedSchemeError(f"Theme #{index} must have 'brightness' and 'colors'")
        brightness, colors = theme["brightness"], theme["colors"]
    elif hasattr(theme, "brightness") and hasattr(theme, "colors"):
        brightness, colors = theme.brightness, theme.colors
    else:
        raise MalformedSchemeError(f"Theme #{index} must have 'brightness' and 'colors', got {theme!r}")

    # Brightness enum or plain "light"/"dark"
    brightness = getattr(brightness, "value", brightness)
    if not isinstance(brightness, str) or not brightness:
        raise MalformedSchemeError(f"Theme #{index} has invalid brightness {brightness!r}")
    if isinstance(colors, (str, bytes)) or not isinstance(colors, Sequence):
        raise MalformedSchemeError(f"Theme #{index} colors must be a sequence of pairs")
    return brightness, colors


def convert_to_variables(scheme: Sequence) -> List[CssVariable]:
    """
    Flatten a scheme into ``(--color-{brightness}-{token}, hex)`` entries.

    Themes are emitted in input order, tokens in their theme order, so a
    complete scheme yields 98 entries: light first, then dark.

    Args:
        scheme: Sequence of ``Theme`` objects or ``{"brightness", "colors"}`` mappings

    Returns:
        List of CSS variable name/value pairs

    Raises:
        MalformedSchemeError: If the scheme is empty or any theme is malformed
    """
    if isinstance(scheme, (str, bytes, Mapping)) or not isinstance(scheme, Sequence):
        raise MalformedSchemeError(f"Scheme must be a sequence of themes, got {type(scheme).__name__}")
    if not scheme:
        raise MalformedSchemeError("Scheme is empty")

    variables = []
    for index, theme in enumerate(scheme):
        brightness, colors = _unpack_theme(theme, index)
        for pair in colors:
            if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
                raise MalformedSchemeError(
                    f"{brightness} theme color entry must be a (token, hex) pair, got {pair!r}"
                )
            token_name, hex_value = pair
            variables.append((variable_name(brightness, token_name), hex_value))
    return variables
