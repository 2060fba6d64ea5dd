"""
Material Design 3 color scheme model.

Fixed token vocabulary, brightness variants and the immutable Theme/Scheme
records produced by the scheme generator and consumed by the variable
converter, the style sinks and the stylesheet emitter.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

# Order is significant: generated themes list their tokens in exactly this order
TOKEN_NAMES: Tuple[str, ...] = (
    "primary",
    "surfaceTint",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
    "background",
    "onBackground",
    "surface",
    "onSurface",
    "surfaceVariant",
    "onSurfaceVariant",
    "outline",
    "outlineVariant",
    "shadow",
    "scrim",
    "inverseSurface",
    "inverseOnSurface",
    "inversePrimary",
    "primaryFixed",
    "onPrimaryFixed",
    "primaryFixedDim",
    "onPrimaryFixedVariant",
    "secondaryFixed",
    "onSecondaryFixed",
    "secondaryFixedDim",
    "onSecondaryFixedVariant",
    "tertiaryFixed",
    "onTertiaryFixed",
    "tertiaryFixedDim",
    "onTertiaryFixedVariant",
    "surfaceDim",
    "surfaceBright",
    "surfaceContainerLowest",
    "surfaceContainerLow",
    "surfaceContainer",
    "surfaceContainerHigh",
    "surfaceContainerHighest",
)

_CAMEL_BOUNDARY_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]")

ColorTokenPair = Tuple[str, str]


class Brightness(Enum):
    """Brightness variant of a theme."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def is_dark(self) -> bool:
        return self is Brightness.DARK


def kebab_case(token_name: str) -> str:
    """
    Convert a camelCase token name to kebab-case.

    ``onPrimaryContainer`` -> ``on-primary-container``. Already kebab-cased
    names are returned unchanged.
    """
    return _CAMEL_BOUNDARY_RE.sub(
        lambda m: ("-" if m.start() else "") + m.group().lower(),
        token_name,
    )


def variable_name(brightness: str, token_name: str) -> str:
    """CSS custom property name for a token, e.g. ``--color-dark-on-surface``."""
    return f"--color-{brightness}-{kebab_case(token_name)}"


@dataclass(frozen=True)
class Theme:
    """
    Token values for a single brightness variant.

    Created fresh on every generation and never mutated afterwards.
    """

    brightness: Brightness
    colors: Tuple[ColorTokenPair, ...]

    def get(self, token_name: str, default: Optional[str] = None) -> Optional[str]:
        for name, hex_value in self.colors:
            if name == token_name:
                return hex_value
        return default

    def as_dict(self) -> Dict[str, str]:
        return dict(self.colors)

    def token_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.colors)


class Scheme(NamedTuple):
    """Light and dark themes, always in that order."""

    light: Theme
    dark: Theme
