"""Theming exceptions."""


class ThemeError(Exception):
    """Base class for color theme generation errors."""


class InvalidSeedColorError(ThemeError, ValueError):
    """Raised when a seed color cannot be parsed as ``#RRGGBB``."""


class MalformedSchemeError(ThemeError, ValueError):
    """Raised when a scheme does not match the ``[{brightness, colors}, ...]`` shape."""


class ColorEngineError(ThemeError):
    """Raised when the color engine does not produce a requested token."""


class StyleTargetUnavailableError(ThemeError, RuntimeError):
    """Raised when there is no live style target to apply variables to."""
