"""
QPalette Manager for generated Material themes.

Maps the tokens of one brightness variant onto Qt's palette roles so plain
widgets follow the generated scheme without any stylesheet.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from material_theme.exceptions import StyleTargetUnavailableError
from material_theme.theming.color_scheme import Theme

logger = logging.getLogger(__name__)

# Palette role -> Material token (active/inactive groups)
ROLE_TOKENS: Dict[QPalette.ColorRole, str] = {
    QPalette.ColorRole.Window: "surface",
    QPalette.ColorRole.WindowText: "onSurface",
    QPalette.ColorRole.Base: "surfaceContainerLowest",
    QPalette.ColorRole.AlternateBase: "surfaceContainerLow",
    QPalette.ColorRole.Text: "onSurface",
    QPalette.ColorRole.PlaceholderText: "onSurfaceVariant",
    QPalette.ColorRole.Button: "surfaceContainerHigh",
    QPalette.ColorRole.ButtonText: "primary",
    QPalette.ColorRole.BrightText: "error",
    QPalette.ColorRole.Highlight: "primary",
    QPalette.ColorRole.HighlightedText: "onPrimary",
    QPalette.ColorRole.ToolTipBase: "inverseSurface",
    QPalette.ColorRole.ToolTipText: "inverseOnSurface",
    QPalette.ColorRole.Link: "primary",
    QPalette.ColorRole.LinkVisited: "tertiary",
    QPalette.ColorRole.Light: "surfaceBright",
    QPalette.ColorRole.Midlight: "surfaceContainerHighest",
    QPalette.ColorRole.Mid: "outline",
    QPalette.ColorRole.Dark: "surfaceDim",
    QPalette.ColorRole.Shadow: "shadow",
}

# Disabled group overrides
DISABLED_ROLE_TOKENS: Dict[QPalette.ColorRole, str] = {
    QPalette.ColorRole.WindowText: "outline",
    QPalette.ColorRole.Text: "outline",
    QPalette.ColorRole.ButtonText: "outline",
    QPalette.ColorRole.Button: "surfaceContainerLow",
}


class PaletteManager:
    """
    Manages QPalette integration with a generated Theme.

    Provides methods to turn a theme into a QPalette and to apply it to
    (and restore it from) the running application.
    """

    def __init__(self, theme: Optional[Theme] = None):
        self.theme = theme
        self._original_palette = None

    def update_theme(self, theme: Theme):
        """Update the theme used for palette generation."""
        self.theme = theme

    def create_palette(self) -> QPalette:
        """
        Create a QPalette from the current theme.

        Returns:
            QPalette: Configured palette with theme colors
        """
        if self.theme is None:
            raise ValueError("PaletteManager has no theme to build a palette from")

        colors = self.theme.as_dict()
        palette = QPalette()

        for role, token in ROLE_TOKENS.items():
            palette.setColor(role, QColor(colors[token]))

        for role, token in DISABLED_ROLE_TOKENS.items():
            palette.setColor(QPalette.ColorGroup.Disabled, role, QColor(colors[token]))

        return palette

    def apply_palette_to_application(self, app: Optional[QApplication] = None):
        """
        Apply the theme palette to the entire application.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)

        Raises:
            StyleTargetUnavailableError: If there is no application instance
        """
        if app is None:
            app = QApplication.instance()

        if app is None:
            raise StyleTargetUnavailableError("No QApplication instance found, cannot apply palette")

        # Store original palette for restoration
        if self._original_palette is None:
            self._original_palette = app.palette()

        app.setPalette(self.create_palette())
        logger.debug(f"Applied {self.theme.brightness.value} theme palette to application")

    def restore_original_palette(self, app: Optional[QApplication] = None):
        """
        Restore the original application palette.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
        """
        if app is None:
            app = QApplication.instance()

        if app is None or self._original_palette is None:
            logger.warning("Cannot restore original palette")
            return

        app.setPalette(self._original_palette)
        self._original_palette = None
        logger.debug("Restored original application palette")

    def get_palette_info(self) -> Dict[str, str]:
        """
        Get the hex color behind each active palette role.

        Returns:
            dict: Role name to hex color
        """
        palette = self.create_palette()
        return {
            role.name: palette.color(role).name()
            for role in ROLE_TOKENS
        }
