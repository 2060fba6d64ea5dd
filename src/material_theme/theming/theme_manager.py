"""
High-level theme management.

Coordinates scheme generation, CSS variable application, QPalette updates
and stylesheet export, and keeps regenerations in request order.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from material_theme.config import ThemeConfig, get_theme_config
from material_theme.core.background_task import BackgroundTaskManager, GenerationCounter
from material_theme.core.color_utils import normalize_seed_color
from material_theme.theming.color_scheme import Brightness, Scheme
from material_theme.theming.css_emitter import generate_theme_css, save_theme_css
from material_theme.theming.engine import ColorEngine
from material_theme.theming.palette_manager import PaletteManager
from material_theme.theming.parameters import ThemeParameters
from material_theme.theming.scheme_generator import build_scheme, generate_scheme
from material_theme.theming.style_sink import StyleSink, apply_color_scheme

logger = logging.getLogger(__name__)


class ThemeManager:
    """
    Owns the current scheme and applies new ones to a style sink.

    Every regeneration takes a generation number. When generation finishes
    the scheme is applied only if no newer regeneration was requested in
    the meantime; otherwise it is discarded, so out-of-order completions
    never overwrite a newer theme.
    """

    def __init__(
        self,
        sink: StyleSink,
        engine: Optional[ColorEngine] = None,
        config: Optional[ThemeConfig] = None,
        parameters: Optional[ThemeParameters] = None,
    ):
        self.sink = sink
        self.engine = engine
        self.config = config or get_theme_config()
        self.parameters = parameters or ThemeParameters(config=self.config)
        self.palette_manager = PaletteManager()

        self.scheme: Optional[Scheme] = None
        self.seed_color: Optional[str] = None
        self.contrast_level: Optional[float] = None

        self._generations = GenerationCounter()
        self._task_manager: Optional[BackgroundTaskManager] = None
        self._theme_change_callbacks: List[Callable[[Scheme], None]] = []

    def _resolve_inputs(self, seed_color: Optional[str], contrast_level: Optional[float]):
        if seed_color is None:
            seed_color = self.parameters.seed_color
        if contrast_level is None:
            contrast_level = self.parameters.rounded_contrast
        return seed_color, float(contrast_level)

    async def regenerate(
        self,
        seed_color: Optional[str] = None,
        contrast_level: Optional[float] = None,
    ) -> Optional[Scheme]:
        """
        Generate and apply a scheme.

        Without arguments the seed and contrast come from ``self.parameters``.
        Both regeneration paths share one generation counter, so a thread
        result never overwrites a newer async regeneration or vice versa.

        Returns:
            The applied scheme, or None if a newer regeneration superseded it

        Raises:
            InvalidSeedColorError: If the seed color is invalid (and still current)
        """
        seed_color, contrast_level = self._resolve_inputs(seed_color, contrast_level)
        generation = self._generations.next()

        try:
            scheme = await generate_scheme(
                seed_color, contrast_level, engine=self.engine, config=self.config
            )
        except Exception:
            if not self._generations.is_current(generation):
                logger.debug(f"Ignoring failure of superseded regeneration {generation}")
                return None
            raise

        if not self._generations.is_current(generation):
            logger.warning(
                f"Discarding scheme for {seed_color} (generation {generation}); "
                f"generation {self._generations.latest} is newer"
            )
            return None

        self.apply_scheme(scheme, seed_color, contrast_level)
        return scheme

    def request_regeneration(
        self,
        seed_color: Optional[str] = None,
        contrast_level: Optional[float] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        """
        Generate on a Qt worker thread and apply when done.

        Results of superseded requests are dropped. Requires a running Qt
        event loop to deliver the result.
        """
        seed_color, contrast_level = self._resolve_inputs(seed_color, contrast_level)
        if self._task_manager is None:
            self._task_manager = BackgroundTaskManager(self._generations)

        def on_error_default(error: Exception):
            logger.error(f"Scheme generation for {seed_color} failed: {error}")

        return self._task_manager.run(
            target=build_scheme,
            args=(seed_color, contrast_level),
            kwargs={"engine": self.engine, "config": self.config},
            on_success=lambda scheme: self.apply_scheme(scheme, seed_color, contrast_level),
            on_error=on_error or on_error_default,
        )

    def apply_scheme(self, scheme: Scheme, seed_color: str, contrast_level: float):
        """
        Apply a generated scheme to the sink and notify callbacks.

        Args:
            scheme: Scheme to apply
            seed_color: Seed it was generated from
            contrast_level: Contrast it was generated at
        """
        seed_color = normalize_seed_color(seed_color)
        contrast_level = float(contrast_level)

        apply_color_scheme(scheme, self.sink)
        self.scheme = scheme
        self.seed_color = seed_color
        self.contrast_level = contrast_level

        # Notify callbacks
        for callback in self._theme_change_callbacks:
            try:
                callback(scheme)
            except Exception as e:
                logger.warning(f"Theme change callback failed: {e}")

        logger.info(f"Applied color scheme for seed {self.seed_color} at contrast {self.contrast_level:.2f}")

    def apply_palette(self, brightness: Brightness = Brightness.LIGHT, app=None):
        """Apply one brightness variant of the current scheme as the application QPalette."""
        scheme = self._require_scheme()
        theme = scheme.dark if brightness.is_dark else scheme.light
        self.palette_manager.update_theme(theme)
        self.palette_manager.apply_palette_to_application(app)

    def register_theme_change_callback(self, callback: Callable[[Scheme], None]):
        """
        Register a callback to be called when a new scheme is applied.

        Args:
            callback: Function to call with the new scheme
        """
        self._theme_change_callbacks.append(callback)

    def unregister_theme_change_callback(self, callback: Callable[[Scheme], None]):
        """
        Unregister a theme change callback.

        Args:
            callback: Function to remove from callbacks
        """
        if callback in self._theme_change_callbacks:
            self._theme_change_callbacks.remove(callback)

    def export_css(self) -> str:
        """Stylesheet text for the current scheme."""
        scheme = self._require_scheme()
        return generate_theme_css(scheme, self.seed_color, self.contrast_level, config=self.config)

    def save_css(self, output_path: Union[str, Path]) -> Path:
        """Write the current scheme's stylesheet to ``output_path``."""
        scheme = self._require_scheme()
        return save_theme_css(
            output_path, scheme, self.seed_color, self.contrast_level, config=self.config
        )

    def shutdown(self):
        """Wait for background generations. Call from closeEvent."""
        if self._task_manager is not None:
            self._task_manager.cleanup()

    def _require_scheme(self) -> Scheme:
        if self.scheme is None:
            raise RuntimeError("No color scheme has been generated yet")
        return self.scheme
