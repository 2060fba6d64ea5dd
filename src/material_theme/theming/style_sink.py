"""
Style sinks and live scheme application.

A style sink is the single mutable surface CSS variables are written to.
The applier never reaches for a global; callers inject the sink, so the same
code drives a running QApplication or an in-memory mapping.
"""

import logging
from typing import Dict, Optional, Protocol, Sequence

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QApplication

from material_theme.exceptions import StyleTargetUnavailableError
from material_theme.theming.variables import convert_to_variables

logger = logging.getLogger(__name__)


class StyleSink(Protocol):
    """Protocol for targets that accept CSS custom properties."""

    def set_property(self, name: str, value: str) -> None:
        ...


class DictStyleSink:
    """In-memory sink; last writer wins per property."""

    def __init__(self):
        self.properties: Dict[str, str] = {}

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def __len__(self) -> int:
        return len(self.properties)


class QtObjectStyleSink:
    """
    Sink writing variables as Qt dynamic properties on a QObject.

    Widgets and stylesheets read them back with ``QObject.property(name)``.
    """

    def __init__(self, target: QObject):
        self.target = target

    def set_property(self, name: str, value: str) -> None:
        # setProperty returns False for dynamic properties, which is expected
        self.target.setProperty(name, value)

    def get_property(self, name: str) -> Optional[str]:
        return self.target.property(name)


class QtApplicationStyleSink(QtObjectStyleSink):
    """Sink bound to the running QApplication, the process-wide style surface."""

    def __init__(self, app: Optional[QApplication] = None):
        if app is None:
            app = QApplication.instance()

        if app is None:
            raise StyleTargetUnavailableError(
                "No QApplication instance found, cannot apply color scheme"
            )
        super().__init__(app)


def apply_color_scheme(scheme: Sequence, sink: StyleSink) -> None:
    """
    Push every CSS variable of ``scheme`` onto ``sink``.

    Variables are written one by one; a failure part-way leaves the earlier
    ones applied.

    Raises:
        MalformedSchemeError: If the scheme is malformed (nothing is written)
    """
    variables = convert_to_variables(scheme)
    for name, value in variables:
        sink.set_property(name, value)

    logger.debug(f"Applied {len(variables)} color variables to {type(sink).__name__}")
