"""pytest configuration and fixtures for material-theme tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from material_theme.config import set_theme_config  # noqa: E402


class FakeColorEngine:
    """Deterministic engine: token values depend only on token index and brightness."""

    def __init__(self, hue=210.0, omit=()):
        self.hue = hue
        self.omit = set(omit)
        self.calls = []

    def source_hue(self, source_argb):
        return self.hue

    def derive_tokens(self, source_argb, palettes, contrast_level, is_dark, token_names):
        self.calls.append(
            {
                "source_argb": source_argb,
                "palettes": palettes,
                "contrast_level": contrast_level,
                "is_dark": is_dark,
            }
        )
        base = 0x800000 if is_dark else 0x100000
        return {
            name: 0xFF000000 | (base + index * 0x010203)
            for index, name in enumerate(token_names)
            if name not in self.omit
        }


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def fake_engine():
    return FakeColorEngine()


@pytest.fixture(autouse=True)
def default_theme_config():
    """Each test starts from the default global config."""
    set_theme_config(None)
    yield
    set_theme_config(None)
