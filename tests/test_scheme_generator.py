"""Tests for scheme generation."""

import asyncio
import re

import pytest

from material_theme.config import ThemeConfig
from material_theme.exceptions import ColorEngineError, InvalidSeedColorError
from material_theme.theming import (
    TOKEN_NAMES,
    Brightness,
    MaterialColorEngine,
    build_scheme,
    convert_to_variables,
    generate_scheme,
    palette_params_for_hue,
)

from conftest import FakeColorEngine

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def test_generate_scheme_is_awaitable(fake_engine):
    scheme = asyncio.run(generate_scheme("#1976D2", 0.0, engine=fake_engine))

    assert len(scheme) == 2
    assert scheme[0].brightness is Brightness.LIGHT
    assert scheme[1].brightness is Brightness.DARK


def test_scheme_is_complete_and_ordered(fake_engine):
    light, dark = build_scheme("#1976D2", 0.0, engine=fake_engine)

    assert light.token_names() == TOKEN_NAMES
    assert dark.token_names() == TOKEN_NAMES
    assert all(HEX_RE.match(value) for _, value in light.colors + dark.colors)


def test_engine_receives_palettes_and_flags(fake_engine):
    build_scheme("#1976d2", 0.35, engine=fake_engine)

    assert [call["is_dark"] for call in fake_engine.calls] == [False, True]
    for call in fake_engine.calls:
        assert call["source_argb"] == 0xFF1976D2
        assert call["contrast_level"] == 0.35

        palettes = call["palettes"]
        assert (palettes.primary.hue, palettes.primary.chroma) == (210.0, 36.0)
        assert (palettes.secondary.hue, palettes.secondary.chroma) == (210.0, 16.0)
        assert (palettes.tertiary.hue, palettes.tertiary.chroma) == (270.0, 24.0)
        assert (palettes.neutral.hue, palettes.neutral.chroma) == (210.0, 6.0)
        assert (palettes.neutral_variant.hue, palettes.neutral_variant.chroma) == (210.0, 8.0)


def test_contrast_is_not_clamped():
    engine = FakeColorEngine()
    build_scheme("#1976D2", 3.5, engine=engine)
    assert {call["contrast_level"] for call in engine.calls} == {3.5}


def test_tertiary_hue_wraps():
    palettes = palette_params_for_hue(330.0)
    assert palettes.tertiary.hue == pytest.approx(30.0)
    assert palettes.primary.hue == 330.0


def test_palette_weights_come_from_config():
    config = ThemeConfig(primary_chroma=48.0, tertiary_hue_offset=90.0)
    palettes = palette_params_for_hue(300.0, config)
    assert palettes.primary.chroma == 48.0
    assert palettes.tertiary.hue == pytest.approx(30.0)


def test_invalid_seed_raises_before_engine(fake_engine):
    with pytest.raises(InvalidSeedColorError):
        asyncio.run(generate_scheme("not-a-color", 0.0, engine=fake_engine))
    assert fake_engine.calls == []


def test_engine_errors_propagate():
    class BrokenEngine(FakeColorEngine):
        def source_hue(self, source_argb):
            raise ArithmeticError("engine failure")

    with pytest.raises(ArithmeticError):
        build_scheme("#1976D2", 0.0, engine=BrokenEngine())


def test_missing_token_raises():
    engine = FakeColorEngine(omit={"surfaceTint"})
    with pytest.raises(ColorEngineError, match="surfaceTint"):
        build_scheme("#1976D2", 0.0, engine=engine)


# --- Material Color Utilities engine ---

def test_material_engine_scheme_is_complete():
    scheme = asyncio.run(generate_scheme("#1976D2", 0.0))

    assert len(scheme) == 2
    for theme in scheme:
        assert len(theme.colors) == 49
        assert theme.token_names() == TOKEN_NAMES
        assert all(HEX_RE.match(value) for _, value in theme.colors)
    assert len(convert_to_variables(scheme)) == 98


def test_material_engine_is_deterministic():
    engine = MaterialColorEngine()
    first = build_scheme("#4CAF50", 0.5, engine=engine)
    second = build_scheme("#4CAF50", 0.5, engine=engine)
    assert first == second


def test_material_engine_light_and_dark_differ():
    light, dark = build_scheme("#E91E63", 0.0)
    assert light.get("surface") != dark.get("surface")
    assert light.get("primary") != dark.get("primary")


def test_material_engine_rejects_invalid_seed():
    with pytest.raises(InvalidSeedColorError):
        asyncio.run(generate_scheme("not-a-color", 0.0))


def test_material_engine_builds_dynamic_scheme():
    from materialyoucolor.scheme.dynamic_scheme import DynamicScheme

    engine = MaterialColorEngine()
    palettes = palette_params_for_hue(engine.source_hue(0xFF1976D2))
    scheme = engine.create_dynamic_scheme(0xFF1976D2, palettes, 0.0, is_dark=True)

    assert isinstance(scheme, DynamicScheme)
    tokens = engine.derive_tokens(0xFF1976D2, palettes, 0.0, True, ["primary", "surface"])
    assert set(tokens) == {"primary", "surface"}
