"""Tests for theming system."""

import re

import pytest

from material_theme.exceptions import MalformedSchemeError, StyleTargetUnavailableError
from material_theme.theming import (
    TOKEN_NAMES,
    Brightness,
    DictStyleSink,
    PaletteManager,
    QtApplicationStyleSink,
    Scheme,
    Theme,
    apply_color_scheme,
    build_scheme,
    convert_to_variables,
    kebab_case,
)
from material_theme.theming import style_sink as style_sink_module


@pytest.fixture
def scheme(fake_engine):
    return build_scheme("#1976D2", 0.0, engine=fake_engine)


def test_token_names_are_fixed():
    assert len(TOKEN_NAMES) == 49
    assert len(set(TOKEN_NAMES)) == 49
    assert TOKEN_NAMES[0] == "primary"
    assert TOKEN_NAMES[-1] == "surfaceContainerHighest"


@pytest.mark.parametrize(
    "token, expected",
    [
        ("primary", "primary"),
        ("onPrimaryContainer", "on-primary-container"),
        ("surfaceContainerHighest", "surface-container-highest"),
        ("onPrimaryFixedVariant", "on-primary-fixed-variant"),
        ("someURLValue", "some-url-value"),
        ("Primary", "primary"),
    ],
)
def test_kebab_case(token, expected):
    assert kebab_case(token) == expected


def test_kebab_case_is_idempotent():
    for token in TOKEN_NAMES:
        once = kebab_case(token)
        assert kebab_case(once) == once


def test_theme_lookup(scheme):
    light = scheme.light
    assert light.brightness is Brightness.LIGHT
    assert light.get("primary") == light.colors[0][1]
    assert light.get("missing") is None
    assert light.as_dict()["scrim"] == light.get("scrim")
    assert light.token_names() == TOKEN_NAMES


def test_convert_single_token():
    result = convert_to_variables(
        [{"brightness": "light", "colors": [["onPrimaryContainer", "#abcdef"]]}]
    )
    assert result == [("--color-light-on-primary-container", "#abcdef")]


def test_convert_full_scheme(scheme):
    variables = convert_to_variables(scheme)
    assert len(variables) == 98

    names = [name for name, _ in variables]
    assert names[0] == "--color-light-primary"
    assert names[48] == "--color-light-surface-container-highest"
    assert names[49] == "--color-dark-primary"
    assert names[-1] == "--color-dark-surface-container-highest"

    hex_re = re.compile(r"^#[0-9a-fA-F]{6}$")
    assert all(hex_re.match(value) for _, value in variables)


def test_convert_accepts_enum_and_tuple_colors():
    theme = Theme(brightness=Brightness.DARK, colors=(("surfaceDim", "#101010"),))
    assert convert_to_variables([theme]) == [("--color-dark-surface-dim", "#101010")]


def test_convert_preserves_input_order():
    scheme = [
        {"brightness": "dark", "colors": [("primary", "#000001")]},
        {"brightness": "light", "colors": [("primary", "#000002")]},
    ]
    assert [name for name, _ in convert_to_variables(scheme)] == [
        "--color-dark-primary",
        "--color-light-primary",
    ]


@pytest.mark.parametrize(
    "bad_scheme",
    [
        [],
        (),
        None,
        "light",
        {"brightness": "light", "colors": []},
        [{"brightness": "light"}],
        [{"colors": []}],
        [{"brightness": None, "colors": []}],
        [{"brightness": "light", "colors": "primary"}],
        [{"brightness": "light", "colors": [["primary"]]}],
        [{"brightness": "light", "colors": [["primary", "#000000", "extra"]]}],
        [{"brightness": "light", "colors": ["ab"]}],
        [42],
    ],
)
def test_convert_rejects_malformed(bad_scheme):
    with pytest.raises(MalformedSchemeError):
        convert_to_variables(bad_scheme)


def test_apply_color_scheme_to_dict_sink(scheme):
    sink = DictStyleSink()
    apply_color_scheme(scheme, sink)

    assert len(sink) == 98
    assert sink.get_property("--color-dark-on-surface") == scheme.dark.get("onSurface")


def test_apply_color_scheme_last_writer_wins():
    sink = DictStyleSink()
    apply_color_scheme([{"brightness": "light", "colors": [("primary", "#111111")]}], sink)
    apply_color_scheme([{"brightness": "light", "colors": [("primary", "#222222")]}], sink)
    assert sink.get_property("--color-light-primary") == "#222222"


def test_apply_color_scheme_without_rollback(scheme):
    class FailingSink:
        def __init__(self):
            self.written = []

        def set_property(self, name, value):
            if len(self.written) == 10:
                raise RuntimeError("style target went away")
            self.written.append(name)

    sink = FailingSink()
    with pytest.raises(RuntimeError):
        apply_color_scheme(scheme, sink)
    assert len(sink.written) == 10


def test_apply_malformed_scheme_writes_nothing():
    sink = DictStyleSink()
    with pytest.raises(MalformedSchemeError):
        apply_color_scheme([{"brightness": "light", "colors": [("primary", "#111111")]}, {}], sink)
    assert len(sink) == 0


def test_qt_application_sink(qapp, scheme):
    sink = QtApplicationStyleSink(qapp)
    apply_color_scheme(scheme, sink)

    assert qapp.property("--color-light-primary") == scheme.light.get("primary")
    assert sink.get_property("--color-dark-scrim") == scheme.dark.get("scrim")


def test_qt_application_sink_requires_application(monkeypatch):
    class NoApplication:
        @staticmethod
        def instance():
            return None

    monkeypatch.setattr(style_sink_module, "QApplication", NoApplication)
    with pytest.raises(StyleTargetUnavailableError):
        QtApplicationStyleSink()


def test_palette_manager(qapp, scheme):
    from PyQt6.QtGui import QPalette

    manager = PaletteManager(scheme.dark)
    palette = manager.create_palette()

    assert palette.color(QPalette.ColorRole.Window).name() == scheme.dark.get("surface")
    assert palette.color(QPalette.ColorRole.Highlight).name() == scheme.dark.get("primary")
    assert (
        palette.color(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text).name()
        == scheme.dark.get("outline")
    )
    assert manager.get_palette_info()["WindowText"] == scheme.dark.get("onSurface")


def test_palette_manager_apply_and_restore(qapp, scheme):
    from PyQt6.QtGui import QPalette

    original = qapp.palette().color(QPalette.ColorRole.Window).name()
    manager = PaletteManager(scheme.light)

    manager.apply_palette_to_application(qapp)
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == scheme.light.get("surface")

    manager.restore_original_palette(qapp)
    assert qapp.palette().color(QPalette.ColorRole.Window).name() == original


def test_palette_manager_without_theme():
    with pytest.raises(ValueError):
        PaletteManager().create_palette()


def test_scheme_is_light_then_dark(scheme):
    assert isinstance(scheme, Scheme)
    light, dark = scheme
    assert light.brightness is Brightness.LIGHT
    assert dark.brightness is Brightness.DARK
