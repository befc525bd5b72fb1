"""Tests for chart_core/lang.py - Label formatting."""

from chart_core import lang
from chart_core.lang import DEFAULT_LANG, LangFormatter


class TestLangFormatter:
    """Tests for LangFormatter."""

    def test_default_labels(self):
        formatter = LangFormatter()

        assert formatter.format(lang.RESET_ZOOM_BUTTON) == "Reset zoom"
        assert formatter.format(lang.MAP_ZOOM_IN) == "Zoom chart"
        assert formatter.format(lang.MAP_ZOOM_OUT) == "Zoom out chart"

    def test_drill_up_uses_button_text(self):
        formatter = LangFormatter()

        label = formatter.format(lang.DRILL_UP_BUTTON, {"button_text": "Back to Europe"})

        assert label == "Back to Europe"

    def test_missing_placeholder_renders_empty(self):
        formatter = LangFormatter()

        assert formatter.format(lang.DRILL_UP_BUTTON, {}) == ""

    def test_unknown_key_falls_back_to_key(self):
        formatter = LangFormatter()

        assert formatter.format("accessibility.unknown") == "accessibility.unknown"

    def test_custom_templates_override_defaults(self):
        formatter = LangFormatter({lang.RESET_ZOOM_BUTTON: "Zoom zurücksetzen"})

        assert formatter.format(lang.RESET_ZOOM_BUTTON) == "Zoom zurücksetzen"
        assert formatter.format(lang.MAP_ZOOM_IN) == DEFAULT_LANG[lang.MAP_ZOOM_IN]

    def test_set_template(self):
        formatter = LangFormatter()
        formatter.set_template(lang.DRILL_UP_BUTTON, "Back: {button_text}")

        assert formatter.format(lang.DRILL_UP_BUTTON, {"button_text": "World"}) == "Back: World"

    def test_satisfies_protocol(self):
        from chart_core.interfaces import ILangFormatter

        assert isinstance(LangFormatter(), ILangFormatter)
