"""Tests for tests/conftest_utils.py - shared chart doubles."""

from PyQt6.QtCore import QEvent, Qt

import tests.conftest_utils as conftest_utils
from chart_core.interfaces import ButtonState, IAxis, IChartButton, IZoomChart
from chart_qt.accessibility.keyboard_nav import KeyCodes
from tests.conftest_utils import FakeAxis, FakeButton, FakeChart, key_event


class TestModule:

    def test_has_docstring(self):
        assert conftest_utils.__doc__
        assert "Usage in tests" in conftest_utils.__doc__

    def test_exports_fakes(self):
        for name in ("FakeAxis", "FakeButton", "FakeChart", "key_event"):
            assert hasattr(conftest_utils, name)


class TestFakesSatisfyProtocols:

    def test_axis(self):
        assert isinstance(FakeAxis(), IAxis)

    def test_button(self):
        assert isinstance(FakeButton(), IChartButton)

    def test_chart(self, chart):
        assert isinstance(chart, IZoomChart)


class TestFakeBehaviour:

    def test_axis_records_set_calls(self):
        axis = FakeAxis(0.0, 10.0, 0.0, 30.0)

        axis.set_extremes(5.0, 15.0)

        assert axis.set_calls == [(5.0, 15.0)]
        assert axis.get_extremes().min == 5.0
        assert axis.get_extremes().data_max == 30.0

    def test_button_state_is_last_set(self):
        button = FakeButton()
        assert button.state is None

        button.set_state(ButtonState.SELECTED)
        button.set_state(ButtonState.NORMAL)

        assert button.state == ButtonState.NORMAL

    def test_chart_signals_emit(self, chart):
        seen = []
        chart.redrawn.connect(lambda: seen.append("redrawn"))

        chart.redrawn.emit()

        assert seen == ["redrawn"]

    def test_map_chart_fixture(self, map_chart):
        assert map_chart.has_map_zoom()
        assert len(map_chart.map_nav_buttons) == 2

    def test_key_event(self):
        event = key_event(KeyCodes.TAB, shift=True)

        assert event.type() == QEvent.Type.KeyPress
        assert event.modifiers() & Qt.KeyboardModifier.ShiftModifier
