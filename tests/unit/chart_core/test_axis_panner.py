"""Tests for chart_core/axis_panner.py - Axis panning."""

import pytest

from chart_core.axis_panner import AxisExtremes, PanRequest, pan_request, pan_step
from tests.conftest_utils import FakeAxis


class TestAxisExtremes:
    """Tests for AxisExtremes dataclass."""

    def test_size(self):
        assert AxisExtremes(2, 7, 0, 10).size == 5

    def test_consistent(self):
        assert AxisExtremes(2, 7, 0, 10).is_consistent()

    def test_inconsistent_outside_data(self):
        assert not AxisExtremes(-1, 7, 0, 10).is_consistent()
        assert not AxisExtremes(2, 11, 0, 10).is_consistent()


class TestPanStep:
    """Tests for pan_step."""

    def test_pan_forward_without_clamp(self):
        """Window moves a third of its size and keeps its size."""
        axis = FakeAxis(0, 10, 0, 30)

        result = pan_step(axis, 1, 3)

        assert result.min == pytest.approx(10 / 3)
        assert result.max == pytest.approx(10 + 10 / 3)
        assert result.size == pytest.approx(10)
        assert axis.set_calls == [(result.min, result.max)]

    def test_pan_forward_clamps_to_data_max(self):
        axis = FakeAxis(25, 30, 0, 30)

        result = pan_step(axis, 1, 3)

        assert result.max == pytest.approx(30)
        assert result.min == pytest.approx(25)

    def test_pan_backward_clamps_to_data_min(self):
        axis = FakeAxis(1, 7, 0, 30)

        result = pan_step(axis, -1)

        assert result.min == pytest.approx(0)
        assert result.max == pytest.approx(6)

    def test_pan_backward_without_clamp(self):
        axis = FakeAxis(12, 18, 0, 30)

        result = pan_step(axis, -1, 2)

        assert result.min == pytest.approx(9)
        assert result.max == pytest.approx(15)

    def test_default_granularity_is_three(self):
        axis = FakeAxis(0, 9, 0, 30)

        result = pan_step(axis, 1)

        assert result.min == pytest.approx(3)

    def test_invalid_granularity_falls_back_to_default(self):
        axis = FakeAxis(0, 9, 0, 30)

        result = pan_step(axis, 1, 0)

        assert result.min == pytest.approx(3)

    def test_degenerate_axis_is_noop(self):
        """A zero-width window is left alone."""
        axis = FakeAxis(5, 5, 0, 30)

        result = pan_step(axis, 1)

        assert result == axis.extremes
        assert axis.set_calls == []

    def test_inverted_axis_is_noop(self):
        axis = FakeAxis(8, 4, 0, 30)

        pan_step(axis, -1)

        assert axis.set_calls == []

    def test_zero_direction_is_noop(self):
        axis = FakeAxis(0, 10, 0, 30)

        pan_step(axis, 0)

        assert axis.set_calls == []

    def test_window_wider_than_data_is_noop(self):
        axis = FakeAxis(0, 40, 0, 30)

        pan_step(axis, 1)

        assert axis.set_calls == []

    def test_full_view_stays_put(self):
        """Panning a window that already shows all data never leaves the range."""
        axis = FakeAxis(0, 30, 0, 30)

        pan_step(axis, 1)
        pan_step(axis, -1)

        extremes = axis.get_extremes()
        assert extremes.min == pytest.approx(0)
        assert extremes.max == pytest.approx(30)

    @pytest.mark.parametrize("direction", [-1, 1])
    @pytest.mark.parametrize("window", [(0, 10), (3, 4.5), (20, 29.5), (0.1, 29.9)])
    def test_clamp_invariant(self, direction, window):
        """Repeated pans stay within data bounds and keep the window size."""
        axis = FakeAxis(window[0], window[1], 0, 30)
        size = window[1] - window[0]

        for _ in range(10):
            result = pan_step(axis, direction)
            assert result.data_min <= result.min + 1e-9
            assert result.min <= result.max
            assert result.max <= result.data_max + 1e-9
            assert result.size == pytest.approx(size)


class TestPanRequest:
    """Tests for PanRequest."""

    def test_default_granularity(self):
        assert PanRequest(direction=1).granularity == 3

    def test_pan_request_applies(self):
        axis = FakeAxis(0, 10, 0, 30)

        result = pan_request(axis, PanRequest(direction=1, granularity=5))

        assert result.min == pytest.approx(2)
        assert result.max == pytest.approx(12)
