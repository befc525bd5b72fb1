"""
Map zoom keyboard control.

Keyboard behaviour for the pair of map navigation buttons (zoom in at
index 0, zoom out at index 1): arrows pan the map, Tab walks between the
two buttons and leaves the control past either end, Space/Enter clicks the
focused button.
"""

import logging
from typing import Any, Optional

from chart_core.axis_panner import DEFAULT_GRANULARITY, pan_step
from chart_core.interfaces import ButtonState, IChartButton, IZoomChart
from chart_qt.accessibility.focus_manager import FocusRing, fake_click, set_focus_to_element
from chart_qt.accessibility.keyboard_nav import (
    KeyboardNavigationHandler,
    KeyCodes,
    ResponseCode,
    is_backwards_tab,
)

logger = logging.getLogger(__name__)

ZOOM_IN_INDEX = 0
ZOOM_OUT_INDEX = 1


def chart_has_map_zoom(chart: IZoomChart) -> bool:
    return bool(chart.has_map_zoom() and chart.map_nav_buttons)


class MapZoomController:
    """
    Tracks which map zoom button holds simulated focus.

    focused_index is None while the control is inactive and is reset on
    every init().
    """

    def __init__(
        self,
        chart: IZoomChart,
        focus_ring: Optional[FocusRing] = None,
        *,
        pan_granularity: int = DEFAULT_GRANULARITY,
    ):
        self._chart = chart
        self._focus_ring = focus_ring
        self._pan_granularity = pan_granularity
        self.focused_index: Optional[int] = None

    def navigation(self) -> KeyboardNavigationHandler:
        """Build the navigation handler for the sequencer."""
        return KeyboardNavigationHandler(
            [
                (KeyCodes.ARROWS, self.on_arrow),
                (KeyCodes.TABS, self.on_tab),
                (KeyCodes.ACTIVATE, self.on_click),
            ],
            validate=self.validate,
            init=self.init,
            terminate=self.terminate,
            name="map_zoom",
        )

    def _button(self, index: Optional[int]) -> Optional[IChartButton]:
        buttons = self._chart.map_nav_buttons
        if index is None or not 0 <= index < len(buttons):
            return None
        return buttons[index]

    def _select(self, button: IChartButton) -> None:
        set_focus_to_element(self._focus_ring, button.bounds(), button.element)
        button.set_state(ButtonState.SELECTED)

    def validate(self) -> bool:
        return chart_has_map_zoom(self._chart)

    def init(self, direction: int) -> ResponseCode:
        """Focus zoom in when entering forwards, zoom out when entering backwards."""
        index = ZOOM_IN_INDEX if direction > 0 else ZOOM_OUT_INDEX
        self.focused_index = index

        button = self._button(index)
        if button is None:
            logger.warning(f"Map zoom button {index} missing on init")
            return ResponseCode.SUCCESS

        self._select(button)
        return ResponseCode.SUCCESS

    def terminate(self) -> None:
        button = self._button(self.focused_index)
        if button is not None:
            button.set_state(ButtonState.NORMAL)
        if self._focus_ring is not None:
            self._focus_ring.clear()
        self.focused_index = None

    def on_arrow(self, key: int, event: Any = None) -> ResponseCode:
        """Up/Down pan the y axis, Left/Right the x axis."""
        axes = self._chart.y_axes if key in (KeyCodes.UP, KeyCodes.DOWN) else self._chart.x_axes
        direction = -1 if key in (KeyCodes.LEFT, KeyCodes.UP) else 1

        if axes:
            pan_step(axes[0], direction, self._pan_granularity)
        else:
            logger.debug("No axis to pan")

        return ResponseCode.SUCCESS

    def on_tab(self, key: int, event: Any = None) -> ResponseCode:
        """
        Move between the two buttons, or leave the control past either end.

        Leaving resets the map zoom to the full view.
        """
        is_backwards = is_backwards_tab(key, event)
        index = self.focused_index if self.focused_index is not None else ZOOM_IN_INDEX

        # Exit backwards from zoom in, forwards from zoom out
        is_move_out_of_range = (
            (is_backwards and index == ZOOM_IN_INDEX)
            or (not is_backwards and index != ZOOM_IN_INDEX)
        )

        old_button = self._button(index)
        if old_button is not None:
            old_button.set_state(ButtonState.NORMAL)

        if is_move_out_of_range:
            if self._focus_ring is not None:
                self._focus_ring.clear()
            self._chart.reset_map_zoom()
            return ResponseCode.PREV if is_backwards else ResponseCode.NEXT

        self.focused_index = index + (-1 if is_backwards else 1)
        button = self._button(self.focused_index)
        if button is not None:
            self._select(button)

        return ResponseCode.SUCCESS

    def on_click(self, key: int = KeyCodes.ENTER, event: Any = None) -> ResponseCode:
        button = self._button(self.focused_index)
        if button is not None:
            fake_click(button.element)
        return ResponseCode.SUCCESS
