"""
Zoom Component - keyboard access to chart zoom and drill controls.

Wires the chart lifecycle to the proxy overlays and hands the ordered
navigation handlers (reset zoom, drill up, map zoom) to the keyboard
navigation sequencer.

Usage:
    from chart_qt.accessibility import ZoomComponent

    component = ZoomComponent(chart, host=chart_widget, config=config)
    component.init()
    sequencer.register(component.get_keyboard_navigation())
    ...
    component.destroy()
"""

import logging
from typing import Any, Callable, List, Optional

from PyQt6.QtWidgets import QWidget

from chart_core import lang as lang_keys
from chart_core.config import A11yConfig
from chart_core.interfaces import IChartButton, ILangFormatter, IZoomChart
from chart_core.lang import LangFormatter
from chart_qt.accessibility.focus_manager import FocusRing, set_focus_to_element
from chart_qt.accessibility.keyboard_nav import (
    KeyboardNavigationHandler,
    KeyCodes,
    ResponseCode,
    is_backwards_tab,
)
from chart_qt.accessibility.map_zoom import MapZoomController
from chart_qt.accessibility.proxy_overlay import ProxyOverlayStore, ProxyRole
from chart_qt.accessibility.screen_reader import (
    set_element_attrs,
    unhide_element_from_screen_readers,
)
from chart_qt.accessibility.subscriptions import EventSubscriptions

logger = logging.getLogger(__name__)


class ZoomComponent:
    """
    Accessibility component for chart zoom.

    Composition only: event plumbing, proxies, focus ring and the map zoom
    controller are fields, not base classes.
    """

    def __init__(
        self,
        chart: IZoomChart,
        host: QWidget,
        lang: Optional[ILangFormatter] = None,
        config: Optional[A11yConfig] = None,
    ):
        """
        Initialize the component.

        Args:
            chart: Chart accessor
            host: Widget the proxies and focus ring are placed on
            lang: Label formatter (defaults to LangFormatter with config labels)
            config: Accessibility settings (defaults when omitted)
        """
        self.chart = chart
        self.host = host
        self.config = config
        self.lang = lang or LangFormatter(config.lang if config else None)

        self.subscriptions = EventSubscriptions()
        self.proxies = ProxyOverlayStore(host, chart, self.lang)

        if config is not None:
            self.focus_ring = FocusRing(
                host,
                color=config.focus_border_color,
                width=config.focus_border_width,
                offset=config.focus_border_offset,
                enabled=config.focus_border_enabled,
            )
            granularity = config.pan_granularity
        else:
            self.focus_ring = FocusRing(host)
            granularity = 3

        self.map_zoom = MapZoomController(
            chart, self.focus_ring, pan_granularity=granularity
        )
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Subscribe to the chart events that rebuild proxies."""
        if self._initialized:
            return

        chart = self.chart
        for signal in (
            chart.reset_zoom_shown,
            chart.drilled_down,
            chart.drilled_up_all,
            chart.redrawn,
        ):
            self.subscriptions.add(signal, self.update_proxy_overlays)

        self._initialized = True
        logger.info("Zoom accessibility component initialized")

    def destroy(self) -> None:
        """Drop subscriptions, proxies and the focus ring."""
        self.subscriptions.remove_all()
        self.proxies.clear()
        self.focus_ring.clear()
        self._initialized = False
        logger.info("Zoom accessibility component destroyed")

    def on_chart_update(self) -> None:
        """Make the map zoom buttons readable by screen readers."""
        for index, button in enumerate(self.chart.map_nav_buttons):
            element = getattr(button, "element", None)
            if not isinstance(element, QWidget):
                logger.warning(f"Map zoom button {index} has no widget element")
                continue
            self.set_map_nav_button_attrs(
                element, lang_keys.MAP_ZOOM_OUT if index else lang_keys.MAP_ZOOM_IN
            )

    def set_map_nav_button_attrs(self, element: QWidget, label_key: str) -> None:
        unhide_element_from_screen_readers(element)
        set_element_attrs(element, {
            "tab_focus": False,
            "role": "button",
            "accessible_name": self.lang.format(label_key, {"chart": self.chart}),
        })

    def on_chart_render(self) -> None:
        """Keep proxy positions in step with every render."""
        self.update_proxy_overlays()

    def update_proxy_overlays(self) -> None:
        self.proxies.refresh_all()

    # ------------------------------------------------------------------
    # Keyboard navigation
    # ------------------------------------------------------------------

    def get_map_zoom_navigation(self) -> KeyboardNavigationHandler:
        return self.map_zoom.navigation()

    def simple_button_navigation(
        self,
        button_getter: Callable[[], Optional[IChartButton]],
        role: ProxyRole,
        on_click: Callable[[IZoomChart], Any],
    ) -> KeyboardNavigationHandler:
        """
        Navigation for a single chart button mirrored by a proxy.

        Args:
            button_getter: Returns the chart's current visual button
            role: Proxy role of the button
            on_click: Chart action run on Space/Enter
        """
        chart = self.chart
        proxies = self.proxies

        def on_move(key: int, event: Any) -> ResponseCode:
            is_backwards = (
                is_backwards_tab(key, event) or key in (KeyCodes.LEFT, KeyCodes.UP)
            )
            # Arrow/tab => just move
            return ResponseCode.PREV if is_backwards else ResponseCode.NEXT

        def on_activate(key: int, event: Any) -> ResponseCode:
            on_click(chart)
            return ResponseCode.SUCCESS

        def validate() -> bool:
            button = button_getter()
            return (
                button is not None
                and button.bounds() is not None
                and proxies.has_proxy(role)
            )

        def init(direction: int) -> None:
            button = button_getter()
            proxy = proxies.proxy_button(role)
            if button is None or proxy is None:
                logger.debug(f"{role.value}: nothing to focus")
                return
            set_focus_to_element(self.focus_ring, button.bounds(), proxy)

        def terminate() -> None:
            self.focus_ring.clear()

        return KeyboardNavigationHandler(
            [
                (KeyCodes.TABS + KeyCodes.ARROWS, on_move),
                (KeyCodes.ACTIVATE, on_activate),
            ],
            validate=validate,
            init=init,
            terminate=terminate,
            name=role.value,
        )

    def get_keyboard_navigation(self) -> List[KeyboardNavigationHandler]:
        """
        Handlers in traversal order: reset zoom, drill up, map zoom.

        Empty when keyboard navigation is disabled in the configuration.
        """
        if self.config is not None and not self.config.keyboard_navigation_enabled:
            return []

        return [
            self.simple_button_navigation(
                lambda: self.chart.reset_zoom_button,
                ProxyRole.RESET_ZOOM,
                lambda chart: chart.zoom_out(),
            ),
            self.simple_button_navigation(
                lambda: self.chart.drill_up_button,
                ProxyRole.DRILL_UP,
                lambda chart: chart.drill_up(),
            ),
            self.get_map_zoom_navigation(),
        ]
