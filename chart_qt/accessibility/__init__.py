"""
Accessibility Package - keyboard access to chart zoom and drill controls.

This package provides:
- Proxy overlays exposing chart buttons to screen readers
- Keyboard navigation handlers for reset zoom, drill up and map zoom
- Focus ring and simulated focus/click for chart-painted controls

Usage:
    from chart_qt.accessibility import (
        ZoomComponent,
        KeyboardNavigationHandler,
        ResponseCode,
    )

    component = ZoomComponent(chart, host=chart_widget)
    component.init()
    handlers = component.get_keyboard_navigation()
"""

from chart_qt.accessibility.focus_manager import (
    FocusRing,
    fake_click,
    set_focus_to_element,
)
from chart_qt.accessibility.keyboard_nav import (
    KeyboardNavigationHandler,
    KeyCodes,
    ResponseCode,
    is_backwards_tab,
)
from chart_qt.accessibility.map_zoom import MapZoomController
from chart_qt.accessibility.proxy_overlay import (
    ProxyButton,
    ProxyGroup,
    ProxyOverlayStore,
    ProxyRole,
)
from chart_qt.accessibility.screen_reader import (
    set_accessible_description,
    set_accessible_name,
    set_element_attrs,
)
from chart_qt.accessibility.subscriptions import EventSubscriptions
from chart_qt.accessibility.zoom_component import ZoomComponent

__all__ = [
    # Focus
    "FocusRing",
    "fake_click",
    "set_focus_to_element",
    # Keyboard navigation
    "KeyboardNavigationHandler",
    "KeyCodes",
    "ResponseCode",
    "is_backwards_tab",
    "MapZoomController",
    # Proxies
    "ProxyButton",
    "ProxyGroup",
    "ProxyOverlayStore",
    "ProxyRole",
    # Screen reader
    "set_accessible_description",
    "set_accessible_name",
    "set_element_attrs",
    # Component
    "EventSubscriptions",
    "ZoomComponent",
]
