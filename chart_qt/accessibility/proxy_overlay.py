"""
Proxy overlays - invisible, accessible stand-ins for chart buttons.

The chart destroys and rebuilds its buttons on every redraw, so proxies
are never patched: each refresh deletes the previous group and builds a new
one over the current bounds of the visual control.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from PyQt6 import sip
from PyQt6.QtCore import QRect, Qt
from PyQt6.QtWidgets import QPushButton, QWidget

from chart_core import lang as lang_keys
from chart_core.interfaces import IChartButton, ILangFormatter, IZoomChart
from chart_qt.accessibility.focus_manager import fake_click
from chart_qt.accessibility.screen_reader import set_element_attrs

logger = logging.getLogger(__name__)


class ProxyRole(Enum):
    """Logical role of a proxy group."""
    RESET_ZOOM = "reset_zoom"
    DRILL_UP = "drill_up"


class ProxyGroup(QWidget):
    """Transparent container for proxy buttons. Paints nothing."""

    def __init__(self, parent: QWidget, role: ProxyRole):
        super().__init__(parent)
        self.role = role
        self.setObjectName(f"{role.value}_proxy_group")
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)


class ProxyButton(QPushButton):
    """
    Focusable, invisible button mirroring a visual chart control.

    Clicking it (mouse, Space, or screen reader activation) forwards a
    simulated click to the control's element.
    """

    def __init__(self, group: ProxyGroup, target: IChartButton, label: str):
        super().__init__(group)
        self._target = target
        self.setObjectName(f"{group.role.value}_proxy_button")
        self.setFlat(True)
        self.setStyleSheet("QPushButton { background: transparent; border: none; }")
        self.setAccessibleName(label)
        self.clicked.connect(self._forward_click)

    @property
    def target(self) -> IChartButton:
        return self._target

    def _forward_click(self) -> None:
        fake_click(self._target.element)


def _is_alive(widget: Optional[QWidget]) -> bool:
    return widget is not None and not sip.isdeleted(widget)


class ProxyOverlayStore:
    """
    Owns the live proxy groups, keyed by role.

    Nothing outside the store keeps proxy references across a refresh;
    callers look the current proxy up by role every time.
    """

    def __init__(self, host: QWidget, chart: IZoomChart, lang: ILangFormatter):
        """
        Initialize the store.

        Args:
            host: Widget the proxies are placed on (the chart widget)
            chart: Chart accessor
            lang: Label formatter
        """
        self._host = host
        self._chart = chart
        self._lang = lang
        self._groups: Dict[ProxyRole, ProxyGroup] = {}
        self._buttons: Dict[ProxyRole, ProxyButton] = {}

    def teardown(self, group: Optional[ProxyGroup]) -> None:
        """
        Remove a group and its buttons.

        Safe with None, with a group that was already torn down, and with a
        group whose Qt object is already gone.
        """
        if group is None:
            return

        for role, current in list(self._groups.items()):
            if current is group:
                del self._groups[role]
                self._buttons.pop(role, None)

        if not _is_alive(group):
            return

        group.hide()
        group.setParent(None)
        group.deleteLater()

    def recreate_group(
        self,
        role: ProxyRole,
        target: IChartButton,
        label: str,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> ProxyButton:
        """
        Replace the group for a role with a fresh one over target's bounds.

        Args:
            role: Role being rebuilt
            target: Visual control the proxy mirrors
            label: Accessible name
            attributes: Extra accessibility attributes (see set_element_attrs)

        Returns:
            The new proxy button
        """
        self.teardown(self._groups.get(role))

        group = ProxyGroup(self._host, role)
        button = ProxyButton(group, target, label)

        attrs: Dict[str, Any] = {"role": "button", "tab_focus": False}
        attrs.update(attributes or {})
        attrs["accessible_name"] = label
        set_element_attrs(button, attrs)

        bounds = target.bounds()
        if bounds is not None:
            rect = QRect(bounds)
            group.setGeometry(rect)
            button.setGeometry(0, 0, rect.width(), rect.height())

        group.show()

        self._groups[role] = group
        self._buttons[role] = button
        logger.debug(f"Recreated {role.value} proxy: {label!r}")
        return button

    def refresh_all(self) -> None:
        """
        Rebuild every proxy from the chart's current buttons.

        Proxies exist afterwards exactly for the buttons the chart currently
        shows.
        """
        # Always start with a clean slate
        self.teardown(self._groups.get(ProxyRole.DRILL_UP))
        self.teardown(self._groups.get(ProxyRole.RESET_ZOOM))

        chart = self._chart

        if chart.reset_zoom_button is not None:
            self.recreate_group(
                ProxyRole.RESET_ZOOM,
                chart.reset_zoom_button,
                self._lang.format(lang_keys.RESET_ZOOM_BUTTON, {"chart": chart}),
            )

        if chart.drill_up_button is not None:
            self.recreate_group(
                ProxyRole.DRILL_UP,
                chart.drill_up_button,
                self._lang.format(
                    lang_keys.DRILL_UP_BUTTON,
                    {"chart": chart, "button_text": chart.drilldown_back_text()},
                ),
            )

    def clear(self) -> None:
        """Remove all proxies."""
        for group in list(self._groups.values()):
            self.teardown(group)

    def proxy_group(self, role: ProxyRole) -> Optional[ProxyGroup]:
        group = self._groups.get(role)
        return group if _is_alive(group) else None

    def proxy_button(self, role: ProxyRole) -> Optional[ProxyButton]:
        button = self._buttons.get(role)
        return button if _is_alive(button) else None

    def has_proxy(self, role: ProxyRole) -> bool:
        return self.proxy_button(role) is not None

    def roles(self) -> List[ProxyRole]:
        """Roles with a live proxy, in creation order."""
        return [role for role in self._groups if self.has_proxy(role)]
