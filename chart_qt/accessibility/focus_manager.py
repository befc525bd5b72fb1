"""
Focus Manager - focus ring and simulated focus/click for chart controls.

Chart controls are painted by the chart, so they can't show a focus
indicator themselves. A FocusRing overlay draws a visible focus border
around the control's bounds (WCAG 2.2: 2px minimum, 3:1 contrast) while
keyboard focus sits on the element or its proxy.

Usage:
    from chart_qt.accessibility.focus_manager import (
        FocusRing,
        set_focus_to_element,
        fake_click,
    )

    ring = FocusRing(chart_widget)
    set_focus_to_element(ring, button.bounds(), proxy_button)
    fake_click(button.element)
"""

import logging
from typing import Any, Optional

from PyQt6.QtCore import QEvent, QPointF, QRect, Qt
from PyQt6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QApplication, QWidget

logger = logging.getLogger(__name__)

# WCAG 2.2 focus indicator requirements
FOCUS_RING_WIDTH = 2  # Minimum 2px
FOCUS_RING_OFFSET = 2  # Offset from control edge
FOCUS_RING_COLOR = "#8b5cf6"  # Must have 3:1 contrast


class FocusRing(QWidget):
    """
    Visible focus indicator overlay.

    Draws a ring around an arbitrary rectangle of its parent (the chart
    host). The ring never takes mouse events or focus.
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        color: str = FOCUS_RING_COLOR,
        width: int = FOCUS_RING_WIDTH,
        offset: int = FOCUS_RING_OFFSET,
        radius: int = 4,
        enabled: bool = True,
    ):
        """
        Initialize focus ring.

        Args:
            parent: Chart host widget
            color: Ring color (hex)
            width: Ring width in pixels
            offset: Space between ring and control
            radius: Corner radius
            enabled: When False the ring never shows
        """
        super().__init__(parent)

        self._color = QColor(color)
        self._width = width
        self._offset = offset
        self._radius = radius
        self._enabled = enabled
        self._target: Optional[QRect] = None

        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        self.hide()

    @property
    def target(self) -> Optional[QRect]:
        return self._target

    def set_target_rect(self, rect: Optional[QRect]) -> None:
        """
        Set the rectangle (in parent coordinates) to draw the ring around.

        Args:
            rect: Control bounds, or None to hide
        """
        self._target = QRect(rect) if rect is not None else None

        if rect is None or not self._enabled:
            self.hide()
            return

        self.setGeometry(
            rect.x() - self._offset,
            rect.y() - self._offset,
            rect.width() + self._offset * 2,
            rect.height() + self._offset * 2,
        )
        self.raise_()
        self.show()
        self.update()

    def clear(self) -> None:
        self.set_target_rect(None)

    def paintEvent(self, event: Optional[QPaintEvent]) -> None:
        """Paint the focus ring."""
        if self._target is None or event is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        pen = QPen(self._color, self._width)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        # Inset by half pen width for accurate drawing
        inset = self._width / 2
        rect = self.rect().adjusted(
            int(inset), int(inset),
            int(-inset), int(-inset)
        )

        painter.drawRoundedRect(rect, self._radius, self._radius)
        painter.end()


def set_focus_to_element(
    ring: Optional[FocusRing],
    box: Optional[QRect],
    element: Any,
) -> None:
    """
    Move keyboard focus to an element and ring its visual bounds.

    Args:
        ring: Focus ring to place, or None to skip the visual indicator
        box: Bounds of the visual control
        element: Widget receiving keyboard focus. Non-widgets are skipped.
    """
    if isinstance(element, QWidget):
        element.setFocus(Qt.FocusReason.TabFocusReason)
    if ring is not None:
        ring.set_target_rect(box)


def fake_click(element: Any) -> None:
    """
    Simulate a click on a chart control element.

    Elements with a click() method (buttons, test doubles) are clicked
    directly. Other widgets receive a press/release pair at their center.
    """
    if element is None:
        logger.debug("fake_click on missing element ignored")
        return

    click = getattr(element, "click", None)
    if callable(click):
        click()
        return

    if not isinstance(element, QWidget):
        logger.warning(f"Cannot simulate click on {type(element).__name__}")
        return

    center = QPointF(element.rect().center())
    global_pos = QPointF(element.mapToGlobal(element.rect().center()))
    for event_type in (QEvent.Type.MouseButtonPress, QEvent.Type.MouseButtonRelease):
        event = QMouseEvent(
            event_type,
            center,
            global_pos,
            Qt.MouseButton.LeftButton,
            Qt.MouseButton.LeftButton if event_type == QEvent.Type.MouseButtonPress
            else Qt.MouseButton.NoButton,
            Qt.KeyboardModifier.NoModifier,
        )
        QApplication.sendEvent(element, event)
