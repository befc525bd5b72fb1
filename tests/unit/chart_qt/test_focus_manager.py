"""Tests for chart_qt/accessibility/focus_manager.py."""

from unittest.mock import MagicMock

from PyQt6.QtCore import QRect
from PyQt6.QtWidgets import QPushButton, QWidget

from chart_qt.accessibility.focus_manager import (
    FocusRing,
    fake_click,
    set_focus_to_element,
)


class TestFocusRing:
    """Tests for FocusRing."""

    def test_hidden_initially(self, host):
        ring = FocusRing(host)

        assert ring.isHidden()
        assert ring.target is None

    def test_surrounds_target_with_offset(self, host):
        ring = FocusRing(host, offset=3)

        ring.set_target_rect(QRect(10, 20, 100, 30))

        assert not ring.isHidden()
        assert ring.geometry() == QRect(7, 17, 106, 36)
        assert ring.target == QRect(10, 20, 100, 30)

    def test_clear_hides(self, host):
        ring = FocusRing(host)
        ring.set_target_rect(QRect(10, 20, 100, 30))

        ring.clear()

        assert ring.isHidden()
        assert ring.target is None

    def test_disabled_ring_never_shows(self, host):
        ring = FocusRing(host, enabled=False)

        ring.set_target_rect(QRect(10, 20, 100, 30))

        assert ring.isHidden()


class TestSetFocusToElement:
    """Tests for set_focus_to_element."""

    def test_rings_box(self, host):
        ring = FocusRing(host)
        element = QWidget(host)

        set_focus_to_element(ring, QRect(1, 2, 3, 4), element)

        assert ring.target == QRect(1, 2, 3, 4)

    def test_non_widget_element_only_rings(self, host):
        ring = FocusRing(host)

        set_focus_to_element(ring, QRect(1, 2, 3, 4), MagicMock())

        assert ring.target == QRect(1, 2, 3, 4)

    def test_without_ring(self, host):
        element = MagicMock()

        set_focus_to_element(None, QRect(1, 2, 3, 4), element)


class TestFakeClick:
    """Tests for fake_click."""

    def test_calls_click_when_available(self):
        element = MagicMock()

        fake_click(element)

        element.click.assert_called_once()

    def test_clicks_push_button(self, host, qtbot):
        button = QPushButton("Zoom", host)
        clicked = []
        button.clicked.connect(lambda: clicked.append(1))

        fake_click(button)

        assert clicked == [1]

    def test_plain_widget_receives_mouse_events(self, host):
        class ClickTarget(QWidget):
            def __init__(self, parent):
                super().__init__(parent)
                self.presses = 0
                self.releases = 0

            def mousePressEvent(self, event):
                self.presses += 1

            def mouseReleaseEvent(self, event):
                self.releases += 1

        target = ClickTarget(host)
        target.resize(20, 20)
        host.show()

        fake_click(target)

        assert target.presses == 1
        assert target.releases == 1

    def test_missing_element_ignored(self):
        fake_click(None)

    def test_unclickable_object_ignored(self):
        fake_click(object())
