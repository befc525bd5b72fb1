"""
Screen Reader Support - accessible names and attributes for chart controls.

Proxy widgets and map navigation buttons are described to assistive
technology through Qt's accessibility layer.

Usage:
    from chart_qt.accessibility.screen_reader import (
        set_accessible_name,
        set_element_attrs,
    )

    set_accessible_name(proxy, "Reset zoom")
    set_element_attrs(button, {"role": "button", "tab_focus": False})
"""

import logging
from typing import Any, Mapping

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget

logger = logging.getLogger(__name__)

# Dynamic property names used as role / visibility markers
ROLE_PROPERTY = "a11yRole"
HIDDEN_PROPERTY = "a11yHidden"


def set_accessible_name(widget: QWidget, name: str) -> None:
    """
    Set the accessible name for a widget.

    The accessible name is the primary label read by screen readers.

    Args:
        widget: Widget to set name on
        name: Accessible name (e.g., "Reset zoom")
    """
    widget.setAccessibleName(name)


def set_accessible_description(widget: QWidget, description: str) -> None:
    """
    Set the accessible description for a widget.

    Screen readers typically announce this after the name.
    """
    widget.setAccessibleDescription(description)


def set_element_attrs(widget: QWidget, attrs: Mapping[str, Any]) -> None:
    """
    Apply a mapping of accessibility attributes to a widget.

    Known keys:
        accessible_name: Accessible name
        accessible_description: Accessible description
        tab_focus: False keeps the widget out of Tab order while it can still
            receive focus programmatically, True makes it tabbable
        role: Role marker stored as the ``a11yRole`` property

    Other keys are stored as dynamic properties on the widget.
    """
    for key, value in attrs.items():
        if key == "accessible_name":
            set_accessible_name(widget, str(value))
        elif key == "accessible_description":
            set_accessible_description(widget, str(value))
        elif key == "tab_focus":
            widget.setFocusPolicy(
                Qt.FocusPolicy.StrongFocus if value else Qt.FocusPolicy.ClickFocus
            )
        elif key == "role":
            widget.setProperty(ROLE_PROPERTY, value)
        else:
            widget.setProperty(key, value)


def unhide_element_from_screen_readers(widget: QWidget) -> None:
    """Clear any hidden marker so assistive technology reads the widget."""
    widget.setProperty(HIDDEN_PROPERTY, False)
