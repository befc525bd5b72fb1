"""
Collaborator interfaces for dependency injection.

The accessibility components never touch a concrete chart class. They are
handed narrow accessors instead, which keeps them testable without a real
rendering engine.

Usage:
    from chart_core.interfaces import IZoomChart

    class MapChartWidget(QWidget):
        redrawn = pyqtSignal()
        drilled_down = pyqtSignal()
        drilled_up_all = pyqtSignal()
        reset_zoom_shown = pyqtSignal()
        ...

    component = ZoomComponent(chart_widget, host=chart_widget)

Any object with matching attributes satisfies these protocols.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from chart_core.axis_panner import AxisExtremes


class ButtonState(IntEnum):
    """Visual states of a chart button."""
    NORMAL = 0
    HOVER = 1
    SELECTED = 2


@runtime_checkable
class IAxis(Protocol):
    """Read/write access to one axis' extremes."""

    def get_extremes(self) -> AxisExtremes:
        ...

    def set_extremes(self, new_min: float, new_max: float) -> None:
        ...


@runtime_checkable
class IChartButton(Protocol):
    """A visual chart control (reset zoom, drill up, map zoom in/out).

    Attributes:
        element: The clickable element backing the control. Usually a QWidget,
            but anything with a click() method is accepted.
    """

    element: Any

    def bounds(self) -> Any:
        """Current bounds as a QRect in host coordinates, or None if unplaced."""
        ...

    def set_state(self, state: ButtonState) -> None:
        ...


@runtime_checkable
class ILangFormatter(Protocol):
    """Formats accessible labels."""

    def format(self, key: str, context: Optional[Mapping[str, Any]] = None) -> str:
        ...


@runtime_checkable
class IZoomChart(Protocol):
    """Chart surface used by the zoom accessibility component.

    The four lifecycle attributes are Qt signals (or anything exposing
    connect()/disconnect()).
    """

    reset_zoom_button: Optional[IChartButton]
    drill_up_button: Optional[IChartButton]
    map_nav_buttons: Sequence[IChartButton]
    x_axes: Sequence[IAxis]
    y_axes: Sequence[IAxis]

    redrawn: Any
    drilled_down: Any
    drilled_up_all: Any
    reset_zoom_shown: Any

    def has_map_zoom(self) -> bool:
        ...

    def zoom_out(self) -> None:
        ...

    def drill_up(self) -> None:
        ...

    def reset_map_zoom(self) -> None:
        ...

    def drilldown_back_text(self) -> str:
        ...


@runtime_checkable
class IKeyboardNavigationProvider(Protocol):
    """Something that hands keyboard navigation handlers to a sequencer."""

    def get_keyboard_navigation(self) -> List[Any]:
        ...
