"""
Axis panning - move a zoomed axis window without changing its size.

The window is walked in ``granularity`` steps across the current view and
clamped against the data bounds, so panning never changes the zoom level.

Usage:
    from chart_core.axis_panner import pan_step

    pan_step(chart.x_axes[0], 1)      # one third of the view to the right
    pan_step(chart.y_axes[0], -1, 4)  # one quarter of the view up
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from chart_core.interfaces import IAxis

logger = logging.getLogger(__name__)

DEFAULT_GRANULARITY = 3


@dataclass(frozen=True)
class AxisExtremes:
    """Current and absolute numeric range of one axis."""
    min: float
    max: float
    data_min: float
    data_max: float

    @property
    def size(self) -> float:
        """Width of the visible window."""
        return self.max - self.min

    def is_consistent(self) -> bool:
        """True if data_min <= min <= max <= data_max."""
        return self.data_min <= self.min <= self.max <= self.data_max


@dataclass(frozen=True)
class PanRequest:
    """Direction (-1 or +1) and number of steps across the current view."""
    direction: int
    granularity: int = DEFAULT_GRANULARITY


def pan_step(
    axis: IAxis,
    direction: int,
    granularity: Optional[int] = DEFAULT_GRANULARITY,
) -> AxisExtremes:
    """
    Pan an axis one step in a direction.

    Args:
        axis: Axis exposing get_extremes() / set_extremes()
        direction: -1 pans towards data_min, +1 towards data_max
        granularity: Number of steps it takes to walk across the current view

    Returns:
        The extremes applied to the axis, or the unchanged extremes when the
        pan was a no-op.
    """
    extremes = axis.get_extremes()
    gran = granularity if granularity and granularity > 0 else DEFAULT_GRANULARITY

    if direction == 0 or extremes.max <= extremes.min:
        logger.debug(f"Pan skipped for degenerate window {extremes}")
        return extremes

    step = (extremes.max - extremes.min) / gran * direction
    new_max = extremes.max + step
    new_min = extremes.min + step
    size = new_max - new_min

    if direction < 0 and new_min < extremes.data_min:
        new_min = extremes.data_min
        new_max = new_min + size
    elif direction > 0 and new_max > extremes.data_max:
        new_max = extremes.data_max
        new_min = new_max - size

    result = AxisExtremes(new_min, new_max, extremes.data_min, extremes.data_max)

    # A window wider than the data range can't be clamped on both ends
    if not result.is_consistent():
        logger.debug(f"Pan skipped, window {extremes} does not fit the data range")
        return extremes

    axis.set_extremes(new_min, new_max)
    return result


def pan_request(axis: IAxis, request: PanRequest) -> AxisExtremes:
    """Apply a PanRequest to an axis."""
    return pan_step(axis, request.direction, request.granularity)
