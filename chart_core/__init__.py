"""Qt-free core of the chart zoom accessibility layer."""

from chart_core.axis_panner import AxisExtremes, PanRequest, pan_step, pan_request
from chart_core.config import A11yConfig
from chart_core.interfaces import (
    ButtonState,
    IAxis,
    IChartButton,
    IKeyboardNavigationProvider,
    ILangFormatter,
    IZoomChart,
)
from chart_core.lang import LangFormatter
from chart_core.logging_setup import install_null_handler, setup_logging

install_null_handler(__name__)

__all__ = [
    "AxisExtremes",
    "PanRequest",
    "pan_step",
    "pan_request",
    "A11yConfig",
    "ButtonState",
    "IAxis",
    "IChartButton",
    "IKeyboardNavigationProvider",
    "ILangFormatter",
    "IZoomChart",
    "LangFormatter",
    "setup_logging",
]
