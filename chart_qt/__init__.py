"""PyQt6 layer of the chart zoom accessibility package."""

from chart_core.logging_setup import install_null_handler

install_null_handler(__name__)
