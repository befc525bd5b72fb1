"""
Label formatting for accessible names.

A small default for the label collaborator. Templates use str.format
placeholders that are filled from the context mapping.
"""

from __future__ import annotations

import logging
import string
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


MAP_ZOOM_IN = "accessibility.zoom.mapZoomIn"
MAP_ZOOM_OUT = "accessibility.zoom.mapZoomOut"
RESET_ZOOM_BUTTON = "accessibility.zoom.resetZoomButton"
DRILL_UP_BUTTON = "accessibility.drillUpButton"

DEFAULT_LANG: Dict[str, str] = {
    MAP_ZOOM_IN: "Zoom chart",
    MAP_ZOOM_OUT: "Zoom out chart",
    RESET_ZOOM_BUTTON: "Reset zoom",
    DRILL_UP_BUTTON: "{button_text}",
}


class _BlankMissing(dict):
    """Mapping that renders unknown placeholders as empty strings."""

    def __missing__(self, key: str) -> str:
        logger.debug(f"Missing label placeholder: {key}")
        return ""


class LangFormatter:
    """Formats label templates by key."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        self._templates: Dict[str, str] = dict(DEFAULT_LANG)
        if templates:
            self._templates.update(templates)

    def format(self, key: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Format the template registered for key.

        Unknown keys fall back to the key itself so a label is never empty.
        """
        template = self._templates.get(key)
        if template is None:
            logger.debug(f"No label template for {key}")
            return key

        values = _BlankMissing(context or {})
        return string.Formatter().vformat(template, (), values)

    def set_template(self, key: str, template: str) -> None:
        self._templates[key] = template
