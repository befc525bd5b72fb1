"""
Configuration for chart zoom accessibility.
Handles keyboard navigation, focus border and label preferences with JSON persistence.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from chart_core.lang import DEFAULT_LANG

logger = logging.getLogger(__name__)

MIN_PAN_GRANULARITY = 1
MAX_PAN_GRANULARITY = 20


def get_config_dir() -> Path:
    """
    Get the application config directory.

    Returns:
        Path to the config directory (~/.chart_a11y/)
    """
    config_dir = Path.home() / ".chart_a11y"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


class A11yConfig:
    """
    Accessibility configuration with JSON persistence.

    Key ideas:
    - Settings are grouped in sections ("keyboard_navigation", "focus_border", "lang").
    - Nested sections are merged with defaults so new keys appear on upgrade.
    - The backing store is a JSON file on disk (user config file).
    """

    # NOTE: This structure is treated as immutable. Always use
    # _default_config_deepcopy() when you need a fresh copy of defaults.
    DEFAULT_CONFIG: Dict[str, Any] = {
        "keyboard_navigation": {
            "enabled": True,
            # Number of key presses it takes to pan across the current view
            "pan_granularity": 3,
        },
        "focus_border": {
            "enabled": True,
            "color": "#8b5cf6",  # Must have 3:1 contrast
            "width": 2,
            "offset": 2,
        },
        "lang": dict(DEFAULT_LANG),
    }

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         the default path under ~/.chart_a11y/config.json
                         is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        self.data: Dict[str, Any] = self._load()
        logger.info(f"Config loaded from {self.config_file}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return config_file
        return get_config_dir() / "config.json"

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if self.config_file.exists():
            try:
                with self.config_file.open("r", encoding="utf-8") as f:
                    raw = json.load(f)

                merged = self._merge_with_defaults(raw)
                logger.info("Configuration loaded successfully")
                return merged
            except Exception as exc:  # defensive
                logger.error(f"Failed to load config: {exc}. Using defaults.")
                return self._default_config_deepcopy()
        else:
            logger.info("No config file found, using defaults")
            return self._default_config_deepcopy()

    @classmethod
    def _default_config_deepcopy(cls) -> Dict[str, Any]:
        """
        Return a deep copy of the DEFAULT_CONFIG to avoid state leakage
        between instances or tests.
        """
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults to handle new keys.

        Nested dictionaries are merged so new keys under e.g. "focus_border"
        appear without discarding user-provided values.
        """
        if not isinstance(user_config, dict):
            raise ValueError("config root must be an object")

        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key].update(value)
            else:
                merged[key] = value

        return merged

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Persist the current configuration to the config file."""
        try:
            with self.config_file.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            logger.info("Configuration saved")
        except Exception as exc:  # defensive
            logger.error(f"Failed to save config: {exc}")

    def reset_to_defaults(self) -> None:
        self.data = self._default_config_deepcopy()
        self.save()

    # ------------------------------------------------------------------
    # Keyboard navigation
    # ------------------------------------------------------------------

    @property
    def keyboard_navigation_enabled(self) -> bool:
        return bool(self.data["keyboard_navigation"].get("enabled", True))

    @keyboard_navigation_enabled.setter
    def keyboard_navigation_enabled(self, value: bool) -> None:
        self.data["keyboard_navigation"]["enabled"] = bool(value)
        self.save()

    @property
    def pan_granularity(self) -> int:
        """Steps per view when panning with arrow keys (1-20)."""
        try:
            value = int(self.data["keyboard_navigation"].get("pan_granularity", 3))
        except (TypeError, ValueError):
            return 3
        return max(MIN_PAN_GRANULARITY, min(MAX_PAN_GRANULARITY, value))

    @pan_granularity.setter
    def pan_granularity(self, value: int) -> None:
        self.data["keyboard_navigation"]["pan_granularity"] = max(
            MIN_PAN_GRANULARITY, min(MAX_PAN_GRANULARITY, int(value))
        )
        self.save()

    # ------------------------------------------------------------------
    # Focus border
    # ------------------------------------------------------------------

    @property
    def focus_border_enabled(self) -> bool:
        return bool(self.data["focus_border"].get("enabled", True))

    @focus_border_enabled.setter
    def focus_border_enabled(self, value: bool) -> None:
        self.data["focus_border"]["enabled"] = bool(value)
        self.save()

    @property
    def focus_border_color(self) -> str:
        return str(self.data["focus_border"].get("color", "#8b5cf6"))

    @property
    def focus_border_width(self) -> int:
        # WCAG 2.2 minimum is 2px
        return max(2, int(self.data["focus_border"].get("width", 2)))

    @property
    def focus_border_offset(self) -> int:
        return max(0, int(self.data["focus_border"].get("offset", 2)))

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    @property
    def lang(self) -> Dict[str, str]:
        return dict(self.data.get("lang", {}))

    def set_label(self, key: str, template: str) -> None:
        self.data.setdefault("lang", {})[key] = template
        self.save()
