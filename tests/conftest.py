import faulthandler
import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QRect  # noqa: E402
from PyQt6.QtWidgets import QWidget  # noqa: E402

from chart_core.config import A11yConfig  # noqa: E402
from tests.conftest_utils import FakeButton, FakeChart  # noqa: E402


@pytest.fixture
def chart():
    return FakeChart()


@pytest.fixture
def map_chart():
    """Chart with map zoom and both map navigation buttons."""
    fake = FakeChart()
    fake.map_zoom_active = True
    fake.map_nav_buttons = [
        FakeButton(QRect(5, 5, 20, 20)),
        FakeButton(QRect(5, 30, 20, 20)),
    ]
    return fake


@pytest.fixture
def host(qtbot):
    """Chart host widget for proxies and the focus ring."""
    widget = QWidget()
    widget.resize(600, 400)
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def temp_config(tmp_path):
    """
    Provide a fresh A11yConfig backed by a temporary file.

    Fails loudly if the config doesn't start from defaults.
    """
    config = A11yConfig(config_file=tmp_path / "config.json")

    assert config.pan_granularity == 3, \
        f"FIXTURE CONTAMINATED! granularity={config.pan_granularity}, file={config.config_file}"
    assert config.keyboard_navigation_enabled is True, \
        f"FIXTURE CONTAMINATED! enabled=False, file={config.config_file}"

    return config


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/unit/chart_qt/" in path:
            item.add_marker(pytest.mark.gui)
        else:
            item.add_marker(pytest.mark.unit)


def pytest_sessionstart(session):  # pragma: no cover - test harness init
    """Enable faulthandler for the entire test run to aid diagnosing hangs."""
    try:
        faulthandler.enable(file=sys.stderr, all_threads=True)
    except Exception:
        pass
