"""
Shared pytest fixtures for SnapDeck tests.
"""
import os
import random
import sys

import pytest
# Run Qt headless unless the environment already picked a platform.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope='session')
def qt_app():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - causes issues with pytest


@pytest.fixture(autouse=True)
def isolated_qsettings(tmp_path):
    """Point QSettings at a per-test INI directory so tests never touch user config."""
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path))
    yield tmp_path


@pytest.fixture
def settings_manager():
    """Create SettingsManager instance for testing."""
    from core.settings import SettingsManager
    manager = SettingsManager(organization="Test", application="SnapDeckTest")
    yield manager
    manager.clear()


@pytest.fixture
def event_system():
    """Create EventSystem instance for testing."""
    from core.events import EventSystem
    return EventSystem()


@pytest.fixture
def store(qt_app, event_system):
    """WindowStore on a 1000x800 viewport with a seeded random source."""
    from core.snapping import WindowStore
    return WindowStore(
        viewport_width=1000,
        viewport_height=800,
        event_system=event_system,
        rng=random.Random(1234),
    )
