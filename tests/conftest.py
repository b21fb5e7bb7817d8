"""Pytest configuration for headless Qt.

Forces the offscreen Qt platform before any QApplication is created and
provides a session-wide ``qapp`` fixture for tests that paint or build
widgets.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
