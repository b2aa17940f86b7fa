"""
Shared fixtures for the Qt frontend tests.

Qt runs on the offscreen platform so the tests need no display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="module")
def app():
    """Create QApplication for the test module."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user environment overrides out of the Qt tests."""
    for var in ("STANDFINDER_CATALOG", "STANDFINDER_CANVAS_SIZE"):
        monkeypatch.delenv(var, raising=False)
