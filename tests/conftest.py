"""Shared pytest fixtures for Microwave tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from microwave.timer.controller import TimerController


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def controller(qapp):
    """Fresh TimerController with default limits."""
    ctrl = TimerController(parent=None)
    yield ctrl
    ctrl.shutdown()


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("microwave.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("microwave.settings.APP_SUPPORT_DIR", tmp_path)
    return path


@pytest.fixture
def fast_controller(qapp):
    """Controller whose QTimer fires every 5 ms, for event-loop tests."""
    ctrl = TimerController(parent=None, tick_interval_ms=5)
    yield ctrl
    ctrl.shutdown()
