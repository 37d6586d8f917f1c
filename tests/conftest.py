"""Shared pytest fixtures for PomoClock tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pomoclock.settings import Settings  # noqa: E402
from pomoclock.timer.driver import TimerDriver  # noqa: E402
from pomoclock.timer.engine import TimerController  # noqa: E402

from helpers import FakeClock  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("pomoclock.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("pomoclock.settings.APP_SUPPORT_DIR", tmp_path)
    return path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    """Fresh headless controller on a fake clock."""
    return TimerController(clock)


@pytest.fixture
def driver(qapp, clock):
    """Fresh TimerDriver on a fake clock."""
    return TimerDriver(parent=None, clock=clock)


@pytest.fixture
def settings():
    return Settings()
