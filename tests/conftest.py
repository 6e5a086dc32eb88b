"""Pytest fixtures for settingstore tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.settings_models import FIXED_NS, RecordingGate


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Path of a settings file inside an existing directory."""
    directory = tmp_path / "Settings"
    directory.mkdir()
    return directory / "launcher.json"


@pytest.fixture
def fixed_clock():
    """Clock returning a constant nanosecond timestamp."""
    return lambda: FIXED_NS


@pytest.fixture
def gate() -> RecordingGate:
    """Recording gate that never purges."""
    return RecordingGate()
