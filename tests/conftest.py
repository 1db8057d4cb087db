"""
conftest.py - Shared pytest fixtures for stroll tests

This module provides standardized test fixtures for use across all tests.
It includes fixtures for:
- Path setup and Python path configuration
- Configuration management
- Scripted random sources and standard scenes
- GUI testing support
"""
import os
import sys
import json
import pathlib
import pytest

# Headless Qt for signal tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

from config_manager import ConfigManager
from geometry import Dimensions


class ScriptedRandom:
    """Random source that replays a fixed sequence, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


# Random Source Fixtures
# ---------------------

@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


# Scene Fixtures
# --------------

@pytest.fixture
def square_scene():
    """100x100 viewport with a square image: zoom 2 gives a 200x200 scaled image."""
    return {
        'viewport': Dimensions(100, 100),
        'image': Dimensions(100, 100),
        'zoom': 2.0,
    }


@pytest.fixture
def wide_scene():
    """Viewport 500x400, image 4:1 so zoom 2 gives 1000x250 (x pannable only)."""
    return {
        'viewport': Dimensions(500, 400),
        'image': Dimensions(2000, 500),
        'zoom': 2.0,
    }


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data():
    """Create minimal test configuration data."""
    return {
        "stroll": {
            "mode": "sweep",
            "zoomLevel": 2.5,
            "speedLevel": 0.1
        },
        "logging": {
            "level": "DEBUG",
            "console": False,
            "raiseOnError": False
        }
    }


@pytest.fixture
def test_config_files(tmp_path, test_config_data):
    """Create a temporary config file."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)

    return {
        "config_path": config_file,
        "tmp_path": tmp_path
    }


@pytest.fixture
def test_config_manager(test_config_files):
    """Create a ConfigManager instance with test configuration."""
    return ConfigManager(
        cfg_path=test_config_files["config_path"],
        exit_on_error=False
    )


# GUI Testing Fixtures
# ------------------

@pytest.fixture(scope="session")
def qt_app():
    """Create a QApplication instance that persists for the test session."""
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        pytest.skip("PyQt6 not installed, skipping test")

    app = QApplication.instance()
    if app is None:
        app = QApplication([''])

    yield app
