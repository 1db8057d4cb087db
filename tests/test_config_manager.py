"""
Test suite for ConfigManager with dependency injection.
"""
import json
import pathlib
import pytest
import sys

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

from config_manager import ConfigManager
from enums import StrollMode


class TestConfigManager:
    """Tests for the ConfigManager with dependency injection."""

    def test_init_with_custom_paths(self, test_config_files):
        """Test initializing ConfigManager with a custom path."""
        cm = ConfigManager(
            cfg_path=test_config_files["config_path"],
            exit_on_error=False
        )

        assert cm.cfg_path == test_config_files["config_path"]
        assert cm.stroll["mode"] == "sweep"

    def test_stroll_defaults(self, test_config_manager):
        """Test typed accessors for the stroll section."""
        assert test_config_manager.get_default_mode() == StrollMode.SWEEP
        assert test_config_manager.get_default_zoom_level() == 2.5
        assert test_config_manager.get_default_speed_level() == 0.1

    def test_stroll_defaults_fallback(self, tmp_path):
        """Missing keys fall back to the accessor defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"stroll": {}}))
        cm = ConfigManager(cfg_path=config_file, exit_on_error=False)

        assert cm.get_default_mode() == StrollMode.RANDOM
        assert cm.get_default_zoom_level() == 1.5
        assert cm.get_default_speed_level() == 0.02

    def test_unknown_mode_falls_back(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"stroll": {"mode": "spiral"}}))
        cm = ConfigManager(cfg_path=config_file, exit_on_error=False)

        assert cm.get_default_mode() == StrollMode.RANDOM

    def test_get_setting(self, test_config_manager):
        """Test getting generic settings."""
        assert test_config_manager.get_setting("logging", "level") == "DEBUG"
        assert test_config_manager.get_setting("logging", "missing", "x") == "x"
        assert test_config_manager.get_setting("nope", "key", 3) == 3
        assert test_config_manager.get_logging_setting("console") is False

    def test_set_setting(self, test_config_manager):
        """Test in-memory overrides."""
        test_config_manager.set_setting("stroll", "mode", "random")
        assert test_config_manager.get_default_mode() == StrollMode.RANDOM

        test_config_manager.set_setting("new_section", "key", 5)
        assert test_config_manager.get_setting("new_section", "key") == 5

    def test_missing_file_raises(self, tmp_path):
        """Test error handling when the file does not exist."""
        with pytest.raises(RuntimeError, match="Critical error loading configuration"):
            ConfigManager(cfg_path=tmp_path / "missing.json", exit_on_error=False)

    def test_invalid_json_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(RuntimeError):
            ConfigManager(cfg_path=config_file, exit_on_error=False)

    def test_missing_section_raises(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {}}))
        with pytest.raises(KeyError):
            ConfigManager(cfg_path=config_file, exit_on_error=False)

    def test_exit_on_error(self, tmp_path):
        """Test that exit_on_error terminates the process."""
        with pytest.raises(SystemExit):
            ConfigManager(cfg_path=tmp_path / "missing.json", exit_on_error=True)

    def test_default_config_file_loads(self):
        """The bundled config/config.json is valid."""
        cm = ConfigManager(exit_on_error=False)
        assert cm.get_default_mode() in set(StrollMode)
        assert cm.get_default_zoom_level() >= 1
