import json
import pathlib
import sys
import logging
from typing import Any

from custom_types import StrollConfig
from enums import StrollMode

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages application configuration: stroll defaults and logging"""

    stroll: StrollConfig
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to standard location if None)
            exit_on_error: Whether to exit the program on configuration errors
        """
        self.stroll = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        self.cfg_path = cfg_path if cfg_path is not None else self._default_config_path()

        self.load_config()

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        base = pathlib.Path(__file__).parent.parent.parent
        return base / "config" / "config.json"

    def load_config(self) -> None:
        """Load master configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r') as f:
                self._cfg = json.load(f)
        except Exception as e:
            error_msg = "Critical error loading configuration '%s': %s"
            logger.error(error_msg, self.cfg_path, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise RuntimeError(f"Critical error loading configuration '{self.cfg_path}': {e}")

        # Validate and assign sections
        try:
            self.stroll = self._cfg["stroll"]
        except KeyError as e:
            error_msg = "Configuration missing key: %s"
            logger.error(error_msg, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise KeyError(f"Configuration missing key: {e}")

        logger.debug("Loaded configuration from %s", self.cfg_path)

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a generic setting from the master config"""
        section_data = self._cfg.get(section, {})
        if not isinstance(section_data, dict):
            return default
        return section_data.get(key, default)

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'stroll', 'logging')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value
        if section == "stroll":
            self.stroll = self._cfg["stroll"]

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        return self.get_setting("logging", key, default)

    def get_stroll_setting(self, key: str, default: Any = None) -> Any:
        """Get a stroll default by key"""
        return self.stroll.get(key, default)

    # ============================================================================
    # Stroll Defaults
    # ============================================================================

    def get_default_mode(self, default: StrollMode = StrollMode.RANDOM) -> StrollMode:
        """Get the default motion strategy.

        Unknown values fall back to the given default with a warning.
        """
        value = self.get_stroll_setting("mode", default)
        try:
            return StrollMode(value)
        except ValueError:
            logger.warning("Unknown stroll mode '%s' in config, using '%s'", value, default)
            return default

    def get_default_zoom_level(self, default: float = 1.5) -> float:
        """Get the default zoom level (scale applied to the viewport width)."""
        return float(self.get_stroll_setting("zoomLevel", default))

    def get_default_speed_level(self, default: float = 0.02) -> float:
        """Get the default speed in viewport widths per second."""
        return float(self.get_stroll_setting("speedLevel", default))


# Create a singleton instance
config = ConfigManager()
