"""
Logging configuration for the stroll package.

This module provides centralized logging configuration with support for:
- Console output (development)
- Rotating file logs
- Configurable log levels
"""

import logging
import logging.handlers
from pathlib import Path
from config_manager import config


class ErrorRaisingHandler(logging.Handler):
    """Handler that raises an exception on ERROR or CRITICAL logs."""

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            raise RuntimeError(f"Logger error: {record.getMessage()}")


def setup_logging(raise_on_error: bool = None):
    """
    Initialize logging configuration.

    Configuration is read from the 'logging' section of config.json:
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - file: Path to log file
    - maxBytes: Maximum log file size before rotation
    - backupCount: Number of backup files to keep
    - console: Whether to enable console output
    - consoleLevel: Level for the console handler
    - raiseOnError: Turn logger.error into a RuntimeError
    """
    log_level_str = config.get_logging_setting("level", "INFO")
    log_file = config.get_logging_setting("file", "logs/stroll.log")
    max_bytes = config.get_logging_setting("maxBytes", 10485760)  # 10MB default
    backup_count = config.get_logging_setting("backupCount", 3)
    console_enabled = config.get_logging_setting("console", True)
    console_level_str = config.get_logging_setting("consoleLevel", "WARNING")

    if raise_on_error is None:
        raise_on_error = config.get_logging_setting("raiseOnError", False)

    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    console_level = getattr(logging, console_level_str.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.info("Logging initialized - Level: %s, File: %s", log_level_str, log_file)
    except OSError as e:
        # Continue with console logging only
        root_logger.warning("Could not initialize file logging: %s", e)

    if raise_on_error:
        root_logger.addHandler(ErrorRaisingHandler())


def get_logger(name):
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
