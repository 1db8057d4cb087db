"""
Type definitions for the stroll package.

This module defines protocols and TypedDict structures used throughout
the codebase.
"""

from typing import Protocol, TypedDict


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


# Configuration TypedDict definitions
class StrollConfig(TypedDict, total=False):
    """Stroll defaults section."""
    mode: str
    zoomLevel: float
    speedLevel: float


class LoggingConfig(TypedDict, total=False):
    """Logging configuration section."""
    level: str
    file: str
    maxBytes: int
    backupCount: int
    console: bool
    consoleLevel: str
    raiseOnError: bool
