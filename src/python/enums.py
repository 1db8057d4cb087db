"""
Enumerations for the stroll package using Python 3.11+ StrEnum.
"""

from enum import StrEnum


class StrollMode(StrEnum):
    """Motion strategies available to a stroll controller.

    Attributes:
        SWEEP: Deterministic raster motion, horizontal runs joined by vertical steps
        RANDOM: Stochastic motion with randomized reflections at the bounds
    """
    SWEEP = "sweep"
    RANDOM = "random"
