"""Motion strategies for the stroll controller.

Main Components:
    MotionStrategy: Interface the controller delegates each tick to
    SweepStrategy: Deterministic raster (zig-zag) motion
    RandomDirectionStrategy: Free motion with randomized reflections

Usage:
    from strategies import SweepStrategy
    from stroll import StrollController

    stroll = StrollController(viewport, image, 2.0, 0.05, strategy=SweepStrategy())
"""

from strategies.base import MotionStrategy
from strategies.sweep import SweepStrategy
from strategies.random_direction import RandomDirectionStrategy

__all__ = ['MotionStrategy', 'SweepStrategy', 'RandomDirectionStrategy']
