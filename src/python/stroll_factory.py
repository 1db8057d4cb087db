"""Factory for creating stroll controllers based on configuration."""

import logging

from config_manager import config
from custom_types import RandomSource
from enums import StrollMode
from geometry import Dimensions
from strategies import MotionStrategy, RandomDirectionStrategy, SweepStrategy
from stroll import StrollController

logger = logging.getLogger(__name__)


def create_strategy(mode: StrollMode | str, random_source: RandomSource | None = None) -> MotionStrategy:
    """Create a motion strategy by mode name.

    Raises:
        ValueError: If the mode is unknown
    """
    try:
        mode = StrollMode(str(mode).lower())
    except ValueError:
        raise ValueError(
            f"Unknown stroll mode: {mode}. "
            f"Available: {', '.join(m.value for m in StrollMode)}"
        ) from None

    if mode == StrollMode.SWEEP:
        return SweepStrategy()
    return RandomDirectionStrategy(random_source)


def create_stroll(
    viewport_size: Dimensions,
    original_image_size: Dimensions,
    mode: StrollMode | str | None = None,
    zoom_level: float | None = None,
    speed_level: float | None = None,
    random_source: RandomSource | None = None,
) -> StrollController:
    """Create a stroll controller, filling omitted values from config.

    Args:
        viewport_size: Size of the visible area in pixels
        original_image_size: Native size of the source image
        mode: 'sweep' or 'random' (config default if None)
        zoom_level: Zoom level (config default if None)
        speed_level: Viewport widths per second (config default if None)
        random_source: Random source for stochastic strategies

    Returns:
        Configured StrollController

    Raises:
        ValueError: If the mode is unknown
    """
    if mode is None:
        mode = config.get_default_mode()
    if zoom_level is None:
        zoom_level = config.get_default_zoom_level()
    if speed_level is None:
        speed_level = config.get_default_speed_level()

    strategy = create_strategy(mode, random_source)
    logger.info("Creating %s stroll (zoom=%.2f, speed=%.3f)", mode, zoom_level, speed_level)
    return StrollController(viewport_size, original_image_size, zoom_level, speed_level, strategy=strategy)


def get_available_modes() -> list[dict]:
    """Get list of available stroll modes with metadata."""
    return [
        {
            "mode": StrollMode.SWEEP.value,
            "name": "Sweep",
            "description": "Raster motion: horizontal runs joined by one-viewport vertical steps",
        },
        {
            "mode": StrollMode.RANDOM.value,
            "name": "Random",
            "description": "Free motion with randomized reflections at the bounds",
        },
    ]
