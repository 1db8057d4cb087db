"""Geometry value types for the stroll motion controller.

Coordinates are viewport pixels. A Position is the offset of the image origin
relative to the viewport origin, so negative values mean the image has
scrolled left/up.
"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Dimensions:
    """Width and height in pixels."""
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """True if either side is zero."""
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class Position:
    """Signed x/y offset in viewport pixel coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Position plus size of the (possibly oversized) image.

    Attributes:
        x: Image origin x relative to the viewport
        y: Image origin y relative to the viewport
        width: Scaled image width
        height: Scaled image height
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> Dimensions:
        return Dimensions(self.width, self.height)


@dataclass(frozen=True)
class Direction:
    """Motion direction, either the zero vector or unit length."""
    dx: float = 0.0
    dy: float = 0.0

    @property
    def length(self) -> float:
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0

    def normalized(self) -> "Direction":
        """Return the unit vector, or the zero vector when there is no length."""
        length = self.length
        if length == 0:
            return Direction(0.0, 0.0)
        return Direction(self.dx / length, self.dy / length)


ZERO_DIRECTION = Direction(0.0, 0.0)


@dataclass(frozen=True)
class SettingsUpdate:
    """Raw values passed to update_settings; None means unchanged."""
    viewport_size: Optional[Dimensions] = None
    zoom_level: Optional[float] = None
    speed_level: Optional[float] = None
    original_image_size: Optional[Dimensions] = None
