"""
Stroll: frame-by-frame pan position of an oversized image inside a viewport.

The controller owns the geometry (viewport, scaled image, current position)
and delegates the choice of the next position to a single motion strategy.
Invariants after every tick and every settings update:
- zoom_level >= 1
- a non-pannable axis sits exactly at (viewport - scaled) / 2
- a pannable axis stays within [viewport - scaled, 0]
"""

import logging

from geometry import BoundingBox, Dimensions, Position, SettingsUpdate
from strategies.base import MotionStrategy

logger = logging.getLogger(__name__)

# Tolerance against the viewport size for the pannability test
PANNABLE_TOLERANCE = 1e-3


class StrollController:
    """Pan/zoom state for presenting an oversized image inside a fixed viewport."""

    _viewport_size: Dimensions
    _original_image_size: Dimensions
    _zoom_level: float
    _speed_level: float  # viewport widths per second
    _scaled_size: Dimensions
    _position: Position
    _strategy: MotionStrategy

    def __init__(
        self,
        viewport_size: Dimensions,
        original_image_size: Dimensions,
        zoom_level: float,
        speed_level: float,
        strategy: MotionStrategy | None = None,
    ) -> None:
        """Initialize the controller and attach its motion strategy.

        Args:
            viewport_size: Size of the visible area in pixels
            original_image_size: Native size of the source image
            zoom_level: Scale factor applied to the viewport width (clamped to >= 1)
            speed_level: Velocity in viewport widths per second
            strategy: Motion strategy; a RandomDirectionStrategy if omitted
        """
        self._viewport_size = Dimensions(viewport_size.width, viewport_size.height)
        self._original_image_size = Dimensions(original_image_size.width, original_image_size.height)
        self._zoom_level = max(1.0, zoom_level)
        self._speed_level = speed_level

        self._scaled_size = self._calculate_scaled_size()
        self._position = self.centered_position

        if strategy is None:
            from strategies.random_direction import RandomDirectionStrategy
            strategy = RandomDirectionStrategy()
        self._strategy = strategy
        self._strategy.attach(self)

        logger.debug(
            "Stroll created: viewport=%sx%s image=%sx%s zoom=%.3f speed=%.3f strategy=%s",
            self._viewport_size.width, self._viewport_size.height,
            self._original_image_size.width, self._original_image_size.height,
            self._zoom_level, self._speed_level, type(strategy).__name__,
        )

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    def _calculate_scaled_size(self) -> Dimensions:
        # Width-driven: the viewport height never takes part in scaling
        if self._original_image_size.is_degenerate or self._viewport_size.width == 0:
            return Dimensions(0.0, 0.0)
        aspect_ratio = self._original_image_size.width / self._original_image_size.height
        scaled_width = self._viewport_size.width * self._zoom_level
        return Dimensions(scaled_width, scaled_width / aspect_ratio)

    @property
    def centered_position(self) -> Position:
        """Position that centers the scaled image in the viewport."""
        return Position(
            (self._viewport_size.width - self._scaled_size.width) / 2,
            (self._viewport_size.height - self._scaled_size.height) / 2,
        )

    @property
    def can_pan_x(self) -> bool:
        """Whether the scaled image is wider than the viewport."""
        return self._scaled_size.width > self._viewport_size.width

    @property
    def can_pan_y(self) -> bool:
        """Whether the scaled image is taller than the viewport."""
        return self._scaled_size.height > self._viewport_size.height

    @property
    def min_x(self) -> float:
        return self._viewport_size.width - self._scaled_size.width

    @property
    def min_y(self) -> float:
        return self._viewport_size.height - self._scaled_size.height

    # Maximal scroll on each axis is the image origin at the viewport origin
    max_x = 0.0
    max_y = 0.0

    @property
    def pixels_per_second(self) -> float:
        # Both axes use the viewport width
        return self._speed_level * self._viewport_size.width

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def speed_level(self) -> float:
        return self._speed_level

    @property
    def position(self) -> Position:
        return self._position

    @property
    def strategy(self) -> MotionStrategy:
        return self._strategy

    def is_pannable(self) -> bool:
        """True if either axis has travel room beyond the tolerance."""
        pannable_x = self._scaled_size.width > self._viewport_size.width + PANNABLE_TOLERANCE
        pannable_y = self._scaled_size.height > self._viewport_size.height + PANNABLE_TOLERANCE
        return pannable_x or pannable_y

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def tick(self, delta_seconds: float) -> None:
        """Advance the image position by one frame.

        Args:
            delta_seconds: Elapsed time since the previous frame
        """
        if not self.is_pannable():
            self._position = self.centered_position
            return
        self._position = self._strategy.next_position(delta_seconds, self._position)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def update_settings(
        self,
        viewport_size: Dimensions | None = None,
        zoom_level: float | None = None,
        speed_level: float | None = None,
        original_image_size: Dimensions | None = None,
    ) -> None:
        """Apply any subset of new settings and keep the visible point in place.

        A zoom or image change is scene-defining; a viewport change is tracked
        separately; a speed change is neither and leaves the position alone.
        """
        viewport_changed = False
        scene_changed = False
        old_viewport_size = self._viewport_size

        if viewport_size is not None and viewport_size != self._viewport_size:
            self._viewport_size = Dimensions(viewport_size.width, viewport_size.height)
            viewport_changed = True

        if zoom_level is not None:
            clamped_zoom = max(1.0, zoom_level)
            if clamped_zoom != self._zoom_level:
                self._zoom_level = clamped_zoom
                scene_changed = True

        if speed_level is not None and speed_level != self._speed_level:
            self._speed_level = speed_level

        if original_image_size is not None and original_image_size != self._original_image_size:
            self._original_image_size = Dimensions(original_image_size.width, original_image_size.height)
            scene_changed = True

        old_scaled_size = self._scaled_size
        old_position = self._position
        self._scaled_size = self._calculate_scaled_size()

        if scene_changed or viewport_changed:
            self._position = self._reproject_position(old_position, old_scaled_size, old_viewport_size)
            logger.debug(
                "Settings changed (scene=%s, viewport=%s): scaled=%sx%s position=(%.2f, %.2f)",
                scene_changed, viewport_changed,
                self._scaled_size.width, self._scaled_size.height,
                self._position.x, self._position.y,
            )

        update = SettingsUpdate(
            viewport_size=viewport_size,
            zoom_level=zoom_level,
            speed_level=speed_level,
            original_image_size=original_image_size,
        )
        self._strategy.on_settings_changed(scene_changed, viewport_changed, update)

    def _reproject_position(
        self,
        old_position: Position,
        old_scaled_size: Dimensions,
        old_viewport_size: Dimensions,
    ) -> Position:
        """Carry the visible center over to the new scaled size.

        The old center is measured against the viewport that showed it and
        placed back in the middle of the viewport now in effect.
        """
        if old_scaled_size.is_degenerate or self._scaled_size.is_degenerate:
            return self.centered_position

        ratio_x = (-old_position.x + old_viewport_size.width / 2) / old_scaled_size.width
        ratio_y = (-old_position.y + old_viewport_size.height / 2) / old_scaled_size.height

        viewport = self._viewport_size
        x = -(ratio_x * self._scaled_size.width) + viewport.width / 2
        y = -(ratio_y * self._scaled_size.height) + viewport.height / 2
        return self.clamp_position(Position(x, y))

    def clamp_position(self, position: Position) -> Position:
        """Clamp pannable axes into range and center the others."""
        centered = self.centered_position
        if self.can_pan_x:
            x = min(self.max_x, max(self.min_x, position.x))
        else:
            x = centered.x
        if self.can_pan_y:
            y = min(self.max_y, max(self.min_y, position.y))
        else:
            y = centered.y
        return Position(x, y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_bounding_box(self) -> BoundingBox:
        """Where the scaled image sits relative to the viewport."""
        return BoundingBox(
            x=self._position.x,
            y=self._position.y,
            width=self._scaled_size.width,
            height=self._scaled_size.height,
        )

    def get_viewport_in_original_image_scale(self) -> BoundingBox:
        """Map the visible viewport rectangle into original image pixels.

        Used by renderers that sample the source image at native resolution.
        A degenerate scaled size maps to the whole original image.
        """
        if self._scaled_size.is_degenerate:
            return BoundingBox(0.0, 0.0, self._original_image_size.width, self._original_image_size.height)

        ratio_x = self._original_image_size.width / self._scaled_size.width
        ratio_y = self._original_image_size.height / self._scaled_size.height
        return BoundingBox(
            x=-self._position.x * ratio_x,
            y=-self._position.y * ratio_y,
            width=self._viewport_size.width * ratio_x,
            height=self._viewport_size.height * ratio_y,
        )

    def get_scaled_size(self) -> Dimensions:
        return self._scaled_size

    def get_viewport_size(self) -> Dimensions:
        return self._viewport_size

    def get_original_image_size(self) -> Dimensions:
        return self._original_image_size
