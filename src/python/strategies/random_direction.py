"""Random-bounce strategy: free motion with randomized reflections."""

import logging
import math

from custom_types import RandomSource
from geometry import Direction, Position, SettingsUpdate, ZERO_DIRECTION
from random_source import NumpyRandomSource
from strategies.base import MotionStrategy

logger = logging.getLogger(__name__)

# Tolerance used to decide which bound a position sits on
BOUND_TOLERANCE = 1e-3
MAX_REFLECTION_ATTEMPTS = 10


class RandomDirectionStrategy(MotionStrategy):
    """Move along a unit direction; on hitting a bound pick a new random one.

    The reflected component always points away from the bound that was hit,
    and after a single-wall hit the parallel component is fully randomized
    so the path does not repeat.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        super().__init__()
        self._random = random_source if random_source is not None else NumpyRandomSource()
        self._direction = ZERO_DIRECTION

    @property
    def direction(self) -> Direction:
        return self._direction

    def reset(self) -> None:
        self._direction = self._calculate_initial_direction(self.stroll.position)

    def _random_angle(self) -> float:
        return self._random.random() * 2 * math.pi

    def _calculate_initial_direction(self, position: Position) -> Direction:
        """Aim from the visible center towards a random point on the image."""
        stroll = self.stroll
        if not stroll.is_pannable():
            return ZERO_DIRECTION

        viewport = stroll.get_viewport_size()
        scaled = stroll.get_scaled_size()
        view_center_x = -position.x + viewport.width / 2
        view_center_y = -position.y + viewport.height / 2

        target_x = self._random.random() * scaled.width
        target_y = self._random.random() * scaled.height

        dx = target_x - view_center_x if stroll.can_pan_x else 0.0
        dy = target_y - view_center_y if stroll.can_pan_y else 0.0

        if dx == 0 and dy == 0:
            angle = self._random_angle()
            if stroll.can_pan_x:
                dx = math.cos(angle)
            if stroll.can_pan_y:
                dy = math.sin(angle)
            if dx == 0 and dy == 0:
                half = 0.5 if self._random.random() > 0.5 else -0.5
                if stroll.can_pan_x:
                    dx = half
                elif stroll.can_pan_y:
                    dy = half

        return Direction(dx, dy).normalized()

    def _reflected_component(self, at_max_bound: bool) -> float:
        # At the maximal-scroll bound push back negative, at the other push positive
        magnitude = self._random.random() * 0.7 + 0.3
        return -magnitude if at_max_bound else magnitude

    def _calculate_direction_after_bounce(
        self,
        position: Position,
        hit_x: int,
        hit_y: int,
    ) -> Direction:
        """Pick a new direction after a collision.

        Args:
            position: Clamped position at the bound
            hit_x: 1 for the max x bound, -1 for the min x bound, 0 for no hit
            hit_y: Same as hit_x for the y axis
        """
        stroll = self.stroll
        can_x = stroll.can_pan_x
        can_y = stroll.can_pan_y
        if not can_x and not can_y:
            return ZERO_DIRECTION

        new_dx = self._direction.dx
        new_dy = self._direction.dy

        if hit_x and can_x:
            new_dx = self._reflected_component(hit_x > 0)
        if hit_y and can_y:
            new_dy = self._reflected_component(hit_y > 0)

        # Single wall: fully randomize the component parallel to it
        if hit_x and not hit_y and can_y:
            new_dy = self._random.random() * 2 - 1
        elif hit_y and not hit_x and can_x:
            new_dx = self._random.random() * 2 - 1

        if not can_x:
            new_dx = 0.0
        if not can_y:
            new_dy = 0.0

        if new_dx == 0 and new_dy == 0:
            new_dx, new_dy = self._escape_direction(position, can_x, can_y)

        return Direction(new_dx, new_dy).normalized()

    def _escape_direction(self, position: Position, can_x: bool, can_y: bool) -> tuple[float, float]:
        """Find a nonzero direction when the reflection cancelled out."""
        stroll = self.stroll
        new_dx = new_dy = 0.0
        attempts = 0
        while attempts < MAX_REFLECTION_ATTEMPTS and new_dx == 0 and new_dy == 0:
            angle = self._random_angle()
            new_dx = math.cos(angle) if can_x else 0.0
            new_dy = math.sin(angle) if can_y else 0.0

            # A single pannable axis needs a usable magnitude
            if can_x and not can_y and abs(new_dx) < 0.1:
                new_dx = (1 if new_dx >= 0 else -1) * (self._random.random() * 0.5 + 0.5)
            if can_y and not can_x and abs(new_dy) < 0.1:
                new_dy = (1 if new_dy >= 0 else -1) * (self._random.random() * 0.5 + 0.5)
            attempts += 1

        if new_dx == 0 and new_dy == 0:
            logger.debug("Reflection still degenerate after %d attempts, using escape vector", attempts)
            if can_x:
                magnitude = self._random.random() * 0.5 + 0.3
                new_dx = -magnitude if position.x >= stroll.max_x - BOUND_TOLERANCE else magnitude
            if can_y:
                magnitude = self._random.random() * 0.5 + 0.3
                new_dy = -magnitude if position.y >= stroll.max_y - BOUND_TOLERANCE else magnitude
        return new_dx, new_dy

    def next_position(self, delta_seconds: float, position: Position) -> Position:
        stroll = self.stroll
        if self._direction.is_zero and stroll.is_pannable():
            self._direction = self._calculate_initial_direction(position)
            logger.debug("Reacquired direction (%.3f, %.3f)", self._direction.dx, self._direction.dy)

        distance = stroll.pixels_per_second * delta_seconds
        next_x = position.x + self._direction.dx * distance
        next_y = position.y + self._direction.dy * distance
        centered = stroll.centered_position

        hit_x = 0
        hit_y = 0
        if stroll.can_pan_x:
            if next_x < stroll.min_x:
                next_x, hit_x = stroll.min_x, -1
            elif next_x > stroll.max_x:
                next_x, hit_x = stroll.max_x, 1
        else:
            next_x = centered.x

        if stroll.can_pan_y:
            if next_y < stroll.min_y:
                next_y, hit_y = stroll.min_y, -1
            elif next_y > stroll.max_y:
                next_y, hit_y = stroll.max_y, 1
        else:
            next_y = centered.y

        next_position = Position(next_x, next_y)
        if hit_x or hit_y:
            self._direction = self._calculate_direction_after_bounce(next_position, hit_x, hit_y)
            logger.debug(
                "Bounce (x=%d, y=%d) at (%.2f, %.2f), new direction (%.3f, %.3f)",
                hit_x, hit_y, next_x, next_y, self._direction.dx, self._direction.dy,
            )
        return next_position

    def on_settings_changed(
        self,
        scene_changed: bool,
        viewport_changed: bool,
        update: SettingsUpdate,
    ) -> None:
        stroll = self.stroll
        if scene_changed:
            self._direction = self._calculate_initial_direction(stroll.position)
        elif viewport_changed:
            dx = self._direction.dx if stroll.can_pan_x else 0.0
            dy = self._direction.dy if stroll.can_pan_y else 0.0
            if dx != self._direction.dx or dy != self._direction.dy:
                if dx == 0 and dy == 0 and stroll.is_pannable():
                    self._direction = self._calculate_initial_direction(stroll.position)
                else:
                    self._direction = Direction(dx, dy).normalized()
            if not stroll.is_pannable():
                self._direction = ZERO_DIRECTION
