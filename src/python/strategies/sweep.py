"""Sweep strategy: deterministic raster motion across the image."""

import logging

from geometry import Position
from strategies.base import MotionStrategy

logger = logging.getLogger(__name__)


class SweepStrategy(MotionStrategy):
    """Move horizontally to a bound, step down/up one viewport height, repeat.

    Horizontal and vertical motion never happen in the same tick: while a
    vertical step is owed, x holds still.
    """

    def __init__(self) -> None:
        super().__init__()
        self.reset()

    def reset(self) -> None:
        self._direction_x = 1  # 1 for right, -1 for left
        self._direction_y = 1  # 1 for down, -1 for up
        self._vertical_step_remaining = 0.0

    @property
    def direction_x(self) -> int:
        return self._direction_x

    @property
    def direction_y(self) -> int:
        return self._direction_y

    @property
    def vertical_step_remaining(self) -> float:
        return self._vertical_step_remaining

    def next_position(self, delta_seconds: float, position: Position) -> Position:
        stroll = self.stroll
        viewport = stroll.get_viewport_size()
        centered = stroll.centered_position
        distance = stroll.pixels_per_second * delta_seconds

        step_pending = self._vertical_step_remaining != 0
        next_x = position.x
        next_y = position.y

        if not step_pending:
            next_x += self._direction_x * distance

        if not stroll.can_pan_x:
            next_x = centered.x
        # Strict checks: landing exactly on a bound bounces on the next tick
        elif next_x < stroll.min_x or next_x > stroll.max_x:
            next_x = stroll.min_x if next_x < stroll.min_x else stroll.max_x
            self._direction_x *= -1
            self._vertical_step_remaining = viewport.height
            logger.debug("Sweep hit x bound at %.2f, direction_x=%d", next_x, self._direction_x)

        if not stroll.can_pan_y:
            next_y = centered.y
            # Nothing to step through; drop the owed step so x resumes
            if step_pending:
                self._vertical_step_remaining = 0.0
        elif step_pending:
            y_move = min(self._vertical_step_remaining, distance)
            next_y = position.y + self._direction_y * y_move
            self._vertical_step_remaining -= y_move

            # A y bound cancels whatever is left of the committed step.
            # Strict like x: ending exactly on the bound is not a hit yet.
            if next_y < stroll.min_y:
                next_y = stroll.min_y
                self._direction_y = 1
                self._vertical_step_remaining = 0.0
            elif next_y > stroll.max_y:
                next_y = stroll.max_y
                self._direction_y = -1
                self._vertical_step_remaining = 0.0

        return Position(next_x, next_y)
