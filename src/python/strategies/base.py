"""Base motion strategy interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from geometry import Position, SettingsUpdate

if TYPE_CHECKING:
    from stroll import StrollController


class MotionStrategy(ABC):
    """Decides where the image moves next and how it reacts at the bounds.

    A strategy is owned by exactly one StrollController. The controller
    attaches itself once its geometry is derived; from then on the strategy
    reads geometry through it and keeps its own motion state.
    """

    def __init__(self) -> None:
        self._stroll: "StrollController | None" = None

    @property
    def stroll(self) -> "StrollController":
        if self._stroll is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to a stroll")
        return self._stroll

    def attach(self, stroll: "StrollController") -> None:
        """Bind to the owning controller and derive the initial motion state."""
        self._stroll = stroll
        self.reset()

    def reset(self) -> None:
        """Derive the initial motion state from the controller geometry."""

    @abstractmethod
    def next_position(self, delta_seconds: float, position: Position) -> Position:
        """Return the position for this frame, respecting the axis bounds.

        Args:
            delta_seconds: Elapsed time since the previous frame
            position: Current image position

        Returns:
            Position: The new image position
        """
        pass

    def on_settings_changed(
        self,
        scene_changed: bool,
        viewport_changed: bool,
        update: SettingsUpdate,
    ) -> None:
        """Reconcile motion state after the controller re-derived its geometry.

        Args:
            scene_changed: Zoom level or image size changed
            viewport_changed: Viewport size changed
            update: Raw values passed to update_settings
        """
