"""Stroll view controller: Qt signal adapter around a StrollController."""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from geometry import BoundingBox, Dimensions
from stroll import StrollController

logger = logging.getLogger(__name__)


class StrollViewController(QObject):
    """Publishes stroll frames and settings changes to a Qt renderer.

    The controller does not own a timer. The animation driver calls
    advance() with the elapsed time for each frame.
    """

    frame_updated = pyqtSignal(object)
    settings_changed = pyqtSignal()
    pannable_changed = pyqtSignal(bool)

    def __init__(self, stroll: StrollController) -> None:
        """Initialize StrollViewController.

        Args:
            stroll: The motion controller to drive
        """
        super().__init__()
        self.stroll = stroll
        self._pannable: bool = stroll.is_pannable()

    def advance(self, delta_seconds: float) -> BoundingBox:
        """Advance the stroll by one frame and publish the new bounding box.

        Args:
            delta_seconds: Elapsed time since the previous frame

        Returns:
            BoundingBox: The image placement for this frame
        """
        self.stroll.tick(delta_seconds)
        box = self.stroll.get_bounding_box()
        self.frame_updated.emit(box)
        return box

    def update_settings(
        self,
        viewport_size: Dimensions | None = None,
        zoom_level: float | None = None,
        speed_level: float | None = None,
        original_image_size: Dimensions | None = None,
    ) -> None:
        """Forward a settings change and notify listeners."""
        self.stroll.update_settings(
            viewport_size=viewport_size,
            zoom_level=zoom_level,
            speed_level=speed_level,
            original_image_size=original_image_size,
        )
        self.settings_changed.emit()

        pannable = self.stroll.is_pannable()
        if pannable != self._pannable:
            self._pannable = pannable
            logger.debug("Pannable changed to %s", pannable)
            self.pannable_changed.emit(pannable)

    def resize_viewport(self, width: float, height: float) -> None:
        self.update_settings(viewport_size=Dimensions(width, height))

    def set_zoom_level(self, zoom_level: float) -> None:
        self.update_settings(zoom_level=zoom_level)

    def set_speed_level(self, speed_level: float) -> None:
        self.update_settings(speed_level=speed_level)

    def set_image_size(self, width: float, height: float) -> None:
        """Switch to an image of a different native size."""
        self.update_settings(original_image_size=Dimensions(width, height))

    def get_bounding_box(self) -> BoundingBox:
        return self.stroll.get_bounding_box()

    def get_source_rect(self) -> BoundingBox:
        """Visible region in original image pixels, for native-resolution sampling."""
        return self.stroll.get_viewport_in_original_image_scale()

    def is_pannable(self) -> bool:
        return self._pannable
