"""Controllers package for the stroll package.

Main Components:
    StrollViewController: Qt signal adapter that publishes stroll frames

Usage:
    from controllers import StrollViewController
    from stroll_factory import create_stroll

    controller = StrollViewController(create_stroll(viewport, image))
    controller.frame_updated.connect(renderer.place_image)
    controller.advance(1 / 60)
"""

from controllers.stroll_view_controller import StrollViewController

__all__ = ['StrollViewController']
