#!/usr/bin/env python3
"""
Stroll Trace CLI - Run a stroll controller for a number of frames

Prints the image bounding box per frame so motion patterns, bounces and
settings behaviour can be inspected without a renderer.
"""

import os
import sys
import argparse

# Add src/python directory to Python path
script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(os.path.dirname(script_dir), 'src', 'python')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from enums import StrollMode
from geometry import Dimensions
from logging_config import get_logger, setup_logging
from random_source import NumpyRandomSource
from stroll_factory import create_stroll


def parse_size(value):
    """Parse a WIDTHxHEIGHT string into Dimensions"""
    try:
        width, height = value.lower().split('x')
        return Dimensions(float(width), float(height))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got '{value}'")


def main():
    parser = argparse.ArgumentParser(description='Trace the pan position of a stroll controller')
    parser.add_argument('--viewport', '-v', type=parse_size, default=Dimensions(800, 600),
                        help='Viewport size as WIDTHxHEIGHT (default: 800x600)')
    parser.add_argument('--image', '-i', type=parse_size, required=True,
                        help='Original image size as WIDTHxHEIGHT')
    parser.add_argument('--mode', '-m', choices=[m.value for m in StrollMode],
                        help='Motion strategy (default from config)')
    parser.add_argument('--zoom', '-z', type=float, help='Zoom level (default from config)')
    parser.add_argument('--speed', '-s', type=float, help='Viewport widths per second (default from config)')
    parser.add_argument('--frames', '-n', type=int, default=120, help='Number of frames to run')
    parser.add_argument('--fps', type=float, default=60.0, help='Frames per second')
    parser.add_argument('--seed', type=int, help='Seed for the random source')

    args = parser.parse_args()
    if args.fps <= 0:
        print(f"Error: fps must be positive, got {args.fps}")
        return 1

    setup_logging()
    logger = get_logger("stroll-trace")

    stroll = create_stroll(
        args.viewport,
        args.image,
        mode=args.mode,
        zoom_level=args.zoom,
        speed_level=args.speed,
        random_source=NumpyRandomSource(args.seed),
    )

    scaled = stroll.get_scaled_size()
    print(f"Scaled size: {scaled.width:.1f}x{scaled.height:.1f}, pannable: {stroll.is_pannable()}")

    delta = 1.0 / args.fps
    for frame in range(args.frames):
        stroll.tick(delta)
        box = stroll.get_bounding_box()
        print(f"{frame:5d}  x={box.x:10.2f}  y={box.y:10.2f}")

    logger.info("Traced %d frames at %.1f fps", args.frames, args.fps)
    return 0

if __name__ == "__main__":
    sys.exit(main())
