#!/usr/bin/env python3
"""Simulate a trackball drag across a viewport.

This script demonstrates the full interaction path: pointer positions are
turned into picking rays by an orbit camera, the virtual trackball maps the
pair of rays to a rotation, and the rotation is applied to the camera.

Usage:
    python -m examples.trackball_drag [options]

Options:
    --width WIDTH       Viewport width in pixels (default: 800)
    --height HEIGHT     Viewport height in pixels (default: 600)
    --start X Y         Pointer position where the drag starts (default: 400 300)
    --end X Y           Pointer position where the drag ends (default: 520 260)
    --steps STEPS       Number of intermediate pointer events (default: 4)
    --radius RADIUS     Trackball radius (default: 1.0)
    --distance DIST     Camera distance from the trackball (default: 3.0)
    --verbose           Log trackball decisions at DEBUG level

Example:
    python -m examples.trackball_drag --start 400 300 --end 780 300 --verbose
"""

from __future__ import annotations

import argparse
import logging
import math
import sys

from raypick import OrbitCamera, RaypickError, VirtualTrackball


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate a trackball drag across a viewport.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=800, help="Viewport width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Viewport height (default: 600)")
    parser.add_argument(
        "--start",
        type=float,
        nargs=2,
        default=(400.0, 300.0),
        metavar=("X", "Y"),
        help="Drag start in pixels (default: 400 300)",
    )
    parser.add_argument(
        "--end",
        type=float,
        nargs=2,
        default=(520.0, 260.0),
        metavar=("X", "Y"),
        help="Drag end in pixels (default: 520 260)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=4,
        help="Intermediate pointer events (default: 4)",
    )
    parser.add_argument("--radius", type=float, default=1.0, help="Trackball radius (default: 1.0)")
    parser.add_argument(
        "--distance",
        type=float,
        default=3.0,
        help="Camera distance from the trackball (default: 3.0)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args()


def simulate_drag(
    camera: OrbitCamera,
    trackball: VirtualTrackball,
    start: tuple[float, float],
    end: tuple[float, float],
    width: int,
    height: int,
    steps: int = 4,
) -> OrbitCamera:
    """Feed a straight pointer drag to the trackball frame by frame.

    Each frame rotates the camera by the drag since the previous frame, the
    way an event loop would.

    Returns:
        The camera after the last pointer event.
    """
    frames = max(1, steps + 1)
    last = start
    for i in range(1, frames + 1):
        f = i / frames
        current = (start[0] + f * (end[0] - start[0]), start[1] + f * (end[1] - start[1]))
        rotation = trackball.compute(
            camera.screen_ray(*last, width, height),
            camera.screen_ray(*current, width, height),
        )
        if rotation is not None:
            axis, angle = rotation
            # The scene should follow the pointer, so the camera turns the other way
            camera = camera.rotated(axis, -angle, pivot=trackball.position)
            print(
                f"  ({current[0]:7.1f}, {current[1]:7.1f})  "
                f"axis=({axis[0]:+.3f}, {axis[1]:+.3f}, {axis[2]:+.3f})  "
                f"angle={math.degrees(angle):6.2f} deg"
            )
        last = current
    return camera


def main() -> int:
    """Main entry point."""
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    camera = OrbitCamera(eye=(0.0, 0.0, -args.distance), aspect=args.width / args.height)

    try:
        trackball = VirtualTrackball(position=camera.target, radius=args.radius)
        print(f"Dragging from {tuple(args.start)} to {tuple(args.end)}")
        camera = simulate_drag(
            camera,
            trackball,
            tuple(args.start),
            tuple(args.end),
            args.width,
            args.height,
            steps=args.steps,
        )
    except (RaypickError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Final eye:    {camera.eye}")
    print(f"Final target: {camera.target}")
    print(f"Final up:     {camera.up}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
