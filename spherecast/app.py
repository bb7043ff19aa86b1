"""The sphere demo: renders a lit, bouncing sphere in a window."""

from __future__ import annotations

import argparse
import contextlib
import inspect
from dataclasses import replace
from pathlib import Path

from spherecast.graphics import EventType, PixelsWindow
from spherecast.logs import HtmlLog, default_log_path, error_report
from spherecast.raycast import (
    WINDOW_X_SIZE,
    PixelNotSetError,
    SphereMover,
    default_coordsys,
    default_scene,
    default_sphere,
    render_frame,
    rotate_light,
)

PIXEL_NOT_SET = 1


def _raycast_sphere(frames: int | None, size: int, log: HtmlLog | None) -> int:
    if log is not None:
        caller = inspect.currentframe()
        outer = caller.f_back if caller is not None else None
        if outer is not None:
            log.report(outer.f_code.co_name, outer.f_code.co_filename, outer.f_lineno, "run")

    coordsys = default_coordsys(size, size)
    scene = default_scene()
    sphere = default_sphere()
    mover = SphereMover()

    window = PixelsWindow(size, size)
    try:
        count = 0
        while window.is_open() and (frames is None or count < frames):
            if EventType.CLOSED in list(window.poll_events()):
                window.close()
                break

            try:
                render_frame(scene, sphere, coordsys, window)
            except PixelNotSetError as err:
                error_report(str(err), "run", __file__, 1, log)
                return PIXEL_NOT_SET

            window.pixels_update()
            window.pixels_draw()
            window.display()

            scene = replace(scene, light_src=rotate_light(scene.light_src))
            sphere = mover.step(sphere)
            count += 1
    finally:
        window.close()

    return 0


def run(
    frames: int | None = None,
    size: int = WINDOW_X_SIZE,
    log_path: str | Path | None = None,
) -> int:
    """Show the demo for ``frames`` frames, or until the window is closed; return an exit code."""
    with contextlib.ExitStack() as stack:
        log = stack.enter_context(HtmlLog(log_path)) if log_path is not None else None
        return _raycast_sphere(frames, size, log)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Render a lit sphere by ray casting.")
    parser.add_argument("--frames", type=int, default=None, help="number of frames to render")
    parser.add_argument("--size", type=int, default=WINDOW_X_SIZE, help="window side in pixels")
    parser.add_argument(
        "--log",
        nargs="?",
        const=str(default_log_path()),
        default=None,
        help="write an HTML log (to the default location when no path is given)",
    )
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")

    return run(frames=args.frames, size=args.size, log_path=args.log)


if __name__ == "__main__":
    raise SystemExit(main())