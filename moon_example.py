"""
Moon Phase Preview Example

Renders the moon phase widget for a timestamp and saves it as PNG, handy
for checking the drawing without a display attached.

Usage:
    python moon_example.py [--timestamp UNIX] [--diameter PX] [--output FILE]
"""

import argparse
import math
import sys
import time

from moonphase.config import load_config_from_env
from moonphase.display import MoonPhaseRenderer
from moonphase.logger import log, log_error, set_silent_mode
from moonphase.phase_calculator import current_moment, get_moon_info


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a moon phase preview PNG")
    parser.add_argument(
        "--timestamp", type=int, help="Unix timestamp to render (default: now)"
    )
    parser.add_argument("--diameter", type=float, help="Disc diameter in pixels")
    parser.add_argument(
        "--output", default="moon_preview.png", help="Output PNG file path"
    )
    parser.add_argument(
        "--disc-only", action="store_true", help="Save only the disc, no title bar"
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress log output")
    return parser.parse_args(argv)


def format_time(timestamp):
    """Format timestamp for display."""
    return time.strftime("%Y-%m-%d %H:%M UTC", time.gmtime(timestamp))


def main(argv=None):
    """Render a preview image, returns process exit code."""
    args = parse_args(argv)
    set_silent_mode(args.quiet)

    moment = args.timestamp if args.timestamp is not None else current_moment()
    if args.diameter is not None and (
        not math.isfinite(args.diameter) or args.diameter <= 0
    ):
        log_error(f"Diameter must be a positive number, got {args.diameter}")
        return 1

    log(f"Generating moon display for {format_time(moment)}...")

    moon_info = get_moon_info(moment)
    renderer = MoonPhaseRenderer(config=load_config_from_env())

    if args.disc_only:
        image = renderer.render_disc(moon_info, args.diameter)
    else:
        image = renderer.render_moon_display(moon_info, args.diameter)

    try:
        image.save(args.output)
    except OSError as e:
        log_error(f"Could not save {args.output}: {e}")
        return 1

    log(f"{moon_info['name']} ({moon_info['percentage']}% lit)")
    log(f"Moon preview saved as {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
