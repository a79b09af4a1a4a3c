# duskwater/cli.py
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import Sequence

from duskwater.config import AppSettings

LOG_FORMAT = "[%(name)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duskwater",
        description="An ocean under a sky that follows the sun.",
    )
    parser.add_argument("--width", type=int, help="window width in pixels")
    parser.add_argument("--height", type=int, help="window height in pixels")
    parser.add_argument(
        "--sun-angle",
        type=float,
        help="initial slider position, 0 (sun below the horizon) to 100 (overhead)",
    )
    parser.add_argument("--star-seed", type=int, help="seed for the starfield")
    parser.add_argument(
        "--no-sky", action="store_true", help="use the flat background instead"
    )
    parser.add_argument(
        "--no-water", action="store_true", help="use the flat water plane instead"
    )
    parser.add_argument(
        "--skybox", action="store_true", help="draw the tinted skybox sphere"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(
    args: argparse.Namespace, base: AppSettings | None = None
) -> AppSettings:
    settings = base or AppSettings()

    window = settings.window
    if args.width is not None:
        window = replace(window, width=args.width)
    if args.height is not None:
        window = replace(window, height=args.height)

    controls = settings.controls
    if args.sun_angle is not None:
        controls = replace(controls, initial_sun_angle=args.sun_angle)

    starfield = settings.starfield
    if args.star_seed is not None:
        starfield = replace(starfield, seed=args.star_seed)

    sky = settings.sky
    if args.no_sky:
        sky = replace(sky, enabled=False)
    if args.skybox:
        sky = replace(sky, skybox_enabled=True)

    water = settings.water
    if args.no_water:
        water = replace(water, enabled=False)

    return replace(
        settings,
        window=window,
        controls=controls,
        starfield=starfield,
        sky=sky,
        water=water,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    # Imported late so --help works without a display stack
    from duskwater.core.application import Application

    return Application(settings_from_args(args)).run()
