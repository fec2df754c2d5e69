#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/knockout.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.core.errors import NoColorsSelected
from pixlab.core.types import KnockoutSettings
from pixlab.logic.knockout.engine import knockout_colors, pick_color
from pixlab.shared.imageio import load_buffer, save_buffer
from pixlab.shared.logger import log, PixlabArgumentParser
from pixlab.shared.progress import log_progress
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_knockout_command(args: argparse.Namespace) -> None:
    buffer = load_buffer(args.input)

    colors = list(args.color or [])
    for x, y in args.pick or []:
        picked = pick_color(buffer, x, y)
        log("info", f"picked {picked.hex} at ({x}, {y})")
        colors.append(picked)
    if not colors:
        raise NoColorsSelected()

    settings = KnockoutSettings(
        tolerance=args.tolerance,
        replace_mode=args.mode,
        feather=args.feather,
        anti_aliasing=not args.no_anti_aliasing,
    )
    result = knockout_colors(buffer, colors, settings, on_progress=log_progress)
    path = save_buffer(result, args.output)
    log("success", f"knocked out {len(colors)} color(s), saved to {path}")


def get_knockout_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab knockout",
        description="pixlab knockout: remove selected colors from an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("-o", "--output", required=True, help="output image (.png or .webp)")
    parser.add_argument("-c", "--color", action="append", type=INPUT_HANDLERS["hex"],
                        help="hex color to knock out (repeatable)")
    parser.add_argument("-p", "--pick", action="append", type=INPUT_HANDLERS["point"], metavar="X,Y",
                        help="knock out the color under this pixel (repeatable)")
    parser.add_argument("-t", "--tolerance", type=INPUT_HANDLERS["tolerance"], default=10.0,
                        help="match tolerance 0-100 (default: 10)")
    parser.add_argument("-m", "--mode", type=INPUT_HANDLERS["choice"], choices=c.REPLACE_MODES,
                        default="transparency", help="what matched pixels become (default: transparency)")
    parser.add_argument("-f", "--feather", type=INPUT_HANDLERS["feather"], default=0,
                        help=f"alpha blur radius 0-{c.FEATHER_MAX_RADIUS} px (default: 0)")
    parser.add_argument("--no-anti-aliasing", action="store_true",
                        help="hard edges instead of soft edges along the match boundary")
    return parser


def main() -> None:
    parser = get_knockout_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_knockout_command(args)


if __name__ == "__main__":
    main()
