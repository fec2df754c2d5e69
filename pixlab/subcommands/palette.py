#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/palette.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.core.types import PaletteSettings
from pixlab.logic.palette.engine import extract_palette
from pixlab.logic.palette.renderer import render_palette
from pixlab.shared.imageio import load_buffer
from pixlab.shared.logger import PixlabArgumentParser
from pixlab.shared.progress import log_progress
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_palette_command(args: argparse.Namespace) -> None:
    buffer = load_buffer(args.input)
    settings = PaletteSettings(palette_size=args.size, algorithm=args.algorithm)
    palette = extract_palette(buffer, settings, on_progress=log_progress)
    render_palette(palette, args.format)


def get_palette_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab palette",
        description="pixlab palette: extract the dominant colors of an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("-n", "--size", type=INPUT_HANDLERS["palette_size"], default=c.PALETTE_SIZES[0],
                        help=f"maximum number of colors, {c.PALETTE_SIZES[0]} or {c.PALETTE_SIZES[1]}"
                             f" (default: {c.PALETTE_SIZES[0]})")
    parser.add_argument("-a", "--algorithm", type=INPUT_HANDLERS["choice"], choices=c.PALETTE_ALGORITHMS,
                        default="smart", help="smart: coarse and fast, detailed: finer buckets (default: smart)")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    return parser


def main() -> None:
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_palette_command(args)


if __name__ == "__main__":
    main()
