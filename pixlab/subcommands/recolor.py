#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/recolor.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.core.types import PaletteSettings, RecolorSettings
from pixlab.logic.palette.engine import extract_palette
from pixlab.logic.recolor.engine import describe_mappings, recolor_image
from pixlab.logic.recolor.renderer import render_mappings
from pixlab.shared.imageio import load_buffer, save_buffer
from pixlab.shared.logger import log, PixlabArgumentParser
from pixlab.shared.progress import log_progress
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_recolor_command(args: argparse.Namespace) -> None:
    buffer = load_buffer(args.input)
    palette = extract_palette(
        buffer,
        PaletteSettings(palette_size=args.size, algorithm=args.algorithm),
        on_progress=log_progress,
    )
    mappings = list(args.map)

    render_mappings(describe_mappings(palette, mappings), args.format)

    settings = RecolorSettings(
        blend_mode=args.blend,
        tolerance=args.tolerance,
        preserve_transparency=not args.no_preserve_transparency,
    )
    result = recolor_image(buffer, palette, mappings, settings, on_progress=log_progress)
    path = save_buffer(result, args.output)
    if args.format == "text":
        log("success", f"applied {len(mappings)} mapping(s), saved to {path}")


def get_recolor_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab recolor",
        description="pixlab recolor: replace palette colors of an image",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="source image")
    parser.add_argument("-o", "--output", required=True, help="output image (.png or .webp)")
    parser.add_argument("-m", "--map", action="append", required=True, type=INPUT_HANDLERS["mapping"],
                        metavar="SLOT=HEX", help="replace palette slot SLOT with HEX, in the order given (repeatable)")
    parser.add_argument("-n", "--size", type=INPUT_HANDLERS["palette_size"], default=c.PALETTE_SIZES[0],
                        help=f"palette size used to number the slots (default: {c.PALETTE_SIZES[0]})")
    parser.add_argument("-a", "--algorithm", type=INPUT_HANDLERS["choice"], choices=c.PALETTE_ALGORITHMS,
                        default="smart", help="palette algorithm used to number the slots (default: smart)")
    parser.add_argument("-b", "--blend", type=INPUT_HANDLERS["choice"], choices=c.BLEND_MODES, default="replace",
                        help="how the new color combines with the old (default: replace)")
    parser.add_argument("-t", "--tolerance", type=INPUT_HANDLERS["tolerance"], default=10.0,
                        help="per-channel match tolerance 0-100 (default: 10)")
    parser.add_argument("--no-preserve-transparency", action="store_true",
                        help="also recolor partially transparent pixels")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="mapping report format")
    return parser


def main() -> None:
    parser = get_recolor_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_recolor_command(args)


if __name__ == "__main__":
    main()
