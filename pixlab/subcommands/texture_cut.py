#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/texture_cut.py

import argparse
import sys

from pixlab.core import config as c
from pixlab.core.types import CutSettings, TransformSettings
from pixlab.logic.texture.engine import texture_cut
from pixlab.logic.texture.patterns import create_pattern_texture
from pixlab.shared.imageio import load_buffer, save_buffer
from pixlab.shared.logger import log, PixlabArgumentParser
from pixlab.shared.progress import log_progress
from pixlab.shared.sanitizer import INPUT_HANDLERS


def handle_texture_cut_command(args: argparse.Namespace) -> None:
    base = load_buffer(args.input)
    if args.texture:
        texture = load_buffer(args.texture)
    else:
        texture = create_pattern_texture(
            args.pattern,
            base.width,
            base.height,
            color=args.color,
            spacing=args.spacing,
            seed=args.seed,
        )
        log("info", f"generated {args.pattern} texture {base.width}x{base.height}")

    cut_settings = CutSettings(amount=args.amount, feather_px=args.feather, invert=args.invert)
    transform_settings = TransformSettings(scale=args.scale, rotation=args.rotation, tile=args.tile)
    result = texture_cut(base, texture, cut_settings, transform_settings, on_progress=log_progress)
    path = save_buffer(result, args.output)
    log("success", f"texture cut saved to {path}")


def get_texture_cut_parser() -> argparse.ArgumentParser:
    parser = PixlabArgumentParser(
        prog="pixlab texture-cut",
        description="pixlab texture-cut: cut an image's alpha with a texture's brightness",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="base image")
    parser.add_argument("-o", "--output", required=True, help="output image (.png or .webp)")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--texture", help="texture image")
    source.add_argument("--pattern", type=INPUT_HANDLERS["choice"], choices=c.PATTERN_KINDS,
                        help="generate a procedural texture instead")

    cut_group = parser.add_argument_group("cut")
    cut_group.add_argument("--amount", type=INPUT_HANDLERS["amount"], default=1.0,
                           help="cut strength 0-1 (default: 1)")
    cut_group.add_argument("-f", "--feather", type=INPUT_HANDLERS["feather"], default=0,
                           help=f"alpha blur radius 0-{c.FEATHER_MAX_RADIUS} px (default: 0)")
    cut_group.add_argument("--invert", action="store_true", help="cut bright areas instead of dark ones")

    transform_group = parser.add_argument_group("texture transform")
    transform_group.add_argument("--scale", type=INPUT_HANDLERS["scale"], default=1.0,
                                 help=f"scale about the image center {c.SCALE_RANGE[0]}-{c.SCALE_RANGE[1]}"
                                      " (default: 1)")
    transform_group.add_argument("--rotation", type=INPUT_HANDLERS["rotation"], default=0.0,
                                 help="rotation about the image center in degrees (default: 0)")
    transform_group.add_argument("--tile", action="store_true", help="repeat the texture instead of stretching it")

    pattern_group = parser.add_argument_group("pattern")
    pattern_group.add_argument("--color", type=INPUT_HANDLERS["hex"], default="#000000", help="pattern ink color")
    pattern_group.add_argument("--spacing", type=INPUT_HANDLERS["spacing"], default=10,
                               help="pattern spacing in px")
    pattern_group.add_argument("--seed", type=INPUT_HANDLERS["seed"], default=None, help="noise seed")
    return parser


def main() -> None:
    parser = get_texture_cut_parser()
    args = parser.parse_args(sys.argv[1:])
    handle_texture_cut_command(args)


if __name__ == "__main__":
    main()
