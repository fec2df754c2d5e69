#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/region/renderer.py

import json

from pixlab.core.conversions import rgb_to_hex
from pixlab.core.types import ColorRegion
from pixlab.shared.preview import label, print_color_block, print_field


def render_region(region: ColorRegion, fmt: str = "text", include_pixels: bool = False) -> None:
    if fmt == "json":
        print(json.dumps(region.to_dict(include_pixels=include_pixels), indent=2))
        return

    b = region.bounds
    lab = region.lab_color
    print()
    print_color_block(rgb_to_hex(*region.average_color), label("average"))
    print_field(label("pixels"), f"{region.pixel_count}{' (truncated)' if region.truncated else ''}")
    print_field(label("bounds"), f"({b.min_x}, {b.min_y}) - ({b.max_x}, {b.max_y})")
    print_field(label("coverage"), f"{region.coverage:.2f}%")
    print_field(label("confidence"), f"{region.confidence:.0f}")
    print_field(label("lab"), f"lab({lab.L:.4f} {lab.a:.4f} {lab.b:.4f})")
    if include_pixels:
        print_field(label("pixel list"), " ".join(f"{x},{y}" for x, y in region.pixels))
    print()
