#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/palette/renderer.py

import json
from typing import List

from pixlab.core.types import ColorInfo
from pixlab.shared.preview import label, print_color_block


def render_palette(palette: List[ColorInfo], fmt: str = "text") -> None:
    """Print an extracted palette as swatches or JSON."""
    if fmt == "json":
        print(json.dumps([info.to_dict() for info in palette], indent=2))
        return

    print()
    for i, info in enumerate(palette):
        title = label(f"slot {i:>2}")
        details = f"{info.percentage:6.2f}%  {info.name} ({info.category})"
        print_color_block(info.hex, title, details)
    print()
