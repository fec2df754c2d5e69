#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/knockout/renderer.py

import json

from pixlab.core.types import SelectedColor
from pixlab.shared.preview import label, print_color_block


def render_picked(x: int, y: int, color: SelectedColor, alpha: int, fmt: str = "text") -> None:
    if fmt == "json":
        print(json.dumps({"x": x, "y": y, "r": color.r, "g": color.g, "b": color.b,
                          "alpha": alpha, "hex": color.hex}, indent=2))
        return
    print()
    print_color_block(color.hex, label(f"({x}, {y})"), f"rgb({color.r}, {color.g}, {color.b})  alpha {alpha}")
    print()
