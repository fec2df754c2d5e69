#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/recolor/renderer.py

import json
from typing import List

from pixlab.core.types import MappingReport
from pixlab.shared.preview import label, print_color_block


def render_mappings(reports: List[MappingReport], fmt: str = "text") -> None:
    """Print each slot -> new color mapping with its perceptual distance."""
    if fmt == "json":
        print(json.dumps([
            {
                "slot": r.slot_index,
                "from": r.slot_hex,
                "to": r.new_hex,
                "deltaE": r.delta_e,
                "confidence": r.confidence,
                "indistinguishable": r.indistinguishable,
            }
            for r in reports
        ], indent=2))
        return

    print()
    for r in reports:
        level = "warning" if r.indistinguishable else "info"
        print_color_block(r.slot_hex, label(f"slot {r.slot_index:>2}", level))
        print_color_block(r.new_hex, label("  ->", level), f"deltaE {r.delta_e:.1f}  confidence {r.confidence}%")
    print()
