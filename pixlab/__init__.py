#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/__init__.py

__version__ = "0.1.0"

from pixlab.core.buffer import PixelBuffer
from pixlab.core.conversions import (
    get_color_category,
    get_color_name,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    quantize_color,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
)
from pixlab.core.difference import color_distance, delta_e_ciede2000, get_color_match_confidence
from pixlab.core.errors import (
    EmptyPalette,
    InvalidInput,
    InvalidSlotIndex,
    NoColorsSelected,
    NoMappings,
    NoMatch,
    OutOfBounds,
    PixlabError,
    ResourceLimitExceeded,
    TransparentSeed,
)
from pixlab.core.types import (
    Bounds,
    ColorInfo,
    ColorRegion,
    CutSettings,
    HSLColor,
    KnockoutSettings,
    LABColor,
    MappingReport,
    PaletteSettings,
    RecolorSettings,
    RGBColor,
    SelectedColor,
    TransformSettings,
)
from pixlab.logic.feather import apply_feather
from pixlab.logic.knockout.engine import knockout_colors, pick_color
from pixlab.logic.palette.engine import extract_palette
from pixlab.logic.recolor.engine import describe_mappings, recolor_image
from pixlab.logic.region.engine import detect_color_region
from pixlab.logic.texture.engine import texture_cut
from pixlab.logic.texture.patterns import create_pattern_texture
from pixlab.logic.texture.transform import render_texture_canvas
