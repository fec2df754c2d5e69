#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/knockout/engine.py

import math
from typing import Sequence

import numpy as np

from pixlab.core import config as c
from pixlab.core import conversions as conv
from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import InvalidInput, NoColorsSelected
from pixlab.core.types import KnockoutSettings, SelectedColor
from pixlab.logic.feather import blur_alpha
from pixlab.shared.logger import log
from pixlab.shared.progress import Progress, ProgressCallback

# 3x3 neighborhood minus the center, with grid distance to each neighbor
NEIGHBORHOOD = tuple(
    (dx, dy, math.sqrt(dx * dx + dy * dy))
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if dx or dy
)


def knockout_threshold(tolerance: float) -> float:
    """Map a 0-100 tolerance onto the Euclidean RGB distance scale."""
    return (tolerance / c.PERCENT) * c.MAX_RGB_DISTANCE


def _target_rgb(color) -> np.ndarray:
    if isinstance(color, str):
        color = conv.hex_to_rgb(color)
    return np.array([int(v) for v in color[:3]], dtype=np.float64)


def match_mask(rgb: np.ndarray, colors: Sequence, tolerance: float) -> np.ndarray:
    """True where a pixel lies within the threshold of any target color."""
    threshold = knockout_threshold(tolerance)
    pixels = rgb.astype(np.float64)
    matched = np.zeros(rgb.shape[:2], dtype=bool)
    for color in colors:
        target = _target_rgb(color)
        distance = np.sqrt(np.sum((pixels - target) ** 2, axis=-1))
        matched |= distance <= threshold
    return matched


def edge_distance(matched: np.ndarray) -> np.ndarray:
    """
    Grid distance from each pixel to the nearest unmatched pixel in its 3x3
    window (1 or sqrt(2)); EDGE_SENTINEL_DISTANCE where there is none.
    Neighbors outside the image are ignored.
    """
    height, width = matched.shape
    unmatched = np.pad(~matched, 1, mode="constant", constant_values=False)
    distance = np.full(matched.shape, c.EDGE_SENTINEL_DISTANCE)
    for dx, dy, step in NEIGHBORHOOD:
        shifted = unmatched[1 + dy : 1 + dy + height, 1 + dx : 1 + dx + width]
        distance = np.where(shifted, np.minimum(distance, step), distance)
    return distance


def knockout_colors(
    buffer: PixelBuffer,
    colors: Sequence,
    settings: KnockoutSettings = None,
    on_progress: ProgressCallback = None,
) -> PixelBuffer:
    """
    Remove every pixel close to any of ``colors`` (OR across targets).

    Matching costs one pass over all pixels. With anti-aliasing enabled each
    pixel additionally inspects its 3x3 neighborhood; matched pixels touching
    an unmatched one get a fractional alpha modifier, so the soft edge is
    exactly one pixel wide. Disabling anti-aliasing drops that second pass.
    """
    if not colors:
        raise NoColorsSelected()
    settings = settings or KnockoutSettings()
    if settings.replace_mode not in c.REPLACE_MODES:
        raise InvalidInput(f"unknown replace mode: '{settings.replace_mode}'")

    progress = Progress(on_progress)
    progress.report(10, "Analyzing image pixels...")

    result = buffer.copy()
    matched = match_mask(result.rgb, colors, settings.tolerance)
    log("debug", f"knockout: {int(matched.sum())} of {result.pixel_count} pixels matched")
    progress.report(30, "Processing color knockout...")

    if settings.anti_aliasing:
        distance = edge_distance(matched)
    else:
        distance = np.full(matched.shape, c.EDGE_SENTINEL_DISTANCE)
    modifier = np.minimum(distance, c.EDGE_SENTINEL_DISTANCE) / c.EDGE_SENTINEL_DISTANCE
    progress.report(60, "Processing pixels...")

    data = result.data
    if settings.replace_mode == "transparency":
        new_alpha = np.floor(255.0 * (1.0 - modifier) + 0.5).astype(np.uint8)
        data[:, :, 3] = np.where(matched, new_alpha, data[:, :, 3])
    elif settings.replace_mode == "color":
        data[matched, :3] = 255
    else:
        mask_value = np.where(modifier > c.MASK_THRESHOLD, 0, 255).astype(np.uint8)
        for channel in range(3):
            data[:, :, channel] = np.where(matched, mask_value, data[:, :, channel])
        data[matched, 3] = 255

    progress.report(80, "Applying changes...")
    if settings.feather > 0:
        progress.report(85, "Applying edge feathering...")
        data[:, :, 3] = blur_alpha(data[:, :, 3], int(settings.feather))

    progress.done()
    return result


def pick_color(buffer: PixelBuffer, x: int, y: int) -> SelectedColor:
    """Sample the color under (x, y) as a knockout target."""
    r, g, b, _ = buffer.get_pixel(x, y)
    return SelectedColor(r, g, b, conv.rgb_to_hex(r, g, b))
