#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/region/engine.py

from collections import deque

import numpy as np

from pixlab.core import config as c
from pixlab.core import conversions as conv
from pixlab.core.buffer import PixelBuffer
from pixlab.core.difference import delta_e_ciede2000
from pixlab.core.errors import NoMatch, OutOfBounds, ResourceLimitExceeded, TransparentSeed
from pixlab.core.types import Bounds, ColorRegion, RGBColor
from pixlab.shared.clamping import _round_half_up
from pixlab.shared.logger import log

# 4-connectivity: up, down, left, right
NEIGHBORS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def detect_color_region(
    buffer: PixelBuffer,
    x: int,
    y: int,
    tolerance: float = c.REGION_DEFAULT_TOLERANCE,
    max_pixels: int = c.REGION_MAX_PIXELS,
    strict: bool = False,
) -> ColorRegion:
    """
    Flood fill from (x, y) over pixels whose CIEDE2000 distance to the seed
    color is within ``tolerance``.

    Growth is a breadth-first walk with an explicit queue and a visited bitmap
    indexed by y * width + x, so stack depth stays constant on large uniform
    areas. Translucent pixels (alpha below REGION_MIN_ALPHA) bound the region.
    Once ``max_pixels`` pixels are accepted growth stops. If any pending pixel
    would still have been accepted the region comes back with ``truncated``
    set; pass ``strict=True`` to get a
    ResourceLimitExceeded (carrying the truncated region) instead.
    """
    width, height = buffer.width, buffer.height
    if not buffer.contains(x, y):
        raise OutOfBounds(f"coordinates ({x}, {y}) are out of bounds for image {width}x{height}")

    rgba = buffer.data.reshape(-1, 4)
    seed_index = y * width + x
    seed_r, seed_g, seed_b, seed_a = (int(v) for v in rgba[seed_index])
    if seed_a < c.REGION_MIN_ALPHA:
        raise TransparentSeed("cannot detect a region starting from a transparent pixel")

    seed_lab = conv.rgb_to_lab(seed_r, seed_g, seed_b)
    packed = (
        (rgba[:, 0].astype(np.int32) << 16) | (rgba[:, 1].astype(np.int32) << 8) | rgba[:, 2]
    ).tolist()
    alpha = rgba[:, 3].tolist()

    # deltaE per distinct color; the seed is fixed for the whole walk
    distances = {}

    seen = bytearray(width * height)
    seen[seed_index] = 1
    queue = deque([seed_index])

    pixels = []
    sum_r = sum_g = sum_b = 0
    sum_distance = 0.0
    min_x, min_y, max_x, max_y = x, y, x, y

    def distance_to_seed(index):
        """deltaE of an opaque enough pixel to the seed, None for boundary pixels."""
        if alpha[index] < c.REGION_MIN_ALPHA:
            return None
        color = packed[index]
        distance = distances.get(color)
        if distance is None:
            lab = conv.rgb_to_lab(color >> 16, (color >> 8) & 0xFF, color & 0xFF)
            distance = delta_e_ciede2000(seed_lab, lab)
            distances[color] = distance
        return distance if distance <= tolerance else None

    while queue and len(pixels) < max_pixels:
        index = queue.popleft()
        distance = distance_to_seed(index)
        if distance is None:
            continue
        color = packed[index]

        px, py = index % width, index // width
        pixels.append((px, py))
        sum_r += color >> 16
        sum_g += (color >> 8) & 0xFF
        sum_b += color & 0xFF
        sum_distance += distance
        if px < min_x:
            min_x = px
        elif px > max_x:
            max_x = px
        if py < min_y:
            min_y = py
        elif py > max_y:
            max_y = py

        for dx, dy in NEIGHBORS:
            nx, ny = px + dx, py + dy
            if 0 <= nx < width and 0 <= ny < height:
                neighbor = ny * width + nx
                if not seen[neighbor]:
                    seen[neighbor] = 1
                    queue.append(neighbor)

    pixel_count = len(pixels)
    if pixel_count == 0:
        raise NoMatch("no matching pixels found - tolerance may be too strict")

    # only pending pixels that would have been accepted make the region partial
    truncated = pixel_count >= max_pixels and any(distance_to_seed(i) is not None for i in queue)

    average = RGBColor(
        _round_half_up(sum_r / pixel_count),
        _round_half_up(sum_g / pixel_count),
        _round_half_up(sum_b / pixel_count),
    )
    mean_distance = sum_distance / pixel_count
    if tolerance > 0:
        confidence = max(0.0, min(100.0, 100.0 - (mean_distance / tolerance) * 100.0))
    else:
        confidence = 100.0

    region = ColorRegion(
        pixels=tuple(pixels),
        bounds=Bounds(min_x, min_y, max_x, max_y),
        average_color=average,
        lab_color=conv.rgb_to_lab(*average),
        pixel_count=pixel_count,
        coverage=round(pixel_count / (width * height) * c.PERCENT, 2),
        confidence=float(_round_half_up(confidence)),
        truncated=truncated,
    )

    log("debug", f"region: {pixel_count} px from seed ({x}, {y}), {len(distances)} distinct colors")
    if truncated:
        message = f"region growth stopped at the {max_pixels} pixel safety cap"
        if strict:
            raise ResourceLimitExceeded(message, result=region)
        log("warning", message)

    return region
