#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/texture/patterns.py

import numpy as np

from pixlab.core import config as c
from pixlab.core.buffer import PixelBuffer
from pixlab.core.conversions import hex_to_rgb
from pixlab.core.errors import InvalidInput


def _axis_distance(length: int, spacing: int) -> np.ndarray:
    """Distance from each pixel center to the nearest existing grid line along one axis."""
    centers = np.arange(length, dtype=np.float64) + 0.5
    lower = np.floor(centers / spacing) * spacing
    upper = lower + spacing
    dist = centers - lower
    # grid points at or past the edge are never drawn
    has_upper = upper < length
    return np.where(has_upper, np.minimum(dist, upper - centers), dist)


def _dots_mask(width: int, height: int, spacing: int) -> np.ndarray:
    radius = spacing / 4.0
    dx = _axis_distance(width, spacing)
    dy = _axis_distance(height, spacing)
    return (dy[:, None] ** 2 + dx[None, :] ** 2) <= radius * radius


def _rows_mask(height: int, spacing: int, line_width: int) -> np.ndarray:
    """Rows covered by a line of ``line_width`` px centered on every multiple of ``spacing``."""
    rows = np.arange(height)
    offset = np.mod(rows + line_width // 2, spacing)
    return offset < line_width


def create_pattern_texture(
    kind: str,
    width: int,
    height: int,
    color: str = "#000000",
    spacing: int = 10,
    seed: int = None,
) -> PixelBuffer:
    """
    Generate a procedural texture on a transparent background.

    dots:   filled disks of radius spacing/4 on a spacing grid
    lines:  2px horizontal lines every ``spacing`` rows
    grid:   1px horizontal and vertical lines every ``spacing`` px
    noise:  opaque random gray, reproducible with ``seed``
    """
    kind = str(kind).lower()
    if kind not in c.PATTERN_KINDS:
        raise InvalidInput(f"unknown pattern '{kind}', expected one of: {', '.join(c.PATTERN_KINDS)}")
    spacing = int(spacing)
    if spacing < 1:
        raise InvalidInput(f"pattern spacing must be at least 1, got {spacing}")

    texture = PixelBuffer(width, height)

    if kind == "noise":
        rng = np.random.default_rng(seed)
        gray = rng.integers(0, 256, size=(texture.height, texture.width), dtype=np.uint8)
        texture.data[:, :, 0] = gray
        texture.data[:, :, 1] = gray
        texture.data[:, :, 2] = gray
        texture.data[:, :, 3] = 255
        return texture

    if kind == "dots":
        mask = _dots_mask(texture.width, texture.height, spacing)
    elif kind == "lines":
        rows = _rows_mask(texture.height, spacing, c.PATTERN_LINE_WIDTH["lines"])
        mask = np.broadcast_to(rows[:, None], (texture.height, texture.width))
    else:
        line_width = c.PATTERN_LINE_WIDTH["grid"]
        rows = _rows_mask(texture.height, spacing, line_width)
        cols = _rows_mask(texture.width, spacing, line_width)
        mask = rows[:, None] | cols[None, :]

    r, g, b = hex_to_rgb(color)
    texture.data[mask] = (r, g, b, 255)
    return texture
