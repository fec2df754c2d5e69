#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/texture/transform.py

import math

import numpy as np

from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import InvalidInput
from pixlab.core.types import TransformSettings


def inverse_map(width: int, height: int, settings: TransformSettings):
    """
    For every canvas pixel center, the point of untransformed canvas space it
    shows. The forward transform rotates and scales about the canvas center:
    translate(center) . rotate(rotation) . scale(scale) . translate(-center).
    """
    if settings.scale <= 0:
        raise InvalidInput(f"texture scale must be positive, got {settings.scale}")

    cx, cy = width / 2.0, height / 2.0
    theta = math.radians(settings.rotation)
    cos_t, sin_t = math.cos(theta), math.sin(theta)

    xs = np.arange(width, dtype=np.float64) + 0.5 - cx
    ys = np.arange(height, dtype=np.float64) + 0.5 - cy
    dx, dy = np.meshgrid(xs, ys)

    ux = cx + (cos_t * dx + sin_t * dy) / settings.scale
    uy = cy + (-sin_t * dx + cos_t * dy) / settings.scale
    return ux, uy


def render_texture_canvas(
    texture: PixelBuffer,
    width: int,
    height: int,
    settings: TransformSettings = None,
) -> PixelBuffer:
    """
    Draw ``texture`` onto a width x height transparent canvas, nearest-neighbor
    sampled. Without tiling the texture is stretched over the canvas rectangle;
    with tiling that rectangle is filled with the texture repeated from the
    origin. The rectangle is then transformed as a whole, and canvas pixels it
    no longer covers stay transparent black.
    """
    settings = settings or TransformSettings()
    ux, uy = inverse_map(width, height, settings)
    covered = (ux >= 0) & (ux < width) & (uy >= 0) & (uy < height)

    if settings.tile:
        tx = np.mod(np.floor(ux), texture.width).astype(np.intp)
        ty = np.mod(np.floor(uy), texture.height).astype(np.intp)
    else:
        tx = np.clip(np.floor(ux * texture.width / width), 0, texture.width - 1).astype(np.intp)
        ty = np.clip(np.floor(uy * texture.height / height), 0, texture.height - 1).astype(np.intp)

    canvas = PixelBuffer(width, height)
    canvas.data[covered] = texture.data[ty[covered], tx[covered]]
    return canvas
