#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/palette/engine.py

from typing import List

import numpy as np
from PIL import Image

from pixlab.core import config as c
from pixlab.core import conversions as conv
from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import EmptyPalette, InvalidInput
from pixlab.core.types import ColorInfo, PaletteSettings, RGBColor
from pixlab.shared.logger import log
from pixlab.shared.progress import Progress, ProgressCallback


def _downscale(buffer: PixelBuffer, max_dimension: int) -> np.ndarray:
    """Shrink so the longer side is at most max_dimension; smaller images pass through."""
    longest = max(buffer.width, buffer.height)
    if longest <= max_dimension:
        return buffer.data

    scale = max_dimension / longest
    size = (max(1, int(buffer.width * scale)), max(1, int(buffer.height * scale)))
    image = Image.fromarray(buffer.data).resize(size, Image.BILINEAR)
    return np.asarray(image, dtype=np.uint8)


def _accepted_samples(pixels: np.ndarray, step: int) -> np.ndarray:
    """Every step-th pixel, minus translucent, near-white and near-black ones."""
    samples = pixels.reshape(-1, 4)[::step]
    rgb = samples[:, :3]
    keep = samples[:, 3] >= c.PALETTE_MIN_ALPHA
    keep &= ~np.all(rgb > c.PALETTE_WHITE_CUTOFF, axis=1)
    keep &= ~np.all(rgb < c.PALETTE_BLACK_CUTOFF, axis=1)
    return rgb[keep]


def _histogram(samples: np.ndarray, bucket_size: int):
    """
    Count quantized colors. Returns (packed_rgb, counts) ordered by descending
    count, ties kept in first-seen order.
    """
    quantized = (samples.astype(np.int32) // bucket_size) * bucket_size
    packed = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]
    keys, first_seen, counts = np.unique(packed, return_index=True, return_counts=True)
    order = np.lexsort((first_seen, -counts))
    return keys[order], counts[order]


def build_color_info(rgb: RGBColor, count: int, total: int) -> ColorInfo:
    hsl = conv.rgb_to_hsl(*rgb)
    share = int(count) / total
    return ColorInfo(
        hex=conv.rgb_to_hex(*rgb),
        rgb=RGBColor(*rgb),
        hsl=hsl,
        percentage=share * c.PERCENT,
        name=conv.get_color_name(hsl),
        category=conv.get_color_category(hsl.l),
        prominence=share,
        pixel_count=int(count),
    )


def extract_palette(
    buffer: PixelBuffer,
    settings: PaletteSettings = None,
    on_progress: ProgressCallback = None,
) -> List[ColorInfo]:
    """
    Dominant colors of an image, most frequent first.

    The image is downscaled, sampled on a fixed stride and bucketed into a
    quantized histogram. Percentages are relative to the accepted samples,
    not to the full image.
    """
    settings = settings or PaletteSettings()
    if settings.algorithm not in c.PALETTE_ALGORITHMS:
        raise InvalidInput(f"unknown palette algorithm: '{settings.algorithm}'")
    if settings.palette_size < 1:
        raise InvalidInput(f"palette size must be positive, got {settings.palette_size}")

    progress = Progress(on_progress)
    progress.report(10, "Analyzing colors...")

    pixels = _downscale(buffer, c.PALETTE_MAX_DIMENSION[settings.algorithm])
    progress.report(30, "Sampling pixels...")

    samples = _accepted_samples(pixels, c.PALETTE_SAMPLE_STEP[settings.algorithm])
    total = len(samples)
    log("debug", f"palette: {total} of {pixels.shape[0] * pixels.shape[1]} pixels sampled")
    if total == 0:
        raise EmptyPalette("no usable pixels to sample (image is transparent or pure black/white)")

    progress.report(70, "Sorting colors...")
    keys, counts = _histogram(samples, c.PALETTE_BUCKET_SIZE[settings.algorithm])

    progress.report(90, "Creating palette...")
    palette = [
        build_color_info(RGBColor(int(key) >> 16 & 0xFF, int(key) >> 8 & 0xFF, int(key) & 0xFF), count, total)
        for key, count in zip(keys[: settings.palette_size], counts[: settings.palette_size])
    ]

    progress.done()
    return palette
