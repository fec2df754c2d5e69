#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/feather.py

import numpy as np
from PIL import Image, ImageFilter

from pixlab.core import config as c
from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import InvalidInput


def blur_alpha(alpha: np.ndarray, radius: int) -> np.ndarray:
    """Box blur (window 2r+1, edge pixels extended) of a 2D alpha plane."""
    if radius <= 0:
        return alpha.copy()
    mask = Image.fromarray(np.ascontiguousarray(alpha, dtype=np.uint8))
    return np.asarray(mask.filter(ImageFilter.BoxBlur(radius)), dtype=np.uint8)


def apply_feather(buffer: PixelBuffer, radius: int) -> PixelBuffer:
    """Soften edges by box-blurring only the alpha channel; RGB is untouched."""
    radius = int(radius)
    if radius < 0 or radius > c.FEATHER_MAX_RADIUS:
        raise InvalidInput(f"feather radius must be within 0-{c.FEATHER_MAX_RADIUS}px, got {radius}")

    result = buffer.copy()
    if radius:
        result.data[:, :, 3] = blur_alpha(buffer.alpha, radius)
    return result
