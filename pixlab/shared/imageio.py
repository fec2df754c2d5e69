#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/imageio.py

"""Decode/encode boundary between image files and PixelBuffer, backed by Pillow."""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from pixlab.core import config as c
from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import InvalidInput


def image_to_buffer(image: Image.Image) -> PixelBuffer:
    """Convert any Pillow image to an RGBA PixelBuffer."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return PixelBuffer.from_array(np.asarray(image, dtype=np.uint8))


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer.data)


def load_buffer(path: Union[str, Path]) -> PixelBuffer:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"image not found: {path}")
    with Image.open(path) as image:
        image.load()
        return image_to_buffer(image)


def save_buffer(buffer: PixelBuffer, path: Union[str, Path]) -> Path:
    """Encode to a lossless, alpha-capable format chosen by extension."""
    path = Path(path)
    fmt = path.suffix.lower().lstrip(".")
    if fmt not in c.SUPPORTED_OUTPUT_FORMATS:
        raise InvalidInput(
            f"unsupported output format '{fmt}', use one of: {', '.join(c.SUPPORTED_OUTPUT_FORMATS)}"
        )
    image = buffer_to_image(buffer)
    if fmt == "webp":
        image.save(path, format="WEBP", lossless=True, quality=100)
    else:
        image.save(path, format="PNG")
    return path
