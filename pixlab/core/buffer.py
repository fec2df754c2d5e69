#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/buffer.py

"""
RGBA pixel buffer shared by every engine operation.

The buffer is a row-major ``(height, width, 4)`` uint8 array, byte-for-byte the
same layout as a decoded RGBA image. Operations never mutate the buffer they
are given: they take a working copy, mutate that, and return it on success.
"""

from typing import Iterable, Tuple

import numpy as np

from .errors import InvalidInput, OutOfBounds

CHANNELS = 4


class PixelBuffer:
    """Width, height and RGBA bytes with bounds-checked pixel access."""

    __slots__ = ("width", "height", "data")

    def __init__(self, width: int, height: int, data: np.ndarray = None):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise InvalidInput(f"image dimensions must be positive, got {width}x{height}")

        if data is None:
            data = np.zeros((height, width, CHANNELS), dtype=np.uint8)
        else:
            data = np.asarray(data)
            if data.dtype != np.uint8:
                raise InvalidInput(f"pixel data must be uint8, got {data.dtype}")
            if data.size != width * height * CHANNELS:
                raise InvalidInput(
                    f"pixel data holds {data.size} bytes, expected {width * height * CHANNELS} "
                    f"for {width}x{height} RGBA"
                )
            data = data.reshape((height, width, CHANNELS))

        self.width = width
        self.height = height
        self.data = data

    # Construction

    @classmethod
    def from_bytes(cls, width: int, height: int, raw: bytes) -> "PixelBuffer":
        """Wrap a copy of raw row-major RGBA bytes."""
        return cls(width, height, np.frombuffer(bytes(raw), dtype=np.uint8).copy())

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Build from an (H, W, 4) array; the array is copied."""
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise InvalidInput(f"expected an (H, W, 4) array, got shape {array.shape}")
        return cls(array.shape[1], array.shape[0], array.astype(np.uint8, copy=True))

    @classmethod
    def filled(cls, width: int, height: int, rgba: Iterable[int]) -> "PixelBuffer":
        buf = cls(width, height)
        buf.data[:, :] = _as_rgba(rgba)
        return buf

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.data.copy())

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    # Access

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def rgb(self) -> np.ndarray:
        return self.data[:, :, :3]

    @property
    def alpha(self) -> np.ndarray:
        return self.data[:, :, 3]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBounds(
                f"coordinates ({x}, {y}) are out of bounds for image {self.width}x{self.height}"
            )

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        self._check(x, y)
        r, g, b, a = self.data[y, x]
        return int(r), int(g), int(b), int(a)

    def set_pixel(self, x: int, y: int, rgba: Iterable[int]) -> None:
        self._check(x, y)
        self.data[y, x] = _as_rgba(rgba)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


def _as_rgba(rgba: Iterable[int]) -> np.ndarray:
    values = [int(v) for v in rgba]
    if len(values) == 3:
        values.append(255)
    if len(values) != CHANNELS or any(v < 0 or v > 255 for v in values):
        raise InvalidInput(f"invalid RGBA value: {values}")
    return np.array(values, dtype=np.uint8)
