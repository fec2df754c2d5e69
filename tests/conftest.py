import numpy as np
import pytest

from pixlab.core.buffer import PixelBuffer


@pytest.fixture
def solid():
    """Factory for a single-color buffer."""
    def make(width, height, rgba):
        return PixelBuffer.filled(width, height, rgba)
    return make


@pytest.fixture
def from_rows():
    """Factory building a buffer from nested rows of RGBA tuples."""
    def make(rows):
        return PixelBuffer.from_array(np.array(rows, dtype=np.uint8))
    return make
