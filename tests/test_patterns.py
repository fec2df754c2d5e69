import numpy as np
import pytest

from pixlab.core.errors import InvalidInput
from pixlab.logic.texture.patterns import create_pattern_texture

INK = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def painted_rows(texture):
    return [y for y in range(texture.height) if texture.alpha[y].all()]


def test_lines_are_two_pixels_wide():
    texture = create_pattern_texture("lines", 4, 8, color="#FF0000", spacing=4)
    assert painted_rows(texture) == [0, 3, 4, 7]
    assert texture.get_pixel(0, 3) == INK
    assert texture.get_pixel(0, 1) == CLEAR


def test_grid():
    texture = create_pattern_texture("grid", 8, 8, color="#FF0000", spacing=4)
    assert texture.get_pixel(0, 2) == INK
    assert texture.get_pixel(4, 6) == INK
    assert texture.get_pixel(6, 4) == INK
    assert texture.get_pixel(1, 1) == CLEAR
    assert texture.get_pixel(5, 7) == CLEAR


def test_dots():
    texture = create_pattern_texture("dots", 16, 16, color="#FF0000", spacing=8)
    assert texture.get_pixel(0, 0) == INK
    assert texture.get_pixel(8, 8) == INK
    assert texture.get_pixel(7, 8) == INK
    assert texture.get_pixel(4, 4) == CLEAR
    assert texture.get_pixel(12, 12) == CLEAR


def test_noise_is_opaque_gray_and_seeded():
    a = create_pattern_texture("noise", 16, 16, seed=42)
    b = create_pattern_texture("noise", 16, 16, seed=42)
    assert a == b
    assert (a.alpha == 255).all()
    assert np.array_equal(a.data[:, :, 0], a.data[:, :, 1])
    assert np.array_equal(a.data[:, :, 1], a.data[:, :, 2])
    assert len(np.unique(a.data[:, :, 0])) > 1


def test_unknown_kind():
    with pytest.raises(InvalidInput):
        create_pattern_texture("stripes", 4, 4)


def test_bad_spacing():
    with pytest.raises(InvalidInput):
        create_pattern_texture("grid", 4, 4, spacing=0)
