import numpy as np
import pytest

from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import InvalidInput
from pixlab.core.types import CutSettings, TransformSettings
from pixlab.logic.texture.engine import texture_cut, texture_luma
from pixlab.logic.texture.transform import render_texture_canvas

OPAQUE = (200, 10, 10, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def test_luma_extremes(solid):
    assert texture_luma(solid(1, 1, WHITE))[0, 0] == 1.0
    assert texture_luma(solid(1, 1, BLACK))[0, 0] == 0.0


def test_black_texture_cuts_fully(solid):
    result = texture_cut(solid(4, 4, OPAQUE), solid(4, 4, BLACK))
    assert (result.alpha == 0).all()
    assert (result.rgb == OPAQUE[:3]).all()


def test_white_texture_keeps_alpha(solid):
    base = solid(4, 4, OPAQUE)
    assert texture_cut(base, solid(4, 4, WHITE)) == base


def test_invert_swaps_dark_and_bright(solid):
    result = texture_cut(solid(4, 4, OPAQUE), solid(4, 4, WHITE), CutSettings(invert=True))
    assert (result.alpha == 0).all()


def test_amount_scales_the_cut(solid):
    result = texture_cut(solid(2, 2, OPAQUE), solid(2, 2, BLACK), CutSettings(amount=0.5))
    assert (result.alpha == 127).all()

    partial = texture_cut(solid(2, 2, (1, 2, 3, 100)), solid(2, 2, BLACK), CutSettings(amount=0.5))
    assert (partial.alpha == 50).all()


def test_transparent_base_stays_transparent(solid):
    result = texture_cut(solid(3, 3, (10, 10, 10, 0)), solid(3, 3, WHITE))
    assert (result.alpha == 0).all()


def test_texture_is_stretched_over_the_base(solid):
    result = texture_cut(solid(8, 8, OPAQUE), solid(2, 2, BLACK))
    assert (result.alpha == 0).all()


def test_canvas_identity_copies_texture():
    rng = np.random.default_rng(11)
    texture = PixelBuffer.from_array(rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8))
    assert render_texture_canvas(texture, 7, 5, TransformSettings()) == texture


def test_canvas_tiles_texture(from_rows):
    texture = from_rows([[BLACK, WHITE], [WHITE, BLACK]])
    canvas = render_texture_canvas(texture, 4, 4, TransformSettings(tile=True))
    for y in range(4):
        for x in range(4):
            assert canvas.get_pixel(x, y) == texture.get_pixel(x % 2, y % 2)


def test_canvas_rotation_by_180_reverses(from_rows):
    texture = from_rows([[(0, 0, 0, 255), (85, 85, 85, 255), (170, 170, 170, 255), (255, 255, 255, 255)]])
    canvas = render_texture_canvas(texture, 4, 1, TransformSettings(rotation=180))
    assert [canvas.get_pixel(x, 0)[0] for x in range(4)] == [255, 170, 85, 0]


def test_scaled_down_texture_leaves_uncovered_pixels_transparent(solid):
    canvas = render_texture_canvas(solid(8, 8, WHITE), 8, 8, TransformSettings(scale=0.5))
    assert canvas.get_pixel(0, 0) == (0, 0, 0, 0)
    assert canvas.get_pixel(4, 4) == WHITE

    result = texture_cut(solid(8, 8, OPAQUE), solid(8, 8, WHITE), transform_settings=TransformSettings(scale=0.5))
    assert result.get_pixel(0, 0)[3] == 0
    assert result.get_pixel(4, 4)[3] == 255


def test_feather_after_cut(from_rows, solid):
    texture = from_rows([[BLACK, BLACK, WHITE, WHITE, WHITE]])
    result = texture_cut(solid(5, 1, OPAQUE), texture, CutSettings(feather_px=1))
    assert list(result.alpha[0]) == [0, 85, 170, 255, 255]


def test_progress_reaches_completion(solid):
    seen = []
    texture_cut(solid(2, 2, OPAQUE), solid(2, 2, WHITE), on_progress=lambda p, m: seen.append((p, m)))
    assert [p for p, _ in seen] == sorted(p for p, _ in seen)
    assert seen[-1] == (100.0, "Complete!")


def test_rejects_non_positive_scale(solid):
    with pytest.raises(InvalidInput):
        render_texture_canvas(solid(2, 2, WHITE), 2, 2, TransformSettings(scale=0))
