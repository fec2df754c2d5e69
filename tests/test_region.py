import numpy as np
import pytest

from pixlab.core.buffer import PixelBuffer
from pixlab.core.errors import NoMatch, OutOfBounds, ResourceLimitExceeded, TransparentSeed
from pixlab.logic.region.engine import detect_color_region

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def test_uniform_image_is_one_region(solid):
    region = detect_color_region(solid(5, 4, (40, 90, 200, 255)), 2, 1)
    assert region.pixel_count == 20
    assert region.pixels[0] == (2, 1)
    assert len(set(region.pixels)) == 20
    assert region.bounds == (0, 0, 4, 3)
    assert region.coverage == 100.0
    assert region.confidence == 100.0
    assert region.average_color == (40, 90, 200)
    assert not region.truncated


def test_outlier_is_excluded(solid):
    buf = solid(5, 5, WHITE)
    buf.set_pixel(2, 2, BLACK)
    region = detect_color_region(buf, 0, 0)
    assert region.pixel_count == 24
    assert (2, 2) not in region.pixels
    assert region.coverage == 96.0


def test_region_is_four_connected(solid):
    buf = solid(3, 3, BLACK)
    for x, y in [(0, 0), (1, 1), (2, 2)]:
        buf.set_pixel(x, y, WHITE)
    region = detect_color_region(buf, 0, 0, tolerance=1.0)
    assert region.pixels == ((0, 0),)


def test_transparent_pixels_bound_the_region(solid):
    buf = solid(5, 3, WHITE)
    for y in range(3):
        buf.set_pixel(2, y, (255, 255, 255, 0))
    region = detect_color_region(buf, 0, 0)
    assert region.pixel_count == 6
    assert region.bounds.max_x == 1


def test_confidence_reflects_spread():
    data = np.zeros((1, 2, 4), dtype=np.uint8)
    data[0, 0] = (200, 100, 100, 255)
    data[0, 1] = (203, 100, 100, 255)
    region = detect_color_region(PixelBuffer.from_array(data), 0, 0, tolerance=10.0)
    assert region.pixel_count == 2
    assert 0.0 < region.confidence < 100.0
    assert region.confidence == int(region.confidence)


def test_out_of_bounds_seed(solid):
    with pytest.raises(OutOfBounds):
        detect_color_region(solid(5, 5, WHITE), 5, 0)
    with pytest.raises(OutOfBounds):
        detect_color_region(solid(5, 5, WHITE), 0, -1)


def test_transparent_seed(solid):
    with pytest.raises(TransparentSeed):
        detect_color_region(solid(3, 3, (10, 10, 10, 5)), 1, 1)


def test_no_match_when_tolerance_rejects_seed(solid):
    with pytest.raises(NoMatch):
        detect_color_region(solid(3, 3, WHITE), 1, 1, tolerance=-1.0)


def test_truncated_at_pixel_cap(solid):
    region = detect_color_region(solid(10, 10, WHITE), 0, 0, max_pixels=10)
    assert region.pixel_count == 10
    assert region.truncated


def test_not_truncated_when_cap_equals_region_size(solid):
    region = detect_color_region(solid(2, 2, WHITE), 0, 0, max_pixels=4)
    assert region.pixel_count == 4
    assert not region.truncated


def test_strict_mode_raises_with_partial_result(solid):
    with pytest.raises(ResourceLimitExceeded) as excinfo:
        detect_color_region(solid(10, 10, WHITE), 0, 0, max_pixels=10, strict=True)
    assert excinfo.value.result.pixel_count == 10


def test_to_dict(solid):
    region = detect_color_region(solid(2, 1, WHITE), 0, 0)
    data = region.to_dict(include_pixels=True)
    assert data["pixelCount"] == 2
    assert data["pixels"] == [[0, 0], [1, 0]]
    assert "pixels" not in region.to_dict()


def test_cap_reached_with_only_rejected_pixels_pending(from_rows):
    buf = from_rows([[WHITE, WHITE, BLACK]])
    region = detect_color_region(buf, 0, 0, max_pixels=2)
    assert region.pixel_count == 2
    assert not region.truncated

    strict = detect_color_region(buf, 0, 0, max_pixels=2, strict=True)
    assert strict.pixel_count == 2


def test_cap_reached_with_translucent_pixels_pending(from_rows):
    buf = from_rows([[WHITE, WHITE, (255, 255, 255, 0)]])
    assert not detect_color_region(buf, 0, 0, max_pixels=2).truncated
