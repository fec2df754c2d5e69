import pytest

from pixlab.core.errors import InvalidInput, InvalidSlotIndex, NoMappings
from pixlab.core.types import RecolorSettings
from pixlab.logic.palette.engine import extract_palette
from pixlab.logic.recolor.engine import describe_mappings, recolor_image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
PALETTE = [(255, 0, 0), (0, 0, 255)]


def test_replace_exact_color(from_rows):
    buf = from_rows([[RED, RED], [BLUE, BLUE]])
    result = recolor_image(buf, PALETTE, {0: "#00FF00"}, RecolorSettings(tolerance=0))
    assert result.get_pixel(0, 0) == (0, 255, 0, 255)
    assert result.get_pixel(1, 0) == (0, 255, 0, 255)
    assert result.get_pixel(0, 1) == BLUE
    assert buf.get_pixel(0, 0) == RED


def test_tolerance_window(from_rows):
    buf = from_rows([[(250, 0, 0, 255)]])
    strict = recolor_image(buf, PALETTE, {0: "#00FF00"}, RecolorSettings(tolerance=0))
    assert strict.get_pixel(0, 0) == (250, 0, 0, 255)
    loose = recolor_image(buf, PALETTE, {0: "#00FF00"}, RecolorSettings(tolerance=10))
    assert loose.get_pixel(0, 0) == (0, 255, 0, 255)


def test_translucent_pixels_are_preserved(from_rows):
    buf = from_rows([[(255, 0, 0, 128), RED]])
    kept = recolor_image(buf, PALETTE, {0: "#00FF00"}, RecolorSettings(tolerance=0))
    assert kept.get_pixel(0, 0) == (255, 0, 0, 128)
    assert kept.get_pixel(1, 0) == (0, 255, 0, 255)

    settings = RecolorSettings(tolerance=0, preserve_transparency=False)
    changed = recolor_image(buf, PALETTE, {0: "#00FF00"}, settings)
    assert changed.get_pixel(0, 0) == (0, 255, 0, 128)


def test_mappings_apply_in_order(from_rows):
    buf = from_rows([[RED, BLUE]])
    result = recolor_image(buf, PALETTE, [(0, "#0000FF"), (1, "#00FF00")], RecolorSettings(tolerance=0))
    assert result.get_pixel(0, 0) == (0, 255, 0, 255)
    assert result.get_pixel(1, 0) == (0, 255, 0, 255)


@pytest.mark.parametrize("mode,new_hex,expected", [
    ("overlay", "#0000FF", (128, 0, 128, 255)),
    ("multiply", "#808080", (128, 0, 0, 255)),
    ("replace", "#123456", (0x12, 0x34, 0x56, 255)),
])
def test_blend_modes(from_rows, mode, new_hex, expected):
    buf = from_rows([[RED]])
    result = recolor_image(buf, PALETTE, {0: new_hex}, RecolorSettings(blend_mode=mode, tolerance=0))
    assert result.get_pixel(0, 0) == expected


def test_works_with_extracted_palette(solid):
    buf = solid(6, 6, (32, 64, 128, 255))
    palette = extract_palette(buf)
    result = recolor_image(buf, palette, {0: "#FF0000"}, RecolorSettings(tolerance=0))
    assert (result.rgb == (255, 0, 0)).all()


def test_requires_mappings(from_rows):
    with pytest.raises(NoMappings):
        recolor_image(from_rows([[RED]]), PALETTE, {})


@pytest.mark.parametrize("slot", [2, -1])
def test_rejects_unknown_slot(from_rows, slot):
    with pytest.raises(InvalidSlotIndex):
        recolor_image(from_rows([[RED]]), PALETTE, {slot: "#00FF00"})


def test_rejects_malformed_hex(from_rows):
    with pytest.raises(InvalidInput):
        recolor_image(from_rows([[RED]]), PALETTE, {0: "#GG0000"})


def test_rejects_unknown_blend_mode(from_rows):
    with pytest.raises(InvalidInput):
        recolor_image(from_rows([[RED]]), PALETTE, {0: "#00FF00"}, RecolorSettings(blend_mode="screen"))


def test_describe_mappings():
    same, different = describe_mappings(PALETTE, [(0, "#FE0000"), (1, "#FFFF00")])
    assert same.slot_hex == "#FF0000"
    assert same.indistinguishable
    assert same.confidence == 100
    assert not different.indistinguishable
    assert different.delta_e > 50
