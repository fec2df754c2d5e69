import pytest

from pixlab.core import conversions as conv
from pixlab.core.errors import InvalidInput


@pytest.mark.parametrize("raw,expected", [
    ("fff", "#FFFFFF"),
    ("#a1b2c3", "#A1B2C3"),
    ("#0F0", "#00FF00"),
    ("000000", "#000000"),
])
def test_normalize_hex(raw, expected):
    assert conv.normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["", "#12", "ggg", "#1234567", "12345", "#12 345"])
def test_normalize_hex_rejects_malformed(raw):
    with pytest.raises(InvalidInput):
        conv.normalize_hex(raw)


def test_hex_rgb_conversions():
    assert conv.hex_to_rgb("#FF8000") == (255, 128, 0)
    assert conv.rgb_to_hex(255, 128, 0) == "#FF8000"
    assert conv.rgb_to_hex(300, -5, 0.5) == "#FF0001"


def test_rgb_to_hsl():
    assert conv.rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)
    h, s, l = conv.rgb_to_hsl(0, 0, 255)
    assert h == pytest.approx(240.0)
    assert conv.rgb_to_hsl(128, 128, 128).s == 0.0


@pytest.mark.parametrize("rgb", [(255, 0, 0), (0, 255, 0), (12, 200, 99), (128, 128, 128), (0, 0, 0)])
def test_hsl_to_rgb_inverts_rgb_to_hsl(rgb):
    assert conv.hsl_to_rgb(*conv.rgb_to_hsl(*rgb)) == rgb


def test_lab_reference_points():
    white = conv.rgb_to_lab(255, 255, 255)
    assert white.L == pytest.approx(100.0, abs=0.01)
    assert white.a == pytest.approx(0.0, abs=0.05)
    assert white.b == pytest.approx(0.0, abs=0.05)

    black = conv.rgb_to_lab(0, 0, 0)
    assert black.L == pytest.approx(0.0, abs=1e-9)

    red = conv.rgb_to_lab(255, 0, 0)
    assert red.L == pytest.approx(53.24, abs=0.05)
    assert red.a == pytest.approx(80.09, abs=0.1)
    assert red.b == pytest.approx(67.20, abs=0.1)


def test_quantize_color():
    assert conv.quantize_color((255, 17, 3), 16) == (240, 16, 0)
    assert conv.quantize_color((255, 17, 3), 8) == (248, 16, 0)
    assert conv.quantize_color((255, 17, 3), 1) == (255, 17, 3)
    with pytest.raises(InvalidInput):
        conv.quantize_color((1, 2, 3), 0)


@pytest.mark.parametrize("rgb,name", [
    ((255, 0, 0), "Red"),
    ((0, 0, 255), "Blue"),
    ((0, 200, 0), "Green"),
    ((128, 128, 128), "Gray"),
    ((255, 255, 255), "White"),
    ((5, 5, 5), "Black"),
    ((255, 0, 200), "Magenta"),
])
def test_color_names(rgb, name):
    assert conv.get_color_name(conv.rgb_to_hsl(*rgb)) == name


def test_color_categories():
    assert conv.get_color_category(80.0) == "light"
    assert conv.get_color_category(50.0) == "mid"
    assert conv.get_color_category(10.0) == "dark"
