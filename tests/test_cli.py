import json
import sys

import pytest

from pixlab import main as cli
from pixlab.core.buffer import PixelBuffer
from pixlab.shared.imageio import load_buffer, save_buffer


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["pixlab", *argv])
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    return excinfo.value.code


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    save_buffer(PixelBuffer.filled(6, 4, (255, 0, 0, 255)), path)
    return path


def test_knockout_command(monkeypatch, tmp_path, red_png):
    out = tmp_path / "out.png"
    assert run(monkeypatch, "knockout", str(red_png), "-o", str(out), "-c", "ff0000", "-t", "0") == 0
    result = load_buffer(out)
    assert (result.width, result.height) == (6, 4)
    assert (result.alpha == 0).all()


def test_knockout_with_picked_color(monkeypatch, tmp_path, red_png):
    out = tmp_path / "out.webp"
    assert run(monkeypatch, "knockout", str(red_png), "-o", str(out), "--pick", "1,1") == 0
    assert (load_buffer(out).alpha == 0).all()


def test_knockout_without_colors_fails(monkeypatch, tmp_path, red_png):
    assert run(monkeypatch, "knockout", str(red_png), "-o", str(tmp_path / "out.png")) == 1


def test_palette_json(monkeypatch, capsys, tmp_path):
    path = tmp_path / "blue.png"
    save_buffer(PixelBuffer.filled(8, 8, (32, 64, 128, 255)), path)
    assert run(monkeypatch, "palette", str(path), "--format", "json") == 0
    palette = json.loads(capsys.readouterr().out)
    assert palette[0]["hex"] == "#204080"
    assert palette[0]["percentage"] == pytest.approx(100.0)


def test_region_json(monkeypatch, capsys, red_png):
    assert run(monkeypatch, "region", str(red_png), "--at", "0,0", "--format", "json") == 0
    region = json.loads(capsys.readouterr().out)
    assert region["pixelCount"] == 24
    assert region["coverage"] == 100.0


def test_region_out_of_bounds(monkeypatch, red_png):
    assert run(monkeypatch, "region", str(red_png), "--at", "10,10") == 1


def test_recolor_command(monkeypatch, tmp_path):
    src = tmp_path / "blue.png"
    out = tmp_path / "green.png"
    save_buffer(PixelBuffer.filled(4, 4, (32, 64, 128, 255)), src)
    assert run(monkeypatch, "recolor", str(src), "-o", str(out), "-m", "0=00ff00", "-t", "0") == 0
    assert (load_buffer(out).rgb == (0, 255, 0)).all()


def test_texture_cut_with_pattern(monkeypatch, tmp_path, red_png):
    out = tmp_path / "cut.png"
    assert run(monkeypatch, "texture-cut", str(red_png), "-o", str(out), "--pattern", "grid", "--spacing", "2", "--color", "ffffff") == 0
    result = load_buffer(out)
    assert result.get_pixel(0, 0)[3] == 255
    assert result.get_pixel(1, 1)[3] == 0


def test_pattern_command(monkeypatch, tmp_path):
    out = tmp_path / "noise.png"
    assert run(monkeypatch, "pattern", "noise", "-o", str(out), "-W", "5", "-H", "3", "--seed", "1") == 0
    texture = load_buffer(out)
    assert (texture.width, texture.height) == (5, 3)


def test_unsupported_output_format(monkeypatch, tmp_path):
    assert run(monkeypatch, "pattern", "dots", "-o", str(tmp_path / "dots.jpg")) == 1


def test_missing_input(monkeypatch, tmp_path):
    assert run(monkeypatch, "pick", str(tmp_path / "nope.png"), "--at", "0,0") == 1


def test_unknown_command(monkeypatch):
    assert run(monkeypatch, "sharpen") == 2


def test_bad_argument(monkeypatch, red_png):
    assert run(monkeypatch, "region", str(red_png), "--at", "zero") == 2


def test_recolor_json_report_is_clean_json(monkeypatch, capsys, tmp_path):
    src = tmp_path / "blue.png"
    out = tmp_path / "red.png"
    save_buffer(PixelBuffer.filled(4, 4, (32, 64, 128, 255)), src)
    code = run(monkeypatch, "recolor", str(src), "-o", str(out), "-m", "0=#FF0000", "--format", "json")
    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert report[0]["slot"] == 0
    assert report[0]["to"] == "#FF0000"
    assert out.exists()
