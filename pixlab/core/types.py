#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/types.py

"""Shared value types and settings structures of the pixel engine."""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Sequence, Tuple, Union

from . import config as c


class RGBColor(NamedTuple):
    r: int
    g: int
    b: int


class HSLColor(NamedTuple):
    h: float  # degrees, 0-360
    s: float  # percent, 0-100
    l: float  # percent, 0-100


class LABColor(NamedTuple):
    L: float
    a: float
    b: float


class SelectedColor(NamedTuple):
    r: int
    g: int
    b: int
    hex: str

    @property
    def rgb(self) -> RGBColor:
        return RGBColor(self.r, self.g, self.b)


class Bounds(NamedTuple):
    min_x: int
    min_y: int
    max_x: int
    max_y: int


@dataclass(frozen=True)
class ColorInfo:
    hex: str
    rgb: RGBColor
    hsl: HSLColor
    percentage: float  # share of accepted samples, 0-100
    name: str
    category: str  # light / mid / dark
    prominence: float  # share of accepted samples, 0-1
    pixel_count: int

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
            "percentage": self.percentage,
            "name": self.name,
            "category": self.category,
            "prominence": self.prominence,
            "pixelCount": self.pixel_count,
        }


@dataclass(frozen=True)
class ColorRegion:
    pixels: Tuple[Tuple[int, int], ...]  # (x, y) in discovery order
    bounds: Bounds
    average_color: RGBColor
    lab_color: LABColor
    pixel_count: int
    coverage: float  # percent of the whole image
    confidence: float  # uniformity score, 0-100
    truncated: bool = False

    def to_dict(self, include_pixels: bool = False) -> dict:
        data = {
            "bounds": self.bounds._asdict(),
            "averageColor": self.average_color._asdict(),
            "labColor": self.lab_color._asdict(),
            "pixelCount": self.pixel_count,
            "coverage": self.coverage,
            "confidence": self.confidence,
            "truncated": self.truncated,
        }
        if include_pixels:
            data["pixels"] = [list(p) for p in self.pixels]
        return data


@dataclass(frozen=True)
class MappingReport:
    slot_index: int
    slot_hex: str
    new_hex: str
    delta_e: float
    confidence: int

    @property
    def indistinguishable(self) -> bool:
        return self.delta_e < c.INDISTINGUISHABLE_DELTA_E


# ==========================================
# Settings (validated by the caller)
# ==========================================

@dataclass
class PaletteSettings:
    palette_size: int = 9  # 9 or 36
    algorithm: str = "smart"  # smart / detailed


@dataclass
class KnockoutSettings:
    tolerance: float = 10.0  # 0-100
    replace_mode: str = "transparency"  # transparency / color / mask
    feather: int = 0  # px, 0-20
    anti_aliasing: bool = True


@dataclass
class RecolorSettings:
    blend_mode: str = "replace"  # replace / overlay / multiply
    tolerance: float = 10.0  # 0-100
    preserve_transparency: bool = True


@dataclass
class CutSettings:
    amount: float = 1.0  # 0-1
    feather_px: int = 0  # 0-20
    invert: bool = False


@dataclass
class TransformSettings:
    scale: float = 1.0  # 0.1-5
    rotation: float = 0.0  # degrees
    tile: bool = False


# An ordered (slot index -> new hex) mapping, as pairs or an insertion-ordered dict
ColorMappings = Union[Sequence[Tuple[int, str]], Dict[int, str]]

# A palette slot is anything exposing an RGB triple
PaletteSlot = Union[ColorInfo, RGBColor, Tuple[int, int, int]]
