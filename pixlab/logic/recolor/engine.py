#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/recolor/engine.py

from typing import List, Sequence, Tuple

import numpy as np

from pixlab.core import config as c
from pixlab.core import conversions as conv
from pixlab.core.buffer import PixelBuffer
from pixlab.core.difference import get_color_match_confidence
from pixlab.core.errors import InvalidInput, InvalidSlotIndex, NoMappings
from pixlab.core.types import ColorInfo, ColorMappings, MappingReport, RecolorSettings, RGBColor
from pixlab.shared.logger import log
from pixlab.shared.progress import Progress, ProgressCallback


def _slot_rgb(slot) -> RGBColor:
    if isinstance(slot, ColorInfo):
        return slot.rgb
    if isinstance(slot, str):
        return conv.hex_to_rgb(slot)
    r, g, b = (int(v) for v in slot[:3])
    return RGBColor(r, g, b)


def resolve_mappings(palette: Sequence, mappings: ColorMappings) -> List[Tuple[int, RGBColor, RGBColor]]:
    """
    Turn ordered (slot index -> new hex) pairs into (index, slot rgb, new rgb),
    keeping the caller's order.
    """
    pairs = list(mappings.items()) if isinstance(mappings, dict) else list(mappings)
    if not pairs:
        raise NoMappings()

    resolved = []
    for slot_index, new_hex in pairs:
        if not isinstance(slot_index, (int, np.integer)) or not 0 <= slot_index < len(palette):
            raise InvalidSlotIndex(
                f"mapping references slot {slot_index}, palette has {len(palette)} slots"
            )
        resolved.append((int(slot_index), _slot_rgb(palette[slot_index]), conv.hex_to_rgb(new_hex)))
    return resolved


def channel_window(tolerance: float) -> float:
    """
    Per-channel half-width of the match cube. An exact match always counts,
    so tolerance 0 selects exactly the slot color.
    """
    return max((tolerance / c.PERCENT) * c.RGB_MAX, 1.0)


def blend(old: np.ndarray, new: RGBColor, mode: str) -> np.ndarray:
    """Blend (N, 3) pixels toward ``new``; results are rounded half up."""
    target = np.array(new, dtype=np.float64)
    if mode == "replace":
        out = np.broadcast_to(target, old.shape)
    elif mode == "overlay":
        out = np.floor((old + target) / 2.0 + 0.5)
    elif mode == "multiply":
        out = np.floor(old * target / c.RGB_MAX + 0.5)
    else:
        raise InvalidInput(f"unknown blend mode: '{mode}'")
    return np.clip(out, 0, 255).astype(np.uint8)


def recolor_image(
    buffer: PixelBuffer,
    palette: Sequence,
    mappings: ColorMappings,
    settings: RecolorSettings = None,
    on_progress: ProgressCallback = None,
) -> PixelBuffer:
    """
    Substitute palette slot colors with new colors.

    A pixel matches a slot when every channel differs by less than the
    tolerance window (an axis-aligned cube, not a sphere). Mappings run in
    order over the same working buffer, so a pixel recolored by one mapping
    can be matched again by a later one.
    """
    settings = settings or RecolorSettings()
    if settings.blend_mode not in c.BLEND_MODES:
        raise InvalidInput(f"unknown blend mode: '{settings.blend_mode}'")
    resolved = resolve_mappings(palette, mappings)

    for report in describe_mappings(palette, mappings):
        if report.indistinguishable:
            log(
                "warning",
                f"slot {report.slot_index}: {report.new_hex} is barely distinguishable "
                f"from {report.slot_hex} (deltaE {report.delta_e})",
            )

    progress = Progress(on_progress)
    progress.report(20, "Applying color changes...")

    result = buffer.copy()
    pixels = result.data.reshape(-1, 4)
    window = channel_window(settings.tolerance)
    editable = pixels[:, 3] == 255 if settings.preserve_transparency else np.ones(len(pixels), dtype=bool)

    for done, (slot_index, slot_rgb, new_rgb) in enumerate(resolved, start=1):
        rgb = pixels[:, :3].astype(np.float64)
        diff = np.abs(rgb - np.array(slot_rgb, dtype=np.float64))
        hit = editable & np.all(diff < window, axis=1)
        if hit.any():
            pixels[hit, :3] = blend(rgb[hit], new_rgb, settings.blend_mode)
        log("debug", f"recolor: slot {slot_index} matched {int(hit.sum())} pixels")
        progress.phase(20, 90, done / len(resolved), f"Recoloring {done}/{len(resolved)} colors...")

    progress.done()
    return result


def describe_mappings(palette: Sequence, mappings: ColorMappings) -> List[MappingReport]:
    """Perceptual distance between each slot color and its replacement."""
    reports = []
    for slot_index, slot_rgb, new_rgb in resolve_mappings(palette, mappings):
        distance, confidence = get_color_match_confidence(slot_rgb, new_rgb)
        reports.append(
            MappingReport(
                slot_index=slot_index,
                slot_hex=conv.rgb_to_hex(*slot_rgb),
                new_hex=conv.rgb_to_hex(*new_rgb),
                delta_e=distance,
                confidence=confidence,
            )
        )
    return reports
