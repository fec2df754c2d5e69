#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/logic/texture/engine.py

import numpy as np

from pixlab.core import config as c
from pixlab.core.buffer import PixelBuffer
from pixlab.core.types import CutSettings, TransformSettings
from pixlab.logic.feather import blur_alpha
from pixlab.shared.logger import log
from pixlab.shared.progress import Progress, ProgressCallback
from .transform import render_texture_canvas


def texture_luma(canvas: PixelBuffer) -> np.ndarray:
    """BT.601 luma of every pixel, normalized to [0, 1]."""
    rgb = canvas.rgb.astype(np.int64)
    weighted = c.LUMA_601_R * rgb[:, :, 0] + c.LUMA_601_G * rgb[:, :, 1] + c.LUMA_601_B * rgb[:, :, 2]
    return weighted / float(c.LUMA_601_SCALE)


def texture_cut(
    base: PixelBuffer,
    texture: PixelBuffer,
    cut_settings: CutSettings = None,
    transform_settings: TransformSettings = None,
    on_progress: ProgressCallback = None,
) -> PixelBuffer:
    """
    Cut a texture into the base image's alpha channel.

    Dark texture areas cut toward transparency, bright areas keep the base
    alpha; ``invert`` swaps the two. Fully transparent base pixels stay
    transparent since cutting can only lower alpha.
    """
    cut_settings = cut_settings or CutSettings()
    transform_settings = transform_settings or TransformSettings()

    progress = Progress(on_progress)
    progress.report(20, "Setting up canvas...")

    result = base.copy()
    progress.report(40, "Preparing texture...")
    canvas = render_texture_canvas(texture, base.width, base.height, transform_settings)
    progress.report(60, "Applying transforms...")

    luma = texture_luma(canvas)
    if cut_settings.invert:
        luma = 1.0 - luma
    strength = 1.0 - (1.0 - luma) * cut_settings.amount

    progress.report(80, "Cutting texture...")
    alpha = result.alpha
    cut = np.floor(alpha * strength).astype(np.uint8)
    result.data[:, :, 3] = np.where(alpha > 0, cut, alpha)
    log("debug", f"texture cut: mean alpha {float(alpha.mean()):.1f} -> {float(result.alpha.mean()):.1f}")

    if cut_settings.feather_px > 0:
        progress.report(90, "Feathering edges...")
        result.data[:, :, 3] = blur_alpha(result.alpha, int(cut_settings.feather_px))

    progress.done()
    return result
