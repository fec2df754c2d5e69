#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/progress.py

from typing import Callable, Optional

from pixlab.shared.logger import log

ProgressCallback = Optional[Callable[[float, str], None]]


class Progress:
    """
    Forwards progress to an optional caller callback, mapping a phase's local
    0-1 fraction into its [start, end] percentage span and never going back.
    """

    def __init__(self, callback: ProgressCallback = None):
        self._callback = callback
        self._last = 0.0

    def report(self, percent: float, message: str) -> None:
        if self._callback is None:
            return
        percent = max(self._last, min(100.0, float(percent)))
        self._last = percent
        self._callback(percent, message)

    def phase(self, start: float, end: float, fraction: float, message: str) -> None:
        fraction = max(0.0, min(1.0, fraction))
        self.report(start + (end - start) * fraction, message)

    def done(self, message: str = "Complete!") -> None:
        self.report(100.0, message)


def log_progress(percent: float, message: str) -> None:
    """Progress callback that writes to the debug log."""
    log("debug", f"{percent:5.1f}% {message}")
