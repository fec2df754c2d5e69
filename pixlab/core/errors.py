#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/core/errors.py

"""
Error taxonomy of the pixel engine.

Every failure is raised synchronously before any result is handed back, so
callers never observe a partially processed buffer. The calling layer turns
``kind`` into a user-facing message.
"""


class PixlabError(Exception):
    """Base class for all engine errors."""

    kind = "error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind


class InvalidInput(PixlabError, ValueError):
    kind = "invalid_input"


class NoColorsSelected(InvalidInput):
    kind = "no_colors_selected"

    def __init__(self, message: str = "no colors selected"):
        super().__init__(message)


class NoMappings(InvalidInput):
    kind = "no_mappings"

    def __init__(self, message: str = "no color mappings given"):
        super().__init__(message)


class OutOfBounds(PixlabError, IndexError):
    kind = "out_of_bounds"


class TransparentSeed(PixlabError):
    kind = "transparent_seed"


class NoMatch(PixlabError):
    kind = "no_match"


class EmptyPalette(PixlabError):
    kind = "empty_palette"


class InvalidSlotIndex(PixlabError, IndexError):
    kind = "invalid_slot_index"


class ResourceLimitExceeded(PixlabError):
    """Raised only on request; ``result`` holds the truncated output."""

    kind = "resource_limit_exceeded"

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
