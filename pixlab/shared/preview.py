#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/shared/preview.py

import re

from pixlab.core import config as c
from pixlab.core.conversions import hex_to_rgb


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def bold(text) -> str:
    if c.NO_COLOR:
        return str(text)
    return f"{c.BOLD_WHITE}{text}{c.RESET}"


def label(text: str, level: str = "info") -> str:
    if c.NO_COLOR:
        return text
    return f"{c.MSG_BOLD_COLORS[level]}{text}{c.RESET}"


def pad_title(title: str, width: int = 18) -> str:
    """Left-justify a possibly styled title by its visible length."""
    return title + " " * max(0, width - get_visible_len(title))


def print_field(title: str, value) -> None:
    print(f"{pad_title(title)}{bold(':')}   {bold(value)}")


def print_color_block(hex_code: str, title: str = "color", details: str = "") -> None:
    """Print a labelled truecolor swatch followed by the hex code and optional details."""
    r, g, b = hex_to_rgb(hex_code)
    swatch = "" if c.NO_COLOR else f"\033[48;2;{r};{g};{b}m        {c.RESET}  "
    suffix = f"  {details}" if details else ""
    print(f"{pad_title(title)}{bold(':')}   {swatch}{bold(hex_code)}{suffix}")
