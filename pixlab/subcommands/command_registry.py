#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pixlab/subcommands/command_registry.py

from . import (
    knockout,
    palette,
    region,
    recolor,
    texture_cut,
    pick,
    pattern,
)

SUBCOMMANDS = {
    'knockout': knockout,
    'palette': palette,
    'region': region,
    'recolor': recolor,
    'texture-cut': texture_cut,
    'pick': pick,
    'pattern': pattern,
}
