#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/__init__.py

"""
colorutility: convert colors between sRGB, XYZ, CIELAB, CIELCH and HSL and
measure the perceived difference between two colors (CIE76, CIE94,
CIEDE2000, CMC l:c).
"""

__version__ = "1.0.0"

from colorutility.core.conversions import (
    cielab_to_cielch,
    rgb_to_cielab,
    rgb_to_cielch,
    rgb_to_hsl,
    rgb_to_xyz,
    xyz_to_cielab,
)
from colorutility.core.difference import (
    DELTA_E_METHODS,
    color_difference,
    delta_c,
    delta_e,
    delta_e_cie94,
    delta_e_ciede2000,
    delta_e_cmc,
    delta_h,
)
from colorutility.core.types import CIELAB, CIELCH, HSL, RGB, XYZ

__all__ = [
    "__version__",
    "RGB",
    "XYZ",
    "CIELAB",
    "CIELCH",
    "HSL",
    "rgb_to_xyz",
    "xyz_to_cielab",
    "cielab_to_cielch",
    "rgb_to_hsl",
    "rgb_to_cielab",
    "rgb_to_cielch",
    "delta_e",
    "delta_c",
    "delta_h",
    "delta_e_cie94",
    "delta_e_cmc",
    "delta_e_ciede2000",
    "color_difference",
    "DELTA_E_METHODS",
]
