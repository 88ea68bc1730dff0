#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/core/conversions.py

import math
from typing import Tuple

from . import config as c
from .types import CIELAB, CIELCH, HSL, XYZ


def _pow(base: float, exp: float) -> float:
    """float ** float that overflows to inf instead of raising OverflowError."""
    try:
        return base ** exp
    except OverflowError:
        return math.inf


def _srgb_to_linear(channel: float) -> float:
    """Linearize an sRGB component already scaled to [0, 1]. No clamping."""
    if channel > c.SRGB_TO_LINEAR_TH:
        return _pow((channel + c.SRGB_OFFSET) / c.SRGB_DIVISOR, c.SRGB_GAMMA)
    return channel / c.SRGB_SLOPE


def rgb_to_xyz(rgb: Tuple[float, float, float]) -> XYZ:
    """Convert sRGB (0-255) to CIE XYZ (D65, 0-100)."""
    r, g, b = rgb
    r_lin = _srgb_to_linear(r / c.RGB_MAX) * c.XYZ_SCALING
    g_lin = _srgb_to_linear(g / c.RGB_MAX) * c.XYZ_SCALING
    b_lin = _srgb_to_linear(b / c.RGB_MAX) * c.XYZ_SCALING
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return XYZ(x, y, z)


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return _pow(t, c.LAB_POW) if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def xyz_to_cielab(xyz: Tuple[float, float, float]) -> CIELAB:
    """
    Convert XYZ to CIE LAB against the D65 reference white.

    Unlike RGB, CIELAB approximates human vision and is device independent,
    which is what the difference metrics in difference.py expect as input.
    """
    x, y, z = xyz
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return CIELAB(L, a, b)


def cielab_to_cielch(lab: Tuple[float, float, float]) -> CIELCH:
    """Convert LAB to LCH. Negative angles fold onto [0, 360)."""
    L, a, b = lab
    h = math.atan2(b, a)
    if h >= 0:
        h = (h / math.pi) * c.HUE_HALF
    else:
        h = c.HUE_MAX - (abs(h) / math.pi) * c.HUE_HALF
    chroma = math.sqrt(a * a + b * b)
    return CIELCH(L, chroma, h)


def rgb_to_hsl(rgb: Tuple[float, float, float]) -> HSL:
    """Convert RGB to HSL with every component in [0, 1]."""
    r, g, b = rgb
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmin = min(r_f, g_f, b_f)
    cmax = max(r_f, g_f, b_f)
    delta = cmax - cmin

    h = 0.0
    s = 0.0
    L = (cmin + cmax) / c.DIV_2

    if delta != 0:
        if L < c.HSL_L_MID:
            s = delta / (cmin + cmax)
        else:
            s = delta / (c.DIV_2 - cmax - cmin)

        d_r = (((cmax - r_f) / c.HSL_SECTOR) + (delta / c.DIV_2)) / delta
        d_g = (((cmax - g_f) / c.HSL_SECTOR) + (delta / c.DIV_2)) / delta
        d_b = (((cmax - b_f) / c.HSL_SECTOR) + (delta / c.DIV_2)) / delta

        if r_f == cmax:
            h = d_b - d_g
        elif g_f == cmax:
            h = c.HSL_THIRD + d_r - d_b
        else:
            h = c.HSL_TWO_THIRDS + d_g - d_r

        if h < 0:
            h += c.UNIT
        if h > 1:
            h -= c.UNIT

    return HSL(h, s, L)


def rgb_to_cielab(rgb: Tuple[float, float, float]) -> CIELAB:
    """Direct RGB to LAB conversion."""
    return xyz_to_cielab(rgb_to_xyz(rgb))


def rgb_to_cielch(rgb: Tuple[float, float, float]) -> CIELCH:
    """Direct RGB to LCH conversion."""
    return cielab_to_cielch(rgb_to_cielab(rgb))
