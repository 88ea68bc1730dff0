#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/core/types.py

from typing import NamedTuple


class RGB(NamedTuple):
    """sRGB channels, nominally 0-255. Not range-checked."""
    r: float
    g: float
    b: float


class XYZ(NamedTuple):
    """CIE 1931 tristimulus values on a 0-100 D65 scale."""
    x: float
    y: float
    z: float


class CIELAB(NamedTuple):
    l: float
    a: float
    b: float


class CIELCH(NamedTuple):
    l: float
    c: float
    h: float


class HSL(NamedTuple):
    """Hue, saturation and lightness, each normalized to [0, 1]."""
    h: float
    s: float
    l: float
