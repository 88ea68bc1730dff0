#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/core/difference.py

import math
from typing import Tuple

from . import config as c
from .conversions import _pow
from colorutility.shared.logger import log


def _sqrt(value: float, clamp: bool = False, metric: str = "") -> float:
    """
    IEEE 754 square root: a negative radicand gives NaN instead of the
    ValueError raised by math.sqrt. With clamp=True it is replaced by 0.
    """
    if value < 0:
        if clamp:
            log("warning", f"{metric}: negative radicand {value!r} clamped to 0")
            return 0.0
        return math.nan
    return math.sqrt(value)


def _cielab_to_hue(a: float, b: float) -> float:
    """Return a CIE hue value (in degrees)."""
    bias = 0.0
    if a >= 0 and b == 0:
        return c.HUE_AXIS_POS_A
    if a < 0 and b == 0:
        return c.HUE_AXIS_NEG_A
    if a == 0 and b > 0:
        return c.HUE_AXIS_POS_B
    if a == 0 and b < 0:
        return c.HUE_AXIS_NEG_B
    if a > 0 and b > 0:
        bias = 0.0
    if a < 0:
        bias = c.HUE_HALF
    if a > 0 and b < 0:
        bias = c.HUE_MAX
    return math.degrees(math.atan2(b, a)) + bias


def delta_e(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    Calculate a delta E using simple Euclidean geometry (CIE76).

    CIELAB is not as perceptually uniform as intended, especially in
    saturated regions, so this rates those differences too highly.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    dl, da, db = L1 - L2, a1 - a2, b1 - b2
    return math.sqrt(dl * dl + da * da + db * db)


def delta_c(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    Chroma difference C2 - C1. Signed, so delta_c(x, y) == -delta_c(y, x).
    Use of this function is not recommended.
    """
    _, a1, b1 = lab1
    _, a2, b2 = lab2
    return math.sqrt(a2 * a2 + b2 * b2) - math.sqrt(a1 * a1 + b1 * b1)


def delta_h(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    clamp: bool = False,
) -> float:
    """
    Hue difference sqrt(da^2 + db^2 - dC^2).

    When rounding pushes dC^2 above the a/b distance the radicand goes
    negative and the result is NaN, unless clamp=True.
    Use of this function is not recommended.
    """
    _, a1, b1 = lab1
    _, a2, b2 = lab2
    da, db = a2 - a1, b2 - b1
    dc = math.sqrt(a2 * a2 + b2 * b2) - math.sqrt(a1 * a1 + b1 * b1)
    return _sqrt(da * da + db * db - dc * dc, clamp, "delta_h")


def delta_e_cie94(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    k1: float = c.CIE94_K1,
    k2: float = c.CIE94_K2,
    kl: float = 1,
    kc: float = 1,
    kh: float = 1,
    clamp: bool = False,
) -> float:
    """
    Calculate the delta E using application specific weights (CIE94).

    k1, k2 and kl default to graphic arts (0.045, 0.015, 1); textiles use
    0.048, 0.014 and 2, see config.CIE94_TEXTILES. The weighting functions
    are anchored on the first color, so the metric is not symmetric.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    da, db = a1 - a2, b1 - b2
    dl = L1 - L2
    dc = C1 - C2
    dh = _sqrt(da * da + db * db - dc * dc, clamp, "delta_e_cie94")

    S_L = c.CIE94_S_L
    S_C = c.UNIT + (k1 * C1)
    S_H = c.UNIT + (k2 * C1)

    t_l = dl / (kl * S_L)
    t_c = dc / (kc * S_C)
    t_h = dh / (kh * S_H)
    return math.sqrt(t_l * t_l + t_c * t_c + t_h * t_h)


def _cmc_t(h1: float) -> float:
    """CMC hue weighting T; 164 and 345 themselves belong to the inner band."""
    # phase constants are added to the angle in radians
    if h1 < c.CMC_HUE_LOW or h1 > c.CMC_HUE_HIGH:
        return c.CMC_T_BASE_OUT + abs(c.CMC_T_AMP_OUT * math.cos(math.radians(h1) + c.CMC_T_PHASE_OUT))
    return c.CMC_T_BASE_IN + abs(c.CMC_T_AMP_IN * math.cos(math.radians(h1) + c.CMC_T_PHASE_IN))


def delta_e_cmc(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    kl: float = c.CMC_KL,
    kc: float = c.CMC_KC,
    clamp: bool = False,
) -> float:
    """
    Calculate a delta E using the CMC l:c metric.

    kl:kc should suit the application: 2:1 (default) for "acceptability",
    1:1 for "imperceptibility".
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    C1_4 = _pow(C1, c.EXP_4)
    F = math.sqrt(C1_4 / (C1_4 + c.CMC_F_DIV))
    T = _cmc_t(_cielab_to_hue(a1, b1))

    if L1 < c.CMC_L_DARK:
        S_L = c.CMC_S_L_DARK
    else:
        S_L = (c.CMC_S_L_NUM * L1) / (c.UNIT + (c.CMC_S_L_DEN * L1))
    S_C = ((c.CMC_S_C_NUM * C1) / (c.UNIT + (c.CMC_S_C_DEN * C1))) + c.CMC_S_C_OFFSET
    S_H = ((F * T) + c.UNIT - F) * S_C

    da, db, dc = a2 - a1, b2 - b1, C2 - C1
    dh = _sqrt(da * da + db * db - dc * dc, clamp, "delta_e_cmc")

    t_l = (L2 - L1) / (kl * S_L)
    t_c = dc / (kc * S_C)
    t_h = dh / S_H
    return math.sqrt(t_l * t_l + t_c * t_c + t_h * t_h)


def _ciede2000_hue(a_prime: float, b: float) -> float:
    if a_prime == 0 and b == 0:
        return 0.0
    return math.degrees(math.atan2(b, a_prime)) + (0.0 if b >= 0 else c.HUE_MAX)


def _ciede2000_mean_hue(h1: float, h2: float, c1: float, c2: float) -> float:
    """Mean hue h'bar; hues exactly 180 apart average without the shift."""
    if c1 * c2 == 0:
        return h1 + h2
    if abs(h2 - h1) <= c.HUE_HALF:
        return (h1 + h2) / c.DIV_2
    if h2 + h1 < c.HUE_MAX:
        return (h1 + h2) / c.DIV_2 + c.HUE_HALF
    return (h1 + h2) / c.DIV_2 - c.HUE_HALF


def _ciede2000_hue_delta(h1: float, h2: float) -> float:
    """Hue difference h2 - h1 wrapped into [-180, 180]."""
    dh = h2 - h1
    if dh > c.HUE_HALF:
        dh -= c.HUE_MAX
    elif dh < -c.HUE_HALF:
        dh += c.HUE_MAX
    return dh


def _ciede2000_total(dl: float, dc: float, dh: float, rt: float) -> float:
    """Combine the weighted deltas, including the R_T rotation cross term."""
    return _sqrt(dl * dl + dc * dc + dh * dh + rt * dc * dh)


def delta_e_ciede2000(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    kl: float = c.K_FACTORS[0],
    kc: float = c.K_FACTORS[1],
    kh: float = c.K_FACTORS[2],
) -> float:
    """
    Calculate the CIEDE2000 color difference (ΔE_00) between two CIE LAB colors.

    Improves on CIE94 with a hue rotation term (blues turning purple),
    compensation for neutral colors, and further lightness, chroma and hue
    compensation.

    Source: Sharma, G., Wu, W., & Dalal, E. N. (2005).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    C_bar = (C1 + C2) / c.DIV_2

    C_bar_7 = _pow(C_bar, c.EXP_7)
    G = c.G_FACTOR * (c.UNIT - math.sqrt(C_bar_7 / (C_bar_7 + c.POW7_25)))

    a1_prime = (c.UNIT + G) * a1
    a2_prime = (c.UNIT + G) * a2

    C1_prime = math.sqrt(a1_prime * a1_prime + b1 * b1)
    C2_prime = math.sqrt(a2_prime * a2_prime + b2 * b2)

    h1_prime_deg = _ciede2000_hue(a1_prime, b1)
    h2_prime_deg = _ciede2000_hue(a2_prime, b2)

    L_prime_bar = (L1 + L2) / c.DIV_2
    C_prime_bar = (C1_prime + C2_prime) / c.DIV_2
    h_prime_bar_deg = _ciede2000_mean_hue(h1_prime_deg, h2_prime_deg, C1_prime, C2_prime)

    L_L_50 = L_prime_bar - c.L_OFFSET
    L_L_50_SQ = L_L_50 * L_L_50
    S_L = c.UNIT + (c.S_L_K * L_L_50_SQ / math.sqrt(c.S_L_DIV + L_L_50_SQ))
    S_C = c.UNIT + c.S_C_K * C_prime_bar

    T = (
        c.UNIT
        - c.T_K1 * math.cos(math.radians(h_prime_bar_deg - c.T_OFFSET_1))
        + c.T_K2 * math.cos(math.radians(c.DIV_2 * h_prime_bar_deg))
        + c.T_K3 * math.cos(math.radians(c.T_MUL_3 * h_prime_bar_deg + c.T_OFFSET_2))
        - c.T_K4 * math.cos(math.radians(c.T_MUL_4 * h_prime_bar_deg - c.T_OFFSET_3))
    )
    S_H = c.UNIT + c.S_L_K * C_prime_bar * T

    h_rot = (h_prime_bar_deg - c.RT_H_OFFSET) / c.RT_DIV
    delta_theta_deg = c.RT_D30 * math.exp(-(h_rot * h_rot))
    C_prime_bar_7 = _pow(C_prime_bar, c.EXP_7)
    R_C = c.DIV_2 * math.sqrt(C_prime_bar_7 / (C_prime_bar_7 + c.POW7_25))
    R_T = -math.sin(math.radians(c.DIV_2 * delta_theta_deg)) * R_C

    delta_L = (L2 - L1) / S_L / kl
    delta_C = (C2_prime - C1_prime) / S_C / kc

    delta_h_prime_deg = _ciede2000_hue_delta(h1_prime_deg, h2_prime_deg)
    delta_H = c.DIV_2 * math.sqrt(C1_prime * C2_prime) * math.sin(
        math.radians(delta_h_prime_deg / c.DIV_2)
    )
    delta_H = delta_H / S_H / kh

    return _ciede2000_total(delta_L, delta_C, delta_H, R_T)


DELTA_E_METHODS = {
    "cie76": delta_e,
    "cie94": delta_e_cie94,
    "ciede2000": delta_e_ciede2000,
    "cmc": delta_e_cmc,
}


def color_difference(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    method: str = c.DEFAULT_METHOD,
    **weights,
) -> float:
    """
    Dispatch to one of the DELTA_E_METHODS by name, forwarding the keyword
    weights (e.g. kl=1, kc=1 for CMC imperceptibility).
    """
    key = str(method).lower()
    metric = DELTA_E_METHODS.get(key)
    if metric is None:
        known = ", ".join(sorted(DELTA_E_METHODS))
        raise ValueError(f"unknown delta E method '{method}' (expected one of: {known})")
    return metric(lab1, lab2, **weights)
