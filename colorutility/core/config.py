#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorutility/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle degrees
HSL_SECTOR = 6.0                   # Hue sector divisor for HSL
HSL_THIRD = 1.0 / 3.0              # Hue offset when green is the max channel
HSL_TWO_THIRDS = 2.0 / 3.0         # Hue offset when blue is the max channel
HSL_L_MID = 0.5                    # Lightness threshold for the saturation branch
EXP_4 = 4                          # Fourth power (CMC chroma term)
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation
XYZ_SCALING = 100.0                # Factor for scaling linear RGB to the 0-100 XYZ range

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant

# sRGB to XYZ Matrix (Source: IEC 61966-2-1, four-digit rounding)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)  # Coefficients for Z coordinate calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_POW = 1.0 / 3.0                # Cube-root exponent of the non-linear segment
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# CIELAB Hue Axes (degrees)
HUE_AXIS_POS_A = 0.0               # Hue on the positive a* axis
HUE_AXIS_POS_B = 90.0              # Hue on the positive b* axis
HUE_AXIS_NEG_A = 180.0             # Hue on the negative a* axis
HUE_AXIS_NEG_B = 270.0             # Hue on the negative b* axis

# CIE94 Constants (Source: CIE 116-1995)
CIE94_K1 = 0.045                   # Chroma weighting (graphic arts)
CIE94_K2 = 0.015                   # Hue weighting (graphic arts)
CIE94_S_L = 1.0                    # Lightness weighting function (constant)
CIE94_GRAPHIC_ARTS = {"k1": 0.045, "k2": 0.015, "kl": 1.0}   # Application preset
CIE94_TEXTILES = {"k1": 0.048, "k2": 0.014, "kl": 2.0}       # Application preset

# CMC l:c Constants (Source: BS 6923:1988 / Colour Measurement Committee)
CMC_F_DIV = 1900.0                 # Denominator offset of the F weighting term
CMC_HUE_LOW = 164.0                # Lower hue bound of the blue-purple T band
CMC_HUE_HIGH = 345.0               # Upper hue bound of the blue-purple T band
CMC_T_BASE_OUT = 0.36              # T base outside the band
CMC_T_AMP_OUT = 0.4                # T cosine amplitude outside the band
CMC_T_PHASE_OUT = 35.0             # T cosine phase outside the band
CMC_T_BASE_IN = 0.56               # T base inside the band
CMC_T_AMP_IN = 0.2                 # T cosine amplitude inside the band
CMC_T_PHASE_IN = 168.0             # T cosine phase inside the band
CMC_L_DARK = 16.0                  # Lightness below which S_L is constant
CMC_S_L_DARK = 0.511               # Constant S_L for dark colors
CMC_S_L_NUM = 0.040975             # Numerator factor of S_L
CMC_S_L_DEN = 0.01765              # Denominator factor of S_L
CMC_S_C_NUM = 0.0638               # Numerator factor of S_C
CMC_S_C_DEN = 0.0131               # Denominator factor of S_C
CMC_S_C_OFFSET = 0.638             # Additive offset of S_C
CMC_KL = 2.0                       # Default lightness weight (acceptability)
CMC_KC = 1.0                       # Default chroma weight
CMC_ACCEPTABILITY = {"kl": 2.0, "kc": 1.0}      # Application preset
CMC_IMPERCEPTIBILITY = {"kl": 1.0, "kc": 1.0}   # Application preset

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L (also S_H)
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# Default metric for color_difference()
DEFAULT_METHOD = "ciede2000"

# ==========================================
# Logging
# ==========================================

LOG_TAG = "colorutility"          # Prefix of every log line

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
