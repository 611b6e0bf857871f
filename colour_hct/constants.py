# colour_hct/constants.py
"""
Numeric constants shared across the project.

- sRGB transfer curve and sRGB <-> XYZ matrices (D65)
- CIE L* constants
- CAM16 matrices and default viewing conditions
- Gamut solver tolerances
"""
from __future__ import annotations

import math
from typing import Tuple

Matrix3 = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

# =========================
# sRGB transfer curve
# =========================
SRGB_TO_LINEAR_TH: float = 0.040449936
LINEAR_TO_SRGB_TH: float = 0.0031308
SRGB_SLOPE: float = 12.92
SRGB_OFFSET: float = 0.055
SRGB_GAMMA: float = 2.4

# =========================
# sRGB <-> XYZ (D65, Y in 0..100)
# =========================
SRGB_TO_XYZ: Matrix3 = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: Matrix3 = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

# Relative luminance row of SRGB_TO_XYZ.
Y_FROM_LINRGB: Tuple[float, float, float] = SRGB_TO_XYZ[1]

WHITE_POINT_D65: Tuple[float, float, float] = (95.047, 100.0, 108.883)

# =========================
# CIE L*
# =========================
LAB_E: float = 216.0 / 24389.0
LAB_KAPPA: float = 24389.0 / 27.0

# =========================
# CAM16
# =========================
# CAT16 chromatic adaptation: XYZ -> cone responses.
XYZ_TO_CAM16RGB: Matrix3 = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ: Matrix3 = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.04996444),
)

ADAPTATION_EXPONENT: float = 0.42
ADAPTATION_SCALE: float = 400.0
ADAPTATION_OFFSET: float = 27.13

ECCENTRICITY_HUE_SHIFT: float = 20.14
UCS_C1: float = 0.007
UCS_C2: float = 0.0228
DISTANCE_SCALE: float = 1.41
DISTANCE_EXPONENT: float = 0.63

# Default viewing conditions: 200 lux, mid-grey background, average surround.
DEFAULT_BACKGROUND_LSTAR: float = 50.0
DEFAULT_SURROUND: float = 2.0
ADAPTING_LUMINANCE_SCALE: float = 200.0 / math.pi

# =========================
# Gamut solver
# =========================
ACHROMATIC_CHROMA_EPS: float = 1e-4
TONE_MIN_EPS: float = 1e-4
TONE_MAX_EPS: float = 99.9999
J_SEARCH_ROUNDS: int = 5
J_SEARCH_Y_TOL: float = 0.002
GAMUT_TOP_SLACK: float = 0.01
CHROMA_SEARCH_TOL: float = 0.01
CHROMA_SEARCH_MAX_ITER: int = 64
CRITICAL_PLANE_ROUNDS: int = 8

__all__ = [
    "Matrix3",
    "SRGB_TO_LINEAR_TH",
    "LINEAR_TO_SRGB_TH",
    "SRGB_SLOPE",
    "SRGB_OFFSET",
    "SRGB_GAMMA",
    "SRGB_TO_XYZ",
    "XYZ_TO_SRGB",
    "Y_FROM_LINRGB",
    "WHITE_POINT_D65",
    "LAB_E",
    "LAB_KAPPA",
    "XYZ_TO_CAM16RGB",
    "CAM16RGB_TO_XYZ",
    "ADAPTATION_EXPONENT",
    "ADAPTATION_SCALE",
    "ADAPTATION_OFFSET",
    "ECCENTRICITY_HUE_SHIFT",
    "UCS_C1",
    "UCS_C2",
    "DISTANCE_SCALE",
    "DISTANCE_EXPONENT",
    "DEFAULT_BACKGROUND_LSTAR",
    "DEFAULT_SURROUND",
    "ADAPTING_LUMINANCE_SCALE",
    "ACHROMATIC_CHROMA_EPS",
    "TONE_MIN_EPS",
    "TONE_MAX_EPS",
    "J_SEARCH_ROUNDS",
    "J_SEARCH_Y_TOL",
    "GAMUT_TOP_SLACK",
    "CHROMA_SEARCH_TOL",
    "CHROMA_SEARCH_MAX_ITER",
    "CRITICAL_PLANE_ROUNDS",
]
