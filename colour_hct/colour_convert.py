# colour_hct/colour_convert.py
from __future__ import annotations

"""
Colour conversions (sRGB, D65).

Linear RGB and XYZ are on a 0..100 scale throughout, matching the CAM16 code.

Exports:
  linearized(channel)          8-bit channel -> linear 0..100
  delinearized(linear)         linear 0..100 -> clamped 8-bit channel
  true_delinearized(linear)    linear 0..100 -> unrounded 0..255
  matrix_multiply(row, m)
  argb_from_linrgb / linrgb_from_argb
  argb_from_xyz / xyz_from_argb
  y_from_lstar / lstar_from_y
  lstar_from_argb / argb_from_lstar
  rgb_to_linear(srgb)          vectorised, 0..1 in and out
  lstar_from_argb_array(argbs) vectorised tone
"""

import math
from typing import Sequence

import numpy as np

from .constants import (
    LAB_E,
    LAB_KAPPA,
    LINEAR_TO_SRGB_TH,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SLOPE,
    SRGB_TO_LINEAR_TH,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
    Y_FROM_LINRGB,
    Matrix3,
)
from .core_types import (
    ARGB,
    ARGBArray,
    FloatArray,
    LinRGB,
    XYZ,
    argb_from_rgb,
    clamp_channel,
    rgb_from_argb,
)


# sRGB transfer curve


def linearized(channel: int) -> float:
    """8-bit sRGB channel to linear light, 0..100."""
    normalized = channel / 255.0
    if normalized <= SRGB_TO_LINEAR_TH:
        return normalized / SRGB_SLOPE * 100.0
    return ((normalized + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_GAMMA * 100.0


def true_delinearized(linear: float) -> float:
    """Linear light 0..100 to an unrounded, unclamped 0..255 sRGB value."""
    normalized = linear / 100.0
    if normalized <= LINEAR_TO_SRGB_TH:
        encoded = normalized * SRGB_SLOPE
    else:
        encoded = (1.0 + SRGB_OFFSET) * normalized ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET
    return encoded * 255.0


def delinearized(linear: float) -> int:
    """Linear light 0..100 to an 8-bit channel, rounded and clamped."""
    encoded = true_delinearized(linear)
    if math.isnan(encoded):
        return 0
    if encoded >= 255.0:
        return 255
    return clamp_channel(int(round(encoded)))


def matrix_multiply(row: Sequence[float], matrix: Matrix3) -> tuple[float, float, float]:
    """matrix @ row for a 3-vector, in plain floats."""
    a = matrix[0][0] * row[0] + matrix[0][1] * row[1] + matrix[0][2] * row[2]
    b = matrix[1][0] * row[0] + matrix[1][1] * row[1] + matrix[1][2] * row[2]
    c = matrix[2][0] * row[0] + matrix[2][1] * row[1] + matrix[2][2] * row[2]
    return (a, b, c)


# ARGB <-> linear RGB / XYZ


def linrgb_from_argb(argb: ARGB) -> LinRGB:
    r, g, b = rgb_from_argb(argb)
    return (linearized(r), linearized(g), linearized(b))


def argb_from_linrgb(linrgb: Sequence[float]) -> ARGB:
    return argb_from_rgb(
        delinearized(linrgb[0]), delinearized(linrgb[1]), delinearized(linrgb[2])
    )


def xyz_from_argb(argb: ARGB) -> XYZ:
    return matrix_multiply(linrgb_from_argb(argb), SRGB_TO_XYZ)


def argb_from_xyz(x: float, y: float, z: float) -> ARGB:
    return argb_from_linrgb(matrix_multiply((x, y, z), XYZ_TO_SRGB))


# L* <-> Y


def _lab_f(t: float) -> float:
    if t > LAB_E:
        return math.copysign(abs(t) ** (1.0 / 3.0), t)
    return (LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / LAB_KAPPA


def y_from_lstar(lstar: float) -> float:
    """CIE L* to relative luminance Y, 0..100."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Relative luminance Y (0..100) to CIE L*."""
    return 116.0 * _lab_f(y / 100.0) - 16.0


def lstar_from_argb(argb: ARGB) -> float:
    """Tone of a colour: L* from relative luminance."""
    r, g, b = linrgb_from_argb(argb)
    y = Y_FROM_LINRGB[0] * r + Y_FROM_LINRGB[1] * g + Y_FROM_LINRGB[2] * b
    return lstar_from_y(y)


def argb_from_lstar(lstar: float) -> ARGB:
    """Neutral grey with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


# Vectorised helpers


def rgb_to_linear(srgb: np.ndarray) -> FloatArray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Args:
      srgb: array[...] in 0..1 (float)
    Returns:
      float64 array, same shape
    """
    srgb_f = srgb.astype(np.float64, copy=False)
    with np.errstate(invalid="ignore"):
        linear = np.where(
            srgb_f <= SRGB_TO_LINEAR_TH,
            srgb_f / SRGB_SLOPE,
            ((srgb_f + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_GAMMA,
        )
    return linear.astype(np.float64, copy=False)


def lstar_from_argb_array(argbs: ARGBArray) -> FloatArray:
    """
    Tone for many ARGB ints at once.
    Accepts any integer array shape. Returns float64 with shape preserved.
    """
    packed = np.asarray(argbs, dtype=np.uint32)
    rgb = np.stack(
        [(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF], axis=-1
    ).astype(np.float64) / 255.0
    linear = rgb_to_linear(rgb) * 100.0
    y = linear @ np.asarray(Y_FROM_LINRGB, dtype=np.float64)
    fy = np.where(
        y / 100.0 > LAB_E, np.cbrt(y / 100.0), (LAB_KAPPA * y / 100.0 + 16.0) / 116.0
    )
    return (116.0 * fy - 16.0).astype(np.float64, copy=False)


__all__ = [
    "linearized",
    "delinearized",
    "true_delinearized",
    "matrix_multiply",
    "linrgb_from_argb",
    "argb_from_linrgb",
    "xyz_from_argb",
    "argb_from_xyz",
    "y_from_lstar",
    "lstar_from_y",
    "lstar_from_argb",
    "argb_from_lstar",
    "rgb_to_linear",
    "lstar_from_argb_array",
]
