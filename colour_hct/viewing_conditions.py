# colour_hct/viewing_conditions.py
from __future__ import annotations

"""
CAM16 viewing conditions.

A colour appearance model needs more than the stimulus: it also needs the
environment it is seen in. White under a midday-sun white point measures as a
slightly chromatic blue in CAM16 (roughly hue 209, chroma 3, J 100).

ViewingConditions holds every intermediate value of the CAM16 conversion that
depends only on the environment, so it is derived once and shared.

Exports:
  ViewingConditionsConfig   inputs with their defaults
  ViewingConditions         derived constants (immutable)
  build_viewing_conditions(config=None)
  default_viewing_conditions()
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .constants import (
    ADAPTATION_EXPONENT,
    ADAPTATION_OFFSET,
    ADAPTATION_SCALE,
    ADAPTING_LUMINANCE_SCALE,
    DEFAULT_BACKGROUND_LSTAR,
    DEFAULT_SURROUND,
    SRGB_TO_XYZ,
    WHITE_POINT_D65,
    XYZ_TO_CAM16RGB,
    Matrix3,
)
from .colour_convert import matrix_multiply, y_from_lstar
from .core_types import clamp_value, lerp


def _default_adapting_luminance() -> float:
    # 200 lux, mid-grey surface
    return ADAPTING_LUMINANCE_SCALE * y_from_lstar(50.0) / 100.0


@dataclass(frozen=True)
class ViewingConditionsConfig:
    """
    Physically meaningful inputs to the viewing conditions.

    white_point:
      XYZ of the adopted white, Y = 100. All components must be positive.
    adapting_luminance:
      Luminance of the adapting field in cd/m^2 (lux * 0.0586).
      Default about 11.72, i.e. 200 lux.
    background_lstar:
      L* of the area around the colour.
    surround:
      0 is pitch dark (cinema), 1 a dim room (TV at night), 2 average
      surround where the colour and its surroundings are lit alike.
    discounting_illuminant:
      Whether the eye discounts the tint of the illuminant. False for
      self-luminous displays.
    """

    white_point: Tuple[float, float, float] = WHITE_POINT_D65
    adapting_luminance: float = field(default_factory=_default_adapting_luminance)
    background_lstar: float = DEFAULT_BACKGROUND_LSTAR
    surround: float = DEFAULT_SURROUND
    discounting_illuminant: bool = False


@dataclass(frozen=True)
class ViewingConditions:
    """
    Derived CAM16 constants. Names follow CAM16 shorthand:

      n, z, nbb, ncb : background induction factors
      c, nc          : surround exponent and chromatic induction
      rgb_d          : per-channel degree-of-adaptation weights
      fl, fl_root    : luminance adaptation factor and its fourth root
      aw             : achromatic response of white

    The two matrices map linear sRGB (0..100) to adapted cone responses with
    fl / 100 folded in, and back. The gamut solver works in that space.
    """

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: Tuple[float, float, float]
    fl: float
    fl_root: float
    z: float
    scaled_discount_from_linrgb: Matrix3 = field(repr=False, compare=False)
    linrgb_from_scaled_discount: Matrix3 = field(repr=False, compare=False)


def _as_matrix3(array: np.ndarray) -> Matrix3:
    rows = array.tolist()
    return (tuple(rows[0]), tuple(rows[1]), tuple(rows[2]))  # type: ignore[return-value]


def _scaled_discount_matrices(rgb_d: np.ndarray, fl: float) -> Tuple[Matrix3, Matrix3]:
    """diag(fl * rgb_d / 100) @ CAT16 @ sRGB->XYZ, and its inverse."""
    forward = (
        np.diag(rgb_d * fl / 100.0)
        @ np.asarray(XYZ_TO_CAM16RGB)
        @ np.asarray(SRGB_TO_XYZ)
    )
    if np.all(np.isfinite(forward)) and np.linalg.det(forward) != 0.0:
        inverse = np.linalg.inv(forward)
    else:
        inverse = np.full((3, 3), np.nan)
    return _as_matrix3(forward), _as_matrix3(inverse)


def build_viewing_conditions(
    config: Optional[ViewingConditionsConfig] = None,
) -> ViewingConditions:
    """
    Derive ViewingConditions from a config (defaults when None).

    Pure and deterministic. A non-positive white point component yields
    NaN/inf constants rather than an exception.
    """
    cfg = config if config is not None else ViewingConditionsConfig()
    white = np.asarray(cfg.white_point, dtype=np.float64)
    la = float(cfg.adapting_luminance)

    white_cone = np.asarray(matrix_multiply(white, XYZ_TO_CAM16RGB))

    f = 0.8 + cfg.surround / 10.0
    if f >= 0.9:
        c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
    else:
        c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

    if cfg.discounting_illuminant:
        d = 1.0
    else:
        d = f * (1.0 - (1.0 / 3.6) * math.exp((-la - 42.0) / 92.0))
        d = clamp_value(d, 0.0, 1.0)
    nc = f

    k = 1.0 / (5.0 * la + 1.0)
    k4 = k * k * k * k
    k4_f = 1.0 - k4
    fl = k4 * la + 0.1 * k4_f * k4_f * float(np.cbrt(5.0 * la))

    with np.errstate(divide="ignore", invalid="ignore"):
        rgb_d = d * (100.0 / white_cone) + 1.0 - d
        n = np.float64(y_from_lstar(cfg.background_lstar)) / white[1]
        z = 1.48 + np.sqrt(n)
        nbb = 0.725 / np.power(n, 0.2)
        factors = np.power(fl * rgb_d * white_cone / 100.0, ADAPTATION_EXPONENT)
        rgb_a = ADAPTATION_SCALE * factors / (factors + ADAPTATION_OFFSET)
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb
        to_scaled, from_scaled = _scaled_discount_matrices(rgb_d, fl)

    return ViewingConditions(
        n=float(n),
        aw=float(aw),
        nbb=float(nbb),
        ncb=float(nbb),
        c=c,
        nc=nc,
        rgb_d=(float(rgb_d[0]), float(rgb_d[1]), float(rgb_d[2])),
        fl=fl,
        fl_root=fl**0.25,
        z=float(z),
        scaled_discount_from_linrgb=to_scaled,
        linrgb_from_scaled_discount=from_scaled,
    )


_DEFAULT: Optional[ViewingConditions] = None


def default_viewing_conditions() -> ViewingConditions:
    """
    sRGB-like viewing conditions, built on first use and then shared.

    No lock: racing first calls build identical values and either may win.
    """
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = build_viewing_conditions()
    return _DEFAULT

__all__ = [
    "ViewingConditionsConfig",
    "ViewingConditions",
    "build_viewing_conditions",
    "default_viewing_conditions",
]
