# colour_hct/cam16.py
from __future__ import annotations

"""
CAM16 colour appearance model.

A colour is not just its sRGB code: CAM16 describes how it appears under a
given set of viewing conditions. Cam16 also carries CAM16-UCS coordinates
(J*, a*, b*), the space to use for colour distances.

Any full set of correlates follows from three of them:
  - J (or Q), C (or M, s) and hue  -> Cam16.from_jch
  - J*, a*, b*                     -> Cam16.from_ucs

Exports:
  Cam16
  ucs_distance(a, b)
"""

import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    ADAPTATION_EXPONENT,
    ADAPTATION_OFFSET,
    ADAPTATION_SCALE,
    CAM16RGB_TO_XYZ,
    DISTANCE_EXPONENT,
    DISTANCE_SCALE,
    ECCENTRICITY_HUE_SHIFT,
    SRGB_TO_XYZ,
    UCS_C1,
    UCS_C2,
    XYZ_TO_CAM16RGB,
)
from .colour_convert import (
    argb_from_xyz,
    matrix_multiply,
    xyz_from_argb,
)
from .core_types import ARGB, UCS, XYZ, LinRGB, sanitize_degrees, signum
from .viewing_conditions import ViewingConditions, default_viewing_conditions


def _vc_or_default(vc: Optional[ViewingConditions]) -> ViewingConditions:
    return vc if vc is not None else default_viewing_conditions()


def compress_response(scaled: float) -> float:
    """
    Signed CAM16 post-adaptation compression of one cone response.

    scaled is the adapted cone response already multiplied by fl / 100.
    """
    af = abs(scaled) ** ADAPTATION_EXPONENT
    return signum(scaled) * ADAPTATION_SCALE * af / (af + ADAPTATION_OFFSET)


def expand_response(adapted: float) -> float:
    """
    Inverse of compress_response.

    Responses at or past the 400 asymptote have no finite preimage; the
    denominator is floored so the result stays a (huge) finite number.
    """
    adapted_abs = abs(adapted)
    denominator = max(ADAPTATION_SCALE - adapted_abs, 1e-12)
    base = max(0.0, ADAPTATION_OFFSET * adapted_abs / denominator)
    return signum(adapted) * base ** (1.0 / ADAPTATION_EXPONENT)


def eccentricity(hue_radians: float) -> float:
    return 0.25 * (math.cos(hue_radians + 2.0) + 3.8)


def chroma_base(vc: ViewingConditions) -> float:
    return (1.64 - 0.29**vc.n) ** 0.73


def _ucs(j: float, m: float, hue_radians: float) -> UCS:
    jstar = (1.0 + 100.0 * UCS_C1) * j / (1.0 + UCS_C1 * j)
    mstar = math.log1p(UCS_C2 * m) / UCS_C2
    return (jstar, mstar * math.cos(hue_radians), mstar * math.sin(hue_radians))


@dataclass(frozen=True)
class Cam16:
    """
    CAM16 correlates of one colour under one set of viewing conditions.

    hue    : degrees in [0, 360)
    chroma : colourfulness relative to the white's brightness, like HSL
             saturation but perceptually accurate
    j      : lightness
    q      : brightness
    m      : colourfulness
    s      : saturation, chroma relative to the white
    jstar, astar, bstar : CAM16-UCS coordinates
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    # Forward

    @classmethod
    def from_argb(cls, argb: ARGB, vc: Optional[ViewingConditions] = None) -> Cam16:
        """Correlates of an sRGB colour. Alpha is ignored."""
        return cls.from_xyz(xyz_from_argb(argb), vc)

    @classmethod
    def from_linrgb(
        cls, linrgb: LinRGB, vc: Optional[ViewingConditions] = None
    ) -> Cam16:
        """Correlates of an unrounded linear sRGB point (0..100)."""
        return cls.from_xyz(matrix_multiply(linrgb, SRGB_TO_XYZ), vc)

    @classmethod
    def from_xyz(cls, xyz: XYZ, vc: Optional[ViewingConditions] = None) -> Cam16:
        vc = _vc_or_default(vc)

        r_c, g_c, b_c = matrix_multiply(xyz, XYZ_TO_CAM16RGB)
        r_a = compress_response(vc.fl * vc.rgb_d[0] * r_c / 100.0)
        g_a = compress_response(vc.fl * vc.rgb_d[1] * g_c / 100.0)
        b_a = compress_response(vc.fl * vc.rgb_d[2] * b_c / 100.0)

        # Opponent channels, achromatic signal.
        a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        if a == 0.0 and b == 0.0:
            # achromatic: hue undefined, report 0
            hue = 0.0
        else:
            hue = sanitize_degrees(math.degrees(math.atan2(b, a)))
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * max(ac / vc.aw, 0.0) ** (vc.c * vc.z)
        q = (4.0 / vc.c) * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < ECCENTRICITY_HUE_SHIFT else hue
        p1 = (50000.0 / 13.0) * eccentricity(math.radians(hue_prime)) * vc.nc * vc.ncb
        denominator = u + 0.305
        t = p1 * math.hypot(a, b) / denominator if denominator > 0.0 else 0.0
        alpha = chroma_base(vc) * t**0.9 if t > 0.0 else 0.0

        chroma = alpha * math.sqrt(j / 100.0)
        m = chroma * vc.fl_root
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))
        jstar, astar, bstar = _ucs(j, m, hue_radians)
        return cls(hue, chroma, j, q, m, s, jstar, astar, bstar)

    # Inverse

    @classmethod
    def from_jch(
        cls,
        j: float,
        chroma: float,
        hue: float,
        vc: Optional[ViewingConditions] = None,
    ) -> Cam16:
        """Full correlates from lightness J, chroma and hue (degrees)."""
        vc = _vc_or_default(vc)
        hue = sanitize_degrees(hue)
        hue_radians = math.radians(hue)
        q = (4.0 / vc.c) * math.sqrt(max(j, 0.0) / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = chroma * vc.fl_root
        alpha = chroma / math.sqrt(j / 100.0) if j > 0.0 else 0.0
        s = 50.0 * math.sqrt(max(alpha * vc.c / (vc.aw + 4.0), 0.0))
        jstar, astar, bstar = _ucs(j, m, hue_radians)
        return cls(hue, chroma, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        vc: Optional[ViewingConditions] = None,
    ) -> Cam16:
        """Full correlates from CAM16-UCS coordinates."""
        vc = _vc_or_default(vc)
        m = math.expm1(math.hypot(astar, bstar) * UCS_C2) / UCS_C2
        chroma = m / vc.fl_root
        hue = sanitize_degrees(math.degrees(math.atan2(bstar, astar)))
        j = jstar / (1.0 - (jstar - 100.0) * UCS_C1)
        return cls.from_jch(j, chroma, hue, vc)

    def to_xyz(self, vc: Optional[ViewingConditions] = None) -> XYZ:
        """XYZ of these correlates as seen under vc."""
        vc = _vc_or_default(vc)
        j = max(self.j, 0.0)
        alpha = (
            0.0
            if self.chroma <= 0.0 or j == 0.0
            else self.chroma / math.sqrt(j / 100.0)
        )
        t = (alpha / chroma_base(vc)) ** (1.0 / 0.9)
        hue_radians = math.radians(self.hue)

        ac = vc.aw * (j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = eccentricity(hue_radians) * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(hue_radians)
        h_cos = math.cos(hue_radians)
        denominator = 23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin
        gamma = 23.0 * (p2 + 0.305) * t / denominator if denominator != 0.0 else 0.0
        a = gamma * h_cos
        b = gamma * h_sin

        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        scale = 100.0 / vc.fl
        r_f = scale * expand_response(r_a) / vc.rgb_d[0]
        g_f = scale * expand_response(g_a) / vc.rgb_d[1]
        b_f = scale * expand_response(b_a) / vc.rgb_d[2]
        return matrix_multiply((r_f, g_f, b_f), CAM16RGB_TO_XYZ)

    def to_argb(self, vc: Optional[ViewingConditions] = None) -> ARGB:
        """sRGB colour of these correlates, rounded and clamped per channel."""
        return argb_from_xyz(*self.to_xyz(vc))

    @property
    def ucs(self) -> UCS:
        return (self.jstar, self.astar, self.bstar)

    def distance(self, other: Cam16) -> float:
        """CAM16-UCS colour difference to other."""
        return ucs_distance(self.ucs, other.ucs)


def ucs_distance(a: UCS, b: UCS) -> float:
    """
    Perceptual distance between two CAM16-UCS triples.

    Euclidean distance with the CAM16-UCS power-law correction
    (1.41 * dE'^0.63). Symmetric; zero for identical triples.
    """
    d_j = a[0] - b[0]
    d_a = a[1] - b[1]
    d_b = a[2] - b[2]
    d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
    return DISTANCE_SCALE * d_e_prime**DISTANCE_EXPONENT


__all__ = [
    "Cam16",
    "compress_response",
    "expand_response",
    "chroma_base",
    "eccentricity",
    "ucs_distance",
]
