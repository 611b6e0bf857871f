# colour_hct/solver.py
from __future__ import annotations

"""
Gamut solver: (hue, chroma, tone) -> in-gamut sRGB.

Tone fixes the relative luminance Y, and the colours of that luminance form a
plane section of the linear-RGB cube (a triangle or hexagon). Inside that
section the colours of one CAM16 hue run outward from the grey at Y. The
solver returns the colour at the requested chroma on that curve when it lies
inside the cube, and the point where the curve leaves the cube otherwise.

Steps:
  1. Greys (chroma ~ 0, tone at 0 or 100) short-circuit to argb_from_lstar.
  2. Boundary: walk the cube section's vertices in hue order to the edge
     containing the hue, then bisect that edge over the 8-bit critical planes.
     Requests at or above the boundary chroma return the boundary colour.
  3. Direct point: Newton iteration on J for (hue, chroma) at luminance Y.
  4. If the direct point still failed, binary search chroma against the
     direct-point test.

Chroma reachable at c implies every chroma in [0, c] is reachable at the same
hue and tone, so bisection on chroma is sound.

Exports:
  solve_to_argb(hue, chroma, tone, vc=None) -> ARGB
  solve_to_cam16(hue, chroma, tone, vc=None) -> Cam16
  solve_report(hue, chroma, tone, vc=None) -> SolveResult
  max_chroma(hue, tone, vc=None) -> float
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cam16 import Cam16, chroma_base, compress_response, eccentricity, expand_response
from .colour_convert import (
    argb_from_linrgb,
    argb_from_lstar,
    matrix_multiply,
    rgb_to_linear,
    true_delinearized,
    y_from_lstar,
)
from .constants import (
    ACHROMATIC_CHROMA_EPS,
    CHROMA_SEARCH_MAX_ITER,
    CHROMA_SEARCH_TOL,
    CRITICAL_PLANE_ROUNDS,
    GAMUT_TOP_SLACK,
    J_SEARCH_ROUNDS,
    J_SEARCH_Y_TOL,
    TONE_MAX_EPS,
    TONE_MIN_EPS,
    Y_FROM_LINRGB,
)
from .core_types import ARGB, LinRGB, sanitize_degrees, sanitize_radians
from .viewing_conditions import ViewingConditions, default_viewing_conditions

# Linear values (0..100) of the midpoints between consecutive 8-bit codes.
# A linear coordinate crossing CRITICAL_PLANES[i] changes its rounded code
# from i to i + 1.
CRITICAL_PLANES: Tuple[float, ...] = tuple(
    (rgb_to_linear((np.arange(255, dtype=np.float64) + 0.5) / 255.0) * 100.0).tolist()
)


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of one solve.

    path is how the answer was found: "grey", "direct", "boundary" or
    "search". The last two mean the request was outside the gamut and
    chroma was reduced.
    """

    argb: ARGB
    requested_hue: float
    requested_chroma: float
    requested_tone: float
    hue: float
    chroma: float
    path: str

    @property
    def clamped(self) -> bool:
        return self.path in ("boundary", "search")


# Geometry in linear RGB


def _y_of(linrgb: Sequence[float]) -> float:
    k_r, k_g, k_b = Y_FROM_LINRGB
    return k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]


def _hue_of(linrgb: Sequence[float], vc: ViewingConditions) -> float:
    """CAM16 hue of a linear RGB point, radians in (-pi, pi]."""
    scaled = matrix_multiply(linrgb, vc.scaled_discount_from_linrgb)
    r_a, g_a, b_a = (compress_response(x) for x in scaled)
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _in_cyclic_order(a: float, b: float, c: float) -> bool:
    """True when going counter-clockwise from a, b comes before c."""
    return sanitize_radians(b - a) < sanitize_radians(c - a)


def _set_coordinate(
    source: LinRGB, coordinate: float, target: LinRGB, axis: int
) -> LinRGB:
    """Point on segment source->target whose axis coordinate equals coordinate."""
    t = (coordinate - source[axis]) / (target[axis] - source[axis])
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _midpoint(a: LinRGB, b: LinRGB) -> LinRGB:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0, (a[2] + b[2]) / 2.0)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> Optional[LinRGB]:
    """
    Intersection of the plane Y = y with the n-th cube edge (0..11).

    Edges 0-3 run along R, 4-7 along G, 8-11 along B; the other two
    coordinates sit at 0 or 100. None when the plane misses that edge.
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else None
    if n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else None
    r, g = coord_a, coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else None


def _bisect_to_segment(
    y: float, target_hue: float, vc: ViewingConditions
) -> Tuple[LinRGB, LinRGB]:
    """
    Edge of the cube section at Y = y whose hue range contains target_hue.

    Vertices are visited once; the (left, right) pair is narrowed so target
    stays between them in hue order.
    """
    left: Optional[LinRGB] = None
    right: Optional[LinRGB] = None
    left_hue = 0.0
    right_hue = 0.0
    uncut = True
    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid is None:
            continue
        mid_hue = _hue_of(mid, vc)
        if left is None or right is None:
            left = right = mid
            left_hue = right_hue = mid_hue
            continue
        if uncut or _in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _in_cyclic_order(left_hue, target_hue, mid_hue):
                right, right_hue = mid, mid_hue
            else:
                left, left_hue = mid, mid_hue
    if left is None or right is None:
        grey = (y, y, y)
        return grey, grey
    return left, right


def _plane_below(x: float) -> int:
    return math.floor(x - 0.5)


def _plane_above(x: float) -> int:
    return math.ceil(x - 0.5)


def _bisect_to_limit(y: float, target_hue: float, vc: ViewingConditions) -> LinRGB:
    """Point on the cube section's boundary with CAM16 hue target_hue."""
    left, right = _bisect_to_segment(y, target_hue, vc)
    left_hue = _hue_of(left, vc)
    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = _plane_below(true_delinearized(left[axis]))
            r_plane = _plane_above(true_delinearized(right[axis]))
        else:
            l_plane = _plane_above(true_delinearized(left[axis]))
            r_plane = _plane_below(true_delinearized(right[axis]))
        for _ in range(CRITICAL_PLANE_ROUNDS):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = (l_plane + r_plane) // 2
            mid = _set_coordinate(left, CRITICAL_PLANES[m_plane], right, axis)
            mid_hue = _hue_of(mid, vc)
            if _in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane
    return _midpoint(left, right)


# Direct point for a given chroma


def _point_at(
    hue_radians: float, chroma: float, y: float, vc: ViewingConditions
) -> Optional[LinRGB]:
    """
    Linear RGB of (hue, chroma) at luminance y, or None outside the cube.

    J is unknown for a target Y, so it is found by Newton iteration starting
    from J ~ 11 sqrt(Y), using dY/dJ ~ 2 Y / J.
    """
    j = math.sqrt(y) * 11.0
    t_inner = 1.0 / chroma_base(vc)
    p1 = eccentricity(hue_radians) * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    for round_idx in range(J_SEARCH_ROUNDS):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = (alpha * t_inner) ** (1.0 / 0.9)
        ac = vc.aw * j_normalized ** (1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        denominator = 23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin
        if denominator == 0.0:
            return None
        gamma = 23.0 * (p2 + 0.305) * t / denominator
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        scaled = (expand_response(r_a), expand_response(g_a), expand_response(b_a))
        linrgb = matrix_multiply(scaled, vc.linrgb_from_scaled_discount)
        if linrgb[0] < 0.0 or linrgb[1] < 0.0 or linrgb[2] < 0.0:
            return None
        fnj = _y_of(linrgb)
        if fnj <= 0.0:
            return None
        if round_idx == J_SEARCH_ROUNDS - 1 or abs(fnj - y) < J_SEARCH_Y_TOL:
            top = 100.0 + GAMUT_TOP_SLACK
            if linrgb[0] > top or linrgb[1] > top or linrgb[2] > top:
                return None
            return linrgb
        j = j - (fnj - y) * j / (2.0 * fnj)
    return None


def _search_chroma(
    hue_radians: float, chroma: float, y: float, vc: ViewingConditions
) -> LinRGB:
    """Largest feasible chroma in [0, chroma] by bisection; best point found."""
    lo, hi = 0.0, chroma
    best: LinRGB = (y, y, y)
    for _ in range(CHROMA_SEARCH_MAX_ITER):
        if hi - lo < CHROMA_SEARCH_TOL:
            break
        mid = (lo + hi) / 2.0
        point = _point_at(hue_radians, mid, y, vc)
        if point is None:
            hi = mid
        else:
            lo = mid
            best = point
    return best


def _is_grey_request(chroma: float, tone: float) -> bool:
    return chroma < ACHROMATIC_CHROMA_EPS or tone < TONE_MIN_EPS or tone > TONE_MAX_EPS


def _solve(
    hue: float, chroma: float, tone: float, vc: ViewingConditions
) -> Tuple[ARGB, str]:
    if _is_grey_request(chroma, tone):
        return argb_from_lstar(tone), "grey"

    hue_radians = math.radians(sanitize_degrees(hue))
    y = y_from_lstar(tone)

    # Every request at or past the boundary chroma maps to the boundary colour.
    boundary = _bisect_to_limit(y, hue_radians, vc)
    if chroma >= Cam16.from_linrgb(boundary, vc).chroma:
        return argb_from_linrgb(boundary), "boundary"

    direct = _point_at(hue_radians, chroma, y, vc)
    if direct is not None:
        return argb_from_linrgb(direct), "direct"
    return argb_from_linrgb(_search_chroma(hue_radians, chroma, y, vc)), "search"


# Public API


def solve_to_argb(
    hue: float,
    chroma: float,
    tone: float,
    vc: Optional[ViewingConditions] = None,
) -> ARGB:
    """
    sRGB colour with the given hue and tone and the requested chroma, or the
    largest chroma the sRGB gamut allows at that hue and tone.

    Never raises. Hue is wrapped into [0, 360). Tone is not clamped: values
    at or beyond 0 / 100 give black / white.
    """
    vc = vc if vc is not None else default_viewing_conditions()
    return _solve(hue, chroma, tone, vc)[0]


def solve_to_cam16(
    hue: float,
    chroma: float,
    tone: float,
    vc: Optional[ViewingConditions] = None,
) -> Cam16:
    """Cam16 measurement of solve_to_argb(...)."""
    vc = vc if vc is not None else default_viewing_conditions()
    return Cam16.from_argb(_solve(hue, chroma, tone, vc)[0], vc)


def solve_report(
    hue: float,
    chroma: float,
    tone: float,
    vc: Optional[ViewingConditions] = None,
) -> SolveResult:
    """Solve and describe the result: achieved hue/chroma and search path."""
    vc = vc if vc is not None else default_viewing_conditions()
    argb, path = _solve(hue, chroma, tone, vc)
    cam = Cam16.from_argb(argb, vc)
    return SolveResult(
        argb=argb,
        requested_hue=sanitize_degrees(hue),
        requested_chroma=chroma,
        requested_tone=tone,
        hue=cam.hue,
        chroma=cam.chroma,
        path=path,
    )


def max_chroma(
    hue: float, tone: float, vc: Optional[ViewingConditions] = None
) -> float:
    """Largest CAM16 chroma the sRGB gamut holds at this hue and tone."""
    vc = vc if vc is not None else default_viewing_conditions()
    if _is_grey_request(1.0, tone):
        return 0.0
    y = y_from_lstar(tone)
    boundary = _bisect_to_limit(y, math.radians(sanitize_degrees(hue)), vc)
    return Cam16.from_linrgb(boundary, vc).chroma


def max_chroma_ramp(
    hue: float, tones: Sequence[float], vc: Optional[ViewingConditions] = None
) -> List[float]:
    """max_chroma over several tones at one hue."""
    return [max_chroma(hue, tone, vc) for tone in tones]


__all__ = [
    "CRITICAL_PLANES",
    "SolveResult",
    "solve_to_argb",
    "solve_to_cam16",
    "solve_report",
    "max_chroma",
    "max_chroma_ramp",
]
