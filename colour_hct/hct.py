# colour_hct/hct.py
from __future__ import annotations

"""
HCT: hue, chroma, tone.

Hue and chroma come from CAM16; tone is CIE L*, computed from relative
luminance (not CAM16 J). An Hct always describes the sRGB colour it holds:
it is built either by measuring an ARGB, or by solving a (hue, chroma, tone)
request and then measuring the result. Chroma may therefore be lower than
requested when the request is outside the sRGB gamut.

Exports:
  Hct
  forward(argb) -> (hue, chroma, tone)
  solve(hue, chroma, tone) -> argb
  distance(argb_a, argb_b) -> float
"""

from dataclasses import dataclass
from typing import Optional

from .cam16 import Cam16
from .colour_convert import lstar_from_argb, lstar_from_y
from .core_types import ARGB, HctTuple, HexStr, hex_from_argb, parse_colour
from .solver import solve_to_argb
from .viewing_conditions import ViewingConditions


@dataclass(frozen=True)
class Hct:
    """
    Immutable HCT colour.

    hue    : [0, 360)
    chroma : >= 0, the chroma actually achieved
    tone   : [0, 100], L*
    argb   : the realised sRGB colour

    Changing one coordinate goes through the solver and returns a new Hct
    with all four fields re-derived together.
    """

    hue: float
    chroma: float
    tone: float
    argb: ARGB

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Hct:
        """Closest in-gamut colour to the request, measured back."""
        return cls.from_argb(solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: ARGB) -> Hct:
        cam = Cam16.from_argb(argb)
        return cls(cam.hue, cam.chroma, lstar_from_argb(argb), argb)

    @classmethod
    def from_hex(cls, text: str) -> Hct:
        return cls.from_argb(parse_colour(text))

    def with_hue(self, hue: float) -> Hct:
        return Hct.from_hct(hue, self.chroma, self.tone)

    def with_chroma(self, chroma: float) -> Hct:
        return Hct.from_hct(self.hue, chroma, self.tone)

    def with_tone(self, tone: float) -> Hct:
        return Hct.from_hct(self.hue, self.chroma, tone)

    def with_argb(self, argb: ARGB) -> Hct:
        return Hct.from_argb(argb)

    def to_tuple(self) -> HctTuple:
        return (self.hue, self.chroma, self.tone)

    def to_hex(self) -> HexStr:
        return hex_from_argb(self.argb)

    def in_viewing_conditions(self, vc: ViewingConditions) -> Hct:
        """
        The colour that looks, under default conditions, the way this one
        looks under vc.

        Keeps the CAM16 correlates, renders them in vc, then re-measures the
        result in the default viewing conditions.
        """
        cam = Cam16.from_argb(self.argb)
        viewed = cam.to_xyz(vc)
        recast = Cam16.from_xyz(viewed)
        return Hct.from_hct(recast.hue, recast.chroma, lstar_from_y(viewed[1]))


# Collaborator surface


def forward(argb: ARGB) -> HctTuple:
    """(hue, chroma, tone) of an ARGB colour."""
    return Hct.from_argb(argb).to_tuple()


def solve(
    hue: float,
    chroma: float,
    tone: float,
    vc: Optional[ViewingConditions] = None,
) -> ARGB:
    """ARGB for an HCT request, chroma clamped to the gamut."""
    return solve_to_argb(hue, chroma, tone, vc)


def distance(argb_a: ARGB, argb_b: ARGB) -> float:
    """CAM16-UCS distance between two ARGB colours."""
    return Cam16.from_argb(argb_a).distance(Cam16.from_argb(argb_b))


__all__ = ["Hct", "forward", "solve", "distance"]
