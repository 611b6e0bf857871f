# colour_hct/core_types.py
from __future__ import annotations

"""
Core type aliases and lightweight helpers.
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

ARGB = int  # 0xAARRGGBB, alpha assumed opaque
RGBTuple = Tuple[int, int, int]
HexStr = str

LinRGB = Tuple[float, float, float]  # linear sRGB, 0..100 per channel
XYZ = Tuple[float, float, float]  # CIE XYZ, Y in 0..100
UCS = Tuple[float, float, float]  # CAM16-UCS (J*, a*, b*)
HctTuple = Tuple[float, float, float]  # (hue, chroma, tone)

ARGBArray = NDArray[np.uint32]  # (N,)
FloatArray = NDArray[np.float64]

OPAQUE_ALPHA = 0xFF000000


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def clamp_channel(value: int) -> int:
    """Clamp an integer channel to 0..255."""
    return 0 if value < 0 else 255 if value > 255 else value


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation; amount 0 gives start, 1 gives stop."""
    return (1.0 - amount) * start + amount * stop


def signum(value: float) -> float:
    """-1.0, 0.0 or 1.0 following the sign of value."""
    if value < 0.0:
        return -1.0
    if value == 0.0:
        return 0.0
    return 1.0


def sanitize_degrees(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = degrees % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if degrees >= 360.0 else degrees


def sanitize_radians(angle: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    return (angle + np.pi * 8.0) % (np.pi * 2.0)


def hue_difference_degrees(hue_a: float, hue_b: float) -> float:
    """Minimal absolute difference between two hues in degrees (0..180]."""
    d = abs((hue_a - hue_b) % 360.0)
    return 360.0 - d if d > 180.0 else d


# ARGB packing


def argb_from_rgb(red: int, green: int, blue: int) -> ARGB:
    """Pack 8-bit channels into an opaque ARGB int."""
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} channel out of range 0..255: {value}")
    return OPAQUE_ALPHA | (red << 16) | (green << 8) | blue


def rgb_from_argb(argb: ARGB) -> RGBTuple:
    """Unpack (r, g, b) from an ARGB int. Alpha is ignored."""
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)


# Hex strings


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    try:
        return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))
    except ValueError:
        raise ValueError(f"not a hex colour: {hex_str!r}") from None


def hex_from_argb(argb: ARGB) -> HexStr:
    """ARGB int to '#rrggbb'."""
    return rgb_to_hex(rgb_from_argb(argb))


def parse_colour(text: str) -> ARGB:
    """
    Parse a user-supplied colour into an opaque ARGB int.

    Accepts '#rgb', '#rrggbb', 'rrggbb' and '0xAARRGGBB' / '0xRRGGBB'.
    The alpha byte of a 0x literal is replaced with 0xFF.
    """
    s = text.strip().lower()
    if s.startswith("0x"):
        digits = s[2:]
        if len(digits) not in (6, 8):
            raise ValueError("0x colour must have 6 or 8 hex digits")
        try:
            value = int(digits, 16)
        except ValueError:
            raise ValueError(f"not a hex colour: {text!r}") from None
        return OPAQUE_ALPHA | (value & 0x00FFFFFF)
    if not s.startswith("#"):
        s = f"#{s}"
    return argb_from_rgb(*hex_to_rgb(s))


__all__ = [
    # aliases / types
    "ARGB",
    "RGBTuple",
    "HexStr",
    "LinRGB",
    "XYZ",
    "UCS",
    "HctTuple",
    "ARGBArray",
    "FloatArray",
    "OPAQUE_ALPHA",
    # helpers
    "clamp_value",
    "clamp_channel",
    "lerp",
    "signum",
    "sanitize_degrees",
    "sanitize_radians",
    "hue_difference_degrees",
    "argb_from_rgb",
    "rgb_from_argb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hex_from_argb",
    "parse_colour",
]
