#!/usr/bin/env python3
"""
hct_tool.py
Inspect colours in HCT (hue, chroma, tone) and solve HCT requests to sRGB.

Usage:
  python hct_tool.py measure COLOUR [COLOUR ...] [--workers N]
  python hct_tool.py solve HUE CHROMA TONE
  python hct_tool.py distance COLOUR COLOUR
  python hct_tool.py max-chroma HUE TONE [TONE ...]

Common flags:
  --surround S              0 dark, 1 dim, 2 average (default 2)
  --background L            background L* (default 50)
  --adapting-luminance LA   cd/m^2 (default ~11.72, 200 lux)
  --discount                discount the illuminant
  --debug                   print viewing conditions and solver paths

Colours:
  '#rgb', '#rrggbb', 'rrggbb' or '0xAARRGGBB'. Alpha is ignored.

Notes:
  Colour maths lives in colour_hct; shared formatting and logging in
  colour_hct.utils. Malformed colours exit with status 2.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from colour_hct.cam16 import Cam16
from colour_hct.colour_convert import lstar_from_argb
from colour_hct.core_types import hex_from_argb, hue_difference_degrees, parse_colour
from colour_hct.solver import max_chroma_ramp, solve_report
from colour_hct.utils import (
    debug_log,
    error,
    key_value_pairs_to_string,
    log,
    measure_many,
    print_config_line,
    warn,
)
from colour_hct.viewing_conditions import (
    ViewingConditions,
    ViewingConditionsConfig,
    build_viewing_conditions,
    default_viewing_conditions,
)

# CLI args & small helpers


def _default_workers() -> int:
    """Leave a core free for the system; returns a sensible worker count."""
    n = os.cpu_count() or 2
    return max(1, n - 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hct_tool",
        description="Measure colours in HCT and solve HCT requests to in-gamut sRGB.",
    )
    parser.add_argument("--surround", type=float, default=None, help="0 dark .. 2 average")
    parser.add_argument("--background", type=float, default=None, help="Background L*")
    parser.add_argument(
        "--adapting-luminance",
        type=float,
        default=None,
        help="Adapting field luminance in cd/m^2",
    )
    parser.add_argument("--discount", action="store_true", help="Discount the illuminant")
    parser.add_argument("--debug", action="store_true", help="Verbose details")

    sub = parser.add_subparsers(dest="command", required=True)

    p_measure = sub.add_parser("measure", help="HCT and CAM16 correlates of colours")
    p_measure.add_argument("colours", nargs="+", help="Colours to measure")
    p_measure.add_argument(
        "--workers", type=int, default=_default_workers(), help="Internal workers"
    )

    p_solve = sub.add_parser("solve", help="sRGB colour for an HCT request")
    p_solve.add_argument("hue", type=float)
    p_solve.add_argument("chroma", type=float)
    p_solve.add_argument("tone", type=float)

    p_distance = sub.add_parser("distance", help="CAM16-UCS distance of two colours")
    p_distance.add_argument("first")
    p_distance.add_argument("second")

    p_max = sub.add_parser("max-chroma", help="Largest chroma at a hue and tone(s)")
    p_max.add_argument("hue", type=float)
    p_max.add_argument("tones", type=float, nargs="+")
    return parser


def viewing_conditions_from_args(args: argparse.Namespace) -> ViewingConditions:
    """Default conditions unless any override flag is set."""
    overrides = {}
    if args.surround is not None:
        overrides["surround"] = args.surround
    if args.background is not None:
        overrides["background_lstar"] = args.background
    if args.adapting_luminance is not None:
        overrides["adapting_luminance"] = args.adapting_luminance
    if args.discount:
        overrides["discounting_illuminant"] = True
    if not overrides:
        return default_viewing_conditions()
    return build_viewing_conditions(ViewingConditionsConfig(**overrides))


# Commands


def _cmd_measure(args: argparse.Namespace, vc: ViewingConditions) -> None:
    argbs = [parse_colour(text) for text in args.colours]
    rows = measure_many(argbs, workers=args.workers, vc=vc)
    for argb, (hue, chroma, tone) in zip(argbs, rows.tolist()):
        cam = Cam16.from_argb(argb, vc)
        log(
            f"{hex_from_argb(argb)}  "
            + key_value_pairs_to_string(
                [("H", hue), ("C", chroma), ("T", tone)], sep="  ", eq=" "
            )
        )
        log(
            "  "
            + key_value_pairs_to_string(
                [
                    ("J", cam.j),
                    ("Q", cam.q),
                    ("M", cam.m),
                    ("s", cam.s),
                    ("J*", cam.jstar),
                    ("a*", cam.astar),
                    ("b*", cam.bstar),
                ],
                eq=" ",
            )
        )


def _cmd_solve(args: argparse.Namespace, vc: ViewingConditions) -> None:
    if not 0.0 <= args.tone <= 100.0:
        warn(f"tone {args.tone} is outside 0..100; result is black or white")
    result = solve_report(args.hue, args.chroma, args.tone, vc)
    log(
        f"{hex_from_argb(result.argb)}  "
        + key_value_pairs_to_string(
            [
                ("H", result.hue),
                ("C", result.chroma),
                ("T", lstar_from_argb(result.argb)),
            ],
            eq=" ",
        )
    )
    if result.clamped:
        log(f"chroma reduced from {args.chroma:g} to {result.chroma:.2f} (gamut limit)")
    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Path", result.path),
                    ("Hue drift", hue_difference_degrees(result.hue, result.requested_hue)),
                    ("Clamped", result.clamped),
                ]
            )
        )


def _cmd_distance(args: argparse.Namespace, vc: ViewingConditions) -> None:
    first = Cam16.from_argb(parse_colour(args.first), vc)
    second = Cam16.from_argb(parse_colour(args.second), vc)
    log(f"{first.distance(second):.4f}")


def _cmd_max_chroma(args: argparse.Namespace, vc: ViewingConditions) -> None:
    for tone, limit in zip(args.tones, max_chroma_ramp(args.hue, args.tones, vc)):
        log(key_value_pairs_to_string([("T", tone), ("max C", limit)], eq=" "))


COMMANDS = {
    "measure": _cmd_measure,
    "solve": _cmd_solve,
    "distance": _cmd_distance,
    "max-chroma": _cmd_max_chroma,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    vc = viewing_conditions_from_args(args)

    if args.debug:
        print_config_line(
            "vc",
            [
                ("Surround", args.surround if args.surround is not None else 2.0),
                ("Background L*", args.background if args.background is not None else 50.0),
                ("Discount", args.discount),
                ("FL", vc.fl),
                ("Aw", vc.aw),
                ("z", vc.z),
            ],
            debug=True,
        )

    try:
        COMMANDS[args.command](args, vc)
    except ValueError as exc:
        error(str(exc))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
