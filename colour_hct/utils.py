# colour_hct/utils.py
from __future__ import annotations

"""
Shared utilities for colour_hct.

Includes batch measurement helpers, readable number formatting and tidy
logging used by the command-line tool.
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .cam16 import Cam16
from .colour_convert import lstar_from_argb_array
from .core_types import ARGB, FloatArray
from .viewing_conditions import ViewingConditions, default_viewing_conditions


# Batch measurement


def split_rows_into_parts(count: int, parts: int) -> List[Tuple[int, int]]:
    """Partition range [0, count) into ~parts contiguous [start, end) spans."""
    if count <= 0:
        return []
    parts = max(1, int(parts))
    step = (count + parts - 1) // parts
    return [(start, min(start + step, count)) for start in range(0, count, step)]


def _measure_span(argbs: Sequence[ARGB], vc: ViewingConditions) -> FloatArray:
    out = np.empty((len(argbs), 3), dtype=np.float64)
    for i, argb in enumerate(argbs):
        cam = Cam16.from_argb(int(argb), vc)
        out[i, 0] = cam.hue
        out[i, 1] = cam.chroma
    out[:, 2] = lstar_from_argb_array(np.asarray(argbs, dtype=np.uint32))
    return out


def measure_many(
    argbs: Sequence[ARGB], workers: int = 1, vc: ViewingConditions | None = None
) -> FloatArray:
    """
    (hue, chroma, tone) rows for many ARGB colours.

    Args:
      argbs: sequence or array of ARGB ints
      workers: number of threads; if <=1 or fewer than 256 colours, runs single-threaded
    Returns:
      float64 array [N,3]
    """
    vc = vc if vc is not None else default_viewing_conditions()
    values = [int(a) for a in argbs]
    if not values:
        return np.zeros((0, 3), dtype=np.float64)
    if workers <= 1 or len(values) < 256:
        return _measure_span(values, vc)

    spans = split_rows_into_parts(len(values), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_measure_span, values[s:e], vc) for s, e in spans]
        parts = [f.result() for f in futures]
    return np.vstack(parts)


# Console output


def format_value(value: Any, digits: int = 3) -> str:
    """Report text for one value: on/off for bools, 1,234 for ints, trimmed floats."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
        return "0" if text in ("", "-0") else text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """'Name: value' blocks joined by sep, values through format_value."""
    return sep.join(f"{name}{eq}{format_value(value)}" for name, value in pairs)


def _emit(tag: str, message: str, stream: Optional[TextIO] = None) -> None:
    prefix = f"[{tag}] " if tag else ""
    print(f"{prefix}{message}", file=stream if stream is not None else sys.stdout, flush=True)


def log(message: str) -> None:
    _emit("", message)


def debug_log(message: str) -> None:
    _emit("debug", message)


def warn(message: str) -> None:
    _emit("warn", message)


def error(message: str) -> None:
    """Error line, on stderr."""
    _emit("error", message, sys.stderr)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    One settings line, e.g. '[vc] Surround: 2  Discount: off  FL: 0.388'.
    Tagged as debug output when debug is set.
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


__all__ = [
    # batch
    "split_rows_into_parts",
    "measure_many",
    # console
    "format_value",
    "key_value_pairs_to_string",
    "print_config_line",
    "log",
    "debug_log",
    "warn",
    "error",
]
