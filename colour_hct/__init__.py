# colour_hct/__init__.py
"""
colour_hct package.

Purpose:
  Convert between sRGB colours and HCT (hue, chroma, tone) on top of the CAM16
  colour appearance model, and solve HCT requests to in-gamut sRGB. See
  hct_tool.py for the CLI.

Public API:
  Hct                 : immutable HCT colour (from_hct, from_argb, with_*).
  forward / solve     : ARGB -> (hue, chroma, tone) and back, gamut-clamped.
  distance            : CAM16-UCS distance between two ARGB colours.
  Cam16               : full CAM16 correlates, forward and inverse.
  ViewingConditions   : derived CAM16 constants; build_viewing_conditions,
                        default_viewing_conditions.
  solver              : solve_to_argb, solve_report, max_chroma.
  colour_convert      : sRGB / XYZ / L* helpers.
  core_types          : shared type aliases and ARGB / hex helpers.
  utils               : batch measurement, formatting, logging.

Quick start:
  from colour_hct import Hct
  Hct.from_hct(hue=270.0, chroma=48.0, tone=40.0).to_hex()
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import constants
from . import viewing_conditions
from . import cam16
from . import solver
from . import hct
from . import utils

from .cam16 import Cam16, ucs_distance  # noqa: E402,F401
from .hct import Hct, distance, forward, solve  # noqa: E402,F401
from .solver import (  # noqa: E402,F401
    SolveResult,
    max_chroma,
    solve_report,
    solve_to_argb,
    solve_to_cam16,
)
from .viewing_conditions import (  # noqa: E402,F401
    ViewingConditions,
    ViewingConditionsConfig,
    build_viewing_conditions,
    default_viewing_conditions,
)

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "constants",
    "viewing_conditions",
    "cam16",
    "solver",
    "hct",
    "utils",
    "Cam16",
    "ucs_distance",
    "Hct",
    "forward",
    "solve",
    "distance",
    "SolveResult",
    "max_chroma",
    "solve_report",
    "solve_to_argb",
    "solve_to_cam16",
    "ViewingConditions",
    "ViewingConditionsConfig",
    "build_viewing_conditions",
    "default_viewing_conditions",
]
