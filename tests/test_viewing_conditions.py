import dataclasses
import math
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from colour_hct.viewing_conditions import (  # noqa: E402
    ViewingConditionsConfig,
    build_viewing_conditions,
    default_viewing_conditions,
)


def test_default_is_shared_and_matches_fresh_build():
    first = default_viewing_conditions()
    assert default_viewing_conditions() is first
    assert build_viewing_conditions() == first


def test_default_constants():
    vc = default_viewing_conditions()
    assert vc.n == pytest.approx(0.1842, abs=1e-3)
    assert vc.z == pytest.approx(1.909, abs=1e-3)
    assert vc.nbb == pytest.approx(1.0169, abs=1e-3)
    assert vc.ncb == vc.nbb
    assert vc.c == pytest.approx(0.69)
    assert vc.nc == pytest.approx(1.0)
    assert vc.fl == pytest.approx(0.388, abs=1e-3)
    assert vc.fl_root == pytest.approx(vc.fl**0.25)
    assert vc.aw > 0.0


def test_surround_selects_exponent():
    dark = build_viewing_conditions(ViewingConditionsConfig(surround=0.0))
    dim = build_viewing_conditions(ViewingConditionsConfig(surround=1.0))
    assert dark.c == pytest.approx(0.525)
    assert dark.nc == pytest.approx(0.8)
    assert dim.c == pytest.approx(0.59)
    assert dim.nc == pytest.approx(0.9)


def test_discounting_illuminant_fully_adapts():
    cfg = ViewingConditionsConfig(discounting_illuminant=True)
    vc = build_viewing_conditions(cfg)
    default = default_viewing_conditions()
    assert vc.rgb_d != default.rgb_d
    # Full adaptation maps the white's cone responses to 100 each.
    white_cone = (
        0.401288 * 95.047 + 0.650173 * 100.0 - 0.051461 * 108.883,
        -0.250268 * 95.047 + 1.204414 * 100.0 + 0.045854 * 108.883,
        -0.002079 * 95.047 + 0.048952 * 100.0 + 0.953127 * 108.883,
    )
    for weight, cone in zip(vc.rgb_d, white_cone):
        assert weight * cone == pytest.approx(100.0)


def test_scaled_discount_matrices_are_inverse():
    vc = default_viewing_conditions()
    forward = vc.scaled_discount_from_linrgb
    inverse = vc.linrgb_from_scaled_discount
    for i in range(3):
        for j in range(3):
            cell = sum(inverse[i][k] * forward[k][j] for k in range(3))
            assert cell == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_bad_white_point_gives_nan_not_exception():
    vc = build_viewing_conditions(ViewingConditionsConfig(white_point=(-1.0, -1.0, -1.0)))
    assert math.isnan(vc.z)
    assert math.isnan(vc.nbb)


def test_viewing_conditions_are_frozen():
    vc = default_viewing_conditions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        vc.fl = 1.0  # type: ignore[misc]


def test_solver_matrices_do_not_affect_equality():
    vc = default_viewing_conditions()
    identity = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    other = dataclasses.replace(
        vc,
        scaled_discount_from_linrgb=identity,
        linrgb_from_scaled_discount=identity,
    )
    assert other == vc
    assert "scaled_discount" not in repr(vc)
