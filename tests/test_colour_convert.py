import math
import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from colour_hct.colour_convert import (  # noqa: E402
    argb_from_lstar,
    argb_from_xyz,
    delinearized,
    linearized,
    lstar_from_argb,
    lstar_from_argb_array,
    lstar_from_y,
    xyz_from_argb,
    y_from_lstar,
)
from colour_hct.core_types import (  # noqa: E402
    argb_from_rgb,
    hex_from_argb,
    hex_to_rgb,
    hue_difference_degrees,
    parse_colour,
    rgb_from_argb,
    sanitize_degrees,
)

SAMPLES = [0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF4285F4, 0xFF123456]


def test_linearized_endpoints():
    assert linearized(0) == 0.0
    assert linearized(255) == pytest.approx(100.0)


def test_delinearized_rounds_and_clamps():
    assert delinearized(100.0) == 255
    assert delinearized(0.0) == 0
    assert delinearized(-5.0) == 0
    assert delinearized(1000.0) == 255
    assert delinearized(float("nan")) == 0


def test_linearized_delinearized_identity_on_codes():
    for code in range(256):
        assert delinearized(linearized(code)) == code


def test_lstar_y_inverse():
    for lstar in np.linspace(0.0, 100.0, 41):
        assert lstar_from_y(y_from_lstar(float(lstar))) == pytest.approx(float(lstar), abs=1e-9)


def test_tone_of_known_colours():
    assert lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0, abs=1e-6)
    assert lstar_from_argb(0xFF000000) == pytest.approx(0.0, abs=1e-6)
    assert lstar_from_argb(0xFF0000FF) == pytest.approx(32.30, abs=0.01)
    assert lstar_from_argb(0xFFFF0000) == pytest.approx(53.24, abs=0.01)


def test_argb_from_lstar_is_grey():
    assert argb_from_lstar(50.0) == 0xFF777777
    assert argb_from_lstar(100.0) == 0xFFFFFFFF
    assert argb_from_lstar(0.0) == 0xFF000000


def test_xyz_round_trip():
    for argb in SAMPLES:
        assert argb_from_xyz(*xyz_from_argb(argb)) == argb


def test_vectorised_tone_matches_scalar():
    tones = lstar_from_argb_array(np.asarray(SAMPLES, dtype=np.uint32))
    assert tones.shape == (len(SAMPLES),)
    for argb, tone in zip(SAMPLES, tones):
        assert tone == pytest.approx(lstar_from_argb(argb), abs=1e-9)


def test_parse_colour_forms():
    assert parse_colour("#0000ff") == 0xFF0000FF
    assert parse_colour("#00F") == 0xFF0000FF
    assert parse_colour("0000ff") == 0xFF0000FF
    assert parse_colour("0x0000FF") == 0xFF0000FF
    assert parse_colour("0x800000FF") == 0xFF0000FF


@pytest.mark.parametrize("text", ["#12345", "#zzzzzz", "0x123", "blue", ""])
def test_parse_colour_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_colour(text)


def test_hex_helpers():
    assert hex_from_argb(0xFF4285F4) == "#4285f4"
    assert hex_to_rgb("#4285F4") == (0x42, 0x85, 0xF4)
    with pytest.raises(ValueError):
        hex_to_rgb("4285f4")


def test_argb_packing():
    assert argb_from_rgb(1, 2, 3) == 0xFF010203
    assert rgb_from_argb(0x80010203) == (1, 2, 3)
    with pytest.raises(ValueError):
        argb_from_rgb(256, 0, 0)


def test_sanitize_degrees():
    assert sanitize_degrees(-10.0) == pytest.approx(350.0)
    assert sanitize_degrees(370.0) == pytest.approx(10.0)
    assert sanitize_degrees(360.0) == 0.0
    assert 0.0 <= sanitize_degrees(-1e-17) < 360.0


def test_hue_difference():
    assert hue_difference_degrees(350.0, 10.0) == pytest.approx(20.0)
    assert hue_difference_degrees(10.0, 350.0) == pytest.approx(20.0)
    assert hue_difference_degrees(0.0, 180.0) == pytest.approx(180.0)
    assert math.isclose(hue_difference_degrees(42.0, 42.0), 0.0)
