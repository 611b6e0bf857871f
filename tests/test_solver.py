import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from colour_hct.cam16 import Cam16  # noqa: E402
from colour_hct.colour_convert import argb_from_lstar, lstar_from_argb  # noqa: E402
from colour_hct.core_types import hue_difference_degrees  # noqa: E402
from colour_hct.solver import (  # noqa: E402
    CRITICAL_PLANES,
    max_chroma,
    max_chroma_ramp,
    solve_report,
    solve_to_argb,
    solve_to_cam16,
)


def test_critical_planes():
    assert len(CRITICAL_PLANES) == 255
    assert CRITICAL_PLANES[0] == pytest.approx(0.015176349177441876, abs=1e-9)
    assert CRITICAL_PLANES[-1] == pytest.approx(99.55452497210776, abs=1e-6)
    assert all(a < b for a, b in zip(CRITICAL_PLANES, CRITICAL_PLANES[1:]))


def test_white_and_black():
    assert solve_to_argb(0.0, 0.0, 100.0) == 0xFFFFFFFF
    assert solve_to_argb(0.0, 0.0, 0.0) == 0xFF000000
    assert solve_to_argb(120.0, 80.0, 100.0) == 0xFFFFFFFF
    assert solve_to_argb(120.0, 80.0, 0.0) == 0xFF000000


def test_tone_outside_range_gives_black_or_white():
    assert solve_to_argb(200.0, 30.0, 150.0) == 0xFFFFFFFF
    assert solve_to_argb(200.0, 30.0, -20.0) == 0xFF000000


@pytest.mark.parametrize("tone", [10.0, 35.0, 50.0, 72.5, 95.0])
def test_achromatic_ignores_hue(tone):
    grey = argb_from_lstar(tone)
    for hue in (0.0, 45.0, 123.0, 270.0, 359.0):
        assert solve_to_argb(hue, 0.0, tone) == grey


def test_hue_is_wrapped():
    assert solve_to_argb(-10.0, 40.0, 50.0) == solve_to_argb(350.0, 40.0, 50.0)
    assert solve_to_argb(370.0, 40.0, 50.0) == solve_to_argb(10.0, 40.0, 50.0)


@pytest.mark.parametrize("hue", [15.0, 75.0, 135.0, 195.0, 255.0, 315.0])
@pytest.mark.parametrize("tone", [20.0, 50.0, 80.0])
def test_out_of_gamut_requests_clamp_to_one_colour(hue, tone):
    assert solve_to_argb(hue, 200.0, tone) == solve_to_argb(hue, 500.0, tone)


@pytest.mark.parametrize("hue", [22.0, 35.0, 105.0, 195.0, 285.0])
@pytest.mark.parametrize("tone", [30.0, 50.0, 80.0])
def test_achieved_chroma_grows_with_request(hue, tone):
    limit = max_chroma(hue, tone)
    requests = [0.25 * limit, 0.5 * limit, limit, limit + 0.01, 1.01 * limit, 1.5 * limit, 1000.0]
    achieved = [solve_to_cam16(hue, c, tone).chroma for c in requests]
    for lower, higher in zip(achieved, achieved[1:]):
        assert higher >= lower


@pytest.mark.parametrize("tone", [5.0, 15.0, 30.0, 50.0, 70.0, 85.0, 95.0])
def test_request_at_max_chroma_is_the_clamped_colour(tone):
    for hue in range(0, 360, 7):
        limit = max_chroma(float(hue), tone)
        at_limit = solve_report(float(hue), limit, tone)
        assert at_limit.path == "boundary"
        assert at_limit.argb == solve_to_argb(float(hue), 1000.0, tone)


def test_chroma_search_path():
    candidates = [(0.0, 70.0, 56.18)]
    for hue in range(0, 360, 15):
        for tone in (30.0, 50.0, 70.0):
            limit = max_chroma(float(hue), tone)
            for fraction in (0.95, 0.98, 0.99, 0.995, 0.999):
                candidates.append((float(hue), tone, fraction * limit))

    searched = []
    for hue, tone, chroma in candidates:
        result = solve_report(hue, chroma, tone)
        if result.path == "search":
            searched.append((result, max_chroma(hue, tone)))
    assert searched

    for result, limit in searched:
        assert result.clamped
        assert lstar_from_argb(result.argb) == pytest.approx(result.requested_tone, abs=1.0)
        assert result.chroma <= limit + 2.5
        assert result.chroma <= result.requested_chroma + 2.5
        if result.chroma > 10.0:
            assert hue_difference_degrees(result.hue, result.requested_hue) < 4.0


@pytest.mark.parametrize("hue", [15.0, 45.0, 105.0, 165.0, 225.0, 285.0, 345.0])
@pytest.mark.parametrize("chroma", [10.0, 40.0, 80.0, 150.0])
@pytest.mark.parametrize("tone", [20.0, 35.0, 50.0, 65.0, 80.0])
def test_result_is_close_to_request(hue, chroma, tone):
    argb = solve_to_argb(hue, chroma, tone)
    cam = Cam16.from_argb(argb)
    assert lstar_from_argb(argb) == pytest.approx(tone, abs=1.0)
    assert cam.chroma <= chroma + 2.5
    if cam.chroma > 10.0:
        assert hue_difference_degrees(cam.hue, hue) < 4.0


def test_report_paths():
    grey = solve_report(90.0, 0.0, 40.0)
    assert grey.path == "grey"
    assert not grey.clamped

    direct = solve_report(250.0, 10.0, 50.0)
    assert direct.path == "direct"
    assert direct.chroma == pytest.approx(10.0, abs=1.0)

    far = solve_report(250.0, 400.0, 50.0)
    assert far.clamped
    assert far.chroma < 400.0
    assert far.requested_chroma == 400.0


def test_report_wraps_requested_hue():
    assert solve_report(-90.0, 20.0, 50.0).requested_hue == pytest.approx(270.0)


def test_max_chroma_of_blue_primary():
    blue = Cam16.from_argb(0xFF0000FF)
    limit = max_chroma(blue.hue, lstar_from_argb(0xFF0000FF))
    assert limit == pytest.approx(blue.chroma, abs=1.5)


def test_max_chroma_matches_clamped_solve():
    for hue in (30.0, 150.0, 270.0):
        limit = max_chroma(hue, 50.0)
        clamped = solve_to_cam16(hue, 1000.0, 50.0).chroma
        assert clamped == pytest.approx(limit, abs=2.5)


def test_max_chroma_ramp_and_extremes():
    ramp = max_chroma_ramp(270.0, [0.0, 50.0, 100.0])
    assert ramp[0] == 0.0
    assert ramp[2] == 0.0
    assert ramp[1] > 0.0
