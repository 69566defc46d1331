import itertools

import numpy as np
import pytest

from interpolatica import Color, Lab, from_lab, to_lab
from interpolatica.conversions import (
    lab_to_unit_rgb,
    linear_to_srgb,
    np_lab_to_unit_rgb,
    np_unit_rgb_to_lab,
    srgb_to_linear,
    unit_rgb_to_lab,
)

LAB_GRID = list(itertools.product(
    [0.0, 25.0, 50.0, 75.0, 100.0],
    [-160.0, -80.0, 0.0, 80.0, 160.0],
    [-160.0, -80.0, 0.0, 80.0, 160.0],
    [0.0, 0.5, 1.0],
))


def test_known_lab_value():
    l, a, b = unit_rgb_to_lab(170 / 255, 187 / 255, 204 / 255)
    assert l == pytest.approx(74.9687998, abs=1e-5)
    assert a == pytest.approx(-3.3989987, abs=1e-5)
    assert b == pytest.approx(-10.6965072, abs=1e-5)


def test_white_and_black():
    assert unit_rgb_to_lab(1.0, 1.0, 1.0) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)
    assert unit_rgb_to_lab(0.0, 0.0, 0.0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("level", [0.0, 0.01, 0.2, 0.5, 0.73, 1.0])
def test_neutral_colors_sit_on_the_achromatic_axis(level):
    lab = to_lab(Color(level, level, level))
    assert lab.a == 0.0
    assert lab.b == 0.0


def test_alpha_passes_through():
    assert to_lab(Color(0.1, 0.2, 0.3, 0.25)).alpha == 0.25
    assert from_lab(Lab(40.0, 10.0, -10.0, 0.75)).alpha == 0.75


@pytest.mark.parametrize("l,a,b,alpha", LAB_GRID)
def test_round_trip_lab_to_rgb_to_lab(l, a, b, alpha):
    out = to_lab(from_lab(Lab(l, a, b, alpha)))

    assert abs(out.l - l) < 1e-3
    assert abs(out.a - a) < 1e-3
    assert abs(out.b - b) < 1e-3
    assert abs(out.alpha - alpha) < 1e-10


def test_from_lab_does_not_clamp_out_of_gamut():
    r, g, b = lab_to_unit_rgb(50.0, 160.0, 0.0)
    assert r > 1.0 or min(g, b) < 0.0


def test_round_trip_rgb_to_lab_to_rgb():
    for r, g, b in [(0.1, 0.5, 0.9), (1.0, 0.0, 0.0), (0.02, 0.03, 0.04), (0.9, 0.9, 0.1)]:
        assert lab_to_unit_rgb(*unit_rgb_to_lab(r, g, b)) == pytest.approx((r, g, b), abs=1e-9)


def test_numpy_matches_scalar():
    rgb = np.array([
        [0.1, 0.5, 0.9],
        [0.3, 0.3, 0.3],
        [1.0, 0.2, 0.0],
    ])
    lab = np_unit_rgb_to_lab(rgb)
    assert lab.shape == (3, 3)
    for row_in, row_out in zip(rgb, lab):
        assert np.allclose(row_out, unit_rgb_to_lab(*row_in.tolist()), atol=1e-12)
    assert np.allclose(np_lab_to_unit_rgb(lab), rgb, atol=1e-9)


def test_transfer_curve_round_trip():
    values = np.linspace(-0.5, 1.5, 201)
    # Skip the narrow band where the two sRGB curve pieces overlap
    values = values[(values < 0.0031) | (values > 0.0032)]
    assert np.allclose(srgb_to_linear(linear_to_srgb(values)), values, atol=1e-9)
