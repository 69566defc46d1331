"""
CIE L*a*b* conversions.

Conversion chain: sRGB → linear RGB → XYZ (D50) → Lab

sRGB is defined against D65; the RGB → XYZ matrix below already includes the
Bradford adaptation to the D50 reference white, so Lab values agree with
d3-color and CSS Color 4 ``lab()``.

The inverse path never clamps. Lab coordinates outside the sRGB gamut map to
unit RGB channels outside [0, 1], which map back to the same Lab coordinates.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Reference white, D50
XN = 0.96422
YN = 1.0
ZN = 0.82521

# CIE f(t) breakpoints: t0 = 4/29, t1 = 6/29, t2 = 3 * t1², t3 = t1³
T0 = 4 / 29
T1 = 6 / 29
T2 = 3 * T1 * T1
T3 = T1 * T1 * T1

# Linear sRGB → XYZ, Bradford-adapted to D50
_RGB_TO_XYZ = np.array([
    [0.4360747, 0.3850649, 0.1430804],
    [0.2225045, 0.7168786, 0.0606169],
    [0.0139322, 0.0971045, 0.7141733],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

_WHITE = np.array([XN, YN, ZN], dtype=np.float64)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Power branch only evaluated where it is selected, so negatives never hit a fractional power
    safe = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((safe + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values are not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    safe = np.maximum(linear, 0.0031308)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(safe, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# XYZ ↔ Lab companding
# =============================================================================


def _xyz_to_lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > T3, np.cbrt(t), t / T2 + T0)


def _lab_to_xyz_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > T1, t * t * t, T2 * (t - T0))


# =============================================================================
# Unit RGB ↔ Lab
# =============================================================================


def np_unit_rgb_to_lab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert unit sRGB to Lab.

    Args:
        rgb: Array of shape (..., 3) with sRGB channels, nominally [0, 1]

    Returns:
        Array of shape (..., 3) with Lab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = srgb_to_linear(rgb)

    xyz = np.einsum('...j,ij->...i', linear, _RGB_TO_XYZ) / _WHITE
    f = _xyz_to_lab_f(xyz)

    # Neutral inputs sit exactly on the achromatic axis
    neutral = (rgb[..., 0] == rgb[..., 1]) & (rgb[..., 1] == rgb[..., 2])
    fy = f[..., 1]
    fx = np.where(neutral, fy, f[..., 0])
    fz = np.where(neutral, fy, f[..., 2])

    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_unit_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert Lab to unit sRGB.

    Args:
        lab: Array of shape (..., 3) with Lab values (L, a, b)

    Returns:
        Array of shape (..., 3) with sRGB channels; out-of-gamut colors fall outside [0, 1]
    """
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    xyz = _lab_to_xyz_f(np.stack([fx, fy, fz], axis=-1)) * _WHITE
    linear = np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)
    return linear_to_srgb(linear)


def unit_rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Scalar RGB → Lab. Returns (L, a, b) as Python floats."""
    l, a, b_ = np_unit_rgb_to_lab(np.array([r, g, b], dtype=np.float64)).tolist()
    return l, a, b_


def lab_to_unit_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """Scalar Lab → RGB. Returns (r, g, b) as Python floats."""
    r, g, b_ = np_lab_to_unit_rgb(np.array([l, a, b], dtype=np.float64)).tolist()
    return r, g, b_
