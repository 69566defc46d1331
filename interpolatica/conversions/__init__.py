"""
Interpolatica Color Space Conversions
=====================================

Conversions between unit sRGB and the coordinate systems the color
interpolators work in.

Conversion Functions
-------------------

RGB ↔ HSL:
    unit_rgb_to_hsl(r, g, b), hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
        Hue is a fraction of a full turn, [0, 1)

RGB ↔ Lab:
    unit_rgb_to_lab(r, g, b), lab_to_unit_rgb(l, a, b)
        Scalar conversions
    np_unit_rgb_to_lab(rgb), np_lab_to_unit_rgb(lab)
        Vectorized conversions over (..., 3) arrays

Lab ↔ HCL:
    lab_to_hcl(lab), hcl_to_lab(hcl)
        Hue in degrees; NaN hue marks achromatic colors

Color-level API
---------------
    to_hsla / from_hsla, to_lab / from_lab, to_hcl / from_hcl
        Work on ``Color`` values and carry alpha through unchanged

Examples
--------
>>> from interpolatica import Color
>>> from interpolatica.conversions import to_hcl, from_hcl
>>> hcl = to_hcl(Color.from_rgb255(170, 187, 204))
>>> round(hcl.hue, 4)
252.3715
>>> from_hcl(hcl).to_rgb255()
(170, 187, 204)
"""

from .hsl import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
)
from .lab import (
    unit_rgb_to_lab,
    lab_to_unit_rgb,
    np_unit_rgb_to_lab,
    np_lab_to_unit_rgb,
    srgb_to_linear,
    linear_to_srgb,
)
from .hcl import lab_to_hcl, hcl_to_lab
from .wrapper import (
    to_hsla,
    from_hsla,
    to_lab,
    from_lab,
    to_hcl,
    from_hcl,
)

__all__ = [
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "np_hsl_to_unit_rgb",
    "unit_rgb_to_lab",
    "lab_to_unit_rgb",
    "np_unit_rgb_to_lab",
    "np_lab_to_unit_rgb",
    "srgb_to_linear",
    "linear_to_srgb",
    "lab_to_hcl",
    "hcl_to_lab",
    "to_hsla",
    "from_hsla",
    "to_lab",
    "from_lab",
    "to_hcl",
    "from_hcl",
]
