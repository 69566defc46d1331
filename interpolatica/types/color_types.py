from __future__ import annotations
from typing import Literal, NamedTuple, Union

Scalar = Union[int, float]
ColorSpace = Literal["rgba"]


class Rgba(NamedTuple):
    """Unit RGB channels with alpha, all nominally in [0, 1]."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0


class Hsla(NamedTuple):
    """HSL with the hue expressed as a fraction of a full turn, [0, 1)."""
    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0


class Lab(NamedTuple):
    """CIE L*a*b* coordinates. ``l`` is nominally [0, 100]."""
    l: float
    a: float
    b: float
    alpha: float = 1.0


class Hcl(NamedTuple):
    """
    Cylindrical LCh(ab) coordinates.

    ``hue`` is in degrees, [0, 360), and is NaN for achromatic colors.
    ``chroma`` is NaN for achromatic colors strictly between black and white.
    """
    hue: float
    chroma: float
    luminance: float
    alpha: float = 1.0
