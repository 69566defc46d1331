"""
Color interpolators.

Each interpolator converts both endpoints into the working coordinates once,
interpolates every channel independently with a scalar interpolator and
reassembles a ``Color`` with ``map4``. Alpha is always interpolated linearly.
"""

from __future__ import annotations
from typing import Optional

from ..colors.color import Color
from ..conversions.wrapper import from_hcl, from_hsla, from_lab, to_hcl, to_hsla, to_lab
from ..types.color_types import Hcl, Hsla, Lab
from ..types.format_type import HUE_360
from ..utils.default import value_or_default
from ..utils.num_utils import signed_pow
from .base import Interpolator
from .combinators import map4
from .hue import HueMode, hue_lerp, lerp_defined
from .scalar import Lerp, lerp


class GammaLerp(Lerp):
    """Interpolates ``x ** gamma`` linearly and maps the result back with ``1 / gamma``."""
    __slots__ = ('gamma',)

    def __init__(self, start: float, end: float, gamma: float) -> None:
        self.gamma = gamma
        super().__init__(signed_pow(start, gamma), signed_pow(end, gamma))

    def __call__(self, t: float) -> float:
        return signed_pow(super().__call__(t), 1.0 / self.gamma)

    def __repr__(self) -> str:
        return f"GammaLerp(gamma={self.gamma!r})"


def rgb_with_gamma(gamma: float, start: Color, end: Color) -> Interpolator[Color]:
    """
    Interpolate in sRGB with gamma correction.

    A ``gamma`` of 1 is plain per-channel linear interpolation; any other
    value interpolates each color channel in gamma space. Channels outside
    [0, 1] keep their sign through the power.

    Raises:
        ValueError: if ``gamma`` is not a positive number
    """
    if not gamma > 0:
        raise ValueError(f"gamma must be positive, got {gamma!r}")
    if gamma == 1.0:
        def channel(a: float, b: float) -> Lerp:
            return Lerp(a, b)
    else:
        def channel(a: float, b: float) -> Lerp:
            return GammaLerp(a, b, gamma)

    return map4(
        Color,
        channel(start.red, end.red),
        channel(start.green, end.green),
        channel(start.blue, end.blue),
        lerp(start.alpha, end.alpha),
    )


def rgb(start: Color, end: Color) -> Interpolator[Color]:
    return rgb_with_gamma(1.0, start, end)


def _from_hsla_channels(h: float, s: float, l: float, alpha: float) -> Color:
    return from_hsla(Hsla(h, s, l, alpha))


def hsl(start: Color, end: Color, mode: Optional[HueMode] = None) -> Interpolator[Color]:
    """
    Interpolate in HSL, hue along the shortest arc unless ``mode`` says otherwise.

    >>> red, blue = Color(1, 0, 0), Color(0, 0, 1)
    >>> hsl(red, blue)(0.5).to_rgb255()
    (255, 0, 255)
    """
    mode = value_or_default(mode, HueMode.SHORTEST)
    a, b = to_hsla(start), to_hsla(end)
    return map4(
        _from_hsla_channels,
        hue_lerp(a.hue, b.hue, mode),
        lerp(a.saturation, b.saturation),
        lerp(a.lightness, b.lightness),
        lerp(a.alpha, b.alpha),
    )


def hsl_long(start: Color, end: Color) -> Interpolator[Color]:
    """HSL with the raw hue values interpolated linearly."""
    return hsl(start, end, HueMode.LINEAR)


def _from_lab_channels(l: float, a: float, b: float, alpha: float) -> Color:
    return from_lab(Lab(l, a, b, alpha))


def lab(start: Color, end: Color) -> Interpolator[Color]:
    x, y = to_lab(start), to_lab(end)
    return map4(
        _from_lab_channels,
        lerp(x.l, y.l),
        lerp(x.a, y.a),
        lerp(x.b, y.b),
        lerp(x.alpha, y.alpha),
    )


def _from_hcl_channels(hue: float, chroma: float, luminance: float, alpha: float) -> Color:
    return from_hcl(Hcl(hue, chroma, luminance, alpha))


def hcl(start: Color, end: Color, mode: Optional[HueMode] = None) -> Interpolator[Color]:
    """
    Interpolate in HCL (LCh(ab)).

    An achromatic endpoint has no hue, so the chromatic endpoint's hue is
    held for the whole transition while chroma fades from or to 0. Luminance
    and alpha are never affected by missing hues.
    """
    mode = value_or_default(mode, HueMode.SHORTEST)
    a, b = to_hcl(start), to_hcl(end)
    return map4(
        _from_hcl_channels,
        hue_lerp(a.hue, b.hue, mode, turn=HUE_360),
        lerp_defined(a.chroma, b.chroma),
        lerp(a.luminance, b.luminance),
        lerp(a.alpha, b.alpha),
    )


def hcl_long(start: Color, end: Color) -> Interpolator[Color]:
    return hcl(start, end, HueMode.LINEAR)
