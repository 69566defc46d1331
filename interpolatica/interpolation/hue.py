"""
Hue interpolation on a cyclic channel.
"""

from __future__ import annotations
import math
from enum import IntEnum

from ..utils.num_utils import is_nan
from .base import Constant, Interpolator
from .scalar import Lerp


class HueMode(IntEnum):
    """
    Path taken around the hue circle.

    SHORTEST: Never more than half a turn, wrapping through 0 when shorter
    LINEAR:   Plain linear interpolation of the raw hue values
    CW:       Always increasing hue
    CCW:      Always decreasing hue
    """
    SHORTEST = 0
    LINEAR = 1
    CW = 2
    CCW = 3


def hue_target(start: float, end: float, mode: HueMode = HueMode.SHORTEST) -> float:
    """
    Target hue, in turns, to interpolate ``start`` towards.

    The result is congruent to ``end`` modulo one turn, except for LINEAR
    which returns ``end`` untouched.
    """
    d = end - start
    if mode == HueMode.SHORTEST:
        if abs(d) > 0.5:
            return start + (d - math.copysign(1.0, d))
        return end
    if mode == HueMode.CW:
        return start + d % 1.0
    if mode == HueMode.CCW:
        return start - (-d) % 1.0
    return end


class ScaledLerp(Lerp):
    """Linear interpolation in turns, reported in units of ``turn``."""
    __slots__ = ('turn',)

    def __init__(self, start: float, end: float, turn: float) -> None:
        self.turn = turn
        super().__init__(start, end)

    def __call__(self, t: float) -> float:
        return super().__call__(t) * self.turn

    def __repr__(self) -> str:
        return f"ScaledLerp({self.start!r}, {self.end!r}, turn={self.turn!r})"


def hue_lerp(
    start: float,
    end: float,
    mode: HueMode = HueMode.SHORTEST,
    turn: float = 1.0,
) -> Interpolator[float]:
    """
    Interpolate a hue measured in units where one full turn is ``turn``
    (1.0 for HSL, 360.0 for HCL degrees).

    The path is chosen on hues normalised to turns and scaled back, so the
    output is in the caller's units but may leave [0, turn).

    A NaN hue means "no hue": it takes the other endpoint's hue for the whole
    interpolation, and two NaN endpoints stay NaN.
    """
    start_nan, end_nan = is_nan(start), is_nan(end)
    if start_nan and end_nan:
        return Constant(math.nan)
    if start_nan:
        return Constant(end)
    if end_nan:
        return Constant(start)

    s, e = start / turn, end / turn
    target = hue_target(s, e, HueMode(mode))
    if turn == 1.0:
        return Lerp(s, target)
    return ScaledLerp(s, target, turn)


def lerp_defined(start: float, end: float, missing: float = 0.0) -> Lerp:
    """Linear interpolation that reads a NaN endpoint as ``missing``."""
    return Lerp(missing if is_nan(start) else start, missing if is_nan(end) else end)
