import math
from typing import TypeVar

N = TypeVar('N', int, float)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (0.5 -> 1, -0.5 -> -1)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp(value: N, low: N, high: N) -> N:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(value, high))


def is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def signed_pow(base: float, exponent: float) -> float:
    """``abs(base) ** exponent`` carrying the sign of ``base``, so fractional powers stay real."""
    return math.copysign(abs(base) ** exponent, base)
