"""
Scalar interpolators: linear, rounded-integer and stepped selection.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple, TypeVar

from ..errors import EmptyInputError
from ..utils.num_utils import clamp, round_half_away
from .base import Interpolator

T = TypeVar('T')


class Lerp(Interpolator[float]):
    """``t -> start + (end - start) * t``, extrapolating outside [0, 1]."""
    __slots__ = ('start', 'end', '_frozen')

    def __init__(self, start: float, end: float) -> None:
        self.start = start
        self.end = end
        self._freeze()

    def __call__(self, t: float) -> float:
        return self.start + (self.end - self.start) * t

    def __repr__(self) -> str:
        return f"Lerp({self.start!r}, {self.end!r})"


class LerpInt(Lerp):
    """Linear interpolation rounded half away from zero."""
    __slots__ = ()

    def __call__(self, t: float) -> int:  # type: ignore[override]
        return round_half_away(super().__call__(t))

    def __repr__(self) -> str:
        return f"LerpInt({self.start!r}, {self.end!r})"


class Step(Interpolator[T]):
    """
    Discrete selection over ``items``.

    [0, 1] is split into ``len(items)`` equal buckets; ``t`` below 0 selects
    the first item and ``t`` at or above 1 selects the last.
    """
    __slots__ = ('items', '_frozen')

    def __init__(self, items: Sequence[T]) -> None:
        items = tuple(items)
        if not items:
            raise EmptyInputError("step needs at least one item")
        self.items: Tuple[T, ...] = items
        self._freeze()

    def __call__(self, t: float) -> T:
        n = len(self.items)
        scaled = t * n
        # Ends are resolved before floor so infinite or NaN t never reaches it
        if scaled >= n:
            return self.items[-1]
        if not scaled >= 0:
            return self.items[0]
        return self.items[clamp(math.floor(scaled), 0, n - 1)]

    def __repr__(self) -> str:
        return f"Step({list(self.items)!r})"


def lerp(start: float, end: float) -> Lerp:
    return Lerp(start, end)


def lerp_int(start: float, end: float) -> LerpInt:
    """
    Integer interpolation.

    >>> [lerp_int(10, 42)(i / 10) for i in range(11)]
    [10, 13, 16, 20, 23, 26, 29, 32, 36, 39, 42]
    """
    return LerpInt(start, end)


def step(head: T, tail: Sequence[T]) -> Step[T]:
    """Step through ``head`` followed by ``tail``; the head guarantees a non-empty sequence."""
    return Step((head, *tail))


def step_from(values: Sequence[T]) -> Step[T]:
    """
    Step through a raw sequence.

    Raises:
        EmptyInputError: if ``values`` is empty
    """
    return Step(values)
