"""
Combinators that build interpolators out of other interpolators.

Every combinator evaluates its components at the same ``t`` (or at a
deterministic function of it, for ``piecewise`` and ``staggered``) and holds
them in an immutable tuple, so composition stays a strict hierarchy.
"""

from __future__ import annotations
import math
from typing import Any, Callable, List, Sequence, Tuple, TypeVar

from ..errors import EmptyInputError
from ..utils.num_utils import clamp
from .base import Constant, Interpolator, InterpolatorLike, T

A = TypeVar('A')
B = TypeVar('B')

Make = Callable[[A, A], InterpolatorLike[B]]


class Mapped(Interpolator[T]):
    """``t -> fn(i1(t), ..., iN(t))``."""
    __slots__ = ('fn', 'components', '_frozen')

    def __init__(self, fn: Callable[..., T], components: Sequence[InterpolatorLike[Any]]) -> None:
        self.fn = fn
        self.components: Tuple[InterpolatorLike[Any], ...] = tuple(components)
        self._freeze()

    def __call__(self, t: float) -> T:
        return self.fn(*(component(t) for component in self.components))

    def __repr__(self) -> str:
        return f"Mapped({self.fn!r}, {list(self.components)!r})"


def map1(fn: Callable[[A], T], a: InterpolatorLike[A]) -> Mapped[T]:
    return Mapped(fn, (a,))


def map2(fn: Callable[[Any, Any], T], a: InterpolatorLike[Any], b: InterpolatorLike[Any]) -> Mapped[T]:
    return Mapped(fn, (a, b))


def map3(fn: Callable[..., T], a: InterpolatorLike[Any], b: InterpolatorLike[Any],
         c: InterpolatorLike[Any]) -> Mapped[T]:
    return Mapped(fn, (a, b, c))


def map4(fn: Callable[..., T], a: InterpolatorLike[Any], b: InterpolatorLike[Any],
         c: InterpolatorLike[Any], d: InterpolatorLike[Any]) -> Mapped[T]:
    """Combine four interpolators; this is how the RGBA channels are assembled."""
    return Mapped(fn, (a, b, c, d))


def map5(fn: Callable[..., T], a: InterpolatorLike[Any], b: InterpolatorLike[Any],
         c: InterpolatorLike[Any], d: InterpolatorLike[Any], e: InterpolatorLike[Any]) -> Mapped[T]:
    return Mapped(fn, (a, b, c, d, e))


class Piecewise(Interpolator[T]):
    """
    Chain of two-point segments across a sequence of keyframes.

    ``t`` is scaled by the number of segments; the segment index is clamped,
    the local fraction is not, so values outside [0, 1] extrapolate through
    the first or last segment.
    """
    __slots__ = ('segments', '_frozen')

    def __init__(self, segments: Sequence[InterpolatorLike[T]]) -> None:
        self.segments: Tuple[InterpolatorLike[T], ...] = tuple(segments)
        self._freeze()

    def __call__(self, t: float) -> T:
        n = len(self.segments)
        scaled = t * n
        if scaled >= n:
            index = n - 1
        elif not scaled >= 0:
            index = 0
        else:
            index = clamp(math.floor(scaled), 0, n - 1)
        return self.segments[index](scaled - index)

    def __repr__(self) -> str:
        return f"Piecewise({len(self.segments)} segments)"


def piecewise(make: Make, head: A, tail: Sequence[A]) -> Interpolator[B]:
    """
    Build ``make(item_i, item_{i+1})`` for each consecutive pair of ``head, *tail``.

    With an empty ``tail`` the result is ``constant(head)``.
    """
    if len(tail) == 0:
        return Constant(head)  # type: ignore[arg-type]
    items = (head, *tail)
    return Piecewise([make(a, b) for a, b in zip(items, items[1:])])


def piecewise_from(make: Make, values: Sequence[A]) -> Interpolator[B]:
    """
    ``piecewise`` over a raw sequence.

    Raises:
        EmptyInputError: if ``values`` is empty
    """
    values = list(values)
    if not values:
        raise EmptyInputError("piecewise needs at least one value")
    return piecewise(make, values[0], values[1:])


def pair(
    make_a: Make,
    make_b: Make,
    start: Tuple[A, B],
    end: Tuple[A, B],
) -> Mapped[Tuple[Any, Any]]:
    """Interpolate the two halves of a pair independently."""
    return map2(
        lambda a, b: (a, b),
        make_a(start[0], end[0]),
        make_b(start[1], end[1]),
    )


class Parallel(Interpolator[List[T]]):
    """Evaluates every component at the same ``t``; output keeps input order."""
    __slots__ = ('components', '_frozen')

    def __init__(self, components: Sequence[InterpolatorLike[T]]) -> None:
        self.components: Tuple[InterpolatorLike[T], ...] = tuple(components)
        self._freeze()

    def __call__(self, t: float) -> List[T]:
        return [component(t) for component in self.components]

    def __repr__(self) -> str:
        return f"Parallel({len(self.components)} components)"


def in_parallel(interpolators: Sequence[InterpolatorLike[T]]) -> Parallel[T]:
    return Parallel(interpolators)


class Staggered(Interpolator[List[T]]):
    """
    Runs components one after another with overlapping windows.

    Each of the ``n`` components gets a window of length
    ``1 / (1 + offset * (n - 1))``; window ``i`` starts ``offset`` window
    lengths after window ``i - 1``. Local progress is clamped to [0, 1].
    """
    __slots__ = ('offset', 'components', '_frozen')

    def __init__(self, offset: float, components: Sequence[InterpolatorLike[T]]) -> None:
        self.offset = clamp(float(offset), 0.0, 1.0)
        self.components: Tuple[InterpolatorLike[T], ...] = tuple(components)
        self._freeze()

    def __call__(self, t: float) -> List[T]:
        n = len(self.components)
        if n == 0:
            return []
        duration = 1.0 / (1.0 + self.offset * (n - 1))
        return [
            component(clamp((t - i * self.offset * duration) / duration, 0.0, 1.0))
            for i, component in enumerate(self.components)
        ]

    def __repr__(self) -> str:
        return f"Staggered({self.offset!r}, {len(self.components)} components)"


def staggered(offset: float, interpolators: Sequence[InterpolatorLike[T]]) -> Staggered[T]:
    """
    Stagger ``interpolators``; ``offset`` 0 behaves like ``in_parallel`` on [0, 1],
    ``offset`` 1 runs them strictly one after another.

    Use ``functools.partial(staggered, offset)`` as a keyed list ``combine``.
    """
    return Staggered(offset, interpolators)


__all__ = [
    'Mapped', 'Piecewise', 'Parallel', 'Staggered',
    'map1', 'map2', 'map3', 'map4', 'map5',
    'piecewise', 'piecewise_from', 'pair',
    'in_parallel', 'staggered',
]
