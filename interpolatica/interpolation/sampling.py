from typing import List, TypeVar

import numpy as np

from .base import InterpolatorLike

T = TypeVar('T')


def samples(n: int, interpolator: InterpolatorLike[T]) -> List[T]:
    """
    Evaluate ``interpolator`` at ``n`` evenly spaced points of [0, 1].

    Both ends are included. ``n == 1`` samples the start only and ``n <= 0``
    gives an empty list.

    >>> from interpolatica.interpolation import lerp
    >>> samples(5, lerp(0, 1))
    [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n <= 0:
        return []
    return [interpolator(t) for t in np.linspace(0.0, 1.0, n).tolist()]
