from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar('T')
U = TypeVar('U')

# Anything with this call shape is accepted where an interpolator is consumed
InterpolatorLike = Callable[[float], T]


class Interpolator(ABC, Generic[T]):
    """
    A pure function from progress ``t`` to a value.

    ``t`` is nominally in [0, 1]; values outside that range are accepted and
    extrapolate or clamp depending on the interpolator. Instances hold only
    immutable captured state and may be called any number of times, in any
    order, from any thread.
    """
    __slots__ = ()

    @abstractmethod
    def __call__(self, t: float) -> T:
        ...

    def map(self, fn: Callable[[T], U]) -> Interpolator[U]:
        """Return an interpolator producing ``fn(self(t))``."""
        from .combinators import map1
        return map1(fn, self)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        object.__setattr__(self, '_frozen', True)


class Constant(Interpolator[T]):
    """Ignores ``t`` and always returns the captured value."""
    __slots__ = ('value', '_frozen')

    def __init__(self, value: T) -> None:
        self.value = value
        self._freeze()

    def __call__(self, t: float) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class FunctionInterpolator(Interpolator[T]):
    """Adapts a plain callable to the ``Interpolator`` interface."""
    __slots__ = ('fn', '_frozen')

    def __init__(self, fn: InterpolatorLike[T]) -> None:
        self.fn = fn
        self._freeze()

    def __call__(self, t: float) -> T:
        return self.fn(t)

    def __repr__(self) -> str:
        return f"FunctionInterpolator({self.fn!r})"


def constant(value: T) -> Constant[T]:
    return Constant(value)


def as_interpolator(fn: InterpolatorLike[T]) -> Interpolator[T]:
    """Wrap a plain callable; interpolators pass through unchanged."""
    if isinstance(fn, Interpolator):
        return fn
    return FunctionInterpolator(fn)
