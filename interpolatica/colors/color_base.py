from __future__ import annotations
from typing import Any, ClassVar, Iterable, Tuple
from ..types.format_type import FormatType, format_classes
from ..types.color_types import ColorSpace, Scalar
from ..utils.dimension import get_dimension


class ColorBase:
    """
    Immutable fixed-width channel container.

    Channel values are coerced to the class format but never clamped: values
    outside the nominal range are legitimate intermediate results of color
    space reconstruction and must survive round trips.
    """
    __slots__ = ('_value', '_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Iterable[Scalar]) -> None:
        value = tuple(value)
        if get_dimension(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(value)}"
            )
        cast_to = format_classes[self.format_type]
        self._value = tuple(cast_to(v) for v in value)

        # freeze instance; no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return 'alpha' in self.channel_names

    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    num_channels: ClassVar[int]
    value: Tuple[Any, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to [0, 1].

        Returns:
            New color instance with updated alpha.
        """
        a = max(0.0, min(float(alpha), 1.0))
        return self.__class__(*self.value[:-1], a)  # type: ignore
