from __future__ import annotations
from typing import ClassVar, Iterable, Tuple
from .color_base import ColorBase, WithAlpha
from ..types.color_types import ColorSpace, Hcl, Hsla, Lab, Rgba, Scalar
from ..types.format_type import FormatType, max_non_hue
from ..utils.num_utils import clamp, round_half_away


class Color(ColorBase, WithAlpha):
    """
    An immutable RGBA color with unit float channels.

    Channels are stored unclamped; use ``to_rgb255`` or ``to_format`` for
    display-ready values.

    >>> c = Color(1.0, 0.5, 0.0)
    >>> c.to_rgb255()
    (255, 128, 0)
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((red, green, blue, alpha))

    @property
    def red(self) -> float:
        return self.value[0]

    @property
    def green(self) -> float:
        return self.value[1]

    @property
    def blue(self) -> float:
        return self.value[2]

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_format(cls, value: Iterable[Scalar], format_type: FormatType) -> Color:
        """
        Build a color from RGB or RGBA channels expressed in ``format_type``.

        Args:
            value: 3 or 4 channels; a missing alpha means fully opaque
            format_type: INT (0-255), FLOAT (0-1) or PERCENTAGE (0-100)
        """
        channels = tuple(value)
        if len(channels) not in (3, 4):
            raise ValueError(f"rgba expects 3 or 4 channels, got {len(channels)}")
        scale = max_non_hue[FormatType(format_type)]
        unit = [c / scale for c in channels]
        if len(unit) == 3:
            unit.append(1.0)
        return cls(*unit)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
        return cls(red / 255, green / 255, blue / 255, alpha)

    @classmethod
    def from_hsla(cls, hsla: Hsla) -> Color:
        from ..conversions.wrapper import from_hsla
        return from_hsla(Hsla(*hsla))

    @classmethod
    def from_lab(cls, lab: Lab) -> Color:
        from ..conversions.wrapper import from_lab
        return from_lab(Lab(*lab))

    @classmethod
    def from_hcl(cls, hcl: Hcl) -> Color:
        from ..conversions.wrapper import from_hcl
        return from_hcl(Hcl(*hcl))

    # ------------------ VIEWS ------------------
    def to_rgba(self) -> Rgba:
        return Rgba(*self.value)

    def to_format(self, format_type: FormatType) -> Tuple[Scalar, ...]:
        """
        Return the four channels scaled to ``format_type``.

        INT output is clamped to [0, 255] and rounded; FLOAT and PERCENTAGE
        are scaled only.
        """
        format_type = FormatType(format_type)
        scale = max_non_hue[format_type]
        if format_type == FormatType.INT:
            return tuple(clamp(round_half_away(c * scale), 0, scale) for c in self.value)
        return tuple(c * scale for c in self.value)

    def to_rgb255(self) -> Tuple[int, int, int]:
        """Display channels: clamped to [0, 255] and rounded, alpha dropped."""
        r, g, b, _ = self.to_format(FormatType.INT)
        return r, g, b

    def to_hsla(self) -> Hsla:
        from ..conversions.wrapper import to_hsla
        return to_hsla(self)

    def to_lab(self) -> Lab:
        from ..conversions.wrapper import to_lab
        return to_lab(self)

    def to_hcl(self) -> Hcl:
        from ..conversions.wrapper import to_hcl
        return to_hcl(self)

    def is_close(self, other: Color, tol: float = 1e-6) -> bool:
        """Channel-wise comparison within an absolute tolerance."""
        return all(abs(x - y) <= tol for x, y in zip(self.value, other.value))
