from __future__ import annotations

from ..colors.color import Color
from ..types.color_types import Hcl, Hsla, Lab
from .hcl import hcl_to_lab, lab_to_hcl
from .hsl import hsl_to_unit_rgb, unit_rgb_to_hsl
from .lab import lab_to_unit_rgb, unit_rgb_to_lab


def to_hsla(color: Color) -> Hsla:
    h, s, l = unit_rgb_to_hsl(color.red, color.green, color.blue)
    return Hsla(h, s, l, color.alpha)


def from_hsla(hsla: Hsla) -> Color:
    h, s, l, alpha = hsla
    return Color(*hsl_to_unit_rgb(h, s, l), alpha)


def to_lab(color: Color) -> Lab:
    """Convert a color to Lab; alpha passes through unchanged."""
    return Lab(*unit_rgb_to_lab(color.red, color.green, color.blue), color.alpha)


def from_lab(lab: Lab) -> Color:
    """
    Convert Lab back to a color.

    Out-of-gamut coordinates give channels outside [0, 1]; they are kept as is
    so that ``to_lab(from_lab(lab))`` recovers ``lab``.
    """
    l, a, b, alpha = lab
    return Color(*lab_to_unit_rgb(l, a, b), alpha)


def to_hcl(color: Color) -> Hcl:
    return lab_to_hcl(to_lab(color))


def from_hcl(hcl: Hcl) -> Color:
    return from_lab(hcl_to_lab(hcl))
