import math

from ..types.color_types import Hcl, Lab


def lab_to_hcl(lab: Lab) -> Hcl:
    """
    Convert Lab to its cylindrical LCh(ab) form.

    Colors on the neutral axis (a == b == 0) have no hue; it is reported as NaN.
    Their chroma is 0 at pure black or white and NaN strictly between the two.
    """
    l, a, b, alpha = lab
    if a == 0 and b == 0:
        chroma = math.nan if 0 < l < 100 else 0.0
        return Hcl(math.nan, chroma, l, alpha)

    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360
    return Hcl(hue, math.hypot(a, b), l, alpha)


def hcl_to_lab(hcl: Hcl) -> Lab:
    """Convert LCh(ab) back to Lab; a NaN hue reconstructs a neutral color."""
    hue, chroma, luminance, alpha = hcl
    if math.isnan(hue):
        return Lab(luminance, 0.0, 0.0, alpha)

    h = math.radians(hue)
    return Lab(luminance, chroma * math.cos(h), chroma * math.sin(h), alpha)
