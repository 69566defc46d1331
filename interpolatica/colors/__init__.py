"""
Interpolatica Color Classes
===========================

``Color`` is the immutable RGBA value the color interpolators consume and
produce. Alternate coordinates (HSLA, Lab, HCL) are derived on demand and
never stored on the color.

Usage
-----
>>> from interpolatica.colors import Color
>>> c = Color.from_rgb255(255, 128, 0)
>>> c.to_format("percentage")[0]
100.0
>>> c.with_alpha(0.5).alpha
0.5
"""

from .color_base import ColorBase, WithAlpha
from .color import Color


__all__ = ['Color', 'ColorBase', 'WithAlpha']
