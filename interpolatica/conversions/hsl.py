import math
import numpy as np
from numpy import ndarray as NDArray


def normalize_hue(h: float) -> float:
    """Normalize a fractional hue to the [0, 1) range."""
    return h % 1.0


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue as a fraction of a full turn; any real value, wrapped into [0, 1)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h) * 6

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs((h % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h))

    if hue_section == 0:
        r, g, b = m1, m2, low
    elif hue_section == 1:
        r, g, b = m2, m1, low
    elif hue_section == 2:
        r, g, b = low, m1, m2
    elif hue_section == 3:
        r, g, b = low, m2, m1
    elif hue_section == 4:
        r, g, b = m2, low, m1
    else:
        r, g, b = m1, low, m2

    return r, g, b


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, fractional hue
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = (np.asarray(h, dtype=float) % 1.0) * 6
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs((h % 2) - 1)
    low = 2 * l - m1

    # Sector index selects which of (m1, m2, low) lands in each channel
    sector = np.clip(np.floor(h).astype(int), 0, 5)
    choices = np.stack([m1, m2, low], axis=-1)
    layout = np.array([
        [0, 1, 2],
        [1, 0, 2],
        [2, 0, 1],
        [2, 1, 0],
        [1, 2, 0],
        [0, 2, 1],
    ])
    return np.take_along_axis(choices, layout[sector], axis=-1)


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], lightness [0,1])
        Achromatic colors get hue 0 and saturation 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    denominator = 1 - abs(2 * lightness - 1)
    saturation = delta / denominator if denominator != 0 else 0.0

    if max_c == r:
        hue = ((g - b) / delta) % 6
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return normalize_hue(hue / 6), saturation, lightness
