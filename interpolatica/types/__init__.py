from .color_types import Rgba, Hsla, Lab, Hcl, ColorSpace
from .format_type import FormatType, max_non_hue

__all__ = ["Rgba", "Hsla", "Lab", "Hcl", "ColorSpace", "FormatType", "max_non_hue"]
