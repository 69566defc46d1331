"""Interpolatica: composable value interpolation for numbers, colors and keyed lists."""

from .errors import (
    InterpolaticaError,
    EmptyInputError,
    ReconciliationError,
    DuplicateKeyWarning,
)
from .types.color_types import Rgba, Hsla, Lab, Hcl
from .types.format_type import FormatType
from .colors import Color
from .conversions import (
    to_hsla,
    from_hsla,
    to_lab,
    from_lab,
    to_hcl,
    from_hcl,
    lab_to_hcl,
    hcl_to_lab,
)
from .interpolation import (
    Interpolator,
    Constant,
    constant,
    as_interpolator,
    lerp,
    lerp_int,
    step,
    step_from,
    HueMode,
    map1,
    map2,
    map3,
    map4,
    map5,
    piecewise,
    piecewise_from,
    pair,
    in_parallel,
    staggered,
    rgb,
    rgb_with_gamma,
    hsl,
    hsl_long,
    lab,
    hcl,
    hcl_long,
    ListConfig,
    SlotKind,
    ReconciliationPlan,
    plan_reconciliation,
    keyed_list,
    samples,
)

__version__ = "1.0.0"

__all__ = [
    # errors
    "InterpolaticaError",
    "EmptyInputError",
    "ReconciliationError",
    "DuplicateKeyWarning",
    # color values and coordinates
    "Color",
    "Rgba",
    "Hsla",
    "Lab",
    "Hcl",
    "FormatType",
    # conversions
    "to_hsla",
    "from_hsla",
    "to_lab",
    "from_lab",
    "to_hcl",
    "from_hcl",
    "lab_to_hcl",
    "hcl_to_lab",
    # interpolators
    "Interpolator",
    "Constant",
    "constant",
    "as_interpolator",
    "lerp",
    "lerp_int",
    "step",
    "step_from",
    "HueMode",
    # combinators
    "map1",
    "map2",
    "map3",
    "map4",
    "map5",
    "piecewise",
    "piecewise_from",
    "pair",
    "in_parallel",
    "staggered",
    # color interpolators
    "rgb",
    "rgb_with_gamma",
    "hsl",
    "hsl_long",
    "lab",
    "hcl",
    "hcl_long",
    # keyed lists
    "ListConfig",
    "SlotKind",
    "ReconciliationPlan",
    "plan_reconciliation",
    "keyed_list",
    # sampling
    "samples",
    "__version__",
]
