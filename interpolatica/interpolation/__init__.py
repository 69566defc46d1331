"""
Interpolators and their combinators.

An interpolator is a pure function from progress ``t`` (nominally [0, 1]) to
a value. Scalars, colors and keyed lists are covered; everything composes
through ``map1``..``map5``, ``piecewise``, ``pair`` and ``in_parallel``.
"""

from .base import Interpolator, InterpolatorLike, Constant, FunctionInterpolator, constant, as_interpolator
from .scalar import Lerp, LerpInt, Step, lerp, lerp_int, step, step_from
from .hue import HueMode, hue_lerp, hue_target
from .combinators import (
    Mapped, Piecewise, Parallel, Staggered,
    map1, map2, map3, map4, map5,
    piecewise, piecewise_from, pair,
    in_parallel, staggered,
)
from .color import rgb, rgb_with_gamma, hsl, hsl_long, lab, hcl, hcl_long
from .keyed_list import (
    ListConfig, Slot, SlotKind, ReconciliationPlan, KeyedList,
    plan_reconciliation, keyed_list,
)
from .sampling import samples

__all__ = [
    "Interpolator", "InterpolatorLike", "Constant", "FunctionInterpolator",
    "constant", "as_interpolator",
    "Lerp", "LerpInt", "Step", "lerp", "lerp_int", "step", "step_from",
    "HueMode", "hue_lerp", "hue_target",
    "Mapped", "Piecewise", "Parallel", "Staggered",
    "map1", "map2", "map3", "map4", "map5",
    "piecewise", "piecewise_from", "pair", "in_parallel", "staggered",
    "rgb", "rgb_with_gamma", "hsl", "hsl_long", "lab", "hcl", "hcl_long",
    "ListConfig", "Slot", "SlotKind", "ReconciliationPlan", "KeyedList",
    "plan_reconciliation", "keyed_list",
    "samples",
]
