"""
Keyed list reconciliation.

Given two snapshots of a list whose elements carry an identity key, build one
interpolator over the whole list. Every element is classified as unchanged,
changed, removed or added; each class gets its own per-element interpolator
from ``ListConfig``, and the per-element interpolators are combined into one.

Removed elements stay in the output, in their original position, for every
``t < 1`` so that their ``remove`` interpolator can fade them out. They are
dropped from ``t >= 1`` on; that is the only point where the output length
changes.
"""

from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any, Callable, Dict, FrozenSet, Generic, Hashable, List, Optional,
    Sequence, Tuple, TypeVar,
)

from ..errors import DuplicateKeyWarning, ReconciliationError
from .base import Constant, Interpolator, InterpolatorLike
from .combinators import in_parallel

logger = logging.getLogger(__name__)

T = TypeVar('T')

Combine = Callable[[Sequence[InterpolatorLike[T]]], InterpolatorLike[List[T]]]

_MISSING = object()


class SlotKind(Enum):
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    REMOVED = "removed"
    ADDED = "added"


@dataclass(frozen=True)
class Slot:
    """One position of the reconciled list."""
    key: Hashable
    kind: SlotKind
    from_value: Any = None
    to_value: Any = None
    from_index: Optional[int] = None
    to_index: Optional[int] = None


@dataclass(frozen=True)
class ReconciliationPlan:
    """Ordered slots of a reconciled list plus the keys that leave it."""
    slots: Tuple[Slot, ...]
    removals: FrozenSet[Hashable]

    def keys(self, kind: Optional[SlotKind] = None) -> List[Hashable]:
        return [slot.key for slot in self.slots if kind is None or slot.kind is kind]

    def __len__(self) -> int:
        return len(self.slots)


@dataclass(frozen=True)
class ListConfig(Generic[T]):
    """
    How each element class is interpolated.

    Attributes:
        add: Interpolator for an element entering the list, given its final value
        remove: Interpolator for an element leaving the list, given its initial value
        change: Interpolator between the two values of an element present in both
        id: Identity key of an element; must be hashable
        combine: Turns the ordered per-element interpolators into one list
            interpolator; ``in_parallel`` by default, or e.g.
            ``functools.partial(staggered, 0.1)``
    """
    add: Callable[[T], InterpolatorLike[T]]
    remove: Callable[[T], InterpolatorLike[T]]
    change: Callable[[T, T], InterpolatorLike[T]]
    id: Callable[[T], Hashable]
    combine: Combine = in_parallel


def _index_by_key(
    id_fn: Callable[[T], Hashable],
    values: Sequence[T],
    label: str,
    stacklevel: int,
) -> Dict[Hashable, Tuple[int, T]]:
    """Map key -> (index, value). The last of several elements sharing a key wins."""
    by_key: Dict[Hashable, Tuple[int, T]] = {}
    for index, value in enumerate(values):
        key = id_fn(value)
        if key in by_key:
            warnings.warn(
                f"duplicate key {key!r} in {label} list at indices "
                f"{by_key[key][0]} and {index}; keeping the last one",
                DuplicateKeyWarning,
                stacklevel=stacklevel + 1,
            )
        by_key[key] = (index, value)
    return by_key


def plan_reconciliation(
    id_fn: Callable[[T], Hashable],
    from_values: Sequence[T],
    to_values: Sequence[T],
    *,
    stacklevel: int = 2,
) -> ReconciliationPlan:
    """
    Classify every element of ``from_values`` and ``to_values`` and lay the
    result out in rendering order.

    ``from`` elements keep their order. An added element whose index in
    ``to_values`` lies past the end of ``from_values`` is appended after all
    of them; any other added element at index ``p`` follows the ``from``
    element at index ``p``.

    Duplicate keys issue a ``DuplicateKeyWarning`` attributed ``stacklevel``
    frames up, as in ``warnings.warn``; the default names the caller.

    Raises:
        ReconciliationError: if a kept key cannot be found in the ``to`` map
    """
    from_map = _index_by_key(id_fn, from_values, "from", stacklevel)
    to_map = _index_by_key(id_fn, to_values, "to", stacklevel)

    removals = frozenset(key for key in from_map if key not in to_map)
    additions = sorted(
        ((index, key, value) for key, (index, value) in to_map.items() if key not in from_map),
        key=lambda entry: entry[0],
    )

    from_entries = sorted(
        ((index, key, value) for key, (index, value) in from_map.items()),
        key=lambda entry: entry[0],
    )
    from_indices = {index for index, _, _ in from_entries}

    interleaved: Dict[int, Slot] = {}
    at_end: List[Slot] = []
    for index, key, value in additions:
        slot = Slot(key, SlotKind.ADDED, to_value=value, to_index=index)
        if index in from_indices:
            interleaved[index] = slot
        else:
            at_end.append(slot)

    slots: List[Slot] = []
    for index, key, value in from_entries:
        if key in removals:
            slots.append(Slot(key, SlotKind.REMOVED, from_value=value, from_index=index))
        else:
            found = to_map.get(key, _MISSING)
            if found is _MISSING:
                raise ReconciliationError(
                    f"key {key!r} is neither removed nor present in the target list"
                )
            to_index, to_value = found  # type: ignore[misc]
            kind = SlotKind.UNCHANGED if to_value == value else SlotKind.CHANGED
            slots.append(Slot(key, kind, value, to_value, index, to_index))
        if index in interleaved:
            slots.append(interleaved[index])
    slots.extend(at_end)

    plan = ReconciliationPlan(tuple(slots), removals)
    logger.debug(
        "reconciled %d -> %d elements: %d unchanged, %d changed, %d removed, %d added",
        len(from_values), len(to_values),
        len(plan.keys(SlotKind.UNCHANGED)), len(plan.keys(SlotKind.CHANGED)),
        len(plan.removals), len(additions),
    )
    return plan


def _slot_interpolator(slot: Slot, config: ListConfig) -> InterpolatorLike[Any]:
    if slot.kind is SlotKind.REMOVED:
        return config.remove(slot.from_value)
    if slot.kind is SlotKind.ADDED:
        return config.add(slot.to_value)
    if slot.kind is SlotKind.UNCHANGED:
        return Constant(slot.from_value)
    return config.change(slot.from_value, slot.to_value)


class KeyedList(Interpolator[List[T]]):
    """List interpolator built from a ``ReconciliationPlan``."""
    __slots__ = ('plan', 'combined', '_frozen')

    def __init__(self, plan: ReconciliationPlan, combined: InterpolatorLike[List[T]]) -> None:
        self.plan = plan
        self.combined = combined
        self._freeze()

    def __call__(self, t: float) -> List[T]:
        values = self.combined(t)
        if t < 1:
            return list(values)
        return [
            value
            for value, slot in zip(values, self.plan.slots)
            if slot.kind is not SlotKind.REMOVED
        ]

    def __repr__(self) -> str:
        return f"KeyedList({len(self.plan)} slots, {len(self.plan.removals)} removals)"


def keyed_list(config: ListConfig[T], from_values: Sequence[T], to_values: Sequence[T]) -> KeyedList[T]:
    """
    Interpolate a whole keyed list from two snapshots.

    >>> config = ListConfig(
    ...     add=lambda v: Constant(v),
    ...     remove=lambda v: Constant(v),
    ...     change=lambda a, b: Constant(b),
    ...     id=lambda v: v,
    ... )
    >>> interp = keyed_list(config, ["a", "b"], ["b", "c"])
    >>> interp(0.5), interp(1.0)
    (['a', 'b', 'c'], ['b', 'c'])
    """
    plan = plan_reconciliation(config.id, from_values, to_values, stacklevel=3)
    interpolators = [_slot_interpolator(slot, config) for slot in plan.slots]
    return KeyedList(plan, config.combine(interpolators))
