import dataclasses
import functools
import logging
from dataclasses import dataclass

import pytest

from interpolatica import (
    DuplicateKeyWarning,
    InterpolaticaError,
    ListConfig,
    ReconciliationError,
    SlotKind,
    keyed_list,
    lerp,
    map1,
    plan_reconciliation,
    staggered,
)


@dataclass(frozen=True)
class Item:
    id: str
    opacity: float = 1.0
    x: float = 0.0


def fade(item, start, end):
    return map1(lambda o: dataclasses.replace(item, opacity=o), lerp(start, end))


def move(a, b):
    return map1(lambda x: dataclasses.replace(b, x=x), lerp(a.x, b.x))


CONFIG = ListConfig(
    add=lambda item: fade(item, 0.0, 1.0),
    remove=lambda item: fade(item, 1.0, 0.0),
    change=move,
    id=lambda item: item.id,
)


def ids(items):
    return [item.id for item in items]


def test_remove_change_and_add():
    a, b = Item("a"), Item("b", x=0.0)
    b2, c = Item("b", x=10.0), Item("c")
    f = keyed_list(CONFIG, [a, b], [b2, c])

    start = f(0.0)
    assert ids(start) == ["a", "b", "c"]
    assert start[0].opacity == 1.0
    assert start[1].x == 0.0
    assert start[2].opacity == 0.0

    mid = f(0.5)
    assert ids(mid) == ["a", "b", "c"]
    assert mid[0].opacity == 0.5
    assert mid[1].x == 5.0
    assert mid[2].opacity == 0.5

    assert f(1.0) == [b2, c]


def test_unchanged_elements_skip_change():
    calls = []

    def change(a, b):
        calls.append((a, b))
        return move(a, b)

    config = dataclasses.replace(CONFIG, change=change)
    a = Item("a", x=3.0)
    f = keyed_list(config, [a], [Item("a", x=3.0)])

    assert calls == []
    assert f(0.5) == [a]
    assert f(0.5)[0] is a


def test_added_elements_interleave_by_target_index():
    a, b, c, d = Item("a"), Item("b"), Item("c"), Item("d")
    plan = plan_reconciliation(CONFIG.id, [a, b, c], [a, d, b, c])

    assert plan.keys() == ["a", "b", "d", "c"]
    assert plan.keys(SlotKind.ADDED) == ["d"]
    assert plan.keys(SlotKind.UNCHANGED) == ["a", "b", "c"]
    assert plan.removals == frozenset()

    f = keyed_list(CONFIG, [a, b, c], [a, d, b, c])
    assert ids(f(0.5)) == ["a", "b", "d", "c"]
    assert ids(f(1.0)) == ["a", "b", "d", "c"]


def test_additions_past_the_end_are_appended_in_target_order():
    a = Item("a")
    plan = plan_reconciliation(CONFIG.id, [a], [a, Item("b"), Item("c")])
    assert plan.keys() == ["a", "b", "c"]


def test_removed_elements_keep_their_position():
    a, b, c = Item("a"), Item("b"), Item("c")
    f = keyed_list(CONFIG, [a, b, c], [a, c])

    mid = f(0.5)
    assert ids(mid) == ["a", "b", "c"]
    assert mid[1].opacity == 0.5
    assert f(0.999)[1].id == "b"
    assert f(1.0) == [a, c]


def test_output_past_one_stays_filtered():
    a, b = Item("a", x=0.0), Item("b")
    f = keyed_list(CONFIG, [a, b], [Item("a", x=10.0)])
    after = f(1.5)
    assert ids(after) == ["a"]
    assert after[0].x == 15.0


def test_from_empty():
    f = keyed_list(CONFIG, [], [Item("a"), Item("b")])
    assert [item.opacity for item in f(0.0)] == [0.0, 0.0]
    assert ids(f(0.5)) == ["a", "b"]
    assert f(1.0) == [Item("a"), Item("b")]


def test_to_empty():
    f = keyed_list(CONFIG, [Item("a"), Item("b")], [])
    assert [item.opacity for item in f(0.5)] == [0.5, 0.5]
    assert f(1.0) == []


def test_both_empty():
    f = keyed_list(CONFIG, [], [])
    assert f(0.0) == []
    assert f(0.5) == []
    assert f(1.0) == []


def test_duplicate_keys_keep_the_last_element():
    first, last = Item("a", x=0.0), Item("a", x=5.0)
    with pytest.warns(DuplicateKeyWarning):
        f = keyed_list(CONFIG, [first, last], [Item("a", x=10.0)])

    mid = f(0.5)
    assert len(mid) == 1
    assert mid[0].x == 7.5


def test_staggered_combine():
    config = dataclasses.replace(CONFIG, combine=functools.partial(staggered, 1.0))
    f = keyed_list(config, [], [Item("a"), Item("b")])

    assert [item.opacity for item in f(0.5)] == [1.0, 0.0]
    assert [item.opacity for item in f(0.75)] == [1.0, 0.5]


def test_plan_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="interpolatica.interpolation.keyed_list")
    keyed_list(CONFIG, [Item("a"), Item("b", x=1.0)], [Item("b", x=2.0), Item("c")])

    assert "reconciled 2 -> 2 elements" in caplog.text
    assert "0 unchanged, 1 changed, 1 removed, 1 added" in caplog.text


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CONFIG.add = None


def test_reconciliation_error_hierarchy():
    assert issubclass(ReconciliationError, InterpolaticaError)
    assert issubclass(ReconciliationError, AssertionError)


def test_removal_with_interleaved_and_trailing_additions():
    a, b, c = Item("a"), Item("b"), Item("c")
    f = keyed_list(CONFIG, [a], [b, c])

    assert [(item.id, item.opacity) for item in f(0.0)] == [("a", 1.0), ("b", 0.0), ("c", 0.0)]
    assert ids(f(1.0)) == ["b", "c"]
    assert f(1.0) == [b, c]


def test_duplicate_key_warning_names_the_caller():
    items = [Item("a"), Item("a", x=1.0)]
    with pytest.warns(DuplicateKeyWarning) as record:
        plan_reconciliation(CONFIG.id, items, [])
        keyed_list(CONFIG, items, [])

    assert len(record) == 2
    assert all(warning.filename == __file__ for warning in record)
