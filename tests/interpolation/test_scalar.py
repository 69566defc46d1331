import math

import pytest

from interpolatica import EmptyInputError, as_interpolator, constant, lerp, lerp_int, step, step_from
from interpolatica.interpolation import Constant, FunctionInterpolator, Interpolator


def test_lerp_endpoints_and_midpoint():
    f = lerp(0, 10)
    assert f(0) == 0
    assert f(0.25) == 2.5
    assert f(1) == 10


def test_lerp_extrapolates():
    f = lerp(0, 10)
    assert f(1.5) == 15
    assert f(-0.5) == -5


def test_lerp_int_rounds_half_away_from_zero():
    assert [lerp_int(10, 42)(i / 10) for i in range(11)] == [10, 13, 16, 20, 23, 26, 29, 32, 36, 39, 42]
    assert lerp_int(0, 1)(0.5) == 1
    assert lerp_int(0, -1)(0.5) == -1
    assert isinstance(lerp_int(0, 3)(0.4), int)


@pytest.mark.parametrize("t,expected", [
    (-1.0, "a"),
    (0.0, "a"),
    (0.33, "a"),
    (0.34, "b"),
    (0.66, "b"),
    (0.67, "c"),
    (1.0, "c"),
    (2.0, "c"),
])
def test_step_buckets(t, expected):
    assert step("a", ["b", "c"])(t) == expected


def test_step_with_empty_tail_is_constant():
    f = step("only", [])
    assert [f(t) for t in (-1, 0, 0.5, 1, 2)] == ["only"] * 5


def test_step_from():
    f = step_from((1, 2))
    assert f(0.49) == 1
    assert f(0.5) == 2


def test_step_from_rejects_empty_input():
    with pytest.raises(EmptyInputError):
        step_from([])
    with pytest.raises(ValueError):
        step_from(())


def test_constant():
    f = constant([1, 2])
    assert f(0) == f(0.5) == f(7) == [1, 2]
    assert isinstance(f, Constant)


def test_as_interpolator():
    f = lerp(0, 1)
    assert as_interpolator(f) is f

    wrapped = as_interpolator(lambda t: t * 2)
    assert isinstance(wrapped, FunctionInterpolator)
    assert isinstance(wrapped, Interpolator)
    assert wrapped(0.25) == 0.5


def test_map():
    assert lerp(0, 10).map(str)(0.5) == "5.0"


def test_interpolators_are_immutable():
    f = lerp(0, 1)
    with pytest.raises(AttributeError):
        f.start = 5
    with pytest.raises(AttributeError):
        constant(1).value = 2
    with pytest.raises(AttributeError):
        step("a", []).items = ("b",)


def test_interpolators_are_repeatable():
    f = lerp_int(-7, 19)
    ts = [0.9, 0.1, 0.5, 0.1, 0.9]
    assert [f(t) for t in ts] == [f(t) for t in ts]


@pytest.mark.parametrize("t,expected", [
    (math.inf, "b"),
    (-math.inf, "a"),
    (math.nan, "a"),
])
def test_step_handles_non_finite_t(t, expected):
    assert step("a", ["b"])(t) == expected
