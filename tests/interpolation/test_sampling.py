import pytest

from interpolatica import Color, lerp, lerp_int, rgb, samples, step


def test_samples_include_both_ends():
    assert samples(5, lerp(0, 1)) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_single_sample_is_the_start():
    assert samples(1, lerp(3, 7)) == [3]


@pytest.mark.parametrize("n", [0, -1, -10])
def test_no_samples(n):
    assert samples(n, lerp(0, 1)) == []


def test_samples_of_step():
    assert samples(3, step("a", ["b", "c"])) == ["a", "b", "c"]


def test_samples_of_lerp_int():
    assert samples(11, lerp_int(10, 42)) == [10, 13, 16, 20, 23, 26, 29, 32, 36, 39, 42]


def test_samples_of_colors():
    gradient = samples(3, rgb(Color(0.0, 0.0, 0.0), Color(1.0, 1.0, 1.0)))
    assert [c.to_rgb255() for c in gradient] == [(0, 0, 0), (128, 128, 128), (255, 255, 255)]


def test_samples_accept_plain_callables():
    assert samples(3, lambda t: t * 4) == [0.0, 2.0, 4.0]
