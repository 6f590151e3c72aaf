import pytest

from noneuclid.settings import NEAR_MAX, NEAR_MIN, clamp


@pytest.mark.parametrize(
    "value, low, high, expected",
    [
        (5, 0, 3, 3),
        (-1, 0, 3, 0),
        (2, 0, 3, 2),
        (0, 0, 3, 0),
        (3, 0, 3, 3),
    ],
)
def test_clamp_integers(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_clamp_floats_inside_range_is_identity():
    assert clamp(0.25, -1.0, 1.0) == 0.25


def test_clamp_floats_outside_range():
    assert clamp(1.5, -1.0, 1.0) == 1.0
    assert clamp(-7.5, -1.0, 1.0) == -1.0


def test_clamp_near_plane_range():
    assert clamp(1e-6, NEAR_MIN, NEAR_MAX) == NEAR_MIN
    assert clamp(10.0, NEAR_MIN, NEAR_MAX) == NEAR_MAX