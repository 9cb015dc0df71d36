import pytest

from gravdash.bezier import Bezier


def test_empty_curve_is_origin():
    curve = Bezier([])
    assert curve.point(0.5) == (0.0, 0.0)


def test_endpoints_are_clamped():
    curve = Bezier([(1, 2), (5, 9), (3, 4)])
    assert curve.point(-1) == (1.0, 2.0)
    assert curve.point(0) == (1.0, 2.0)
    assert curve.point(1) == (3.0, 4.0)
    assert curve.point(2) == (3.0, 4.0)


def test_linear_midpoint():
    curve = Bezier([(0, 0), (10, 20)])
    assert curve.point(0.5) == pytest.approx((5.0, 10.0))


@pytest.mark.parametrize("t", [0.1, 0.3, 0.5, 0.8])
def test_collinear_points_stay_on_line(t):
    curve = Bezier([(0, 0), (1, 2), (3, 6), (4, 8)])
    x, y = curve.point(t)
    assert y == pytest.approx(2 * x)


def test_symmetric_curve_midpoint_is_centred():
    curve = Bezier([(0, 0), (5, 10), (10, 0)])
    x, _ = curve.point(0.5)
    assert x == pytest.approx(5.0)


def test_value_is_vertical_coordinate():
    curve = Bezier([(0, 0), (0.4, 0.1), (0.6, 0.9), (1, 1)])
    for t in (0.2, 0.5, 0.7):
        assert curve.value(t) == curve.point(t)[1]


def test_value_is_monotonic_for_ease_curve():
    curve = Bezier([(0, 0), (0.5, 0), (1, 1)])
    values = [curve.value(i / 10) for i in range(11)]
    assert values == sorted(values)
    assert values[0] == 0.0 and values[-1] == 1.0