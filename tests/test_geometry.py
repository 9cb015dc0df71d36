import pytest

from gravdash.geometry import sign, squared_distance_to_segment


@pytest.mark.parametrize(
    "num, expected",
    [(5, 1), (-3, -1), (0, 0), (0.25, 1), (-0.25, -1), (0.0, 0)],
)
def test_sign(num, expected):
    assert sign(num) == expected


def test_perpendicular_distance():
    assert squared_distance_to_segment((0, 5), (-10, 0), (10, 0)) == pytest.approx(25)


def test_beyond_end_uses_end_point():
    assert squared_distance_to_segment((13, 4), (0, 0), (10, 0)) == pytest.approx(25)


def test_point_on_segment_is_zero():
    assert squared_distance_to_segment((3, 3), (0, 0), (6, 6)) == pytest.approx(0)


def test_degenerate_segment_uses_start():
    result = squared_distance_to_segment((4, 0), (0, 0), (0.5, 0.5))
    assert result == pytest.approx(16)


@pytest.mark.parametrize("point", [(2, 7), (-5, 1), (12, -3), (4, 4)])
def test_symmetric_in_segment_direction(point):
    forward = squared_distance_to_segment(point, (0, 0), (8, 2))
    backward = squared_distance_to_segment(point, (8, 2), (0, 0))
    assert forward == pytest.approx(backward)


@pytest.mark.parametrize("point", [(2, 7), (-5, 1), (12, -3)])
def test_never_more_than_distance_to_ends(point):
    start, end = (0, 0), (8, 2)
    result = squared_distance_to_segment(point, start, end)
    to_start = (point[0] - start[0]) ** 2 + (point[1] - start[1]) ** 2
    to_end = (point[0] - end[0]) ** 2 + (point[1] - end[1]) ** 2
    assert result <= min(to_start, to_end) + 1e-9