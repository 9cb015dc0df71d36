import pytest

from gravdash.rounded_rect import RoundedRect, Shade


def _union(rect):
    parts = rect.parts
    return (
        min(p.left for p in parts),
        min(p.top for p in parts),
        max(p.right for p in parts),
        max(p.bottom for p in parts),
    )


def test_parts_cover_dimensions():
    rect = RoundedRect((10.0, 20.0), (30.0, 6.0), Shade.LIGHT)
    left, top, right, bottom = _union(rect)
    assert right - left == pytest.approx(30.0)
    assert bottom - top == pytest.approx(6.0)
    assert (left + right) / 2 == pytest.approx(10.0)
    assert (top + bottom) / 2 == pytest.approx(20.0)


def test_edges_are_shorter_than_body_and_touch_it():
    rect = RoundedRect((0.0, 0.0), (12.0, 6.0))
    assert rect.main.height - rect.left_edge.height == pytest.approx(2.0)
    assert rect.main.height - rect.right_edge.height == pytest.approx(2.0)
    assert rect.left_edge.right == pytest.approx(rect.main.left)
    assert rect.right_edge.left == pytest.approx(rect.main.right)


def test_move_round_trip():
    rect = RoundedRect((3.0, 4.0), (10.0, 6.0))
    before = rect.parts
    rect.move((5.0, -2.0))
    assert rect.centre == (8.0, 2.0)
    rect.move((-5.0, 2.0))
    assert rect.parts == before


def test_set_vertical_and_horizontal_keep_other_axis():
    rect = RoundedRect((3.0, 4.0), (10.0, 6.0))
    rect.set_vertical(9.0)
    assert rect.centre == (3.0, 9.0)
    rect.set_horizontal(-1.0)
    assert rect.centre == (-1.0, 9.0)


def test_set_centre():
    rect = RoundedRect((3.0, 4.0), (10.0, 6.0))
    rect.set_centre((7.0, 7.0))
    assert rect.centre == (7.0, 7.0)
    assert rect.main.left + rect.main.width / 2 == pytest.approx(7.0)


def test_set_dim_keeps_centre():
    rect = RoundedRect((5.0, 5.0), (10.0, 6.0))
    rect.set_dim((20.0, 8.0))
    left, top, right, bottom = _union(rect)
    assert right - left == pytest.approx(20.0)
    assert bottom - top == pytest.approx(8.0)
    assert rect.centre == (5.0, 5.0)


def test_set_colour():
    rect = RoundedRect((0.0, 0.0), (4.0, 4.0), Shade.LIGHT)
    rect.set_colour(Shade.DARK)
    assert rect.colour is Shade.DARK