"""Small numeric helpers for collision checks."""

from __future__ import annotations

Point = tuple[float, float]


def sign(num: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``num``."""
    if num > 0:
        return 1
    if num < 0:
        return -1
    return 0


def squared_distance_to_segment(point: Point, start: Point, end: Point) -> float:
    """The squared distance from ``point`` to the segment ``start``-``end``.

    Segments whose ends are less than one unit apart on both axes are
    treated as the single point ``start``.
    """
    px, py = point
    sx, sy = start
    ex, ey = end

    if abs(sx - ex) < 1.0 and abs(sy - ey) < 1.0:
        return (sx - px) ** 2 + (sy - py) ** 2

    seg_x, seg_y = ex - sx, ey - sy
    to_start_x, to_start_y = px - sx, py - sy
    to_end_x, to_end_y = px - ex, py - ey

    start_dot = seg_x * to_start_x + seg_y * to_start_y
    end_dot = seg_x * to_end_x + seg_y * to_end_y

    if end_dot > 0.0:
        return (ex - px) ** 2 + (ey - py) ** 2
    if start_dot < 0.0:
        return (sx - px) ** 2 + (sy - py) ** 2

    length_sq = seg_x * seg_x + seg_y * seg_y
    cross = seg_x * to_start_y - seg_y * to_start_x
    return cross * cross / length_sq