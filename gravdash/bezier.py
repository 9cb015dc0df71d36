"""Bezier curves evaluated by repeated linear interpolation."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

Point = tuple[float, float]


class Bezier:
    """A Bezier curve through its control points."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self.points: list[Point] = [(float(x), float(y)) for x, y in points]
        if not self.points:
            self.points.append((0.0, 0.0))

    def point(self, t: float) -> Point:
        """The point on the curve at parameter ``t``, clamped to [0, 1]."""
        if t <= 0.0:
            return self.points[0]
        if t >= 1.0:
            return self.points[-1]

        level = self.points
        while len(level) > 1:
            level = [
                (ax + t * (bx - ax), ay + t * (by - ay))
                for (ax, ay), (bx, by) in pairwise(level)
            ]
        return level[0]

    def value(self, t: float) -> float:
        """The vertical coordinate of the curve at ``t``."""
        return self.point(t)[1]