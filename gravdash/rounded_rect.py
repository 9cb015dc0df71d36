"""A filled rectangle with its corner pixels cut away."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Point = tuple[float, float]


class Shade(IntEnum):
    """Palette shades, from darkest to lightest."""

    DARKEST = 0
    DARK = 1
    LIGHT = 2
    LIGHTEST = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


class RoundedRect:
    """A rectangle drawn as a wide body and two shorter one-pixel edges.

    The edges are two pixels shorter than the body, which leaves the
    corners empty and gives the shape its rounded look.
    """

    def __init__(self, centre: Point, dim: Point, colour: object = Shade.DARKEST) -> None:
        self.centre: Point = (float(centre[0]), float(centre[1]))
        self.dim: Point = (float(dim[0]), float(dim[1]))
        self.colour = colour

    @property
    def main(self) -> Rect:
        """The body: the full height, one pixel short of each side."""
        cx, cy = self.centre
        dx, dy = self.dim
        return Rect(cx - (dx - 2.0) / 2.0, cy - dy / 2.0, dx - 2.0, dy)

    @property
    def left_edge(self) -> Rect:
        cx, cy = self.centre
        dx, dy = self.dim
        return Rect(cx - dx / 2.0, cy - (dy - 2.0) / 2.0, 1.0, dy - 2.0)

    @property
    def right_edge(self) -> Rect:
        cx, cy = self.centre
        dx, dy = self.dim
        return Rect(cx + dx / 2.0 - 1.0, cy - (dy - 2.0) / 2.0, 1.0, dy - 2.0)

    @property
    def parts(self) -> tuple[Rect, Rect, Rect]:
        """The three rectangles that make up the shape."""
        return self.main, self.left_edge, self.right_edge

    def set_centre(self, centre: Point) -> None:
        self.move((centre[0] - self.centre[0], centre[1] - self.centre[1]))

    def set_vertical(self, y: float) -> None:
        self.move((0.0, y - self.centre[1]))

    def set_horizontal(self, x: float) -> None:
        self.move((x - self.centre[0], 0.0))

    def move(self, offset: Point) -> None:
        """Shift the whole shape by ``offset``."""
        self.centre = (self.centre[0] + offset[0], self.centre[1] + offset[1])

    def set_dim(self, dim: Point) -> None:
        """Resize the shape around its current centre."""
        self.dim = (float(dim[0]), float(dim[1]))

    def set_colour(self, colour: object) -> None:
        self.colour = colour