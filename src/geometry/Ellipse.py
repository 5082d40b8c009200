import math
from dataclasses import dataclass
from typing import Optional

from geometry.FlatteningPathIterator import FlatteningPathIterator
from geometry.Freezable import Freezable
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape

# Control point offset (as a fraction of the frame) for a quarter ellipse
# approximated by one cubic whose midpoint lies on the ellipse
U = 2.0 / 3.0 * (math.sqrt(2.0) - 1.0)

# Quarter curves as frame fractions: ctrl1, ctrl2, end
_QUARTERS = (
    (1.0, 0.5 + U, 0.5 + U, 1.0, 0.5, 1.0),
    (0.5 - U, 1.0, 0.0, 0.5 + U, 0.0, 0.5),
    (0.0, 0.5 - U, 0.5 - U, 0.0, 0.5, 0.0),
    (0.5 + U, 0.0, 1.0, 0.5 - U, 1.0, 0.5),
)


@dataclass
class Ellipse(Shape, Freezable):
    """Ellipse inscribed in the frame (x, y, width, height).

    Containment and intersection are closed-form; the outline is four cubic
    quarters, which is what the crossing engine and the flattener see.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @classmethod
    def from_circle(cls, c) -> "Ellipse":
        return cls(c.x - c.radius, c.y - c.radius, c.radius * 2, c.radius * 2)

    def set_frame(self, x: float, y: float, width: float, height: float) -> "Ellipse":
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        return self

    def set_frame_from_center(self, center_x: float, center_y: float,
                              radius_x: float, radius_y: float) -> "Ellipse":
        return self.set_frame(center_x - radius_x, center_y - radius_y, radius_x * 2, radius_y * 2)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float) -> bool:
        if self.is_empty:
            return False
        a = (x - self.x) / self.width - 0.5
        b = (y - self.y) / self.height - 0.5
        return a * a + b * b < 0.25

    def contains_rect(self, x: float, y: float, w: float, h: float) -> bool:
        if self.is_empty or w <= 0 or h <= 0:
            return False
        return (self.contains(x, y) and self.contains(x + w, y)
                and self.contains(x + w, y + h) and self.contains(x, y + h))

    def intersects(self, x: float, y: float, w: float, h: float) -> bool:
        if self.is_empty or w <= 0 or h <= 0:
            return False
        # the rectangle point nearest the centre
        nx = min(max(self.center_x, x), x + w)
        ny = min(max(self.center_y, y), y + h)
        return self.contains(nx, ny)

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        return (result if result is not None else Rectangle()).set_bounds(
            self.x, self.y, self.width, self.height)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        it = EllipseIterator(self, transform)
        if flatness is None:
            return it
        return FlatteningPathIterator(it, flatness)


class EllipseIterator(PathIterator):
    """MOVE_TO the rightmost point, four CUBIC_TO quarters, CLOSE."""

    def __init__(self, e: Ellipse, transform=None):
        super().__init__(transform)
        self.x, self.y = e.x, e.y
        self.width, self.height = e.width, e.height
        if self.width < 0 or self.height < 0:
            self._index = 6

    def _count(self) -> int:
        return 6

    def _segment(self, index: int):
        if index == 5:
            return SegmentType.CLOSE, []
        if index == 0:
            p = _QUARTERS[3]
            return SegmentType.MOVE_TO, [self.x + p[4] * self.width, self.y + p[5] * self.height]
        p = _QUARTERS[index - 1]
        coords = []
        for i in range(0, 6, 2):
            coords.append(self.x + p[i] * self.width)
            coords.append(self.y + p[i + 1] * self.height)
        return SegmentType.CUBIC_TO, coords
