import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from geometry.Curves import QuadCurves
from geometry.FlatteningPathIterator import DEFAULT_LIMIT, FlatteningPathIterator
from geometry.Freezable import Freezable
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Point import Point
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape


@dataclass
class QuadCurve(Shape, Freezable):
    """Quadratic Bézier from (x1, y1) to (x2, y2) with one control point."""

    x1: float = 0
    y1: float = 0
    ctrlx: float = 0
    ctrly: float = 0
    x2: float = 0
    y2: float = 0

    def set_curve(self, x1: float, y1: float, ctrlx: float, ctrly: float,
                  x2: float, y2: float) -> "QuadCurve":
        self.x1, self.y1 = x1, y1
        self.ctrlx, self.ctrly = ctrlx, ctrly
        self.x2, self.y2 = x2, y2
        return self

    def set_curve_points(self, p1: Point, cp: Point, p2: Point) -> "QuadCurve":
        return self.set_curve(p1.x, p1.y, cp.x, cp.y, p2.x, p2.y)

    def set_curve_coords(self, coords: List[float], offset: int = 0) -> "QuadCurve":
        return self.set_curve(*coords[offset:offset + 6])

    def coords(self) -> List[float]:
        return [self.x1, self.y1, self.ctrlx, self.ctrly, self.x2, self.y2]

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def ctrl_p(self) -> Point:
        return Point(self.ctrlx, self.ctrly)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    def flatness_sq(self) -> float:
        return QuadCurves.flatness_sq(*self.coords())

    def flatness(self) -> float:
        return math.sqrt(self.flatness_sq())

    def subdivide(self, left: Optional["QuadCurve"] = None,
                  right: Optional["QuadCurve"] = None) -> Tuple["QuadCurve", "QuadCurve"]:
        buf = self.coords() + [0.0] * 6
        QuadCurves.subdivide_buffer(buf, 0, buf, 0, buf, 6)
        left = (left if left is not None else QuadCurve()).set_curve_coords(buf, 0)
        right = (right if right is not None else QuadCurve()).set_curve_coords(buf, 6)
        return left, right

    def point_at(self, t: float, result: Optional[Point] = None) -> Point:
        u = 1.0 - t
        a, b, c = u * u, 2 * u * t, t * t
        return (result if result is not None else Point()).set(
            a * self.x1 + b * self.ctrlx + c * self.x2,
            a * self.y1 + b * self.ctrly + c * self.y2)

    @property
    def is_empty(self) -> bool:
        return True

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        rx1 = min(self.x1, self.ctrlx, self.x2)
        ry1 = min(self.y1, self.ctrly, self.y2)
        rx2 = max(self.x1, self.ctrlx, self.x2)
        ry2 = max(self.y1, self.ctrly, self.y2)
        return (result if result is not None else Rectangle()).set_bounds(rx1, ry1, rx2 - rx1, ry2 - ry1)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        it = QuadCurveIterator(self, transform)
        if flatness is None:
            return it
        return FlatteningPathIterator(it, flatness)

    def flattening_path_iterator(self, transform, tolerance_sq: float,
                                 limit: int = DEFAULT_LIMIT) -> PathIterator:
        return FlatteningPathIterator(QuadCurveIterator(self, transform), math.sqrt(tolerance_sq), limit)


class QuadCurveIterator(PathIterator):
    def __init__(self, c: QuadCurve, transform=None):
        super().__init__(transform)
        self.curve = c.coords()

    def _count(self) -> int:
        return 2

    def _segment(self, index: int):
        if index == 0:
            return SegmentType.MOVE_TO, self.curve[0:2]
        return SegmentType.QUAD_TO, self.curve[2:6]
