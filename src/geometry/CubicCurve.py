import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from geometry.Curves import CubicCurves
from geometry.FlatteningPathIterator import DEFAULT_LIMIT, FlatteningPathIterator
from geometry.Freezable import Freezable
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Point import Point
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape


@dataclass
class CubicCurve(Shape, Freezable):
    """Cubic Bézier from (x1, y1) to (x2, y2) with two control points."""

    x1: float = 0
    y1: float = 0
    ctrlx1: float = 0
    ctrly1: float = 0
    ctrlx2: float = 0
    ctrly2: float = 0
    x2: float = 0
    y2: float = 0

    def set_curve(self, x1: float, y1: float, ctrlx1: float, ctrly1: float,
                  ctrlx2: float, ctrly2: float, x2: float, y2: float) -> "CubicCurve":
        self.x1, self.y1 = x1, y1
        self.ctrlx1, self.ctrly1 = ctrlx1, ctrly1
        self.ctrlx2, self.ctrly2 = ctrlx2, ctrly2
        self.x2, self.y2 = x2, y2
        return self

    def set_curve_points(self, p1: Point, cp1: Point, cp2: Point, p2: Point) -> "CubicCurve":
        return self.set_curve(p1.x, p1.y, cp1.x, cp1.y, cp2.x, cp2.y, p2.x, p2.y)

    def set_curve_coords(self, coords: List[float], offset: int = 0) -> "CubicCurve":
        return self.set_curve(*coords[offset:offset + 8])

    def coords(self) -> List[float]:
        return [self.x1, self.y1, self.ctrlx1, self.ctrly1, self.ctrlx2, self.ctrly2, self.x2, self.y2]

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def ctrl_p1(self) -> Point:
        return Point(self.ctrlx1, self.ctrly1)

    def ctrl_p2(self) -> Point:
        return Point(self.ctrlx2, self.ctrly2)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    def flatness_sq(self) -> float:
        return CubicCurves.flatness_sq(*self.coords())

    def flatness(self) -> float:
        return math.sqrt(self.flatness_sq())

    def subdivide(self, left: Optional["CubicCurve"] = None,
                  right: Optional["CubicCurve"] = None) -> Tuple["CubicCurve", "CubicCurve"]:
        """Split at t = 0.5. left ends exactly where right starts."""
        buf = self.coords() + [0.0] * 8
        CubicCurves.subdivide_buffer(buf, 0, buf, 0, buf, 8)
        left = (left if left is not None else CubicCurve()).set_curve_coords(buf, 0)
        right = (right if right is not None else CubicCurve()).set_curve_coords(buf, 8)
        return left, right

    def point_at(self, t: float, result: Optional[Point] = None) -> Point:
        u = 1.0 - t
        a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
        return (result if result is not None else Point()).set(
            a * self.x1 + b * self.ctrlx1 + c * self.ctrlx2 + d * self.x2,
            a * self.y1 + b * self.ctrly1 + c * self.ctrly2 + d * self.y2)

    @property
    def is_empty(self) -> bool:
        return True

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        xs = (self.x1, self.ctrlx1, self.ctrlx2, self.x2)
        ys = (self.y1, self.ctrly1, self.ctrly2, self.y2)
        rx1, ry1 = min(xs), min(ys)
        return (result if result is not None else Rectangle()).set_bounds(
            rx1, ry1, max(xs) - rx1, max(ys) - ry1)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        it = CubicCurveIterator(self, transform)
        if flatness is None:
            return it
        return FlatteningPathIterator(it, flatness)

    def flattening_path_iterator(self, transform, tolerance_sq: float,
                                 limit: int = DEFAULT_LIMIT) -> PathIterator:
        """Line segments approximating the curve to within tolerance_sq (squared flatness)."""
        return FlatteningPathIterator(CubicCurveIterator(self, transform), math.sqrt(tolerance_sq), limit)


class CubicCurveIterator(PathIterator):
    def __init__(self, c: CubicCurve, transform=None):
        super().__init__(transform)
        self.curve = c.coords()

    def _count(self) -> int:
        return 2

    def _segment(self, index: int):
        if index == 0:
            return SegmentType.MOVE_TO, self.curve[0:2]
        return SegmentType.CUBIC_TO, self.curve[2:8]
