import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geometry.FlatteningPathIterator import FlatteningPathIterator
from geometry.Freezable import Freezable
from geometry.Lines import Lines
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Point import Point
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape


class ArcType(Enum):
    OPEN = 0   # just the curve
    CHORD = 1  # closed by a line from end back to start
    PIE = 2    # closed through the centre


def norm_angle(angle: float) -> float:
    """Angle in degrees folded into [0, 360)."""
    return angle - math.floor(angle / 360.0) * 360.0


@dataclass
class Arc(Shape, Freezable):
    """Elliptical arc framed by (x, y, width, height).

    Angles are in degrees, measured counterclockwise as seen on screen (so
    90 is towards smaller y). `extent` may be negative to run clockwise.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    start: float = 0
    extent: float = 0
    arc_type: ArcType = ArcType.OPEN

    def __post_init__(self):
        self.set_arc_type(self.arc_type)

    def set_arc_type(self, arc_type: ArcType) -> None:
        if not isinstance(arc_type, ArcType):
            raise ValueError(f"Invalid Arc type: {arc_type!r}")
        self.arc_type = arc_type

    def set_angle_start(self, start: float) -> None:
        self.start = start

    def set_angle_extent(self, extent: float) -> None:
        self.extent = extent

    def set_arc(self, x: float, y: float, width: float, height: float,
                start: float, extent: float, arc_type: ArcType) -> "Arc":
        self.set_arc_type(arc_type)
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.start = start
        self.extent = extent
        return self

    def set_arc_by_center(self, x: float, y: float, radius: float,
                          start: float, extent: float, arc_type: ArcType) -> "Arc":
        return self.set_arc(x - radius, y - radius, radius * 2, radius * 2, start, extent, arc_type)

    def set_arc_by_tangent(self, p1: Point, p2: Point, p3: Point, radius: float) -> "Arc":
        """Circular arc of the given radius tangent to the lines p1-p2 and p2-p3."""
        a1 = -math.atan2(p1.y - p2.y, p1.x - p2.x)
        a2 = -math.atan2(p3.y - p2.y, p3.x - p2.x)
        am = (a1 + a2) / 2.0
        ah = a1 - am
        d = radius / abs(math.sin(ah))
        x = p2.x + d * math.cos(am)
        y = p2.y - d * math.sin(am)
        ah = math.pi * 1.5 - ah if ah >= 0 else math.pi * 0.5 - ah
        a1 = norm_angle(math.degrees(am - ah))
        a2 = norm_angle(math.degrees(am + ah))
        delta = a2 - a1
        if delta <= 0:
            delta += 360.0
        return self.set_arc_by_center(x, y, radius, a1, delta, self.arc_type)

    def set_angle_start_point(self, p: Point) -> None:
        """Start the arc at the angle of p as seen from the centre."""
        angle = math.atan2(p.y - self.center_y, p.x - self.center_x)
        self.set_angle_start(norm_angle(-math.degrees(angle)))

    def set_angles(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Run counterclockwise from the angle of (x1, y1) to the angle of (x2, y2)."""
        cx, cy = self.center_x, self.center_y
        a1 = norm_angle(-math.degrees(math.atan2(y1 - cy, x1 - cx)))
        a2 = norm_angle(-math.degrees(math.atan2(y2 - cy, x2 - cx)))
        a2 -= a1
        if a2 <= 0:
            a2 += 360.0
        self.set_angle_start(a1)
        self.set_angle_extent(a2)

    def set_frame(self, x: float, y: float, width: float, height: float) -> "Arc":
        return self.set_arc(x, y, width, height, self.start, self.extent, self.arc_type)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    def _point_at_angle(self, degrees: float, result: Optional[Point]) -> Point:
        a = math.radians(degrees)
        return (result if result is not None else Point()).set(
            self.x + (1.0 + math.cos(a)) * self.width / 2.0,
            self.y + (1.0 - math.sin(a)) * self.height / 2.0)

    def start_point(self, result: Optional[Point] = None) -> Point:
        return self._point_at_angle(self.start, result)

    def end_point(self, result: Optional[Point] = None) -> Point:
        return self._point_at_angle(self.start + self.extent, result)

    def contains_angle(self, angle: float) -> bool:
        extent = self.extent
        if extent >= 360.0:
            return True
        angle = norm_angle(angle)
        a1 = norm_angle(self.start)
        a2 = a1 + extent
        if a2 > 360.0:
            return angle >= a1 or angle <= a2 - 360.0
        if a2 < 0.0:
            return angle >= a2 + 360.0 or angle <= a1
        if extent > 0:
            return a1 <= angle <= a2
        return a2 <= angle <= a1

    @property
    def is_empty(self) -> bool:
        return self.arc_type == ArcType.OPEN or self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float) -> bool:
        # an open arc is treated as closed by its chord
        if self.width <= 0 or self.height <= 0:
            return False
        nx = (x - self.x) / self.width - 0.5
        ny = (y - self.y) / self.height - 0.5
        if nx * nx + ny * ny > 0.25:
            return False

        abs_extent = abs(self.extent)
        if abs_extent >= 360.0:
            return True

        contains_angle = self.contains_angle(math.degrees(-math.atan2(ny, nx)))
        if self.arc_type == ArcType.PIE:
            return contains_angle
        if abs_extent <= 180.0 and not contains_angle:
            return False

        p1, p2 = self.start_point(), self.end_point()
        ccw1 = Lines.relative_ccw(x, y, p1.x, p1.y, p2.x, p2.y)
        ccw2 = Lines.relative_ccw(self.center_x, self.center_y, p1.x, p1.y, p2.x, p2.y)
        return ccw1 == 0 or ccw2 == 0 or ((ccw1 + ccw2 == 0) != (abs_extent > 180.0))

    def contains_rect(self, x: float, y: float, w: float, h: float) -> bool:
        if not (self.contains(x, y) and self.contains(x + w, y)
                and self.contains(x + w, y + h) and self.contains(x, y + h)):
            return False

        abs_extent = abs(self.extent)
        if self.arc_type != ArcType.PIE or abs_extent <= 180.0 or abs_extent >= 360.0:
            return True

        # a pie with a notch: the corners may all be inside while the notch cuts in
        r = Rectangle(x, y, w, h)
        cx, cy = self.center_x, self.center_y
        if r.contains(cx, cy):
            return False
        p1, p2 = self.start_point(), self.end_point()
        return not r.intersects_line(cx, cy, p1.x, p1.y) and not r.intersects_line(cx, cy, p2.x, p2.y)

    def intersects(self, x: float, y: float, w: float, h: float) -> bool:
        if self.is_empty or w <= 0 or h <= 0:
            return False

        if (self.contains(x, y) or self.contains(x + w, y)
                or self.contains(x, y + h) or self.contains(x + w, y + h)):
            return True

        cx, cy = self.center_x, self.center_y
        p1, p2 = self.start_point(), self.end_point()
        r = Rectangle(x, y, w, h)
        if r.contains_point(p1) or r.contains_point(p2):
            return True
        if self.arc_type == ArcType.PIE:
            if (r.contains(cx, cy) or r.intersects_line(p1.x, p1.y, cx, cy)
                    or r.intersects_line(p2.x, p2.y, cx, cy)):
                return True
        elif r.intersects_line(p1.x, p1.y, p2.x, p2.y):
            return True

        # the rectangle point nearest the centre
        nx = min(max(cx, x), x + w)
        ny = min(max(cy, y), y + h)
        return self.contains(nx, ny)

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        result = result if result is not None else Rectangle()
        if self.is_empty:
            return result.set_bounds(self.x, self.y, self.width, self.height)

        p1, p2 = self.start_point(), self.end_point()
        bx1 = self.x if self.contains_angle(180.0) else min(p1.x, p2.x)
        by1 = self.y if self.contains_angle(90.0) else min(p1.y, p2.y)
        bx2 = self.x + self.width if self.contains_angle(0.0) else max(p1.x, p2.x)
        by2 = self.y + self.height if self.contains_angle(270.0) else max(p1.y, p2.y)

        if self.arc_type == ArcType.PIE:
            bx1 = min(bx1, self.center_x)
            by1 = min(by1, self.center_y)
            bx2 = max(bx2, self.center_x)
            by2 = max(by2, self.center_y)
        return result.set_bounds(bx1, by1, bx2 - bx1, by2 - by1)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        it = ArcIterator(self, transform)
        if flatness is None:
            return it
        return FlatteningPathIterator(it, flatness)


class ArcIterator(PathIterator):
    """MOVE_TO the start point, one CUBIC_TO per (at most) 90 degrees, then
    the closing segments for the arc type."""

    def __init__(self, a: Arc, transform=None):
        super().__init__(transform)
        self.rx = a.width / 2.0
        self.ry = a.height / 2.0
        self.cx = a.x + self.rx
        self.cy = a.y + self.ry
        # screen y points down, so angles run the other way in radians
        self.angle = -math.radians(a.start)
        extent = -a.extent

        self.arc_count = 0
        self.line_count = 0
        self.step = 0.0
        self.k = 0.0
        if self.rx < 0 or self.ry < 0:
            self._index = 1
            return

        if abs(extent) >= 360.0:
            self.arc_count = 4
            self.k = 4.0 / 3.0 * (math.sqrt(2.0) - 1.0)
            self.step = math.pi / 2.0
            if extent < 0:
                self.step = -self.step
                self.k = -self.k
        else:
            self.arc_count = math.ceil(abs(extent) / 90.0)
            if self.arc_count > 0:
                self.step = math.radians(extent / self.arc_count)
                self.k = 4.0 / 3.0 * (1.0 - math.cos(self.step / 2.0)) / math.sin(self.step / 2.0)

        if a.arc_type == ArcType.CHORD:
            self.line_count = 1
        elif a.arc_type == ArcType.PIE:
            self.line_count = 2

    def _count(self) -> int:
        return self.arc_count + self.line_count + 1

    def _on_arc(self, angle: float):
        cos, sin = math.cos(angle), math.sin(angle)
        return (self.cx + cos * self.rx, self.cy + sin * self.ry,
                self.k * self.rx * sin, self.k * self.ry * cos)

    def _segment(self, index: int):
        if index == 0:
            mx, my, _, _ = self._on_arc(self.angle)
            return SegmentType.MOVE_TO, [mx, my]
        if index <= self.arc_count:
            mx1, my1, kx1, ky1 = self._on_arc(self.angle + (index - 1) * self.step)
            mx2, my2, kx2, ky2 = self._on_arc(self.angle + index * self.step)
            return SegmentType.CUBIC_TO, [mx1 - kx1, my1 + ky1, mx2 + kx2, my2 - ky2, mx2, my2]
        if index == self.arc_count + self.line_count:
            return SegmentType.CLOSE, []
        return SegmentType.LINE_TO, [self.cx, self.cy]
