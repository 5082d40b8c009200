from dataclasses import dataclass
from typing import Optional

from geometry.Freezable import Freezable
from geometry.Lines import Lines
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Point import Point
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape


@dataclass
class Line(Shape, Freezable):
    """Line segment from (x1, y1) to (x2, y2). A line has no interior."""

    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 0

    def set_line(self, x1: float, y1: float, x2: float, y2: float) -> "Line":
        self.x1, self.y1 = x1, y1
        self.x2, self.y2 = x2, y2
        return self

    def set_line_points(self, p1: Point, p2: Point) -> "Line":
        return self.set_line(p1.x, p1.y, p2.x, p2.y)

    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    def point_line_dist_sq(self, px: float, py: float) -> float:
        return Lines.point_line_dist_sq(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_line_dist(self, px: float, py: float) -> float:
        return Lines.point_line_dist(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_seg_dist_sq(self, px: float, py: float) -> float:
        return Lines.point_seg_dist_sq(px, py, self.x1, self.y1, self.x2, self.y2)

    def point_seg_dist(self, px: float, py: float) -> float:
        return Lines.point_seg_dist(px, py, self.x1, self.y1, self.x2, self.y2)

    def relative_ccw(self, px: float, py: float) -> int:
        return Lines.relative_ccw(px, py, self.x1, self.y1, self.x2, self.y2)

    def intersects_line(self, other: "Line") -> bool:
        return Lines.lines_intersect(self.x1, self.y1, self.x2, self.y2,
                                     other.x1, other.y1, other.x2, other.y2)

    @property
    def is_empty(self) -> bool:
        return False

    def contains(self, x: float, y: float) -> bool:
        return False

    def contains_rect(self, x: float, y: float, w: float, h: float) -> bool:
        return False

    def intersects(self, x: float, y: float, w: float, h: float) -> bool:
        return Lines.line_intersects_rect(self.x1, self.y1, self.x2, self.y2, x, y, w, h)

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        return (result if result is not None else Rectangle()).set_frame_from_diagonal(
            self.x1, self.y1, self.x2, self.y2)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        return LineIterator(self, transform)


class LineIterator(PathIterator):
    def __init__(self, line: Line, transform=None):
        super().__init__(transform)
        self.points = [line.x1, line.y1, line.x2, line.y2]

    def _count(self) -> int:
        return 2

    def _segment(self, index: int):
        if index == 0:
            return SegmentType.MOVE_TO, self.points[0:2]
        return SegmentType.LINE_TO, self.points[2:4]
