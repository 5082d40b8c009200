import math
from dataclasses import dataclass
from typing import Optional

from geometry.Dimension import Dimension
from geometry.Freezable import Freezable
from geometry.GeoUtil import GeoUtil
from geometry.Lines import Lines
from geometry.PathIterator import PathIterator, SegmentType
from geometry.Point import Point
from geometry.Shape import Shape

OUT_LEFT = 1
OUT_TOP = 2
OUT_RIGHT = 4
OUT_BOTTOM = 8


@dataclass
class Rectangle(Shape, Freezable):
    """Axis aligned rectangle given by its min corner and size.

    A rectangle with width <= 0 or height <= 0 is empty: it contains and
    intersects nothing.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def min(self) -> Point:
        return Point(self.min_x, self.min_y)

    def max(self) -> Point:
        return Point(self.max_x, self.max_y)

    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    def location(self, result: Optional[Point] = None) -> Point:
        return (result if result is not None else Point()).set(self.x, self.y)

    def size(self, result: Optional[Dimension] = None) -> Dimension:
        return (result if result is not None else Dimension()).set_size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def set_bounds(self, x: float, y: float, width: float, height: float) -> "Rectangle":
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        return self

    def set_to(self, r: "Rectangle") -> "Rectangle":
        return self.set_bounds(r.x, r.y, r.width, r.height)

    def set_location(self, x: float, y: float) -> "Rectangle":
        self.x = x
        self.y = y
        return self

    def set_size(self, width: float, height: float) -> "Rectangle":
        self.width = width
        self.height = height
        return self

    def set_frame_from_diagonal(self, x1: float, y1: float, x2: float, y2: float) -> "Rectangle":
        return self.set_bounds(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    def set_frame_from_center(self, center_x: float, center_y: float,
                              corner_x: float, corner_y: float) -> "Rectangle":
        width = abs(corner_x - center_x)
        height = abs(corner_y - center_y)
        return self.set_bounds(center_x - width, center_y - height, width * 2, height * 2)

    def grow(self, dx: float, dy: float) -> "Rectangle":
        """Expand each side outwards by dx horizontally and dy vertically."""
        return self.set_bounds(self.x - dx, self.y - dy, self.width + dx + dx, self.height + dy + dy)

    def translate(self, dx: float, dy: float) -> "Rectangle":
        self.x += dx
        self.y += dy
        return self

    def add(self, x: float, y: float) -> "Rectangle":
        """Grow to include the point (x, y)."""
        x1 = min(self.x, x)
        x2 = max(self.max_x, x)
        y1 = min(self.y, y)
        y2 = max(self.max_y, y)
        return self.set_bounds(x1, y1, x2 - x1, y2 - y1)

    def add_point(self, p: Point) -> "Rectangle":
        return self.add(p.x, p.y)

    def add_rect(self, r: "Rectangle") -> "Rectangle":
        x1 = min(self.x, r.x)
        x2 = max(self.max_x, r.max_x)
        y1 = min(self.y, r.y)
        y2 = max(self.max_y, r.max_y)
        return self.set_bounds(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, r: "Rectangle", result: Optional["Rectangle"] = None) -> "Rectangle":
        """Overlap of the two rectangles; the result is empty if they are disjoint."""
        x1 = max(self.x, r.x)
        y1 = max(self.y, r.y)
        x2 = min(self.max_x, r.max_x)
        y2 = min(self.max_y, r.max_y)
        return (result if result is not None else Rectangle()).set_bounds(x1, y1, x2 - x1, y2 - y1)

    def union(self, r: "Rectangle", result: Optional["Rectangle"] = None) -> "Rectangle":
        x1 = min(self.x, r.x)
        y1 = min(self.y, r.y)
        x2 = max(self.max_x, r.max_x)
        y2 = max(self.max_y, r.max_y)
        return (result if result is not None else Rectangle()).set_bounds(x1, y1, x2 - x1, y2 - y1)

    def outcode(self, px: float, py: float) -> int:
        """Bit mask of the OUT_* sides that (px, py) lies beyond."""
        code = 0
        if self.width <= 0:
            code |= OUT_LEFT | OUT_RIGHT
        elif px < self.x:
            code |= OUT_LEFT
        elif px > self.max_x:
            code |= OUT_RIGHT

        if self.height <= 0:
            code |= OUT_TOP | OUT_BOTTOM
        elif py < self.y:
            code |= OUT_TOP
        elif py > self.max_y:
            code |= OUT_BOTTOM
        return code

    def contains(self, x: float, y: float) -> bool:
        if self.is_empty:
            return False
        if x < self.x or y < self.y:
            return False
        return x - self.x <= self.width and y - self.y <= self.height

    def contains_rect(self, x: float, y: float, w: float, h: float) -> bool:
        if self.is_empty:
            return False
        return self.x <= x and x + w <= self.max_x and self.y <= y and y + h <= self.max_y

    def intersects(self, x: float, y: float, w: float, h: float) -> bool:
        if self.is_empty:
            return False
        return x + w > self.x and x < self.max_x and y + h > self.y and y < self.max_y

    def intersects_line(self, x1: float, y1: float, x2: float, y2: float) -> bool:
        return Lines.line_intersects_rect(x1, y1, x2, y2, self.x, self.y, self.width, self.height)

    def closest_interior_point(self, p: Point, result: Optional[Point] = None) -> Point:
        return (result if result is not None else Point()).set(
            GeoUtil.clamp(p.x, self.min_x, self.max_x), GeoUtil.clamp(p.y, self.min_y, self.max_y))

    def point_rect_distance_sq(self, p: Point) -> float:
        closest = self.closest_interior_point(p)
        return GeoUtil.distance_sq(p.x, p.y, closest.x, closest.y)

    def point_rect_distance(self, p: Point) -> float:
        return math.sqrt(self.point_rect_distance_sq(p))

    def bounds(self, result: Optional["Rectangle"] = None) -> "Rectangle":
        return (result if result is not None else Rectangle()).set_to(self)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        return RectangleIterator(self, transform)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}{GeoUtil.point_to_string(self.x, self.y)}"


class RectangleIterator(PathIterator):
    """MOVE_TO the min corner, four LINE_TOs around the edges, then CLOSE."""

    def __init__(self, r: Rectangle, transform=None):
        super().__init__(transform)
        self.x, self.y = r.x, r.y
        self.width, self.height = r.width, r.height
        if self.width < 0 or self.height < 0:
            self._index = 6

    def _count(self) -> int:
        return 6

    def _segment(self, index: int):
        if index == 5:
            return SegmentType.CLOSE, []
        if index == 0:
            return SegmentType.MOVE_TO, [self.x, self.y]
        corners = {
            1: (self.x + self.width, self.y),
            2: (self.x + self.width, self.y + self.height),
            3: (self.x, self.y + self.height),
            4: (self.x, self.y),
        }
        return SegmentType.LINE_TO, list(corners[index])
