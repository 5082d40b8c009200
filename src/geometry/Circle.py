from dataclasses import dataclass
from typing import Optional

from geometry.Freezable import Freezable
from geometry.GeoUtil import GeoUtil
from geometry.Point import Point
from geometry.Rectangle import Rectangle


@dataclass
class Circle(Freezable):
    """Circle centred on (x, y). Points on the circumference are outside."""

    x: float = 0
    y: float = 0
    radius: float = 0

    def set(self, x: float, y: float, radius: float) -> "Circle":
        self.x = x
        self.y = y
        self.radius = radius
        return self

    def center(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, x: float, y: float) -> bool:
        return GeoUtil.distance_sq(self.x, self.y, x, y) < self.radius * self.radius

    def contains_point(self, p: Point) -> bool:
        return self.contains(p.x, p.y)

    def intersects(self, c: "Circle") -> bool:
        max_dist = self.radius + c.radius
        return GeoUtil.distance_sq(self.x, self.y, c.x, c.y) < max_dist * max_dist

    def offset(self, x: float, y: float, result: Optional["Circle"] = None) -> "Circle":
        return (result if result is not None else Circle()).set(self.x + x, self.y + y, self.radius)

    def offset_local(self, x: float, y: float) -> "Circle":
        return self.offset(x, y, self)

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        r = self.radius
        return (result if result is not None else Rectangle()).set_bounds(self.x - r, self.y - r, r + r, r + r)
