import math
from dataclasses import dataclass
from typing import Optional, Tuple

from geometry.Freezable import Freezable
from geometry.GeoUtil import EPSILON, GeoUtil


@dataclass
class Point(Freezable):
    """A 2D point. Ints stay ints for add/subtract; anything involving
    division, roots or trig widens to float."""

    x: float = 0
    y: float = 0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def set(self, x: float, y: float) -> "Point":
        self.x = x
        self.y = y
        return self

    def set_to(self, other: "Point") -> "Point":
        return self.set(other.x, other.y)

    def distance_sq(self, other: "Point") -> float:
        return GeoUtil.distance_sq(self.x, self.y, other.x, other.y)

    def distance(self, other: "Point") -> float:
        return GeoUtil.distance(self.x, self.y, other.x, other.y)

    def direction(self, other: "Point") -> float:
        """Angle (radians) of the direction from this point to other."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def epsilon_equals(self, other: "Point", epsilon: float = EPSILON) -> bool:
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def add(self, x: float, y: float, result: Optional["Point"] = None) -> "Point":
        return (result if result is not None else Point()).set(self.x + x, self.y + y)

    def subtract(self, x: float, y: float, result: Optional["Point"] = None) -> "Point":
        return (result if result is not None else Point()).set(self.x - x, self.y - y)

    def mult(self, s: float, result: Optional["Point"] = None) -> "Point":
        return (result if result is not None else Point()).set(self.x * s, self.y * s)

    def negate(self, result: Optional["Point"] = None) -> "Point":
        return (result if result is not None else Point()).set(-self.x, -self.y)

    def rotate(self, angle: float, result: Optional["Point"] = None) -> "Point":
        """Rotate about the origin by angle radians."""
        sina, cosa = math.sin(angle), math.cos(angle)
        return (result if result is not None else Point()).set(
            self.x * cosa - self.y * sina, self.x * sina + self.y * cosa)

    def lerp(self, other: "Point", t: float, result: Optional["Point"] = None) -> "Point":
        return (result if result is not None else Point()).set(
            GeoUtil.lerp(self.x, other.x, t), GeoUtil.lerp(self.y, other.y, t))

    def add_local(self, x: float, y: float) -> "Point":
        return self.add(x, y, self)

    def subtract_local(self, x: float, y: float) -> "Point":
        return self.subtract(x, y, self)

    def mult_local(self, s: float) -> "Point":
        return self.mult(s, self)

    def negate_local(self) -> "Point":
        return self.negate(self)

    def rotate_local(self, angle: float) -> "Point":
        return self.rotate(angle, self)

    def lerp_local(self, other: "Point", t: float) -> "Point":
        return self.lerp(other, t, self)

    @staticmethod
    def transform(x: float, y: float, sx: float, sy: float, rotation: float,
                  tx: float, ty: float, result: Optional["Point"] = None) -> "Point":
        """Scale, then rotate, then translate (x, y)."""
        sina, cosa = math.sin(rotation), math.cos(rotation)
        return (result if result is not None else Point()).set(
            (x * cosa - y * sina) * sx + tx, (x * sina + y * cosa) * sy + ty)

    @staticmethod
    def inverse_transform(x: float, y: float, sx: float, sy: float, rotation: float,
                          tx: float, ty: float, result: Optional["Point"] = None) -> "Point":
        x = (x - tx) / sx
        y = (y - ty) / sy
        sina, cosa = math.sin(-rotation), math.cos(-rotation)
        return (result if result is not None else Point()).set(
            x * cosa - y * sina, x * sina + y * cosa)

    def __str__(self) -> str:
        return GeoUtil.point_to_string(self.x, self.y)


Point.ZERO = Point(0, 0).freeze()
