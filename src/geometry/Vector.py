import math
from dataclasses import dataclass
from typing import Optional, Tuple

from geometry.Freezable import Freezable
from geometry.GeoUtil import EPSILON, GeoUtil


@dataclass
class Vector(Freezable):
    x: float = 0
    y: float = 0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def set(self, x: float, y: float) -> "Vector":
        self.x = x
        self.y = y
        return self

    def set_to(self, other: "Vector") -> "Vector":
        return self.set(other.x, other.y)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        # z component of the 3D cross product
        return self.x * other.y - self.y * other.x

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def distance_sq(self, other: "Vector") -> float:
        return GeoUtil.distance_sq(self.x, self.y, other.x, other.y)

    def distance(self, other: "Vector") -> float:
        return math.sqrt(self.distance_sq(other))

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_between(self, other: "Vector") -> float:
        cos = self.dot(other) / (self.length() * other.length())
        return math.acos(GeoUtil.clamp(cos, -1.0, 1.0))

    def epsilon_equals(self, other: "Vector", epsilon: float = EPSILON) -> bool:
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def negate(self, result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(-self.x, -self.y)

    def normalize(self, result: Optional["Vector"] = None) -> "Vector":
        # a zero vector normalizes to NaN components
        length = self.length()
        inv = 1.0 / length if length != 0 else math.nan
        return self.scale(inv, result)

    def scale(self, v: float, result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(self.x * v, self.y * v)

    def scale_by(self, other: "Vector", result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(self.x * other.x, self.y * other.y)

    def add(self, other: "Vector", result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector", result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(self.x - other.x, self.y - other.y)

    def add_scaled(self, other: "Vector", v: float, result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(
            self.x + other.x * v, self.y + other.y * v)

    def rotate(self, angle: float, result: Optional["Vector"] = None) -> "Vector":
        sina, cosa = math.sin(angle), math.cos(angle)
        return (result if result is not None else Vector()).set(
            self.x * cosa - self.y * sina, self.x * sina + self.y * cosa)

    def lerp(self, other: "Vector", t: float, result: Optional["Vector"] = None) -> "Vector":
        return (result if result is not None else Vector()).set(
            GeoUtil.lerp(self.x, other.x, t), GeoUtil.lerp(self.y, other.y, t))

    def negate_local(self) -> "Vector":
        return self.negate(self)

    def normalize_local(self) -> "Vector":
        return self.normalize(self)

    def scale_local(self, v: float) -> "Vector":
        return self.scale(v, self)

    def add_local(self, other: "Vector") -> "Vector":
        return self.add(other, self)

    def subtract_local(self, other: "Vector") -> "Vector":
        return self.subtract(other, self)

    def add_scaled_local(self, other: "Vector", v: float) -> "Vector":
        return self.add_scaled(other, v, self)

    def rotate_local(self, angle: float) -> "Vector":
        return self.rotate(angle, self)

    def lerp_local(self, other: "Vector", t: float) -> "Vector":
        return self.lerp(other, t, self)

    def set_angle(self, angle: float) -> "Vector":
        length = self.length()
        return self.set(length * math.cos(angle), length * math.sin(angle))

    def set_length(self, length: float) -> "Vector":
        return self.normalize_local().scale_local(length)

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, k: float) -> "Vector":
        return self.scale(k)
    __rmul__ = __mul__

    def __str__(self) -> str:
        return GeoUtil.point_to_string(self.x, self.y)


Vector.ZERO = Vector(0, 0).freeze()
Vector.UNIT_X = Vector(1, 0).freeze()
Vector.UNIT_Y = Vector(0, 1).freeze()
