import math
from dataclasses import dataclass
from typing import Optional, Tuple

from geometry.Freezable import Freezable
from geometry.GeoUtil import EPSILON, GeoUtil


@dataclass
class Vector3(Freezable):
    """A 3D vector, also used for 3D points (plane and ray math)."""

    x: float = 0
    y: float = 0
    z: float = 0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __getitem__(self, idx: int) -> float:
        return self.as_tuple()[idx]

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def set_to(self, other: "Vector3") -> "Vector3":
        return self.set(other.x, other.y, other.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3", result: Optional["Vector3"] = None) -> "Vector3":
        x, y, z = self.x, self.y, self.z
        ox, oy, oz = other.x, other.y, other.z
        return (result if result is not None else Vector3()).set(
            y * oz - z * oy, z * ox - x * oz, x * oy - y * ox)

    def triple(self, b: "Vector3", c: "Vector3") -> float:
        """Triple product self . (b x c)"""
        return self.dot(b.cross(c))

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def distance_sq(self, other: "Vector3") -> float:
        dx, dy, dz = other.x - self.x, other.y - self.y, other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: "Vector3") -> float:
        return math.sqrt(self.distance_sq(other))

    def manhattan_distance(self, other: "Vector3") -> float:
        return abs(other.x - self.x) + abs(other.y - self.y) + abs(other.z - self.z)

    def angle(self, other: "Vector3") -> float:
        cos = self.dot(other) / (self.length() * other.length())
        return math.acos(GeoUtil.clamp(cos, -1.0, 1.0))

    def epsilon_equals(self, other: "Vector3", epsilon: float = EPSILON) -> bool:
        return (abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon
                and abs(self.z - other.z) < epsilon)

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def negate(self, result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(-self.x, -self.y, -self.z)

    def abs(self, result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(abs(self.x), abs(self.y), abs(self.z))

    def normalize(self, result: Optional["Vector3"] = None) -> "Vector3":
        # a zero vector normalizes to NaN components
        length = self.length()
        return self.mult(1.0 / length if length != 0 else math.nan, result)

    def mult(self, v: float, result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(self.x * v, self.y * v, self.z * v)

    def mult_by(self, other: "Vector3", result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(
            self.x * other.x, self.y * other.y, self.z * other.z)

    def add(self, other: "Vector3", result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(
            self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3", result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(
            self.x - other.x, self.y - other.y, self.z - other.z)

    def add_scaled(self, other: "Vector3", v: float, result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(
            self.x + other.x * v, self.y + other.y * v, self.z + other.z * v)

    def lerp(self, other: "Vector3", t: float, result: Optional["Vector3"] = None) -> "Vector3":
        return (result if result is not None else Vector3()).set(
            GeoUtil.lerp(self.x, other.x, t), GeoUtil.lerp(self.y, other.y, t),
            GeoUtil.lerp(self.z, other.z, t))

    def cross_local(self, other: "Vector3") -> "Vector3":
        return self.cross(other, self)

    def negate_local(self) -> "Vector3":
        return self.negate(self)

    def abs_local(self) -> "Vector3":
        return self.abs(self)

    def normalize_local(self) -> "Vector3":
        return self.normalize(self)

    def mult_local(self, v: float) -> "Vector3":
        return self.mult(v, self)

    def add_local(self, other: "Vector3") -> "Vector3":
        return self.add(other, self)

    def subtract_local(self, other: "Vector3") -> "Vector3":
        return self.subtract(other, self)

    def add_scaled_local(self, other: "Vector3", v: float) -> "Vector3":
        return self.add_scaled(other, v, self)

    def lerp_local(self, other: "Vector3", t: float) -> "Vector3":
        return self.lerp(other, t, self)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"


Vector3.ZERO = Vector3(0, 0, 0).freeze()
Vector3.UNIT_X = Vector3(1, 0, 0).freeze()
Vector3.UNIT_Y = Vector3(0, 1, 0).freeze()
Vector3.UNIT_Z = Vector3(0, 0, 1).freeze()
