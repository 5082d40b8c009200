import math
from dataclasses import dataclass, field
from typing import Optional

from geometry.Freezable import Freezable
from geometry.GeoUtil import EPSILON
from geometry.Ray3 import Ray3
from geometry.Vector3 import Vector3


@dataclass
class Plane(Freezable):
    """Plane n . p + constant = 0, with n the (unit) normal."""

    normal: Vector3 = field(default_factory=Vector3)
    constant: float = 0

    def set(self, a: float, b: float, c: float, d: float) -> "Plane":
        self.normal.set(a, b, c)
        self.constant = d
        return self

    def set_normal(self, normal: Vector3, constant: float) -> "Plane":
        return self.set(normal.x, normal.y, normal.z, constant)

    def set_to(self, other: "Plane") -> "Plane":
        return self.set_normal(other.normal, other.constant)

    def from_points(self, p1: Vector3, p2: Vector3, p3: Vector3) -> "Plane":
        """Plane through three points, normal following the right hand rule."""
        v1 = p2.subtract(p1)
        v2 = p3.subtract(p1)
        normal = v1.cross(v2).normalize_local()
        return self.set_normal(normal, -normal.dot(p1))

    def from_point_normal(self, pt: Vector3, normal: Vector3) -> "Plane":
        return self.set_normal(normal, -normal.dot(pt))

    def distance(self, pt: Vector3) -> float:
        """Signed distance from pt; positive on the side the normal points to."""
        return self.normal.dot(pt) + self.constant

    def negate(self, result: Optional["Plane"] = None) -> "Plane":
        result = result if result is not None else Plane()
        return result.set(-self.normal.x, -self.normal.y, -self.normal.z, -self.constant)

    def negate_local(self) -> "Plane":
        return self.negate(self)

    def ray_distance(self, ray: Ray3) -> float:
        """Distance along the ray to the plane.

        0 when the origin is on the plane, NaN when the ray is parallel to it.
        """
        dividend = -self.distance(ray.origin)
        divisor = self.normal.dot(ray.direction)
        if abs(dividend) < EPSILON:
            return 0.0
        if abs(divisor) < EPSILON:
            return math.nan
        return dividend / divisor

    def intersection(self, ray: Ray3, result: Vector3) -> bool:
        """Write the ray/plane intersection into result; False if the ray misses."""
        distance = self.ray_distance(ray)
        if math.isnan(distance) or distance < 0:
            return False
        ray.origin.add_scaled(ray.direction, distance, result)
        return True


Plane.XY_PLANE = Plane(Vector3(0, 0, 1), 0).freeze()
Plane.XZ_PLANE = Plane(Vector3(0, 1, 0), 0).freeze()
Plane.YZ_PLANE = Plane(Vector3(1, 0, 0), 0).freeze()
