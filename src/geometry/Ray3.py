from dataclasses import dataclass, field
from typing import Optional

from geometry.Freezable import Freezable
from geometry.Vector3 import Vector3


@dataclass
class Ray3(Freezable):
    """A ray in 3D: an origin and a (not necessarily unit) direction."""

    origin: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)

    def set(self, origin: Vector3, direction: Vector3) -> "Ray3":
        self.origin.set_to(origin)
        self.direction.set_to(direction)
        return self

    def point_at(self, distance: float, result: Optional[Vector3] = None) -> Vector3:
        return self.origin.add_scaled(self.direction, distance, result)

    def __str__(self) -> str:
        return f"[origin={self.origin}, direction={self.direction}]"
