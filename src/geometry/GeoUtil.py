import math
from dataclasses import dataclass
from typing import Any, Optional

EPSILON = 0.00001


@dataclass(frozen=True)
class GeoUtil:
    @staticmethod
    def clamp(v: float, lower: float, upper: float) -> float:
        """Clamp v to the closed range [lower, upper]."""
        if v < lower:
            return lower
        if v > upper:
            return upper
        return v

    @staticmethod
    def lerp(v1: float, v2: float, t: float) -> float:
        """Linear interpolation between v1 (t=0) and v2 (t=1)."""
        return v1 + t * (v2 - v1)

    @staticmethod
    def epsilon_equals(v1: float, v2: float, epsilon: float = EPSILON) -> bool:
        return abs(v1 - v2) < epsilon

    @staticmethod
    def distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
        """Squared euclidean distance between (x1,y1) and (x2,y2)."""
        dx, dy = x2 - x1, y2 - y1
        return dx * dx + dy * dy

    @staticmethod
    def distance(x1: float, y1: float, x2: float, y2: float) -> float:
        return math.sqrt(GeoUtil.distance_sq(x1, y1, x2, y2))

    @staticmethod
    def to_string(value: float, decimal_places: int = 3) -> str:
        """Format a value with an explicit sign, e.g. +1.5 or -2.0"""
        sign = "-" if value < 0 else "+"
        return f"{sign}{abs(value):.{decimal_places}f}"

    @staticmethod
    def point_to_string(x: float, y: float) -> str:
        """Describe a point in the form +x+y, +x-y, -x-y, etc."""
        return GeoUtil.to_string(x) + GeoUtil.to_string(y)

    @staticmethod
    def safe_to_float(x: Any, default: Optional[float] = 0.0) -> Optional[float]:
        """Safely try and convert any type to a float, will return default value if cannot be converted"""
        if x is None:
            return default
        try:
            return float(x)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def equal_with_tolerance(x1: float, y1: float, x2: float, y2: float, abs_tol: float) -> bool:
        d = math.hypot(x1 - x2, y1 - y2)
        m = max(math.hypot(x1, y1), math.hypot(x2, y2), 1.0)
        return d <= max(abs_tol, 1e-6 * m)
