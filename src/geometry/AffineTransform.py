import math
import re
import numpy as np
from typing import List, Optional, Tuple

from geometry.Point import Point
from geometry.Vector import Vector


class AffineTransform:
    """2D affine transform: 3x3 homogeneous matrix.

    Stored as numpy array with shape (3,3). Points are column vectors [x,y,1]^T.
    Path iterators use transform_coords() to map segment coordinates.
    """

    def __init__(self, m: Optional[np.ndarray] = None):
        if m is None:
            self.m = np.eye(3, dtype=float)
        else:
            self.m = np.array(m, dtype=float).reshape(3, 3)

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        return AffineTransform(self.m @ other.m)

    def __eq__(self, other) -> bool:
        return isinstance(other, AffineTransform) and np.allclose(self.m, other.m)

    def __repr__(self) -> str:
        a, c, e = self.m[0]
        b, d, f = self.m[1]
        return f"AffineTransform(matrix({a}, {b}, {c}, {d}, {e}, {f}))"

    @staticmethod
    def identity() -> "AffineTransform":
        return AffineTransform()

    @staticmethod
    def translation(tx: float, ty: float) -> "AffineTransform":
        m = np.eye(3)
        m[0, 2] = tx
        m[1, 2] = ty
        return AffineTransform(m)

    @staticmethod
    def scaling(sx: float, sy: Optional[float] = None) -> "AffineTransform":
        if sy is None:
            sy = sx
        m = np.eye(3)
        m[0, 0] = sx
        m[1, 1] = sy
        return AffineTransform(m)

    @staticmethod
    def rotation(angle: float) -> "AffineTransform":
        """Rotation about the origin by angle radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return AffineTransform(np.array(
            [[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0, 0, 1]], dtype=float))

    @staticmethod
    def rotation_deg(angle_deg: float, cx: float = 0.0, cy: float = 0.0) -> "AffineTransform":
        R = AffineTransform.rotation(math.radians(angle_deg)).m
        T1 = AffineTransform.translation(-cx, -cy).m
        T2 = AffineTransform.translation(cx, cy).m
        return AffineTransform(T2 @ R @ T1)

    @staticmethod
    def skew_deg(ax_deg: float, ay_deg: float) -> "AffineTransform":
        m = np.eye(3)
        m[0, 1] = math.tan(math.radians(ax_deg))
        m[1, 0] = math.tan(math.radians(ay_deg))
        return AffineTransform(m)

    @staticmethod
    def from_matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> "AffineTransform":
        m = np.array([[a, c, e], [b, d, f], [0, 0, 1]],
                     dtype=float)  # SVG's (a b c d e f)
        return AffineTransform(m)

    @staticmethod
    def from_svg_transform(transform_str: str) -> "AffineTransform":
        """Parse an SVG transform list (matrix, translate, scale, rotate, skewX, skewY)."""
        if not transform_str:
            return AffineTransform.identity()

        tok_re = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")
        transform = AffineTransform.identity()
        for name, args in tok_re.findall(transform_str):
            parts = [float(p) for p in re.split(r"[ ,]+", args.strip()) if p]
            if name == "matrix" and len(parts) == 6:
                T = AffineTransform.from_matrix(*parts)
            elif name == "translate" and len(parts) in (1, 2):
                tx = parts[0]
                ty = parts[1] if len(parts) == 2 else 0.0
                T = AffineTransform.translation(tx, ty)
            elif name == "scale" and len(parts) in (1, 2):
                sx = parts[0]
                sy = parts[1] if len(parts) == 2 else None
                T = AffineTransform.scaling(sx, sy)
            elif name == "rotate" and len(parts) in (1, 3):
                if len(parts) == 3:
                    T = AffineTransform.rotation_deg(parts[0], parts[1], parts[2])
                else:
                    T = AffineTransform.rotation_deg(parts[0])
            elif name == "skewX" and len(parts) == 1:
                T = AffineTransform.skew_deg(parts[0], 0.0)
            elif name == "skewY" and len(parts) == 1:
                T = AffineTransform.skew_deg(0.0, parts[0])
            else:
                raise ValueError(f"Unsupported transform: {name}({args})")
            transform = transform @ T
        return transform

    @property
    def scale_x(self) -> float:
        return math.hypot(self.m[0, 0], self.m[1, 0])

    @property
    def scale_y(self) -> float:
        return math.hypot(self.m[0, 1], self.m[1, 1])

    @property
    def rotation_angle(self) -> float:
        """Rotation (radians) of the transformed x axis."""
        return math.atan2(self.m[1, 0], self.m[0, 0])

    @property
    def tx(self) -> float:
        return float(self.m[0, 2])

    @property
    def ty(self) -> float:
        return float(self.m[1, 2])

    def determinant(self) -> float:
        return float(self.m[0, 0] * self.m[1, 1] - self.m[0, 1] * self.m[1, 0])

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        v = np.array([x, y, 1.0], dtype=float)
        res = self.m @ v
        return (float(res[0]), float(res[1]))

    def transform_point(self, p: Point, result: Optional[Point] = None) -> Point:
        return (result if result is not None else Point()).set(*self.apply(p.x, p.y))

    def inverse_transform_point(self, p: Point, result: Optional[Point] = None) -> Point:
        return self.invert().transform_point(p, result)

    def transform_vector(self, v: Vector, result: Optional[Vector] = None) -> Vector:
        """Transform a direction: the translation part is ignored."""
        x = self.m[0, 0] * v.x + self.m[0, 1] * v.y
        y = self.m[1, 0] * v.x + self.m[1, 1] * v.y
        return (result if result is not None else Vector()).set(float(x), float(y))

    def transform_coords(self, coords: List[float], count: int, offset: int = 0) -> None:
        """Transform `count` (x, y) pairs of a flat coordinate list in place."""
        if count <= 0:
            return
        end = offset + 2 * count
        pts = np.array(coords[offset:end], dtype=float).reshape(count, 2)
        res = pts @ self.m[:2, :2].T + self.m[:2, 2]
        coords[offset:end] = res.ravel().tolist()

    def invert(self) -> "AffineTransform":
        if abs(self.determinant()) < 1e-12:
            raise ValueError("Transform is not invertible")
        return AffineTransform(np.linalg.inv(self.m))

    def concatenate(self, other: "AffineTransform") -> "AffineTransform":
        """other is applied first, then self."""
        return self @ other

    def pre_concatenate(self, other: "AffineTransform") -> "AffineTransform":
        """self is applied first, then other."""
        return other @ self

    def copy(self) -> "AffineTransform":
        return AffineTransform(self.m.copy())


class IdentityTransform(AffineTransform):
    """Transform that leaves every coordinate unchanged."""

    def transform_coords(self, coords: List[float], count: int, offset: int = 0) -> None:
        pass

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        return (x, y)

    def invert(self) -> "AffineTransform":
        return IdentityTransform()
