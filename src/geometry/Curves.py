import math
from dataclasses import dataclass
from typing import List, Optional

from geometry.Lines import Lines


@dataclass(frozen=True)
class QuadCurves:
    """Quadratic Bézier helpers on raw coordinates and flat buffers.

    A buffer holds a curve as [x1, y1, cx, cy, x2, y2] starting at offset.
    """

    @staticmethod
    def flatness_sq(x1: float, y1: float, cx: float, cy: float, x2: float, y2: float) -> float:
        return Lines.point_seg_dist_sq(cx, cy, x1, y1, x2, y2)

    @staticmethod
    def flatness(x1: float, y1: float, cx: float, cy: float, x2: float, y2: float) -> float:
        return math.sqrt(QuadCurves.flatness_sq(x1, y1, cx, cy, x2, y2))

    @staticmethod
    def buffer_flatness_sq(coords: List[float], offset: int = 0) -> float:
        return QuadCurves.flatness_sq(*coords[offset:offset + 6])

    @staticmethod
    def subdivide_buffer(src: List[float], src_off: int,
                         left: Optional[List[float]], left_off: int,
                         right: Optional[List[float]], right_off: int) -> None:
        """Split the curve at src[src_off:] at t = 0.5 into left and right.

        All inputs are read before anything is written, so the outputs may
        overlap the source (the flattener subdivides in place).
        """
        x1, y1, cx, cy, x2, y2 = src[src_off:src_off + 6]
        cx1 = (x1 + cx) / 2.0
        cy1 = (y1 + cy) / 2.0
        cx2 = (x2 + cx) / 2.0
        cy2 = (y2 + cy) / 2.0
        cx = (cx1 + cx2) / 2.0
        cy = (cy1 + cy2) / 2.0
        if left is not None:
            left[left_off:left_off + 6] = [x1, y1, cx1, cy1, cx, cy]
        if right is not None:
            right[right_off:right_off + 6] = [cx, cy, cx2, cy2, x2, y2]


@dataclass(frozen=True)
class CubicCurves:
    """Cubic Bézier helpers on raw coordinates and flat buffers.

    A buffer holds a curve as [x1, y1, cx1, cy1, cx2, cy2, x2, y2] starting at offset.
    """

    @staticmethod
    def flatness_sq(x1: float, y1: float, cx1: float, cy1: float,
                    cx2: float, cy2: float, x2: float, y2: float) -> float:
        """Sum of the squared distances of both control points to the chord."""
        return (Lines.point_seg_dist_sq(cx1, cy1, x1, y1, x2, y2)
                + Lines.point_seg_dist_sq(cx2, cy2, x1, y1, x2, y2))

    @staticmethod
    def flatness(x1: float, y1: float, cx1: float, cy1: float,
                 cx2: float, cy2: float, x2: float, y2: float) -> float:
        return math.sqrt(CubicCurves.flatness_sq(x1, y1, cx1, cy1, cx2, cy2, x2, y2))

    @staticmethod
    def buffer_flatness_sq(coords: List[float], offset: int = 0) -> float:
        return CubicCurves.flatness_sq(*coords[offset:offset + 8])

    @staticmethod
    def subdivide_buffer(src: List[float], src_off: int,
                         left: Optional[List[float]], left_off: int,
                         right: Optional[List[float]], right_off: int) -> None:
        """Split the curve at src[src_off:] at t = 0.5 (de Casteljau)."""
        x1, y1, cx1, cy1, cx2, cy2, x2, y2 = src[src_off:src_off + 8]
        cx = (cx1 + cx2) / 2.0
        cy = (cy1 + cy2) / 2.0
        cx1 = (x1 + cx1) / 2.0
        cy1 = (y1 + cy1) / 2.0
        cx2 = (x2 + cx2) / 2.0
        cy2 = (y2 + cy2) / 2.0
        ax = (cx1 + cx) / 2.0
        ay = (cy1 + cy) / 2.0
        bx = (cx2 + cx) / 2.0
        by = (cy2 + cy) / 2.0
        cx = (ax + bx) / 2.0
        cy = (ay + by) / 2.0
        if left is not None:
            left[left_off:left_off + 8] = [x1, y1, cx1, cy1, ax, ay, cx, cy]
        if right is not None:
            right[right_off:right_off + 8] = [cx, cy, bx, by, cx2, cy2, x2, y2]
