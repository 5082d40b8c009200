import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Lines:
    """Line and line-segment helpers working on raw coordinates."""

    @staticmethod
    def lines_intersect(x1: float, y1: float, x2: float, y2: float,
                        x3: float, y3: float, x4: float, y4: float) -> bool:
        """True if segment (x1,y1)-(x2,y2) touches or crosses segment (x3,y3)-(x4,y4)."""
        # Translate so (x1, y1) is the origin: A = p2, B = p3, C = p4
        x2 -= x1
        y2 -= y1
        x3 -= x1
        y3 -= y1
        x4 -= x1
        y4 -= y1

        a_cross_b = x2 * y3 - x3 * y2
        a_cross_c = x2 * y4 - x4 * y2

        # collinear
        if a_cross_b == 0 and a_cross_c == 0:
            if x2 != 0:
                return x4 * x3 <= 0 or (x3 * x2 >= 0 and (
                    (x3 <= x2 or x4 <= x2) if x2 > 0 else (x3 >= x2 or x4 >= x2)))
            if y2 != 0:
                return y4 * y3 <= 0 or (y3 * y2 >= 0 and (
                    (y3 <= y2 or y4 <= y2) if y2 > 0 else (y3 >= y2 or y4 >= y2)))
            return False

        b_cross_c = x3 * y4 - x4 * y3
        return a_cross_b * a_cross_c <= 0 and b_cross_c * (a_cross_b + b_cross_c - a_cross_c) <= 0

    @staticmethod
    def line_intersects_rect(x1: float, y1: float, x2: float, y2: float,
                             rx: float, ry: float, rw: float, rh: float) -> bool:
        rr = rx + rw
        rb = ry + rh
        return ((rx <= x1 <= rr and ry <= y1 <= rb)
                or (rx <= x2 <= rr and ry <= y2 <= rb)
                or Lines.lines_intersect(rx, ry, rr, rb, x1, y1, x2, y2)
                or Lines.lines_intersect(rr, ry, rx, rb, x1, y1, x2, y2))

    @staticmethod
    def point_line_dist_sq(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
        """Squared distance from (px,py) to the infinite line through the two points."""
        x2 -= x1
        y2 -= y1
        px -= x1
        py -= y1
        s = px * y2 - py * x2
        return s * s / (x2 * x2 + y2 * y2)

    @staticmethod
    def point_line_dist(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
        return math.sqrt(Lines.point_line_dist_sq(px, py, x1, y1, x2, y2))

    @staticmethod
    def point_seg_dist_sq(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
        """Squared distance from (px,py) to the segment (x1,y1)-(x2,y2).

        Projections falling outside the segment measure to the nearest end
        point, so a zero-length segment degrades to point distance.
        """
        x2 -= x1
        y2 -= y1
        px -= x1
        py -= y1
        if px * x2 + py * y2 <= 0.0:
            dist = px * px + py * py
        else:
            px = x2 - px
            py = y2 - py
            if px * x2 + py * y2 <= 0.0:
                dist = px * px + py * py
            else:
                dist = px * y2 - py * x2
                dist = dist * dist / (x2 * x2 + y2 * y2)
        return dist if dist >= 0 else 0.0

    @staticmethod
    def point_seg_dist(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
        return math.sqrt(Lines.point_seg_dist_sq(px, py, x1, y1, x2, y2))

    @staticmethod
    def relative_ccw(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> int:
        """Where (px,py) lies relative to the directed segment.

        1 or -1 depending on which side of the line the point falls, 0 when
        it lies on the segment itself. Collinear points beyond the start
        report -1, beyond the end 1.
        """
        x2 -= x1
        y2 -= y1
        px -= x1
        py -= y1
        t = px * y2 - py * x2
        if t == 0:
            t = px * x2 + py * y2
            if t > 0:
                px -= x2
                py -= y2
                t = px * x2 + py * y2
                if t < 0:
                    t = 0
        return -1 if t < 0 else (1 if t > 0 else 0)
