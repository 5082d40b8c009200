"""
Crossing-number engine behind contains()/intersects() for curves and paths.

A ray is cast from the query point towards +y. Every segment the ray passes
through adds +1 or -1 depending on the segment's x direction, so the total
is a signed winding count: any nonzero value is inside under the non-zero
rule, an odd value is inside under the even-odd rule.

Rectangle queries sweep the rectangle's vertical stripe instead of a single
ray; as soon as any segment is found to pass through the rectangle the
sentinel CROSSING is returned.

Inputs are not checked for NaN; NaN coordinates give undefined counts.
"""

import math
from typing import List, Optional

from geometry.PathIterator import PathIterator, SegmentType

# Return value indicating that a crossing was found
CROSSING = 255

# Return value indicating the crossing result is unknown
UNKNOWN = 254

# Allowable tolerance for bounds comparison
DELTA = 1e-5

# Roots closer than this are treated as a double root
ROOT_DELTA = 1e-10


def is_zero(value: float) -> bool:
    return -DELTA < value < DELTA


def _fix_roots(res: List[float]) -> List[float]:
    """Drop roots that are (nearly) duplicates of a later root."""
    out: List[float] = []
    for i, root in enumerate(res):
        if not any(is_zero(root - other) for other in res[i + 1:]):
            out.append(root)
    return out


def solve_quad(eqn: List[float]) -> Optional[List[float]]:
    """Real roots of eqn[2]*t^2 + eqn[1]*t + eqn[0] = 0.

    A degenerate equation (a == b == 0) has no finite set of roots and
    yields None, which is distinct from [] (no real roots).
    """
    c, b, a = eqn[0], eqn[1], eqn[2]
    res: List[float] = []
    if a == 0:
        if b == 0:
            return None
        res.append(-c / b)
    else:
        d = b * b - 4.0 * a * c
        if d < 0:
            return res
        d = math.sqrt(d)
        res.append((-b + d) / (a * 2.0))
        if d != 0:
            res.append((-b - d) / (a * 2.0))
    return _fix_roots(res)


def solve_cubic(eqn: List[float]) -> Optional[List[float]]:
    """Real roots of eqn[3]*t^3 + eqn[2]*t^2 + eqn[1]*t + eqn[0] = 0 (closed form).

    Falls back to solve_quad when the cubic term is zero, including its None.
    """
    d = eqn[3]
    if d == 0:
        return solve_quad(eqn)
    a = eqn[2] / d
    b = eqn[1] / d
    c = eqn[0] / d
    res: List[float] = []

    q = (a * a - 3.0 * b) / 9.0
    r = (2.0 * a * a * a - 9.0 * a * b + 27.0 * c) / 54.0
    q3 = q * q * q
    r2 = r * r
    n = -a / 3.0

    if r2 < q3:
        t = math.acos(r / math.sqrt(q3)) / 3.0
        p = 2.0 * math.pi / 3.0
        m = -2.0 * math.sqrt(q)
        res.append(m * math.cos(t) + n)
        res.append(m * math.cos(t + p) + n)
        res.append(m * math.cos(t - p) + n)
    else:
        big_a = math.pow(abs(r) + math.sqrt(r2 - q3), 1.0 / 3.0)
        if r > 0:
            big_a = -big_a
        if -ROOT_DELTA < big_a < ROOT_DELTA:
            res.append(n)
        else:
            big_b = q / big_a
            res.append(big_a + big_b + n)
            delta = r2 - q3
            if -ROOT_DELTA < delta < ROOT_DELTA:
                res.append(-(big_a + big_b) / 2.0 + n)
    return _fix_roots(res)


class _QuadHelper:
    """Quad curve in power-basis form, relative to its start point."""

    def __init__(self, x1, y1, cx, cy, x2, y2):
        self.ax = x2 - x1
        self.ay = y2 - y1
        self.bx = cx - x1
        self.by = cy - y1

        self.Bx = self.bx + self.bx
        self.Ax = self.ax - self.Bx
        self.By = self.by + self.by
        self.Ay = self.ay - self.By

    def cross(self, res: List[float], py1: float, py2: float) -> int:
        cross = 0
        for t in res:
            # outside the curve
            if t < -DELTA or t > 1 + DELTA:
                continue
            # curve start
            if t < DELTA:
                if py1 < 0 and (self.bx if self.bx != 0 else self.ax - self.bx) < 0:
                    cross -= 1
                continue
            # curve end
            if t > 1 - DELTA:
                if py1 < self.ay and (self.ax - self.bx if self.ax != self.bx else self.bx) > 0:
                    cross += 1
                continue
            # inside the curve
            ry = t * (t * self.Ay + self.By)
            if ry > py2:
                rxt = t * self.Ax + self.bx
                if -DELTA < rxt < DELTA:
                    continue
                cross += 1 if rxt > 0 else -1
        return cross

    def solve_point(self, px: float) -> Optional[List[float]]:
        return solve_quad([-px, self.Bx, self.Ax])

    def solve_extreme(self) -> List[float]:
        res = []
        if self.Ax != 0:
            res.append(-self.Bx / (self.Ax + self.Ax))
        if self.Ay != 0:
            res.append(-self.By / (self.Ay + self.Ay))
        return res

    def add_bound(self, bound: List[list], res: List[float], min_x: float, max_x: float,
                  change_id: bool, id: int) -> None:
        for t in res:
            if -DELTA < t < 1 + DELTA:
                rx = t * (t * self.Ax + self.Bx)
                if min_x <= rx <= max_x:
                    bound.append([t, rx, t * (t * self.Ay + self.By), id])
                    if change_id:
                        id += 1


class _CubicHelper:
    """Cubic curve in power-basis form, relative to its start point."""

    def __init__(self, x1, y1, cx1, cy1, cx2, cy2, x2, y2):
        self.ax = x2 - x1
        self.ay = y2 - y1
        self.bx = cx1 - x1
        self.by = cy1 - y1
        self.cx = cx2 - x1
        self.cy = cy2 - y1

        self.Cx = self.bx + self.bx + self.bx
        self.Bx = self.cx + self.cx + self.cx - self.Cx - self.Cx
        self.Ax = self.ax - self.Bx - self.Cx

        self.Cy = self.by + self.by + self.by
        self.By = self.cy + self.cy + self.cy - self.Cy - self.Cy
        self.Ay = self.ay - self.By - self.Cy

        self.Ax3 = self.Ax + self.Ax + self.Ax
        self.Bx2 = self.Bx + self.Bx

    def cross(self, res: List[float], py1: float, py2: float) -> int:
        ax, bx, cx = self.ax, self.bx, self.cx
        cross = 0
        for t in res:
            # outside the curve
            if t < -DELTA or t > 1 + DELTA:
                continue
            # curve start
            if t < DELTA:
                start_dx = bx if bx != 0 else (cx - bx if cx != bx else ax - cx)
                if py1 < 0 and start_dx < 0:
                    cross -= 1
                continue
            # curve end
            if t > 1 - DELTA:
                end_dx = ax - cx if ax != cx else (cx - bx if cx != bx else bx)
                if py1 < self.ay and end_dx > 0:
                    cross += 1
                continue
            # inside the curve
            ry = t * (t * (t * self.Ay + self.By) + self.Cy)
            if ry > py2:
                rxt = t * (t * self.Ax3 + self.Bx2) + self.Cx
                if -DELTA < rxt < DELTA:
                    rxt = t * (self.Ax3 + self.Ax3) + self.Bx2
                    if rxt < -DELTA or rxt > DELTA:
                        # inflection point
                        continue
                    rxt = ax
                cross += 1 if rxt > 0 else -1
        return cross

    def solve_point(self, px: float) -> Optional[List[float]]:
        return solve_cubic([-px, self.Cx, self.Bx, self.Ax])

    def solve_extreme_x(self) -> List[float]:
        return solve_quad([self.Cx, self.Bx2, self.Ax3]) or []

    def solve_extreme_y(self) -> List[float]:
        return solve_quad([self.Cy, self.By + self.By, self.Ay + self.Ay + self.Ay]) or []

    def add_bound(self, bound: List[list], res: List[float], min_x: float, max_x: float,
                  change_id: bool, id: int) -> None:
        for t in res:
            if -DELTA < t < 1 + DELTA:
                rx = t * (t * (t * self.Ax + self.Bx) + self.Cx)
                if min_x <= rx <= max_x:
                    bound.append([t, rx, t * (t * (t * self.Ay + self.By) + self.Cy), id])
                    if change_id:
                        id += 1


def cross_line(x1, y1, x2, y2, x, y) -> int:
    """How many times the ray from (x, y) crosses the line segment."""
    # left / right / up / vertical
    if (x < x1 and x < x2) or (x > x1 and x > x2) or (y > y1 and y > y2) or x1 == x2:
        return 0

    # the segment is not entirely below the point: check which side it lies on
    if not (y < y1 and y < y2):
        if (y2 - y1) * (x - x1) / (x2 - x1) <= y - y1:
            return 0

    # start
    if x == x1:
        return 0 if x1 < x2 else -1
    # end
    if x == x2:
        return 1 if x1 < x2 else 0
    return 1 if x1 < x2 else -1


def cross_quad(x1, y1, cx, cy, x2, y2, x, y) -> int:
    """How many times the ray from (x, y) crosses the quad curve."""
    # left / right / up / empty
    if ((x < x1 and x < cx and x < x2) or (x > x1 and x > cx and x > x2)
            or (y > y1 and y > cy and y > y2) or (x1 == cx == x2)):
        return 0

    # down
    if y < y1 and y < cy and y < y2 and x != x1 and x != x2:
        if x1 < x2:
            return 1 if x1 < x < x2 else 0
        return -1 if x2 < x < x1 else 0

    # inside
    c = _QuadHelper(x1, y1, cx, cy, x2, y2)
    px = x - x1
    py = y - y1
    return c.cross(c.solve_point(px) or [], py, py)


def cross_cubic(x1, y1, cx1, cy1, cx2, cy2, x2, y2, x, y) -> int:
    """How many times the ray from (x, y) crosses the cubic curve."""
    # left / right / up / empty
    if ((x < x1 and x < cx1 and x < cx2 and x < x2)
            or (x > x1 and x > cx1 and x > cx2 and x > x2)
            or (y > y1 and y > cy1 and y > cy2 and y > y2)
            or (x1 == cx1 == cx2 == x2)):
        return 0

    # down
    if y < y1 and y < cy1 and y < cy2 and y < y2 and x != x1 and x != x2:
        if x1 < x2:
            return 1 if x1 < x < x2 else 0
        return -1 if x2 < x < x1 else 0

    # inside
    c = _CubicHelper(x1, y1, cx1, cy1, cx2, cy2, x2, y2)
    px = x - x1
    py = y - y1
    return c.cross(c.solve_point(px) or [], py, py)


def cross_path(p: PathIterator, x: float, y: float) -> int:
    """Signed crossing count of the ray from (x, y) against every segment of p.

    Unclosed subpaths are implicitly closed. A point that is exactly a path
    vertex reports 0.
    """
    cross = 0
    mx = my = cx = cy = 0.0

    while not p.is_done:
        segment = p.current_segment()
        coords = segment.coords
        seg_type = segment.type
        if seg_type == SegmentType.MOVE_TO:
            if cx != mx or cy != my:
                cross += cross_line(cx, cy, mx, my, x, y)
            mx = cx = coords[0]
            my = cy = coords[1]
        elif seg_type == SegmentType.LINE_TO:
            cross += cross_line(cx, cy, coords[0], coords[1], x, y)
            cx, cy = coords[0], coords[1]
        elif seg_type == SegmentType.QUAD_TO:
            cross += cross_quad(cx, cy, coords[0], coords[1], coords[2], coords[3], x, y)
            cx, cy = coords[2], coords[3]
        elif seg_type == SegmentType.CUBIC_TO:
            cross += cross_cubic(cx, cy, coords[0], coords[1], coords[2], coords[3],
                                 coords[4], coords[5], x, y)
            cx, cy = coords[4], coords[5]
        elif seg_type == SegmentType.CLOSE:
            if cy != my or cx != mx:
                cross += cross_line(cx, cy, mx, my, x, y)
                cx, cy = mx, my

        # the point is a vertex of the path
        if x == cx and y == cy:
            cross = 0
            cy = my
            break
        p.next()

    if cy != my:
        cross += cross_line(cx, cy, mx, my, x, y)
    return cross


def cross_shape(s, x: float, y: float) -> int:
    """Crossing count of the ray from (x, y) against the outline of shape s."""
    if not s.bounds().contains(x, y):
        return 0
    return cross_path(s.path_iterator(None), x, y)


def intersect_line(x1, y1, x2, y2, rx1, ry1, rx2, ry2) -> int:
    """Crossings of the rectangle stripe with a line, or CROSSING if they intersect."""
    # left / right / up
    if (rx2 < x1 and rx2 < x2) or (rx1 > x1 and rx1 > x2) or (ry1 > y1 and ry1 > y2):
        return 0

    # not entirely below the rectangle
    if not (ry2 < y1 and ry2 < y2):
        if x1 == x2:
            return CROSSING

        # clip the segment to the stripe
        if x1 < x2:
            bx1 = rx1 if x1 < rx1 else x1
            bx2 = x2 if x2 < rx2 else rx2
        else:
            bx1 = rx1 if x2 < rx1 else x2
            bx2 = x1 if x1 < rx2 else rx2
        k = (y2 - y1) / (x2 - x1)
        by1 = k * (bx1 - x1) + y1
        by2 = k * (bx2 - x1) + y1

        # bound up
        if by1 < ry1 and by2 < ry1:
            return 0
        # bound down
        if not (by1 > ry2 and by2 > ry2):
            return CROSSING

    # empty
    if x1 == x2:
        return 0
    # curve start
    if rx1 == x1:
        return 0 if x1 < x2 else -1
    # curve end
    if rx1 == x2:
        return 1 if x1 < x2 else 0

    if x1 < x2:
        return 1 if x1 < rx1 < x2 else 0
    return -1 if x2 < rx1 < x1 else 0


def intersect_quad(x1, y1, cx, cy, x2, y2, rx1, ry1, rx2, ry2) -> int:
    """Crossings of the rectangle stripe with a quad curve, or CROSSING."""
    # left / right / up
    if ((rx2 < x1 and rx2 < cx and rx2 < x2) or (rx1 > x1 and rx1 > cx and rx1 > x2)
            or (ry1 > y1 and ry1 > cy and ry1 > y2)):
        return 0

    # down
    if ry2 < y1 and ry2 < cy and ry2 < y2 and rx1 != x1 and rx1 != x2:
        if x1 < x2:
            return 1 if x1 < rx1 < x2 else 0
        return -1 if x2 < rx1 < x1 else 0

    # inside
    c = _QuadHelper(x1, y1, cx, cy, x2, y2)
    px1 = rx1 - x1
    py1 = ry1 - y1
    px2 = rx2 - x1
    py2 = ry2 - y1

    res1 = c.solve_point(px1)
    res2 = c.solve_point(px2)

    # inside left / right; None means the curve runs straight up and down
    if res1 == [] and res2 == []:
        return 0
    res1 = res1 or []
    res2 = res2 or []

    min_x = px1 - DELTA
    max_x = px2 + DELTA
    bound: List[list] = []
    c.add_bound(bound, res1, min_x, max_x, False, 0)
    c.add_bound(bound, res2, min_x, max_x, False, 1)
    c.add_bound(bound, c.solve_extreme(), min_x, max_x, True, 2)
    if rx1 < x1 < rx2:
        bound.append([0.0, 0.0, 0.0, 4])
    if rx1 < x2 < rx2:
        bound.append([1.0, c.ax, c.ay, 5])

    cross = _cross_bound(bound, py1, py2)
    if cross != UNKNOWN:
        return cross
    return c.cross(res1, py1, py2)


def intersect_cubic(x1, y1, cx1, cy1, cx2, cy2, x2, y2, rx1, ry1, rx2, ry2) -> int:
    """Crossings of the rectangle stripe with a cubic curve, or CROSSING."""
    # left / right / up
    if ((rx2 < x1 and rx2 < cx1 and rx2 < cx2 and rx2 < x2)
            or (rx1 > x1 and rx1 > cx1 and rx1 > cx2 and rx1 > x2)
            or (ry1 > y1 and ry1 > cy1 and ry1 > cy2 and ry1 > y2)):
        return 0

    # down
    if ry2 < y1 and ry2 < cy1 and ry2 < cy2 and ry2 < y2 and rx1 != x1 and rx1 != x2:
        if x1 < x2:
            return 1 if x1 < rx1 < x2 else 0
        return -1 if x2 < rx1 < x1 else 0

    # inside
    c = _CubicHelper(x1, y1, cx1, cy1, cx2, cy2, x2, y2)
    px1 = rx1 - x1
    py1 = ry1 - y1
    px2 = rx2 - x1
    py2 = ry2 - y1

    res1 = c.solve_point(px1)
    res2 = c.solve_point(px2)

    # left / right; None means the curve runs straight up and down
    if res1 == [] and res2 == []:
        return 0
    res1 = res1 or []
    res2 = res2 or []

    min_x = px1 - DELTA
    max_x = px2 + DELTA
    bound: List[list] = []
    c.add_bound(bound, res1, min_x, max_x, False, 0)
    c.add_bound(bound, res2, min_x, max_x, False, 1)
    c.add_bound(bound, c.solve_extreme_x(), min_x, max_x, True, 2)
    c.add_bound(bound, c.solve_extreme_y(), min_x, max_x, True, 4)
    if rx1 < x1 < rx2:
        bound.append([0.0, 0.0, 0.0, 6])
    if rx1 < x2 < rx2:
        bound.append([1.0, c.ax, c.ay, 7])

    cross = _cross_bound(bound, py1, py2)
    if cross != UNKNOWN:
        return cross
    return c.cross(res1, py1, py2)


def intersect_path(p: PathIterator, x: float, y: float, w: float, h: float) -> int:
    """Crossing count of the rectangle against every segment of p, or CROSSING."""
    cross = 0
    mx = my = cx = cy = 0.0

    rx1, ry1 = x, y
    rx2, ry2 = x + w, y + h

    while not p.is_done:
        count = 0
        segment = p.current_segment()
        coords = segment.coords
        seg_type = segment.type
        if seg_type == SegmentType.MOVE_TO:
            if cx != mx or cy != my:
                count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
            mx = cx = coords[0]
            my = cy = coords[1]
        elif seg_type == SegmentType.LINE_TO:
            count = intersect_line(cx, cy, coords[0], coords[1], rx1, ry1, rx2, ry2)
            cx, cy = coords[0], coords[1]
        elif seg_type == SegmentType.QUAD_TO:
            count = intersect_quad(cx, cy, coords[0], coords[1], coords[2], coords[3],
                                   rx1, ry1, rx2, ry2)
            cx, cy = coords[2], coords[3]
        elif seg_type == SegmentType.CUBIC_TO:
            count = intersect_cubic(cx, cy, coords[0], coords[1], coords[2], coords[3],
                                    coords[4], coords[5], rx1, ry1, rx2, ry2)
            cx, cy = coords[4], coords[5]
        elif seg_type == SegmentType.CLOSE:
            if cy != my or cx != mx:
                count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
            cx, cy = mx, my

        if count == CROSSING:
            return CROSSING
        cross += count
        p.next()

    if cy != my:
        count = intersect_line(cx, cy, mx, my, rx1, ry1, rx2, ry2)
        if count == CROSSING:
            return CROSSING
        cross += count
    return cross


def intersect_shape(s, x: float, y: float, w: float, h: float) -> int:
    """Crossing count of the rectangle against the outline of s, or CROSSING."""
    if not s.bounds().intersects(x, y, w, h):
        return 0
    return intersect_path(s.path_iterator(None), x, y, w, h)


def is_inside_non_zero(cross: int) -> bool:
    return cross != 0


def is_inside_even_odd(cross: int) -> bool:
    return (cross & 1) != 0


def _cross_bound(bound: List[list], py1: float, py2: float) -> int:
    """Decide from the sampled curve points whether the curve enters the rectangle.

    Each bound entry is [t, x, y, id]. Returns CROSSING, 0, or UNKNOWN when the
    answer has to come from the root crossings instead.
    """
    # left / right
    if not bound:
        return 0

    up = 0
    down = 0
    for entry in bound:
        if entry[2] < py1:
            up += 1
            continue
        if entry[2] > py2:
            down += 1
            continue
        return CROSSING

    # up
    if down == 0:
        return 0

    if up != 0:
        bound.sort(key=lambda entry: entry[0])
        sign = bound[0][2] > py2
        for prev, entry in zip(bound, bound[1:]):
            sign2 = entry[2] > py2
            if sign != sign2 and entry[3] != prev[3]:
                return CROSSING
            sign = sign2
    return UNKNOWN
