import math
from dataclasses import dataclass, field
from typing import List, Optional

from geometry import Crossing
from geometry.FlatteningPathIterator import DEFAULT_LIMIT, FlatteningPathIterator
from geometry.Freezable import Freezable
from geometry.PathIterator import PathIterator, SegmentType, WindingRule
from geometry.Point import Point
from geometry.Rectangle import Rectangle
from geometry.Shape import Shape


class IllegalPathStateError(RuntimeError):
    """Raised when a path is drawn to before its first move_to."""


@dataclass
class Path(Shape, Freezable):
    """A general path built from move/line/quad/cubic/close segments.

    Segment types and their coordinates are kept in two parallel flat lists.
    Containment queries use the path's winding rule.
    """

    rule: WindingRule = WindingRule.NON_ZERO
    types: List[SegmentType] = field(default_factory=list)
    points: List[float] = field(default_factory=list)

    def __post_init__(self):
        self.set_winding_rule(self.rule)

    @classmethod
    def from_shape(cls, shape: Shape, transform=None) -> "Path":
        """Copy the outline of another shape into a new path."""
        it = shape.path_iterator(transform)
        path = cls(it.winding_rule())
        path.append(it, False)
        return path

    def set_winding_rule(self, rule: WindingRule) -> None:
        if not isinstance(rule, WindingRule):
            raise ValueError("Invalid winding rule value")
        self.rule = rule

    def winding_rule(self) -> WindingRule:
        return self.rule

    def _check_buf(self, check_move: bool) -> None:
        self._check_writable()
        if check_move and not self.types:
            raise IllegalPathStateError("First segment must be a SEG_MOVETO")

    def move_to(self, x: float, y: float) -> None:
        # consecutive moves collapse into the last one
        if self.types and self.types[-1] == SegmentType.MOVE_TO:
            self._check_writable()
            self.points[-2:] = [x, y]
        else:
            self._check_buf(False)
            self.types.append(SegmentType.MOVE_TO)
            self.points.extend((x, y))

    def line_to(self, x: float, y: float) -> None:
        self._check_buf(True)
        self.types.append(SegmentType.LINE_TO)
        self.points.extend((x, y))

    def quad_to(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._check_buf(True)
        self.types.append(SegmentType.QUAD_TO)
        self.points.extend((x1, y1, x2, y2))

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self._check_buf(True)
        self.types.append(SegmentType.CUBIC_TO)
        self.points.extend((x1, y1, x2, y2, x3, y3))

    def close_path(self) -> None:
        if not self.types or self.types[-1] != SegmentType.CLOSE:
            self._check_buf(True)
            self.types.append(SegmentType.CLOSE)

    def append(self, source, connect: bool) -> None:
        """Append a shape's outline or the rest of a path iterator.

        With connect set, a leading MOVE_TO becomes a LINE_TO from the
        current end point (or is dropped if it would not move).
        """
        if isinstance(source, Shape):
            source = source.path_iterator(None)
        while not source.is_done:
            segment = source.current_segment()
            coords = segment.coords
            if segment.type == SegmentType.MOVE_TO:
                if not connect or not self.types:
                    self.move_to(*coords)
                elif (self.types[-1] != SegmentType.CLOSE
                      and self.points[-2] == coords[0] and self.points[-1] == coords[1]):
                    pass
                else:
                    self.line_to(*coords)
            elif segment.type == SegmentType.LINE_TO:
                self.line_to(*coords)
            elif segment.type == SegmentType.QUAD_TO:
                self.quad_to(*coords)
            elif segment.type == SegmentType.CUBIC_TO:
                self.curve_to(*coords)
            elif segment.type == SegmentType.CLOSE:
                self.close_path()
            source.next()
            connect = False

    def current_point(self) -> Optional[Point]:
        """End point of the last segment; after a close this is the subpath start."""
        if not self.types:
            return None
        j = len(self.points) - 2
        if self.types[-1] == SegmentType.CLOSE:
            for seg_type in reversed(self.types[1:-1]):
                if seg_type == SegmentType.MOVE_TO:
                    break
                j -= 2 * seg_type.point_count
        return Point(self.points[j], self.points[j + 1])

    def reset(self) -> None:
        self._check_writable()
        self.types.clear()
        self.points.clear()

    def transform(self, t) -> None:
        self._check_writable()
        t.transform_coords(self.points, len(self.points) // 2)

    def create_transformed_shape(self, t=None) -> "Path":
        p = self.clone()
        if t is not None:
            p.transform(t)
        return p

    def bounds(self, result: Optional[Rectangle] = None) -> Rectangle:
        result = result if result is not None else Rectangle()
        if not self.points:
            return result.set_bounds(0, 0, 0, 0)
        xs = self.points[0::2]
        ys = self.points[1::2]
        rx1, ry1 = min(xs), min(ys)
        return result.set_bounds(rx1, ry1, max(xs) - rx1, max(ys) - ry1)

    @property
    def is_empty(self) -> bool:
        return self.bounds().is_empty

    def _is_inside(self, cross: int) -> bool:
        if self.rule == WindingRule.NON_ZERO:
            return Crossing.is_inside_non_zero(cross)
        return Crossing.is_inside_even_odd(cross)

    def path_iterator(self, transform=None, flatness=None) -> PathIterator:
        it = PathPathIterator(self, transform)
        if flatness is None:
            return it
        return FlatteningPathIterator(it, flatness)

    def flattening_path_iterator(self, transform, tolerance_sq: float,
                                 limit: int = DEFAULT_LIMIT) -> PathIterator:
        """Curves replaced by line pieces whose squared flatness is below tolerance_sq."""
        return FlatteningPathIterator(PathPathIterator(self, transform), math.sqrt(tolerance_sq), limit)

    def __len__(self) -> int:
        return len(self.types)


class PathPathIterator(PathIterator):
    """Iterates a snapshot of a path taken when the iterator is created."""

    def __init__(self, path: Path, transform=None):
        super().__init__(transform, path.rule)
        self.types = list(path.types)
        self.points = list(path.points)
        self.offsets = []
        offset = 0
        for seg_type in self.types:
            self.offsets.append(offset)
            offset += 2 * seg_type.point_count

    def _count(self) -> int:
        return len(self.types)

    def _segment(self, index: int):
        seg_type = self.types[index]
        start = self.offsets[index]
        return seg_type, self.points[start:start + 2 * seg_type.point_count]
