from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class SegmentType(Enum):
    MOVE_TO = 0
    LINE_TO = 1
    QUAD_TO = 2
    CUBIC_TO = 3
    CLOSE = 4

    @property
    def point_count(self) -> int:
        """Number of (x, y) pairs carried by a segment of this type."""
        return _POINT_COUNTS[self]


_POINT_COUNTS = {
    SegmentType.MOVE_TO: 1,
    SegmentType.LINE_TO: 1,
    SegmentType.QUAD_TO: 2,
    SegmentType.CUBIC_TO: 3,
    SegmentType.CLOSE: 0,
}


class WindingRule(Enum):
    EVEN_ODD = 0
    NON_ZERO = 1


class PathIteratorExhausted(IndexError):
    """Raised when a segment is requested from a finished path iterator."""


@dataclass(frozen=True)
class PathSegment:
    type: SegmentType
    coords: Tuple[float, ...] = ()

    @property
    def end_point(self) -> Optional[Tuple[float, float]]:
        if not self.coords:
            return None
        return (self.coords[-2], self.coords[-1])


class PathIterator:
    """Walks the boundary of a shape one segment at a time.

    Subclasses implement `_segment(index)` returning the segment type and its
    raw (untransformed) coordinates, plus `_count()`. The transform, if any, is
    applied to a copy of the coordinates as each segment is read. A stream is
    consumed once; ask the shape for a new iterator to walk it again.
    """

    def __init__(self, transform=None, winding_rule: WindingRule = WindingRule.NON_ZERO):
        self.transform = transform
        self._winding_rule = winding_rule
        self._index = 0

    def winding_rule(self) -> WindingRule:
        return self._winding_rule

    @property
    def is_done(self) -> bool:
        return self._index >= self._count()

    def next(self) -> None:
        """Advance to the next segment."""
        self._index += 1

    def current_segment(self) -> PathSegment:
        if self.is_done:
            raise PathIteratorExhausted("Iterator out of bounds")
        seg_type, coords = self._segment(self._index)
        coords = list(coords)
        if self.transform is not None and coords:
            self.transform.transform_coords(coords, seg_type.point_count)
        return PathSegment(seg_type, tuple(coords))

    def __iter__(self):
        return self

    def __next__(self) -> PathSegment:
        if self.is_done:
            raise StopIteration
        segment = self.current_segment()
        self.next()
        return segment

    def _count(self) -> int:
        raise NotImplementedError

    def _segment(self, index: int) -> Tuple[SegmentType, List[float]]:
        raise NotImplementedError
