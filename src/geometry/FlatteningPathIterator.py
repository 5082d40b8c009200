from typing import List, Optional, Tuple

from geometry.Curves import CubicCurves, QuadCurves
from geometry.PathIterator import PathIterator, PathIteratorExhausted, PathSegment, SegmentType

DEFAULT_LIMIT = 16


class FlatteningPathIterator(PathIterator):
    """Wraps another path iterator and replaces its curves with line segments.

    Each curve is split in half (de Casteljau) until a piece's squared
    flatness drops below flatness**2 or the piece is `limit` subdivisions
    deep; every piece is then emitted as a LINE_TO to its end point. Pending
    right-hand halves wait on an explicit stack, so the pieces come out in
    curve order.
    """

    def __init__(self, source: PathIterator, flatness: float, limit: int = DEFAULT_LIMIT):
        if flatness < 0:
            raise ValueError("Flatness is less than zero")
        if limit < 0:
            raise ValueError("Limit is less than zero")
        super().__init__(None, source.winding_rule())
        self.source = source
        self.flatness = flatness
        self.limit = limit
        self._flatness_sq = flatness * flatness
        self._stack: List[Tuple[List[float], int]] = []
        self._current: Optional[PathSegment] = None
        self._px = self._py = 0.0
        self._mx = self._my = 0.0

    def winding_rule(self):
        return self.source.winding_rule()

    @property
    def is_done(self) -> bool:
        self._evaluate()
        return self._current is None

    def next(self) -> None:
        self._evaluate()
        self._current = None

    def current_segment(self) -> PathSegment:
        self._evaluate()
        if self._current is None:
            raise PathIteratorExhausted("Iterator out of bounds")
        return self._current

    def _evaluate(self) -> None:
        if self._current is not None:
            return
        if self._stack:
            self._current = self._next_piece()
            return
        if self.source.is_done:
            return

        segment = self.source.current_segment()
        self.source.next()
        if segment.type == SegmentType.MOVE_TO:
            self._mx, self._my = self._px, self._py = segment.coords
            self._current = segment
        elif segment.type == SegmentType.LINE_TO:
            self._px, self._py = segment.coords
            self._current = segment
        elif segment.type == SegmentType.CLOSE:
            self._px, self._py = self._mx, self._my
            self._current = segment
        else:
            self._stack.append(([self._px, self._py] + list(segment.coords), 0))
            self._current = self._next_piece()

    def _next_piece(self) -> PathSegment:
        coords, depth = self._stack.pop()
        curves = QuadCurves if len(coords) == 6 else CubicCurves
        while depth < self.limit and curves.buffer_flatness_sq(coords) >= self._flatness_sq:
            left = [0.0] * len(coords)
            right = [0.0] * len(coords)
            curves.subdivide_buffer(coords, 0, left, 0, right, 0)
            depth += 1
            self._stack.append((right, depth))
            coords = left
        self._px, self._py = coords[-2], coords[-1]
        return PathSegment(SegmentType.LINE_TO, (self._px, self._py))
