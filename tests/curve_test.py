import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry.AffineTransform import AffineTransform
from geometry.CubicCurve import CubicCurve
from geometry.PathIterator import PathIteratorExhausted, SegmentType
from geometry.QuadCurve import QuadCurve


@pytest.fixture
def arch():
    # cubic arch over the x axis
    return CubicCurve(0, 0, 0, 10, 10, 10, 10, 0)


def test_cubic_flatness_sums_both_control_points(arch):
    assert arch.flatness_sq() == pytest.approx(200.0)
    assert arch.flatness() == pytest.approx(200.0 ** 0.5)


def test_quad_flatness():
    q = QuadCurve(0, 0, 5, 10, 10, 0)
    assert q.flatness_sq() == pytest.approx(100.0)
    assert q.flatness() == pytest.approx(10.0)


def test_coincident_points_are_flat():
    assert CubicCurve(3, 4, 3, 4, 3, 4, 3, 4).flatness_sq() == 0
    assert QuadCurve(3, 4, 3, 4, 3, 4).flatness_sq() == 0


def test_control_points_on_chord_are_flat():
    assert CubicCurve(0, 0, 2, 0, 8, 0, 10, 0).flatness_sq() == 0


def test_cubic_subdivide_shares_midpoint(arch):
    left, right = arch.subdivide()
    assert (left.x2, left.y2) == (right.x1, right.y1)
    assert (left.x2, left.y2) == pytest.approx((5.0, 7.5))
    assert (left.x1, left.y1) == (0, 0)
    assert (right.x2, right.y2) == (10, 0)
    assert left.coords() == pytest.approx([0, 0, 0, 5, 2.5, 7.5, 5, 7.5])
    assert right.coords() == pytest.approx([5, 7.5, 7.5, 7.5, 10, 5, 10, 0])


def test_cubic_subdivide_into_result_objects(arch):
    left, right = CubicCurve(), CubicCurve()
    out = arch.subdivide(left, right)
    assert out[0] is left and out[1] is right
    # source untouched
    assert arch.coords() == [0, 0, 0, 10, 10, 10, 10, 0]


def test_subdivided_halves_follow_the_curve(arch):
    left, right = arch.subdivide()
    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        assert left.point_at(t).as_tuple() == pytest.approx(arch.point_at(t / 2).as_tuple())
        assert right.point_at(t).as_tuple() == pytest.approx(arch.point_at(0.5 + t / 2).as_tuple())


def test_quad_subdivide():
    left, right = QuadCurve(0, 0, 5, 10, 10, 0).subdivide()
    assert left.coords() == pytest.approx([0, 0, 2.5, 5, 5, 5])
    assert right.coords() == pytest.approx([5, 5, 7.5, 5, 10, 0])


def test_point_at(arch):
    assert arch.point_at(0).as_tuple() == (0, 0)
    assert arch.point_at(1).as_tuple() == (10, 0)
    assert arch.point_at(0.5).as_tuple() == pytest.approx((5, 7.5))
    assert QuadCurve(0, 0, 5, 10, 10, 0).point_at(0.5).as_tuple() == pytest.approx((5, 5))


def test_bounds_cover_control_polygon(arch):
    b = arch.bounds()
    assert (b.x, b.y, b.width, b.height) == (0, 0, 10, 10)
    b = QuadCurve(4, 1, -2, 7, 3, 3).bounds()
    assert (b.x, b.y, b.width, b.height) == (-2, 1, 6, 6)


def test_cubic_path_iterator(arch):
    it = arch.path_iterator()
    seg = it.current_segment()
    assert seg.type == SegmentType.MOVE_TO
    assert seg.coords == (0, 0)
    it.next()
    seg = it.current_segment()
    assert seg.type == SegmentType.CUBIC_TO
    assert seg.coords == (0, 10, 10, 10, 10, 0)
    it.next()
    assert it.is_done
    with pytest.raises(PathIteratorExhausted):
        it.current_segment()


def test_exhausted_iterator_is_an_index_error():
    it = QuadCurve(0, 0, 1, 1, 2, 0).path_iterator()
    segments = list(it)
    assert [s.type for s in segments] == [SegmentType.MOVE_TO, SegmentType.QUAD_TO]
    with pytest.raises(IndexError):
        it.current_segment()


def test_path_iterator_applies_transform(arch):
    segments = list(arch.path_iterator(AffineTransform.translation(1, 2)))
    assert segments[0].coords == pytest.approx((1, 2))
    assert segments[1].coords == pytest.approx((1, 12, 11, 12, 11, 2))
    # the curve itself is not moved
    assert arch.x1 == 0


def test_path_iterator_with_flatness_flattens(arch):
    types = {s.type for s in arch.path_iterator(None, 0.5)}
    assert types == {SegmentType.MOVE_TO, SegmentType.LINE_TO}


def test_curve_contains_uses_chord_closure(arch):
    assert arch.is_empty
    assert arch.contains(5, 2)
    assert not arch.contains(5, 9)
    assert not arch.contains(-1, 2)


def test_curve_rectangle_queries(arch):
    assert arch.contains_rect(4, 1, 2, 2)
    assert arch.intersects(4, 6, 2, 4)
    assert not arch.contains_rect(4, 6, 2, 4)
    assert not arch.intersects(20, 20, 1, 1)
