import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry.CubicCurve import CubicCurve
from geometry.FlatteningPathIterator import FlatteningPathIterator
from geometry.Path import Path
from geometry.PathIterator import PathIteratorExhausted, SegmentType, WindingRule
from geometry.QuadCurve import QuadCurve


def line_points(it):
    return [s.coords for s in it if s.type == SegmentType.LINE_TO]


@pytest.fixture
def arch():
    return CubicCurve(0, 0, 0, 10, 10, 10, 10, 0)


def test_flattened_curve_starts_with_move_and_ends_on_curve_end(arch):
    segments = list(arch.flattening_path_iterator(None, 0.01))
    assert segments[0].type == SegmentType.MOVE_TO
    assert segments[0].coords == (0, 0)
    assert all(s.type == SegmentType.LINE_TO for s in segments[1:])
    assert segments[-1].coords == pytest.approx((10, 0))


def test_flattened_points_lie_near_the_curve(arch):
    for x, y in line_points(arch.flattening_path_iterator(None, 0.01)):
        # every emitted vertex is an exact subdivision point, so it is on the curve
        assert 0 <= x <= 10
        assert 0 <= y <= 7.5 + 1e-9


def test_smaller_tolerance_never_gives_fewer_segments(arch):
    counts = [len(line_points(arch.flattening_path_iterator(None, tol)))
              for tol in (100.0, 10.0, 1.0, 0.1, 0.01, 0.001)]
    assert counts == sorted(counts)
    assert counts[-1] > counts[0]


def test_flat_curve_is_a_single_line():
    c = CubicCurve(0, 0, 3, 0, 6, 0, 9, 0)
    assert line_points(c.flattening_path_iterator(None, 0.01)) == [(9, 0)]


def test_coincident_points_terminate():
    c = CubicCurve(2, 2, 2, 2, 2, 2, 2, 2)
    assert line_points(c.flattening_path_iterator(None, 0.01)) == [(2, 2)]
    # a zero tolerance can never be met; the depth limit still ends it
    assert len(line_points(c.flattening_path_iterator(None, 0.0, limit=2))) == 4


def test_depth_limit_caps_subdivision(arch):
    # zero tolerance never succeeds, so the limit alone decides
    assert len(line_points(arch.flattening_path_iterator(None, 0.0, limit=0))) == 1
    assert len(line_points(arch.flattening_path_iterator(None, 0.0, limit=3))) == 8
    assert len(line_points(QuadCurve(0, 0, 5, 10, 10, 0).flattening_path_iterator(None, 0.0, limit=4))) == 16


def test_halves_flatten_to_the_same_points(arch):
    left, right = arch.subdivide()
    tol = 0.01
    whole = line_points(arch.flattening_path_iterator(None, tol))
    halves = line_points(left.flattening_path_iterator(None, tol)) + \
        line_points(right.flattening_path_iterator(None, tol))
    assert len(whole) == len(halves)
    for a, b in zip(whole, halves):
        assert a == pytest.approx(b)


def test_negative_arguments_rejected(arch):
    with pytest.raises(ValueError):
        FlatteningPathIterator(arch.path_iterator(), -1.0)
    with pytest.raises(ValueError):
        FlatteningPathIterator(arch.path_iterator(), 1.0, -1)


def test_path_with_close_and_lines_passes_through():
    p = Path(WindingRule.EVEN_ODD)
    p.move_to(0, 0)
    p.line_to(10, 0)
    p.quad_to(10, 10, 0, 10)
    p.close_path()
    it = p.flattening_path_iterator(None, 0.01)
    assert it.winding_rule() == WindingRule.EVEN_ODD
    segments = list(it)
    types = [s.type for s in segments]
    assert types[0] == SegmentType.MOVE_TO
    assert types[1] == SegmentType.LINE_TO and segments[1].coords == (10, 0)
    assert types[-1] == SegmentType.CLOSE
    assert set(types[2:-1]) == {SegmentType.LINE_TO}
    assert segments[-2].coords == pytest.approx((0, 10))
    assert it.is_done
    with pytest.raises(PathIteratorExhausted):
        it.current_segment()


def test_is_done_does_not_skip_segments(arch):
    it = arch.flattening_path_iterator(None, 1.0)
    first = it.current_segment()
    assert not it.is_done
    assert it.current_segment() == first
    it.next()
    assert it.current_segment().type == SegmentType.LINE_TO


@pytest.mark.parametrize("tolerance_sq", [1.0, 0.01, 0.0001])
def test_path_and_curve_share_tolerance_units(arch, tolerance_sq):
    p = Path()
    p.move_to(0, 0)
    p.curve_to(0, 10, 10, 10, 10, 0)
    from_path = line_points(p.flattening_path_iterator(None, tolerance_sq))
    from_curve = line_points(arch.flattening_path_iterator(None, tolerance_sq))
    assert from_path == from_curve
