import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry.Arc import Arc, ArcType, norm_angle
from geometry.Path import Path
from geometry.PathIterator import SegmentType
from geometry.Point import Point

M, L, C, Z = SegmentType.MOVE_TO, SegmentType.LINE_TO, SegmentType.CUBIC_TO, SegmentType.CLOSE


@pytest.fixture
def pie():
    # upper right quarter of the circle centred on (5, 5)
    return Arc(0, 0, 10, 10, 0, 90, ArcType.PIE)


def test_end_points(pie):
    assert pie.start_point().as_tuple() == pytest.approx((10, 5))
    assert pie.end_point().as_tuple() == pytest.approx((5, 0))


def test_norm_angle():
    assert norm_angle(370) == pytest.approx(10)
    assert norm_angle(-90) == pytest.approx(270)
    assert norm_angle(360) == 0


def test_contains_angle(pie):
    assert pie.contains_angle(45)
    assert pie.contains_angle(360)
    assert not pie.contains_angle(135)

    wrapping = Arc(0, 0, 10, 10, 350, 20)
    assert wrapping.contains_angle(5)
    assert not wrapping.contains_angle(180)

    clockwise = Arc(0, 0, 10, 10, 0, -90)
    assert clockwise.contains_angle(300)
    assert not clockwise.contains_angle(45)


def test_pie_contains(pie):
    assert pie.contains(7, 3)
    assert pie.contains(6, 4)
    assert not pie.contains(3, 3)
    assert not pie.contains(7, 7)
    assert not pie.contains(9.5, 0.5)


def test_chord_contains():
    chord = Arc(0, 0, 10, 10, 0, 90, ArcType.CHORD)
    assert chord.contains(8, 2)
    # on the centre's side of the chord
    assert not chord.contains(6, 4)


def test_full_extent_contains_the_whole_ellipse():
    arc = Arc(0, 0, 10, 10, 30, 360, ArcType.CHORD)
    assert arc.contains(5, 5)
    assert arc.contains(1.5, 5)


def test_open_arc_is_empty():
    arc = Arc(0, 0, 10, 10, 0, 180)
    assert arc.is_empty
    assert not arc.intersects(4, 1, 2, 2)
    assert [s.type for s in arc.path_iterator()] == [M, C, C]


def test_outline_segments(pie):
    segments = list(pie.path_iterator())
    assert [s.type for s in segments] == [M, C, L, Z]
    assert segments[0].coords == pytest.approx((10, 5))
    assert segments[1].coords[4:] == pytest.approx((5, 0))
    assert segments[2].coords == pytest.approx((5, 5))

    chord = Arc(0, 0, 10, 10, 0, 270, ArcType.CHORD)
    assert [s.type for s in chord.path_iterator()] == [M, C, C, C, Z]
    assert list(Arc(0, 0, -1, 10, 0, 90, ArcType.PIE).path_iterator()) == []


def test_crossing_engine_agrees_with_closed_form(pie):
    outline = Path.from_shape(pie)
    for x, y in [(7, 3), (6, 4), (3, 3), (7, 7), (5.5, 0.5)]:
        assert outline.contains(x, y) == pie.contains(x, y)


def test_bounds(pie):
    b = pie.bounds()
    assert (b.x, b.y, b.width, b.height) == pytest.approx((5, 0, 5, 5))
    b = Arc(0, 0, 10, 10, 0, 180, ArcType.CHORD).bounds()
    assert (b.x, b.y, b.width, b.height) == pytest.approx((0, 0, 10, 5))


def test_rect_queries(pie):
    assert pie.intersects(6, 1, 1, 1)
    assert pie.contains_rect(6, 2, 1, 1)
    assert not pie.intersects(0, 6, 2, 2)
    assert not pie.contains_rect(4, 2, 2, 2)


def test_setters():
    arc = Arc().set_arc_by_center(5, 5, 5, 0, 90, ArcType.PIE)
    assert (arc.x, arc.y, arc.width, arc.height) == (0, 0, 10, 10)

    arc.set_angles(10, 5, 5, 0)
    assert arc.start == pytest.approx(0)
    assert arc.extent == pytest.approx(90)

    arc.set_angle_start_point(Point(0, 5))
    assert arc.start == pytest.approx(180)

    with pytest.raises(ValueError):
        arc.set_arc_type(2)
    with pytest.raises(ValueError):
        Arc(arc_type="pie")


def test_set_arc_by_tangent():
    arc = Arc(arc_type=ArcType.OPEN)
    arc.set_arc_by_tangent(Point(0, 0), Point(10, 0), Point(10, 10), 2)
    assert (arc.center_x, arc.center_y) == pytest.approx((8, 2))
    assert arc.width == pytest.approx(4)
    # runs the long way round from the top tangent point to the right one
    assert arc.start == pytest.approx(90)
    assert arc.extent == pytest.approx(270)
    assert arc.contains_angle(180)
    assert not arc.contains_angle(45)
