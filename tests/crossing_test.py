import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from geometry import Crossing
from geometry.Path import Path
from geometry.PathIterator import WindingRule
from geometry.Rectangle import Rectangle


def square(path, x, y, size):
    path.move_to(x, y)
    path.line_to(x + size, y)
    path.line_to(x + size, y + size)
    path.line_to(x, y + size)
    path.close_path()
    return path


@pytest.fixture
def unit_square():
    return square(Path(), 0, 0, 1)


def test_unit_square_crossings(unit_square):
    assert Crossing.cross_shape(unit_square, 0.5, 0.5) != 0
    assert Crossing.cross_shape(unit_square, 2, 2) == 0


def test_cross_path_counts_signed_crossings(unit_square):
    assert Crossing.cross_path(unit_square.path_iterator(), 0.5, 0.5) == -1
    reversed_square = Path()
    reversed_square.move_to(0, 0)
    reversed_square.line_to(0, 1)
    reversed_square.line_to(1, 1)
    reversed_square.line_to(1, 0)
    reversed_square.close_path()
    assert Crossing.cross_path(reversed_square.path_iterator(), 0.5, 0.5) == 1


def test_vertex_reports_zero(unit_square):
    assert Crossing.cross_path(unit_square.path_iterator(), 1, 1) == 0


def test_open_subpath_is_closed_implicitly():
    p = Path()
    p.move_to(0, 0)
    p.line_to(1, 0)
    p.line_to(1, 1)
    p.line_to(0, 1)
    assert Crossing.cross_path(p.path_iterator(), 0.5, 0.5) == -1


def test_rules():
    assert Crossing.is_inside_even_odd(1)
    assert Crossing.is_inside_even_odd(-1)
    assert not Crossing.is_inside_even_odd(2)
    assert not Crossing.is_inside_even_odd(0)
    assert Crossing.is_inside_non_zero(-2)
    assert not Crossing.is_inside_non_zero(0)


def test_even_odd_and_non_zero_disagree_on_double_winding():
    nested = square(square(Path(), 0, 0, 10), 2, 2, 6)
    assert Crossing.cross_shape(nested, 5, 5) == -2
    assert Crossing.cross_shape(nested, 1, 1) == -1

    assert nested.contains(5, 5)
    nested.set_winding_rule(WindingRule.EVEN_ODD)
    assert not nested.contains(5, 5)
    assert nested.contains(1, 1)


def test_simple_closed_shape_rules_agree(unit_square):
    even_odd = unit_square.clone()
    even_odd.set_winding_rule(WindingRule.EVEN_ODD)
    for x, y in [(0.5, 0.5), (0.1, 0.9), (2, 2), (-1, 0.5), (0.5, 1.5)]:
        assert unit_square.contains(x, y) == even_odd.contains(x, y)


def test_cross_line():
    # ray goes towards +y
    assert Crossing.cross_line(0, 5, 10, 5, 3, 0) == 1
    assert Crossing.cross_line(10, 5, 0, 5, 3, 0) == -1
    assert Crossing.cross_line(0, 5, 10, 5, 3, 8) == 0
    assert Crossing.cross_line(0, 5, 10, 5, 11, 0) == 0
    assert Crossing.cross_line(3, 0, 3, 10, 3, 0) == 0


def test_cross_quad_and_cubic():
    assert Crossing.cross_quad(0, 0, 5, 10, 10, 0, 5, 2) == 1
    assert Crossing.cross_quad(0, 0, 5, 10, 10, 0, 5, 6) == 0
    assert Crossing.cross_cubic(0, 0, 0, 10, 10, 10, 10, 0, 5, 2) == 1
    assert Crossing.cross_cubic(10, 0, 10, 10, 0, 10, 0, 0, 5, 2) == -1
    assert Crossing.cross_cubic(0, 0, 0, 10, 10, 10, 10, 0, 5, 9) == 0


def test_intersect_line():
    assert Crossing.intersect_line(0, 5, 10, 5, 4, 4, 6, 6) == Crossing.CROSSING
    assert Crossing.intersect_line(0, 5, 10, 5, 4, 0, 6, 2) == 1
    assert Crossing.intersect_line(0, 5, 10, 5, 4, 7, 6, 9) == 0


def test_intersect_shape(unit_square):
    assert Crossing.intersect_shape(unit_square, 0.25, 0.25, 0.5, 0.5) == -1
    assert Crossing.intersect_shape(unit_square, 0.5, 0.5, 1, 1) == Crossing.CROSSING
    assert Crossing.intersect_shape(unit_square, 5, 5, 1, 1) == 0


def test_shape_queries(unit_square):
    assert unit_square.contains_rect(0.25, 0.25, 0.5, 0.5)
    assert unit_square.intersects(0.25, 0.25, 0.5, 0.5)
    assert unit_square.intersects_rect(Rectangle(0.5, 0.5, 1, 1))
    assert not unit_square.contains_rect(0.5, 0.5, 1, 1)
    assert not unit_square.intersects(5, 5, 1, 1)


def test_solve_quad():
    assert sorted(Crossing.solve_quad([-1, 0, 1])) == pytest.approx([-1, 1])
    assert Crossing.solve_quad([1, 2, 1]) == pytest.approx([-1])
    assert Crossing.solve_quad([1, 0, 1]) == []
    assert Crossing.solve_quad([4, 2, 0]) == pytest.approx([-2])
    # no t term at all: not the same as having no real roots
    assert Crossing.solve_quad([4, 0, 0]) is None
    assert Crossing.solve_quad([0, 0, 0]) is None


def test_solve_cubic():
    assert sorted(Crossing.solve_cubic([-6, 11, -6, 1])) == pytest.approx([1, 2, 3])
    assert Crossing.solve_cubic([-8, 0, 0, 1]) == pytest.approx([2])
    # falls back to the quadratic solver
    assert sorted(Crossing.solve_cubic([-1, 0, 1, 0])) == pytest.approx([-1, 1])


def test_intersect_quad():
    # arch from (0, 0) to (10, 0) peaking at y = 5
    arch = (0, 0, 5, 10, 10, 0)
    assert Crossing.intersect_quad(*arch, 4, 1, 6, 3) == 1
    assert Crossing.intersect_quad(*arch, 4, 4, 6, 6) == Crossing.CROSSING
    assert Crossing.intersect_quad(*arch, 4, 7, 6, 9) == 0
    assert Crossing.intersect_quad(*arch, 12, 1, 14, 3) == 0


def test_intersect_cubic():
    # arch from (0, 0) to (10, 0) peaking at y = 7.5
    arch = (0, 0, 0, 10, 10, 10, 10, 0)
    assert Crossing.intersect_cubic(*arch, 4, 1, 6, 3) == 1
    assert Crossing.intersect_cubic(*arch, 4, 6, 6, 9) == Crossing.CROSSING
    assert Crossing.intersect_cubic(*arch, 4, 8, 6, 10) == 0


def test_vertical_curves_crossing_the_rectangle():
    assert Crossing.intersect_quad(5, 0, 5, 5, 5, 10, 4, 4, 6, 6) == Crossing.CROSSING
    assert Crossing.intersect_cubic(5, 0, 5, 3, 5, 7, 5, 10, 4, 4, 6, 6) == Crossing.CROSSING
    # wholly beside the edge
    assert Crossing.intersect_quad(5, 0, 5, 5, 5, 10, 1, 4, 3, 6) == 0


@pytest.mark.parametrize("draw_edge", [
    lambda p: p.line_to(5, 10),
    lambda p: p.quad_to(5, 5, 5, 10),
    lambda p: p.curve_to(5, 3, 5, 7, 5, 10),
])
def test_rect_across_vertical_edge_is_not_contained(draw_edge):
    p = Path()
    p.move_to(5, 0)
    draw_edge(p)
    p.line_to(0, 10)
    p.close_path()
    assert Crossing.intersect_shape(p, 4, 4, 2, 2) == Crossing.CROSSING
    assert not p.contains_rect(4, 4, 2, 2)
    assert p.intersects(4, 4, 2, 2)


def test_rect_against_path_with_quad():
    p = Path()
    p.move_to(0, 0)
    p.quad_to(5, 10, 10, 0)
    p.close_path()
    assert p.contains_rect(4, 1, 2, 2)
    assert not p.contains_rect(4, 4, 2, 2)
    assert p.intersects(4, 4, 2, 2)
    assert not p.intersects(4, 7, 2, 2)
