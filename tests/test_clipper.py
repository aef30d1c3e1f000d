import itertools

import pytest

from feasible_zone.analytics import polygon_area
from feasible_zone.geometry import (
    Constraint,
    Domain,
    Point,
    clip_polygon_by_half_plane,
    clip_rect_by_half_plane,
    feasible_polygon,
    inside,
    intersect_edge_with_line,
    merge_close_vertices,
)


def assert_same_vertices(polygon, expected, tol=1e-6):
    """Same vertex set, in any order."""
    assert len(polygon) == len(expected)
    for e in expected:
        assert any(abs(v[0] - e[0]) <= tol and abs(v[1] - e[1]) <= tol for v in polygon), e


def test_empty_system_is_whole_domain(dom12):
    assert feasible_polygon(dom12, []) == dom12.corners()


def test_two_rule_level(dom12, level1_target):
    poly = feasible_polygon(dom12, level1_target)
    assert_same_vertices(poly, [(2, 0), (6, 0), (2, 8)])
    assert polygon_area(poly) == pytest.approx(16.0)


def test_three_rule_level():
    dom = Domain(0, 14, 0, 14)
    system = [
        Constraint(1, 2, 14, "<="),
        Constraint(1, 0, 1, ">="),
        Constraint(0, 1, 1, ">="),
    ]
    poly = feasible_polygon(dom, system)
    assert_same_vertices(poly, [(1, 1), (12, 1), (1, 6.5)])
    assert polygon_area(poly) == pytest.approx(30.25)


def test_four_rule_level(dom12, level3_target):
    poly = feasible_polygon(dom12, level3_target)
    assert_same_vertices(poly, [(2, 4), (6, 0), (2, 6)])
    assert polygon_area(poly) == pytest.approx(4.0)


def test_constraint_order_does_not_change_region(dom12, level3_target):
    reference = feasible_polygon(dom12, level3_target)
    for order in itertools.permutations(level3_target):
        poly = feasible_polygon(dom12, order)
        assert_same_vertices(poly, reference)


def test_infeasible_system_is_empty(dom12):
    poly = feasible_polygon(dom12, [Constraint(1, 0, 10, ">="), Constraint(1, 0, 2, "<=")])
    assert len(poly) < 3
    assert polygon_area(poly) == 0.0


def test_region_outside_domain_is_empty(dom12):
    assert feasible_polygon(dom12, [Constraint(1, 0, 20, ">=")]) == ()


def test_corner_touch_is_empty(dom12):
    poly = feasible_polygon(dom12, [Constraint(1, 1, 0, "<=")])
    assert len(poly) < 3


def test_redundant_constraint_keeps_domain(dom12):
    poly = feasible_polygon(dom12, [Constraint(1, 0, -5, ">=")])
    assert poly == dom12.corners()


def test_every_vertex_satisfies_every_constraint(dom12, level3_target):
    for v in feasible_polygon(dom12, level3_target):
        assert dom12.contains(v, tol=1e-6)
        for k in level3_target:
            assert inside(v, k, eps=1e-6)


def test_strict_inequality_keeps_closure(dom12):
    poly = clip_rect_by_half_plane(dom12, Constraint(1, 0, 2, "<"))
    assert_same_vertices(poly, [(0, 0), (2, 0), (2, 12), (0, 12)])
    assert polygon_area(poly) == pytest.approx(24.0)


def test_single_inequality_shading(dom12):
    poly = clip_rect_by_half_plane(dom12, Constraint(2, 1, 12, "<="))
    assert_same_vertices(poly, [(0, 0), (6, 0), (0, 12)])
    assert polygon_area(poly) == pytest.approx(36.0)


def test_clip_does_not_mutate_input():
    square = [(0, 0), (4, 0), (4, 4), (0, 4)]
    before = list(square)
    clip_polygon_by_half_plane(square, Constraint(1, 0, 2, "<="))
    assert square == before


def test_clip_empty_polygon():
    assert clip_polygon_by_half_plane((), Constraint(1, 0, 2, "<=")) == ()


def test_intersect_edge_with_line():
    k = Constraint(1, 0, 2, "<=")
    assert intersect_edge_with_line((0, 0), (4, 2), k) == Point(2.0, 1.0)


def test_parallel_edge_returns_far_endpoint():
    k = Constraint(1, 0, 2, "<=")
    assert intersect_edge_with_line((5, 0), (5, 3), k) == Point(5, 3)


def test_merge_close_vertices_drops_duplicates_and_closing_pair():
    merged = merge_close_vertices([(0, 0), (0, 1e-9), (1, 0), (1, 1), (1e-9, 0)])
    assert merged == (Point(0, 0), Point(1, 0), Point(1, 1))
