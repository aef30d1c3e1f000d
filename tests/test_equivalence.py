import pytest

from feasible_zone.analytics import (
    canonical_systems_equal,
    lattice_axes,
    systems_match_by_line,
    systems_equivalent,
)
from feasible_zone.analytics.equivalence import first_mismatch
from feasible_zone.geometry import Constraint, Domain, Point, inside_all


def test_lattice_axes_include_upper_bound(dom12):
    xs, ys = lattice_axes(dom12, 0.5)
    assert len(xs) == 25
    assert xs[0] == 0.0 and xs[-1] == 12.0
    assert len(ys) == 25


def test_lattice_axes_stop_before_off_lattice_bound():
    xs, _ = lattice_axes(Domain(0, 1.2, 0, 1), 0.5)
    assert list(xs) == [0.0, 0.5, 1.0]


def test_lattice_step_must_be_positive(dom12):
    with pytest.raises(ValueError):
        lattice_axes(dom12, 0)


def test_system_is_equivalent_to_itself(dom12, level3_target):
    assert systems_equivalent(dom12, level3_target, level3_target)
    assert first_mismatch(dom12, level3_target, level3_target) is None


def test_equivalence_ignores_order_scale_and_sign(dom12, level1_target):
    rewritten = [
        Constraint(-1, 0, -2, "<="),
        Constraint(4, 2, 24, "<="),
    ]
    assert systems_equivalent(dom12, level1_target, rewritten)


def test_equivalence_ignores_redundant_constraints(dom12, level3_target):
    without_noise = [k for k in level3_target if k.id != "noise"]
    assert systems_equivalent(dom12, level3_target, without_noise)
    assert not canonical_systems_equal(level3_target, without_noise)


def test_strictness_on_integer_line_is_detected(dom12):
    closed = [Constraint(1, 0, 2, ">=")]
    opened = [Constraint(1, 0, 2, ">")]
    assert not systems_equivalent(dom12, closed, opened)
    assert first_mismatch(dom12, closed, opened) == Point(2.0, 0.0)


def test_first_mismatch_is_accepted_by_exactly_one_system(dom12, level1_target):
    player = [Constraint(2, 1, 13, "<"), Constraint(1, 0, 1, ">=")]
    point = first_mismatch(dom12, level1_target, player)
    assert point == Point(1.0, 0.0)
    assert inside_all(point, player) != inside_all(point, level1_target)


def test_empty_system_covers_domain(dom12):
    assert systems_equivalent(dom12, [], [Constraint(1, 0, -1, ">=")])
    assert not systems_equivalent(dom12, [], [Constraint(1, 0, 1, ">=")])


def test_difference_between_lattice_points_goes_unnoticed(dom12):
    # Both boundaries fall strictly between x = 2.0 and x = 2.5
    a = [Constraint(1, 0, 2.0001, ">=")]
    b = [Constraint(1, 0, 2.4, ">=")]
    assert systems_equivalent(dom12, a, b)
    assert not canonical_systems_equal(a, b)


def test_boundary_just_past_lattice_column_is_detected(dom12):
    # x = 2.0 is a lattice point: accepted by x >= 2, rejected by x >= 2.0001
    a = [Constraint(1, 0, 2, ">=")]
    b = [Constraint(1, 0, 2.0001, ">=")]
    assert not systems_equivalent(dom12, a, b)
    assert first_mismatch(dom12, a, b) == Point(2.0, 0.0)


def test_coarser_lattice_misses_strictness(dom12):
    closed = [Constraint(1, 0, 2.5, ">=")]
    opened = [Constraint(1, 0, 2.5, ">")]
    assert not systems_equivalent(dom12, closed, opened, step=0.5)
    assert systems_equivalent(dom12, closed, opened, step=1.0)


def test_canonical_systems_equal(level1_target):
    assert canonical_systems_equal(
        level1_target,
        [Constraint(-1, 0, -2, "<="), Constraint(4, 2, 24, "<=")],
    )
    assert not canonical_systems_equal(
        level1_target,
        [Constraint(2, 1, 12, "<"), Constraint(1, 0, 2, ">=")],
    )
    assert canonical_systems_equal(level1_target, level1_target + [level1_target[0]])


def test_systems_match_by_line_tolerates_small_drift(level1_target):
    dragged = [Constraint(2, 1, 12.01, "<="), Constraint(-1, 0, -2, "<=")]
    assert systems_match_by_line(dragged, level1_target)
    assert not systems_match_by_line(dragged, level1_target, tol=1e-4)


def test_systems_match_by_line_needs_every_target_line(level1_target):
    assert not systems_match_by_line(level1_target[:1], level1_target)
    assert not systems_match_by_line(level1_target, level1_target[:1])


def test_systems_match_by_line_checks_orientation(level1_target):
    flipped = [Constraint(2, 1, 12, ">="), Constraint(1, 0, 2, ">=")]
    assert not systems_match_by_line(flipped, level1_target)
