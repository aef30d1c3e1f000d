"""
System Equivalence Module
=========================

Decides whether two constraint systems describe the same feasible set.

Three strategies:
- Lattice sampling (default): evaluate both systems on a regular grid over
  the domain and compare. Sound but incomplete - two regions that differ
  only between lattice points are reported equivalent.
- Line matching: every inequality of one system has an inequality of the
  other on the same boundary line (normalized coefficients within a
  tolerance) with the same orientation.
- Canonical comparison (strict): compare the sets of canonicalized
  constraints directly. Exact up to tolerance, but treats redundant
  constraints as differences.
"""

import math
import numpy as np
from typing import Optional, Sequence, Tuple

from feasible_zone.geometry.halfplane import Constraint, system_mask
from feasible_zone.geometry.lines import inequalities_match, oriented
from feasible_zone.geometry.shapes import Domain, Point
from feasible_zone.geometry.tolerances import LATTICE_STEP, LINE_MATCH_TOL, VERTEX_MERGE_EPS


def lattice_axes(domain: Domain, step: float = LATTICE_STEP) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample coordinates xmin + i*step and ymin + j*step, upper bound included
    when it falls on the lattice.

    Raises:
        ValueError: If step is not positive
    """
    if not step > 0:
        raise ValueError(f"Lattice step must be > 0, got {step}")

    nx = int(math.floor(domain.width / step + 1e-9))
    ny = int(math.floor(domain.height / step + 1e-9))
    xs = domain.xmin + step * np.arange(nx + 1)
    ys = domain.ymin + step * np.arange(ny + 1)
    return xs, ys


def _mismatch_grid(
    domain: Domain,
    a: Sequence[Constraint],
    b: Sequence[Constraint],
    step: float,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    xs, ys = lattice_axes(domain, step)
    gx, gy = np.meshgrid(xs, ys, indexing="ij")
    mismatch = system_mask(gx, gy, a) != system_mask(gx, gy, b)
    return gx, gy, mismatch


def first_mismatch(
    domain: Domain,
    a: Sequence[Constraint],
    b: Sequence[Constraint],
    step: float = LATTICE_STEP,
) -> Optional[Point]:
    """
    First lattice point (x-major order) accepted by exactly one system.

    Returns:
        The distinguishing point, or None if the lattice cannot tell the
        systems apart
    """
    gx, gy, mismatch = _mismatch_grid(domain, a, b, step)
    hits = np.argwhere(mismatch)
    if len(hits) == 0:
        return None
    i, j = hits[0]
    return Point(float(gx[i, j]), float(gy[i, j]))


def systems_equivalent(
    domain: Domain,
    a: Sequence[Constraint],
    b: Sequence[Constraint],
    step: float = LATTICE_STEP,
) -> bool:
    """
    Lattice-sampling equivalence of two constraint systems.

    The default step (0.5) is finer than integer sampling so strict and
    non-strict boundaries on integer lines are told apart. Differences
    narrower than the step that avoid every lattice point go unnoticed.

    Args:
        domain: World rectangle the lattice covers
        a, b: Constraint systems (empty system = whole domain)
        step: Lattice spacing

    Returns:
        True if no lattice point is accepted by exactly one system
    """
    _, _, mismatch = _mismatch_grid(domain, a, b, step)
    return not bool(mismatch.any())


def canonical_systems_equal(
    a: Sequence[Constraint],
    b: Sequence[Constraint],
    tol: float = VERTEX_MERGE_EPS,
) -> bool:
    """
    Strict equivalence: same set of canonical half-planes.

    Each constraint is written as (canonical line, oriented comparator);
    the systems are equal when every half-plane of one has a match in the
    other within tol. Scaling (2x + y <= 12 vs 4x + 2y <= 24) and sign
    (x >= 2 vs -x <= -2) do not matter; duplicates collapse.
    """
    oa = [oriented(k) for k in a]
    ob = [oriented(k) for k in b]
    return _covered(oa, ob, tol) and _covered(ob, oa, tol)


def _covered(src, dst, tol: float) -> bool:
    for line, comp in src:
        if not any(
            comp is other_comp
            and abs(line.a - other.a) <= tol
            and abs(line.b - other.b) <= tol
            and abs(line.c - other.c) <= tol
            for other, other_comp in dst
        ):
            return False
    return True


def systems_match_by_line(
    a: Sequence[Constraint],
    b: Sequence[Constraint],
    tol: float = LINE_MATCH_TOL,
) -> bool:
    """
    Line-by-line equivalence, as used when a player drags boundary lines.

    Every inequality of either system must match some inequality of the
    other (inequalities_match with tol). Coarser than
    canonical_systems_equal: a line dragged to within tol of its target
    counts as placed.
    """
    return all(any(inequalities_match(p, t, tol) for t in b) for p in a) and all(
        any(inequalities_match(p, t, tol) for p in a) for t in b
    )
