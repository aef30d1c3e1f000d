"""
Line Canonicalization Module
============================

Normalized (a, b, c) lines so that line equality is a direct comparison.

Design:
- Unit normal + fixed sign rule: if |a| < eps then b >= 0, else a >= 0
- Two points -> canonical line (order of the points does not matter)
- Line matching is deliberately loose (LINE_MATCH_TOL)
"""

import math
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple

from feasible_zone.geometry.errors import CoincidentPointsError, DegenerateConstraintError
from feasible_zone.geometry.halfplane import Comparator, Constraint
from feasible_zone.geometry.tolerances import (
    AXIS_PARALLEL_EPS,
    COINCIDENT_EPS,
    LINE_MATCH_TOL,
    SIGN_EPS,
)


class LineLike(Protocol):
    """Anything carrying line coefficients a*x + b*y = c."""

    a: float
    b: float
    c: float


def _apply_sign_rule(a: float, b: float, c: float) -> Tuple[float, float, float, bool]:
    """Return (a, b, c, negated) with the canonical sign convention applied."""
    if abs(a) < SIGN_EPS:
        negate = b < 0
    else:
        negate = a < 0
    if negate:
        return -a, -b, -c, True
    return a, b, c, False


@dataclass(frozen=True)
class CanonicalLine:
    """
    Immutable normalized line a*x + b*y = c.

    Invariants:
        - hypot(a, b) == 1 (up to rounding)
        - |a| < SIGN_EPS implies b >= 0, otherwise a >= 0

    Build with from_coefficients() or line_from_points(); the raw
    constructor trusts its input.
    """

    a: float
    b: float
    c: float

    @classmethod
    def from_coefficients(cls, a: float, b: float, c: float) -> "CanonicalLine":
        """
        Canonicalize arbitrary coefficients.

        Raises:
            DegenerateConstraintError: If a = b = 0
        """
        n = math.hypot(a, b)
        if n == 0.0:
            raise DegenerateConstraintError("Line has a zero normal vector (a = b = 0)")
        a, b, c, _ = _apply_sign_rule(a / n, b / n, c / n)
        return cls(a, b, c)

    @classmethod
    def of(cls, line: LineLike) -> "CanonicalLine":
        """Canonical form of a constraint's (or any line's) boundary."""
        return cls.from_coefficients(line.a, line.b, line.c)

    def to_constraint(self, comp: Comparator, **metadata) -> Constraint:
        """Attach a comparator to get a half-plane."""
        return Constraint(a=self.a, b=self.b, c=self.c, comp=comp, **metadata)


def line_from_points(p1: Sequence[float], p2: Sequence[float]) -> CanonicalLine:
    """
    Canonical line through two points.

    The normal is the direction vector rotated by 90 degrees, (dy, -dx),
    scaled to unit length; c is then evaluated at p1.

    Args:
        p1, p2: Distinct (x, y) points (e.g. two drag handles)

    Returns:
        CanonicalLine through both points

    Raises:
        CoincidentPointsError: If p1 and p2 coincide
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    n = math.hypot(dx, dy)
    if n < COINCIDENT_EPS:
        raise CoincidentPointsError(
            f"Line through coincident points {tuple(p1)} and {tuple(p2)} is undefined"
        )

    a, b = dy / n, -dx / n
    a, b, _, _ = _apply_sign_rule(a, b, 0.0)
    c = a * p1[0] + b * p1[1]
    return CanonicalLine(a, b, c)


def same_line(u: LineLike, v: LineLike, tol: float = LINE_MATCH_TOL) -> bool:
    """
    Check if two lines are the same up to scale, sign and tolerance.

    Both inputs are normalized to a unit normal and the canonical sign rule
    before a component-wise comparison.

    Args:
        u, v: Objects with a, b, c (CanonicalLine, Constraint, ...)
        tol: Component-wise absolute tolerance

    Returns:
        True if |ua - va|, |ub - vb| and |uc - vc| are all below tol
    """
    cu = CanonicalLine.of(u)
    cv = CanonicalLine.of(v)
    return (
        abs(cu.a - cv.a) < tol
        and abs(cu.b - cv.b) < tol
        and abs(cu.c - cv.c) < tol
    )


def oriented(k: Constraint) -> Tuple[CanonicalLine, Comparator]:
    """
    Canonical line plus the comparator re-oriented to match it.

    Multiplying an inequality by -1 flips its comparator, so when the sign
    rule negates the coefficients the comparator is flipped too.
    """
    n = math.hypot(k.a, k.b)
    a, b, c, negated = _apply_sign_rule(k.a / n, k.b / n, k.c / n)
    comp = k.comp.flipped() if negated else k.comp
    return CanonicalLine(a, b, c), comp


def inequalities_match(
    player: Constraint,
    target: Constraint,
    tol: float = LINE_MATCH_TOL,
) -> bool:
    """
    Check if a player's inequality describes the target half-plane.

    Same boundary line (within tol) and the same comparator once both are
    written in canonical orientation.
    """
    line_p, comp_p = oriented(player)
    line_t, comp_t = oriented(target)
    return same_line(line_p, line_t, tol) and comp_p is comp_t


def slope_intercept(a: float, b: float, c: float) -> Tuple[float, float]:
    """
    Slope-intercept view of a*x + b*y = c.

    Returns:
        (slope, intercept) as y = slope*x + intercept, or (inf, x_intercept)
        for a vertical line
    """
    if abs(b) < AXIS_PARALLEL_EPS:
        return math.inf, c / a
    return -a / b, c / b


def intercepts(a: float, b: float, c: float) -> Tuple[Optional[float], Optional[float]]:
    """
    Axis intercepts of a*x + b*y = c.

    Returns:
        (x_intercept, y_intercept); None where the line is parallel to
        that axis
    """
    xi = None if abs(a) < AXIS_PARALLEL_EPS else c / a
    yi = None if abs(b) < AXIS_PARALLEL_EPS else c / b
    return xi, yi
