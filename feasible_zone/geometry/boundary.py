"""
Boundary Segment Module
=======================

Visible chord of an infinite line inside the domain rectangle.

Independent of clipping: lets a boundary line be drawn before (or
without) computing any feasible region.
"""

from itertools import combinations
from typing import List, Optional

from feasible_zone.geometry.lines import LineLike
from feasible_zone.geometry.shapes import Domain, Point, Segment
from feasible_zone.geometry.tolerances import BOUNDARY_PARALLEL_EPS, BOUNDARY_SLACK


def line_rectangle_hits(domain: Domain, line: LineLike) -> List[Point]:
    """
    Points where a*x + b*y = c meets the rectangle edges.

    Edges parallel to the line are skipped. A corner hit can appear twice
    (once per adjacent edge).
    """
    hits: List[Point] = []
    for p, q in domain.edges():
        dx = q.x - p.x
        dy = q.y - p.y
        den = line.a * dx + line.b * dy
        if abs(den) < BOUNDARY_PARALLEL_EPS:
            continue

        t = (line.c - (line.a * p.x + line.b * p.y)) / den
        if not -BOUNDARY_SLACK <= t <= 1 + BOUNDARY_SLACK:
            continue

        hit = Point(p.x + t * dx, p.y + t * dy)
        if domain.contains(hit, tol=BOUNDARY_SLACK):
            hits.append(hit)
    return hits


def boundary_segment(domain: Domain, line: LineLike) -> Optional[Segment]:
    """
    Visible part of a line inside the domain.

    Args:
        domain: World rectangle
        line: Anything with a, b, c (Constraint, CanonicalLine)

    Returns:
        Segment between the two farthest-apart edge hits, or None when the
        line misses the rectangle (fewer than two hits)
    """
    hits = line_rectangle_hits(domain, line)
    if len(hits) < 2:
        return None

    best = Segment(hits[0], hits[1])
    best_distance = 0.0
    for p, q in combinations(hits, 2):
        d = p.distance_to(q)
        if d > best_distance:
            best_distance = d
            best = Segment(p, q)
    return best
