"""
Polygon Clipper Module
======================

Sutherland-Hodgman clipping of a convex polygon by half-planes.

Design:
- One half-plane at a time, pure functions (input never mutated)
- Parallel edge/line resolves to a fallback point, never raises
- Near-duplicate vertices merged after every clip
- Feasible region = domain rectangle clipped by each constraint in order
"""

from typing import Iterable, List, Sequence

from feasible_zone.geometry.halfplane import Constraint, inside
from feasible_zone.geometry.shapes import Domain, Point, Polygon
from feasible_zone.geometry.tolerances import CLIP_PARALLEL_EPS, VERTEX_MERGE_EPS


def intersect_edge_with_line(
    s: Sequence[float],
    e: Sequence[float],
    k: Constraint,
    parallel_eps: float = CLIP_PARALLEL_EPS,
) -> Point:
    """
    Intersection of edge s -> e with the boundary a*x + b*y = c.

    Uses the parametric form s + t*(e - s). When the edge is parallel to
    the boundary the far endpoint e is returned instead of dividing by a
    near-zero denominator.

    Args:
        s, e: Edge endpoints
        k: Constraint whose boundary is intersected
        parallel_eps: Denominator threshold

    Returns:
        Intersection point (or e for a parallel edge)
    """
    dx = e[0] - s[0]
    dy = e[1] - s[1]
    den = k.a * dx + k.b * dy
    if abs(den) < parallel_eps:
        return Point(e[0], e[1])
    t = (k.c - (k.a * s[0] + k.b * s[1])) / den
    return Point(s[0] + t * dx, s[1] + t * dy)


def merge_close_vertices(
    vertices: Iterable[Sequence[float]],
    eps: float = VERTEX_MERGE_EPS,
) -> Polygon:
    """
    Drop vertices closer than eps to the previously kept one.

    The closing pair (last vs first) is checked too, since the polygon is
    implicitly closed.
    """
    cleaned: List[Point] = []
    for v in vertices:
        p = Point(v[0], v[1])
        if not cleaned or p.distance_to(cleaned[-1]) > eps:
            cleaned.append(p)

    if len(cleaned) > 1 and cleaned[-1].distance_to(cleaned[0]) <= eps:
        cleaned.pop()
    return tuple(cleaned)


def clip_polygon_by_half_plane(polygon: Sequence[Sequence[float]], k: Constraint) -> Polygon:
    """
    Clip a polygon against one half-plane.

    Walks edges S -> E starting from the closing edge (last -> first):
    - E inside:  emit the boundary crossing first if S was outside, then E
    - only S inside: emit the boundary crossing

    Args:
        polygon: Vertices in order (implicitly closed)
        k: Half-plane to keep

    Returns:
        Clipped polygon (fewer than 3 vertices = empty region)
    """
    if len(polygon) == 0:
        return ()

    out: List[Point] = []
    s = polygon[-1]
    s_in = inside(s, k)
    for e in polygon:
        e_in = inside(e, k)
        if e_in:
            if not s_in:
                out.append(intersect_edge_with_line(s, e, k))
            out.append(Point(e[0], e[1]))
        elif s_in:
            out.append(intersect_edge_with_line(s, e, k))
        s, s_in = e, e_in

    return merge_close_vertices(out)


def clip_polygon_by_system(
    polygon: Sequence[Sequence[float]],
    constraints: Iterable[Constraint],
) -> Polygon:
    """Clip sequentially by every constraint, in the given order."""
    poly = tuple(Point(v[0], v[1]) for v in polygon)
    for k in constraints:
        poly = clip_polygon_by_half_plane(poly, k)
    return poly


def feasible_polygon(domain: Domain, constraints: Iterable[Constraint]) -> Polygon:
    """
    Feasible region of a system of inequalities within the domain.

    Starts from the domain rectangle and clips by each constraint in the
    caller's order. The represented region does not depend on that order;
    the exact vertex list may differ within VERTEX_MERGE_EPS.

    Args:
        domain: World rectangle
        constraints: Ordered half-planes (empty = whole rectangle)

    Returns:
        Convex polygon, fewer than 3 vertices when the system is infeasible
        inside the domain

    Example:
        >>> dom = Domain(0, 12, 0, 12)
        >>> poly = feasible_polygon(dom, [Constraint(2, 1, 12, "<="), Constraint(1, 0, 2, ">=")])
        >>> len(poly)  # (2, 0), (6, 0), (2, 8)
        3
    """
    return clip_polygon_by_system(domain.corners(), constraints)


def clip_rect_by_half_plane(domain: Domain, k: Constraint) -> Polygon:
    """Shaded region of a single inequality (single-inequality games)."""
    return clip_polygon_by_half_plane(domain.corners(), k)
