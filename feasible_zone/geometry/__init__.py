"""
Geometry Layer
==============

Bounded Context: Pure half-plane geometry.

Responsibilities:
- Half-plane representation and point membership
- Canonical lines and line equality
- Polygon clipping (feasible regions)
- Visible boundary chords
- NO state, NO scoring, NO rendering

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from feasible_zone.geometry.errors import (
    GeometryError,
    DegenerateConstraintError,
    CoincidentPointsError,
    InvalidDomainError,
)
from feasible_zone.geometry.shapes import Point, Segment, Polygon, Domain, as_array, rotate
from feasible_zone.geometry.halfplane import (
    Comparator,
    Constraint,
    inside,
    inside_all,
    residual,
    half_plane_mask,
    system_mask,
)
from feasible_zone.geometry.lines import (
    CanonicalLine,
    line_from_points,
    same_line,
    oriented,
    inequalities_match,
    slope_intercept,
    intercepts,
)
from feasible_zone.geometry.clipper import (
    intersect_edge_with_line,
    merge_close_vertices,
    clip_polygon_by_half_plane,
    clip_polygon_by_system,
    feasible_polygon,
    clip_rect_by_half_plane,
)
from feasible_zone.geometry.boundary import boundary_segment, line_rectangle_hits

__all__ = [
    # Errors
    "GeometryError",
    "DegenerateConstraintError",
    "CoincidentPointsError",
    "InvalidDomainError",
    # Shapes
    "Point",
    "Segment",
    "Polygon",
    "Domain",
    "as_array",
    "rotate",
    # Half-planes
    "Comparator",
    "Constraint",
    "inside",
    "inside_all",
    "residual",
    "half_plane_mask",
    "system_mask",
    # Lines
    "CanonicalLine",
    "line_from_points",
    "same_line",
    "oriented",
    "inequalities_match",
    "slope_intercept",
    "intercepts",
    # Clipping
    "intersect_edge_with_line",
    "merge_close_vertices",
    "clip_polygon_by_half_plane",
    "clip_polygon_by_system",
    "feasible_polygon",
    "clip_rect_by_half_plane",
    # Boundary
    "boundary_segment",
    "line_rectangle_hits",
]
