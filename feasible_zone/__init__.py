"""
Feasible Zone Engine
====================

Bounded Context: Feasible regions of linear inequality systems in the plane.

Design Philosophy:
- Separation of Concerns: Geometry, Analytics, Rendering-to-text separated
- Immutable inputs and outputs (frozen dataclasses, tuples)
- Every tolerance named once (geometry/tolerances.py)
- Stateless functions; the evaluator only caches target geometry

Architecture:

    feasible_zone/
    ├── geometry/            # Pure geometry (immutable, stateless)
    │   ├── shapes.py        # Point, Segment, Domain
    │   ├── halfplane.py     # Comparator, Constraint, membership
    │   ├── lines.py         # CanonicalLine, same_line, line_from_points
    │   ├── clipper.py       # Sutherland-Hodgman feasible polygons
    │   └── boundary.py      # Visible chord of a line in the domain
    │
    ├── analytics/           # Derived quantities
    │   ├── polygon.py       # Area, vertices, binding status
    │   ├── equivalence.py   # Lattice equivalence of systems
    │   └── evaluator.py     # ZoneEvaluator, ZoneReport
    │
    ├── number_line/         # 1D rules (intervals, distance rules)
    ├── describe.py          # Text rendering of constraints and rules
    └── logging/             # Structured JSON logging

Usage:

    from feasible_zone import Constraint, Domain, feasible_polygon, polygon_area

    domain = Domain(0, 12, 0, 12)
    system = [
        Constraint(a=2, b=1, c=12, comp="<=", id="budget"),
        Constraint(a=1, b=0, c=2, comp=">=", id="security"),
    ]
    polygon = feasible_polygon(domain, system)
    polygon_area(polygon)                      # 16.0

    from feasible_zone import ZoneEvaluator

    evaluator = ZoneEvaluator(domain, target=system)
    report = evaluator.evaluate(player_system, probe=(3, 2))
    report.matches_target, report.statuses
"""

# Geometry Layer (immutable, stateless)
from feasible_zone.geometry import (
    GeometryError,
    DegenerateConstraintError,
    CoincidentPointsError,
    InvalidDomainError,
    Point,
    Segment,
    Domain,
    Comparator,
    Constraint,
    inside,
    inside_all,
    CanonicalLine,
    line_from_points,
    same_line,
    inequalities_match,
    clip_polygon_by_half_plane,
    feasible_polygon,
    clip_rect_by_half_plane,
    boundary_segment,
)

# Analytics Layer
from feasible_zone.analytics import (
    BindingStatus,
    polygon_area,
    is_empty_region,
    polygon_vertices,
    binding_status,
    binding_report,
    systems_equivalent,
    canonical_systems_equal,
    ZoneEvaluator,
    ZoneReport,
)

# Number line
from feasible_zone.number_line import Interval, BoundRule, DistanceRule

__all__ = [
    # Errors
    "GeometryError",
    "DegenerateConstraintError",
    "CoincidentPointsError",
    "InvalidDomainError",
    # Geometry
    "Point",
    "Segment",
    "Domain",
    "Comparator",
    "Constraint",
    "inside",
    "inside_all",
    "CanonicalLine",
    "line_from_points",
    "same_line",
    "inequalities_match",
    "clip_polygon_by_half_plane",
    "feasible_polygon",
    "clip_rect_by_half_plane",
    "boundary_segment",
    # Analytics
    "BindingStatus",
    "polygon_area",
    "is_empty_region",
    "polygon_vertices",
    "binding_status",
    "binding_report",
    "systems_equivalent",
    "canonical_systems_equal",
    "ZoneEvaluator",
    "ZoneReport",
    # Number line
    "Interval",
    "BoundRule",
    "DistanceRule",
]

__version__ = "0.1.0"
