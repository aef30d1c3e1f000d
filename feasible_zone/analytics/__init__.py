"""
Analytics Layer
===============

Bounded Context: Derived quantities of feasible regions.

Responsibilities:
- Area and vertex enumeration of feasible polygons
- Binding / slack / violated classification at a point
- Equivalence of two constraint systems
- Per-edit evaluation snapshots (ZoneReport)

Design Philosophy:
- Read-only functions over immutable geometry
- Immutable outputs (ZoneReport)
- Evaluator holds only precomputed target geometry
"""

from feasible_zone.analytics.polygon import (
    BindingStatus,
    signed_area,
    polygon_area,
    is_empty_region,
    polygon_vertices,
    binding_status,
    binding_report,
)
from feasible_zone.analytics.equivalence import (
    lattice_axes,
    first_mismatch,
    systems_equivalent,
    canonical_systems_equal,
    systems_match_by_line,
)
from feasible_zone.analytics.evaluator import ZoneEvaluator, ZoneReport

__all__ = [
    "BindingStatus",
    "signed_area",
    "polygon_area",
    "is_empty_region",
    "polygon_vertices",
    "binding_status",
    "binding_report",
    "lattice_axes",
    "first_mismatch",
    "systems_equivalent",
    "canonical_systems_equal",
    "systems_match_by_line",
    "ZoneEvaluator",
    "ZoneReport",
]
