"""
Polygon Analytics Module
========================

Derived quantities of a feasible polygon and of a query point.

Design:
- Read-only (never mutates inputs)
- Area via the shoelace formula (numpy)
- Binding / slack / violated classification per constraint
"""

import numpy as np
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from feasible_zone.geometry.halfplane import Constraint, inside, residual
from feasible_zone.geometry.shapes import as_array
from feasible_zone.geometry.tolerances import BINDING_TOL


class BindingStatus(str, Enum):
    """Status of one constraint at one point."""
    BINDING = "binding"      # satisfied with equality (on the boundary)
    SLACK = "slack"          # satisfied with margin
    VIOLATED = "violated"    # not satisfied


def signed_area(polygon: Sequence[Sequence[float]]) -> float:
    """
    Signed shoelace area (positive = counter-clockwise).

    Returns 0.0 for fewer than 3 vertices.
    """
    if len(polygon) < 3:
        return 0.0
    pts = as_array(polygon)
    x, y = pts[:, 0], pts[:, 1]
    s = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return float(s) / 2.0


def polygon_area(polygon: Sequence[Sequence[float]]) -> float:
    """
    Area enclosed by an implicitly closed polygon.

    Independent of winding direction and of which vertex comes first.
    Empty regions (fewer than 3 vertices) have area 0.
    """
    return abs(signed_area(polygon))


def is_empty_region(polygon: Sequence[Sequence[float]]) -> bool:
    """A polygon with fewer than 3 vertices denotes an empty feasible region."""
    return len(polygon) < 3


def polygon_vertices(
    polygon: Sequence[Sequence[float]],
    decimals: int = 2,
) -> List[Tuple[float, float]]:
    """Vertex coordinates rounded for display (hover labels, reports)."""
    # "+ 0.0" turns -0.0 into 0.0
    return [
        (round(float(v[0]), decimals) + 0.0, round(float(v[1]), decimals) + 0.0)
        for v in polygon
    ]


def binding_status(
    point: Sequence[float],
    k: Constraint,
    tol: float = BINDING_TOL,
) -> BindingStatus:
    """
    Classify a constraint at a point.

    VIOLATED if the point fails inside(); otherwise BINDING when the
    residual is within tol (coarser than the membership tolerance, so a
    point dragged near a line registers as on it), else SLACK.
    """
    if not inside(point, k):
        return BindingStatus.VIOLATED
    if abs(residual(point, k)) <= tol:
        return BindingStatus.BINDING
    return BindingStatus.SLACK


def binding_report(
    point: Sequence[float],
    constraints: Iterable[Constraint],
    tol: float = BINDING_TOL,
) -> Dict[str, BindingStatus]:
    """
    Status of every constraint at a point.

    Keys are constraint ids (falling back to "k<index>" when id is empty).

    Raises:
        ValueError: If two constraints resolve to the same key
    """
    report: Dict[str, BindingStatus] = {}
    for idx, k in enumerate(constraints):
        key = k.id or f"k{idx}"
        if key in report:
            raise ValueError(f"Duplicate constraint key in report: '{key}'")
        report[key] = binding_status(point, k, tol)
    return report
