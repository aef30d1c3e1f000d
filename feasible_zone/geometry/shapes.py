"""
Geometric Shapes Module
========================

Pure value types - NO state, NO side effects.

Design:
- Immutable shapes (NamedTuple / frozen dataclass pattern)
- Domain rectangle stands in for the unbounded plane
- Polygons are plain tuples of points, implicitly closed
"""

import math
import numpy as np
from dataclasses import dataclass, asdict
from typing import Dict, NamedTuple, Sequence, Tuple

from feasible_zone.geometry.errors import InvalidDomainError


class Point(NamedTuple):
    """Immutable (x, y) coordinate pair."""

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


class Segment(NamedTuple):
    """Immutable segment between two points (p -> q)."""

    p: Point
    q: Point

    @property
    def length(self) -> float:
        return self.p.distance_to(self.q)


# Ordered vertex sequence, last vertex connects back to the first.
Polygon = Tuple[Point, ...]


@dataclass(frozen=True)
class Domain:
    """
    Immutable axis-aligned world rectangle.

    Every feasible region is intersected with this rectangle, so an
    "unbounded" region is represented by its clipped-to-domain part.

    Attributes:
        xmin, xmax: Horizontal bounds (xmin < xmax)
        ymin, ymax: Vertical bounds (ymin < ymax)

    Example:
        >>> dom = Domain(0, 12, 0, 12)
        >>> dom.corners()[1]
        Point(x=12.0, y=0.0)
    """

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        """Validate bounds."""
        for name in ("xmin", "xmax", "ymin", "ymax"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidDomainError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, float(value))

        if self.xmin >= self.xmax:
            raise InvalidDomainError(
                f"xmin must be < xmax, got [{self.xmin}, {self.xmax}]"
            )
        if self.ymin >= self.ymax:
            raise InvalidDomainError(
                f"ymin must be < ymax, got [{self.ymin}, {self.ymax}]"
            )

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> Polygon:
        """
        Rectangle corners in counter-clockwise order starting at (xmin, ymin).

        This fixed winding is the starting polygon for every clip.
        """
        return (
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        )

    def edges(self) -> Tuple[Segment, ...]:
        """Left, right, bottom and top edges (in that order)."""
        return (
            Segment(Point(self.xmin, self.ymin), Point(self.xmin, self.ymax)),
            Segment(Point(self.xmax, self.ymin), Point(self.xmax, self.ymax)),
            Segment(Point(self.xmin, self.ymin), Point(self.xmax, self.ymin)),
            Segment(Point(self.xmin, self.ymax), Point(self.xmax, self.ymax)),
        )

    def contains(self, point: Sequence[float], tol: float = 0.0) -> bool:
        """Check if a point lies in the rectangle (widened by tol)."""
        x, y = point[0], point[1]
        return (
            self.xmin - tol <= x <= self.xmax + tol
            and self.ymin - tol <= y <= self.ymax + tol
        )

    def clamp(self, point: Sequence[float]) -> Point:
        """Clamp a point into the rectangle."""
        return Point(
            min(max(point[0], self.xmin), self.xmax),
            min(max(point[1], self.ymin), self.ymax),
        )

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON/YAML-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Domain":
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: xmin, xmax, ymin, ymax

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                xmin=float(data["xmin"]),
                xmax=float(data["xmax"]),
                ymin=float(data["ymin"]),
                ymax=float(data["ymax"]),
            )
        except KeyError as e:
            raise ValueError(f"Missing required Domain field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Domain data: {e}")


def as_array(polygon: Sequence[Sequence[float]]) -> np.ndarray:
    """Polygon as an Nx2 float array (empty polygons give shape (0, 2))."""
    if len(polygon) == 0:
        return np.empty((0, 2), dtype=float)
    return np.asarray(polygon, dtype=float).reshape(-1, 2)


def rotate(polygon: Polygon, k: int) -> Polygon:
    """Cyclically relabel the start vertex (same closed boundary)."""
    if not polygon:
        return polygon
    k %= len(polygon)
    return polygon[k:] + polygon[:k]
