"""
Number-Line Intervals
=====================

One-dimensional counterparts of the half-plane model.

- Interval: optional lower/upper bounds with open/closed ends
- BoundRule: inclusive min/max rule where either side may be switched off
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from feasible_zone.geometry.tolerances import RULE_MATCH_EPS


@dataclass(frozen=True)
class Interval:
    """
    Interval on the real line.

    A None bound means unbounded on that side; the open flag of an
    unbounded side is ignored.

    Example:
        >>> Interval(lower=-2, upper=5, upper_open=True).contains(5)
        False
    """

    lower: Optional[float] = None
    upper: Optional[float] = None
    lower_open: bool = False
    upper_open: bool = False

    def __post_init__(self):
        for name in ('lower', 'upper'):
            value = getattr(self, name)
            if value is None:
                continue
            value = float(value)
            if math.isnan(value):
                raise ValueError(f"Interval {name} must be a number, got NaN")
            object.__setattr__(self, name, value)

        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise ValueError(
                f"Interval lower ({self.lower}) must be <= upper ({self.upper})"
            )

    @property
    def is_bounded(self) -> bool:
        return self.lower is not None and self.upper is not None

    @property
    def length(self) -> float:
        """Length of the interval (inf when unbounded)."""
        if not self.is_bounded:
            return math.inf
        return self.upper - self.lower

    def contains(self, x: float) -> bool:
        if self.lower is not None:
            if self.lower_open and not x > self.lower:
                return False
            if not self.lower_open and not x >= self.lower:
                return False
        if self.upper is not None:
            if self.upper_open and not x < self.upper:
                return False
            if not self.upper_open and not x <= self.upper:
                return False
        return True

    def matches(self, other: 'Interval', eps: float = RULE_MATCH_EPS) -> bool:
        """Same bounds (within eps) and same open flags on every bounded side."""
        return (
            _bound_matches(self.lower, other.lower, eps)
            and _bound_matches(self.upper, other.upper, eps)
            and (self.lower is None or self.lower_open == other.lower_open)
            and (self.upper is None or self.upper_open == other.upper_open)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lower': self.lower,
            'upper': self.upper,
            'lower_open': self.lower_open,
            'upper_open': self.upper_open,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Interval':
        return cls(
            lower=data.get('lower'),
            upper=data.get('upper'),
            lower_open=bool(data.get('lower_open', False)),
            upper_open=bool(data.get('upper_open', False)),
        )


def _bound_matches(u: Optional[float], v: Optional[float], eps: float) -> bool:
    if u is None or v is None:
        return u is None and v is None
    return abs(u - v) < eps


@dataclass(frozen=True)
class BoundRule:
    """
    Inclusive min/max rule, e.g. a speed zone "at least 20 and at most 50".

    Each side can be switched off; a switched-off bound is ignored.
    """

    use_lower: bool
    use_upper: bool
    lower: float = 0.0
    upper: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'lower', float(self.lower))
        object.__setattr__(self, 'upper', float(self.upper))

        if self.use_lower and self.use_upper and self.lower > self.upper:
            raise ValueError(
                f"BoundRule lower ({self.lower}) must be <= upper ({self.upper})"
            )

    def contains(self, value: float) -> bool:
        if self.use_lower and value < self.lower:
            return False
        if self.use_upper and value > self.upper:
            return False
        return True

    def matches(self, other: 'BoundRule') -> bool:
        """Same switches and same bounds after rounding to whole numbers."""
        if self.use_lower != other.use_lower or self.use_upper != other.use_upper:
            return False
        if self.use_lower and round(self.lower) != round(other.lower):
            return False
        if self.use_upper and round(self.upper) != round(other.upper):
            return False
        return True

    def to_interval(self) -> Interval:
        return Interval(
            lower=self.lower if self.use_lower else None,
            upper=self.upper if self.use_upper else None,
        )
