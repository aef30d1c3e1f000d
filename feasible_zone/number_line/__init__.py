"""
Number-Line Rules
=================

One-dimensional rules sharing the comparator and tolerance conventions of
the half-plane model: intervals, min/max bound rules and distance rules.
"""

from feasible_zone.number_line.intervals import BoundRule, Interval
from feasible_zone.number_line.distance import DistanceRule

__all__ = [
    "Interval",
    "BoundRule",
    "DistanceRule",
]
