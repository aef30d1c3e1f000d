"""
Distance Rules
==============

|x − m| ◻ r on the real line: a "stay within r of m" bubble (≤, <) or a
"keep at least r away from m" exclusion (≥, >).

Membership loosens the boundary by the same tolerance the half-plane
model uses, so a point exactly at distance r passes a strict rule only
when it is farther than r + eps.
"""

from dataclasses import dataclass
from typing import Tuple

from feasible_zone.geometry.halfplane import Comparator
from feasible_zone.geometry.tolerances import MEMBERSHIP_EPS, RULE_MATCH_EPS
from feasible_zone.number_line.intervals import Interval


@dataclass(frozen=True)
class DistanceRule:
    center: float
    radius: float
    comp: Comparator = Comparator.LE

    def __post_init__(self):
        object.__setattr__(self, 'center', float(self.center))
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'comp', Comparator.parse(self.comp))
        if self.radius < 0:
            raise ValueError(f"DistanceRule radius must be >= 0, got {self.radius}")

    @property
    def is_inner(self) -> bool:
        """True for ≤/< (one closed band), False for ≥/> (two rays)."""
        return self.comp in (Comparator.LE, Comparator.LT)

    def accepts(self, x: float, eps: float = MEMBERSHIP_EPS) -> bool:
        d = abs(x - self.center)
        r = self.radius
        if self.comp is Comparator.LE:
            return d <= r + eps
        if self.comp is Comparator.LT:
            return d < r - eps
        if self.comp is Comparator.GE:
            return d >= r - eps
        return d > r + eps

    def matches(self, other: 'DistanceRule', eps: float = RULE_MATCH_EPS) -> bool:
        return (
            abs(self.center - other.center) < eps
            and abs(self.radius - other.radius) < eps
            and self.comp is other.comp
        )

    def to_intervals(self) -> Tuple[Interval, ...]:
        """
        Exact solution set as intervals.

        Returns:
            (band,) for ≤/<, (left ray, right ray) for ≥/>
        """
        lo = self.center - self.radius
        hi = self.center + self.radius
        strict = self.comp.is_strict
        if self.is_inner:
            return (Interval(lo, hi, lower_open=strict, upper_open=strict),)
        return (
            Interval(None, lo, upper_open=strict),
            Interval(hi, None, lower_open=strict),
        )
