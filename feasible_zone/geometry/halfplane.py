"""
Half-Plane Module
=================

Linear inequalities a*x + b*y (comp) c as directed half-planes.

Design:
- Immutable constraints (frozen dataclass pattern)
- Tolerance always loosens the boundary, never tightens it
- Vectorized mask variant for lattice sampling (numpy)
"""

import math
import numpy as np
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Iterable, Sequence

from feasible_zone.geometry.errors import DegenerateConstraintError
from feasible_zone.geometry.tolerances import MEMBERSHIP_EPS


class Comparator(str, Enum):
    """Inequality comparator."""

    LE = "<="
    LT = "<"
    GE = ">="
    GT = ">"

    @classmethod
    def parse(cls, value: Any) -> "Comparator":
        """
        Parse a comparator from its ASCII or unicode spelling.

        Accepts "<=", "<", ">=", ">", "≤", "≥" and Comparator instances.

        Raises:
            ValueError: If value is not a known comparator
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        text = _UNICODE_ALIASES.get(text, text)
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"Invalid comparator: {value!r}. "
                f"Must be one of {[c.value for c in cls]}"
            )

    @property
    def is_strict(self) -> bool:
        return self in (Comparator.LT, Comparator.GT)

    @property
    def symbol(self) -> str:
        """Unicode symbol for display."""
        return _SYMBOLS[self]

    def flipped(self) -> "Comparator":
        """Comparator after multiplying both sides by -1."""
        return _FLIPPED[self]

    def toggled_strictness(self) -> "Comparator":
        """Same direction, opposite strictness (<= <-> <, >= <-> >)."""
        return _TOGGLED[self]


_UNICODE_ALIASES = {"≤": "<=", "≥": ">=", "=<": "<=", "=>": ">="}

_SYMBOLS = {
    Comparator.LE: "≤",
    Comparator.LT: "<",
    Comparator.GE: "≥",
    Comparator.GT: ">",
}

_FLIPPED = {
    Comparator.LE: Comparator.GE,
    Comparator.LT: Comparator.GT,
    Comparator.GE: Comparator.LE,
    Comparator.GT: Comparator.LT,
}

_TOGGLED = {
    Comparator.LE: Comparator.LT,
    Comparator.LT: Comparator.LE,
    Comparator.GE: Comparator.GT,
    Comparator.GT: Comparator.GE,
}


@dataclass(frozen=True)
class Constraint:
    """
    Immutable half-plane a*x + b*y (comp) c.

    The engine only reads (a, b, c, comp). The remaining fields are
    presentation metadata carried along for callers (levels, panels).

    Attributes:
        a, b: Normal vector components, not both zero
        c: Right-hand side
        comp: Comparator (str values are parsed)
        id: Identifier used in binding reports
        label: Display label (e.g. "Budget ≤")
        color: Display color name

    Invariants:
        - (a, b) != (0, 0)

    Example:
        >>> budget = Constraint(a=2, b=1, c=12, comp="<=", id="budget")
        >>> inside(Point(0, 0), budget)
        True
    """

    a: float
    b: float
    c: float
    comp: Comparator = Comparator.LE
    id: str = ""
    label: str = ""
    color: str = ""

    def __post_init__(self):
        """Validate and normalize fields."""
        object.__setattr__(self, "comp", Comparator.parse(self.comp))
        for name in ("a", "b", "c"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"Constraint {name} must be finite, got {value}")
            object.__setattr__(self, name, value)

        if self.a == 0.0 and self.b == 0.0:
            raise DegenerateConstraintError(
                f"Constraint '{self.id or '?'}' has a zero normal vector (a = b = 0)"
            )

    @property
    def coefficients(self) -> tuple:
        """Numeric part (a, b, c, comp) - what the engine actually uses."""
        return (self.a, self.b, self.c, self.comp)

    def contains(self, point: Sequence[float], eps: float = MEMBERSHIP_EPS) -> bool:
        """Shorthand for inside(point, self)."""
        return inside(point, self, eps)

    def residual(self, point: Sequence[float]) -> float:
        """Signed residual a*x + b*y - c."""
        return residual(point, self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON/YAML-compatible dict."""
        data = asdict(self)
        data["comp"] = self.comp.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Constraint":
        """Deserialize from dict.

        Args:
            data: Keys a, b, c, comp (required) and id, label, color (optional)

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                a=float(data["a"]),
                b=float(data["b"]),
                c=float(data["c"]),
                comp=data["comp"],
                id=str(data.get("id", "")),
                label=str(data.get("label", "")),
                color=str(data.get("color", "")),
            )
        except KeyError as e:
            raise ValueError(f"Missing required Constraint field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid Constraint data: {e}")


def residual(point: Sequence[float], k: Constraint) -> float:
    """Signed residual a*x + b*y - c of a point against a constraint."""
    return k.a * point[0] + k.b * point[1] - k.c


def inside(point: Sequence[float], k: Constraint, eps: float = MEMBERSHIP_EPS) -> bool:
    """
    Check if a point satisfies a half-plane constraint.

    The tolerance is applied so it always loosens the boundary:
        <=  s <= c + eps
        <   s <  c - eps
        >=  s >= c - eps
        >   s >  c + eps

    Args:
        point: (x, y) coordinates
        k: Constraint to test
        eps: Absolute tolerance

    Returns:
        True if the point is in the half-plane
    """
    s = k.a * point[0] + k.b * point[1]
    if k.comp is Comparator.LE:
        return s <= k.c + eps
    if k.comp is Comparator.LT:
        return s < k.c - eps
    if k.comp is Comparator.GE:
        return s >= k.c - eps
    return s > k.c + eps


def inside_all(point: Sequence[float], constraints: Iterable[Constraint]) -> bool:
    """Check a point against every constraint (True for an empty system)."""
    return all(inside(point, k) for k in constraints)


def half_plane_mask(
    xs: np.ndarray,
    ys: np.ndarray,
    k: Constraint,
    eps: float = MEMBERSHIP_EPS,
) -> np.ndarray:
    """
    Vectorized inside() over coordinate arrays.

    Args:
        xs, ys: Arrays of equal shape
        k: Constraint to test
        eps: Absolute tolerance (same semantics as inside())

    Returns:
        Boolean array of the same shape, True = inside
    """
    s = k.a * np.asarray(xs, dtype=float) + k.b * np.asarray(ys, dtype=float)
    if k.comp is Comparator.LE:
        return s <= k.c + eps
    if k.comp is Comparator.LT:
        return s < k.c - eps
    if k.comp is Comparator.GE:
        return s >= k.c - eps
    return s > k.c + eps


def system_mask(
    xs: np.ndarray,
    ys: np.ndarray,
    constraints: Iterable[Constraint],
) -> np.ndarray:
    """Vectorized inside_all(): conjunction of every half-plane mask."""
    mask = np.ones(np.shape(xs), dtype=bool)
    for k in constraints:
        mask &= half_plane_mask(xs, ys, k)
    return mask
