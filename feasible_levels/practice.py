"""
Practice starting points.

A learner does not start from the target system: they start from a noisy
copy that they have to fix until it matches the target again.
"""

import math
from dataclasses import replace
from typing import List, Sequence

from feasible_zone.geometry.halfplane import Comparator, Constraint


def round_half_up(value: float, step: float = 0.5) -> float:
    """Round to the nearest multiple of step, ties going up."""
    return math.floor(value / step + 0.5) * step


def perturb_system(
    constraints: Sequence[Constraint],
    shift: float = 1.0,
    step: float = 0.5,
) -> List[Constraint]:
    """
    Noisy copy of a target system.

    - c moves by +shift on even indices and -shift on odd indices,
      then snaps to the nearest multiple of step
    - the first constraint turns strict when it is a "≤"

    Ids, labels and colors are kept so the copy lines up with the target
    in binding reports.

    Example:
        >>> target = [Constraint(2, 1, 12, "<="), Constraint(1, 0, 2, ">=")]
        >>> [(k.c, k.comp.value) for k in perturb_system(target)]
        [(13.0, '<'), (1.0, '>=')]
    """
    noisy = []
    for i, k in enumerate(constraints):
        delta = shift if i % 2 == 0 else -shift
        comp = k.comp
        if i == 0 and comp is Comparator.LE:
            comp = Comparator.LT
        noisy.append(replace(k, c=round_half_up(k.c + delta, step), comp=comp))
    return noisy
