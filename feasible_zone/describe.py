"""
Text Rendering
==============

Human-readable forms of constraints and number-line rules, used by the CLI
and by level descriptions.

Example:
    >>> describe_constraint(Constraint(a=2, b=1, c=12, comp="<="))
    '2x + y ≤ 12'
    >>> describe_split(DistanceRule(center=21, radius=2, comp=">="))
    'x ≤ 19  or  x ≥ 23'
"""

from typing import Iterable, List

from feasible_zone.geometry.halfplane import Comparator, Constraint
from feasible_zone.number_line.distance import DistanceRule
from feasible_zone.number_line.intervals import BoundRule, Interval

INTEGER_EPS = 1e-6


def format_number(value: float) -> str:
    """Whole numbers without decimals, everything else with one decimal."""
    value = float(value)
    if abs(value - round(value)) < INTEGER_EPS:
        return str(int(round(value)))
    # "+ 0.0" turns -0.0 into 0.0
    return f"{round(value, 1) + 0.0:.1f}"


def _term(coef: float, var: str, first: bool) -> str:
    sign = "-" if coef < 0 else "+"
    magnitude = abs(coef)
    body = var if abs(magnitude - 1.0) < INTEGER_EPS else f"{format_number(magnitude)}{var}"
    if first:
        return f"-{body}" if sign == "-" else body
    return f" {sign} {body}"


def describe_constraint(k: Constraint) -> str:
    """Render a*x + b*y (comp) c, dropping zero terms and unit coefficients."""
    lhs = ""
    for coef, var in ((k.a, "x"), (k.b, "y")):
        if coef == 0.0:
            continue
        lhs += _term(coef, var, first=not lhs)
    return f"{lhs} {k.comp.symbol} {format_number(k.c)}"


def describe_system(constraints: Iterable[Constraint]) -> str:
    """One rendered constraint per line, prefixed with its label when set."""
    lines: List[str] = []
    for k in constraints:
        text = describe_constraint(k)
        lines.append(f"{k.label}: {text}" if k.label else text)
    return "\n".join(lines)


def describe_distance(rule: DistanceRule) -> str:
    """Absolute-value form, e.g. "|x - 21| ≤ 2"."""
    center = rule.center
    if center == 0.0:
        inner = "x"
    elif center < 0:
        inner = f"x + {format_number(-center)}"
    else:
        inner = f"x - {format_number(center)}"
    return f"|{inner}| {rule.comp.symbol} {format_number(rule.radius)}"


def describe_split(rule: DistanceRule) -> str:
    """Absolute-value rule rewritten without the absolute value."""
    lo = format_number(rule.center - rule.radius)
    hi = format_number(rule.center + rule.radius)
    if rule.is_inner:
        sym = "<" if rule.comp.is_strict else "≤"
        return f"{lo} {sym} x {sym} {hi}"
    if rule.comp.is_strict:
        return f"x < {lo}  or  x > {hi}"
    return f"x ≤ {lo}  or  x ≥ {hi}"


def describe_interval(interval: Interval, var: str = "x") -> str:
    lower, upper = interval.lower, interval.upper
    lower_sym = "<" if interval.lower_open else "≤"
    upper_sym = "<" if interval.upper_open else "≤"

    if lower is None and upper is None:
        return f"all {var}"
    if lower is None:
        return f"{var} {upper_sym} {format_number(upper)}"
    if upper is None:
        ge = Comparator.GT if interval.lower_open else Comparator.GE
        return f"{var} {ge.symbol} {format_number(lower)}"
    return f"{format_number(lower)} {lower_sym} {var} {upper_sym} {format_number(upper)}"


def describe_bound_rule(rule: BoundRule, var: str = "v") -> str:
    if not rule.use_lower and not rule.use_upper:
        return "no limit"
    return describe_interval(rule.to_interval(), var)
