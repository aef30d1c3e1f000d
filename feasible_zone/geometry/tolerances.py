"""
Numerical Tolerances
====================

Every floating-point threshold used by the engine, in one place.

Ordering (tightest to loosest):
    MEMBERSHIP_EPS < VERTEX_MERGE_EPS < LINE_MATCH_TOL

Membership is the tightest so that points on a boundary are decided by the
comparator, not by rounding noise. Line matching is the loosest because line
parameters coming from dragged handles drift more than typed coefficients.
"""

# Half-plane membership slack (always loosens the boundary)
MEMBERSHIP_EPS = 1e-9

# Denominator guard for edge/line intersection while clipping
CLIP_PARALLEL_EPS = 1e-12

# Denominator guard for line/rectangle-edge intersection (visible chord)
BOUNDARY_PARALLEL_EPS = 1e-9

# Slack on the edge parameter t and on rectangle containment (visible chord)
BOUNDARY_SLACK = 1e-6

# Consecutive clipped vertices closer than this are merged
VERTEX_MERGE_EPS = 1e-6

# |a| below this counts as zero for the canonical sign rule
SIGN_EPS = 1e-6

# Component-wise tolerance for "same line"
LINE_MATCH_TOL = 1e-2

# |residual| below this counts as binding (coarser than membership)
BINDING_TOL = 1e-2

# Lattice spacing for the sampling equivalence test
LATTICE_STEP = 0.5

# Exact-state comparison of number-line rules
RULE_MATCH_EPS = 1e-9

# |a| or |b| below this counts as an axis-parallel line (slopes, intercepts)
AXIS_PARALLEL_EPS = 1e-9

# Handle separation below this makes a line through two points undefined
COINCIDENT_EPS = 1e-12
