"""
Numeric constants shared by the logarithmic scale engine.

Floating point logarithms of exact powers are not always exact
(ln(1000) / ln(10) evaluates to 2.9999999999999996), so exponents that land
within LOG_SNAP_TOL of an integer are snapped to it before floor/ceil.
"""

DEFAULT_BASE = 10.0

# Exponent snapping tolerance (dimensionless, in units of one power of the base)
LOG_SNAP_TOL = 1e-9

# Returned by pct() when the log span of the scale is zero
DEGENERATE_PCT = 50.0

ORIGIN_MIN = "min"
ORIGIN_MAX = "max"
VALID_ORIGINS = (ORIGIN_MIN, ORIGIN_MAX)
