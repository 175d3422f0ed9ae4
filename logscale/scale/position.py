import numpy as np
from ..utils.power_utils import signed_log_array
from .constants import DEGENERATE_PCT
from .derived import DerivedScale

def _inner_exponent(log_far: float) -> float:
    """Exponent of the zero-adjacent end of one half of a zero-containing scale."""
    return log_far - abs(log_far)

def map_position(values, derived: DerivedScale, degenerate_pct: float = DEGENERATE_PCT) -> np.ndarray:
    """
    Maps values to their percentage position measured from derived.min.

    When the scale contains zero the negative and positive halves are two
    independent log ranges, weighted by their lengths |log_min| and
    |log_max|; zero sits exactly at the boundary between them. Each half
    ends at its inner exponent, the unit power when its far end is at
    least 1 in magnitude, and values of smaller magnitude collapse onto
    zero's position. A scale that only touches zero is the same mapping
    with one half of length zero. Otherwise the signed log of each value
    is interpolated between log_min and log_max; dividing by the signed
    log_range keeps the result increasing from min to max on negative
    scales as well.

    Values outside [min, max] are extrapolated, never clamped. A scale
    whose log span is zero maps everything to degenerate_pct.

    Args:
        values: Scalar or array-like of values.
        derived (DerivedScale): A calculated scale.
        degenerate_pct (float): Result for zero-width log spans.

    Returns:
        np.ndarray: Percentages with the same shape as values.
    """
    values = np.asarray(values, dtype=float)
    logs = signed_log_array(values, derived.base, derived.tol)

    if derived.min <= 0 <= derived.max:
        log_neg = abs(derived.log_min)
        log_total = log_neg + abs(derived.log_max)
        if log_total == 0:
            return np.full(values.shape, degenerate_pct)

        negative_logs = np.maximum(logs, _inner_exponent(derived.log_min))
        positive_logs = np.maximum(logs, _inner_exponent(derived.log_max))

        negative_side = (derived.log_min - negative_logs) / log_total * 100.0
        positive_side = 100.0 - (derived.log_max - positive_logs) / log_total * 100.0
        zero_position = log_neg / log_total * 100.0

        return np.where(values < 0, negative_side,
                        np.where(values > 0, positive_side, zero_position))

    if derived.log_range == 0:
        return np.full(values.shape, degenerate_pct)

    return (logs - derived.log_min) / derived.log_range * 100.0
