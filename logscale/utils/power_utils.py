import math
import numpy as np
from typing import List, NamedTuple
from ..scale.constants import LOG_SNAP_TOL

class PowerBracket(NamedTuple):
    """The two signed powers of the base enclosing a value's magnitude."""
    lower: float
    upper: float

def effective_base(base: float) -> float:
    """
    Returns the base actually used for exponent arithmetic.

    A base below one produces the same set of powers as its reciprocal
    (powers of 0.5 are powers of 2), but with floor and ceil swapped, so
    all calculations run on the reciprocal instead.
    """
    base = float(base)
    return 1.0 / base if base < 1.0 else base

def snap_exponent(log_value: float, tol: float = LOG_SNAP_TOL) -> float:
    """Snaps an exponent to the nearest integer when it is within tol of it."""
    nearest = round(log_value)
    if abs(log_value - nearest) < tol:
        return float(nearest)
    return log_value

def signed_log(value: float, base: float, tol: float = LOG_SNAP_TOL) -> float:
    """
    Logarithm of |value| in the given base, with signed_log(0) == 0.

    Args:
        value (float): Any finite number.
        base (float): Logarithm base, greater than one.
        tol (float): Snapping tolerance for near-integer exponents.

    Returns:
        float: ln(|value|) / ln(base), or 0.0 for a zero value.
    """
    if value == 0:
        return 0.0
    return snap_exponent(math.log(abs(value)) / math.log(base), tol)

def signed_log_array(values, base: float, tol: float = LOG_SNAP_TOL) -> np.ndarray:
    """Vectorized signed_log over an array-like of values."""
    values = np.asarray(values, dtype=float)
    with np.errstate(divide='ignore', invalid='ignore'):
        logs = np.log(np.abs(values)) / np.log(base)
        logs = np.where(values == 0, 0.0, logs)
        nearest = np.round(logs)
        logs = np.where(np.abs(logs - nearest) < tol, nearest, logs)
    return logs

def nearest_powers(value: float, base: float, tol: float = LOG_SNAP_TOL) -> PowerBracket:
    """
    Finds the powers of the base immediately below and above |value|.

    Both powers carry the sign of value, so for a negative value `lower` is
    the one nearer to zero. A value that already is a power of the base is
    its own bracket.

    Args:
        value (float): The raw boundary value.
        base (float): Logarithm base, greater than one.
        tol (float): Snapping tolerance for near-integer exponents.

    Returns:
        PowerBracket: (lower, upper) bracketing powers, (0.0, 0.0) for zero.
    """
    if value == 0:
        return PowerBracket(0.0, 0.0)

    sign = -1.0 if value < 0 else 1.0
    log_value = signed_log(value, base, tol)

    return PowerBracket(
        lower=sign * base ** math.floor(log_value),
        upper=sign * base ** math.ceil(log_value)
    )

def power_range(start: int, stop: int, base: float, negate: bool = False) -> List[float]:
    """
    Generates base**e for every integer exponent e from start to stop inclusive.

    The exponents run in whichever direction leads from start to stop. With
    negate=True every power is negated, which turns a descending exponent
    run into ascending values.
    """
    step = 1 if stop >= start else -1
    exponents = np.arange(start, stop + step, step, dtype=float)
    powers = np.power(float(base), exponents)
    if negate:
        powers = -powers
    return powers.tolist()
