import math
from typing import Tuple
from .exceptions import InvalidBoundsError

def parse_number(value, label: str = "value") -> float:
    """
    Parses a bound, pivot or base to a finite float.

    Raises:
        InvalidBoundsError: If the value is not numeric or not finite.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidBoundsError(f"Cannot parse {label} {value!r} as a number")

    if not math.isfinite(number):
        raise InvalidBoundsError(f"{label.capitalize()} must be finite, got {value!r}")

    return number

def order_bounds(low, high) -> Tuple[float, float]:
    """Parses both bounds and returns them as (lower, upper)."""
    low = parse_number(low, "lower bound")
    high = parse_number(high, "upper bound")
    return min(low, high), max(low, high)

def center_bounds(lower: float, upper: float, pivot: float) -> Tuple[float, float]:
    """
    Recenters [lower, upper] on pivot, keeping the wider of the two half-widths.

    The result is symmetric around pivot and contains the original interval
    whenever pivot lies inside it.
    """
    half_width = max(abs(pivot - lower), abs(pivot - upper))
    return pivot - half_width, pivot + half_width
