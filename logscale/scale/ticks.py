import math
from typing import List
from ..utils.power_utils import power_range
from .derived import DerivedScale

def _exponent_span(derived: DerivedScale):
    """
    Integer exponents of the far ends of the scale.

    For a negative scale log_min is the larger magnitude, so it rounds
    with ceil and log_max with floor; for a non-negative scale the opposite
    holds. Either way the run never leaves [min, max].
    """
    if derived.negative:
        return math.ceil(derived.log_min), math.floor(derived.log_max)
    return math.floor(derived.log_min), math.ceil(derived.log_max)

def generate_ticks(derived: DerivedScale, include_unit_power: bool = True) -> List[float]:
    """
    Enumerates every power-of-base tick between derived.min and derived.max.

    Args:
        derived (DerivedScale): A calculated scale.
        include_unit_power (bool): Keep the -1 and 1 ticks.

    Returns:
        List[float]: Ticks in strictly ascending order.
    """
    if derived.min == 0 and derived.max == 0:
        return [0.0]

    start, stop = _exponent_span(derived)
    base = derived.base

    # The exponent next to zero is 0 (the unit power) unless the far end
    # is itself below one, in which case the run is a single power.
    if derived.crosses_zero:
        ticks = (
            power_range(start, min(0, start), base, negate=True)
            + [0.0]
            + power_range(min(0, stop), stop, base)
        )
    elif derived.negative:
        if derived.max == 0:
            stop = min(0, start)
        ticks = power_range(start, stop, base, negate=True)
        if derived.max == 0:
            ticks.append(0.0)
    else:
        if derived.min == 0:
            start = min(0, stop)
        ticks = power_range(start, stop, base)
        if derived.min == 0:
            ticks.insert(0, 0.0)

    if include_unit_power:
        return ticks
    return [tick for tick in ticks if tick != -1 and tick != 1]
