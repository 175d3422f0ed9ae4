"""
Derived scale state produced by a single calculate() pass.

A DerivedScale is immutable: LogScale swaps the whole record in on a
successful calculation and drops it on any mutation, so readers never see a
mix of old and new values.
"""

from dataclasses import dataclass
from enum import Enum
from ..utils.power_utils import nearest_powers, signed_log
from .constants import LOG_SNAP_TOL

class ScaleStatus(Enum):
    STALE = "stale"
    READY = "ready"

@dataclass(frozen=True)
class DerivedScale:
    """Rounded bounds and their logarithms for one calculated scale."""

    base: float                     # effective base (always > 1)
    min: float                      # rounded lower bound, signed power of base or 0
    max: float                      # rounded upper bound, signed power of base or 0
    log_min: float                  # signed_log(min)
    log_max: float                  # signed_log(max)
    negative: bool                  # whole scale at or below zero
    crosses_zero: bool              # min < 0 < max
    tol: float = LOG_SNAP_TOL

    @property
    def range(self) -> float:
        return self.max - self.min

    @property
    def log_range(self) -> float:
        return self.log_max - self.log_min

def derive(lower_bound: float, upper_bound: float, base: float, tol: float = LOG_SNAP_TOL) -> DerivedScale:
    """
    Rounds the raw bounds outward to enclosing powers of the base.

    The lower bound always moves down and the upper bound up. For negative
    bounds that means the lower bound takes the larger magnitude bracket
    (`upper`) and the upper bound the smaller one (`lower`).
    """
    lower_bracket = nearest_powers(lower_bound, base, tol)
    upper_bracket = nearest_powers(upper_bound, base, tol)

    scale_min = lower_bracket.upper if lower_bound < 0 else lower_bracket.lower
    scale_max = upper_bracket.lower if upper_bound < 0 else upper_bracket.upper

    negative = (scale_min < 0 and scale_max <= 0) or (scale_min <= 0 and scale_max < 0)

    return DerivedScale(
        base=base,
        min=scale_min,
        max=scale_max,
        log_min=signed_log(scale_min, base, tol),
        log_max=signed_log(scale_max, base, tol),
        negative=negative,
        crosses_zero=scale_min < 0 < scale_max,
        tol=tol
    )
