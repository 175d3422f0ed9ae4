from dataclasses import dataclass
from typing import Optional
from ..scale.constants import DEFAULT_BASE, DEGENERATE_PCT, LOG_SNAP_TOL

@dataclass
class ScaleConfig:
    """Defaults and policies for a logarithmic scale."""

    base: float = DEFAULT_BASE                  # initial logarithm base
    include_unit_power: bool = True             # emit the -1 / 1 ticks
    degenerate_pct: float = DEGENERATE_PCT      # pct() result for zero-width scales
    center: Optional[float] = None              # pivot applied by from_values / CLI
    log_snap_tolerance: float = LOG_SNAP_TOL    # exponent snapping tolerance

    def __post_init__(self):
        """Validate the configured values."""
        try:
            self.base = float(self.base)
            self.degenerate_pct = float(self.degenerate_pct)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid numeric scale setting: {e}")

        if self.base <= 0 or self.base == 1:
            raise ValueError(f"Scale base must be positive and not 1, got {self.base}")
        if not 0.0 <= self.degenerate_pct <= 100.0:
            raise ValueError(f"degenerate_pct must lie in [0, 100], got {self.degenerate_pct}")
        if self.log_snap_tolerance < 0:
            raise ValueError("log_snap_tolerance cannot be negative.")
