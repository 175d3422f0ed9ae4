import numpy as np
import pandas as pd
from typing import List, Optional
from ..config.scale_config import ScaleConfig
from ..utils.logging_config import get_logger
from ..utils.power_utils import effective_base
from .bounds import center_bounds, order_bounds, parse_number
from .constants import ORIGIN_MAX, VALID_ORIGINS
from .derived import DerivedScale, ScaleStatus, derive
from .exceptions import InvalidBoundsError
from .position import map_position
from .ticks import generate_ticks

logger = get_logger(__name__)

class LogScale:
    """
    A "nice" logarithmic axis scale.

    Raw bounds and base are set through the constructor or the setters;
    calculate() rounds the bounds outward to powers of the base. Every
    setter marks the scale stale, and all derived accessors return None
    until the next successful calculate().
    """

    def __init__(self, low=None, high=None, base=None, config: Optional[ScaleConfig] = None):
        """
        Initializes the scale.

        Args:
            low, high: Raw interval ends in any order. Both must be given
                for the bounds to be set.
            base: Logarithm base, the configured default when omitted.
            config (ScaleConfig): Defaults and policies for this scale.
        """
        self.config = config or ScaleConfig()
        self.base = self.config.base
        self.lower_bound: Optional[float] = None
        self.upper_bound: Optional[float] = None

        self._status = ScaleStatus.STALE
        self._derived: Optional[DerivedScale] = None

        if low is not None and high is not None:
            self.set_bounds(low, high)

        if base is not None:
            self.set_base(base)

    @classmethod
    def from_values(cls, values, base=None, config: Optional[ScaleConfig] = None) -> 'LogScale':
        """
        Builds a calculated scale spanning the finite numeric entries of values.

        Non-numeric entries are coerced to NaN and dropped together with
        infinities. The configured center, if any, is applied before
        calculating.

        Raises:
            InvalidBoundsError: If no finite numeric value remains, or the
                values cannot be rounded to powers of the base.
        """
        series = pd.to_numeric(pd.Series(values, dtype=object), errors='coerce')
        series = series.replace([np.inf, -np.inf], np.nan).dropna()

        if series.empty:
            raise InvalidBoundsError("No finite numeric values to build a scale from.")

        scale = cls(series.min(), series.max(), base, config)
        if scale.config.center is not None:
            scale.center_at(scale.config.center)
        if not scale.calculate():
            raise InvalidBoundsError(
                f"Values spanning [{scale.lower_bound}, {scale.upper_bound}] exceed the float range "
                f"when rounded to powers of {scale.base}."
            )
        return scale

    def _invalidate(self):
        self._status = ScaleStatus.STALE
        self._derived = None

    # --- Bounds normalization ---

    def set_bounds(self, low, high):
        """
        Stores the ordered raw bounds.

        Raises:
            InvalidBoundsError: If either bound is not a finite number. The
                previous bounds are kept in that case.
        """
        self.lower_bound, self.upper_bound = order_bounds(low, high)
        self._invalidate()

    def set_base(self, base):
        """
        Sets the logarithm base.

        Non-numeric, non-positive and unit bases are ignored and the previous
        base is kept. The scale is marked stale either way.
        """
        self._invalidate()

        try:
            base = parse_number(base, "base")
        except InvalidBoundsError as e:
            logger.warning(f"Ignoring base: {e}")
            return

        if base <= 0 or base == 1:
            logger.warning(f"Ignoring base {base}: must be positive and not 1. Keeping {self.base}.")
            return

        self.base = base

    def center_at(self, pivot=0):
        """
        Recenters the bounds symmetrically around pivot.

        Does nothing while the bounds are unset.

        Raises:
            InvalidBoundsError: If pivot is not a finite number.
        """
        if self.lower_bound is None or self.upper_bound is None:
            return

        pivot = parse_number(pivot, "pivot")
        self.lower_bound, self.upper_bound = center_bounds(self.lower_bound, self.upper_bound, pivot)
        self._invalidate()

    # --- Calculation ---

    def calculate(self) -> bool:
        """
        Rounds the raw bounds outward and caches the derived state.

        Returns:
            bool: True when the scale is ready. False if bounds are unset or
            an enclosing power of the base is beyond the float range.
        """
        if self.lower_bound is None or self.upper_bound is None:
            logger.debug("calculate() called before bounds were set.")
            return False

        try:
            derived = derive(
                self.lower_bound,
                self.upper_bound,
                effective_base(self.base),
                self.config.log_snap_tolerance
            )
        except OverflowError as e:
            logger.warning(
                f"Cannot round [{self.lower_bound}, {self.upper_bound}] to powers of {self.base}: {e}"
            )
            self._invalidate()
            return False

        self._derived = derived
        self._status = ScaleStatus.READY

        logger.debug(
            f"Scale [{self.lower_bound}, {self.upper_bound}] base {self.base} -> "
            f"[{self._derived.min}, {self._derived.max}]"
        )
        return True

    @property
    def status(self) -> ScaleStatus:
        return self._status

    @property
    def is_calculated(self) -> bool:
        return self._status is ScaleStatus.READY

    @property
    def derived(self) -> Optional[DerivedScale]:
        """The cached derived state, or None while stale."""
        if self._status is ScaleStatus.READY:
            return self._derived
        return None

    # --- Accessors ---

    def get_minimum(self) -> Optional[float]:
        derived = self.derived
        return None if derived is None else derived.min

    def get_maximum(self) -> Optional[float]:
        derived = self.derived
        return None if derived is None else derived.max

    def get_range(self) -> Optional[float]:
        derived = self.derived
        return None if derived is None else derived.range

    def is_negative(self) -> Optional[bool]:
        derived = self.derived
        return None if derived is None else derived.negative

    def crosses_zero(self) -> Optional[bool]:
        derived = self.derived
        return None if derived is None else derived.crosses_zero

    def get_ticks(self, include_unit_power: bool = True) -> Optional[List[float]]:
        """
        Ticks from the most negative to the most positive.

        Args:
            include_unit_power (bool): Keep the -1 and 1 ticks.
        """
        derived = self.derived
        if derived is None:
            return None
        return generate_ticks(derived, include_unit_power)

    def get_ticks_reverse(self, include_unit_power: bool = True) -> Optional[List[float]]:
        ticks = self.get_ticks(include_unit_power)
        return None if ticks is None else ticks[::-1]

    def pct(self, value, origin: str = "min"):
        """
        Percentage position of value along the scale.

        Args:
            value: A number or an array-like of numbers.
            origin (str): "min" measures from the minimum end, "max" from
                the maximum end.

        Returns:
            float for scalar input, np.ndarray for array input, or None
            while the scale is stale.
        """
        derived = self.derived
        if derived is None:
            return None

        if origin not in VALID_ORIGINS:
            raise ValueError(f"origin must be one of {VALID_ORIGINS}, got {origin!r}")

        positions = map_position(value, derived, self.config.degenerate_pct)
        if origin == ORIGIN_MAX:
            positions = 100.0 - positions

        if positions.ndim == 0:
            return float(positions)
        return positions

    def __repr__(self):
        if self.is_calculated:
            return (f"LogScale(min={self._derived.min}, max={self._derived.max}, "
                    f"base={self.base})")
        return f"LogScale(lower_bound={self.lower_bound}, upper_bound={self.upper_bound}, base={self.base}, stale)"
