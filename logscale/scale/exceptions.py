class ScaleError(Exception):
    """Base exception for logarithmic scale errors."""
    pass

class InvalidBoundsError(ScaleError, ValueError):
    """Raised when a bound or pivot cannot be parsed as a finite number."""
    pass
