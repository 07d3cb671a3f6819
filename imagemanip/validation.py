"""
Parameter checks shared by the operators.

Run before any pixel is touched, so a rejected call never produces output.
"""

import math
from numbers import Real


def finite_number(value, name: str) -> float:
    """Return ``value`` as a float; ValueError for non-numbers, bools, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def unit_interval(value, name: str) -> float:
    value = finite_number(value, name)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")
    return value
