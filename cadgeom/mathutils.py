"""Tolerance-aware scalar comparisons and rounding used across the geometry types."""

from __future__ import annotations

import math
import sys
from typing import Protocol

LINEAR: float = 1.0e-7
"""Tolerance for comparing lengths and coordinates."""

ANGULAR: float = 1.0e-12
"""Tolerance for comparing angles."""

EPSILON: float = sys.float_info.epsilon
"""Machine epsilon for double precision floats."""


class _HasCoordinates(Protocol):
    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...

    @property
    def z(self) -> float: ...


def is_positive(a: float, epsilon: float = EPSILON) -> bool:
    """Return True if ``a`` is greater than ``epsilon``."""
    return a > epsilon


def is_negative(a: float, epsilon: float = EPSILON) -> bool:
    """Return True if ``a`` is less than ``-epsilon``."""
    return a < -epsilon


def is_zero(a: float, epsilon: float = EPSILON) -> bool:
    """Return True if the magnitude of ``a`` is strictly below ``epsilon``."""
    return abs(a) < epsilon


def is_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by at most ``epsilon``."""
    return abs(b - a) <= epsilon


def is_linear_equal(a: float, b: float, epsilon: float = LINEAR) -> bool:
    """Compare two lengths using the linear tolerance."""
    return is_equal(a, b, epsilon)


def is_angular_equal(a: float, b: float, epsilon: float = ANGULAR) -> bool:
    """Compare two angles using the angular tolerance."""
    return is_equal(a, b, epsilon)


def coords_equal(first: _HasCoordinates, second: _HasCoordinates) -> bool:
    """Compare two objects with ``x``, ``y`` and ``z`` using the linear tolerance."""
    return (
        is_linear_equal(first.x, second.x)
        and is_linear_equal(first.y, second.y)
        and is_linear_equal(first.z, second.z)
    )


def round_to(value: float, precision: int = 3) -> float:
    """Round ``value`` half-up to ``precision`` decimal places, truncating toward zero."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    multiplier = 10**precision
    return math.trunc(value * multiplier + 0.5) / multiplier