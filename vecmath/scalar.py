# vecmath/scalar.py
"""
Scalar math helpers.

Thin wrappers over the math module that follow IEEE semantics: domain errors
come back as NaN (or +/-inf) instead of raising ValueError.
"""

from __future__ import annotations
import math
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .point import Point2

# =============================================================================
# Constants
# =============================================================================

PI = math.pi

LN_10 = 2.30258509299
LN_2 = 0.69314718056

FACTORIALS = (
    1, 1, 2, 6, 24, 120, 720, 5040, 40320, 362880, 3628800,
    39916800, 479001600, 6227020800, 87178291200, 1307674368000,
    20922789888000, 355687428096000, 6402373705728000,
    121645100408832000, 2432902008176640000,
)

INV_FACTORIALS = (
    1.0, 1.0, 0.5, 0.1666666666666666667, 0.04166666666666666667, 0.00833333333333333334,
)


# =============================================================================
# General Purpose
# =============================================================================

def fac(n: int) -> int:
    """Recursive factorial. No overflow guard; meant for small n."""
    if n < 0:
        raise ValueError(f"fac() is undefined for negative n ({n})")
    if n == 0:
        return 1
    return n * fac(n - 1)


def _ieee(func: Callable[[float], float], x: float) -> float:
    try:
        return func(x)
    except ValueError:
        return math.nan


def sqrt(x: float) -> float:
    return _ieee(math.sqrt, x)


def ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    return _ieee(math.log, x)


def log(x: float) -> float:
    """Base 10 logarithm."""
    return ln(x) / LN_10


def log2(x: float) -> float:
    return ln(x) / LN_2


def sin(x: float) -> float:
    return _ieee(math.sin, x)


def asin(x: float) -> float:
    return _ieee(math.asin, x)


def cos(x: float) -> float:
    return _ieee(math.cos, x)


def acos(x: float) -> float:
    return _ieee(math.acos, x)


def tan(x: float) -> float:
    return _ieee(math.tan, x)


def atan(x: float) -> float:
    return math.atan(x)


def atan2(p: Point2) -> float:
    """Angle of the point measured from the positive x axis."""
    return math.atan2(p.y, p.x)


def sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def exp2(x: float) -> float:
    """2 ** x, inf on overflow."""
    try:
        return math.pow(2.0, x)
    except OverflowError:
        return math.inf


def tanh(x: float) -> float:
    return math.tanh(x)


def clamp(start: float, end: float, value: float) -> float:
    """
    Clamp value into [start, end].

    Note the argument order: bounds first, value last.
    """
    if value > end:
        return end
    if start > value:
        return start
    return value


def div(a: float, b: float) -> float:
    """a / b with IEEE results for a zero divisor (inf, -inf or nan)."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def point_derivative(func: Callable[[float], float], x: float, h: float) -> float:
    """Central difference approximation of func'(x)."""
    return div(func(x + h) - func(x - h), 2.0 * h)


def deg_to_rad(degrees: float) -> float:
    return degrees * (PI / 180.0)


def rad_to_deg(radians: float) -> float:
    return radians * (180.0 / PI)
