# vecmath/interp.py
"""
Linear interpolation and its inverse, for scalars and for Vec2/Vec3.
"""

from __future__ import annotations
from typing import Optional
import math

from .config import get_config
from .scalar import div
from .vector import Vec2, Vec3


def lerp(a: float, b: float, t: float) -> float:
    return (1.0 - t) * a + t * b


def inv_lerp(a: float, b: float, value: float) -> float:
    """Fraction t with lerp(a, b, t) == value. NaN or inf when a == b."""
    return div(value - a, b - a)


def lerp2(a: Vec2, b: Vec2, t: float) -> Vec2:
    return a * (1.0 - t) + b * t


def lerp3(a: Vec3, b: Vec3, t: float) -> Vec3:
    return a * (1.0 - t) + b * t


def _agree(fractions) -> Optional[float]:
    tolerance = get_config().inv_lerp_tolerance
    first = fractions[0]
    for other in fractions[1:]:
        if tolerance > 0.0:
            if not math.isclose(first, other, rel_tol=0.0, abs_tol=tolerance):
                return None
        elif first != other:
            return None
    return first


def inv_lerp2(a: Vec2, b: Vec2, value: Vec2) -> Optional[float]:
    """
    Fraction t with lerp2(a, b, t) == value, or None when the per-axis
    fractions disagree (value is off the line through a and b).
    """
    tx = div(value.x - a.x, b.x - a.x)
    ty = div(value.y - a.y, b.y - a.y)
    return _agree((tx, ty))


def inv_lerp3(a: Vec3, b: Vec3, value: Vec3) -> Optional[float]:
    tx = div(value.x - a.x, b.x - a.x)
    ty = div(value.y - a.y, b.y - a.y)
    tz = div(value.z - a.z, b.z - a.z)
    return _agree((tx, ty, tz))
