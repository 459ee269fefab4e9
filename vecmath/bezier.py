# vecmath/bezier.py
"""
Bezier curves.

bezier2/bezier3 evaluate a single cubic segment from four control points.
Bezier2/Bezier3 hold a control polygon of any length and evaluate it with
De Casteljau's algorithm.
"""

from __future__ import annotations
from typing import List, Sequence

from .point import Point2, Point3
from .vector import Vec2, Vec3


# =============================================================================
# Cubic Segments
# =============================================================================

def _cubic_weights(t: float):
    # Bernstein basis in expanded polynomial form
    t_squared = t * t
    t_cubed = t_squared * t
    return (
        -t_cubed + 3.0 * t_squared - 3.0 * t + 1.0,
        3.0 * t_cubed - 6.0 * t_squared + 3.0 * t,
        -3.0 * t_cubed + 3.0 * t_squared,
        t_cubed,
    )


def bezier2(p0: Point2, p1: Point2, p2: Point2, p3: Point2, t: float) -> Point2:
    """Cubic Bezier curve in R2. t is not clamped; values outside [0, 1] extrapolate."""
    w0, w1, w2, w3 = _cubic_weights(t)
    return Point2.from_vec(
        Vec2.from_point(p0) * w0
        + Vec2.from_point(p1) * w1
        + Vec2.from_point(p2) * w2
        + Vec2.from_point(p3) * w3
    )


def bezier3(p0: Point3, p1: Point3, p2: Point3, p3: Point3, t: float) -> Point3:
    """Cubic Bezier curve in R3. t is not clamped; values outside [0, 1] extrapolate."""
    w0, w1, w2, w3 = _cubic_weights(t)
    return Point3.from_vec(
        Vec3.from_point(p0) * w0
        + Vec3.from_point(p1) * w1
        + Vec3.from_point(p2) * w2
        + Vec3.from_point(p3) * w3
    )


# =============================================================================
# General Degree
# =============================================================================

def _de_casteljau(points: List, t: float):
    if not points:
        raise ValueError("Cannot evaluate a Bezier curve with no control points")
    work = list(points)
    u = 1.0 - t
    while len(work) > 1:
        work = [a * u + b * t for a, b in zip(work, work[1:])]
    return work[0]


class Bezier2:
    """Bezier curve in R2 over an arbitrary number of control points."""

    def __init__(self, points: Sequence[Vec2]):
        self.points: List[Vec2] = list(points)
        # Number of control points, as stored by the original container.
        self.degree: int = len(self.points)

    def evaluate(self, t: float) -> Point2:
        return Point2.from_vec(_de_casteljau(self.points, t))

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"Bezier2(points={self.points!r}, degree={self.degree})"


class Bezier3:
    """Bezier curve in R3 over an arbitrary number of control points."""

    def __init__(self, points: Sequence[Vec3]):
        self.points: List[Vec3] = list(points)
        self.degree: int = len(self.points)

    def evaluate(self, t: float) -> Point3:
        return Point3.from_vec(_de_casteljau(self.points, t))

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"Bezier3(points={self.points!r}, degree={self.degree})"
