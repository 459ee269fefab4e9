# vecmath/point.py
"""
Point types. A point is a position, a vector is a displacement; points carry
no arithmetic and convert to and from vectors by copying coordinates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .vector import Vec2, Vec3


@dataclass(frozen=True)
class Point2:
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def new(x: float, y: float) -> Point2:
        return Point2(x, y)

    @staticmethod
    def from_vec(v: Vec2) -> Point2:
        return Point2(v.x, v.y)

    def to_vec(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def new(x: float, y: float, z: float) -> Point3:
        return Point3(x, y, z)

    @staticmethod
    def from_vec(v: Vec3) -> Point3:
        return Point3(v.x, v.y, v.z)

    def to_vec(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)
