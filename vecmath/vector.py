# vecmath/vector.py
"""
Vector types: Vec2, Vec3, Vec4.

Vectors are frozen value types; every operator returns a new instance.
Degenerate cases (normalizing a zero vector, the angle to a zero vector)
produce NaN components rather than raising.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple, TYPE_CHECKING
import math

from .scalar import acos, div

if TYPE_CHECKING:
    from .point import Point2, Point3


# =============================================================================
# InnerSpace
# =============================================================================

class InnerSpace(ABC):
    """Operations shared by every vector dimension."""

    @abstractmethod
    def dot(self, other) -> float:
        ...

    @abstractmethod
    def length(self) -> float:
        ...

    @abstractmethod
    def __sub__(self, other):
        ...

    def dist(self, other) -> float:
        """Euclidean distance, |other - self|."""
        return (other - self).length()

    def v_angle(self, other) -> float:
        """
        Angle between two vectors in radians.

        The cosine is not clamped: a zero-length operand, or rounding that
        pushes the ratio outside [-1, 1], yields NaN.
        """
        return acos(div(self.dot(other), self.length() * other.length()))


def _check_same(v1: InnerSpace, v2: InnerSpace) -> None:
    if type(v1) is not type(v2):
        raise TypeError(
            f"Operands must have the same vector type, got {type(v1).__name__} and {type(v2).__name__}"
        )


# =============================================================================
# Vector Types
# =============================================================================

@dataclass(frozen=True)
class Vec2(InnerSpace):
    """2D vector."""
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0.0, 0.0)

    @staticmethod
    def new(x: float, y: float) -> Vec2:
        return Vec2(x, y)

    @staticmethod
    def from_point(p: Point2) -> Vec2:
        return Vec2(p.x, p.y)

    @staticmethod
    def from_tuple(t: Tuple[float, float]) -> Vec2:
        return Vec2(t[0], t[1])

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        ln = self.length()
        return Vec2(div(self.x, ln), div(self.y, ln))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vec3(InnerSpace):
    """3D vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def new(x: float, y: float, z: float) -> Vec3:
        return Vec3(x, y, z)

    @staticmethod
    def from_point(p: Point3) -> Vec3:
        return Vec3(p.x, p.y, p.z)

    @staticmethod
    def from_tuple(t: Tuple[float, float, float]) -> Vec3:
        return Vec3(t[0], t[1], t[2])

    @staticmethod
    def unit_x() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        ln = self.length()
        return Vec3(div(self.x, ln), div(self.y, ln), div(self.z, ln))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass(frozen=True)
class Vec4(InnerSpace):
    """4D vector. Unlike a homogeneous point, w defaults to 0."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @staticmethod
    def zero() -> Vec4:
        return Vec4(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def new(x: float, y: float, z: float, w: float) -> Vec4:
        return Vec4(x, y, z, w)

    @staticmethod
    def from_vec3(v: Vec3, w: float = 0.0) -> Vec4:
        return Vec4(v.x, v.y, v.z, w)

    @staticmethod
    def from_tuple(t: Tuple[float, float, float, float]) -> Vec4:
        return Vec4(t[0], t[1], t[2], t[3])

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec4:
        ln = self.length()
        return Vec4(div(self.x, ln), div(self.y, ln), div(self.z, ln), div(self.w, ln))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


# =============================================================================
# Free Functions
# =============================================================================

def dot(v1: InnerSpace, v2: InnerSpace) -> float:
    _check_same(v1, v2)
    return v1.dot(v2)


def dist(v1: InnerSpace, v2: InnerSpace) -> float:
    _check_same(v1, v2)
    return v1.dist(v2)


v_dist = dist


def v_angle(v1: InnerSpace, v2: InnerSpace) -> float:
    _check_same(v1, v2)
    return v1.v_angle(v2)


def cross(v1: Vec3, v2: Vec3) -> Vec3:
    if not (isinstance(v1, Vec3) and isinstance(v2, Vec3)):
        raise TypeError("cross() is only defined for Vec3")
    return v1.cross(v2)
