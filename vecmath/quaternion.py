# vecmath/quaternion.py
"""
Quaternion in scalar/vector form. Data holder only.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .vector import Vec3


@dataclass(frozen=True)
class Quat:
    s: float = 0.0
    v: Vec3 = field(default_factory=Vec3.zero)

    @staticmethod
    def zero() -> Quat:
        return Quat(0.0, Vec3.zero())

    @staticmethod
    def new(s: float, v: Vec3) -> Quat:
        return Quat(s, v)
