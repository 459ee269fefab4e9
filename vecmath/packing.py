# vecmath/packing.py
"""
Serialization hooks for vectors, points and matrices.

Two forms are supported:
- dicts keyed by field name (x, y, z, w for vectors, x{row}{col} for
  matrices), in declaration order
- packed arrays/bytes of the configured float dtype (float32 by default),
  little-endian and row-major, i.e. the layout of a C struct of float fields

Everything here is gated by VecmathConfig.serialization_enabled.
"""

from __future__ import annotations
from dataclasses import fields, is_dataclass
from typing import Any, Dict, Tuple, Type
import logging

import numpy as np

from .config import get_config
from .matrix import Mat2, Mat3, Mat4
from .point import Point2, Point3
from .quaternion import Quat
from .vector import Vec2, Vec3, Vec4

logger = logging.getLogger(__name__)

PACKABLE_TYPES = (Vec2, Vec3, Vec4, Point2, Point3, Mat2, Mat3, Mat4)
MATRIX_TYPES = (Mat2, Mat3, Mat4)


def _check_enabled() -> None:
    if not get_config().serialization_enabled:
        raise RuntimeError("Serialization is disabled (VecmathConfig.serialization_enabled=False)")


def _check_type(cls: Type) -> None:
    if cls not in PACKABLE_TYPES:
        raise TypeError(f"{cls.__name__} cannot be packed")


def _dtype(byteorder: str = '=') -> np.dtype:
    return np.dtype(get_config().float_dtype).newbyteorder(byteorder)


def field_names(cls: Type) -> Tuple[str, ...]:
    """Serialized field names of cls, in layout order."""
    if cls in MATRIX_TYPES:
        n = cls.SIZE
        return tuple(f"x{r}{c}" for r in range(n) for c in range(n))
    if is_dataclass(cls):
        return tuple(f.name for f in fields(cls))
    raise TypeError(f"{cls.__name__} has no serialized form")


# =============================================================================
# Dict Form
# =============================================================================

def to_dict(obj) -> Dict[str, Any]:
    _check_enabled()
    if isinstance(obj, Quat):
        return {'s': obj.s, 'v': to_dict(obj.v)}
    _check_type(type(obj))
    return dict(zip(field_names(type(obj)), obj.to_tuple()))


def from_dict(cls: Type, data: Dict[str, Any]):
    _check_enabled()
    if cls is Quat:
        return Quat(data['s'], from_dict(Vec3, data['v']))
    _check_type(cls)
    names = field_names(cls)
    missing = [name for name in names if name not in data]
    if missing:
        logger.debug(f"from_dict({cls.__name__}) missing fields {missing}")
        raise ValueError(f"{cls.__name__} data is missing fields: {', '.join(missing)}")
    return cls(*(data[name] for name in names))


# =============================================================================
# Packed Form
# =============================================================================

def to_array(obj) -> np.ndarray:
    """Vectors and points become shape (N,), matrices shape (N, N)."""
    _check_enabled()
    _check_type(type(obj))
    arr = np.array(obj.to_tuple(), dtype=_dtype())
    if isinstance(obj, MATRIX_TYPES):
        arr = arr.reshape(obj.SIZE, obj.SIZE)
    return arr


def from_array(cls: Type, arr):
    _check_enabled()
    _check_type(cls)
    flat = np.asarray(arr, dtype=_dtype()).ravel()
    expected = len(field_names(cls))
    if flat.size != expected:
        raise ValueError(f"{cls.__name__} needs {expected} values, got {flat.size}")
    return cls(*(float(v) for v in flat))


def to_bytes(obj) -> bytes:
    return to_array(obj).astype(_dtype('<')).tobytes()


def from_bytes(cls: Type, data: bytes):
    _check_enabled()
    _check_type(cls)
    dtype = _dtype('<')
    expected = len(field_names(cls)) * dtype.itemsize
    if len(data) != expected:
        logger.debug(f"from_bytes({cls.__name__}) got {len(data)} bytes, expected {expected}")
        raise ValueError(f"{cls.__name__} packs to {expected} bytes, got {len(data)}")
    return from_array(cls, np.frombuffer(data, dtype=dtype))
