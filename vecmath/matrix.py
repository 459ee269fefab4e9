# vecmath/matrix.py
"""
Square matrix types: Mat2, Mat3, Mat4.

Elements are stored row-major in a flat list, element (r, c) at r * N + c,
matching the x{row}{col} field layout of the packed float32 form.

Matrices are mutable through set/set_row/swap_rows; every other operation
returns a new instance. Bounds policy:
- get/get_row out of range return None and log a warning
- set/set_row out of range are no-ops that log a warning
- with strict_bounds configured, those four raise IndexError instead
- swap_rows always raises IndexError on a bad row
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from numbers import Integral, Real
from typing import Iterator, Optional, Tuple, Type
import logging

from .config import get_config
from .scalar import div
from .vector import Vec2, Vec3, Vec4

logger = logging.getLogger(__name__)


class LinearTransformation(ABC):

    __slots__ = ()

    @abstractmethod
    def det(self) -> float:
        ...


def det(m: LinearTransformation) -> float:
    if not isinstance(m, LinearTransformation):
        raise TypeError(f"det() expects a matrix, got {type(m).__name__}")
    return m.det()


# =============================================================================
# Shared Square Matrix Behaviour
# =============================================================================

class _SquareMatrix(LinearTransformation):
    """Row-major N x N grid of floats. Subclasses set SIZE and ROW_TYPE."""

    __slots__ = ('m',)

    SIZE: int = 0
    ROW_TYPE: Type = None

    def __init__(self, *values: float):
        """Initialize with N*N row-major values, or identity when none are given."""
        n = self.SIZE
        if not values:
            self.m = [1.0 if r == c else 0.0 for r in range(n) for c in range(n)]
        elif len(values) == n * n:
            self.m = list(values)
        else:
            raise ValueError(
                f"{type(self).__name__} takes {n * n} row-major values, got {len(values)}"
            )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, *values: float):
        return cls(*values)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def zero(cls):
        return cls(*([0.0] * (cls.SIZE * cls.SIZE)))

    @classmethod
    def from_rows(cls, *rows):
        if len(rows) != cls.SIZE:
            raise ValueError(f"{cls.__name__} takes {cls.SIZE} rows, got {len(rows)}")
        values = []
        for row in rows:
            cls._check_row_type(row)
            values.extend(row)
        return cls(*values)

    # -------------------------------------------------------------------------
    # Bounds
    # -------------------------------------------------------------------------

    @classmethod
    def _check_row_type(cls, row) -> None:
        if not isinstance(row, cls.ROW_TYPE):
            raise TypeError(
                f"{cls.__name__} rows are {cls.ROW_TYPE.__name__}, got {type(row).__name__}"
            )

    def _valid(self, index) -> bool:
        return isinstance(index, Integral) and 0 <= index < self.SIZE

    def _out_of_range(self, what: str) -> None:
        msg = f"{type(self).__name__}.{what} out of range (size {self.SIZE})"
        if get_config().strict_bounds:
            raise IndexError(msg)
        logger.warning(msg)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, row: int, col: int) -> Optional[float]:
        if not (self._valid(row) and self._valid(col)):
            self._out_of_range(f"get({row}, {col})")
            return None
        return self.m[row * self.SIZE + col]

    def set(self, row: int, col: int, value: float) -> None:
        if not (self._valid(row) and self._valid(col)):
            self._out_of_range(f"set({row}, {col})")
            return
        self.m[row * self.SIZE + col] = value

    def get_row(self, row: int):
        if not self._valid(row):
            self._out_of_range(f"get_row({row})")
            return None
        n = self.SIZE
        return self.ROW_TYPE(*self.m[row * n:(row + 1) * n])

    def set_row(self, row: int, values) -> None:
        self._check_row_type(values)
        if not self._valid(row):
            self._out_of_range(f"set_row({row})")
            return
        n = self.SIZE
        self.m[row * n:(row + 1) * n] = list(values)

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange two rows in place. Both rows must exist."""
        if not (self._valid(r1) and self._valid(r2)):
            logger.debug(f"{type(self).__name__}.swap_rows({r1}, {r2}) with invalid row")
            raise IndexError(
                f"{type(self).__name__}.swap_rows({r1}, {r2}): rows must be in 0..{self.SIZE - 1}"
            )
        n = self.SIZE
        a = self.m[r1 * n:(r1 + 1) * n]
        b = self.m[r2 * n:(r2 + 1) * n]
        self.m[r1 * n:(r1 + 1) * n] = b
        self.m[r2 * n:(r2 + 1) * n] = a

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        if not (self._valid(row) and self._valid(col)):
            raise IndexError(f"{type(self).__name__} index {idx} out of range")
        return self.m[row * self.SIZE + col]

    def rows(self) -> Iterator:
        n = self.SIZE
        for r in range(n):
            yield self.ROW_TYPE(*self.m[r * n:(r + 1) * n])

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self.m)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def transpose(self):
        n = self.SIZE
        return type(self)(*(self.m[c * n + r] for r in range(n) for c in range(n)))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.m, other.m)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self.m, other.m)))

    def __mul__(self, scalar: float):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(a * scalar for a in self.m))

    def __rmul__(self, scalar: float):
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(div(a, scalar) for a in self.m))

    def __neg__(self):
        return type(self)(*(-a for a in self.m))

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.m == other.m

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self.m)})"


# =============================================================================
# Matrix Types
# =============================================================================

class Mat2(_SquareMatrix):
    """2x2 matrix."""

    __slots__ = ()

    SIZE = 2
    ROW_TYPE = Vec2

    def det(self) -> float:
        m = self.m
        return m[0] * m[3] - m[1] * m[2]


def _det3(a: float, b: float, c: float,
          d: float, e: float, f: float,
          g: float, h: float, i: float) -> float:
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


class Mat3(_SquareMatrix):
    """3x3 matrix."""

    __slots__ = ()

    SIZE = 3
    ROW_TYPE = Vec3

    def det(self) -> float:
        return _det3(*self.m)


class Mat4(_SquareMatrix):
    """4x4 matrix."""

    __slots__ = ()

    SIZE = 4
    ROW_TYPE = Vec4

    def _minor(self, row: int, col: int) -> float:
        """Determinant of the 3x3 matrix left after removing row and col."""
        values = [
            self.m[r * 4 + c]
            for r in range(4) if r != row
            for c in range(4) if c != col
        ]
        return _det3(*values)

    def det(self) -> float:
        # Cofactor expansion along the first column.
        m = self.m
        return (
            m[0] * self._minor(0, 0)
            - m[4] * self._minor(1, 0)
            + m[8] * self._minor(2, 0)
            - m[12] * self._minor(3, 0)
        )
