"""2D points over NumPy's fixed-width integer and float scalar types."""
from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from .int32 import INT32_MAX, INT32_MIN

INTEGER_TYPES: Tuple[type, ...] = (
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
    np.int8,
    np.int16,
    np.int32,
    np.int64,
)
FLOAT_TYPES: Tuple[type, ...] = (np.float32, np.float64)


def _scalar_type(dtype: Any) -> type:
    scalar_type = np.dtype(dtype).type
    if scalar_type not in INTEGER_TYPES + FLOAT_TYPES:
        raise TypeError(f"Unsupported point coordinate type {dtype!r}")
    return scalar_type


class Point:
    """Immutable ``(x, y)`` pair whose coordinates share one NumPy scalar type."""

    __slots__ = ("_coords",)
    __array_ufunc__ = None  # Keep NumPy from broadcasting over points.

    def __init__(self, x: Any, y: Any, dtype: Any = np.int32) -> None:
        scalar_type = _scalar_type(dtype)
        coords = np.array([x, y], dtype=scalar_type)
        coords.flags.writeable = False
        self._coords = coords

    @classmethod
    def from_coords(cls, x: Any, y: Any, dtype: Any = np.int32) -> "Point":
        return cls(x, y, dtype=dtype)

    @classmethod
    def _wrap(cls, coords: np.ndarray) -> "Point":
        point = cls.__new__(cls)
        coords.flags.writeable = False
        point._coords = coords
        return point

    @property
    def x(self) -> np.generic:
        return self._coords[0]

    @property
    def y(self) -> np.generic:
        return self._coords[1]

    @property
    def dtype(self) -> np.dtype:
        return self._coords.dtype

    def is_integer(self) -> bool:
        return self._coords.dtype.type in INTEGER_TYPES

    # ------------------------------------------------------------------
    # Conversions
    def to_f32(self) -> "Point":
        """Return the point with ``float32`` coordinates."""
        if not self.is_integer():
            raise TypeError("to_f32 is defined for integer points only")
        return self._wrap(self._coords.astype(np.float32))

    def to_i32(self) -> "Point":
        """Return the point with ``int32`` coordinates, truncating toward zero.

        The cast saturates: NaN becomes 0 and out-of-range values clamp to the
        int32 bounds.
        """
        if self.is_integer():
            raise TypeError("to_i32 is defined for float points only")
        coords = np.nan_to_num(self._coords.astype(np.float64), nan=0.0)
        coords = np.clip(np.trunc(coords), INT32_MIN, INT32_MAX)
        return self._wrap(coords.astype(np.int32))

    # ------------------------------------------------------------------
    # Arithmetic operators
    def _check_compatible(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return False
        if other.dtype != self.dtype:
            raise TypeError(f"Cannot combine points of {self.dtype} and {other.dtype}")
        return True

    def __add__(self, other: Any) -> Any:
        if not self._check_compatible(other):
            return NotImplemented
        with np.errstate(over="ignore"):
            return self._wrap(self._coords + other._coords)

    def __sub__(self, other: Any) -> Any:
        if not self._check_compatible(other):
            return NotImplemented
        with np.errstate(over="ignore"):
            return self._wrap(self._coords - other._coords)

    # ------------------------------------------------------------------
    # Comparisons and representation
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.dtype == other.dtype and bool(np.array_equal(self._coords, other._coords))

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r}, dtype={self.dtype.name})"


__all__ = ["Point", "INTEGER_TYPES", "FLOAT_TYPES"]
