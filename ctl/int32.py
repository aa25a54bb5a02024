"""Signed 32-bit integer domain shared by the GCD engine and fractions."""
from __future__ import annotations

import logging
import numbers

import numpy as np

logger = logging.getLogger(__name__)

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)


def ensure_int(value: numbers.Integral, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, bool):  # bool is a subclass of int; reject explicitly.
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    if isinstance(value, np.integer):
        return int(value.item())
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def checked(value: int, *, name: str = "value") -> int:
    """Return *value* unchanged, raising ``OverflowError`` outside int32."""
    if value < INT32_MIN or value > INT32_MAX:
        logger.debug("%s=%d does not fit in a signed 32-bit integer", name, value)
        raise OverflowError(f"{name} {value} is out of the 32-bit integer range")
    return value


def ensure_int32(value: numbers.Integral, *, name: str) -> int:
    return checked(ensure_int(value, name=name), name=name)


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder carrying the sign of *a*.

    Python's ``divmod`` floors, which changes the sign of intermediate
    remainders for negative operands and with it the sign of the gcd.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


__all__ = ["INT32_MIN", "INT32_MAX", "checked", "ensure_int", "ensure_int32", "trunc_divmod"]
