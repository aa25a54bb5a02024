"""Greatest common divisor and its extended (Bézout) form.

Both functions use the same sign policy: the operands are ordered by
magnitude and the last nonzero truncated remainder is returned as-is, so the
result is not always positive (``gcd(-552, -713) == -23``). Callers that need
a positive divisor take ``abs`` themselves.
"""
from __future__ import annotations

import logging
import numbers
from typing import Tuple

from .int32 import checked, ensure_int32, trunc_divmod

logger = logging.getLogger(__name__)


def _undefined(a: int, b: int) -> ValueError:
    logger.debug("gcd requested for (%d, %d)", a, b)
    return ValueError("gcd(0, 0) is undefined")


def gcd(a: numbers.Integral, b: numbers.Integral) -> int:
    """Return a common divisor of *a* and *b* whose magnitude is the gcd.

    >>> gcd(713, 552)
    23
    >>> gcd(-11253, 2607)
    -33
    """
    a = ensure_int32(a, name="a")
    b = ensure_int32(b, name="b")
    if a == 0 and b == 0:
        raise _undefined(a, b)

    if abs(a) < abs(b):
        a, b = b, a
    if b == 0:
        return a

    while True:
        _, r = trunc_divmod(a, b)
        if r == 0:
            return b
        a, b = b, r


def extended_gcd(a: numbers.Integral, b: numbers.Integral) -> Tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g == a*s + b*t`` and ``|g| == gcd(a, b)``.

    ``b == 0`` yields ``(abs(a), 1, 0)``; this is the only branch that drops
    the sign of ``g``, so the identity does not hold there for negative ``a``.
    ``abs(INT32_MIN)`` does not fit in 32 bits and raises ``OverflowError``.
    """
    a = ensure_int32(a, name="a")
    b = ensure_int32(b, name="b")
    if a == 0 and b == 0:
        raise _undefined(a, b)

    if b == 0:
        return checked(abs(a), name="gcd"), 1, 0
    if a == 0:
        return b, 0, 1

    swapped = a * a < b * b
    if swapped:
        a, b = b, a

    s = [1, 0]
    t = [0, 1]
    while True:
        q, r = trunc_divmod(a, b)
        if r == 0:
            break
        s = [s[1], s[0] - q * s[1]]
        t = [t[1], t[0] - q * t[1]]
        a, b = b, r

    if swapped:
        return b, t[1], s[1]
    return b, s[1], t[1]


__all__ = ["gcd", "extended_gcd"]
