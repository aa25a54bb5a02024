"""Exact fractions over signed 32-bit integers with NumPy interoperability."""
from __future__ import annotations

import fractions
import logging
import numbers
import operator
from typing import Any, Iterable, Tuple, Union

import numpy as np

from .euclid import gcd
from .int32 import checked, ensure_int, ensure_int32

logger = logging.getLogger(__name__)

IntegerLike = Union[int, numbers.Integral, np.integer]


def _mul32(a: int, b: int) -> int:
    return checked(a * b, name="product")


class Fraction:
    """A numerator/denominator pair that is not necessarily reduced.

    Construction performs no normalization and accepts a zero denominator.
    Every binary operator reduces its result through :func:`ctl.euclid.gcd`,
    whose sign policy may leave the denominator negative. Equality is
    equivalence of the represented values: ``Fraction(1, -2) == Fraction(-2, 4)``.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Fraction semantics in NumPy expressions.

    def __init__(self, numerator: IntegerLike = 0, denominator: IntegerLike = 1) -> None:
        self._numerator = ensure_int32(numerator, name="numerator")
        self._denominator = ensure_int32(denominator, name="denominator")

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_int(cls, value: IntegerLike) -> "Fraction":
        return cls(value, 1)

    @classmethod
    def from_fraction(cls, value: fractions.Fraction) -> "Fraction":
        """Create a :class:`Fraction` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_fraction(self) -> fractions.Fraction:
        """Return a :class:`fractions.Fraction` with the same value."""
        return fractions.Fraction(self._numerator, self._denominator)

    def to_float(self) -> float:
        """Return ``numerator / denominator`` with IEEE semantics.

        A zero denominator gives ``inf``, ``-inf`` or ``nan`` instead of raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self._numerator) / np.float64(self._denominator))

    def reduce(self) -> "Fraction":
        """Divide both components by their gcd; the represented value is kept."""
        g = gcd(self._numerator, self._denominator)
        return Fraction(self._numerator // g, self._denominator // g)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:  # pragma: no cover - trivial mapping
        return self.to_float()

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _coerce_scalar(value: Any) -> "Fraction":
        if isinstance(value, Fraction):
            return value
        if isinstance(value, (numbers.Integral, np.integer)):
            return Fraction.from_int(ensure_int(value, name="operand"))
        raise TypeError(f"Cannot interpret {type(value)!r} as Fraction")

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_frac = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_frac)

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_frac = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(other_frac, self)

    @staticmethod
    def _operands(a: "Fraction", b: "Fraction") -> Tuple[int, int, int, int]:
        if a._denominator == 0 or b._denominator == 0:
            logger.debug("zero denominator in operands %r, %r", a, b)
            raise ZeroDivisionError("fraction with a zero denominator used as an operand")
        return a._numerator, a._denominator, b._numerator, b._denominator

    # Integers are kept as n/1 fractions, so the general cross-multiplied
    # forms below reduce to (q + n*d, d), (q*n, d) and (q, d*n).
    @staticmethod
    def _add(a: "Fraction", b: "Fraction") -> "Fraction":
        q1, d1, q2, d2 = Fraction._operands(a, b)
        return Fraction(_mul32(q1, d2) + _mul32(q2, d1), _mul32(d1, d2)).reduce()

    @staticmethod
    def _sub(a: "Fraction", b: "Fraction") -> "Fraction":
        q1, d1, q2, d2 = Fraction._operands(a, b)
        return Fraction(_mul32(q1, d2) - _mul32(q2, d1), _mul32(d1, d2)).reduce()

    @staticmethod
    def _mul(a: "Fraction", b: "Fraction") -> "Fraction":
        q1, d1, q2, d2 = Fraction._operands(a, b)
        return Fraction(_mul32(q1, q2), _mul32(d1, d2)).reduce()

    @staticmethod
    def _truediv(a: "Fraction", b: "Fraction") -> "Fraction":
        q1, d1, q2, d2 = Fraction._operands(a, b)
        if q2 == 0:
            raise ZeroDivisionError("division by zero")
        return Fraction(_mul32(q1, d2), _mul32(d1, q2)).reduce()

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, self._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, self._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, self._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, self._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, self._truediv)

    def __neg__(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> "Fraction":  # pragma: no cover - trivial
        return self

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: self == self._coerce_scalar(x),
                otypes=[bool],
            )
            return vectorised(other)
        try:
            other_frac = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return self._numerator * other_frac._denominator == other_frac._numerator * self._denominator

    def __hash__(self) -> int:
        # Matches equivalence only for nonzero denominators.
        if self._denominator == 0:
            return 0
        return hash(self.as_fraction())

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.equal: operator.eq,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Fraction ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(as_fraction_array(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(op, otypes=[bool if ufunc is np.equal else object])
            return vectorised(*coerced)
        return op(*coerced)


def frac(numerator: IntegerLike, denominator: IntegerLike = 1) -> Fraction:
    """Build ``numerator/denominator`` as given, without reducing it."""

    return Fraction(numerator, denominator)


def as_fraction_array(values: Union[np.ndarray, Iterable[Any]]) -> np.ndarray:
    """Return an object array holding a :class:`Fraction` for every element."""

    array = np.asarray(values, dtype=object)
    vectorised = np.vectorize(Fraction._coerce_scalar, otypes=[object])
    return vectorised(array)


__all__ = ["Fraction", "frac", "as_fraction_array"]
