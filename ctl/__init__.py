"""Exact 32-bit fractions, the Euclidean gcd and 2D points."""

from .euclid import extended_gcd, gcd
from .fraction import Fraction, as_fraction_array, frac
from .geometry import FLOAT_TYPES, INTEGER_TYPES, Point
from .int32 import INT32_MAX, INT32_MIN

__all__ = [
    "gcd",
    "extended_gcd",
    "Fraction",
    "frac",
    "as_fraction_array",
    "Point",
    "INTEGER_TYPES",
    "FLOAT_TYPES",
    "INT32_MIN",
    "INT32_MAX",
]
