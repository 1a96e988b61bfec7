"""Exact arithmetic over GF(4), bounded polynomials and Lagrange interpolation."""

from algebra.errors import (
    AlgebraError, DomainError, SizeMismatchError,
    DivisionByZeroError, DegreeOverflowError,
)
from algebra.field import FieldElement, ALPHA, ORDER, elements
from algebra.polynomial import Polynomial
from algebra.interpolation import lagrange, lagrange_coefficients_at_zero, interpolate_at_zero
from algebra import rng
