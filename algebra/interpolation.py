"""Lagrange interpolation over a finite field."""

from algebra.errors import SizeMismatchError
from algebra.field import FieldElement
from algebra.polynomial import Polynomial


def _as_elements(values, field):
    return [v if isinstance(v, field) else field(v) for v in values]


def lagrange(xs, ys, field: type = FieldElement) -> Polynomial:
    """Unique polynomial of degree <= len(xs) - 1 with p(xs[i]) = ys[i].

    Each term_i is ys[i] times one linear factor per j != i, equal to 1 at
    xs[i] and to 0 at xs[j]; the result is the sum of the terms.
    Repeated x-coordinates raise DivisionByZeroError.
    """
    xs = _as_elements(xs, field)
    ys = _as_elements(ys, field)
    if not xs or len(xs) != len(ys):
        raise SizeMismatchError(
            f"Need as many x as y coordinates (at least one), got {len(xs)} and {len(ys)}")

    pol = Polynomial.bounded(len(xs) - 1, field)
    result = pol.zero()
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        term_i = pol.constant(yi)
        for j, xj in enumerate(xs):
            if i == j:
                continue
            term_i = term_i * pol.literal(xj / (xj - xi), field.one() / (xi - xj))
        result = result + term_i
    return result


def lagrange_coefficients_at_zero(x_values, field: type = FieldElement) -> list:
    """Precompute Lagrange basis coefficients at x=0 for given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i.
    """
    x_values = _as_elements(x_values, field)
    lambdas = []
    for i, xi in enumerate(x_values):
        numerator = field.one()
        denominator = field.one()
        for j, xj in enumerate(x_values):
            if i == j:
                continue
            numerator = numerator * (-xj)
            denominator = denominator * (xi - xj)
        lambdas.append(numerator / denominator)
    return lambdas


def interpolate_at_zero(points, field: type = FieldElement):
    """Lagrange interpolation evaluated at x=0.

    points: list of (x_i, y_i) pairs.
    Returns p(0) = sum_i y_i * lambda_i.
    """
    if not points:
        raise SizeMismatchError("Need at least one point")
    xs = [x for x, _ in points]
    ys = _as_elements([y for _, y in points], field)
    result = field.zero()
    for yi, lambda_i in zip(ys, lagrange_coefficients_at_zero(xs, field)):
        result = result + yi * lambda_i
    return result
