"""GF(4) algebra — demonstration entry point.

Prints a few field and polynomial computations, then deals a secret as
shares of a random polynomial and reconstructs it by interpolation.
Usage: python main.py [seed]
"""

import sys

from algebra import rng
from algebra.field import FieldElement, ALPHA
from algebra.polynomial import Polynomial
from algebra.interpolation import lagrange, interpolate_at_zero


def banner(title: str):
    print("=" * 50)
    print(title)
    print("=" * 50)


def run_arithmetic():
    one = FieldElement.one()
    pol1 = Polynomial.bounded(1)
    pol2 = Polynomial.bounded(2)
    x = pol2.x()

    print(f"1 / alpha = {one / ALPHA}")
    print(f"y: {pol2.literal(one)}")
    print(f"alpha + x + x*x = {pol2.literal(ALPHA) + x + x * x}")
    print(f"x(alpha) = {pol1.x()(ALPHA)}")
    print(f"(1 + (alpha+1).x + alpha.x^2)(alpha+1) = "
          f"{pol2.literal(one, ALPHA + 1, ALPHA)(ALPHA + 1)}")
    print()


def run_interpolation():
    one = FieldElement.one()
    print(f"lagrange([1, alpha], [1, alpha]) = {lagrange([one, ALPHA], [one, ALPHA])}")
    print(f"lagrange([1, alpha], [alpha, 1])(1) = {lagrange([one, ALPHA], [ALPHA, one])(one)}")
    print()


def run_sharing(threshold: int, secret: FieldElement, seed: int) -> tuple[Polynomial, Polynomial]:
    """Deal `secret` to the three non-zero points, rebuild it from threshold+1 shares."""
    rng.set_seed(seed)
    poly = Polynomial.bounded(threshold).random(secret)
    shares = [(x, poly(x)) for x in (FieldElement(1), ALPHA, ALPHA + 1)]

    print(f"Secret: {secret}")
    print(f"Dealer polynomial: {poly}")
    for x, y in shares:
        print(f"  Share at {x}: {y}")

    used = shares[:threshold + 1]
    recovered = interpolate_at_zero(used)
    rebuilt = lagrange(*zip(*used))
    print(f"Recovered from {len(used)} shares: {recovered}")
    print(f"Recovered polynomial: {rebuilt}")
    print()
    return poly, rebuilt


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42

    banner("SCENARIO 1: Field and polynomial arithmetic")
    run_arithmetic()

    banner("SCENARIO 2: Lagrange interpolation")
    run_interpolation()

    banner("SCENARIO 3: Secret sharing, threshold 1")
    run_sharing(1, ALPHA, seed)

    banner("SCENARIO 4: Secret sharing, threshold 2")
    run_sharing(2, ALPHA + 1, seed + 1)


if __name__ == "__main__":
    main()
