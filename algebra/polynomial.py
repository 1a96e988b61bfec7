"""Polynomials of bounded degree over a finite field.

Each degree bound d is its own class, obtained with Polynomial.bounded(d).
A value of that class always holds exactly d + 1 coefficients and
coeffs[0] is the constant term. Values of different bounds never mix.
"""

import functools

from algebra.errors import SizeMismatchError, DegreeOverflowError
from algebra.field import FieldElement


@functools.lru_cache(maxsize=None)
def _bounded_class(degree: int, field: type) -> type:
    name = f"Pol{degree}" if field is FieldElement else f"Pol{degree}_{field.__name__}"
    return type(name, (Polynomial,), {
        '__slots__': (),
        'bound': degree,
        'field': field,
        '__module__': __name__,
    })


class Polynomial:
    """Polynomial of degree at most `bound` over `field`.

    Warning: coefficients are given in ascending order of powers of x,
    so Pol2([a, b, c]) is c.x^2 + b.x + a.
    """

    __slots__ = ('_coeffs',)

    bound: int | None = None
    field: type = FieldElement

    @classmethod
    def bounded(cls, degree: int, field: type = FieldElement) -> type:
        """Return the class of polynomials of degree <= `degree` over `field`."""
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < 0:
            raise ValueError(f"Degree bound must be a non-negative int, got {degree!r}")
        return _bounded_class(degree, field)

    def __init__(self, coeffs):
        if self.bound is None:
            raise TypeError("Use Polynomial.bounded(d) to pick a degree bound")
        coeffs = tuple(self._coerce(c) for c in coeffs)
        if len(coeffs) != self.bound + 1:
            raise SizeMismatchError(
                f"{type(self).__name__} needs {self.bound + 1} coefficients, got {len(coeffs)}")
        object.__setattr__(self, '_coeffs', coeffs)

    def __setattr__(self, name, val):
        raise AttributeError("Polynomial is immutable")

    @classmethod
    def _coerce(cls, c):
        return c if isinstance(c, cls.field) else cls.field(c)

    # -- constructors --

    @classmethod
    def literal(cls, *coeffs) -> 'Polynomial':
        """Build from up to bound + 1 coefficients, padding with zeros."""
        if len(coeffs) > cls.bound + 1:
            raise SizeMismatchError(
                f"{cls.__name__} holds at most {cls.bound + 1} coefficients, got {len(coeffs)}")
        padding = [cls.field.zero()] * (cls.bound + 1 - len(coeffs))
        return cls(list(coeffs) + padding)

    @classmethod
    def zero(cls) -> 'Polynomial':
        return cls.literal()

    @classmethod
    def one(cls) -> 'Polynomial':
        return cls.literal(cls.field.one())

    @classmethod
    def constant(cls, c) -> 'Polynomial':
        return cls.literal(c)

    @classmethod
    def x(cls) -> 'Polynomial':
        """The monomial x."""
        return cls.literal(cls.field.zero(), cls.field.one())

    @classmethod
    def random(cls, constant) -> 'Polynomial':
        """Random polynomial of degree exactly `bound` with p(0) = constant."""
        coeffs = [cls._coerce(constant)]
        for _ in range(cls.bound):
            coeffs.append(cls.field.random())
        return cls(coeffs)

    @classmethod
    def all(cls):
        """Yield every polynomial of this bound once, starting from zero."""
        zero = cls.zero()
        poly = zero
        while True:
            yield poly
            poly = poly.successor()
            if poly == zero:
                return

    # -- accessors --

    @property
    def coeffs(self) -> tuple:
        return self._coeffs

    def degree(self) -> int:
        """Index of the highest non-zero coefficient.

        The zero polynomial has degree 0 here. The degree only serves to
        reject products that would not fit in the bound.
        """
        for i in range(self.bound, 0, -1):
            if self._coeffs[i]:
                return i
        return 0

    # -- arithmetic --

    def _same_space(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return False
        if type(other) is not type(self):
            raise SizeMismatchError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}")
        return True

    def __add__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return type(self)([a + b for a, b in zip(self._coeffs, other._coeffs)])

    def __sub__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return type(self)([a - b for a, b in zip(self._coeffs, other._coeffs)])

    def __neg__(self):
        return type(self)([-c for c in self._coeffs])

    def __mul__(self, other):
        if not self._same_space(other):
            if isinstance(other, (self.field, int)) and not isinstance(other, bool):
                return self.scale(other)
            return NotImplemented
        if self.degree() + other.degree() > self.bound:
            raise DegreeOverflowError(
                f"Product of degrees {self.degree()} and {other.degree()} "
                f"exceeds bound {self.bound}")
        prod = [self.field.zero()] * (self.bound + 1)
        for i in range(self.bound + 1):
            for j in range(i + 1):
                prod[i] = prod[i] + self._coeffs[j] * other._coeffs[i - j]
        return type(self)(prod)

    def __rmul__(self, other):
        if isinstance(other, (self.field, int)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def scale(self, c) -> 'Polynomial':
        """Multiply every coefficient by the scalar c."""
        c = self._coerce(c)
        return type(self)([c * a for a in self._coeffs])

    def evaluate(self, x):
        """Evaluate at x, accumulating ascending powers of x."""
        x = self._coerce(x)
        result = self._coeffs[0]
        power = self.field.one()
        for coeff in self._coeffs[1:]:
            power = power * x
            result = result + coeff * power
        return result

    __call__ = evaluate

    def successor(self) -> 'Polynomial':
        """Next polynomial in enumeration order.

        Coefficients are digits, lowest power first: increment coeffs[0]
        and carry into the next one whenever a digit wraps back to zero.
        """
        coeffs = list(self._coeffs)
        for i, c in enumerate(coeffs):
            coeffs[i] = c.successor()
            if coeffs[i]:
                break
        return type(self)(coeffs)

    # -- comparison and display --

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return type(other) is type(self) and self._coeffs == other._coeffs

    def __hash__(self):
        return hash((self.bound, self._coeffs))

    def __str__(self):
        terms = []
        for i in range(self.bound, -1, -1):
            c = self._coeffs[i]
            if not c:
                continue
            if i == 0:
                terms.append(f"{c}")
            elif i == 1:
                terms.append(f"{c}.x")
            else:
                terms.append(f"{c}.x^{i}")
        return " + ".join(terms) if terms else f"{self.field.zero()}"

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(str(c) for c in self._coeffs)}])"
