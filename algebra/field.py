"""Finite field arithmetic over GF(4) = GF(2)[x]/(x^2 + x + 1).

Elements are stored as a tag in [0, 4):
    0 <-> 0
    1 <-> 1
    2 <-> alpha, the image of x
    3 <-> alpha + 1
"""

from algebra import rng
from algebra.errors import DomainError, DivisionByZeroError

ORDER = 4

ADDITION = (
    (0, 1, 2, 3),
    (1, 0, 3, 2),
    (2, 3, 0, 1),
    (3, 2, 1, 0),
)

MULTIPLICATION = (
    (0, 0, 0, 0),
    (0, 1, 2, 3),
    (0, 2, 3, 1),
    (0, 3, 1, 2),
)

# DIVISION[a][b] = a / b. Column 0 is never read.
DIVISION = (
    (None, 0, 0, 0),
    (None, 1, 3, 2),
    (None, 2, 1, 3),
    (None, 3, 2, 1),
)

_NAMES = ('0', '1', 'alpha', 'alpha+1')


class FieldElement:
    """Element of GF(4)."""

    __slots__ = ('_value',)

    def __init__(self, value: int = 0):
        if isinstance(value, FieldElement):
            value = value._value
        if isinstance(value, bool) or not isinstance(value, int):
            raise DomainError(f"GF(4) tag must be an int, got {type(value).__name__}")
        if not 0 <= value < ORDER:
            raise DomainError(f"GF(4) tag must be in [0, {ORDER}), got {value}")
        self._value = value

    def __setattr__(self, name, val):
        if hasattr(self, '_value'):
            raise AttributeError("FieldElement is immutable")
        object.__setattr__(self, name, val)

    @staticmethod
    def _coerce(other):
        if isinstance(other, FieldElement):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return FieldElement(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(ADDITION[self._value][other._value])

    __radd__ = __add__

    # Characteristic 2: subtraction is addition.
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(MULTIPLICATION[self._value][other._value])

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._value == 0:
            raise DivisionByZeroError("Element 0 of GF(4) is not invertible")
        return FieldElement(DIVISION[self._value][other._value])

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return self

    def __pow__(self, exp: int):
        if exp < 0:
            return self.inverse() ** -exp
        if not self:
            return FieldElement.one() if exp == 0 else self
        # The multiplicative group has order 3.
        result = FieldElement.one()
        for _ in range(exp % (ORDER - 1)):
            result = result * self
        return result

    def __eq__(self, other):
        if isinstance(other, FieldElement):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return self._value != 0

    def __str__(self):
        return _NAMES[self._value]

    def __repr__(self):
        return f"GF4({_NAMES[self._value]})"

    def inverse(self) -> 'FieldElement':
        """Multiplicative inverse, 1 / self."""
        return FieldElement.one() / self

    def successor(self) -> 'FieldElement':
        """Next element in the order 0, 1, alpha, alpha+1, then back to 0."""
        return FieldElement((self._value + 1) % ORDER)

    def to_int(self) -> int:
        return self._value

    @staticmethod
    def random() -> 'FieldElement':
        """Return a random non-zero field element."""
        return FieldElement(rng.randrange(1, ORDER))

    @staticmethod
    def random_including_zero() -> 'FieldElement':
        """Return a random field element (may be zero)."""
        return FieldElement(rng.randbelow(ORDER))

    @staticmethod
    def zero():
        return FieldElement(0)

    @staticmethod
    def one():
        return FieldElement(1)


ALPHA = FieldElement(2)


def elements():
    """Yield every element of GF(4) once, following successor() from 0."""
    elt = FieldElement.zero()
    while True:
        yield elt
        elt = elt.successor()
        if not elt:
            return
