"""Error taxonomy for field and polynomial arithmetic."""


class AlgebraError(Exception):
    """Base class for every precondition violation raised by this package."""


class DomainError(AlgebraError, ValueError):
    """Field element tag outside the field."""


class SizeMismatchError(AlgebraError, ValueError):
    """Coefficient sequence length does not match the degree bound."""


class DivisionByZeroError(AlgebraError, ZeroDivisionError):
    """Division by the zero field element."""


class DegreeOverflowError(AlgebraError, OverflowError):
    """Polynomial product does not fit in the degree bound."""
