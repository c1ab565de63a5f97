"""Decimal kernel error classes.

All errors are fatal and surface to the caller unchanged. Each one also
derives from the matching builtin so generic handlers keep working.
"""


class DecimalError(ArithmeticError):
    """Base class for decimal kernel errors."""

    pass


class InvalidFormat(DecimalError, ValueError):
    """Input does not match the decimal notation or structural form."""

    pass


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Reciprocal or division requested on a zero operand."""

    pass


class NegativeSquareRoot(DecimalError, ValueError):
    """Square root requested on a negative real operand."""

    pass
