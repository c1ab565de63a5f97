"""Arithmetic kernel for the decimal library.

This package provides the numeric types:
- FixedDecimal: arbitrary-precision signed fixed-point decimal
- ComplexDecimal: complex number over a pair of FixedDecimal values
"""

from bigdec.math.complex_decimal import ComplexDecimal
from bigdec.math.fixed_decimal import ONE, ZERO, FixedDecimal, Ordering

__all__ = ["ComplexDecimal", "FixedDecimal", "Ordering", "ZERO", "ONE"]
