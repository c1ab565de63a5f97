"""bigdec - arbitrary-precision fixed-point decimal and complex arithmetic."""

from bigdec.config import DEFAULT_CONFIG, PrecisionConfig
from bigdec.errors import DecimalError, DivisionByZero, InvalidFormat, NegativeSquareRoot
from bigdec.math import ONE, ZERO, ComplexDecimal, FixedDecimal, Ordering
from bigdec.models import ComplexParts, DecimalParts

__version__ = "0.1.0"
__all__ = [
    # Numeric types
    "FixedDecimal",
    "ComplexDecimal",
    "Ordering",
    "ZERO",
    "ONE",
    # Configuration
    "PrecisionConfig",
    "DEFAULT_CONFIG",
    # Structural form
    "DecimalParts",
    "ComplexParts",
    # Errors
    "DecimalError",
    "InvalidFormat",
    "DivisionByZero",
    "NegativeSquareRoot",
    "__version__",
]
