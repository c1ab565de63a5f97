"""Arbitrary-precision fixed-point decimal numbers.

A FixedDecimal is an unbounded non-negative integer magnitude, a scale
(count of digits right of the decimal point) and a sign:

    value = sign * magnitude * 10^(-scale)

Example: "-12.340" is stored as magnitude 1234, scale 2, sign -1.

Values are immutable and always canonical: trailing fractional zeros are
trimmed and zero is (0, 0, +1). Every operation returns a new value.

Addition, subtraction and multiplication are exact. Any result whose scale
exceeds the precision ceiling (PrecisionConfig.max_scale) loses its excess
low-order digits by truncation, never by rounding. Division multiplies by a
reciprocal computed with digit-by-digit long division, and square root uses
Newton-Raphson iteration; both are bounded by the budgets in PrecisionConfig.
"""

from __future__ import annotations

import re
from dataclasses import replace
from decimal import Decimal
from enum import IntEnum
from math import isqrt

import structlog
from pydantic import ValidationError

from bigdec.config import DEFAULT_CONFIG, PrecisionConfig
from bigdec.errors import DivisionByZero, InvalidFormat, NegativeSquareRoot
from bigdec.math.digits import (
    align_scales,
    digit_count,
    digits_to_int,
    int_to_digits,
    is_power_of_ten,
    long_division,
    trim_trailing_zeros,
    truncate_scale,
)
from bigdec.models import DecimalParts

__all__ = [
    # Classes
    "FixedDecimal",
    "Ordering",
    # Constants
    "ZERO",
    "ONE",
]

logger = structlog.get_logger()

# Optional sign, digits, optional single point, more digits (ASCII only)
_NOTATION = re.compile(r"[+-]?[0-9]*(?:\.[0-9]*)?")
_WHITESPACE = re.compile(r"\s+")


class Ordering(IntEnum):
    """Result of FixedDecimal.cmp()."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class FixedDecimal:
    """Signed fixed-point decimal with unbounded magnitude.

    Construct with FixedDecimal("12.5"), FixedDecimal(7), or one of the named
    constructors (from_string, from_int, from_parts, from_model, from_decimal).

    Attributes:
        magnitude: Absolute value with the decimal point removed (read-only)
        scale: Digits right of the decimal point (read-only)
        sign: +1 or -1, always +1 for zero (read-only)
    """

    __slots__ = ("_magnitude", "_scale", "_sign")
    _magnitude: int
    _scale: int
    _sign: int

    def __init__(
        self,
        value: FixedDecimal | str | int | Decimal | DecimalParts = "0",
        config: PrecisionConfig | None = None,
    ) -> None:
        """Create a FixedDecimal from any supported representation.

        Raises:
            InvalidFormat: If a string or structural value is malformed
            TypeError: If value has an unsupported type
        """
        parsed = self.coerce(value, config)
        self._magnitude = parsed._magnitude
        self._scale = parsed._scale
        self._sign = parsed._sign

    # --- Construction ---

    @classmethod
    def _raw(cls, magnitude: int, scale: int, sign: int) -> FixedDecimal:
        """Wrap already-canonical parts without any checks."""
        obj = object.__new__(cls)
        obj._magnitude = magnitude
        obj._scale = scale
        obj._sign = sign
        return obj

    @classmethod
    def _make(
        cls, magnitude: int, scale: int, sign: int, config: PrecisionConfig | None = None
    ) -> FixedDecimal:
        """Canonicalize raw parts produced by the kernel's own algorithms.

        A negative scale is folded into the magnitude, the scale ceiling is
        applied, trailing zeros are trimmed and zero becomes (0, 0, +1).
        """
        config = config or DEFAULT_CONFIG
        if scale < 0:
            magnitude *= 10**-scale
            scale = 0
        magnitude, scale = truncate_scale(magnitude, scale, config.max_scale)
        magnitude, scale = trim_trailing_zeros(magnitude, scale)
        if magnitude == 0:
            return ZERO
        return cls._raw(magnitude, scale, 1 if sign > 0 else -1)

    @classmethod
    def from_string(cls, text: str, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Parse decimal notation such as "12.34", "-0.5", "+7" or ".25".

        Whitespace anywhere in the input is ignored. The empty string, "0",
        "." and a lone sign all parse to zero. Fractional digits beyond the
        precision ceiling are truncated.

        Raises:
            InvalidFormat: If the text is not decimal notation
        """
        if not isinstance(text, str):
            raise TypeError(f"from_string requires str, got {type(text).__name__}")
        compact = _WHITESPACE.sub("", text)
        if not _NOTATION.fullmatch(compact):
            raise InvalidFormat(f"Invalid number notation: {text!r}")

        sign = -1 if compact.startswith("-") else 1
        integer, _, fraction = compact.lstrip("+-").partition(".")
        return cls._make(digits_to_int(integer + fraction), len(fraction), sign, config)

    @classmethod
    def from_int(cls, value: int, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Create from a native integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int requires int, got {type(value).__name__}")
        return cls._make(abs(value), 0, -1 if value < 0 else 1, config)

    @classmethod
    def from_parts(
        cls,
        magnitude: int,
        scale: int = 0,
        sign: int = 1,
        config: PrecisionConfig | None = None,
    ) -> FixedDecimal:
        """Create from the structural form (magnitude, scale, sign).

        Raises:
            InvalidFormat: If magnitude or scale is negative, or sign is not +1/-1
        """
        try:
            parts = DecimalParts(magnitude=magnitude, scale=scale, sign=sign)
        except ValidationError as err:
            raise InvalidFormat(
                f"Invalid decimal parts: magnitude={magnitude!r}, scale={scale!r}, sign={sign!r}"
            ) from err
        return cls.from_model(parts, config)

    @classmethod
    def from_model(cls, parts: DecimalParts, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Create from a validated DecimalParts model."""
        return cls._make(parts.magnitude, parts.scale, parts.sign, config)

    @classmethod
    def from_decimal(cls, value: Decimal, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Create from a finite stdlib Decimal.

        Raises:
            InvalidFormat: If value is NaN or infinite
        """
        if not value.is_finite():
            raise InvalidFormat(f"Cannot convert non-finite Decimal: {value}")
        return cls.from_string(format(value, "f"), config)

    @classmethod
    def coerce(
        cls,
        value: FixedDecimal | str | int | Decimal | DecimalParts,
        config: PrecisionConfig | None = None,
    ) -> FixedDecimal:
        """Convert any supported representation to a FixedDecimal.

        FixedDecimal instances are returned unchanged.

        Raises:
            InvalidFormat: If a string or structural value is malformed
            TypeError: If value has an unsupported type (floats included)
        """
        if isinstance(value, FixedDecimal):
            return value
        if isinstance(value, str):
            return cls.from_string(value, config)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value, config)
        if isinstance(value, Decimal):
            return cls.from_decimal(value, config)
        if isinstance(value, DecimalParts):
            return cls.from_model(value, config)
        raise TypeError(
            f"FixedDecimal requires str, int, Decimal or DecimalParts, got {type(value).__name__}"
        )

    # --- Accessors ---

    @property
    def magnitude(self) -> int:
        return self._magnitude

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def sign(self) -> int:
        return self._sign

    def is_zero(self) -> bool:
        return self._magnitude == 0

    def digit_count(self) -> int:
        """Number of digits in the magnitude (0 for zero)."""
        return digit_count(self._magnitude)

    def integer_digit_count(self) -> int:
        """Digits left of the decimal point: digit_count() - scale.

        Negative for values below 0.1 (0.05 has -1).
        """
        return digit_count(self._magnitude) - self._scale

    def to_parts(self) -> DecimalParts:
        """Return the canonical structural form."""
        return DecimalParts(magnitude=self._magnitude, scale=self._scale, sign=self._sign)

    def to_decimal(self) -> Decimal:
        """Convert to a stdlib Decimal (exact, no context rounding)."""
        digits = tuple(int(d) for d in int_to_digits(self._magnitude))
        return Decimal((0 if self._sign > 0 else 1, digits, -self._scale))

    def to_string(self) -> str:
        """Render the canonical minimal decimal string.

        No leading zeros in the integer part (a single "0" before a bare
        point), no trailing fractional zeros, "-" only for non-zero negatives.
        """
        if self._magnitude == 0:
            return "0"
        digits = int_to_digits(self._magnitude)
        if self._scale:
            digits = digits.rjust(self._scale + 1, "0")
            integer = digits[: -self._scale].lstrip("0") or "0"
            fraction = digits[-self._scale :].rstrip("0")
            text = f"{integer}.{fraction}" if fraction else integer
        else:
            text = digits
        return f"-{text}" if self._sign < 0 else text

    # --- Comparison ---

    def cmp(self, other: FixedDecimal | str | int) -> Ordering:
        """Three-way comparison: GREATER, EQUAL or LESS than other.

        Differing signs order by sign. Otherwise the operand with more
        integer-part digits has the larger absolute value; on a tie both
        magnitudes are aligned to the same scale and compared directly.
        For negative operands the absolute-value order is inverted.
        """
        other = self.coerce(other)
        if (
            self._magnitude == other._magnitude
            and self._scale == other._scale
            and self._sign == other._sign
        ):
            return Ordering.EQUAL
        if self._sign != other._sign:
            return Ordering.GREATER if self._sign > other._sign else Ordering.LESS

        # Same sign: a zero operand means the other one is positive
        if self._magnitude == 0:
            return Ordering.LESS
        if other._magnitude == 0:
            return Ordering.GREATER

        self_digits = self.integer_digit_count()
        other_digits = other.integer_digit_count()
        if self_digits != other_digits:
            larger = self_digits > other_digits
        else:
            a, b, _ = align_scales(self._magnitude, self._scale, other._magnitude, other._scale)
            larger = a > b
        if self._sign < 0:
            larger = not larger
        return Ordering.GREATER if larger else Ordering.LESS

    def eq(self, other: FixedDecimal | str | int) -> bool:
        return self.cmp(other) == Ordering.EQUAL

    def gt(self, other: FixedDecimal | str | int) -> bool:
        return self.cmp(other) == Ordering.GREATER

    def lt(self, other: FixedDecimal | str | int) -> bool:
        return self.cmp(other) == Ordering.LESS

    def ge(self, other: FixedDecimal | str | int) -> bool:
        return self.cmp(other) != Ordering.LESS

    def le(self, other: FixedDecimal | str | int) -> bool:
        return self.cmp(other) != Ordering.GREATER

    # --- Arithmetic ---

    def negate(self) -> FixedDecimal:
        """Return -self."""
        if self._magnitude == 0:
            return self
        return self._raw(self._magnitude, self._scale, -self._sign)

    def abs(self) -> FixedDecimal:
        """Return |self|."""
        if self._sign > 0:
            return self
        return self._raw(self._magnitude, self._scale, 1)

    def add(
        self, other: FixedDecimal | str | int, config: PrecisionConfig | None = None
    ) -> FixedDecimal:
        """Exact addition.

        Both magnitudes are aligned to the larger scale. Equal signs add the
        magnitudes; differing signs subtract the smaller magnitude from the
        larger and take the sign of the larger operand.
        """
        other = self.coerce(other, config)
        a, b, scale = align_scales(self._magnitude, self._scale, other._magnitude, other._scale)
        if self._sign == other._sign:
            return self._make(a + b, scale, self._sign, config)
        if a >= b:
            return self._make(a - b, scale, self._sign, config)
        return self._make(b - a, scale, other._sign, config)

    def sub(
        self, other: FixedDecimal | str | int, config: PrecisionConfig | None = None
    ) -> FixedDecimal:
        """Exact subtraction: self + (-other)."""
        return self.add(self.coerce(other, config).negate(), config)

    def mul(
        self, other: FixedDecimal | str | int, config: PrecisionConfig | None = None
    ) -> FixedDecimal:
        """Multiplication: magnitudes multiply, scales add, signs multiply.

        Exact up to the precision ceiling, beyond which digits are truncated.
        """
        other = self.coerce(other, config)
        return self._make(
            self._magnitude * other._magnitude,
            self._scale + other._scale,
            self._sign * other._sign,
            config,
        )

    def _reciprocal_parts(self, config: PrecisionConfig) -> tuple[int, int, int]:
        """Compute 1/self as raw (magnitude, scale, sign) without the ceiling.

        With count = digit_count(magnitude), the quotient digits of
        10^count / magnitude are produced by long division, so

            1/self = quotient * 10^-(count + produced - 1 - scale)

        The returned scale may be negative (1/0.05 = 2 * 10^1) or exceed the
        ceiling; _make() takes care of both.

        Raises:
            DivisionByZero: If self is zero
        """
        if self._magnitude == 0:
            raise DivisionByZero("Reciprocal of zero")

        count = digit_count(self._magnitude)
        if is_power_of_ten(self._magnitude):
            # 1 / (10^(count-1) * 10^-scale) is a pure shift
            return 1, count - 1 - self._scale, self._sign

        quotient, produced = long_division(10**count, self._magnitude, config.reciprocal_digits)
        return quotient, count + produced - 1 - self._scale, self._sign

    def reciprocal(self, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Return 1/self, truncated at the precision ceiling.

        Raises:
            DivisionByZero: If self is zero
        """
        config = config or DEFAULT_CONFIG
        return self._make(*self._reciprocal_parts(config), config)

    def div(
        self, other: FixedDecimal | str | int, config: PrecisionConfig | None = None
    ) -> FixedDecimal:
        """Divide by multiplying with the reciprocal of other.

        The reciprocal is kept at full long-division precision and the
        ceiling is applied once, to the product.

        Raises:
            DivisionByZero: If other is zero
        """
        config = config or DEFAULT_CONFIG
        other = self.coerce(other, config)
        magnitude, scale, sign = other._reciprocal_parts(config)
        return self._make(
            self._magnitude * magnitude,
            self._scale + scale,
            self._sign * sign,
            config,
        )

    def sqrt(self, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Square root by Newton-Raphson iteration.

        Algorithm:
            1. Zero and one are returned as-is
            2. Seed x = value / 2 (value itself if that truncates to zero)
            3. Iterate x -> (x + value / x) / 2 until an iterate repeats
               its predecessor, or the one before it (a truncation-induced
               2-cycle)
            4. Replace the converged estimate with the exact truncated root at
               the precision ceiling, taken as an integer square root

        If sqrt_max_iterations is exhausted, the current estimate is returned
        unsettled and a sqrt_precision_insufficient warning is logged; callers
        must treat such a result as approximate.

        Raises:
            NegativeSquareRoot: If self is negative
        """
        config = config or DEFAULT_CONFIG
        if self._sign < 0:
            raise NegativeSquareRoot(f"Square root of negative value {self}")

        value = self._make(self._magnitude, self._scale, self._sign, config)
        if value.is_zero() or value == ONE:
            return value

        # Quotient digits must reach the ceiling however large the value is
        working = replace(
            config,
            reciprocal_digits=max(
                config.reciprocal_digits, value.integer_digit_count() + 2 * config.max_scale
            ),
        )

        estimate = value.div(2, config)
        if estimate.is_zero():
            estimate = value
        previous = None

        for iteration in range(1, config.sqrt_max_iterations + 1):
            refined = estimate.add(value.div(estimate, working), config).div(2, config)
            if refined == estimate or refined == previous:
                logger.debug("sqrt_converged", value=str(value), iterations=iteration)
                return value._settle_sqrt(config)
            previous, estimate = estimate, refined

        logger.warning(
            "sqrt_precision_insufficient",
            value=str(value),
            iterations=config.sqrt_max_iterations,
            estimate=str(estimate),
        )
        return estimate

    def _settle_sqrt(self, config: PrecisionConfig) -> FixedDecimal:
        """Return floor(sqrt(self)) at max_scale digits, exactly."""
        max_scale = config.max_scale
        root = isqrt(self._magnitude * 10 ** (2 * max_scale - self._scale))
        return self._make(root, max_scale, 1, config)

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"FixedDecimal('{self.to_string()}')"

    def __hash__(self) -> int:
        # Equal to the matching int and Decimal, so hash like them
        return hash(self.to_decimal())

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._magnitude != 0

    def __eq__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.cmp(operand) == Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.cmp(operand) == Ordering.LESS

    def __le__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.cmp(operand) != Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.cmp(operand) == Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.cmp(operand) != Ordering.LESS

    def __neg__(self) -> FixedDecimal:
        return self.negate()

    def __pos__(self) -> FixedDecimal:
        return self

    def __abs__(self) -> FixedDecimal:
        return self.abs()

    def __add__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.sub(operand)

    def __rsub__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.sub(self)

    def __mul__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.mul(operand)

    def __rmul__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.mul(self)

    def __truediv__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.div(operand)

    def __rtruediv__(self, other: object) -> FixedDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.div(self)


def _operand(value: object) -> FixedDecimal | None:
    """Coerce an operator operand, or None if its type is not supported."""
    if isinstance(value, FixedDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return FixedDecimal.from_int(value)
    if isinstance(value, Decimal) and value.is_finite():
        return FixedDecimal.from_decimal(value)
    return None


# =============================================================================
# Module-level constants
# =============================================================================

ZERO = FixedDecimal._raw(0, 0, 1)
ONE = FixedDecimal._raw(1, 0, 1)
