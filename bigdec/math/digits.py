"""Digit-level helpers over unbounded non-negative integers.

A fixed-point decimal is stored as a non-negative integer magnitude plus a
scale (count of fractional digits). These helpers implement the digit
manipulations the arithmetic kernel needs on that representation: counting
digits, aligning scales, trimming and truncating low-order digits, and the
digit-by-digit long division behind the reciprocal.

All functions are pure and take plain ints.
"""

from __future__ import annotations

__all__ = [
    # Conversion
    "digits_to_int",
    "int_to_digits",
    # Digit introspection
    "digit_count",
    "is_power_of_ten",
    # Scale manipulation
    "align_scales",
    "trim_trailing_zeros",
    "truncate_scale",
    # Division
    "long_division",
]

# Digits converted per step. CPython refuses int<->str conversions above
# sys.get_int_max_str_digits() (4300 by default), so longer numbers are
# processed in chunks below that limit.
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def digits_to_int(digits: str) -> int:
    """Parse a string of ASCII digits into an int.

    The empty string parses to 0.

    Args:
        digits: String containing only 0-9

    Returns:
        The integer value

    Raises:
        ValueError: If digits contains anything but ASCII digits
    """
    if not digits:
        return 0
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)

    head = len(digits) % _CHUNK_DIGITS or _CHUNK_DIGITS
    value = int(digits[:head])
    for start in range(head, len(digits), _CHUNK_DIGITS):
        value = value * _CHUNK_BASE + int(digits[start : start + _CHUNK_DIGITS])
    return value


def int_to_digits(value: int) -> str:
    """Render a non-negative int as a string of decimal digits.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"int_to_digits requires non-negative input, got {value}")
    if value < _CHUNK_BASE:
        return str(value)

    chunks = []
    while value >= _CHUNK_BASE:
        value, chunk = divmod(value, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def digit_count(value: int) -> int:
    """Count the decimal digits of a non-negative int.

    Zero has no significant digits and counts as 0.

    Examples:
        digit_count(0) = 0
        digit_count(7) = 1
        digit_count(1234) = 4
    """
    if value < 0:
        raise ValueError(f"digit_count requires non-negative input, got {value}")
    if value == 0:
        return 0

    # 1233 / 4096 slightly underestimates log10(2), so 10^(count - 1) <= value
    count = ((value.bit_length() - 1) * 1233 >> 12) + 1
    while value >= 10**count:
        count += 1
    return count


def is_power_of_ten(value: int) -> bool:
    """Check whether value is exactly 10^k for some k >= 0 (1, 10, 100, ...)."""
    if value <= 0:
        return False
    return value == 10 ** (digit_count(value) - 1)


def align_scales(
    a_magnitude: int, a_scale: int, b_magnitude: int, b_scale: int
) -> tuple[int, int, int]:
    """Bring two magnitudes to a common scale.

    The operand with the smaller scale is scaled up by appending zero digits,
    i.e. its magnitude is multiplied by 10^(scale difference).

    Returns:
        (aligned_a, aligned_b, common_scale)

    Examples:
        12.5 and 0.125 -> (12500, 125, 3)
    """
    if a_scale > b_scale:
        return a_magnitude, b_magnitude * 10 ** (a_scale - b_scale), a_scale
    if b_scale > a_scale:
        return a_magnitude * 10 ** (b_scale - a_scale), b_magnitude, b_scale
    return a_magnitude, b_magnitude, a_scale


def trim_trailing_zeros(magnitude: int, scale: int) -> tuple[int, int]:
    """Drop trailing zero fractional digits.

    Decreases scale and divides magnitude by 10 while the magnitude is
    divisible by 10 and scale > 0. Zero collapses to (0, 0).
    """
    if magnitude == 0:
        return 0, 0
    while scale > 0 and magnitude % 10 == 0:
        magnitude //= 10
        scale -= 1
    return magnitude, scale


def truncate_scale(magnitude: int, scale: int, max_scale: int) -> tuple[int, int]:
    """Clamp scale to max_scale by dropping excess low-order digits.

    This truncates toward zero: the dropped digits are discarded, never
    rounded.

    Examples:
        truncate_scale(123456, 5, 3) = (1234, 3)   # 1.23456 -> 1.234
    """
    if scale <= max_scale:
        return magnitude, scale
    return magnitude // 10 ** (scale - max_scale), max_scale


def long_division(dividend: int, divisor: int, max_digits: int) -> tuple[int, int]:
    """Compute quotient digits of dividend / divisor one digit at a time.

    The first quotient digit is dividend // divisor. Each following digit
    comes from the previous remainder times 10. Stops early once the
    remainder reaches zero (exact terminating decimal).

    The caller must ensure every produced quotient digit is a single digit,
    i.e. dividend < 10 * divisor.

    Args:
        dividend: Non-negative dividend
        divisor: Positive divisor
        max_digits: Maximum number of quotient digits to produce

    Returns:
        (quotient, digits_produced), where quotient holds the produced digits
        as an integer

    Raises:
        ZeroDivisionError: If divisor is zero

    Examples:
        long_division(10, 4, 20) = (25, 2)      # 10 / 4 = 2.5
        long_division(10, 3, 5) = (33333, 5)    # 10 / 3 = 3.3333...
    """
    if divisor == 0:
        raise ZeroDivisionError("Division by zero in long_division")

    quotient = 0
    remainder = dividend
    produced = 0
    while produced < max_digits:
        digit, remainder = divmod(remainder, divisor)
        quotient = quotient * 10 + digit
        produced += 1
        if remainder == 0:
            break
        remainder *= 10
    return quotient, produced
