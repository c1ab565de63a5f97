"""Complex numbers over fixed-point decimals.

A ComplexDecimal is a pair of FixedDecimal values (re, im) representing
re + im*i. Every operation delegates component-wise to FixedDecimal:

    (a+bi) + (c+di) = (a+c) + (b+d)i
    (a+bi) * (c+di) = (ac-bd) + (ad+bc)i
    1 / (a+bi)      = (a-bi) / (a^2+b^2)

so precision and error behavior are exactly those of FixedDecimal.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import ValidationError

from bigdec.config import DEFAULT_CONFIG, PrecisionConfig
from bigdec.errors import DivisionByZero, InvalidFormat
from bigdec.math.fixed_decimal import ZERO, FixedDecimal
from bigdec.models import ComplexParts, DecimalParts

__all__ = ["ComplexDecimal"]

RealLike = FixedDecimal | str | int | Decimal | DecimalParts


class ComplexDecimal:
    """Complex number with FixedDecimal real and imaginary parts.

    Attributes:
        re: Real component (read-only)
        im: Imaginary component (read-only)
    """

    __slots__ = ("_re", "_im")
    _re: FixedDecimal
    _im: FixedDecimal

    def __init__(
        self,
        re: RealLike = "0",
        im: RealLike = "0",
        config: PrecisionConfig | None = None,
    ) -> None:
        self._re = FixedDecimal.coerce(re, config)
        self._im = FixedDecimal.coerce(im, config)

    @classmethod
    def coerce(
        cls, value: ComplexDecimal | ComplexParts | RealLike, config: PrecisionConfig | None = None
    ) -> ComplexDecimal:
        """Convert a complex or real value to a ComplexDecimal.

        Real values get a zero imaginary part.
        """
        if isinstance(value, ComplexDecimal):
            return value
        if isinstance(value, ComplexParts):
            return cls.from_model(value, config)
        return cls(value, ZERO, config)

    @classmethod
    def from_parts(
        cls,
        re: DecimalParts | dict,
        im: DecimalParts | dict,
        config: PrecisionConfig | None = None,
    ) -> ComplexDecimal:
        """Create from the structural form of both components.

        Raises:
            InvalidFormat: If either component fails validation
        """
        try:
            parts = ComplexParts.model_validate({"re": re, "im": im})
        except ValidationError as err:
            raise InvalidFormat(f"Invalid complex parts: re={re!r}, im={im!r}") from err
        return cls.from_model(parts, config)

    @classmethod
    def from_model(cls, parts: ComplexParts, config: PrecisionConfig | None = None) -> ComplexDecimal:
        return cls(
            FixedDecimal.from_model(parts.re, config),
            FixedDecimal.from_model(parts.im, config),
        )

    def to_parts(self) -> ComplexParts:
        return ComplexParts(re=self._re.to_parts(), im=self._im.to_parts())

    @property
    def re(self) -> FixedDecimal:
        return self._re

    @property
    def im(self) -> FixedDecimal:
        return self._im

    def is_zero(self) -> bool:
        """True iff both components are zero."""
        return self._re.is_zero() and self._im.is_zero()

    # --- Arithmetic ---

    def negate(self) -> ComplexDecimal:
        return ComplexDecimal(self._re.negate(), self._im.negate())

    def conjugate(self) -> ComplexDecimal:
        return ComplexDecimal(self._re, self._im.negate())

    def add(
        self, other: ComplexDecimal | RealLike, config: PrecisionConfig | None = None
    ) -> ComplexDecimal:
        other = self.coerce(other, config)
        return ComplexDecimal(self._re.add(other._re, config), self._im.add(other._im, config))

    def sub(
        self, other: ComplexDecimal | RealLike, config: PrecisionConfig | None = None
    ) -> ComplexDecimal:
        other = self.coerce(other, config)
        return ComplexDecimal(self._re.sub(other._re, config), self._im.sub(other._im, config))

    def mul(
        self, other: ComplexDecimal | RealLike, config: PrecisionConfig | None = None
    ) -> ComplexDecimal:
        """(a+bi)(c+di) = (ac-bd) + (ad+bc)i"""
        other = self.coerce(other, config)
        a, b = self._re, self._im
        c, d = other._re, other._im
        return ComplexDecimal(
            a.mul(c, config).sub(b.mul(d, config), config),
            a.mul(d, config).add(b.mul(c, config), config),
        )

    def reciprocal(self, config: PrecisionConfig | None = None) -> ComplexDecimal:
        """1/(a+bi) = (a-bi)/(a^2+b^2)

        Raises:
            DivisionByZero: If self is zero, or a^2+b^2 truncates to zero
        """
        config = config or DEFAULT_CONFIG
        if self.is_zero():
            raise DivisionByZero("Reciprocal of complex zero")
        a, b = self._re, self._im
        bottom = a.mul(a, config).add(b.mul(b, config), config)
        return ComplexDecimal(a.div(bottom, config), b.negate().div(bottom, config))

    def div(
        self, other: ComplexDecimal | RealLike, config: PrecisionConfig | None = None
    ) -> ComplexDecimal:
        """Multiply by the reciprocal of other.

        Raises:
            DivisionByZero: If other is zero
        """
        return self.mul(self.coerce(other, config).reciprocal(config), config)

    def abs(self, config: PrecisionConfig | None = None) -> FixedDecimal:
        """Modulus sqrt(re^2 + im^2).

        When one component is zero the modulus is the absolute value of the
        other, returned exactly without iterating.
        """
        if self._im.is_zero():
            return self._re.abs()
        if self._re.is_zero():
            return self._im.abs()
        a, b = self._re, self._im
        return a.mul(a, config).add(b.mul(b, config), config).sqrt(config)

    def sqrt(self, config: PrecisionConfig | None = None) -> ComplexDecimal:
        """Principal square root.

        sqrt(a+bi) = sqrt((|z|+a)/2) + sgn(b) * sqrt((|z|-a)/2) i

        with sgn(0) taken as +1, so negative reals map to the positive
        imaginary axis instead of raising NegativeSquareRoot.
        """
        if self.is_zero():
            return self
        a, b = self._re, self._im
        if b.is_zero():
            if a.sign > 0:
                return ComplexDecimal(a.sqrt(config), ZERO)
            return ComplexDecimal(ZERO, a.negate().sqrt(config))

        modulus = self.abs(config)
        # Truncation can leave |z| a few units below |a|
        half_sum = modulus.add(a, config).div(2, config)
        half_diff = modulus.sub(a, config).div(2, config)
        if half_sum.sign < 0:
            half_sum = ZERO
        if half_diff.sign < 0:
            half_diff = ZERO

        imaginary = half_diff.sqrt(config)
        if b.sign < 0:
            imaginary = imaginary.negate()
        return ComplexDecimal(half_sum.sqrt(config), imaginary)

    # --- Rendering ---

    def to_string(self) -> str:
        """Render as "re + imi" / "re - |im|i".

        Zero renders as "0". A zero part is omitted, the separator is not:
        (0, 3) renders " + 3i", (0, -3) renders " - 3i" and (2.5, 0) renders
        "2.5".
        """
        re_zero = self._re.is_zero()
        im_zero = self._im.is_zero()
        if re_zero and im_zero:
            return "0"
        text = "" if re_zero else self._re.to_string()
        if im_zero:
            return text
        if self._im.sign > 0:
            return f"{text} + {self._im.to_string()}i"
        return f"{text} - {self._im.abs().to_string()}i"

    # --- Python protocol ---

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ComplexDecimal('{self._re}', '{self._im}')"

    def __hash__(self) -> int:
        if self._im.is_zero():
            return hash(self._re)
        return hash((self._re, self._im))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self._re == operand._re and self._im == operand._im

    def __neg__(self) -> ComplexDecimal:
        return self.negate()

    def __pos__(self) -> ComplexDecimal:
        return self

    def __abs__(self) -> FixedDecimal:
        return self.abs()

    def __add__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.sub(operand)

    def __rsub__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.sub(self)

    def __mul__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.mul(operand)

    def __rmul__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.mul(self)

    def __truediv__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return self.div(operand)

    def __rtruediv__(self, other: object) -> ComplexDecimal:
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return operand.div(self)


def _operand(value: object) -> ComplexDecimal | None:
    """Coerce an operator operand, or None if its type is not supported."""
    if isinstance(value, ComplexDecimal):
        return value
    if isinstance(value, FixedDecimal):
        return ComplexDecimal(value, ZERO)
    if isinstance(value, int) and not isinstance(value, bool):
        return ComplexDecimal(value, ZERO)
    if isinstance(value, Decimal) and value.is_finite():
        return ComplexDecimal(value, ZERO)
    return None
