"""Pydantic models for the structural interchange form.

A decimal travels as ``{"magnitude", "scale", "sign"}``: the absolute value
with the decimal point removed, the count of fractional digits, and +1/-1.
"""

from typing import Literal

from pydantic import BaseModel, Field


class DecimalParts(BaseModel):
    """Structural form of a fixed-point decimal.

    value = sign * magnitude * 10^(-scale)
    """

    magnitude: int = Field(ge=0, description="Absolute value with the decimal point removed.")
    scale: int = Field(default=0, ge=0, description="Digits right of the decimal point.")
    sign: Literal[1, -1] = Field(default=1, description="+1 or -1. Zero is always +1.")

    model_config = {"frozen": True}


class ComplexParts(BaseModel):
    """Structural form of a complex decimal (re + im*i)."""

    re: DecimalParts = Field(description="Real component.")
    im: DecimalParts = Field(description="Imaginary component.")

    model_config = {"frozen": True}
