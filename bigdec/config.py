"""Precision configuration for the decimal kernel."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Maximum number of fractional digits kept after any operation
MAX_SCALE = 20

# Quotient digits produced by one reciprocal long division
RECIPROCAL_DIGITS = 40

# Newton-Raphson cap for square root
SQRT_MAX_ITERATIONS = 100_000


@dataclass(frozen=True)
class PrecisionConfig:
    """Centralized precision budgets for the decimal kernel.

    Every loop in the kernel is bounded by one of these counters, and the
    scale ceiling decides where low-order fractional digits are truncated.

    Attributes:
        max_scale: Precision ceiling, the largest scale any value may carry
            (default: 20). Digits beyond it are dropped, never rounded.
        reciprocal_digits: Maximum quotient digits computed by the reciprocal
            long division (default: 40)
        sqrt_max_iterations: Newton iteration cap for square root
            (default: 100,000). Hitting it degrades to an approximate result.
    """

    max_scale: int = MAX_SCALE
    reciprocal_digits: int = RECIPROCAL_DIGITS
    sqrt_max_iterations: int = SQRT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        for name in ("max_scale", "reciprocal_digits", "sqrt_max_iterations"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls) -> PrecisionConfig:
        """Build a config from environment variables.

        Configuration via environment variables:
        - BIGDEC_MAX_SCALE: Precision ceiling (default: 20)
        - BIGDEC_RECIPROCAL_DIGITS: Reciprocal digit budget (default: 40)
        - BIGDEC_SQRT_MAX_ITERATIONS: Newton iteration cap (default: 100000)

        Raises:
            ValueError: If a variable is not a positive integer, naming it
        """
        return cls(
            max_scale=_env_int("BIGDEC_MAX_SCALE", MAX_SCALE),
            reciprocal_digits=_env_int("BIGDEC_RECIPROCAL_DIGITS", RECIPROCAL_DIGITS),
            sqrt_max_iterations=_env_int("BIGDEC_SQRT_MAX_ITERATIONS", SQRT_MAX_ITERATIONS),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from err
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


# Default configuration instance. Opt into environment overrides with
# PrecisionConfig.from_env() and pass the result explicitly.
DEFAULT_CONFIG = PrecisionConfig()
