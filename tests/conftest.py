"""Pytest configuration and fixtures."""

import pytest

from bigdec import FixedDecimal, PrecisionConfig
from tests.helpers.constants import SAMPLE_VALUES


@pytest.fixture
def tight_config() -> PrecisionConfig:
    """Config with small budgets, for exercising truncation and caps."""
    return PrecisionConfig(max_scale=4, reciprocal_digits=8, sqrt_max_iterations=50)


@pytest.fixture
def sample_decimals() -> list[FixedDecimal]:
    """Parsed SAMPLE_VALUES."""
    return [FixedDecimal.from_string(value) for value in SAMPLE_VALUES]
