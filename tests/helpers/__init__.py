"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Shared value sets for property checks
- factories: Short constructors for decimals, complexes and configs
"""

from tests.helpers.constants import MUL_SAMPLE_VALUES, PERFECT_SQUARES, SAMPLE_VALUES
from tests.helpers.factories import cpx, dec, make_config

__all__ = [
    # Constants
    "SAMPLE_VALUES",
    "MUL_SAMPLE_VALUES",
    "PERFECT_SQUARES",
    # Factories
    "dec",
    "cpx",
    "make_config",
]
