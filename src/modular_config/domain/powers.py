"""Power-of-N tests for the addressing-space sizes.

Two strategies:
- exact: integer arithmetic, correct for every positive int.
- float: ``log(value) / log(base)`` has no fractional part. Kept for parity
  with deployments that validated this way; it can misclassify values
  next to large powers (``2**53 + 1`` passes as a power of 2).
"""

from __future__ import annotations

import math
from enum import StrEnum


class PowerCheck(StrEnum):
    """Which power-of-N test the builder applies."""

    EXACT = "exact"
    FLOAT = "float"


def is_power_of(value: int, base: int) -> bool:
    """Return True when *value* is ``base ** k`` for some ``k >= 0``."""
    if value <= 0 or base < 2:
        return False
    if base & (base - 1) == 0:
        # Power-of-two base: one set bit, at a multiple of log2(base).
        step = base.bit_length() - 1
        return value & (value - 1) == 0 and (value.bit_length() - 1) % step == 0
    while value % base == 0:
        value //= base
    return value == 1


def is_power_of_float(value: int, base: int) -> bool:
    """Floating-point power test: ``log(value) / log(base)`` is integral."""
    if value <= 0 or base < 2:
        return False
    exponent = math.log2(value) if base == 2 else math.log(value) / math.log(base)
    return exponent % 1 == 0


def check_power(value: int, base: int, strategy: PowerCheck = PowerCheck.EXACT) -> bool:
    """Dispatch to the power test selected by *strategy*."""
    if strategy == PowerCheck.FLOAT:
        return is_power_of_float(value, base)
    return is_power_of(value, base)
