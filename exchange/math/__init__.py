"""Mathematical utilities for the exchange.

This package provides the overflow-checked integer primitives used by every
pool formula:
- mul_div / mul_div_up: wide multiply then floor / ceiling divide
- isqrt: floor square root used for the seeding mint
- checked_add / checked_sub: u64-bounded reserve and balance updates
"""

from exchange.math.fixed_point import (
    checked_add,
    checked_sub,
    isqrt,
    mul_div,
    mul_div_up,
    to_u64,
)

__all__ = [
    "checked_add",
    "checked_sub",
    "isqrt",
    "mul_div",
    "mul_div_up",
    "to_u64",
]
