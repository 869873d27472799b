"""Overflow-checked fixed-point helpers.

All values are non-negative integers. Products are computed at full width
and only the final quotient has to fit in u64, mirroring the u128
intermediates an on-chain implementation would use.

Rounding is explicit: callers pick mul_div (floor) or mul_div_up (ceiling)
so that every formula rounds in the pool's favor.
"""

from __future__ import annotations

import math

from exchange.safe_int import S, SafeInt, Uint64Overflow

__all__ = [
    "mul_div",
    "mul_div_up",
    "isqrt",
    "checked_add",
    "checked_sub",
    "to_u64",
]


def to_u64(value: int | SafeInt) -> int:
    """Validate that value fits in u64 and return it as int.

    Raises:
        Uint64Overflow: If value is negative or above 2^64-1
    """
    return S(value).to_u64()


def mul_div(a: int, b: int, denominator: int) -> int:
    """Compute floor(a * b / denominator).

    Raises:
        DivisionByZero: If denominator is zero
        Uint64Overflow: If the quotient does not fit in u64
    """
    return ((S(a) * S(b)) // S(denominator)).to_u64()


def mul_div_up(a: int, b: int, denominator: int) -> int:
    """Compute ceil(a * b / denominator).

    Raises:
        DivisionByZero: If denominator is zero
        Uint64Overflow: If the quotient does not fit in u64
    """
    return (S(a) * S(b)).ceiling_div(S(denominator)).to_u64()


def isqrt(value: int) -> int:
    """Floor square root of a non-negative integer.

    The argument may be a full-width product (e.g. a * b of two u64
    amounts); the root of such a product always fits in u64.

    Raises:
        Uint64Overflow: If value is negative
    """
    if value < 0:
        raise Uint64Overflow(f"Square root of negative value: {value}")
    return to_u64(math.isqrt(value))


def checked_add(a: int, b: int) -> int:
    """Add two u64 values, failing if the sum exceeds u64."""
    return (S(a) + S(b)).to_u64()


def checked_sub(a: int, b: int) -> int:
    """Subtract b from a, failing on underflow."""
    return (S(a) - S(b)).to_u64()
