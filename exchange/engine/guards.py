"""Argument and state guards shared by the engines."""

from exchange.errors import DeadlineExpired, InvalidAmount
from exchange.models.types import is_u64


def require_amount(value: int, name: str, *, allow_zero: bool = False) -> int:
    """Validate a caller-supplied u64 amount.

    Raises:
        InvalidAmount: If value is not an int in [0, 2^64-1], or is zero
            when allow_zero is False
    """
    if not is_u64(value):
        raise InvalidAmount(f"{name} must be a u64 integer, got {value!r}")
    if value == 0 and not allow_zero:
        raise InvalidAmount(f"{name} must be positive")
    return value


def require_deadline(deadline: int, now: int) -> None:
    """Fail if the current block height is past the deadline.

    Raises:
        InvalidAmount: If deadline is not a u64 integer
        DeadlineExpired: If now > deadline
    """
    require_amount(deadline, "deadline", allow_zero=True)
    if now > deadline:
        raise DeadlineExpired(f"Deadline {deadline} passed (current height {now})")
