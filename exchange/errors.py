"""Exchange error classes.

Each class is one failure kind of a pool transition. A raised error means
the transition was reverted and no state changed.
"""


class ExchangeError(Exception):
    """Base error for exchange operations."""

    pass


class AlreadyInitialized(ExchangeError):
    """The asset pair has already been set."""

    pass


class NotInitialized(ExchangeError):
    """The exchange has no asset pair yet."""

    pass


class InvalidAsset(ExchangeError):
    """Asset id is malformed or not part of the pair."""

    pass


class InvalidAmount(InvalidAsset):
    """Amount is zero or outside the u64 range.

    Derives from InvalidAsset: a deposit must name a pair asset and a
    positive amount, and either failure is reported as InvalidAsset.
    """

    pass


class AmbiguousInput(ExchangeError):
    """Both assets are escrowed so the swap direction is unknown."""

    pass


class InsufficientEscrowBalance(ExchangeError):
    """Withdrawal exceeds the escrowed balance."""

    pass


class InsufficientLiquidityBalance(ExchangeError):
    """Burn amount exceeds the holder's LP balance."""

    pass


class DeadlineExpired(ExchangeError):
    """Current block height is past the caller's deadline."""

    pass


class InsufficientLiquidityMinted(ExchangeError):
    """Mint amount is zero or below the requested minimum."""

    pass


class SlippageExceeded(ExchangeError):
    """Output is below the caller's floor."""

    pass


class InsufficientReserves(ExchangeError):
    """Pool cannot pay the requested amount."""

    pass


class ExcessiveInputRequired(ExchangeError):
    """Exact-output swap needs more input than is escrowed."""

    pass


class InvariantViolation(ExchangeError):
    """A post-transition pool invariant does not hold."""

    pass


class ArithmeticOverflow(ExchangeError, ArithmeticError):
    """Checked arithmetic failed (overflow, underflow or division by zero)."""

    pass


__all__ = [
    "ExchangeError",
    "AlreadyInitialized",
    "NotInitialized",
    "InvalidAsset",
    "InvalidAmount",
    "AmbiguousInput",
    "InsufficientEscrowBalance",
    "InsufficientLiquidityBalance",
    "DeadlineExpired",
    "InsufficientLiquidityMinted",
    "SlippageExceeded",
    "InsufficientReserves",
    "ExcessiveInputRequired",
    "InvariantViolation",
    "ArithmeticOverflow",
]
