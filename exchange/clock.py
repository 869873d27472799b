"""Block clock used for deadline checks.

The exchange never advances time itself; the host environment supplies a
monotonically increasing counter (block height or equivalent).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current block height."""

    def now(self) -> int: ...


class ManualClock:
    """Clock advanced explicitly by the host (or a test).

    Usage:
        clock = ManualClock()
        clock.advance(10)
        clock.now()  # 10
    """

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValueError(f"Block height must be non-negative, got {height}")
        self._height = height

    def now(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward and return the new height."""
        if blocks < 0:
            raise ValueError(f"Clock is monotonic, cannot advance by {blocks}")
        self._height += blocks
        return self._height

    def set(self, height: int) -> None:
        if height < self._height:
            raise ValueError(f"Clock is monotonic: {height} < {self._height}")
        self._height = height
