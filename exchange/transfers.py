"""Destinations for assets released by the pool.

Swap outputs and removed liquidity are sent straight to the caller rather
than back into escrow. The Exchange hands those payouts to an AssetSink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetSink(Protocol):
    """Receives assets released to a recipient."""

    def transfer(self, recipient: str, asset: str, amount: int) -> None: ...


@dataclass(frozen=True)
class Transfer:
    """A single payout recorded by InMemoryWallets."""

    recipient: str
    asset: str
    amount: int


class InMemoryWallets:
    """AssetSink that credits in-memory wallet balances.

    Keeps both the running balances and the ordered list of transfers so
    callers can assert on either.
    """

    def __init__(self) -> None:
        self._balances: dict[tuple[str, str], int] = {}
        self.transfers: list[Transfer] = []

    def transfer(self, recipient: str, asset: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Transfer amount must be non-negative, got {amount}")
        key = (recipient, asset)
        self._balances[key] = self._balances.get(key, 0) + amount
        self.transfers.append(Transfer(recipient=recipient, asset=asset, amount=amount))

    def balance(self, recipient: str, asset: str) -> int:
        return self._balances.get((recipient, asset), 0)
