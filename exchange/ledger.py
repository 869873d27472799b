"""Escrow and LP balance tracking.

EscrowLedger holds funds deposited by a caller that are not yet committed
to the reserves. LiquidityLedger holds minted LP shares per holder.
Both are plain in-memory tables owned by a single Exchange; the Exchange
saves and restores the caller's rows around each transition.
"""

from __future__ import annotations

from collections.abc import Iterable

from exchange.errors import InsufficientEscrowBalance, InsufficientLiquidityBalance
from exchange.math import checked_add

EscrowKey = tuple[str, str]


class EscrowLedger:
    """Pending balances keyed by (identity, asset).

    Zero balances are omitted to keep the table sparse: a row exists only
    while the depositor has something escrowed.
    """

    def __init__(self) -> None:
        self._balances: dict[EscrowKey, int] = {}

    def get(self, identity: str, asset: str) -> int:
        """Get escrowed balance. Returns 0 if there is no row."""
        return self._balances.get((identity, asset), 0)

    def credit(self, identity: str, asset: str, amount: int) -> int:
        """Increase the escrowed balance and return the new value.

        Raises:
            Uint64Overflow: If the balance would exceed u64
        """
        new_balance = checked_add(self.get(identity, asset), amount)
        self._balances[(identity, asset)] = new_balance
        return new_balance

    def debit(self, identity: str, asset: str, amount: int) -> int:
        """Decrease the escrowed balance and return the new value.

        Raises:
            InsufficientEscrowBalance: If amount exceeds the balance
        """
        current = self.get(identity, asset)
        if amount > current:
            raise InsufficientEscrowBalance(
                f"Escrowed {current} of {asset} for {identity}, requested {amount}"
            )
        new_balance = current - amount
        if new_balance == 0:
            self._balances.pop((identity, asset), None)
        else:
            self._balances[(identity, asset)] = new_balance
        return new_balance

    def save_rows(self, keys: Iterable[EscrowKey]) -> dict[EscrowKey, int | None]:
        """Copy the given rows so restore_rows() can put them back.

        Missing rows are recorded as None.
        """
        return {key: self._balances.get(key) for key in keys}

    def restore_rows(self, rows: dict[EscrowKey, int | None]) -> None:
        for key, value in rows.items():
            if value is None:
                self._balances.pop(key, None)
            else:
                self._balances[key] = value

    def __len__(self) -> int:
        return len(self._balances)


class LiquidityLedger:
    """LP share balances per holder.

    Rows are kept at zero after a full burn so a holder's history stays
    visible. The sum over all holders equals the pool's lp_supply.
    """

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}

    def get(self, holder: str) -> int:
        return self._balances.get(holder, 0)

    def mint(self, holder: str, amount: int) -> int:
        new_balance = checked_add(self.get(holder), amount)
        self._balances[holder] = new_balance
        return new_balance

    def burn(self, holder: str, amount: int) -> int:
        """Burn LP shares from a holder.

        Raises:
            InsufficientLiquidityBalance: If amount exceeds the holder's balance
        """
        current = self.get(holder)
        if amount > current:
            raise InsufficientLiquidityBalance(
                f"{holder} holds {current} LP shares, cannot burn {amount}"
            )
        self._balances[holder] = current - amount
        return current - amount

    def total(self) -> int:
        return sum(self._balances.values())

    def holders(self) -> list[str]:
        return list(self._balances)

    def save_rows(self, holders: Iterable[str]) -> dict[str, int | None]:
        return {holder: self._balances.get(holder) for holder in holders}

    def restore_rows(self, rows: dict[str, int | None]) -> None:
        for holder, value in rows.items():
            if value is None:
                self._balances.pop(holder, None)
            else:
                self._balances[holder] = value
