"""Factory functions for creating test exchanges.

Usage:
    from tests.helpers import make_exchange, deposit_and_add_liquidity

    exchange = make_exchange(fee_bps=0)
    minted = deposit_and_add_liquidity(exchange, ALICE, 100, 400)
"""

from exchange import Exchange, ExchangeConfig
from exchange.clock import ManualClock
from exchange.transfers import InMemoryWallets
from tests.helpers.constants import ASSET_A, ASSET_B, DEADLINE


def make_exchange(
    fee_bps: int = 0,
    clock: ManualClock | None = None,
    wallets: InMemoryWallets | None = None,
    initialize: bool = True,
) -> Exchange:
    """Create an exchange with injected clock and wallets.

    Args:
        fee_bps: Swap fee (default: 0 so expected amounts are easy to compute)
        clock: Block clock (default: new ManualClock at height 0)
        wallets: Asset sink (default: new InMemoryWallets)
        initialize: Whether to call constructor(ASSET_A, ASSET_B)

    Returns:
        Exchange ready for testing
    """
    exchange = Exchange(
        config=ExchangeConfig(fee_bps=fee_bps),
        clock=clock if clock is not None else ManualClock(),
        sink=wallets if wallets is not None else InMemoryWallets(),
    )
    if initialize:
        exchange.constructor(ASSET_A, ASSET_B)
    return exchange


def deposit_both(exchange: Exchange, sender: str, amount_a: int, amount_b: int) -> None:
    """Escrow both assets without adding liquidity. Zero amounts are skipped."""
    if amount_a:
        exchange.deposit(sender, ASSET_A, amount_a)
    if amount_b:
        exchange.deposit(sender, ASSET_B, amount_b)


def deposit_and_add_liquidity(
    exchange: Exchange,
    sender: str,
    amount_a: int,
    amount_b: int,
    desired_liquidity: int = 0,
    deadline: int = DEADLINE,
) -> int:
    """Escrow both assets and add liquidity. Returns the minted shares."""
    deposit_both(exchange, sender, amount_a, amount_b)
    return exchange.add_liquidity(sender, desired_liquidity, deadline)
