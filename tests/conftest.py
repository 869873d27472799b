"""Pytest configuration and fixtures."""

import pytest

from exchange import Exchange
from exchange.clock import ManualClock
from exchange.transfers import InMemoryWallets
from tests.helpers import ALICE, SEED_A, SEED_B, deposit_and_add_liquidity, make_exchange


@pytest.fixture
def clock() -> ManualClock:
    """Block clock starting at height 0."""
    return ManualClock()


@pytest.fixture
def wallets() -> InMemoryWallets:
    """Wallets receiving assets released by the pool."""
    return InMemoryWallets()


@pytest.fixture
def uninitialized_exchange(clock: ManualClock, wallets: InMemoryWallets) -> Exchange:
    """An exchange whose constructor has not been called."""
    return make_exchange(clock=clock, wallets=wallets, initialize=False)


@pytest.fixture
def exchange(clock: ManualClock, wallets: InMemoryWallets) -> Exchange:
    """An initialized, empty, zero-fee exchange for ASSET_A/ASSET_B."""
    return make_exchange(clock=clock, wallets=wallets)


@pytest.fixture
def seeded_exchange(exchange: Exchange) -> Exchange:
    """Zero-fee exchange seeded by ALICE with reserves (100, 400) and 200 LP shares."""
    deposit_and_add_liquidity(exchange, ALICE, SEED_A, SEED_B)
    return exchange


@pytest.fixture
def fee_exchange(clock: ManualClock, wallets: InMemoryWallets) -> Exchange:
    """30 bps exchange seeded by ALICE with reserves (1_000_000, 4_000_000)."""
    exchange = make_exchange(fee_bps=30, clock=clock, wallets=wallets)
    deposit_and_add_liquidity(exchange, ALICE, 1_000_000, 4_000_000)
    return exchange
