"""Test helpers module for shared test utilities.

- constants: asset ids, identities and default liquidity amounts
- factories: exchange construction and deposit helpers
"""

from tests.helpers.constants import (
    ALICE,
    ASSET_A,
    ASSET_B,
    ASSET_C,
    BOB,
    CAROL,
    DEADLINE,
    SEED_A,
    SEED_B,
    SEED_LIQUIDITY,
)
from tests.helpers.factories import deposit_and_add_liquidity, deposit_both, make_exchange

__all__ = [
    # Constants
    "ASSET_A",
    "ASSET_B",
    "ASSET_C",
    "ALICE",
    "BOB",
    "CAROL",
    "SEED_A",
    "SEED_B",
    "SEED_LIQUIDITY",
    "DEADLINE",
    # Factories
    "make_exchange",
    "deposit_both",
    "deposit_and_add_liquidity",
]
