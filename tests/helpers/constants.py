"""Shared ids and amounts for tests.

All ids are lowercase 0x-prefixed 32-byte hex, matching normalize_id().

Usage:
    from tests.helpers import ASSET_A, ASSET_B, ALICE
"""

# =============================================================================
# Assets
# =============================================================================

ASSET_A = "0x" + "aa" * 32
ASSET_B = "0x" + "bb" * 32
ASSET_C = "0x" + "cc" * 32  # Not part of the pair

# =============================================================================
# Identities
# =============================================================================

ALICE = "0x" + "01" * 32
BOB = "0x" + "02" * 32
CAROL = "0x" + "03" * 32

# =============================================================================
# Default liquidity parameters (seed ratio 1:4)
# =============================================================================

SEED_A = 100
SEED_B = 400
SEED_LIQUIDITY = 200  # isqrt(100 * 400)
DEADLINE = 1000
