"""Protocol constants for the exchange.

Centralizes numeric bounds and fee parameters used by the pool math.
"""

# Every amount, reserve and LP supply is an unsigned 64-bit integer
UINT64_MAX = 2**64 - 1

# Fees are expressed in basis points over this denominator
FEE_DENOMINATOR = 10_000

# Default swap fee (30 bps = 0.3%, the classic constant-product fee)
DEFAULT_FEE_BPS = 30

# Asset ids and identities are 32 bytes, hex encoded with a 0x prefix
ID_HEX_LENGTH = 64
