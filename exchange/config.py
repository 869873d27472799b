"""Exchange configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from exchange.constants import DEFAULT_FEE_BPS, FEE_DENOMINATOR


@dataclass(frozen=True)
class ExchangeConfig:
    """Configuration for a single exchange pool.

    Attributes:
        fee_bps: Swap fee in basis points taken from the input (default: 30)
        fee_denominator: Base for fee_bps (10,000)
    """

    fee_bps: int = DEFAULT_FEE_BPS
    fee_denominator: int = FEE_DENOMINATOR

    def __post_init__(self) -> None:
        """Validate the fee is a fraction strictly below 100%."""
        if self.fee_denominator <= 0:
            raise ValueError(f"fee_denominator must be positive, got {self.fee_denominator}")
        if not (0 <= self.fee_bps < self.fee_denominator):
            raise ValueError(
                f"fee_bps must be in [0, {self.fee_denominator}), got {self.fee_bps}"
            )

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for AMM math (fee_denominator - fee_bps).

        For 30 bps this returns 9970, so that
        effective_input = amount_in * 9970 // 10000.
        """
        return self.fee_denominator - self.fee_bps

    @classmethod
    def from_env(cls) -> ExchangeConfig:
        """Build a config from environment variables.

        - EXCHANGE_FEE_BPS: swap fee in basis points (default: 30)
        """
        return cls(fee_bps=int(os.environ.get("EXCHANGE_FEE_BPS", str(DEFAULT_FEE_BPS))))


# Default configuration instance
DEFAULT_EXCHANGE_CONFIG = ExchangeConfig()
