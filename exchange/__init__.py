"""Constant-product exchange - single-pair AMM with escrowed deposits."""

from exchange.config import DEFAULT_EXCHANGE_CONFIG, ExchangeConfig
from exchange.exchange import Exchange

__version__ = "0.1.0"
__all__ = ["Exchange", "ExchangeConfig", "DEFAULT_EXCHANGE_CONFIG", "__version__"]
