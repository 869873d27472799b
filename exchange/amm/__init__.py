"""AMM (Automated Market Maker) math."""

from exchange.amm.constant_product import ConstantProduct, constant_product

__all__ = ["ConstantProduct", "constant_product"]
