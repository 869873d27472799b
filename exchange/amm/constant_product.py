"""Constant-product AMM math.

Formula: reserve_a * reserve_b = k, with the swap fee taken from the input
and left in the pool, so k never decreases across a swap.

Every function is pure and rounds in the pool's favor:
- outputs and minted LP shares round down
- required inputs and proportional counterparts round up
"""

from __future__ import annotations

from exchange.constants import FEE_DENOMINATOR
from exchange.errors import InsufficientReserves
from exchange.math import isqrt, mul_div, mul_div_up
from exchange.safe_int import S


class ConstantProduct:
    """Constant-product pool formulas for swaps and liquidity."""

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = FEE_DENOMINATOR,
        fee_denominator: int = FEE_DENOMINATOR,
    ) -> int:
        """Calculate output amount for an exact input.

        effective_in = floor(amount_in * fee_multiplier / fee_denominator)
        amount_out = floor(reserve_out * effective_in / (reserve_in + effective_in))

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input asset in pool
            reserve_out: Reserve of output asset in pool
            fee_multiplier: fee_denominator - fee_bps (no fee by default)
            fee_denominator: Fee base (10,000)

        Returns:
            Output amount, 0 for empty input or an empty pool
        """
        if amount_in <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return 0

        effective_in = mul_div(amount_in, fee_multiplier, fee_denominator)
        denominator = S(reserve_in) + S(effective_in)
        return mul_div(reserve_out, effective_in, denominator.value)

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = FEE_DENOMINATOR,
        fee_denominator: int = FEE_DENOMINATOR,
    ) -> int:
        """Calculate required input for an exact output.

        amount_in_no_fee = ceil(reserve_in * amount_out / (reserve_out - amount_out))
        amount_in = ceil(amount_in_no_fee * fee_denominator / fee_multiplier)

        Both steps round up, so floor(amount_in * fee_multiplier / fee_denominator)
        >= amount_in_no_fee and selling amount_in through get_amount_out()
        returns at least amount_out.

        Raises:
            InsufficientReserves: If amount_out >= reserve_out or the pool is empty
        """
        if amount_out <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientReserves("Pool has no reserves")
        if amount_out >= reserve_out:
            raise InsufficientReserves(
                f"Requested {amount_out} but reserve is only {reserve_out}"
            )

        amount_in_no_fee = (S(reserve_in) * S(amount_out)).ceiling_div(
            S(reserve_out) - S(amount_out)
        )
        return (amount_in_no_fee * S(fee_denominator)).ceiling_div(S(fee_multiplier)).to_u64()

    def initial_liquidity(self, amount_a: int, amount_b: int) -> int:
        """LP shares minted by the seeding deposit: floor(sqrt(a * b)).

        Geometric mean keeps the first provider's share independent of the
        units either asset is denominated in.
        """
        return isqrt(amount_a * amount_b)

    def proportional_amount(self, amount: int, reserve_this: int, reserve_other: int) -> int:
        """Amount of the other asset matching `amount` at the pool ratio (rounded up)."""
        return mul_div_up(amount, reserve_other, reserve_this)

    def liquidity_to_mint(
        self,
        amount_a: int,
        amount_b: int,
        reserve_a: int,
        reserve_b: int,
        lp_supply: int,
    ) -> int:
        """LP shares for a deposit into a seeded pool.

        lp = min(floor(amount_a * lp_supply / reserve_a),
                 floor(amount_b * lp_supply / reserve_b))
        """
        return min(
            mul_div(amount_a, lp_supply, reserve_a),
            mul_div(amount_b, lp_supply, reserve_b),
        )

    def burn_amounts(
        self,
        liquidity: int,
        reserve_a: int,
        reserve_b: int,
        lp_supply: int,
    ) -> tuple[int, int]:
        """Assets released by burning `liquidity` shares (rounded down)."""
        return (
            mul_div(liquidity, reserve_a, lp_supply),
            mul_div(liquidity, reserve_b, lp_supply),
        )


# Singleton instance
constant_product = ConstantProduct()

__all__ = ["ConstantProduct", "constant_product"]
