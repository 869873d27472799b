"""Single-pair constant-product exchange.

The Exchange owns the pool state, the escrow ledger and the LP ledger.
Callers stage funds with deposit(), then call a liquidity or swap
operation that consumes escrow and moves reserves in one transition.

Every mutating operation runs in a transaction: the engines plan the
whole transition first, the Exchange commits it, and any exception
(including arithmetic overflow or a failing asset sink) restores the
state captured at the start before the error propagates.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

from exchange.clock import Clock, ManualClock
from exchange.config import DEFAULT_EXCHANGE_CONFIG, ExchangeConfig
from exchange.engine import (
    SwapPlan,
    plan_add_liquidity,
    plan_remove_liquidity,
    plan_swap_exact_input,
    plan_swap_exact_output,
    select_input_asset,
)
from exchange.engine import preview
from exchange.engine.guards import require_amount, require_deadline
from exchange.errors import AlreadyInitialized, NotInitialized
from exchange.ledger import EscrowLedger, LiquidityLedger
from exchange.models.pool import AssetPair, PoolState
from exchange.models.quotes import (
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
)
from exchange.models.types import normalize_id
from exchange.transfers import AssetSink, InMemoryWallets

logger = structlog.get_logger()


class Exchange:
    """Constant-product pool for one asset pair with escrowed deposits.

    Dependencies are injectable for testing:
        clock = ManualClock()
        wallets = InMemoryWallets()
        exchange = Exchange(clock=clock, sink=wallets)
        exchange.constructor(ASSET_A, ASSET_B)
    """

    def __init__(
        self,
        config: ExchangeConfig | None = None,
        clock: Clock | None = None,
        sink: AssetSink | None = None,
    ) -> None:
        """Create an uninitialized exchange.

        Args:
            config: Fee configuration. Defaults to DEFAULT_EXCHANGE_CONFIG.
            clock: Block height source for deadlines. Defaults to a ManualClock at 0.
            sink: Receiver of released assets. Defaults to InMemoryWallets.
        """
        self.config = config if config is not None else DEFAULT_EXCHANGE_CONFIG
        self.clock = clock if clock is not None else ManualClock()
        self.sink = sink if sink is not None else InMemoryWallets()
        self._pair: AssetPair | None = None
        self._pool = PoolState()
        self._escrow = EscrowLedger()
        self._liquidity = LiquidityLedger()

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._pair is not None

    @property
    def pair(self) -> AssetPair:
        """The asset pair.

        Raises:
            NotInitialized: If constructor() has not been called
        """
        if self._pair is None:
            raise NotInitialized("Exchange has no asset pair; call constructor() first")
        return self._pair

    @property
    def pool(self) -> PoolState:
        return self._pool

    @contextmanager
    def _transaction(
        self, operation: str, sender: str | None = None, **context: Any
    ) -> Iterator[None]:
        """Run a transition atomically, restoring all state if it raises.

        A call only writes the sender's escrow and LP rows, so only those
        rows are saved; the cost does not grow with the number of holders.
        """
        pool = self._pool
        escrow_keys: list[tuple[str, str]] = []
        if sender is not None and self._pair is not None:
            escrow_keys = [(sender, self._pair.asset_a), (sender, self._pair.asset_b)]
        escrow = self._escrow.save_rows(escrow_keys)
        liquidity = self._liquidity.save_rows([sender] if sender is not None else [])
        try:
            yield
        except Exception as e:
            self._pool = pool
            self._escrow.restore_rows(escrow)
            self._liquidity.restore_rows(liquidity)
            logger.warning(
                "transition_reverted",
                operation=operation,
                sender=sender,
                error=type(e).__name__,
                detail=str(e),
                **context,
            )
            raise

    # =========================================================================
    # Constructor
    # =========================================================================

    def constructor(self, asset_a: str, asset_b: str) -> None:
        """Set the asset pair. Can only be called once.

        Raises:
            AlreadyInitialized: If the pair is already set
            InvalidAsset: If an id is malformed or both ids are equal
        """
        with self._transaction("constructor", asset_a=asset_a, asset_b=asset_b):
            if self._pair is not None:
                raise AlreadyInitialized(
                    f"Exchange already trades {self._pair.asset_a}/{self._pair.asset_b}"
                )
            self._pair = AssetPair(asset_a, asset_b)
            self._pool = PoolState()
            logger.info(
                "exchange_initialized", asset_a=self._pair.asset_a, asset_b=self._pair.asset_b
            )

    # =========================================================================
    # Escrow
    # =========================================================================

    def deposit(self, sender: str, asset: str, amount: int) -> int:
        """Escrow `amount` of `asset` for `sender`.

        Returns:
            The sender's new escrowed balance of that asset

        Raises:
            InvalidAsset: If asset is not part of the pair
            InvalidAmount: If amount is zero or not a u64
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction("deposit", sender=sender, asset=asset, amount=amount):
            asset = self.pair.resolve(asset)
            require_amount(amount, "amount")
            balance = self._escrow.credit(sender, asset, amount)
            logger.info("deposited", sender=sender, asset=asset, amount=amount, balance=balance)
            return balance

    def withdraw(self, sender: str, asset: str, amount: int) -> None:
        """Return `amount` of escrowed `asset` to `sender`.

        Raises:
            InvalidAsset: If asset is not part of the pair
            InsufficientEscrowBalance: If amount exceeds the escrowed balance
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction("withdraw", sender=sender, asset=asset, amount=amount):
            asset = self.pair.resolve(asset)
            require_amount(amount, "amount")
            balance = self._escrow.debit(sender, asset, amount)
            self.sink.transfer(sender, asset, amount)
            logger.info("withdrawn", sender=sender, asset=asset, amount=amount, balance=balance)

    # =========================================================================
    # Liquidity
    # =========================================================================

    def add_liquidity(self, sender: str, desired_liquidity: int, deadline: int) -> int:
        """Mint LP shares from the sender's escrowed A and B.

        Unused escrow stays escrowed for a later call or withdraw().

        Args:
            sender: Liquidity provider
            desired_liquidity: Minimum shares to accept (0 accepts any amount)
            deadline: Last block height at which the call may execute

        Returns:
            LP shares minted

        Raises:
            DeadlineExpired: If the current height is past deadline
            InsufficientLiquidityMinted: If the mint is zero or below desired_liquidity
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction("add_liquidity", sender=sender, deadline=deadline):
            pair = self.pair
            require_deadline(deadline, self.clock.now())
            require_amount(desired_liquidity, "desired_liquidity", allow_zero=True)

            plan = plan_add_liquidity(
                self._pool,
                self._escrow.get(sender, pair.asset_a),
                self._escrow.get(sender, pair.asset_b),
                desired_liquidity,
            )

            self._escrow.debit(sender, pair.asset_a, plan.amount_a)
            self._escrow.debit(sender, pair.asset_b, plan.amount_b)
            self._liquidity.mint(sender, plan.liquidity)
            self._pool = plan.pool

            logger.info(
                "liquidity_added",
                sender=sender,
                amount_a=plan.amount_a,
                amount_b=plan.amount_b,
                minted=plan.liquidity,
                lp_supply=plan.pool.lp_supply,
            )
            return plan.liquidity

    def remove_liquidity(
        self,
        sender: str,
        liquidity: int,
        min_asset_a: int,
        min_asset_b: int,
        deadline: int,
    ) -> RemoveLiquidityInfo:
        """Burn LP shares and send the pro-rata reserves to the sender.

        Args:
            sender: LP holder
            liquidity: Shares to burn
            min_asset_a: Minimum asset A to receive
            min_asset_b: Minimum asset B to receive
            deadline: Last block height at which the call may execute

        Raises:
            DeadlineExpired: If the current height is past deadline
            InsufficientLiquidityBalance: If the sender holds fewer shares
            SlippageExceeded: If either payout is below its minimum
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction(
            "remove_liquidity", sender=sender, liquidity=liquidity, deadline=deadline
        ):
            pair = self.pair
            require_deadline(deadline, self.clock.now())
            require_amount(liquidity, "liquidity")
            require_amount(min_asset_a, "min_asset_a", allow_zero=True)
            require_amount(min_asset_b, "min_asset_b", allow_zero=True)

            plan = plan_remove_liquidity(
                self._pool,
                liquidity,
                self._liquidity.get(sender),
                min_asset_a,
                min_asset_b,
            )

            self._liquidity.burn(sender, plan.liquidity)
            self._pool = plan.pool
            if plan.amount_a > 0:
                self.sink.transfer(sender, pair.asset_a, plan.amount_a)
            if plan.amount_b > 0:
                self.sink.transfer(sender, pair.asset_b, plan.amount_b)

            logger.info(
                "liquidity_removed",
                sender=sender,
                burned=plan.liquidity,
                amount_a=plan.amount_a,
                amount_b=plan.amount_b,
                lp_supply=plan.pool.lp_supply,
            )
            return RemoveLiquidityInfo(
                amount_a=plan.amount_a,
                amount_b=plan.amount_b,
                burned_liquidity=plan.liquidity,
            )

    # =========================================================================
    # Swaps
    # =========================================================================

    def swap_exact_input(self, sender: str, min_output: int | None, deadline: int) -> int:
        """Swap the sender's entire escrowed input for the other asset.

        Args:
            sender: Trader; exactly one asset must be escrowed
            min_output: Minimum output to accept, or None for no floor
            deadline: Last block height at which the call may execute

        Returns:
            Output amount released to the sender

        Raises:
            AmbiguousInput: If both assets are escrowed
            InvalidAsset: If nothing is escrowed
            InsufficientReserves: If the pool is empty
            SlippageExceeded: If output is zero or below min_output
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction("swap_exact_input", sender=sender, deadline=deadline):
            pair = self.pair
            require_deadline(deadline, self.clock.now())
            if min_output is not None:
                require_amount(min_output, "min_output", allow_zero=True)

            asset_in = select_input_asset(
                pair,
                self._escrow.get(sender, pair.asset_a),
                self._escrow.get(sender, pair.asset_b),
            )
            plan = plan_swap_exact_input(
                self._pool,
                pair,
                asset_in,
                self._escrow.get(sender, asset_in),
                min_output,
                self.config,
            )
            self._commit_swap(sender, plan)
            return plan.amount_out

    def swap_exact_output(self, sender: str, output: int, deadline: int) -> int:
        """Buy exactly `output` of the other asset with the sender's escrowed input.

        The escrowed input caps the price; any surplus stays escrowed.

        Returns:
            Input amount consumed from escrow

        Raises:
            InsufficientReserves: If output >= the output reserve
            ExcessiveInputRequired: If the required input exceeds the escrow
        """
        sender = normalize_id(sender, validate=True)
        with self._transaction(
            "swap_exact_output", sender=sender, output=output, deadline=deadline
        ):
            pair = self.pair
            require_deadline(deadline, self.clock.now())
            require_amount(output, "output")

            asset_in = select_input_asset(
                pair,
                self._escrow.get(sender, pair.asset_a),
                self._escrow.get(sender, pair.asset_b),
            )
            plan = plan_swap_exact_output(
                self._pool,
                pair,
                asset_in,
                self._escrow.get(sender, asset_in),
                output,
                self.config,
            )
            self._commit_swap(sender, plan)
            return plan.amount_in

    def _commit_swap(self, sender: str, plan: SwapPlan) -> None:
        self._escrow.debit(sender, plan.asset_in, plan.amount_in)
        self._pool = plan.pool
        self.sink.transfer(sender, plan.asset_out, plan.amount_out)
        logger.info(
            "swapped",
            sender=sender,
            asset_in=plan.asset_in,
            amount_in=plan.amount_in,
            asset_out=plan.asset_out,
            amount_out=plan.amount_out,
            reserve_a=plan.pool.reserve_a,
            reserve_b=plan.pool.reserve_b,
        )

    # =========================================================================
    # Queries and previews
    # =========================================================================

    def preview_add_liquidity(
        self, amount: int, asset: str, sender: str | None = None
    ) -> PreviewAddLiquidityInfo:
        """Quote adding `amount` of `asset`.

        On an empty pool the counterpart comes from `sender`'s escrow of the
        other asset, since no price exists yet.
        """
        pair = self.pair
        asset = pair.resolve(asset)
        require_amount(amount, "amount", allow_zero=True)
        other_escrowed = 0
        if sender is not None and self._pool.is_empty:
            other_escrowed = self._escrow.get(normalize_id(sender), pair.other(asset))
        return preview.preview_add_liquidity(self._pool, pair, amount, asset, other_escrowed)

    def preview_swap_exact_input(self, amount_in: int, asset_in: str) -> PreviewSwapInfo:
        pair = self.pair
        asset_in = pair.resolve(asset_in)
        require_amount(amount_in, "amount_in", allow_zero=True)
        return preview.preview_swap_exact_input(
            self._pool, pair, amount_in, asset_in, self.config
        )

    def preview_swap_exact_output(self, amount_out: int, asset_out: str) -> PreviewSwapInfo:
        pair = self.pair
        asset_out = pair.resolve(asset_out)
        require_amount(amount_out, "amount_out", allow_zero=True)
        return preview.preview_swap_exact_output(
            self._pool, pair, amount_out, asset_out, self.config
        )

    def pool_info(self) -> PoolInfo:
        return preview.pool_info(self._pool, self.pair)

    def balance(self, sender: str, asset: str) -> int:
        """Escrowed balance of `asset` held for `sender`."""
        asset = self.pair.resolve(asset)
        return self._escrow.get(normalize_id(sender), asset)

    def lp_balance(self, holder: str) -> int:
        """LP shares held by `holder`."""
        return self._liquidity.get(normalize_id(holder))
