"""Pool engines.

Liquidity and swap planners compute complete transitions without side
effects; preview functions quote them. The Exchange facade commits plans.
"""

from exchange.engine.liquidity import (
    AddLiquidityPlan,
    RemoveLiquidityPlan,
    plan_add_liquidity,
    plan_remove_liquidity,
)
from exchange.engine.swap import (
    SwapPlan,
    plan_swap_exact_input,
    plan_swap_exact_output,
    select_input_asset,
)

__all__ = [
    "AddLiquidityPlan",
    "RemoveLiquidityPlan",
    "SwapPlan",
    "plan_add_liquidity",
    "plan_remove_liquidity",
    "plan_swap_exact_input",
    "plan_swap_exact_output",
    "select_input_asset",
]
