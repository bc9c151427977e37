"""Pricing capability used by pool entry points."""

from typing import Protocol, runtime_checkable

from pairswap.models.asset import Asset
from pairswap.models.pool import (
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
)


@runtime_checkable
class PricingCurve(Protocol):
    """Protocol for pool pricing invariants.

    A curve turns a PoolInfo snapshot and one caller-supplied amount into
    one of the preview descriptors. Curves are pure: they never mutate the
    snapshot, and all amount arithmetic goes through AssetPair or SafeInt
    so that overflow and underflow are raised, not wrapped.
    """

    def quote_add_liquidity(
        self,
        pool: PoolInfo,
        deposit: Asset,
        liquidity_id: str,
    ) -> PreviewAddLiquidityInfo:
        """Quote the counter-deposit and liquidity minted for a one-sided deposit.

        Args:
            pool: Current pool state
            deposit: Amount of one of the pool's assets
            liquidity_id: Asset id of the pool's liquidity token

        Returns:
            PreviewAddLiquidityInfo; for an empty pool the counter-deposit is 0
            and liquidity is minted 1:1 with the deposit
        """
        ...

    def quote_swap(
        self,
        pool: PoolInfo,
        asset: Asset,
        exact_input: bool = True,
    ) -> PreviewSwapInfo:
        """Quote a swap against the pool.

        Args:
            pool: Current pool state
            asset: Amount sold (exact_input=True) or wanted (exact_input=False)
            exact_input: Whether ``asset`` is the input or the desired output

        Returns:
            PreviewSwapInfo with the counter-asset amount and whether the
            reserve can cover it
        """
        ...

    def quote_remove_liquidity(
        self,
        pool: PoolInfo,
        burn: int,
        liquidity_id: str,
    ) -> RemoveLiquidityInfo:
        """Quote the reserves returned for burning ``burn`` liquidity.

        Args:
            pool: Current pool state
            burn: Liquidity token amount to burn
            liquidity_id: Asset id of the pool's liquidity token

        Returns:
            RemoveLiquidityInfo aligned with pool.reserves
        """
        ...
