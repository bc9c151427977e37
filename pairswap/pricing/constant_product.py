"""Constant product pricing curve.

The pool keeps reserve_a * reserve_b = k, charging a fee in basis points on
swap inputs. All math is integer math through SafeInt; results are floored
except the exact-output swap input, which is rounded up so the pool never
receives less than the invariant requires.
"""

from __future__ import annotations

import structlog

from pairswap.errors import InsufficientLiquidity
from pairswap.models.asset import Asset
from pairswap.models.pair import AssetPair
from pairswap.models.pool import (
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
)
from pairswap.safe_int import S

logger = structlog.get_logger()

BPS_DENOMINATOR = 10_000


class ConstantProductCurve:
    """x * y = k pricing with a swap fee.

    Formulas:
        add:    other = deposit * reserve_other / reserve_this
                minted = min(deposit * liquidity / reserve_this,
                             other * liquidity / reserve_other)
        swap:   out = in * m * r_out / (r_in * 10000 + in * m), m = 10000 - fee_bps
        remove: removed_i = burn * reserve_i / liquidity
    """

    def __init__(self, fee_bps: int = 30) -> None:
        if not (0 <= fee_bps < BPS_DENOMINATOR):
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOMINATOR}): {fee_bps}")
        self.fee_bps = fee_bps

    def __repr__(self) -> str:
        return f"ConstantProductCurve(fee_bps={self.fee_bps})"

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for swap math (10000 - fee_bps).

        For 30 bps (0.3%), this returns 9970.
        """
        return BPS_DENOMINATOR - self.fee_bps

    def quote_add_liquidity(
        self,
        pool: PoolInfo,
        deposit: Asset,
        liquidity_id: str,
    ) -> PreviewAddLiquidityInfo:
        """Quote the counter-deposit and liquidity minted for ``deposit``.

        The minted amount is the smaller of the two proportional shares, the
        same rule Pool.add_liquidity applies, so depositing ``deposit`` plus
        the quoted counter-deposit mints exactly the quoted liquidity. On an
        empty pool the quote is 1:1 with ``deposit``, which is what execution
        mints when ``deposit`` is the asset in reserve slot a.

        Raises:
            AssetNotInPair: If deposit is not one of the pool's assets
            Overflow: If a quoted amount exceeds 2^64-1
        """
        reserve_this = pool.reserves.this_asset(deposit.id)
        reserve_other = pool.reserves.other_asset(deposit.id)

        if pool.is_empty:
            # Ratio undefined: no counter-deposit, 1:1 liquidity
            return PreviewAddLiquidityInfo(
                other_asset_to_add=Asset.zero(reserve_other.id),
                liquidity_asset_to_receive=Asset(liquidity_id, deposit.amount),
            )

        amount = S(deposit.amount)
        other_amount = amount * S(reserve_other.amount) // S(reserve_this.amount)
        liquidity = S(pool.liquidity)
        minted = (amount * liquidity // S(reserve_this.amount)).min(
            other_amount * liquidity // S(reserve_other.amount)
        )

        return PreviewAddLiquidityInfo(
            other_asset_to_add=Asset(reserve_other.id, other_amount.to_uint64()),
            liquidity_asset_to_receive=Asset(liquidity_id, minted.to_uint64()),
        )

    def quote_swap(
        self,
        pool: PoolInfo,
        asset: Asset,
        exact_input: bool = True,
    ) -> PreviewSwapInfo:
        """Quote a swap of ``asset`` against the pool.

        With exact_input, ``asset`` is sold and other_asset is the amount
        bought. Otherwise ``asset`` is the amount wanted and other_asset the
        amount that must be sold.

        Raises:
            AssetNotInPair: If asset is not one of the pool's assets
            Overflow: If the quoted amount exceeds 2^64-1
        """
        if exact_input:
            return self._quote_exact_input(pool, asset)
        return self._quote_exact_output(pool, asset)

    def _quote_exact_input(self, pool: PoolInfo, asset_in: Asset) -> PreviewSwapInfo:
        reserve_in = pool.reserves.this_asset(asset_in.id)
        reserve_out = pool.reserves.other_asset(asset_in.id)

        if pool.is_empty or reserve_in.amount == 0 or reserve_out.amount == 0:
            return PreviewSwapInfo(Asset.zero(reserve_out.id), sufficient_reserve=False)

        amount_in_with_fee = S(asset_in.amount) * S(self.fee_multiplier)
        numerator = amount_in_with_fee * S(reserve_out.amount)
        denominator = S(reserve_in.amount) * S(BPS_DENOMINATOR) + amount_in_with_fee
        amount_out = numerator // denominator

        sufficient = 0 < amount_out < reserve_out.amount
        if not sufficient:
            logger.debug(
                "quote_swap_insufficient_reserve",
                asset_in=asset_in.id,
                amount_out=amount_out.value,
                reserve_out=reserve_out.amount,
            )
        return PreviewSwapInfo(
            Asset(reserve_out.id, amount_out.to_uint64()),
            sufficient_reserve=sufficient,
        )

    def _quote_exact_output(self, pool: PoolInfo, asset_out: Asset) -> PreviewSwapInfo:
        reserve_out = pool.reserves.this_asset(asset_out.id)
        reserve_in = pool.reserves.other_asset(asset_out.id)

        if pool.is_empty or not (0 < asset_out.amount < reserve_out.amount):
            logger.debug(
                "quote_swap_insufficient_reserve",
                asset_out=asset_out.id,
                amount_out=asset_out.amount,
                reserve_out=reserve_out.amount,
            )
            return PreviewSwapInfo(Asset.zero(reserve_in.id), sufficient_reserve=False)

        numerator = S(reserve_in.amount) * S(asset_out.amount) * S(BPS_DENOMINATOR)
        denominator = (S(reserve_out.amount) - S(asset_out.amount)) * S(self.fee_multiplier)
        amount_in = numerator // denominator + S(1)

        return PreviewSwapInfo(
            Asset(reserve_in.id, amount_in.to_uint64()),
            sufficient_reserve=True,
        )

    def quote_remove_liquidity(
        self,
        pool: PoolInfo,
        burn: int,
        liquidity_id: str,
    ) -> RemoveLiquidityInfo:
        """Quote the reserves returned for burning ``burn`` liquidity.

        Raises:
            InsufficientLiquidity: If the pool is empty or burn exceeds its liquidity
        """
        if pool.is_empty:
            raise InsufficientLiquidity("Cannot remove liquidity from an empty pool")
        if burn > pool.liquidity:
            raise InsufficientLiquidity(
                f"Cannot burn {burn} liquidity, only {pool.liquidity} outstanding"
            )

        reserves = pool.reserves
        amount_a = S(burn) * S(reserves.a.amount) // S(pool.liquidity)
        amount_b = S(burn) * S(reserves.b.amount) // S(pool.liquidity)

        return RemoveLiquidityInfo(
            removed_amounts=AssetPair(
                reserves.a.with_amount(amount_a.to_uint64()),
                reserves.b.with_amount(amount_b.to_uint64()),
            ),
            burned_liquidity=Asset(liquidity_id, burn),
        )
