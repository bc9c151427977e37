"""Two-asset pool entry points.

Pool owns the long-lived PoolInfo snapshot and applies add-liquidity,
remove-liquidity and swap requests to it. Each operation checks its
deadline, computes the complete next snapshot through AssetPair arithmetic,
and only then replaces the stored one. Any error leaves the pool unchanged.

Token transfers are not modeled: deposits and swap inputs are assumed
received, withdrawals and swap outputs are returned to the caller.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from pairswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from pairswap.errors import (
    DeadlineExceeded,
    InsufficientLiquidity,
    InsufficientReserve,
    InvalidPoolState,
    SlippageExceeded,
)
from pairswap.models.asset import Asset
from pairswap.models.pair import AssetPair
from pairswap.models.pool import (
    LiquidityParameters,
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
    check_deadline,
)
from pairswap.models.requests import AddLiquidityRequest, RemoveLiquidityRequest, SwapRequest
from pairswap.pricing.base import PricingCurve
from pairswap.pricing.constant_product import ConstantProductCurve
from pairswap.safe_int import S

logger = structlog.get_logger()


class Pool:
    """An exchange between two assets.

    Args:
        asset_a: Id of the asset held in reserve slot ``a``
        asset_b: Id of the asset held in reserve slot ``b``
        config: Pool configuration (fee, liquidity token id)
        curve: Pricing curve (default: ConstantProductCurve with config.fee_bps)
        info: Initial state (default: empty pool)

    Raises:
        InvalidPair: If asset_a == asset_b
        OrientationMismatch: If ``info`` holds different assets
        InvalidPoolState: If ``info`` has no liquidity but non-zero reserves
    """

    def __init__(
        self,
        asset_a: str,
        asset_b: str,
        config: PoolConfig = DEFAULT_POOL_CONFIG,
        curve: PricingCurve | None = None,
        info: PoolInfo | None = None,
    ) -> None:
        self.config = config
        self.curve: PricingCurve = (
            curve if curve is not None else ConstantProductCurve(fee_bps=config.fee_bps)
        )
        empty = PoolInfo.empty(asset_a, asset_b)
        if info is None:
            info = empty
        else:
            if info.is_empty and not info.reserves.is_zero():
                raise InvalidPoolState(f"Pool without liquidity holds reserves: {info.reserves}")
            info = PoolInfo(info.reserves.sort(empty.reserves), info.liquidity)
        self._info = info

    def __repr__(self) -> str:
        return f"Pool(reserves={self._info.reserves}, liquidity={self._info.liquidity})"

    @property
    def info(self) -> PoolInfo:
        """Current state snapshot."""
        return self._info

    @property
    def liquidity_id(self) -> str:
        return self.config.liquidity_id

    def liquidity_asset(self) -> Asset:
        """Outstanding liquidity as an Asset of the liquidity token."""
        return Asset(self.liquidity_id, self._info.liquidity)

    # --- Previews ---

    def preview_add_liquidity(self, deposit: Asset) -> PreviewAddLiquidityInfo:
        return self.curve.quote_add_liquidity(self._info, deposit, self.liquidity_id)

    def preview_swap(self, asset: Asset, exact_input: bool = True) -> PreviewSwapInfo:
        return self.curve.quote_swap(self._info, asset, exact_input=exact_input)

    def preview_remove_liquidity(self, burn: int) -> RemoveLiquidityInfo:
        return self.curve.quote_remove_liquidity(self._info, burn, self.liquidity_id)

    # --- Operations ---

    def add_liquidity(self, params: LiquidityParameters, block_height: int) -> Asset:
        """Deposit both assets and mint liquidity.

        The first deposit into an empty pool mints liquidity 1:1 with the
        deposit in reserve slot ``a``. Later deposits mint the smaller of the
        two proportional shares; the whole deposit is added to reserves.

        Args:
            params: deposits to add, minimum liquidity to mint, deadline
            block_height: Current block height

        Returns:
            Minted liquidity

        Raises:
            DeadlineExceeded: If block_height > params.deadline
            OrientationMismatch: If the deposits are not the pool's assets
            InsufficientLiquidity: If a deposit is zero or nothing would be minted
            SlippageExceeded: If fewer than params.liquidity tokens would be minted
            Overflow: If reserves or liquidity would exceed 2^64-1
        """
        with self._deadline_guard("add_liquidity", params.deadline, block_height):
            params.check_deadline(block_height)
        reserves = self._info.reserves
        deposits = params.deposits.sort(reserves)

        if deposits.a.amount == 0 or deposits.b.amount == 0:
            raise InsufficientLiquidity(f"Both deposits must be positive: {deposits}")

        if self._info.is_empty:
            minted = S(deposits.a.amount)
        else:
            liquidity = S(self._info.liquidity)
            share_a = S(deposits.a.amount) * liquidity // S(reserves.a.amount)
            share_b = S(deposits.b.amount) * liquidity // S(reserves.b.amount)
            minted = share_a.min(share_b)

        if minted == 0:
            raise InsufficientLiquidity(f"Deposit {deposits} would mint no liquidity")
        if minted < params.liquidity:
            logger.warning(
                "add_liquidity_slippage",
                minted=minted.value,
                min_liquidity=params.liquidity,
            )
            raise SlippageExceeded(
                f"Deposit would mint {minted} liquidity, below minimum {params.liquidity}"
            )

        minted_amount = minted.to_uint64()
        self._info = PoolInfo(
            reserves=reserves.add(deposits),
            liquidity=(S(self._info.liquidity) + S(minted_amount)).to_uint64(),
        )
        logger.info(
            "add_liquidity_executed",
            deposits=str(deposits),
            minted=minted_amount,
            liquidity=self._info.liquidity,
        )
        return Asset(self.liquidity_id, minted_amount)

    def remove_liquidity(
        self,
        params: LiquidityParameters,
        block_height: int,
    ) -> RemoveLiquidityInfo:
        """Burn liquidity and withdraw the proportional share of reserves.

        Args:
            params: minimum amounts to receive, liquidity to burn, deadline
            block_height: Current block height

        Returns:
            RemoveLiquidityInfo with amounts aligned to the pool's reserves

        Raises:
            DeadlineExceeded: If block_height > params.deadline
            OrientationMismatch: If the minimums are not the pool's assets
            InsufficientLiquidity: If params.liquidity is zero or exceeds outstanding
                liquidity
            SlippageExceeded: If either amount is below its minimum
        """
        with self._deadline_guard("remove_liquidity", params.deadline, block_height):
            params.check_deadline(block_height)
        reserves = self._info.reserves
        minimums = params.deposits.sort(reserves)
        if params.liquidity == 0:
            raise InsufficientLiquidity("Liquidity to burn must be positive")

        removal = self.preview_remove_liquidity(params.liquidity)
        removed = removal.removed_amounts
        if removed.a.amount < minimums.a.amount or removed.b.amount < minimums.b.amount:
            logger.warning(
                "remove_liquidity_slippage",
                removed=str(removed),
                minimums=str(minimums),
            )
            raise SlippageExceeded(f"Withdrawal {removed} below minimum {minimums}")

        self._info = PoolInfo(
            reserves=reserves.subtract(removed),
            liquidity=(S(self._info.liquidity) - S(params.liquidity)).to_uint64(),
        )
        logger.info(
            "remove_liquidity_executed",
            removed=str(removed),
            burned=params.liquidity,
            liquidity=self._info.liquidity,
        )
        return removal

    def swap(self, asset_in: Asset, min_out: int, deadline: int, block_height: int) -> Asset:
        """Sell an exact amount of one asset for the other.

        Args:
            asset_in: Amount sold
            min_out: Minimum amount of the other asset to receive
            deadline: Last block height at which the swap may execute
            block_height: Current block height

        Returns:
            Amount of the other asset bought

        Raises:
            DeadlineExceeded: If block_height > deadline
            AssetNotInPair: If asset_in is not one of the pool's assets
            InsufficientReserve: If the pool cannot cover the output or the
                output would be zero
            SlippageExceeded: If the output is below min_out
        """
        with self._deadline_guard("swap", deadline, block_height):
            check_deadline(deadline, block_height)
        asset_out = self._require_sufficient(self.preview_swap(asset_in, exact_input=True))

        if asset_out.amount < min_out:
            logger.warning(
                "swap_slippage",
                asset_in=asset_in.id,
                amount_out=asset_out.amount,
                min_out=min_out,
            )
            raise SlippageExceeded(f"Swap of {asset_in} yields {asset_out}, minimum {min_out}")

        self._apply_swap(asset_in, asset_out)
        return asset_out

    def swap_for_exact(
        self,
        asset_out: Asset,
        max_in: int,
        deadline: int,
        block_height: int,
    ) -> Asset:
        """Buy an exact amount of one asset, paying at most ``max_in`` of the other.

        Returns:
            Amount of the other asset sold

        Raises:
            DeadlineExceeded: If block_height > deadline
            AssetNotInPair: If asset_out is not one of the pool's assets
            InsufficientReserve: If the pool cannot cover asset_out or it is zero
            SlippageExceeded: If the required input exceeds max_in
        """
        with self._deadline_guard("swap_for_exact", deadline, block_height):
            check_deadline(deadline, block_height)
        asset_in = self._require_sufficient(self.preview_swap(asset_out, exact_input=False))

        if asset_in.amount > max_in:
            logger.warning(
                "swap_slippage",
                asset_out=asset_out.id,
                amount_in=asset_in.amount,
                max_in=max_in,
            )
            raise SlippageExceeded(f"Buying {asset_out} costs {asset_in}, maximum {max_in}")

        self._apply_swap(asset_in, asset_out)
        return asset_in

    def handle(
        self,
        request: AddLiquidityRequest | RemoveLiquidityRequest | SwapRequest,
        block_height: int,
    ) -> Asset | RemoveLiquidityInfo:
        """Execute a validated request payload."""
        if isinstance(request, AddLiquidityRequest):
            return self.add_liquidity(request.to_parameters(), block_height)
        if isinstance(request, RemoveLiquidityRequest):
            return self.remove_liquidity(request.to_parameters(), block_height)
        if isinstance(request, SwapRequest):
            return self.swap(
                request.asset_in.to_asset(), request.min_out, request.deadline, block_height
            )
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    # --- Internals ---

    @contextmanager
    def _deadline_guard(self, operation: str, deadline: int, block_height: int) -> Iterator[None]:
        try:
            yield
        except DeadlineExceeded:
            logger.warning(
                "deadline_exceeded",
                operation=operation,
                deadline=deadline,
                block_height=block_height,
            )
            raise

    def _require_sufficient(self, preview: PreviewSwapInfo) -> Asset:
        try:
            return preview.require_sufficient_reserve()
        except InsufficientReserve:
            logger.warning(
                "swap_insufficient_reserve",
                asset=preview.other_asset.id,
                reserves=str(self._info.reserves),
            )
            raise

    def _apply_swap(self, asset_in: Asset, asset_out: Asset) -> None:
        reserves = self._info.reserves
        delta_in = AssetPair(asset_in, Asset.zero(asset_out.id)).sort(reserves)
        delta_out = AssetPair(Asset.zero(asset_in.id), asset_out).sort(reserves)
        self._info = PoolInfo(
            reserves=reserves.add(delta_in).subtract(delta_out),
            liquidity=self._info.liquidity,
        )
        logger.debug(
            "swap_executed",
            asset_in=str(asset_in),
            asset_out=str(asset_out),
            reserves=str(self._info.reserves),
        )
