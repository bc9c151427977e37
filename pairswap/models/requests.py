"""Pydantic models for caller-facing pool requests.

Entry points receive loosely typed payloads (amounts as int or decimal
string, camelCase keys). These models validate them and convert to the
frozen domain values used by the pool.
"""

from pydantic import BaseModel, Field

from pairswap.models.asset import Asset
from pairswap.models.pair import AssetPair
from pairswap.models.pool import LiquidityParameters
from pairswap.models.types import AssetId, Uint64


class AssetAmount(BaseModel):
    """An asset id and amount as sent by a caller."""

    asset_id: AssetId = Field(alias="assetId")
    amount: Uint64

    model_config = {"populate_by_name": True, "frozen": True}

    def to_asset(self) -> Asset:
        return Asset(self.asset_id, self.amount)


class AddLiquidityRequest(BaseModel):
    """Deposit both assets and receive at least ``min_liquidity``."""

    deposit_a: AssetAmount = Field(alias="depositA")
    deposit_b: AssetAmount = Field(alias="depositB")
    min_liquidity: Uint64 = Field(default=0, alias="minLiquidity")
    deadline: Uint64

    model_config = {"populate_by_name": True, "frozen": True}

    def to_parameters(self) -> LiquidityParameters:
        """Convert to LiquidityParameters.

        Raises:
            InvalidPair: If both deposits name the same asset
        """
        return LiquidityParameters(
            deposits=AssetPair(self.deposit_a.to_asset(), self.deposit_b.to_asset()),
            liquidity=self.min_liquidity,
            deadline=self.deadline,
        )


class RemoveLiquidityRequest(BaseModel):
    """Burn ``liquidity`` and receive at least the given minimums."""

    liquidity: Uint64
    min_a: AssetAmount = Field(alias="minA")
    min_b: AssetAmount = Field(alias="minB")
    deadline: Uint64

    model_config = {"populate_by_name": True, "frozen": True}

    def to_parameters(self) -> LiquidityParameters:
        return LiquidityParameters(
            deposits=AssetPair(self.min_a.to_asset(), self.min_b.to_asset()),
            liquidity=self.liquidity,
            deadline=self.deadline,
        )


class SwapRequest(BaseModel):
    """Sell ``amount_in`` and receive at least ``min_out`` of the other asset."""

    asset_in: AssetAmount = Field(alias="assetIn")
    min_out: Uint64 = Field(default=0, alias="minOut")
    deadline: Uint64

    model_config = {"populate_by_name": True, "frozen": True}
