"""Value model for two-asset pools."""

from pairswap.models.asset import Asset
from pairswap.models.pair import AssetPair
from pairswap.models.pool import (
    LiquidityParameters,
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
)
from pairswap.models.requests import (
    AddLiquidityRequest,
    AssetAmount,
    RemoveLiquidityRequest,
    SwapRequest,
)
from pairswap.models.types import AssetId, Uint64, validate_uint64

__all__ = [
    # Types
    "AssetId",
    "Uint64",
    "validate_uint64",
    # Values
    "Asset",
    "AssetPair",
    # Pool descriptors
    "PoolInfo",
    "LiquidityParameters",
    "PreviewAddLiquidityInfo",
    "PreviewSwapInfo",
    "RemoveLiquidityInfo",
    # Request payloads
    "AssetAmount",
    "AddLiquidityRequest",
    "RemoveLiquidityRequest",
    "SwapRequest",
]
