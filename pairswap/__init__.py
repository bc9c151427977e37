"""Accounting core for a two-asset automated market maker."""

from pairswap.config import DEFAULT_POOL_CONFIG, PoolConfig
from pairswap.models import (
    Asset,
    AssetPair,
    LiquidityParameters,
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    RemoveLiquidityInfo,
)
from pairswap.pool import Pool
from pairswap.pricing import ConstantProductCurve, PricingCurve

__version__ = "0.1.0"
__all__ = [
    "Asset",
    "AssetPair",
    "PoolInfo",
    "LiquidityParameters",
    "PreviewAddLiquidityInfo",
    "PreviewSwapInfo",
    "RemoveLiquidityInfo",
    "Pool",
    "PoolConfig",
    "DEFAULT_POOL_CONFIG",
    "PricingCurve",
    "ConstantProductCurve",
    "__version__",
]
