"""Pool configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PoolConfig:
    """Configuration for a Pool.

    Attributes:
        fee_bps: Swap fee in basis points (default: 30 = 0.3%)
        liquidity_id: Asset id of the pool's liquidity token (default: "LP")
    """

    fee_bps: int = 30
    liquidity_id: str = "LP"

    @classmethod
    def from_env(cls) -> PoolConfig:
        """Build a config from environment variables with the defaults above.

        - PAIRSWAP_FEE_BPS: Swap fee in basis points
        - PAIRSWAP_LIQUIDITY_ID: Liquidity token asset id
        """
        return cls(
            fee_bps=int(os.environ.get("PAIRSWAP_FEE_BPS", str(cls.fee_bps))),
            liquidity_id=os.environ.get("PAIRSWAP_LIQUIDITY_ID", cls.liquidity_id),
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
