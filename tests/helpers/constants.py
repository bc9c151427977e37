"""Shared asset constants for tests.

Usage:
    from tests.helpers import X, Y
    # or
    from tests.helpers.constants import X, Y
"""

from pairswap.safe_int import UINT64_MAX

# =============================================================================
# Pool assets
# =============================================================================

X = "asset-x"
Y = "asset-y"
Z = "asset-z"  # Not in the standard X/Y pool

# Liquidity token id used by the default PoolConfig
LP = "LP"

# =============================================================================
# Amounts
# =============================================================================

MAX = UINT64_MAX

# Reserves of the standard funded pool (1:2 ratio)
RESERVE_X = 1_000
RESERVE_Y = 2_000
LIQUIDITY = 100
