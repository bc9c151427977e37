"""Test helpers module for shared test utilities.

- constants: Asset ids and common amounts
- factories: Pair, pool state and pool factory functions
"""

from tests.helpers.constants import LIQUIDITY, LP, MAX, RESERVE_X, RESERVE_Y, X, Y, Z
from tests.helpers.factories import make_pair, make_params, make_pool, make_pool_info

__all__ = [
    # Constants
    "X",
    "Y",
    "Z",
    "LP",
    "MAX",
    "RESERVE_X",
    "RESERVE_Y",
    "LIQUIDITY",
    # Factories
    "make_pair",
    "make_params",
    "make_pool",
    "make_pool_info",
]
