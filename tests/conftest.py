"""Pytest configuration and fixtures."""

import pytest

from pairswap.models import PoolInfo
from pairswap.pool import Pool
from pairswap.pricing import ConstantProductCurve
from tests.helpers import X, Y, make_pool, make_pool_info


@pytest.fixture
def curve() -> ConstantProductCurve:
    """Constant product curve with the default 0.3% fee."""
    return ConstantProductCurve()


@pytest.fixture
def funded_info() -> PoolInfo:
    """PoolInfo with 1000 X, 2000 Y and 100 liquidity."""
    return make_pool_info()


@pytest.fixture
def empty_info() -> PoolInfo:
    """PoolInfo with no reserves and no liquidity."""
    return PoolInfo.empty(X, Y)


@pytest.fixture
def funded_pool() -> Pool:
    """Pool holding 1000 X, 2000 Y and 100 liquidity."""
    return make_pool()


@pytest.fixture
def empty_pool() -> Pool:
    """X/Y pool with no reserves."""
    return Pool(X, Y)
