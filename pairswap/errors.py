"""Error classes for pair and pool operations.

Arithmetic failures (Overflow, Underflow, DivisionByZero) live in
pairswap.safe_int and are re-exported here so the whole taxonomy can be
imported from one module.
"""

from pairswap.safe_int import DivisionByZero, Overflow, SafeIntError, Underflow


class PairswapError(Exception):
    """Base error for pair and pool operations."""

    pass


class InvalidPair(PairswapError):
    """AssetPair constructed with the same id in both slots."""

    pass


class AssetMismatch(PairswapError):
    """Two pairs combined slot-by-slot do not hold the same ids in the same order."""

    pass


class AssetNotInPair(PairswapError):
    """Lookup for an id that is neither of the pair's ids."""

    pass


class OrientationMismatch(PairswapError):
    """Pair cannot be aligned to a reference pair that shares no id with it."""

    pass


class InvalidPoolState(PairswapError):
    """PoolInfo with outstanding liquidity but an empty reserve."""

    pass


class DeadlineExceeded(PairswapError):
    """Request submitted after its deadline block height."""

    pass


class InsufficientReserve(PairswapError):
    """Swap output cannot be covered by the pool's reserve."""

    pass


class InsufficientLiquidity(PairswapError):
    """Burn exceeds outstanding liquidity, or a deposit would mint nothing."""

    pass


class SlippageExceeded(PairswapError):
    """Computed result is worse than the caller's bound."""

    pass


__all__ = [
    "PairswapError",
    "InvalidPair",
    "AssetMismatch",
    "AssetNotInPair",
    "OrientationMismatch",
    "InvalidPoolState",
    "DeadlineExceeded",
    "InsufficientReserve",
    "InsufficientLiquidity",
    "SlippageExceeded",
    # Arithmetic (from safe_int)
    "SafeIntError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
]
