"""Pool descriptors: state snapshots, caller requests and preview results.

These carry no pricing logic. They are produced by a PricingCurve
(pairswap.pricing) or by a caller, and consumed by pool entry points.
"""

from __future__ import annotations

from dataclasses import dataclass

from pairswap.errors import DeadlineExceeded, InsufficientReserve, InvalidPoolState
from pairswap.models.asset import Asset
from pairswap.models.pair import AssetPair
from pairswap.models.types import validate_uint64


def check_deadline(deadline: int, block_height: int) -> None:
    """Raise DeadlineExceeded if ``block_height`` is past ``deadline``.

    A request executed at exactly its deadline height is still valid.
    """
    if block_height > deadline:
        raise DeadlineExceeded(f"Deadline {deadline} exceeded at block height {block_height}")


@dataclass(frozen=True)
class PoolInfo:
    """Current state of an exchange: reserves and liquidity token supply.

    A pool with outstanding liquidity always holds positive reserves of both
    assets. The all-zero pool (no liquidity, no reserves) is the empty state.

    Raises:
        InvalidPoolState: If liquidity > 0 and either reserve is zero
    """

    reserves: AssetPair
    liquidity: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "liquidity", validate_uint64(self.liquidity))
        if self.liquidity > 0 and (self.reserves.a.amount == 0 or self.reserves.b.amount == 0):
            raise InvalidPoolState(
                f"Pool with liquidity {self.liquidity} has an empty reserve: {self.reserves}"
            )

    @classmethod
    def empty(cls, id_a: str, id_b: str) -> PoolInfo:
        return cls(AssetPair.of(id_a, 0, id_b, 0), 0)

    @property
    def is_empty(self) -> bool:
        return self.liquidity == 0


@dataclass(frozen=True)
class LiquidityParameters:
    """A caller's add or remove liquidity request.

    Attributes:
        deposits: Amounts to deposit (add), or minimum amounts to receive (remove)
        liquidity: Minimum liquidity to mint (add), or liquidity to burn (remove)
        deadline: Last block height at which the request may execute
    """

    deposits: AssetPair
    liquidity: int
    deadline: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "liquidity", validate_uint64(self.liquidity))
        object.__setattr__(self, "deadline", validate_uint64(self.deadline))

    def check_deadline(self, block_height: int) -> None:
        """Reject the request if ``block_height`` is past its deadline.

        Raises:
            DeadlineExceeded: If block_height > deadline
        """
        check_deadline(self.deadline, block_height)


@dataclass(frozen=True)
class PreviewAddLiquidityInfo:
    """Forecast of an add-liquidity call for a one-sided deposit.

    For a pool with zero liquidity the ratio is undefined: other_asset_to_add
    has amount 0 and the liquidity minted is 1:1 with the deposit. The first
    add_liquidity mints 1:1 with the deposit in reserve slot a, so the
    fallback is exact only when previewing that asset.
    """

    other_asset_to_add: Asset
    liquidity_asset_to_receive: Asset


@dataclass(frozen=True)
class PreviewSwapInfo:
    """Forecast of a swap.

    Attributes:
        other_asset: Counter-asset produced (exact input) or required (exact output)
        sufficient_reserve: False if the pool cannot cover the swap or the
            swap would move nothing; the swap must not be executed in that case
    """

    other_asset: Asset
    sufficient_reserve: bool

    def require_sufficient_reserve(self) -> Asset:
        """Return other_asset, or raise if the swap cannot be executed.

        Raises:
            InsufficientReserve: If sufficient_reserve is False
        """
        if not self.sufficient_reserve:
            raise InsufficientReserve(f"Insufficient reserve for swap of {self.other_asset.id!r}")
        return self.other_asset


@dataclass(frozen=True)
class RemoveLiquidityInfo:
    """Result of a withdrawal: reserves returned and liquidity destroyed."""

    removed_amounts: AssetPair
    burned_liquidity: Asset
