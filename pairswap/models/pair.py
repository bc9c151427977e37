"""AssetPair: the two sides of a pool.

A pair is used for reserves, deposits, withdrawals and swap deltas. Which
asset sits in slot ``a`` (the orientation) only matters relative to another
pair, usually the pool's reserves. Two pairs are aligned when they hold the
same ids in the same slots, and only aligned pairs may be combined.

Every operation here fails instead of guessing:
- equal ids in both slots raise InvalidPair
- lookups for a foreign id raise AssetNotInPair
- aligning to an unrelated reference raises OrientationMismatch
- combining misaligned pairs raises AssetMismatch
- sums above 2^64-1 raise Overflow, differences below zero raise Underflow
"""

from __future__ import annotations

from dataclasses import dataclass

from pairswap.errors import AssetMismatch, AssetNotInPair, InvalidPair, OrientationMismatch
from pairswap.models.asset import Asset
from pairswap.safe_int import S


@dataclass(frozen=True)
class AssetPair:
    """An ordered pair of two distinct assets."""

    a: Asset
    b: Asset

    def __post_init__(self) -> None:
        if not isinstance(self.a, Asset) or not isinstance(self.b, Asset):
            raise TypeError(
                f"AssetPair requires two Asset values, got "
                f"{type(self.a).__name__} and {type(self.b).__name__}"
            )
        if self.a.id == self.b.id:
            raise InvalidPair(f"AssetPair requires distinct ids, got {self.a.id!r} twice")

    @classmethod
    def of(cls, id_a: str, amount_a: int, id_b: str, amount_b: int) -> AssetPair:
        """Build a pair from raw ids and amounts."""
        return cls(Asset(id_a, amount_a), Asset(id_b, amount_b))

    # --- Inspection ---

    def ids(self) -> tuple[str, str]:
        """Return (a.id, b.id) in current orientation."""
        return self.a.id, self.b.id

    def amounts(self) -> tuple[int, int]:
        """Return (a.amount, b.amount) in current orientation."""
        return self.a.amount, self.b.amount

    def contains(self, asset_id: str) -> bool:
        return asset_id == self.a.id or asset_id == self.b.id

    def is_aligned(self, other: AssetPair) -> bool:
        """True if both pairs hold the same ids in the same slots."""
        return self.ids() == other.ids()

    def is_zero(self) -> bool:
        return self.a.amount == 0 and self.b.amount == 0

    # --- Lookup ---

    def this_asset(self, asset_id: str) -> Asset:
        """Return the asset of the pair whose id is ``asset_id``.

        Raises:
            AssetNotInPair: If ``asset_id`` is neither of the pair's ids
        """
        if asset_id == self.a.id:
            return self.a
        if asset_id == self.b.id:
            return self.b
        raise AssetNotInPair(f"Asset {asset_id!r} not in pair {self.ids()}")

    def other_asset(self, asset_id: str) -> Asset:
        """Return the asset of the pair whose id is NOT ``asset_id``.

        Raises:
            AssetNotInPair: If ``asset_id`` is neither of the pair's ids
        """
        if asset_id == self.a.id:
            return self.b
        if asset_id == self.b.id:
            return self.a
        raise AssetNotInPair(f"Asset {asset_id!r} not in pair {self.ids()}")

    # --- Orientation ---

    def flipped(self) -> AssetPair:
        """Return the same pair with slots swapped."""
        return AssetPair(self.b, self.a)

    def sort(self, reference: AssetPair) -> AssetPair:
        """Return this pair reordered to match the orientation of ``reference``.

        The result holds in slot ``a`` whichever asset has the id of
        ``reference.a``. Sorting is idempotent: sorting an already aligned
        pair returns it unchanged.

        Raises:
            OrientationMismatch: If the two pairs do not hold the same two ids
        """
        if self.a.id == reference.a.id and self.b.id == reference.b.id:
            return self
        if self.b.id == reference.a.id and self.a.id == reference.b.id:
            return self.flipped()
        raise OrientationMismatch(
            f"Cannot align pair {self.ids()} to reference {reference.ids()}"
        )

    # --- Arithmetic ---

    def _require_aligned(self, other: AssetPair, operation: str) -> None:
        if not self.is_aligned(other):
            raise AssetMismatch(
                f"Cannot {operation} pair {other.ids()} to/from {self.ids()}: "
                f"pairs are not aligned"
            )

    def add(self, other: AssetPair) -> AssetPair:
        """Return the slot-by-slot sum of two aligned pairs.

        Raises:
            AssetMismatch: If the pairs are not aligned
            Overflow: If either sum exceeds 2^64-1
        """
        self._require_aligned(other, "add")
        return AssetPair(
            self.a.with_amount((S(self.a.amount) + S(other.a.amount)).to_uint64()),
            self.b.with_amount((S(self.b.amount) + S(other.b.amount)).to_uint64()),
        )

    def subtract(self, other: AssetPair) -> AssetPair:
        """Return the slot-by-slot difference of two aligned pairs.

        Raises:
            AssetMismatch: If the pairs are not aligned
            Underflow: If either difference would be negative
        """
        self._require_aligned(other, "subtract")
        return AssetPair(
            self.a.with_amount((S(self.a.amount) - S(other.a.amount)).to_uint64()),
            self.b.with_amount((S(self.b.amount) - S(other.b.amount)).to_uint64()),
        )

    def __str__(self) -> str:
        return f"({self.a}, {self.b})"
