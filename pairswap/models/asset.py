"""Asset value type: an amount of one specific token."""

from __future__ import annotations

from dataclasses import dataclass

from pairswap.models.types import validate_uint64


@dataclass(frozen=True)
class Asset:
    """An amount of a single asset, in atomic units.

    Assets are never mutated; every transformation builds a new one.

    Attributes:
        id: Opaque asset identifier, compared only by equality
        amount: Atomic unit count in [0, 2^64-1]
    """

    id: str
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Asset id must be a non-empty string, got {self.id!r}")
        # Decimal strings are accepted and stored as int
        object.__setattr__(self, "amount", validate_uint64(self.amount))

    @classmethod
    def zero(cls, asset_id: str) -> Asset:
        return cls(asset_id, 0)

    def with_amount(self, amount: int) -> Asset:
        """Return an asset with the same id and a new amount."""
        return Asset(self.id, amount)

    def __str__(self) -> str:
        return f"{self.amount} {self.id}"
