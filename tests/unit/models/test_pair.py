"""Tests for AssetPair lookup, orientation and arithmetic."""

import pytest

from pairswap.errors import (
    AssetMismatch,
    AssetNotInPair,
    InvalidPair,
    OrientationMismatch,
    Overflow,
    Underflow,
)
from pairswap.models import Asset, AssetPair
from tests.helpers import MAX, X, Y, Z, make_pair

# Pairs used across property-style tests, in both orientations
SAMPLE_PAIRS = [
    make_pair(0, 0),
    make_pair(5, 7),
    make_pair(MAX, 1),
    AssetPair.of(Y, 3, X, 9),
]


class TestAssetPairConstruction:
    """Tests for AssetPair construction."""

    def test_construction(self):
        """Pair keeps both assets in the given slots."""
        pair = AssetPair(Asset(X, 1), Asset(Y, 2))
        assert pair.a == Asset(X, 1)
        assert pair.b == Asset(Y, 2)

    def test_equal_ids_rejected(self):
        """A pair of the same asset twice raises InvalidPair."""
        with pytest.raises(InvalidPair):
            AssetPair(Asset(X, 1), Asset(X, 2))

    def test_non_asset_rejected(self):
        """Both slots must hold Asset values."""
        with pytest.raises(TypeError):
            AssetPair((X, 1), Asset(Y, 2))  # type: ignore[arg-type]

    @pytest.mark.parametrize("pair", SAMPLE_PAIRS)
    def test_ids_distinct(self, pair):
        """ids() always returns two distinct identifiers."""
        id_a, id_b = pair.ids()
        assert id_a != id_b
        assert pair.a.id != pair.b.id

    def test_ids_and_amounts_follow_orientation(self):
        """ids() and amounts() report slot a first."""
        pair = AssetPair.of(Y, 3, X, 9)
        assert pair.ids() == (Y, X)
        assert pair.amounts() == (3, 9)


class TestAssetPairLookup:
    """Tests for this_asset and other_asset."""

    @pytest.mark.parametrize("pair", SAMPLE_PAIRS)
    @pytest.mark.parametrize("target", [X, Y])
    def test_lookup_totality(self, pair, target):
        """this_asset finds the target, other_asset finds the other one."""
        assert pair.this_asset(target).id == target
        assert pair.other_asset(target).id != target

    def test_lookup_returns_amounts(self):
        """Lookups return the full Asset from the matching slot."""
        pair = make_pair(5, 7)
        assert pair.this_asset(Y) == Asset(Y, 7)
        assert pair.other_asset(Y) == Asset(X, 5)

    def test_this_asset_foreign_id_raises(self):
        """this_asset for an id outside the pair raises, never defaults to slot b."""
        with pytest.raises(AssetNotInPair) as exc_info:
            make_pair(5, 7).this_asset(Z)
        assert Z in str(exc_info.value)

    def test_other_asset_foreign_id_raises(self):
        """other_asset for an id outside the pair raises, never defaults to slot a."""
        with pytest.raises(AssetNotInPair):
            make_pair(5, 7).other_asset(Z)

    def test_contains(self):
        """contains() is true only for the pair's own ids."""
        pair = make_pair(5, 7)
        assert pair.contains(X)
        assert not pair.contains(Z)


class TestAssetPairSort:
    """Tests for sort against a reference pair."""

    def test_sort_aligned_is_unchanged(self):
        """Sorting an aligned pair returns the same value."""
        pair = make_pair(5, 7)
        assert pair.sort(make_pair(100, 200)) == pair

    def test_sort_flips_misaligned(self):
        """Sorting a reversed pair swaps its slots."""
        reversed_pair = AssetPair.of(Y, 7, X, 5)
        sorted_pair = reversed_pair.sort(make_pair())
        assert sorted_pair == make_pair(5, 7)
        assert sorted_pair.a.id == X

    @pytest.mark.parametrize("pair", SAMPLE_PAIRS)
    @pytest.mark.parametrize("reference", [make_pair(), AssetPair.of(Y, 0, X, 0)])
    def test_sort_idempotent(self, pair, reference):
        """sort(sort(p, ref), ref) == sort(p, ref)."""
        once = pair.sort(reference)
        assert once.sort(reference) == once
        assert once.a.id == reference.a.id

    def test_sort_unrelated_reference_raises(self):
        """A reference sharing no id raises OrientationMismatch."""
        with pytest.raises(OrientationMismatch):
            make_pair(1, 2).sort(AssetPair.of(Z, 0, "asset-w", 0))

    def test_sort_partially_shared_reference_raises(self):
        """A reference sharing only one id cannot be aligned to."""
        with pytest.raises(OrientationMismatch):
            make_pair(1, 2).sort(AssetPair.of(Z, 0, X, 0))
        with pytest.raises(OrientationMismatch):
            make_pair(1, 2).sort(AssetPair.of(X, 0, Z, 0))


class TestAssetPairArithmetic:
    """Tests for add and subtract."""

    def test_add(self):
        """add sums slot by slot and keeps ids."""
        assert make_pair(1, 2).add(make_pair(10, 20)) == make_pair(11, 22)

    def test_subtract(self):
        """subtract subtracts slot by slot and keeps ids."""
        assert make_pair(10, 20).subtract(make_pair(1, 2)) == make_pair(9, 18)

    def test_subtract_to_zero(self):
        """Subtracting a pair from itself yields zero amounts."""
        assert make_pair(10, 20).subtract(make_pair(10, 20)).is_zero()

    @pytest.mark.parametrize(
        "p, q",
        [
            (make_pair(0, 0), make_pair(0, 0)),
            (make_pair(5, 7), make_pair(3, 11)),
            (make_pair(MAX - 1, 0), make_pair(1, MAX)),
            (AssetPair.of(Y, 4, X, 6), AssetPair.of(Y, 1, X, 2)),
        ],
    )
    def test_add_subtract_inverse(self, p, q):
        """subtract(add(p, q), q) == p."""
        assert p.add(q).subtract(q) == p

    def test_add_overflow_raises(self):
        """A sum above 2^64-1 raises Overflow."""
        with pytest.raises(Overflow):
            make_pair(MAX, 0).add(make_pair(1, 0))

    def test_add_overflow_second_slot_raises(self):
        """Overflow in the second slot raises too."""
        with pytest.raises(Overflow):
            make_pair(0, MAX).add(make_pair(0, MAX))

    def test_subtract_underflow_raises(self):
        """A negative difference in the first slot raises Underflow."""
        with pytest.raises(Underflow):
            make_pair(5, 5).subtract(make_pair(10, 1))

    def test_subtract_underflow_second_slot_raises(self):
        """Underflow in the second slot raises too."""
        with pytest.raises(Underflow):
            make_pair(5, 5).subtract(make_pair(1, 6))

    def test_add_different_assets_raises(self):
        """Pairs over different assets cannot be added."""
        with pytest.raises(AssetMismatch):
            make_pair(1, 1).add(AssetPair.of(Z, 1, Y, 1))

    def test_add_reversed_orientation_raises(self):
        """Pairs over the same assets in opposite slots cannot be added."""
        with pytest.raises(AssetMismatch):
            make_pair(1, 1).add(AssetPair.of(Y, 1, X, 1))

    def test_subtract_misaligned_raises(self):
        """A reversed pair cannot be subtracted without sorting."""
        with pytest.raises(AssetMismatch):
            make_pair(5, 5).subtract(AssetPair.of(Y, 1, X, 1))

    def test_sort_then_add(self):
        """Sorting against the left operand makes a reversed pair addable."""
        reserves = make_pair(10, 20)
        delta = AssetPair.of(Y, 2, X, 1)
        assert reserves.add(delta.sort(reserves)) == make_pair(11, 22)

    def test_operands_are_not_mutated(self):
        """Arithmetic returns new pairs."""
        p, q = make_pair(1, 2), make_pair(3, 4)
        p.add(q)
        assert p == make_pair(1, 2)
        assert q == make_pair(3, 4)


class TestAssetPairHelpers:
    """Tests for convenience helpers."""

    def test_flipped(self):
        """flipped() swaps the slots."""
        assert make_pair(1, 2).flipped() == AssetPair.of(Y, 2, X, 1)

    def test_is_aligned(self):
        """Pairs are aligned when their ids sit in the same slots."""
        assert make_pair(1, 2).is_aligned(make_pair(3, 4))
        assert not make_pair(1, 2).is_aligned(make_pair(1, 2).flipped())

    def test_str(self):
        """str lists both assets in slot order."""
        assert str(make_pair(1, 2)) == f"(1 {X}, 2 {Y})"
