"""Tests for vendor grouping and the fallback vendor rule."""

import random
from types import MappingProxyType

import pytest

from conftest import FixedRankingProvider, make_product
from models.product import Product
from models.vendor import VendorStat
from services.vendor_service import (
    RandomRankingProvider,
    VendorAggregator,
    fallback_vendor,
    identifier_as_int,
    resolve_vendor,
)


class TestEmptyInput:
    """Absent or non-sequence input is treated as empty."""

    @pytest.mark.parametrize("products", [None, [], (), {}, {"id": 1}, "abc", 42])
    def test_returns_empty_list(self, products, fixed_ranking):
        assert VendorAggregator(fixed_ranking).aggregate(products) == []

    def test_ranking_not_called_for_empty_input(self, fixed_ranking):
        VendorAggregator(fixed_ranking).aggregate([])
        assert fixed_ranking.calls == []


class TestGrouping:
    """Counting and first-encounter ordering."""

    def test_counts_explicit_vendors(self, fixed_ranking):
        products = [
            make_product(1, vendor="Acme"),
            make_product(2, vendor="Globex"),
            make_product(3, vendor="Acme"),
            make_product(4, vendor="Acme"),
        ]
        stats = VendorAggregator(fixed_ranking).aggregate(products)
        assert stats == [
            VendorStat(vendor="Acme", count=3, top_percent=42),
            VendorStat(vendor="Globex", count=1, top_percent=42),
        ]

    def test_first_encounter_order(self, fixed_ranking):
        products = [make_product(i, vendor=v) for i, v in enumerate(["Zeta", "Alpha", "Mid", "Alpha", "Zeta"])]
        stats = VendorAggregator(fixed_ranking).aggregate(products)
        assert [s.vendor for s in stats] == ["Zeta", "Alpha", "Mid"]
        assert [s.count for s in stats] == [2, 2, 1]

    def test_mixes_explicit_and_fallback_vendors(self, fixed_ranking):
        products = [
            make_product(3),                # Mock Vendor 1
            make_product(7, vendor="Acme"),
            make_product(4),                # Mock Vendor 2
            make_product(6),                # Mock Vendor 1
        ]
        stats = VendorAggregator(fixed_ranking).aggregate(products)
        assert [(s.vendor, s.count) for s in stats] == [
            ("Mock Vendor 1", 2),
            ("Acme", 1),
            ("Mock Vendor 2", 1),
        ]

    def test_accepts_product_instances(self, fixed_ranking):
        products = [Product(id=1, title="Mug", vendor="Acme"), Product(id=2, title="Cap")]
        stats = VendorAggregator(fixed_ranking).aggregate(products)
        assert [(s.vendor, s.count) for s in stats] == [("Acme", 1), ("Mock Vendor 3", 1)]

    def test_malformed_entries_do_not_raise(self, fixed_ranking):
        stats = VendorAggregator(fixed_ranking).aggregate([None, 5, "junk", {}])
        assert [(s.vendor, s.count) for s in stats] == [("Mock Vendor 1", 4)]

    def test_does_not_mutate_input(self, fixed_ranking):
        products = [make_product(1, vendor="Acme"), make_product(2)]
        snapshot = [dict(p) for p in products]
        VendorAggregator(fixed_ranking).aggregate(products)
        assert products == snapshot

    def test_idempotent_counts(self):
        products = [make_product(i, vendor="Acme" if i % 2 else None) for i in range(10)]
        aggregator = VendorAggregator()
        first = [(s.vendor, s.count) for s in aggregator.aggregate(products)]
        second = [(s.vendor, s.count) for s in aggregator.aggregate(products)]
        assert first == second


class TestFallbackVendor:
    """Fallback vendor labels derived from the product id."""

    @pytest.mark.parametrize(
        "identifier, expected",
        [
            (0, "Mock Vendor 1"),
            (1, "Mock Vendor 2"),
            (2, "Mock Vendor 3"),
            (3, "Mock Vendor 1"),
            (100, "Mock Vendor 2"),
            ("5", "Mock Vendor 3"),
            ("gid://shopify/Product/8", "Mock Vendor 3"),
            (None, "Mock Vendor 1"),
        ],
    )
    def test_label(self, identifier, expected):
        assert fallback_vendor(identifier) == expected

    def test_same_identifier_same_vendor(self):
        a = Product(id=12345, title="A")
        b = Product(id=12345, title="B")
        assert resolve_vendor(a) == resolve_vendor(b) == "Mock Vendor 1"

    def test_empty_vendor_uses_fallback(self):
        assert resolve_vendor(Product(id=4, vendor="")) == "Mock Vendor 2"

    def test_explicit_vendor_used_verbatim(self):
        assert resolve_vendor(Product(id=4, vendor="  Acme Co ")) == "  Acme Co "

    def test_non_numeric_identifier_is_stable(self):
        assert identifier_as_int("sku-abc") == identifier_as_int("sku-abc")
        assert fallback_vendor("sku-abc") in {"Mock Vendor 1", "Mock Vendor 2", "Mock Vendor 3"}

    def test_negative_identifier_stays_in_range(self):
        assert fallback_vendor(-4) == "Mock Vendor 3"


class TestRanking:
    """The decorative top % value."""

    def test_random_values_in_range(self):
        products = [make_product(i, vendor=f"Vendor {i}") for i in range(200)]
        stats = VendorAggregator(RandomRankingProvider(seed=7)).aggregate(products)
        assert len(stats) == 200
        assert all(1 <= s.top_percent <= 100 for s in stats)

    def test_seeded_provider_is_repeatable(self):
        products = [make_product(i, vendor=f"Vendor {i}") for i in range(5)]
        first = VendorAggregator(RandomRankingProvider(seed=3)).aggregate(products)
        second = VendorAggregator(RandomRankingProvider(rng=random.Random(3))).aggregate(products)
        assert first == second

    @pytest.mark.parametrize("raw, expected", [(0, 1), (-10, 1), (101, 100), (250, 100), (77, 77)])
    def test_provider_values_are_clamped(self, raw, expected):
        stats = VendorAggregator(FixedRankingProvider(raw)).aggregate([make_product(1, vendor="Acme")])
        assert stats[0].top_percent == expected

    def test_provider_sees_vendor_and_count(self):
        ranking = FixedRankingProvider()
        VendorAggregator(ranking).aggregate([make_product(1, vendor="Acme"), make_product(2, vendor="Acme")])
        assert ranking.calls == [("Acme", 2)]

    def test_to_dict(self):
        assert VendorStat("Acme", 2, 10).to_dict() == {"vendor": "Acme", "count": 2, "topPercent": 10}


def test_mapping_proxy_keeps_explicit_vendor(fixed_ranking):
    products = [MappingProxyType({"id": 5, "vendor": "Acme"}), MappingProxyType({"id": 5})]
    stats = VendorAggregator(fixed_ranking).aggregate(products)
    assert [(s.vendor, s.count) for s in stats] == [("Acme", 1), ("Mock Vendor 3", 1)]
