"""Shared test fixtures for storefront-insights."""

import json
from pathlib import Path

import pytest

from services.vendor_service import RankingProvider


class FixedRankingProvider(RankingProvider):
    """Returns the same value for every vendor."""

    def __init__(self, value: int = 50):
        self.value = value
        self.calls = []

    def rank(self, vendor, count):
        self.calls.append((vendor, count))
        return self.value


@pytest.fixture
def fixed_ranking():
    return FixedRankingProvider(42)


def make_product(pid, title="Item", vendor=None, price=None, compare_at=None) -> dict:
    """Storefront product record as delivered by the SDK."""
    data = {"id": pid, "title": title}
    if vendor is not None:
        data["vendor"] = vendor
    if price is not None:
        data["price"] = {"amount": str(price), "currencyCode": "USD"}
    if compare_at is not None:
        data["compareAtPrice"] = {"amount": str(compare_at), "currencyCode": "USD"}
    return data


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """A data directory holding products.json and orders.json."""
    products = [
        make_product(1, "Mug", vendor="Acme"),
        make_product(2, "Cap", vendor="Globex"),
        make_product(3, "Pen", vendor="Acme"),
    ]
    orders = [
        {
            "id": "o-1",
            "lineItems": [
                {"quantity": 2, "product": make_product(10, "Tea", price="18.00", compare_at="25.00")},
                {"quantity": 1, "product": make_product(11, "Cup", price="5.00")},
            ],
        }
    ]
    (tmp_path / "products.json").write_text(json.dumps(products), encoding="utf-8")
    (tmp_path / "orders.json").write_text(json.dumps(orders), encoding="utf-8")
    return tmp_path
