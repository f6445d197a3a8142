# models/product.py
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
# Product model representing a storefront product snapshot.


@dataclass
class Money:
    amount: Any = None                  # raw amount as supplied, e.g. "18.00"
    currency_code: Optional[str] = None

    @classmethod
    def from_value(cls, value) -> Optional["Money"]:
        # Accepts {"amount": "18.00", "currencyCode": "USD"} or a bare number/string.
        if value is None:
            return None
        if isinstance(value, Money):
            return value
        if isinstance(value, Mapping):
            return cls(
                amount=value.get("amount"),
                currency_code=value.get("currencyCode", value.get("currency_code")),
            )
        return cls(amount=value)


@dataclass
class Product:
    id: Any
    title: str = ""
    vendor: Optional[str] = None
    price: Optional[Money] = None
    compare_at_price: Optional[Money] = None

    @classmethod
    def from_dict(cls, data) -> Optional["Product"]:
        # Build a product from a storefront JSON record.
        # Any mapping is accepted; anything else yields None instead of raising.
        if isinstance(data, Product):
            return data
        if not isinstance(data, Mapping):
            return None
        compare_at = data.get("compareAtPrice", data.get("compare_at_price"))
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            vendor=data.get("vendor"),
            price=Money.from_value(data.get("price")),
            compare_at_price=Money.from_value(compare_at),
        )
