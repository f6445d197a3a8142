# models/order.py
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from models.product import Product
# Order model representing a past customer order and its line items.


@dataclass
class LineItem:
    product: Optional[Product] = None
    quantity: Any = None    # raw value; falsy means 1 when summarizing

    @classmethod
    def from_dict(cls, data) -> Optional["LineItem"]:
        if isinstance(data, LineItem):
            return data
        if not isinstance(data, Mapping):
            return None
        return cls(
            product=Product.from_dict(data.get("product")),
            quantity=data.get("quantity"),
        )


@dataclass
class Order:
    id: Any
    line_items: list[LineItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> Optional["Order"]:
        if isinstance(data, Order):
            return data
        if not isinstance(data, Mapping):
            return None
        raw_items = data.get("lineItems", data.get("line_items"))
        if not isinstance(raw_items, (list, tuple)):
            # corrupted format -> treat as an order without items
            raw_items = []
        items = [LineItem.from_dict(x) for x in raw_items]
        return cls(
            id=data.get("id"),
            line_items=[x for x in items if x is not None],
        )
