# services/discount_service.py
"""
discount_service.py

Summarizes how much a user bought and how much they saved with discounts.

For every line item with a product:
    - quantity falls back to 1 when missing or falsy (0 included)
    - price falls back to 0, compare-at price falls back to price
    - units always count towards total_bought
    - savings count only when compare-at price > price

Savings are summed unrounded and the total is rounded once at the end,
see utils.money.round_money for the rounding rule.
"""

from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import Any, List

from models.order import LineItem, Order
from models.product import Money, Product
from models.summary import DiscountedProductEntry, PurchaseSummary
from utils.money import round_money, to_amount

logger = logging.getLogger("storefront.discounts")


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _amount_of(money, default: float) -> float:
    money = Money.from_value(money)
    return to_amount(money.amount if money is not None else None, default)


def resolve_quantity(raw: Any) -> int:
    # Same rule as the storefront screen: falsy -> 1.
    # TODO: an explicit quantity of 0 is counted as 1; confirm with the orders API
    # whether zero-quantity line items can occur before changing this.
    # Fractional quantities are truncated toward zero first: 2.5 -> 2, 0.5 -> 0 -> 1.
    quantity = int(to_amount(raw, 0.0))
    return quantity or 1


class OrderDiscountSummarizer:

    def summarize(self, orders) -> PurchaseSummary:
        if not orders or not _is_sequence(orders):
            return PurchaseSummary.empty()

        total_bought = 0
        total_saved = 0.0
        products: List[DiscountedProductEntry] = []
        skipped = 0

        for raw_order in orders:
            order = Order.from_dict(raw_order)
            if order is None:
                continue
            line_items = order.line_items if _is_sequence(order.line_items) else []
            for raw_item in line_items:
                item = LineItem.from_dict(raw_item)
                product = Product.from_dict(item.product) if item is not None else None
                if product is None:
                    skipped += 1
                    continue

                quantity = resolve_quantity(item.quantity)
                price = _amount_of(product.price, 0.0)
                compare_at = _amount_of(product.compare_at_price, price)

                total_bought += quantity
                if compare_at > price:
                    saved = (compare_at - price) * quantity
                    total_saved += saved
                    products.append(
                        DiscountedProductEntry(
                            name=product.title or "",
                            original_price=compare_at,
                            discounted_price=price,
                            saved=round_money(saved),
                        )
                    )

        if skipped:
            logger.debug(f"Skipped {skipped} line items without a product")
        summary = PurchaseSummary(
            total_bought=total_bought,
            total_saved=round_money(total_saved),
            products=tuple(products),
        )
        logger.info(
            f"Purchase summary: bought={summary.total_bought}, "
            f"saved={summary.total_saved:.2f}, discounted={len(summary.products)}"
        )
        return summary
