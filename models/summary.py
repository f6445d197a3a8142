# models/summary.py
from dataclasses import dataclass, field
# Purchase and discount summary derived from a user's orders.


@dataclass(frozen=True)
class DiscountedProductEntry:
    name: str
    original_price: float
    discounted_price: float
    saved: float        # (original - discounted) * qty, rounded to cents

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "originalPrice": self.original_price,
            "discountedPrice": self.discounted_price,
            "saved": self.saved,
        }


@dataclass(frozen=True)
class PurchaseSummary:
    total_bought: int = 0
    total_saved: float = 0.0
    products: tuple[DiscountedProductEntry, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "PurchaseSummary":
        return cls(total_bought=0, total_saved=0.0, products=())

    def to_dict(self) -> dict:
        return {
            "totalBought": self.total_bought,
            "totalSaved": self.total_saved,
            "products": [p.to_dict() for p in self.products],
        }
