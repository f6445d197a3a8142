# services/vendor_service.py

from __future__ import annotations
import logging
import math
import random
import re
import zlib
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, List, Optional

from models.product import Product
from models.vendor import VendorStat

logger = logging.getLogger("storefront.vendors")

FALLBACK_VENDOR_PREFIX = "Mock Vendor"
FALLBACK_VENDOR_BUCKETS = 3
TOP_PERCENT_MIN = 1
TOP_PERCENT_MAX = 100

_INT_RE = re.compile(r"^[+-]?\d+$")
_TRAILING_DIGITS_RE = re.compile(r"(\d+)$")


class RankingProvider(ABC):
    #Abstract base class for the "top % buyer" value shown next to a vendor.
    #The value is decorative; grouping never depends on it.

    @abstractmethod
    def rank(self, vendor: str, count: int) -> int:
        pass


class RandomRankingProvider(RankingProvider):
    # Uniform random integer in [1, 100] per vendor.
    # Pass a seed (or your own random.Random) for reproducible output.

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def rank(self, vendor, count):
        return self.rng.randint(TOP_PERCENT_MIN, TOP_PERCENT_MAX)


def identifier_as_int(identifier: Any) -> int:
    """
    Treat a product identifier as an integer.

    - ints are used as-is, finite floats are truncated
    - "42" -> 42
    - "gid://shopify/Product/42" -> 42 (trailing digits)
    - any other text -> CRC-32 of the text
    - None or anything else -> 0
    """
    if isinstance(identifier, int):
        return int(identifier)
    if isinstance(identifier, float):
        if not math.isfinite(identifier):
            return 0
        return int(identifier)
    if isinstance(identifier, str):
        text = identifier.strip()
        if _INT_RE.match(text):
            return int(text)
        m = _TRAILING_DIGITS_RE.search(text)
        if m:
            return int(m.group(1))
        return zlib.crc32(text.encode("utf-8"))
    return 0


def fallback_vendor(identifier: Any) -> str:
    # "Mock Vendor 1".."Mock Vendor 3"; a pure function of the identifier.
    bucket = identifier_as_int(identifier) % FALLBACK_VENDOR_BUCKETS + 1
    return f"{FALLBACK_VENDOR_PREFIX} {bucket}"


def resolve_vendor(product: Optional[Product]) -> str:
    # Explicit vendor wins; otherwise derive one from the product id.
    if product is None:
        return fallback_vendor(None)
    vendor = product.vendor
    if vendor:
        return vendor if isinstance(vendor, str) else str(vendor)
    return fallback_vendor(product.id)


class VendorAggregator:
    # Groups products by vendor and counts them.
    # Vendors come out in the order they were first seen.

    def __init__(self, ranking: RankingProvider | None = None):
        self.ranking = ranking if ranking is not None else RandomRankingProvider()

    def aggregate(self, products) -> List[VendorStat]:
        if not isinstance(products, Sequence) or isinstance(products, (str, bytes)):
            if products is not None:
                logger.debug(f"Vendor aggregation ignored non-sequence input {type(products).__name__}")
            return []

        counts: dict[str, int] = {}
        for raw in products:
            vendor = resolve_vendor(Product.from_dict(raw))
            if vendor not in counts:
                counts[vendor] = 0
            counts[vendor] += 1

        stats = [
            VendorStat(vendor=vendor, count=count, top_percent=self._top_percent(vendor, count))
            for vendor, count in counts.items()
        ]
        logger.info(f"Vendor aggregation: {len(products)} products -> {len(stats)} vendors")
        return stats

    def _top_percent(self, vendor: str, count: int) -> int:
        value = int(self.ranking.rank(vendor, count))
        # safety clamp
        return min(TOP_PERCENT_MAX, max(TOP_PERCENT_MIN, value))
