# models/vendor.py
from dataclasses import dataclass
# Derived per-vendor statistics; rebuilt on every aggregation.


@dataclass(frozen=True)
class VendorStat:
    vendor: str
    count: int
    top_percent: int    # display only, 1-100

    def to_dict(self) -> dict:
        return {
            "vendor": self.vendor,
            "count": self.count,
            "topPercent": self.top_percent,
        }
