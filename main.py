# main.py
import sys

from data.repository import DataLoadError, DataRepository
from services.report_service import ReportService
from services.vendor_service import RandomRankingProvider, VendorAggregator
from utils.config import load_settings
from utils.logger import setup_logger


def render(report: ReportService, out=sys.stdout) -> int:
    # Plain-text version of the storefront screen. Returns an exit code.
    print("Frequently Bought Vendors", file=out)
    try:
        vendors = report.vendor_report(strict=True)
    except DataLoadError:
        print("  Failed to load products", file=out)
        return 1
    for v in vendors:
        print(f"  {v['vendor']}: products bought {v['count']}, "
              f"top {v['topPercent']}% buyer", file=out)

    print("", file=out)
    print("Your Shopping Summary", file=out)
    try:
        summary = report.shopping_summary(strict=True)
    except DataLoadError:
        print("  Failed to load orders", file=out)
        return 1
    print(f"  Products Bought: {summary['totalBought']}", file=out)
    print(f"  Saved with Discounts: {summary['totalSaved']}", file=out)
    print("  Discounted Products", file=out)
    if not summary["products"]:
        print(f"    {summary['message']}", file=out)
    for p in summary["products"]:
        print(f"    {p['name']}  {p['originalPrice']} -> {p['discountedPrice']}  "
              f"- {p['saved']}", file=out)
    return 0


def main() -> int:
    settings = load_settings()
    logger = setup_logger(settings.log_dir, settings.log_level, settings.log_backup_days)
    repo = DataRepository(settings.data_dir)
    report = ReportService(
        repo,
        vendor_aggregator=VendorAggregator(RandomRankingProvider(seed=settings.ranking_seed)),
    )
    code = render(report)
    if code:
        logger.error(f"Storefront summary failed: data could not be loaded from {settings.data_dir}")
    return code


if __name__ == "__main__":
    sys.exit(main())
