# services/report_service.py
from services.discount_service import OrderDiscountSummarizer
from services.vendor_service import VendorAggregator
from utils.money import format_currency

NO_DISCOUNTS_MESSAGE = "No discounted products found in your orders."


# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for the storefront
# "Frequently Bought Vendors" and "Your Shopping Summary" sections.
class ReportService:
    def __init__(self, repo, vendor_aggregator=None, summarizer=None):
        self.repo = repo
        self.vendors = vendor_aggregator or VendorAggregator()
        self.summarizer = summarizer or OrderDiscountSummarizer()

    def vendor_report(self, strict: bool = False) -> list[dict]:
        # One row per vendor, first-seen order.
        products = self.repo.get_products(strict=strict)
        return [s.to_dict() for s in self.vendors.aggregate(products)]

    def shopping_summary(self, strict: bool = False) -> dict:
        # Numbers stay numeric in the aggregators; currency text is added here.
        orders = self.repo.get_orders(strict=strict)
        summary = self.summarizer.summarize(orders)
        products = [
            {
                "name": p.name,
                "originalPrice": format_currency(p.original_price),
                "discountedPrice": format_currency(p.discounted_price),
                "saved": format_currency(p.saved),
            }
            for p in summary.products
        ]
        return {
            "totalBought": summary.total_bought,
            "totalSaved": format_currency(summary.total_saved),
            "products": products,
            "message": "" if products else NO_DISCOUNTS_MESSAGE,
        }
