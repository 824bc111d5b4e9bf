"""Domain service: Report Aggregator.

Derives a SalesReport from the raw ledger on every call.  There is no
materialised view and no cache: every figure is a fresh scan, which is
fine for a single shop's ledger and is the first thing to revisit if
ledgers grow large.

Day truncation: a sale belongs to the calendar date of its own
timestamp (``timestamp.date()``).  The same rule drives both the date
filter and ``sales_by_date``.
"""

from __future__ import annotations

from posledger.domain.model.report import BestSeller, DailySales, DateRange, SalesReport
from posledger.domain.model.sale import Sale
from posledger.domain.model.value_objects import Money
from posledger.domain.repository.sale_repository import SaleRepository

BEST_SELLER_LIMIT = 5


class ReportAggregator:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def sales_in_range(self, date_range: DateRange) -> list[Sale]:
        return [
            sale for sale in self._sale_repo.list_all()
            if date_range.contains(sale.timestamp.date())
        ]

    def report(self, date_range: DateRange | None = None) -> SalesReport | None:
        """Summarise the sales in *date_range*.

        Returns None when no sale falls in the range.
        """
        sales = self.sales_in_range(date_range or DateRange.unrestricted())
        return build_report(sales)


def build_report(sales: list[Sale]) -> SalesReport | None:
    if not sales:
        return None

    total_sales = Money.zero()
    total_profit = Money.zero()
    for sale in sales:
        total_sales = total_sales + sale.total
        total_profit = total_profit + sale.profit

    return SalesReport(
        total_sales=total_sales,
        total_profit=total_profit,
        total_transactions=len(sales),
        average_transaction_value=total_sales / len(sales),
        best_selling_products=best_sellers(sales),
        sales_by_date=sales_by_date(sales),
    )


def best_sellers(sales: list[Sale], limit: int = BEST_SELLER_LIMIT) -> list[BestSeller]:
    """Top products by quantity sold; ties keep first-seen order."""
    snapshots = {}
    quantities: dict[str, int] = {}
    for sale in sales:
        for item in sale.items:
            product_id = item.product.id
            snapshots.setdefault(product_id, item.product)
            quantities[product_id] = quantities.get(product_id, 0) + item.quantity.value

    # sorted() is stable, and dicts keep insertion order
    ranked = sorted(quantities.items(), key=lambda pair: -pair[1])
    return [
        BestSeller(product=snapshots[product_id], quantity=qty)
        for product_id, qty in ranked[:limit]
    ]


def sales_by_date(sales: list[Sale]) -> list[DailySales]:
    totals: dict[str, tuple[Money, Money]] = {}
    for sale in sales:
        key = sale.timestamp.date().isoformat()
        day_sales, day_profit = totals.get(key, (Money.zero(), Money.zero()))
        totals[key] = (day_sales + sale.total, day_profit + sale.profit)

    return [
        DailySales(date=key, sales=day_sales, profit=day_profit)
        for key, (day_sales, day_profit) in sorted(totals.items())
    ]
