"""Unit tests for the ReportAggregator domain service."""

from datetime import date, datetime, timezone

import pytest

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.report import DateRange
from posledger.domain.model.value_objects import Money
from posledger.domain.service.report_aggregator import ReportAggregator
from tests.builders import make_sale, snapshot
from tests.fakes import FakeSaleRepository


def _at(day, hour=12, minute=0, second=0, micro=0):
    return datetime(2024, 3, day, hour, minute, second, micro, tzinfo=timezone.utc)


def _aggregator(*sales):
    return ReportAggregator(FakeSaleRepository(list(sales)))


# Ten dollars of sales with two dollars profit
TEN = snapshot("ten", "Ten", cost="8.00", price="10.00")
# Twenty dollars of sales with five dollars profit
TWENTY = snapshot("twenty", "Twenty", cost="15.00", price="20.00")


class TestTotals:

    def test_two_sales_same_day(self):
        report = _aggregator(
            make_sale("C-07-24-1", [(TEN, 1)], _at(7, 9)),
            make_sale("C-07-24-2", [(TWENTY, 1)], _at(7, 15)),
        ).report()
        assert report.total_sales == Money.of("30")
        assert report.total_profit == Money.of("7")
        assert report.total_transactions == 2
        assert report.average_transaction_value == Money.of("15")

    def test_totals_match_ledger_sums(self):
        sales = [
            make_sale(f"C-0{d}-24-1", [(TEN, d), (TWENTY, 1)], _at(d))
            for d in (1, 2, 3, 4)
        ]
        report = _aggregator(*sales).report(DateRange.unrestricted())
        expected_total = sum((s.total.amount for s in sales))
        expected_profit = sum((s.profit.amount for s in sales))
        assert report.total_sales.amount == expected_total
        assert report.total_profit.amount == expected_profit
        assert report.average_transaction_value.amount == expected_total / 4

    def test_empty_ledger_gives_no_report(self):
        assert _aggregator().report() is None

    def test_range_without_sales_gives_no_report(self):
        agg = _aggregator(make_sale("C-07-24-1", [(TEN, 1)], _at(7)))
        assert agg.report(DateRange(date(2024, 3, 8), date(2024, 3, 9))) is None


class TestDateRange:

    def test_bounds_are_inclusive_whole_days(self):
        agg = _aggregator(
            make_sale("a", [(TEN, 1)], _at(6, 23, 59, 59, 999999)),
            make_sale("b", [(TEN, 1)], _at(7, 0, 0, 0)),
            make_sale("c", [(TEN, 1)], _at(8, 23, 59, 59, 999999)),
            make_sale("d", [(TEN, 1)], _at(9, 0, 0, 0)),
        )
        sales = agg.sales_in_range(DateRange(date(2024, 3, 7), date(2024, 3, 8)))
        assert [s.id for s in sales] == ["b", "c"]

    def test_open_ended_ranges(self):
        agg = _aggregator(
            make_sale("a", [(TEN, 1)], _at(1)),
            make_sale("b", [(TEN, 1)], _at(15)),
        )
        assert [s.id for s in agg.sales_in_range(DateRange(start=date(2024, 3, 10)))] == ["b"]
        assert [s.id for s in agg.sales_in_range(DateRange(end=date(2024, 3, 10)))] == ["a"]

    def test_start_after_end_rejected(self):
        with pytest.raises(ValidationError, match="after end date"):
            DateRange(date(2024, 3, 9), date(2024, 3, 8))


class TestBestSellers:

    def test_at_most_five_sorted_by_quantity(self):
        products = [snapshot(str(i), f"P{i}") for i in range(8)]
        sales = [
            make_sale(f"s{i}", [(products[i], i + 1)], _at(7))
            for i in range(8)
        ]
        best = _aggregator(*sales).report().best_selling_products
        assert len(best) == 5
        assert [b.quantity for b in best] == [8, 7, 6, 5, 4]
        assert [b.product.id for b in best] == ["7", "6", "5", "4", "3"]

    def test_quantities_summed_across_sales(self):
        a, b = snapshot("a", "A"), snapshot("b", "B")
        best = _aggregator(
            make_sale("s1", [(a, 2), (b, 3)], _at(7)),
            make_sale("s2", [(a, 4)], _at(7)),
        ).report().best_selling_products
        assert [(x.product.id, x.quantity) for x in best] == [("a", 6), ("b", 3)]

    def test_ties_keep_first_seen_order(self):
        a, b, c = snapshot("a", "A"), snapshot("b", "B"), snapshot("c", "C")
        best = _aggregator(
            make_sale("s1", [(b, 2)], _at(7)),
            make_sale("s2", [(c, 2), (a, 2)], _at(7)),
        ).report().best_selling_products
        assert [x.product.id for x in best] == ["b", "c", "a"]

    def test_historical_snapshot_is_reported(self):
        old = snapshot("1", "Coffee", price="2.50")
        renamed = snapshot("1", "Coffee (large)", price="3.00")
        best = _aggregator(
            make_sale("s1", [(old, 1)], _at(7)),
            make_sale("s2", [(renamed, 1)], _at(8)),
        ).report().best_selling_products
        assert best[0].product.name == "Coffee"
        assert best[0].quantity == 2


class TestSalesByDate:

    def test_grouped_and_sorted_by_day(self):
        report = _aggregator(
            make_sale("s1", [(TWENTY, 1)], _at(9)),
            make_sale("s2", [(TEN, 1)], _at(7, 8)),
            make_sale("s3", [(TEN, 1)], _at(7, 20)),
        ).report()
        assert [(d.date, d.sales, d.profit) for d in report.sales_by_date] == [
            ("2024-03-07", Money.of("20"), Money.of("4")),
            ("2024-03-09", Money.of("20"), Money.of("5")),
        ]
