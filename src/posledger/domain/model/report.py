"""Read models produced by the report aggregator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.product import ProductSnapshot
from posledger.domain.model.value_objects import Money


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range; ``None`` leaves that side open."""

    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValidationError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True

    @staticmethod
    def unrestricted() -> DateRange:
        return DateRange()


@dataclass(frozen=True)
class BestSeller:
    product: ProductSnapshot
    quantity: int


@dataclass(frozen=True)
class DailySales:
    date: str
    sales: Money
    profit: Money


@dataclass(frozen=True)
class SalesReport:
    total_sales: Money
    total_profit: Money
    total_transactions: int
    average_transaction_value: Money
    best_selling_products: list[BestSeller]
    sales_by_date: list[DailySales]
