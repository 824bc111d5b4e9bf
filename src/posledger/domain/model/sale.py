"""Sale aggregate: one immutable ledger entry.

A sale owns snapshots of the products it sold, so later catalog edits
or deletions cannot change historical totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.clock import local_now
from posledger.domain.model.product import ProductSnapshot
from posledger.domain.model.value_objects import Money, Quantity


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    OTHER = "other"

    @staticmethod
    def parse(value: PaymentMethod | str | None) -> PaymentMethod:
        if value is None:
            return PaymentMethod.CASH
        if isinstance(value, PaymentMethod):
            return value
        try:
            return PaymentMethod(str(value).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Payment method must be one of cash, card, other; got {value!r}"
            ) from exc


@dataclass(frozen=True)
class SaleLineItem:
    product: ProductSnapshot
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @property
    def line_profit(self) -> Money:
        return self.product.unit_profit * self.quantity.value


@dataclass(frozen=True)
class Sale:
    """Aggregate root for a completed sale.

    ``total`` and ``profit`` are stored alongside the items.  They are an
    audited copy: ``audit()`` checks them against the items, and nothing
    ever recomputes them from current catalog prices.
    """

    id: str
    items: tuple[SaleLineItem, ...]
    total: Money
    profit: Money
    timestamp: datetime = field(default_factory=local_now)
    payment_method: PaymentMethod = PaymentMethod.CASH

    @staticmethod
    def create(
        order_number: str,
        items: list[SaleLineItem] | tuple[SaleLineItem, ...],
        payment_method: PaymentMethod | str | None = None,
        timestamp: datetime | None = None,
    ) -> Sale:
        """Create a new sale, computing total and profit from the items."""
        if not order_number or not order_number.strip():
            raise ValidationError("Order number is required")
        if not items:
            raise ValidationError("Sale must contain at least one item")

        items = tuple(items)
        return Sale(
            id=order_number.strip(),
            items=items,
            total=_sum(item.line_total for item in items),
            profit=_sum(item.line_profit for item in items),
            timestamp=timestamp or local_now(),
            payment_method=PaymentMethod.parse(payment_method),
        )

    # --- Audit ----------------------------------------------------------------

    @property
    def computed_total(self) -> Money:
        return _sum(item.line_total for item in self.items)

    @property
    def computed_profit(self) -> Money:
        return _sum(item.line_profit for item in self.items)

    @property
    def is_consistent(self) -> bool:
        # Compared at cent precision: ledgers written by the old float-based
        # till carry sums like 7.490000000000001.
        return (
            self.total.rounded() == self.computed_total.rounded()
            and self.profit.rounded() == self.computed_profit.rounded()
        )

    def audit(self) -> None:
        """Raise ValidationError if stored totals disagree with the items."""
        if not self.is_consistent:
            raise ValidationError(
                f"Sale {self.id} totals do not match its items "
                f"(stored {self.total}/{self.profit}, "
                f"computed {self.computed_total}/{self.computed_profit})"
            )

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)


def _sum(amounts) -> Money:
    result = Money.zero()
    for amount in amounts:
        result = result + amount
    return result
