"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices change, stock is adjusted, products are added and removed from
the catalog.  Sales keep a ``ProductSnapshot`` so none of this can
rewrite history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.clock import local_now
from posledger.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 10


class AdjustmentDirection(Enum):
    ADD = "add"
    SUBTRACT = "subtract"

    @staticmethod
    def parse(value: AdjustmentDirection | str) -> AdjustmentDirection:
        if isinstance(value, AdjustmentDirection):
            return value
        try:
            return AdjustmentDirection(str(value).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Adjustment direction must be 'add' or 'subtract', got {value!r}"
            ) from exc


@dataclass(frozen=True)
class ProductSnapshot:
    """The parts of a product a sale needs to remember."""

    id: str
    name: str
    cost: Money
    price: Money
    category: str | None = None
    description: str | None = None
    barcode: str | None = None

    @property
    def unit_profit(self) -> Money:
        return self.price - self.cost


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new or edited products; it enforces the
    field rules.  The ``__init__`` stays simple so repositories can
    reconstitute persisted products without re-validating.
    """

    id: str
    name: str
    cost: Money
    price: Money
    inventory: int = 0
    category: str | None = None
    description: str | None = None
    image: str | None = None
    barcode: str | None = None
    created_at: datetime = field(default_factory=local_now)
    updated_at: datetime = field(default_factory=local_now)

    @staticmethod
    def create(
        id: str,
        name: str,
        cost: Money | str | int | float,
        price: Money | str | int | float,
        inventory: int = 0,
        category: str | None = None,
        description: str | None = None,
        image: str | None = None,
        barcode: str | None = None,
        created_at: datetime | None = None,
    ) -> Product:
        """Build a validated product."""
        if id is None or not str(id).strip():
            raise ValidationError("Product id is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        cost = cost if isinstance(cost, Money) else Money.of(cost)
        price = price if isinstance(price, Money) else Money.of(price)
        if cost.is_negative:
            raise ValidationError(f"Product cost cannot be negative, got {cost}")
        if price.is_negative:
            raise ValidationError(f"Product price cannot be negative, got {price}")

        if isinstance(inventory, bool) or not isinstance(inventory, int):
            raise ValidationError(
                f"Inventory must be an integer, got {type(inventory).__name__}"
            )
        if inventory < 0:
            raise ValidationError("Inventory cannot be negative")

        now = local_now()
        return Product(
            id=str(id).strip(),
            name=name.strip(),
            cost=cost,
            price=price,
            inventory=inventory,
            category=_blank_to_none(category),
            description=_blank_to_none(description),
            image=_blank_to_none(image),
            barcode=_blank_to_none(barcode),
            created_at=created_at or now,
            updated_at=now,
        )

    # --- Behaviour ------------------------------------------------------------

    def adjust_inventory(self, delta: int, direction: AdjustmentDirection) -> int:
        """Apply a stock movement and return the new inventory.

        Subtracting more than is on hand floors at zero.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(
                f"Adjustment quantity must be an integer, got {type(delta).__name__}"
            )
        if delta <= 0:
            raise ValidationError("Adjustment quantity must be positive")

        if direction is AdjustmentDirection.ADD:
            self.inventory += delta
        else:
            self.inventory = max(0, self.inventory - delta)
        self.updated_at = local_now()
        return self.inventory

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.inventory < threshold

    @property
    def inventory_value(self) -> Money:
        return self.cost * self.inventory

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            id=self.id,
            name=self.name,
            cost=self.cost,
            price=self.price,
            category=self.category,
            description=self.description,
            barcode=self.barcode,
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
