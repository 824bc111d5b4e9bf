"""Domain service: Inventory Reconciler.

Validates stock movements, applies them to products and derives the
catalog-wide stock figures (value, units, low-stock list).
"""

from __future__ import annotations

import logging

from posledger.domain.exceptions import NotFoundError
from posledger.domain.model.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    AdjustmentDirection,
    Product,
)
from posledger.domain.model.value_objects import Money
from posledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryReconciler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def adjust(
        self,
        product_id: str,
        delta: int,
        direction: AdjustmentDirection | str,
    ) -> Product:
        """Add or subtract *delta* units and persist the product.

        Subtraction floors at zero.  Raises ValidationError for a
        non-positive or non-integer delta or an unknown direction, and
        NotFoundError for an unknown product.
        """
        direction = AdjustmentDirection.parse(direction)

        before: list[int] = []

        def apply(product: Product) -> None:
            before.append(product.inventory)
            product.adjust_inventory(delta, direction)

        product = self._product_repo.modify(product_id, apply)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        logger.info(
            "Inventory for %s: %d -> %d (%s %d)",
            product.id, before[0], product.inventory, direction.value, delta,
        )
        return product

    # --- Catalog-wide figures -------------------------------------------------

    def inventory_value(self, products: list[Product] | None = None) -> Money:
        """Sum of inventory x cost across the catalog."""
        result = Money.zero()
        for product in self._products(products):
            result = result + product.inventory_value
        return result

    def total_units(self, products: list[Product] | None = None) -> int:
        return sum(p.inventory for p in self._products(products))

    def low_stock(self, products: list[Product] | None = None) -> list[Product]:
        return [
            p for p in self._products(products)
            if p.is_low_stock(self._low_stock_threshold)
        ]

    def _products(self, products: list[Product] | None) -> list[Product]:
        return self._product_repo.list_all() if products is None else products
