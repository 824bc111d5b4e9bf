"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from posledger.application.dto import InventoryLineDTO, InventorySummaryDTO
from posledger.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.service.inventory_reconciler import InventoryReconciler


class ShowInventoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, search: str | None = None) -> InventorySummaryDTO:
        reconciler = InventoryReconciler(self._product_repo, self._low_stock_threshold)

        # Totals always cover the whole catalog; the search only narrows the lines.
        products = self._product_repo.list_all()
        shown = self._product_repo.search(search) if search else products

        return InventorySummaryDTO(
            lines=[
                InventoryLineDTO(
                    product_id=p.id,
                    product_name=p.name,
                    inventory=p.inventory,
                    value=str(p.inventory_value),
                    low_stock=p.is_low_stock(self._low_stock_threshold),
                )
                for p in shown
            ],
            total_value=str(reconciler.inventory_value(products)),
            total_units=reconciler.total_units(products),
            low_stock_count=len(reconciler.low_stock(products)),
            low_stock_threshold=self._low_stock_threshold,
        )
