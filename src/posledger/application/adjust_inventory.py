"""Application service: Adjust Inventory use case."""

from __future__ import annotations

from posledger.domain.model.product import AdjustmentDirection, Product
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.service.inventory_reconciler import InventoryReconciler


class AdjustInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        quantity: int,
        direction: AdjustmentDirection | str,
    ) -> Product:
        """Add or remove stock; removal never takes inventory below zero."""
        reconciler = InventoryReconciler(self._product_repo)
        return reconciler.adjust(product_id, quantity, direction)
