"""JSON-collection-backed implementation of SaleRepository."""

from __future__ import annotations

import logging

from posledger.domain.exceptions import SerializationError, ValidationError
from posledger.domain.model.sale import Sale
from posledger.domain.repository.sale_repository import SaleRepository
from posledger.infrastructure.persistence.codec import sale_from_raw, sale_to_raw
from posledger.infrastructure.persistence.json_collection_store import JsonCollectionStore

logger = logging.getLogger(__name__)

SALES = "sales"


class JsonSaleRepository(SaleRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    def list_all(self) -> list[Sale]:
        return self._load()

    def append(self, sale: Sale) -> None:
        with self._store.locked(SALES):
            sales = self._load()
            if any(s.id == sale.id for s in sales):
                raise ValidationError(f"Sale '{sale.id}' is already recorded")
            sales.append(sale)
            self._persist(sales)

    def replace_all(self, sales: list[Sale]) -> None:
        self._persist(list(sales))

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Sale]:
        with self._store.locked(SALES):
            raw = self._store.get(SALES, [])
            try:
                sales = [sale_from_raw(item) for item in raw]
            except SerializationError as exc:
                self._store.quarantine(SALES, str(exc))
                return []

        for sale in sales:
            if not sale.is_consistent:
                logger.warning(
                    "Sale %s stored totals %s/%s differ from its items",
                    sale.id, sale.total, sale.profit,
                )
        return sales

    def _persist(self, sales: list[Sale]) -> None:
        self._store.set(SALES, [sale_to_raw(s) for s in sales])
