"""JSON-collection-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Callable

from posledger.domain.exceptions import SerializationError
from posledger.domain.model.product import Product
from posledger.domain.repository.product_repository import ProductRepository
from posledger.infrastructure.persistence.codec import product_from_raw, product_to_raw
from posledger.infrastructure.persistence.json_collection_store import JsonCollectionStore

PRODUCTS = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return self._load()

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._load():
            if product.id == product_id:
                return product
        return None

    def add(self, product: Product) -> None:
        with self._store.locked(PRODUCTS):
            products = self._load()
            products.append(product)
            self._persist(products)

    def update(self, product: Product) -> bool:
        with self._store.locked(PRODUCTS):
            products = self._load()
            for i, existing in enumerate(products):
                if existing.id == product.id:
                    products[i] = product
                    self._persist(products)
                    return True
        return False

    def modify(self, product_id: str, fn: Callable[[Product], None]) -> Product | None:
        with self._store.locked(PRODUCTS):
            products = self._load()
            for product in products:
                if product.id == product_id:
                    fn(product)
                    self._persist(products)
                    return product
        return None

    def delete(self, product_id: str) -> bool:
        with self._store.locked(PRODUCTS):
            products = self._load()
            remaining = [p for p in products if p.id != product_id]
            if len(remaining) == len(products):
                return False
            self._persist(remaining)
        return True

    def replace_all(self, products: list[Product]) -> None:
        self._persist(list(products))

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        with self._store.locked(PRODUCTS):
            raw = self._store.get(PRODUCTS, [])
            try:
                return [product_from_raw(item) for item in raw]
            except SerializationError as exc:
                self._store.quarantine(PRODUCTS, str(exc))
                return []

    def _persist(self, products: list[Product]) -> None:
        self._store.set(PRODUCTS, [product_to_raw(p) for p in products])
