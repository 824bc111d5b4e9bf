"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from posledger.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product. The caller guarantees the id is unused."""

    @abstractmethod
    def update(self, product: Product) -> bool:
        """Replace the product with the same id.

        Returns False when no product matched; nothing is written then.
        """

    @abstractmethod
    def modify(self, product_id: str, fn: Callable[[Product], None]) -> Product | None:
        """Apply *fn* to the stored product and persist it, atomically.

        Load, mutation and write form one critical section, so concurrent
        modifications of the same catalog cannot lose each other's
        changes.  Returns the modified product, or None when no product
        matched.  If *fn* raises, nothing is written.
        """

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product by id. Returns False when no product matched."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Overwrite the whole catalog (snapshot import)."""

    # --- Queries shared by every implementation ------------------------------

    def get_by_barcode(self, barcode: str) -> Product | None:
        for product in self.list_all():
            if product.barcode is not None and product.barcode == barcode:
                return product
        return None

    def search(self, term: str) -> list[Product]:
        """Case-insensitive match on name or category."""
        needle = term.lower()
        return [
            p
            for p in self.list_all()
            if needle in p.name.lower() or (p.category and needle in p.category.lower())
        ]

    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for product in self.list_all():
            if product.category:
                seen.setdefault(product.category, None)
        return list(seen)
