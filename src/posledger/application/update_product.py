"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from posledger.application.add_product import ensure_barcode_free
from posledger.application.dto import ProductSpec
from posledger.domain.exceptions import NotFoundError
from posledger.domain.model.product import Product
from posledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> Product:
        """Replace a product's fields.

        This does NOT affect any recorded sale; sales captured a
        product snapshot at checkout.
        """
        existing = self._product_repo.get_by_id(str(spec.id).strip())
        if existing is None:
            raise NotFoundError(f"Product with ID '{spec.id}' not found")

        product = Product.create(
            id=existing.id,
            name=spec.name,
            cost=spec.cost,
            price=spec.price,
            inventory=spec.inventory,
            category=spec.category,
            description=spec.description,
            image=spec.image,
            barcode=spec.barcode,
            created_at=existing.created_at,
        )
        ensure_barcode_free(self._product_repo, product)

        if not self._product_repo.update(product):
            raise NotFoundError(f"Product with ID '{spec.id}' not found")
        logger.info("Product %s updated", product.id)
        return product
