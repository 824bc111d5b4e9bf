"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from posledger.application.dto import ProductSpec
from posledger.domain.exceptions import ValidationError
from posledger.domain.model.product import Product
from posledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> Product:
        """Add a new product to the catalog.

        The caller chooses the id; it must not already be in use.
        """
        product = Product.create(
            id=spec.id,
            name=spec.name,
            cost=spec.cost,
            price=spec.price,
            inventory=spec.inventory,
            category=spec.category,
            description=spec.description,
            image=spec.image,
            barcode=spec.barcode,
        )

        if self._product_repo.get_by_id(product.id) is not None:
            raise ValidationError(f"Product with ID '{product.id}' already exists")
        ensure_barcode_free(self._product_repo, product)

        self._product_repo.add(product)
        logger.info("Product %s '%s' added", product.id, product.name)
        return product


def ensure_barcode_free(product_repo: ProductRepository, product: Product) -> None:
    """Barcodes identify a product at the till, so they must be unique."""
    if product.barcode is None:
        return
    owner = product_repo.get_by_barcode(product.barcode)
    if owner is not None and owner.id != product.id:
        raise ValidationError(
            f"Barcode '{product.barcode}' is already used by product '{owner.name}'"
        )
