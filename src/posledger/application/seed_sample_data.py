"""Application service: Seed Sample Data use case.

Fills an empty catalog with a handful of café products so a fresh
install has something to sell.  A catalog that already has products is
left alone.
"""

from __future__ import annotations

import logging

from posledger.domain.model.product import Product
from posledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    ("1", "Coffee", "0.50", "2.50", "Beverages", "Premium coffee blend", 50),
    ("2", "Sandwich", "2.00", "6.99", "Food", "Fresh sandwich with premium ingredients", 25),
    ("3", "Tea", "0.30", "2.00", "Beverages", "Organic tea selection", 75),
    ("4", "Pastry", "1.50", "4.50", "Food", "Freshly baked pastry", 15),
    ("5", "Juice", "1.00", "3.50", "Beverages", "Fresh fruit juice", 30),
]


class SeedSampleDataHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Return the products added (empty when the catalog was not empty)."""
        if self._product_repo.list_all():
            return []

        products = [
            Product.create(
                id=pid,
                name=name,
                cost=cost,
                price=price,
                inventory=inventory,
                category=category,
                description=description,
            )
            for pid, name, cost, price, category, description, inventory in SAMPLE_PRODUCTS
        ]
        self._product_repo.replace_all(products)
        logger.info("Seeded %d sample products", len(products))
        return products
