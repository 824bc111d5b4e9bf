"""Application service: Delete Product use case.

Recorded sales keep their own product snapshots, so deleting a product
never changes historical reports.
"""

from __future__ import annotations

import logging

from posledger.domain.exceptions import NotFoundError
from posledger.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("Product %s deleted", product_id)
