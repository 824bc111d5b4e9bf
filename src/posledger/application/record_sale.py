"""Application service: Record Sale use case.

The ledger is append-only: a sale is checked once here and never
touched again.
"""

from __future__ import annotations

import logging

from posledger.domain.model.sale import Sale
from posledger.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale: Sale) -> Sale:
        """Audit the sale's totals and append it to the ledger.

        Raises ValidationError if the totals disagree with the items or
        the id is already in the ledger.
        """
        sale.audit()
        self._sale_repo.append(sale)
        logger.info("Sale %s recorded: total %s, profit %s", sale.id, sale.total, sale.profit)
        return sale
