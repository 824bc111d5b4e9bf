"""Application service: Clear Data use case."""

from __future__ import annotations

import logging

from posledger.domain.repository.company_repository import CompanyRepository
from posledger.domain.repository.counter_repository import CounterRepository
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class ClearDataHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        counter_repo: CounterRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._counter_repo = counter_repo
        self._company_repo = company_repo

    def handle(self) -> None:
        """Drop the catalog, ledger, order counters and company info."""
        self._product_repo.replace_all([])
        self._sale_repo.replace_all([])
        self._counter_repo.reset()
        self._company_repo.clear()
        logger.info("All ledger data cleared")
