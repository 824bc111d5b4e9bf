"""Application service: Export Snapshot use case."""

from __future__ import annotations

from posledger.domain.model.clock import Clock, local_now
from posledger.domain.model.snapshot import Snapshot
from posledger.domain.repository.company_repository import CompanyRepository
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.repository.sale_repository import SaleRepository


class ExportSnapshotHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        company_repo: CompanyRepository,
        clock: Clock = local_now,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._company_repo = company_repo
        self._clock = clock

    def handle(self) -> Snapshot:
        return Snapshot(
            products=self._product_repo.list_all(),
            sales=self._sale_repo.list_all(),
            company=self._company_repo.get(),
            export_date=self._clock(),
        )
