"""Application service: Generate Report use case (query)."""

from __future__ import annotations

from datetime import date

from posledger.domain.model.report import DateRange, SalesReport
from posledger.domain.repository.sale_repository import SaleRepository
from posledger.domain.service.report_aggregator import ReportAggregator


class GenerateReportHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, start: date | None = None, end: date | None = None) -> SalesReport | None:
        """Summarise sales between *start* and *end* inclusive.

        Returns None when the range holds no sales.
        """
        return ReportAggregator(self._sale_repo).report(DateRange(start, end))
