"""Application service: Audit Ledger use case (query)."""

from __future__ import annotations

from posledger.domain.repository.sale_repository import SaleRepository


class AuditLedgerHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self) -> list[str]:
        """Return ids of sales whose stored total or profit disagree with their items."""
        return [sale.id for sale in self._sale_repo.list_all() if not sale.is_consistent]
