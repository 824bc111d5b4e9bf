"""Abstract repository for the append-only sales ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from posledger.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale in the order it was recorded."""

    @abstractmethod
    def append(self, sale: Sale) -> None:
        """Add a sale to the end of the ledger.

        Raises ValidationError when a sale with the same id is already
        recorded; the check and the write are one critical section.
        """

    @abstractmethod
    def replace_all(self, sales: list[Sale]) -> None:
        """Overwrite the whole ledger (snapshot import)."""

    def get_by_id(self, sale_id: str) -> Sale | None:
        for sale in self.list_all():
            if sale.id == sale_id:
                return sale
        return None

    def ids(self) -> set[str]:
        return {sale.id for sale in self.list_all()}
