"""Abstract repository for the single CompanyInfo record."""

from __future__ import annotations

from abc import ABC, abstractmethod

from posledger.domain.model.company import CompanyInfo


class CompanyRepository(ABC):

    @abstractmethod
    def get(self) -> CompanyInfo:
        """Return the stored company info, or defaults when none is stored."""

    @abstractmethod
    def save(self, info: CompanyInfo) -> None:
        """Persist the company info."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored record; ``get`` then returns defaults."""
