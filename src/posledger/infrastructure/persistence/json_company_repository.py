"""JSON-collection-backed implementation of CompanyRepository."""

from __future__ import annotations

from posledger.domain.exceptions import SerializationError
from posledger.domain.model.company import CompanyInfo
from posledger.domain.repository.company_repository import CompanyRepository
from posledger.infrastructure.persistence.codec import company_from_raw, company_to_raw
from posledger.infrastructure.persistence.json_collection_store import JsonCollectionStore

COMPANY_INFO = "company_info"


class JsonCompanyRepository(CompanyRepository):

    def __init__(self, store: JsonCollectionStore) -> None:
        self._store = store

    def get(self) -> CompanyInfo:
        with self._store.locked(COMPANY_INFO):
            raw = self._store.get(COMPANY_INFO, {})
            try:
                return company_from_raw(raw)
            except SerializationError as exc:
                self._store.quarantine(COMPANY_INFO, str(exc))
                return CompanyInfo()

    def save(self, info: CompanyInfo) -> None:
        self._store.set(COMPANY_INFO, company_to_raw(info))

    def clear(self) -> None:
        self._store.remove(COMPANY_INFO)
