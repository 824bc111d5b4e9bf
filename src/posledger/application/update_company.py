"""Application service: Update Company Info use case."""

from __future__ import annotations

from dataclasses import fields, replace

from posledger.domain.exceptions import ValidationError
from posledger.domain.model.company import CompanyInfo
from posledger.domain.repository.company_repository import CompanyRepository

_FIELDS = {f.name for f in fields(CompanyInfo)}


class UpdateCompanyHandler:

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def handle(self, **changes: str | None) -> CompanyInfo:
        """Apply the given field changes; ``None`` values are ignored."""
        unknown = set(changes) - _FIELDS
        if unknown:
            raise ValidationError(f"Unknown company field(s): {', '.join(sorted(unknown))}")

        updates = {k: v for k, v in changes.items() if v is not None}
        info = replace(self._company_repo.get(), **updates)
        self._company_repo.save(info)
        return info
