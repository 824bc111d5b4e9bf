"""Snapshot: the full catalog, ledger and company state in one value."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from posledger.domain.model.company import CompanyInfo
from posledger.domain.model.product import Product
from posledger.domain.model.sale import Sale


@dataclass(frozen=True)
class Snapshot:
    products: list[Product]
    sales: list[Sale]
    company: CompanyInfo | None = None
    export_date: datetime | None = None
