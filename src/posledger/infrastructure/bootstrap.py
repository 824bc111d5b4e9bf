"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

One JsonCollectionStore is kept per data directory so that every
repository in the process shares its per-collection locks.
"""

from __future__ import annotations

from pathlib import Path

from posledger.infrastructure.config import get_settings
from posledger.infrastructure.persistence.json_collection_store import (
    JsonCollectionStore,
)
from posledger.infrastructure.persistence.json_company_repository import (
    JsonCompanyRepository,
)
from posledger.infrastructure.persistence.json_counter_repository import (
    JsonCounterRepository,
)
from posledger.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from posledger.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)

_stores: dict[Path, JsonCollectionStore] = {}
_data_dir_override: Path | None = None


def use_data_dir(path: Path | None) -> None:
    """Point the repositories at *path* instead of the configured directory."""
    global _data_dir_override
    _data_dir_override = Path(path) if path is not None else None


def data_dir() -> Path:
    return (_data_dir_override or get_settings().data_dir).resolve()


def collection_store() -> JsonCollectionStore:
    root = data_dir()
    store = _stores.get(root)
    if store is None:
        store = _stores[root] = JsonCollectionStore(root)
    return store


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(collection_store())


def sale_repository() -> JsonSaleRepository:
    return JsonSaleRepository(collection_store())


def counter_repository() -> JsonCounterRepository:
    return JsonCounterRepository(collection_store())


def company_repository() -> JsonCompanyRepository:
    return JsonCompanyRepository(collection_store())
