"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in lists and dicts. No file I/O, no side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timedelta, timezone

from posledger.domain.exceptions import StorageError, ValidationError
from posledger.domain.model.company import CompanyInfo
from posledger.domain.model.product import Product
from posledger.domain.model.sale import Sale
from posledger.domain.repository.company_repository import CompanyRepository
from posledger.domain.repository.counter_repository import CounterRepository
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.repository.sale_repository import SaleRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: list[Product] = list(products or [])

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store]

    def get_by_id(self, product_id: str) -> Product | None:
        for p in self._store:
            if p.id == product_id:
                return replace(p)
        return None

    def add(self, product: Product) -> None:
        self._store.append(replace(product))

    def update(self, product: Product) -> bool:
        for i, p in enumerate(self._store):
            if p.id == product.id:
                self._store[i] = replace(product)
                return True
        return False

    def modify(self, product_id: str, fn: Callable[[Product], None]) -> Product | None:
        for i, p in enumerate(self._store):
            if p.id == product_id:
                product = replace(p)
                fn(product)
                self._store[i] = product
                return replace(product)
        return None

    def delete(self, product_id: str) -> bool:
        before = len(self._store)
        self._store = [p for p in self._store if p.id != product_id]
        return len(self._store) != before

    def replace_all(self, products: list[Product]) -> None:
        self._store = [replace(p) for p in products]


class FakeSaleRepository(SaleRepository):

    def __init__(self, sales: list[Sale] | None = None) -> None:
        self._store: list[Sale] = list(sales or [])

    def list_all(self) -> list[Sale]:
        return list(self._store)

    def append(self, sale: Sale) -> None:
        if any(s.id == sale.id for s in self._store):
            raise ValidationError(f"Sale '{sale.id}' is already recorded")
        self._store.append(sale)

    def replace_all(self, sales: list[Sale]) -> None:
        self._store = list(sales)


class FakeCounterRepository(CounterRepository):

    def __init__(self, counters: dict[str, int] | None = None, fail: bool = False) -> None:
        self._store: dict[str, int] = dict(counters or {})
        self.fail = fail

    def increment(self, day_key: str) -> int:
        if self.fail:
            raise StorageError("disk full")
        self._store[day_key] = self._store.get(day_key, 0) + 1
        return self._store[day_key]

    def load(self) -> dict[str, int]:
        return dict(self._store)

    def reset(self) -> None:
        self._store.clear()


class FakeCompanyRepository(CompanyRepository):

    def __init__(self, info: CompanyInfo | None = None) -> None:
        self._info = info

    def get(self) -> CompanyInfo:
        return replace(self._info) if self._info is not None else CompanyInfo()

    def save(self, info: CompanyInfo) -> None:
        self._info = replace(info)

    def clear(self) -> None:
        self._info = None


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2024, 3, 7, 10, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)
