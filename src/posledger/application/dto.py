"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from posledger.domain.model.company import CompanyInfo


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product form as submitted by the user."""

    id: str
    name: str
    cost: str | int | float | Decimal
    price: str | int | float | Decimal
    inventory: int = 0
    category: str | None = None
    description: str | None = None
    image: str | None = None
    barcode: str | None = None


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product reference (id or barcode) and a quantity."""

    product_ref: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    name: str
    quantity: int
    price: str  # formatted, e.g. "$2.50"
    total: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the flattened receipt handed to the printing collaborator."""

    order_number: str
    items: list[ReceiptLineDTO]
    total: str
    timestamp: str
    payment_method: str
    company: CompanyInfo


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    inventory: int
    value: str
    low_stock: bool


@dataclass(frozen=True)
class InventorySummaryDTO:
    lines: list[InventoryLineDTO]
    total_value: str
    total_units: int
    low_stock_count: int
    low_stock_threshold: int
