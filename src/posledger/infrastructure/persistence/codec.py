"""Record-level serialization shared by the repositories and snapshots.

Field names are camelCase so that backups written by the original
browser till import unchanged.  Money is written as a decimal string and
read from either a string or a JSON number.  Every ``*_from_raw``
function raises SerializationError for a record it cannot decode.
"""

from __future__ import annotations

import functools
from datetime import datetime
from typing import Any

from posledger.domain.exceptions import DomainException, SerializationError
from posledger.domain.model.clock import local_now
from posledger.domain.model.company import DEFAULT_THANKS_MESSAGE, CompanyInfo
from posledger.domain.model.product import Product, ProductSnapshot
from posledger.domain.model.sale import PaymentMethod, Sale, SaleLineItem
from posledger.domain.model.value_objects import Money, Quantity


# --- Scalars -------------------------------------------------------------------


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string; naive values are taken as local time."""
    if not isinstance(value, str):
        raise SerializationError(f"Expected an ISO-8601 string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise SerializationError(f"Invalid timestamp {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def _money_to_raw(money: Money) -> str:
    return str(money.amount)


def _money_from_raw(value: Any) -> Money:
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise SerializationError(f"Invalid money amount {value!r}")
    return Money.of(value)


def _optional_str(raw: dict, key: str) -> str | None:
    value = raw.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _decoding(kind: str):
    """Decorator turning any decode failure into SerializationError."""

    def wrap(fn):
        @functools.wraps(fn)
        def inner(raw):
            if not isinstance(raw, dict):
                raise SerializationError(f"{kind} record must be an object, got {type(raw).__name__}")
            try:
                return fn(raw)
            except SerializationError:
                raise
            except (KeyError, TypeError, ValueError, DomainException) as exc:
                raise SerializationError(f"Invalid {kind} record: {exc!r}") from exc

        return inner

    return wrap


# --- Product -------------------------------------------------------------------


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "cost": _money_to_raw(product.cost),
        "price": _money_to_raw(product.price),
        "inventory": product.inventory,
        "category": product.category,
        "description": product.description,
        "image": product.image,
        "barcode": product.barcode,
        "createdAt": format_timestamp(product.created_at),
        "updatedAt": format_timestamp(product.updated_at),
    }


@_decoding("product")
def product_from_raw(raw: dict) -> Product:
    inventory = raw.get("inventory", 0)
    if isinstance(inventory, bool) or not isinstance(inventory, int) or inventory < 0:
        raise SerializationError(f"Invalid inventory {inventory!r}")
    now = local_now()
    return Product(
        id=str(raw["id"]),
        name=str(raw["name"]),
        cost=_money_from_raw(raw["cost"]),
        price=_money_from_raw(raw["price"]),
        inventory=inventory,
        category=_optional_str(raw, "category"),
        description=_optional_str(raw, "description"),
        image=_optional_str(raw, "image"),
        barcode=_optional_str(raw, "barcode"),
        created_at=parse_timestamp(raw["createdAt"]) if raw.get("createdAt") else now,
        updated_at=parse_timestamp(raw["updatedAt"]) if raw.get("updatedAt") else now,
    )


# --- Sale ----------------------------------------------------------------------


def _snapshot_to_raw(snapshot: ProductSnapshot) -> dict:
    return {
        "id": snapshot.id,
        "name": snapshot.name,
        "cost": _money_to_raw(snapshot.cost),
        "price": _money_to_raw(snapshot.price),
        "category": snapshot.category,
        "description": snapshot.description,
        "barcode": snapshot.barcode,
    }


def _snapshot_from_raw(raw: dict) -> ProductSnapshot:
    if not isinstance(raw, dict):
        raise SerializationError("Sale item product must be an object")
    return ProductSnapshot(
        id=str(raw["id"]),
        name=str(raw["name"]),
        cost=_money_from_raw(raw["cost"]),
        price=_money_from_raw(raw["price"]),
        category=_optional_str(raw, "category"),
        description=_optional_str(raw, "description"),
        barcode=_optional_str(raw, "barcode"),
    )


def sale_to_raw(sale: Sale) -> dict:
    return {
        "id": sale.id,
        "items": [
            {
                "product": _snapshot_to_raw(item.product),
                "quantity": item.quantity.value,
            }
            for item in sale.items
        ],
        "total": _money_to_raw(sale.total),
        "profit": _money_to_raw(sale.profit),
        "timestamp": format_timestamp(sale.timestamp),
        "paymentMethod": sale.payment_method.value,
    }


@_decoding("sale")
def sale_from_raw(raw: dict) -> Sale:
    raw_items = raw["items"]
    if not isinstance(raw_items, list):
        raise SerializationError("Sale items must be a list")
    items = tuple(
        SaleLineItem(
            product=_snapshot_from_raw(item["product"]),
            quantity=Quantity(item["quantity"]),
        )
        for item in raw_items
    )
    return Sale(
        id=str(raw["id"]),
        items=items,
        total=_money_from_raw(raw["total"]),
        profit=_money_from_raw(raw["profit"]),
        timestamp=parse_timestamp(raw["timestamp"]),
        payment_method=PaymentMethod.parse(raw.get("paymentMethod")),
    )


# --- Company -------------------------------------------------------------------


def company_to_raw(info: CompanyInfo) -> dict:
    return {
        "name": info.name,
        "address": info.address,
        "telephone": info.telephone,
        "email": info.email,
        "logo": info.logo,
        "facebook": info.facebook,
        "instagram": info.instagram,
        "tiktok": info.tiktok,
        "thanksMessage": info.thanks_message,
    }


@_decoding("company")
def company_from_raw(raw: dict) -> CompanyInfo:
    return CompanyInfo(
        name=str(raw.get("name") or ""),
        address=str(raw.get("address") or ""),
        telephone=str(raw.get("telephone") or ""),
        email=str(raw.get("email") or ""),
        logo=_optional_str(raw, "logo"),
        facebook=str(raw.get("facebook") or ""),
        instagram=str(raw.get("instagram") or ""),
        tiktok=str(raw.get("tiktok") or ""),
        thanks_message=str(raw.get("thanksMessage") or DEFAULT_THANKS_MESSAGE),
    )
