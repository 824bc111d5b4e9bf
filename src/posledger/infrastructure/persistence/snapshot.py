"""Snapshot document: the single-file backup of the whole ledger.

::

    {
      "products": [...],
      "sales": [...],
      "company": {...},
      "exportDate": "2024-03-07T10:15:00+01:00",
      "version": "1.0"
    }

``parse_snapshot`` decodes every record before returning, so a caller
that only writes after a successful parse never leaves half an import
behind.
"""

from __future__ import annotations

import json
from typing import Any

from posledger.domain.exceptions import ImportShapeError, SerializationError
from posledger.domain.model.clock import local_now
from posledger.domain.model.company import CompanyInfo
from posledger.domain.model.snapshot import Snapshot
from posledger.infrastructure.persistence.codec import (
    company_from_raw,
    company_to_raw,
    format_timestamp,
    parse_timestamp,
    product_from_raw,
    product_to_raw,
    sale_from_raw,
    sale_to_raw,
)

SNAPSHOT_VERSION = "1.0"


def build_snapshot(snapshot: Snapshot) -> dict:
    """Encode a snapshot as a JSON-ready document."""
    return {
        "products": [product_to_raw(p) for p in snapshot.products],
        "sales": [sale_to_raw(s) for s in snapshot.sales],
        "company": company_to_raw(snapshot.company or CompanyInfo()),
        "exportDate": format_timestamp(snapshot.export_date or local_now()),
        "version": SNAPSHOT_VERSION,
    }


def parse_snapshot(document: Any) -> Snapshot:
    """Validate and decode a snapshot document.

    Raises ImportShapeError for anything that is not a complete,
    decodable snapshot, including a sale whose stored total or profit
    disagrees with its items at cent precision.
    """
    if not isinstance(document, dict):
        raise ImportShapeError("Backup must be a JSON object")

    for key in ("products", "sales"):
        if key not in document:
            raise ImportShapeError(f"Backup is missing '{key}'")
        if not isinstance(document[key], list):
            raise ImportShapeError(f"Backup '{key}' must be a list")

    version = document.get("version")
    if version is not None and str(version).split(".")[0] != SNAPSHOT_VERSION.split(".")[0]:
        raise ImportShapeError(f"Unsupported backup version {version!r}")

    try:
        products = [product_from_raw(raw) for raw in document["products"]]
        sales = [sale_from_raw(raw) for raw in document["sales"]]
        raw_company = document.get("company")
        company = company_from_raw(raw_company) if raw_company is not None else None
        raw_date = document.get("exportDate")
        export_date = parse_timestamp(raw_date) if raw_date else None
    except SerializationError as exc:
        raise ImportShapeError(f"Backup contains an invalid record: {exc}") from exc

    _assert_unique("product", [p.id for p in products])
    _assert_unique("sale", [s.id for s in sales])

    inconsistent = [s.id for s in sales if not s.is_consistent]
    if inconsistent:
        raise ImportShapeError(
            "Backup contains sale(s) whose totals do not match their items: "
            + ", ".join(inconsistent)
        )

    return Snapshot(
        products=products, sales=sales, company=company, export_date=export_date
    )


def _assert_unique(kind: str, ids: list[str]) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ImportShapeError(f"Backup contains duplicate {kind} id '{item_id}'")
        seen.add(item_id)


def dumps_snapshot(snapshot: Snapshot) -> str:
    return json.dumps(build_snapshot(snapshot), indent=2) + "\n"


def loads_snapshot(text: str) -> Snapshot:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportShapeError(f"Backup is not valid JSON: {exc}") from exc
    return parse_snapshot(document)
