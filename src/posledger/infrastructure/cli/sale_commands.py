"""CLI commands for checkout and the sales ledger."""

from __future__ import annotations

from datetime import datetime

import click

from posledger.application.audit_ledger import AuditLedgerHandler
from posledger.application.checkout import CheckoutHandler
from posledger.application.dto import CartItemSpec, ReceiptDTO
from posledger.domain.exceptions import DomainException
from posledger.domain.model.report import DateRange
from posledger.domain.service.report_aggregator import ReportAggregator
from posledger.infrastructure.bootstrap import (
    company_repository,
    counter_repository,
    product_repository,
    sale_repository,
)
from posledger.infrastructure.config import get_settings


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'ID:3,BARCODE:5' into CartItemSpec list; a bare ref means 1."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" in pair:
            ref, qty_str = pair.rsplit(":", 1)
            try:
                qty = int(qty_str)
            except ValueError:
                raise click.BadParameter(
                    f"Invalid quantity '{qty_str}' for product '{ref}'."
                )
        else:
            ref, qty = pair, 1
        specs.append(CartItemSpec(product_ref=ref.strip(), quantity=qty))
    if not specs:
        raise click.BadParameter("At least one item is required.")
    return specs


def _display_receipt(receipt: ReceiptDTO) -> None:
    if receipt.company.name:
        click.echo(receipt.company.name)
    click.echo(f"Order {receipt.order_number}  ({receipt.payment_method})")
    click.echo(f"Date:  {receipt.timestamp}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in receipt.items:
        click.echo(f"  {item.name:<20} {item.quantity:>5} {item.price:>10} {item.total:>10}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total':<27} {receipt.total:>20}")
    if receipt.company.thanks_message:
        click.echo()
        click.echo(receipt.company.thanks_message)


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'ID:Qty,BARCODE:Qty'.")
@click.option(
    "--payment",
    type=click.Choice(["cash", "card", "other"]),
    default="cash",
    show_default=True,
    help="Payment method.",
)
def sale_checkout(items: str, payment: str) -> None:
    """Sell the given items and print the receipt."""
    specs = _parse_items(items)

    handler = CheckoutHandler(
        product_repo=product_repository(),
        sale_repo=sale_repository(),
        counter_repo=counter_repository(),
        company_repo=company_repository(),
        decrement_inventory=get_settings().decrement_inventory_on_checkout,
    )

    try:
        cart = handler.build_cart(specs)
        receipt = handler.handle(cart, payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(receipt)


@click.command("list")
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Last day (YYYY-MM-DD).")
def sale_list(start: datetime | None, end: datetime | None) -> None:
    """List recorded sales, optionally within a date range."""
    try:
        date_range = DateRange(
            start.date() if start else None,
            end.date() if end else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    sales = ReportAggregator(sale_repository()).sales_in_range(date_range)
    if not sales:
        click.echo("No sales found.")
        return

    click.echo(f"{'Order':<22} {'Date':<17} {'Items':>6} {'Total':>11} {'Profit':>11} {'Paid':<6}")
    click.echo("-" * 78)
    for sale in sales:
        click.echo(
            f"{sale.id:<22} {sale.timestamp.strftime('%Y-%m-%d %H:%M'):<17} "
            f"{sale.item_count:>6} {str(sale.total):>11} {str(sale.profit):>11} "
            f"{sale.payment_method.value:<6}"
        )


@click.command("audit")
def sale_audit() -> None:
    """Check every sale's stored totals against its items."""
    mismatched = AuditLedgerHandler(sale_repository()).handle()
    if not mismatched:
        click.echo("Ledger is consistent.")
        return
    for sale_id in mismatched:
        click.echo(f"Totals mismatch: {sale_id}")
    raise click.ClickException(f"{len(mismatched)} sale(s) failed the audit")
