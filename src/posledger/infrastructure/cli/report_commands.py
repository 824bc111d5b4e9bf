"""CLI commands for sales reports."""

from __future__ import annotations

from datetime import datetime

import click

from posledger.application.generate_report import GenerateReportHandler
from posledger.domain.exceptions import DomainException
from posledger.infrastructure.bootstrap import sale_repository


@click.command("show")
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Last day (YYYY-MM-DD).")
def report_show(start: datetime | None, end: datetime | None) -> None:
    """Summarise sales, best sellers and daily totals."""
    handler = GenerateReportHandler(sale_repo=sale_repository())

    try:
        report = handler.handle(
            start.date() if start else None,
            end.date() if end else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if report is None:
        click.echo("No sales in this period.")
        return

    click.echo(f"Total sales:        {report.total_sales}")
    click.echo(f"Total profit:       {report.total_profit}")
    click.echo(f"Transactions:       {report.total_transactions}")
    click.echo(f"Average sale value: {report.average_transaction_value}")
    click.echo()

    click.echo("Best sellers")
    for rank, best in enumerate(report.best_selling_products, start=1):
        click.echo(f"  {rank}. {best.product.name:<20} {best.quantity:>6} sold")
    click.echo()

    click.echo(f"  {'Date':<12} {'Sales':>12} {'Profit':>12}")
    for day in report.sales_by_date:
        click.echo(f"  {day.date:<12} {str(day.sales):>12} {str(day.profit):>12}")
