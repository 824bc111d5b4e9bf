"""CLI commands for company information."""

from __future__ import annotations

from dataclasses import asdict

import click

from posledger.application.update_company import UpdateCompanyHandler
from posledger.domain.exceptions import DomainException
from posledger.infrastructure.bootstrap import company_repository


@click.command("show")
def company_show() -> None:
    """Show the company details printed on receipts."""
    info = company_repository().get()
    for key, value in asdict(info).items():
        click.echo(f"{key:<15} {value if value is not None else ''}")


@click.command("set")
@click.option("--name", default=None)
@click.option("--address", default=None)
@click.option("--telephone", default=None)
@click.option("--email", default=None)
@click.option("--logo", default=None, help="Logo reference (URL or data URI).")
@click.option("--facebook", default=None)
@click.option("--instagram", default=None)
@click.option("--tiktok", default=None)
@click.option("--thanks-message", default=None, help="Closing line on receipts.")
def company_set(**changes: str | None) -> None:
    """Update company details. Options left out keep their current value."""
    try:
        UpdateCompanyHandler(company_repository()).handle(**changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Company information updated.")
