"""CLI commands for backup, restore and housekeeping."""

from __future__ import annotations

from pathlib import Path

import click

from posledger.application.clear_data import ClearDataHandler
from posledger.application.export_snapshot import ExportSnapshotHandler
from posledger.application.import_snapshot import ImportSnapshotHandler
from posledger.application.seed_sample_data import SeedSampleDataHandler
from posledger.domain.exceptions import DomainException
from posledger.infrastructure.bootstrap import (
    company_repository,
    counter_repository,
    product_repository,
    sale_repository,
)
from posledger.infrastructure.persistence.snapshot import dumps_snapshot, loads_snapshot


@click.command("export")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="File to write; prints to stdout when omitted.",
)
def data_export(output: Path | None) -> None:
    """Export catalog, ledger and company info as one JSON backup."""
    handler = ExportSnapshotHandler(
        product_repo=product_repository(),
        sale_repo=sale_repository(),
        company_repo=company_repository(),
    )
    snapshot = handler.handle()
    text = dumps_snapshot(snapshot)

    if output is None:
        click.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    click.echo(
        f"Exported {len(snapshot.products)} product(s) and {len(snapshot.sales)} sale(s) to {output}"
    )


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def data_import(source: Path) -> None:
    """Replace all data with the contents of a JSON backup."""
    try:
        snapshot = loads_snapshot(source.read_text(encoding="utf-8"))
        ImportSnapshotHandler(
            product_repo=product_repository(),
            sale_repo=sale_repository(),
            company_repo=company_repository(),
        ).handle(snapshot)
    except (DomainException, UnicodeDecodeError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Imported {len(snapshot.products)} product(s) and {len(snapshot.sales)} sale(s)")


@click.command("clear")
@click.confirmation_option(prompt="Clear all data? This cannot be undone.")
def data_clear() -> None:
    """Delete the catalog, ledger, order counters and company info."""
    ClearDataHandler(
        product_repo=product_repository(),
        sale_repo=sale_repository(),
        counter_repo=counter_repository(),
        company_repo=company_repository(),
    ).handle()
    click.echo("All data cleared.")


@click.command("seed")
def data_seed() -> None:
    """Add sample products to an empty catalog."""
    added = SeedSampleDataHandler(product_repo=product_repository()).handle()
    if not added:
        click.echo("Catalog is not empty; nothing seeded.")
        return
    click.echo(f"Seeded {len(added)} sample product(s).")
