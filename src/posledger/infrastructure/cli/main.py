from __future__ import annotations

from pathlib import Path

import click

from posledger.infrastructure.bootstrap import use_data_dir
from posledger.infrastructure.cli.company_commands import company_set, company_show
from posledger.infrastructure.cli.data_commands import (
    data_clear,
    data_export,
    data_import,
    data_seed,
)
from posledger.infrastructure.cli.inventory_commands import inventory_adjust, inventory_show
from posledger.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_delete,
    product_list,
    product_search,
    product_update,
)
from posledger.infrastructure.cli.report_commands import report_show
from posledger.infrastructure.cli.sale_commands import sale_audit, sale_checkout, sale_list
from posledger.infrastructure.config import get_settings
from posledger.infrastructure.observability import setup_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the ledger files (overrides POSLEDGER_DATA_DIR).",
)
@click.option("--log-level", default=None, help="Logging level (overrides POSLEDGER_LOG_LEVEL).")
def cli(data_dir: Path | None, log_level: str | None) -> None:
    """POS Ledger: catalog, sales ledger and reports"""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)
    use_data_dir(data_dir)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def sale() -> None:
    """Check out and browse the sales ledger."""


@cli.group()
def report() -> None:
    """Sales reports."""


@cli.group()
def data() -> None:
    """Backup, restore and housekeeping."""


@cli.group()
def company() -> None:
    """Company details for receipts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_show)
sale.add_command(sale_audit)
sale.add_command(sale_checkout)
sale.add_command(sale_list)
report.add_command(report_show)
data.add_command(data_clear)
data.add_command(data_export)
data.add_command(data_import)
data.add_command(data_seed)
company.add_command(company_set)
company.add_command(company_show)
