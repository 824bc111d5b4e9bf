"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from posledger.application.add_product import AddProductHandler
from posledger.application.delete_product import DeleteProductHandler
from posledger.application.dto import ProductSpec
from posledger.application.update_product import UpdateProductHandler
from posledger.domain.exceptions import DomainException, NotFoundError
from posledger.domain.model.product import Product
from posledger.infrastructure.bootstrap import product_repository


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Name':<20} {'Category':<12} {'Cost':>9} {'Price':>9} {'Stock':>6}")
    click.echo("-" * 75)
    for p in products:
        click.echo(
            f"{p.id:<14} {p.name:<20} {(p.category or ''):<12} "
            f"{str(p.cost):>9} {str(p.price):>9} {p.inventory:>6}"
        )


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (must be unique).")
@click.option("--name", required=True, help="Product name.")
@click.option("--cost", required=True, help="Unit cost (e.g. 0.50).")
@click.option("--price", required=True, help="Unit price (e.g. 2.50).")
@click.option("--inventory", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--category", default=None, help="Category.")
@click.option("--description", default=None, help="Description.")
@click.option("--image", default=None, help="Image reference (URL or data URI).")
@click.option("--barcode", default=None, help="Barcode.")
def product_add(
    product_id: str,
    name: str,
    cost: str,
    price: str,
    inventory: int,
    category: str | None,
    description: str | None,
    image: str | None,
    barcode: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(ProductSpec(
            id=product_id,
            name=name,
            cost=cost,
            price=price,
            inventory=inventory,
            category=category,
            description=description,
            image=image,
            barcode=barcode,
        ))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    _print_products(product_repository().list_all())


@click.command("categories")
def product_categories() -> None:
    """List the distinct product categories."""
    for category in product_repository().categories():
        click.echo(category)


@click.command("search")
@click.argument("term")
def product_search(term: str) -> None:
    """Find products by name or category."""
    _print_products(product_repository().search(term))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--cost", default=None, help="New unit cost.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--inventory", default=None, type=int, help="New stock level.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.option("--image", default=None, help="New image reference.")
@click.option("--barcode", default=None, help="New barcode.")
def product_update(
    product_id: str,
    name: str | None,
    cost: str | None,
    price: str | None,
    inventory: int | None,
    category: str | None,
    description: str | None,
    image: str | None,
    barcode: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""
    repo = product_repository()
    handler = UpdateProductHandler(product_repo=repo)

    try:
        current = repo.get_by_id(product_id)
        if current is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        product = handler.handle(ProductSpec(
            id=product_id,
            name=name if name is not None else current.name,
            cost=cost if cost is not None else current.cost.amount,
            price=price if price is not None else current.price.amount,
            inventory=inventory if inventory is not None else current.inventory,
            category=category if category is not None else current.category,
            description=description if description is not None else current.description,
            image=image if image is not None else current.image,
            barcode=barcode if barcode is not None else current.barcode,
        ))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog. Recorded sales are unaffected."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
