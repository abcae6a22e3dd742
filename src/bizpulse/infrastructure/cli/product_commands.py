"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from bizpulse.application.add_product import AddProductHandler
from bizpulse.application.adjust_stock import AdjustStockHandler
from bizpulse.application.dto import ProductLineDTO
from bizpulse.application.remove_product import RemoveProductHandler
from bizpulse.application.show_inventory import ShowInventoryHandler
from bizpulse.domain.exceptions import DomainException
from bizpulse.domain.model.product import DEFAULT_CATEGORY
from bizpulse.infrastructure.cli.context import get_container


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--cost", required=True, help="Unit cost (e.g. 12.50).")
@click.option("--price", required=True, help="Unit sale price (e.g. 29.99).")
@click.option("--stock", required=True, type=int, help="Initial units on hand.")
@click.option("--category", default=DEFAULT_CATEGORY, show_default=True, help="Category label.")
@click.pass_context
def product_add(
    ctx: click.Context, name: str, cost: str, price: str, stock: int, category: str
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(get_container(ctx).store.products)

    try:
        product = handler.handle(
            name=name, cost=cost, price=price, stock=stock, category=category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added: "
        f"cost {product.cost}, price {product.price}, stock {product.stock}"
    )


def display_products(lines: list[ProductLineDTO]) -> None:
    """Shared formatting for product tables."""
    click.echo(
        f"{'ID':<34} {'Name':<24} {'Category':<12} {'Cost':>10} {'Price':>10} {'Stock':>6}"
    )
    click.echo("-" * 101)
    for p in lines:
        flag = "  LOW" if p.low_stock else ""
        click.echo(
            f"{p.id:<34} {p.name:<24} {p.category:<12} {p.cost:>10} {p.price:>10} {p.stock:>6}{flag}"
        )


@click.command("list")
@click.option("--low-stock", is_flag=True, default=False, help="Only products running low.")
@click.pass_context
def product_list(ctx: click.Context, low_stock: bool) -> None:
    """List products in the catalog."""
    container = get_container(ctx)
    handler = ShowInventoryHandler(
        container.store.products, container.settings.low_stock_threshold
    )

    try:
        lines = handler.handle(low_stock_only=low_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return
    display_products(lines)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_remove(ctx: click.Context, product_id: str) -> None:
    """Remove a product. Its past sales stay on the books."""
    handler = RemoveProductHandler(get_container(ctx).store.products)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} '{product.name}' removed.")


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--stock", required=True, type=int, help="New units-on-hand count.")
@click.pass_context
def product_restock(ctx: click.Context, product_id: str, stock: int) -> None:
    """Set the stock count for a product."""
    handler = AdjustStockHandler(get_container(ctx).store.products)

    try:
        handler.handle(product_id=product_id, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for product {product_id} set to {stock}")
