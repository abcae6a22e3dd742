"""CLI commands for the sales ledger."""

from __future__ import annotations

from datetime import datetime

import click

from bizpulse.application.record_sale import RecordSaleHandler
from bizpulse.application.show_ledgers import ListSalesHandler
from bizpulse.domain.exceptions import DomainException
from bizpulse.infrastructure.cli.context import get_container


@click.command("record")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@click.option(
    "--date", "sale_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Sale date (YYYY-MM-DD). Defaults to today.",
)
@click.pass_context
def sale_record(
    ctx: click.Context, product_id: str, quantity: int, sale_date: datetime | None
) -> None:
    """Record a sale and take the units out of stock."""
    store = get_container(ctx).store
    handler = RecordSaleHandler(store.products, store.sales)

    try:
        sale = handler.handle(
            product_id=product_id,
            quantity=quantity,
            sale_date=sale_date.date() if sale_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Sale {sale.id} recorded: {sale.quantity} x {product_id} "
        f"on {sale.date.isoformat()} for {sale.revenue}"
    )


@click.command("list")
@click.pass_context
def sale_list(ctx: click.Context) -> None:
    """List sales, newest first."""
    store = get_container(ctx).store
    handler = ListSalesHandler(store.sales, store.products)

    try:
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No sales recorded.")
        return

    click.echo(f"{len(lines)} transactions")
    click.echo(f"{'Date':<12} {'Product':<24} {'Qty':>5} {'Revenue':>12}")
    click.echo("-" * 56)
    for s in lines:
        click.echo(f"{s.date:<12} {s.product_name:<24} {s.quantity:>5} {s.revenue:>12}")
