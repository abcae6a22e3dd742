"""CLI commands for the dashboard view."""

from __future__ import annotations

from datetime import datetime

import click

from bizpulse.application.show_dashboard import ShowDashboardHandler
from bizpulse.domain.exceptions import DomainException
from bizpulse.infrastructure.cli.context import get_container, get_state
from bizpulse.infrastructure.cli.product_commands import display_products


@click.command("show")
@click.option(
    "--date", "end_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Last day of the series (YYYY-MM-DD). Defaults to today.",
)
@click.option(
    "--days", type=click.IntRange(min=1), default=None,
    help="Length of the daily series (at least 1).",
)
@click.pass_context
def dashboard_show(ctx: click.Context, end_date: datetime | None, days: int | None) -> None:
    """Show revenue, costs, profit and the daily series."""
    settings = get_container(ctx).settings
    handler = ShowDashboardHandler(get_state(ctx))

    try:
        dto = handler.handle(
            end_date=end_date.date() if end_date else None,
            days=days if days is not None else settings.series_days,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Revenue':<18} {dto.total_revenue:>14}")
    click.echo(f"  {'Cost of goods':<18} {dto.total_cost_of_goods:>14}")
    click.echo(f"  {'Ad spend':<18} {dto.total_ad_spend:>14}")
    click.echo(f"  {'-'*33}")
    click.echo(f"  {'Net profit':<18} {dto.net_profit:>14}")
    click.echo(f"  {'Margin':<18} {dto.margin:>14}")
    click.echo(f"  {'ROAS':<18} {dto.roas:>14}")
    click.echo()

    if dto.low_stock:
        click.echo(f"Low stock alerts: {len(dto.low_stock)}")
        for p in dto.low_stock:
            click.echo(f"  {p.name} ({p.stock} left)")
        click.echo()

    click.echo(f"  {'Day':<8} {'Revenue':>12} {'Ad spend':>12}")
    click.echo(f"  {'-'*34}")
    for bucket in dto.series:
        click.echo(f"  {bucket.label:<8} {bucket.revenue:>12} {bucket.ad_spend:>12}")


@click.command("low-stock")
@click.pass_context
def dashboard_low_stock(ctx: click.Context) -> None:
    """Show products below the low-stock threshold."""
    handler = ShowDashboardHandler(get_state(ctx))

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.low_stock:
        click.echo("All products are sufficiently stocked.")
        return
    display_products(dto.low_stock)
