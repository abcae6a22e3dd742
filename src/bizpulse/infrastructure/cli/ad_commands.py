"""CLI commands for the ad-spend ledger."""

from __future__ import annotations

from datetime import datetime

import click

from bizpulse.application.record_ad_spend import RecordAdSpendHandler
from bizpulse.application.show_ledgers import ListAdsHandler
from bizpulse.domain.exceptions import DomainException
from bizpulse.domain.model.ad_spend import DEFAULT_PLATFORM
from bizpulse.infrastructure.cli.context import get_container


@click.command("record")
@click.option("--amount", required=True, help="Amount spent (e.g. 50.00).")
@click.option("--platform", default=DEFAULT_PLATFORM, show_default=True, help="Ad network.")
@click.option("--reach", default=0, type=int, show_default=True, help="Estimated audience.")
@click.option(
    "--date", "spend_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
    help="Spend date (YYYY-MM-DD). Defaults to today.",
)
@click.pass_context
def ad_record(
    ctx: click.Context, amount: str, platform: str, reach: int, spend_date: datetime | None
) -> None:
    """Log ad spend for a campaign."""
    handler = RecordAdSpendHandler(get_container(ctx).store.ads)

    try:
        ad = handler.handle(
            amount=amount,
            platform=platform,
            reach=reach,
            spend_date=spend_date.date() if spend_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ad spend {ad.id} recorded: {ad.amount} on {ad.platform}")


@click.command("list")
@click.pass_context
def ad_list(ctx: click.Context) -> None:
    """List ad spend in the order it was recorded."""
    handler = ListAdsHandler(get_container(ctx).store.ads)

    try:
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No ad spend recorded.")
        return

    click.echo(f"{len(lines)} campaigns")
    click.echo(f"{'Date':<12} {'Platform':<16} {'Amount':>12} {'Reach':>10}")
    click.echo("-" * 53)
    for a in lines:
        click.echo(f"{a.date:<12} {a.platform:<16} {a.amount:>12} {a.reach:>10}")
