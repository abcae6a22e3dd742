from __future__ import annotations

from pathlib import Path

import click

from bizpulse.infrastructure.cli.ad_commands import ad_list, ad_record
from bizpulse.infrastructure.cli.dashboard_commands import dashboard_low_stock, dashboard_show
from bizpulse.infrastructure.cli.insight_commands import insight_generate
from bizpulse.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_restock,
)
from bizpulse.infrastructure.cli.sale_commands import sale_list, sale_record
from bizpulse.infrastructure.config import Settings
from bizpulse.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Verbose logging.")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Load settings from this .env file.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, env_file: Path | None) -> None:
    """BizPulse: small-business sales, stock and ad-spend dashboard"""
    obj = ctx.ensure_object(dict)
    if "settings" not in obj:
        try:
            obj["settings"] = Settings.from_env(env_file)
        except ValueError as exc:
            raise click.ClickException(str(exc))
    setup_logging(obj["settings"].log_level, debug=debug)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def sale() -> None:
    """Record and list sales."""


@cli.group()
def ad() -> None:
    """Record and list ad spend."""


@cli.group()
def dashboard() -> None:
    """Show derived metrics."""


@cli.group()
def insight() -> None:
    """AI business-coach report."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_restock)
sale.add_command(sale_record)
sale.add_command(sale_list)
ad.add_command(ad_record)
ad.add_command(ad_list)
dashboard.add_command(dashboard_show)
dashboard.add_command(dashboard_low_stock)
insight.add_command(insight_generate)
