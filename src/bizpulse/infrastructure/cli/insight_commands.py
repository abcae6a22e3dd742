"""CLI command for the AI business-coach report."""

from __future__ import annotations

import click

from bizpulse.application.generate_insight import GenerateInsightHandler
from bizpulse.infrastructure.cli.context import get_container, get_state


@click.command("generate")
@click.pass_context
def insight_generate(ctx: click.Context) -> None:
    """Ask the strategist for a report on the current data."""
    state = get_state(ctx)
    handler = GenerateInsightHandler(get_container(ctx).insight_provider)

    click.echo(handler.handle(state.snapshot()))
