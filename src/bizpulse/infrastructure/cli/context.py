"""Per-invocation wiring shared by every command.

The group callback stores Settings on the click context; the container
is built on first use and closed when the command finishes.
"""

from __future__ import annotations

import click

from bizpulse.application.dashboard_state import DashboardState
from bizpulse.domain.exceptions import DomainException
from bizpulse.infrastructure.bootstrap import Container, build_container
from bizpulse.infrastructure.config import Settings


def get_container(ctx: click.Context) -> Container:
    obj = ctx.ensure_object(dict)
    container = obj.get("container")
    if container is None:
        settings: Settings = obj.get("settings") or Settings.from_env()
        try:
            container = build_container(settings)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        obj["container"] = container
        ctx.find_root().call_on_close(container.close)
    return container


def get_state(ctx: click.Context) -> DashboardState:
    container = get_container(ctx)
    try:
        state = DashboardState(
            container.store,
            low_stock_threshold=container.settings.low_stock_threshold,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.find_root().call_on_close(state.close)
    return state
