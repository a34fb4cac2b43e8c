"""CLI commands for the Menu aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.list_menus import ListMenusHandler
from kitchenpos.infrastructure.bootstrap import menu_repository


@click.command("list")
@click.option("--displayed-only", is_flag=True, help="Hide withdrawn menus.")
def menu_list(displayed_only: bool) -> None:
    """List menus with their price, floor and display state."""
    handler = ListMenusHandler(menu_repo=menu_repository())
    menus = handler.handle(displayed_only=displayed_only)

    if not menus:
        click.echo("No menus found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10} {'Floor':>10}  Displayed")
    click.echo("-" * 90)
    for m in menus:
        shown = "yes" if m.displayed else "no"
        click.echo(f"{m.id:<36} {m.name:<20} {m.price:>10} {m.floor:>10}  {shown}")
