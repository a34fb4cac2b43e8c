import click

from kitchenpos.infrastructure.cli.menu_commands import menu_list
from kitchenpos.infrastructure.cli.product_commands import (
    product_add,
    product_change_price,
    product_list,
)
from kitchenpos.infrastructure.config import get_settings
from kitchenpos.infrastructure.observability import setup_logging


@click.group()
def cli() -> None:
    """kitchenpos — product catalog and menu pricing"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def menu() -> None:
    """Inspect menus."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_change_price)
product.add_command(product_list)
menu.add_command(menu_list)
