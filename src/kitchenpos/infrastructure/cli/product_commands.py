"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.change_product_price import ChangeProductPriceHandler
from kitchenpos.application.dto import ProductDraft
from kitchenpos.application.list_products import ListProductsHandler
from kitchenpos.application.product_catalog import ProductCatalogService
from kitchenpos.domain.exceptions import DomainException, MenuCascadeError
from kitchenpos.domain.service.menu_display_service import MenuDisplayService
from kitchenpos.domain.service.profanity_checker import ProfanityChecker
from kitchenpos.infrastructure.bootstrap import (
    menu_repository,
    product_repository,
    profanity_checker,
)


def _catalog(checker: ProfanityChecker) -> ProductCatalogService:
    return ProductCatalogService(
        product_repo=product_repository(),
        menu_repo=menu_repository(),
        profanity_checker=checker,
    )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--id", "product_id", default=None, help="Product ID (generated if omitted).")
def product_add(name: str, price: str, product_id: str | None) -> None:
    """Add a new product to the catalog."""
    with profanity_checker() as checker:
        try:
            product = _catalog(checker).create(
                ProductDraft(name=name, price=price, id=product_id)
            )
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<20} {str(p.price):>10}")


@click.command("change-price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_change_price(product_id: str, price: str) -> None:
    """Change a product's price and withdraw menus it makes overpriced."""
    handler = ChangeProductPriceHandler(
        product_repo=product_repository(),
        menu_display_service=MenuDisplayService(menu_repository()),
    )

    try:
        product = handler.handle(product_id, ProductDraft(price=price))
    except MenuCascadeError as exc:
        click.echo(f"Product {product_id} price changed to {exc.product.price}")
        raise click.ClickException(str(exc))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} price changed to {product.price}")
