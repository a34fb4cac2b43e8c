"""Domain service: Menu Display.

After a product's price changes, every menu using that product gets the new
price copied into its lines, and is then checked against its floor (the sum
of its lines).  A menu whose price is now above its floor is withdrawn from
display rather than blocking the price change.

Lines for other products keep their cached prices; each of those is brought
up to date by the pass that runs when its own product changes.  The pass
only ever hides menus, and writes a menu only when something changed, so
running it again with no price change in between is a no-op.
"""

from __future__ import annotations

import logging

from kitchenpos.domain.exceptions import MenuCascadeError, MenuFailure
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.repository.menu_repository import MenuRepository

logger = logging.getLogger(__name__)


class MenuDisplayService:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def withdraw_overpriced_menus(self, product: Product) -> list[Menu]:
        """Refresh *product*'s price in every menu and hide the overpriced ones.

        Each affected menu is saved independently.  A failing menu does not
        stop the pass; once every menu has been attempted, the failures are
        raised together as MenuCascadeError.

        Returns the menus that were hidden.
        """
        hidden: list[Menu] = []
        failures: list[MenuFailure] = []

        for menu in self._menu_repo.find_all_by_product_id(product.id):
            if not menu.contains_product(product.id):
                continue
            try:
                changed = menu.refresh_product_price(product)
                floor = menu.floor
                withdraw = menu.displayed and menu.price > floor
                if withdraw:
                    menu.hide()
                if changed or withdraw:
                    self._menu_repo.save(menu)
            except Exception as exc:
                logger.error(
                    "Could not update menu %s (%s): %s", menu.id, menu.name, exc
                )
                failures.append(MenuFailure(menu_id=menu.id, error=exc))
                continue

            if withdraw:
                logger.info(
                    "Menu %s (%s) withdrawn: price %s exceeds floor %s after %s changed to %s",
                    menu.id, menu.name, menu.price, floor, product.name, product.price,
                )
                hidden.append(menu)

        if failures:
            raise MenuCascadeError(
                product, failures, hidden_menu_ids=[m.id for m in hidden]
            )
        return hidden
