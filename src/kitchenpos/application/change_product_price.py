"""Application service: Change Product Price use case.

The new price is committed first; the menu display pass runs afterwards
against the updated product.  If that pass fails for some menus, the
price change is NOT undone — MenuCascadeError reports what is left to
reconcile.
"""

from __future__ import annotations

import logging

from kitchenpos.application.dto import ProductDraft
from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_display_service import MenuDisplayService

logger = logging.getLogger(__name__)


class ChangeProductPriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_display_service: MenuDisplayService,
    ) -> None:
        self._product_repo = product_repo
        self._menu_display_service = menu_display_service

    def handle(self, product_id: str, draft: ProductDraft) -> Product:
        new_price = draft.require_price()

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        old_price = product.price
        product.change_price(new_price)
        product = self._product_repo.save(product)
        logger.info(
            "Product %s (%s) price changed from %s to %s",
            product.id, product.name, old_price, product.price,
        )

        self._menu_display_service.withdraw_overpriced_menus(product)
        return product
