"""Product catalog facade.

Groups the product use cases behind the three operations callers need:
``create``, ``change_price`` and ``find_all``.  Collaborators are injected
so the catalog runs unchanged against JSON files or in-memory fakes.
"""

from __future__ import annotations

from kitchenpos.application.change_product_price import ChangeProductPriceHandler
from kitchenpos.application.create_product import CreateProductHandler
from kitchenpos.application.dto import ProductDraft
from kitchenpos.application.list_products import ListProductsHandler
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_display_service import MenuDisplayService
from kitchenpos.domain.service.profanity_checker import ProfanityChecker


class ProductCatalogService:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._create = CreateProductHandler(product_repo, profanity_checker)
        self._change_price = ChangeProductPriceHandler(
            product_repo, MenuDisplayService(menu_repo)
        )
        self._list = ListProductsHandler(product_repo)

    def create(self, draft: ProductDraft) -> Product:
        return self._create.handle(draft)

    def change_price(self, product_id: str, draft: ProductDraft) -> Product:
        return self._change_price.handle(product_id, draft)

    def find_all(self) -> list[Product]:
        return self._list.handle()
