"""Application service: Create Product use case."""

from __future__ import annotations

import logging
import uuid

from kitchenpos.application.dto import ProductDraft
from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._product_repo = product_repo
        self._profanity_checker = profanity_checker

    def handle(self, draft: ProductDraft) -> Product:
        """Add a new product to the catalog.

        Checks run in a fixed order (price present, price non-negative,
        name present, name clean, id unused) and nothing is written unless
        all pass.
        """
        price = draft.require_price()
        name = draft.require_name()
        if self._profanity_checker.contains_profanity(name):
            raise ValidationError(f"Product name '{name}' contains profanity")

        if draft.id and self._product_repo.get_by_id(draft.id) is not None:
            raise ValidationError(f"Product with ID '{draft.id}' already exists")

        product = Product(id=draft.id or str(uuid.uuid4()), name=name, price=price)
        saved = self._product_repo.save(product)
        logger.info("Product %s (%s) created at %s", saved.id, saved.name, saved.price)
        return saved
