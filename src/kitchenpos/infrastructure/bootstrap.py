"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from kitchenpos.infrastructure.config import get_settings
from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from kitchenpos.infrastructure.profanity.purgomalum_checker import (
    PurgomalumProfanityChecker,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(get_settings().data_dir / "menus.json")


def profanity_checker() -> PurgomalumProfanityChecker:
    settings = get_settings()
    return PurgomalumProfanityChecker(
        base_url=settings.purgomalum_url,
        timeout_seconds=settings.purgomalum_timeout_seconds,
    )
