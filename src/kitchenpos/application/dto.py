"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductDraft:
    """Input: a candidate product, as submitted.

    Any field may be missing; each use case decides which ones it needs.
    """

    name: str | None = None
    price: str | int | Decimal | None = None
    id: str | None = None

    def require_price(self) -> Money:
        if self.price is None or (isinstance(self.price, str) and not self.price.strip()):
            raise ValidationError("Product price is required")
        return Money.of(self.price)

    def require_name(self) -> str:
        if self.name is None or not self.name.strip():
            raise ValidationError("Product name is required")
        return self.name.strip()


@dataclass(frozen=True)
class MenuDTO:
    """Output: a menu as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "$15.00"
    floor: str
    displayed: bool
