"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kitchenpos.domain.model.product import Product


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProfanityCheckError(DomainException):
    """The profanity checker could not give an answer."""


@dataclass(frozen=True)
class MenuFailure:
    menu_id: str
    error: Exception


class MenuCascadeError(DomainException):
    """Some menus could not be updated after a product price change.

    Raised *after* the price change was committed.  The new price stands;
    ``hidden_menu_ids`` lists the menus that were withdrawn successfully and
    ``failures`` the ones whose update failed.  Retrying the whole price
    change is safe.
    """

    def __init__(
        self,
        product: Product,
        failures: list[MenuFailure],
        hidden_menu_ids: list[str] | None = None,
    ) -> None:
        self.product = product
        self.failures = list(failures)
        self.hidden_menu_ids = list(hidden_menu_ids or [])
        failed = ", ".join(f.menu_id for f in self.failures)
        super().__init__(
            f"Price of '{product.name}' changed to {product.price}, "
            f"but {len(self.failures)} menu(s) could not be updated: {failed}"
        )
