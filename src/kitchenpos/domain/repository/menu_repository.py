"""Abstract repository for Menu aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kitchenpos.domain.model.menu import Menu


class MenuRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Menu]:
        """Return every menu with its lines and their cached product data."""

    def find_all_by_product_id(self, product_id: str) -> list[Menu]:
        """Return the menus with at least one line referencing *product_id*.

        Stores that keep a product-to-menu index should override this;
        the default scans every menu.
        """
        return [menu for menu in self.list_all() if menu.contains_product(product_id)]

    @abstractmethod
    def save(self, menu: Menu) -> None:
        """Persist an updated menu."""
