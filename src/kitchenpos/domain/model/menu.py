"""Menu aggregate — a fixed-price bundle of products.

Each line (MenuProduct) keeps a denormalized copy of the product's name and
price.  The copy is brought up to date whenever that product's price changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity


@dataclass
class MenuProduct:
    """One line of a menu: a product reference and how many of it."""

    product_id: str
    product_name: str
    product_price: Money  # denormalized, possibly stale
    quantity: Quantity

    def amount_with(self, price: Money) -> Money:
        return price * self.quantity.value

    @property
    def amount(self) -> Money:
        return self.amount_with(self.product_price)


@dataclass
class Menu:
    """Aggregate root for menus.

    Invariant (checked by MenuDisplayService, not here):
    a displayed menu's price never exceeds the sum of its lines.
    """

    id: str
    name: str
    price: Money
    displayed: bool = True
    menu_products: list[MenuProduct] = field(default_factory=list)

    def contains_product(self, product_id: str) -> bool:
        return any(line.product_id == product_id for line in self.menu_products)

    @property
    def floor(self) -> Money:
        """Sum of the lines at their denormalized prices."""
        total = Money.zero()
        for line in self.menu_products:
            total = total + line.amount
        return total

    def refresh_product_price(self, product: Product) -> bool:
        """Copy *product*'s current price into every line that uses it.

        Returns True if any line changed.
        """
        changed = False
        for line in self.menu_products:
            if line.product_id == product.id and line.product_price != product.price:
                line.product_price = product.price
                changed = True
        return changed

    def hide(self) -> None:
        """Withdraw the menu from display.  Never re-shows a menu."""
        self.displayed = False
