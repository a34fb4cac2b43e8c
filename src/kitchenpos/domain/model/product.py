"""Product aggregate.

Products live independently of menus.  A product never knows which menus
use it; menus hold a reference by id plus a copy of the product's data.
"""

from __future__ import annotations

from dataclasses import dataclass

from kitchenpos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    The name is fixed at creation time; the price is the only legitimate
    mutation on the aggregate.
    """

    id: str
    name: str
    price: Money

    def change_price(self, new_price: Money) -> None:
        self.price = new_price
