"""JSON-file-backed implementation of MenuRepository.

Menus are written by the menu management side of the system; this
repository reads them and persists display changes.  Each line carries a
copy of the product's name and price, refreshed whenever that product's
price changes.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.infrastructure.persistence.file_lock import lock_for


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = lock_for(file_path)
        self._ensure_file()

    # --- MenuRepository interface ---------------------------------------------

    def list_all(self) -> list[Menu]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, menu: Menu) -> None:
        with self._lock:
            menus = self._load_raw()
            for i, raw in enumerate(menus):
                if raw["id"] == menu.id:
                    menus[i] = self._to_raw(menu)
                    break
            else:
                raise EntityNotFoundError(f"Menu with ID '{menu.id}' not found")
            self._persist_raw(menus)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(menu: Menu) -> dict:
        return {
            "id": menu.id,
            "name": menu.name,
            "price": str(menu.price.amount),
            "displayed": menu.displayed,
            "menu_products": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "product_price": str(line.product_price.amount),
                    "quantity": line.quantity.value,
                }
                for line in menu.menu_products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Menu:
        lines = [
            MenuProduct(
                product_id=line["product_id"],
                product_name=line["product_name"],
                product_price=Money(Decimal(line["product_price"])),
                quantity=Quantity(line["quantity"]),
            )
            for line in raw["menu_products"]
        ]
        return Menu(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            displayed=raw.get("displayed", True),
            menu_products=lines,
        )

    # --- File I/O -------------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, menus: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(menus, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
