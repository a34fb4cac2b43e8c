"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import uuid
from decimal import Decimal
from pathlib import Path

from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.infrastructure.persistence.file_lock import lock_for


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = lock_for(file_path)
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> Product:
        if not product.id:
            product.id = str(uuid.uuid4())
        with self._lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)
        return product

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        with self._lock:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"])),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {"id": p.id, "name": p.name, "price": str(p.price.amount)}
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
