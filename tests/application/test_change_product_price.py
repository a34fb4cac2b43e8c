"""Integration tests for the ChangeProductPrice use case."""

import pytest

from kitchenpos.application.change_product_price import ChangeProductPriceHandler
from kitchenpos.application.dto import ProductDraft
from kitchenpos.domain.exceptions import (
    EntityNotFoundError,
    MenuCascadeError,
    ValidationError,
)
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.service.menu_display_service import MenuDisplayService
from tests.fakes import FakeMenuRepository, FakeProductRepository


def _chicken() -> Product:
    return Product(id="p1", name="Fried Chicken", price=Money.of("16000"))


def _menu(mid: str, price: str, product: Product, qty: int = 1) -> Menu:
    return Menu(
        id=mid,
        name=f"menu-{mid}",
        price=Money.of(price),
        menu_products=[
            MenuProduct(
                product_id=product.id,
                product_name=product.name,
                product_price=product.price,
                quantity=Quantity(qty),
            )
        ],
    )


def _setup(menus=None, failing_ids=None):
    product_repo = FakeProductRepository([_chicken()])
    menu_repo = FakeMenuRepository(menus or [], failing_ids=failing_ids)
    handler = ChangeProductPriceHandler(product_repo, MenuDisplayService(menu_repo))
    return handler, product_repo, menu_repo


class TestChangePriceHappyPath:

    def test_returns_updated_product(self):
        handler, _, _ = _setup()
        product = handler.handle("p1", ProductDraft(price="20000"))
        assert product.price == Money.of("20000")

    def test_stored_price_read_back(self):
        handler, product_repo, _ = _setup()
        handler.handle("p1", ProductDraft(price="20000.50"))
        assert product_repo.get_by_id("p1").price == Money.of("20000.50")

    def test_name_not_changed(self):
        handler, product_repo, _ = _setup()
        handler.handle("p1", ProductDraft(name="Renamed", price="1"))
        assert product_repo.get_by_id("p1").name == "Fried Chicken"

    def test_price_decrease_hides_overpriced_menu(self):
        chicken = _chicken()
        handler, _, menu_repo = _setup(menus=[
            _menu("m1", "32000", chicken, qty=2),
            _menu("m2", "16000", chicken, qty=1),
        ])

        handler.handle("p1", ProductDraft(price="15000"))

        assert menu_repo.get_by_id("m1").displayed is False
        assert menu_repo.get_by_id("m2").displayed is False

    def test_price_increase_keeps_menus(self):
        chicken = _chicken()
        handler, _, menu_repo = _setup(menus=[_menu("m1", "16000", chicken)])

        handler.handle("p1", ProductDraft(price="17000"))

        assert menu_repo.get_by_id("m1").displayed is True


class TestChangePriceValidation:

    @pytest.mark.parametrize("price", [None, ""])
    def test_missing_price_rejected(self, price):
        handler, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="price is required"):
            handler.handle("p1", ProductDraft(price=price))
        assert product_repo.save_calls == 0
        assert product_repo.get_by_id("p1").price == Money.of("16000")

    def test_negative_price_rejected(self):
        handler, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle("p1", ProductDraft(price="-1"))
        assert product_repo.save_calls == 0

    def test_unknown_product_rejected(self):
        handler, product_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("nope", ProductDraft(price="1"))
        assert product_repo.save_calls == 0

    def test_invalid_price_reported_before_unknown_product(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle("nope", ProductDraft(price="-1"))


class TestChangePriceCascadeFailure:

    def test_price_change_stands_when_menu_update_fails(self):
        chicken = _chicken()
        handler, product_repo, menu_repo = _setup(
            menus=[_menu("m1", "16000", chicken), _menu("m2", "16000", chicken)],
            failing_ids={"m1"},
        )

        with pytest.raises(MenuCascadeError) as exc_info:
            handler.handle("p1", ProductDraft(price="1"))

        assert product_repo.get_by_id("p1").price == Money.of("1")
        assert exc_info.value.product.price == Money.of("1")
        assert exc_info.value.hidden_menu_ids == ["m2"]
        assert menu_repo.get_by_id("m2").displayed is False

    def test_cascade_error_is_not_a_rejection(self):
        assert not issubclass(MenuCascadeError, (ValidationError, EntityNotFoundError))
