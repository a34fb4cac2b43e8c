"""Unit tests for the Menu aggregate."""

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity


def _line(product_id: str, price: str, qty: int = 1) -> MenuProduct:
    return MenuProduct(
        product_id=product_id,
        product_name=f"product-{product_id}",
        product_price=Money.of(price),
        quantity=Quantity(qty),
    )


def _menu(price: str = "30", displayed: bool = True) -> Menu:
    return Menu(
        id="m1",
        name="Chicken Set",
        price=Money.of(price),
        displayed=displayed,
        menu_products=[_line("p1", "16", 2), _line("p2", "4", 1)],
    )


class TestFloor:

    def test_floor_uses_cached_prices(self):
        assert _menu().floor == Money.of("36")

    def test_refresh_product_price_updates_matching_lines(self):
        menu = _menu()
        changed = Product(id="p1", name="Fried", price=Money.of("10"))

        assert menu.refresh_product_price(changed) is True
        assert menu.floor == Money.of("24")
        assert menu.menu_products[1].product_price == Money.of("4")

    def test_refresh_with_same_price_reports_no_change(self):
        menu = _menu()
        same = Product(id="p1", name="Fried", price=Money.of("16"))
        assert menu.refresh_product_price(same) is False

    def test_refresh_with_unrelated_product_is_noop(self):
        menu = _menu()
        other = Product(id="p9", name="Other", price=Money.of("1000"))

        assert menu.refresh_product_price(other) is False
        assert menu.floor == Money.of("36")

    def test_refresh_never_shows_hidden_menu(self):
        menu = _menu(displayed=False)
        menu.refresh_product_price(Product(id="p1", name="Fried", price=Money.of("99")))
        assert menu.displayed is False

    def test_empty_menu_has_zero_floor(self):
        menu = Menu(id="m2", name="Empty", price=Money.zero())
        assert menu.floor == Money.zero()


class TestMenuState:

    def test_contains_product(self):
        menu = _menu()
        assert menu.contains_product("p2")
        assert not menu.contains_product("p3")

    def test_hide(self):
        menu = _menu()
        menu.hide()
        assert menu.displayed is False

    def test_hide_is_idempotent(self):
        menu = _menu(displayed=False)
        menu.hide()
        assert menu.displayed is False

    def test_line_amount(self):
        assert _line("p1", "2.50", 3).amount == Money.of("7.50")
