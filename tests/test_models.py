"""Tests for cart models and money helpers"""
from decimal import Decimal

import pytest

from qkart.cart.models import Cart, CartItem, CartItems
from qkart.services.models import Product, User
from qkart.services.money import parse_decimal, subtract, to_decimal, to_float, to_storage


def _product(product_id="p1", cost="10"):
    return Product(id=product_id, name=f"Product {product_id}", category="Misc", cost=cost)


def test_product_serializes_cost_as_string():
    doc = _product(cost="19.99").to_document()

    assert doc["cost"] == "19.99"
    assert doc["id"] == "p1"


def test_product_rejects_negative_cost():
    with pytest.raises(ValueError):
        Product(id="p1", name="Broken", cost="-1")


@pytest.mark.parametrize("cost", ["abc", None, ""])
def test_product_rejects_malformed_cost(cost):
    with pytest.raises(ValueError):
        Product(id="p1", name="Corrupt row", cost=cost)


def test_user_address_defaults_to_placeholder():
    user = User(id="u1", email="a@b.com")

    assert user.address == "ADDRESS_NOT_SET"
    assert user.has_non_default_address() is False
    assert User(id="u1", email="a@b.com", address="").has_non_default_address() is False


def test_cart_item_total_cost():
    item = CartItem(product=_product(cost="2.50"), quantity=4)

    assert item.total_cost == Decimal("10.00")


def test_cart_item_from_dict_restores_snapshot():
    item = CartItem.from_dict(
        {"product": {"id": 42, "name": "Lamp", "cost": "12.5"}, "quantity": "3"}
    )

    assert item.product_id == "42"
    assert item.quantity == 3
    assert item.product.cost == Decimal("12.5")


class TestCartItems:

    def test_index_of_matches_string_ids(self):
        items = CartItems([CartItem(_product("1"), 1), CartItem(_product("2"), 1)])

        assert items.index_of("2") == 1
        assert items.index_of(2) == 1
        assert items.index_of("3") == -1
        assert items.contains("1")
        assert not items.contains("3")

    def test_replace_quantity_touches_only_target(self):
        items = CartItems([CartItem(_product("1"), 1), CartItem(_product("2"), 5)])

        items.replace_quantity(1, 8)

        assert [i.quantity for i in items] == [1, 8]

    def test_remove_at_keeps_order(self):
        items = CartItems([CartItem(_product(str(n)), n) for n in range(1, 4)])

        removed = items.remove_at(1)

        assert removed.product_id == "2"
        assert [i.product_id for i in items] == ["1", "3"]

    def test_clear(self):
        items = CartItems([CartItem(_product(), 1)])

        items.clear()

        assert len(items) == 0
        assert items.to_list() == []

    def test_from_list_handles_missing(self):
        assert len(CartItems.from_list(None)) == 0


class TestCart:

    def test_empty_cart(self):
        cart = Cart(email="a@b.com")

        assert cart.is_empty
        assert cart.total_cost == Decimal("0")
        assert cart.payment_option == "PAYMENT_OPTION_DEFAULT"

    def test_totals(self):
        cart = Cart(
            email="a@b.com",
            cart_items=CartItems(
                [CartItem(_product("1", "100"), 2), CartItem(_product("2", "50"), 1)]
            ),
        )

        assert cart.total_cost == Decimal("250")

    def test_to_dict_omits_unsaved_id(self):
        data = Cart(email="a@b.com").to_dict()

        assert "id" not in data
        assert data == {
            "email": "a@b.com",
            "cart_items": [],
            "payment_option": "PAYMENT_OPTION_DEFAULT",
            "version": 0,
        }

    def test_from_dict(self):
        cart = Cart.from_dict(
            {
                "id": 9,
                "email": "a@b.com",
                "cart_items": [{"product": {"id": "1", "name": "Lamp", "cost": "5"}, "quantity": 2}],
                "payment_option": None,
                "version": 4,
            }
        )

        assert cart.id == "9"
        assert cart.version == 4
        assert cart.payment_option == "PAYMENT_OPTION_DEFAULT"
        assert cart.total_cost == Decimal("10")


class TestMoney:

    def test_to_decimal(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("not a number") == Decimal("0")
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(3) == Decimal("3")

    def test_storage_and_display(self):
        assert to_storage(Decimal("0.10")) == "0.10"
        assert to_float("19.99") == 19.99

    def test_arithmetic(self):
        assert subtract("300", Decimal("250")) == Decimal("50")
        assert to_decimal("0.10") * 3 == Decimal("0.30")

    def test_parse_decimal_rejects_malformed(self):
        assert parse_decimal("12.50") == Decimal("12.50")
        assert parse_decimal(0.1) == Decimal("0.1")
        for value in (None, "abc", "NaN", "Infinity", True):
            with pytest.raises(ValueError):
                parse_decimal(value)
