"""
Tests for app/services/checkout_engine.py.
"""

import pytest

from app.exceptions import MissingDataError
from app.models.cart import CustomerType, ShippingMethod
from app.services.checkout_engine import CheckoutEngine
from app.services.shipping_calculator import ShippingCalculator
from tests.builders import create_address, create_cart, create_item


ORIGIN = create_address(city="city 1")
DESTINATION = create_address(city="city 2")


class ExplodingShippingCalculator:
    def calculate_shipping_cost(self, cart):
        raise AssertionError("shipping must not be computed without an address")


@pytest.fixture
def engine():
    return CheckoutEngine(ShippingCalculator(ORIGIN), premium_discount_percent=10.0)


@pytest.mark.parametrize("customer_type, expected_discount", [
    (CustomerType.standard, 0.0),
    (CustomerType.premium, 10.0),
])
def test_discount_based_on_customer_type(engine, customer_type, expected_discount):
    cart = create_cart(customer_type=customer_type, shipping_address=ORIGIN)

    result = engine.calculate_totals(cart)

    assert result.customer_discount == expected_discount


@pytest.mark.parametrize("method", list(ShippingMethod))
def test_standard_customer_total_equals_cost_plus_shipping(engine, method):
    cart = create_cart(
        shipping_address=DESTINATION,
        shipping_method=method,
        items=[create_item(price=2, quantity=3)],
    )

    result = engine.calculate_totals(cart)

    assert result.item_cost == 6
    assert result.shipping_cost > 0
    assert result.total == (2 * 3) + result.shipping_cost


def test_more_than_one_item_total_equals_cost_plus_shipping(engine):
    cart = create_cart(
        shipping_address=DESTINATION,
        items=[
            create_item(product_id="a", price=2, quantity=3),
            create_item(product_id="b", price=4, quantity=5),
        ],
    )

    result = engine.calculate_totals(cart)

    assert result.total == (2 * 3) + (4 * 5) + result.shipping_cost


def test_premium_customer_total_equals_cost_plus_shipping_minus_discount(engine):
    cart = create_cart(
        customer_type=CustomerType.premium,
        shipping_address=DESTINATION,
        items=[create_item(price=2, quantity=3)],
    )

    result = engine.calculate_totals(cart)

    assert result.total == pytest.approx(((2 * 3) + result.shipping_cost) * 0.9)


def test_missing_shipping_address_raises_before_pricing():
    engine = CheckoutEngine(ExplodingShippingCalculator())
    cart = create_cart(shipping_address=None, items=[create_item()])

    with pytest.raises(MissingDataError):
        engine.calculate_totals(cart)


def test_summary_carries_mapped_cart(engine):
    cart = create_cart(
        cart_id="cart-7",
        shipping_address=DESTINATION,
        items=[create_item(product_id="p-1")],
    )

    result = engine.calculate_totals(cart)

    assert result.cart.id == "cart-7"
    assert [item.product_id for item in result.cart.items] == ["p-1"]


def test_summary_is_immutable(engine):
    result = engine.calculate_totals(create_cart(shipping_address=DESTINATION))

    with pytest.raises(Exception):
        result.total = 0
