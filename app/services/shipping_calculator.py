# app/services/shipping_calculator.py
import logging
from typing import Optional

from app.config import settings
from app.models.cart import Address, Cart, ShippingMethod

logger = logging.getLogger(__name__)

SAME_CITY_RATE = 1.0
SAME_COUNTRY_RATE = 2.0
INTERNATIONAL_RATE = 15.0

# Standard <= Express <= Expedited <= Priority
SHIPPING_METHOD_MULTIPLIER = {
    ShippingMethod.standard: 1.0,
    ShippingMethod.express: 1.2,
    ShippingMethod.expedited: 1.5,
    ShippingMethod.priority: 2.0,
}


def default_origin() -> Address:
    return Address(
        country=settings.origin_country,
        city=settings.origin_city,
        street=settings.origin_street,
    )


class ShippingCalculator:
    """
    Shipping cost = distance rate * number of units * method multiplier.

    The cart's shipping address must already be set; CheckoutEngine checks
    this before calling in.
    """

    def __init__(self, origin: Optional[Address] = None):
        self.origin = origin or default_origin()

    def calculate_shipping_cost(self, cart: Cart) -> float:
        distance_rate = self._distance_rate(cart.shipping_address)
        units = sum(item.quantity for item in cart.items)
        multiplier = SHIPPING_METHOD_MULTIPLIER[cart.shipping_method]

        cost = distance_rate * units * multiplier
        logger.debug(
            f"Shipping for cart {cart.id}: rate={distance_rate}, "
            f"units={units}, method={cart.shipping_method.value}, cost={cost}"
        )
        return cost

    def _distance_rate(self, destination: Address) -> float:
        if destination.country != self.origin.country:
            return INTERNATIONAL_RATE

        if destination.city != self.origin.city:
            return SAME_COUNTRY_RATE

        return SAME_CITY_RATE
