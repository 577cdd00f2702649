# app/services/checkout_engine.py
import logging
from typing import Optional

from app.config import settings
from app.exceptions import MissingDataError
from app.models.cart import Cart, CustomerType
from app.schemas.checkout_schemas import CheckoutSummary
from app.services.mapper import cart_to_dto
from app.services.shipping_calculator import ShippingCalculator

logger = logging.getLogger(__name__)


class CheckoutEngine:
    def __init__(
        self,
        shipping_calculator: ShippingCalculator,
        premium_discount_percent: Optional[float] = None,
    ):
        self.shipping_calculator = shipping_calculator
        if premium_discount_percent is None:
            premium_discount_percent = settings.premium_discount_percent
        self.premium_discount_percent = premium_discount_percent

    def calculate_totals(self, cart: Cart) -> CheckoutSummary:
        """Item cost plus shipping, less the customer-tier discount."""
        if cart.shipping_address is None:
            raise MissingDataError(
                "Cannot calculate total cost - missing shipping address"
            )

        item_cost = sum(item.price * item.quantity for item in cart.items)
        shipping_cost = self.shipping_calculator.calculate_shipping_cost(cart)

        customer_discount = 0.0
        if cart.customer_type == CustomerType.premium:
            customer_discount = self.premium_discount_percent

        total = (item_cost + shipping_cost) * ((100.0 - customer_discount) / 100.0)

        logger.info(
            f"Checkout for cart {cart.id}: items={item_cost}, "
            f"shipping={shipping_cost}, discount={customer_discount}%, total={total}"
        )

        return CheckoutSummary(
            cart=cart_to_dto(cart),
            item_cost=item_cost,
            shipping_cost=shipping_cost,
            customer_discount=customer_discount,
            total=total,
        )
